"""
Decision policy: which known customer, if any, a redacted name resolves to.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .censor import is_redacted
from .models import RankedCandidates, ResolutionOutcome, ResolutionResult
from .ranking import CandidateRanker

logger = logging.getLogger(__name__)

IMPORT_MIN_CONFIDENCE = 75.0
INTERACTIVE_MIN_SIMILARITY = 70.0
INTERACTIVE_MAX_RESULTS = 10

# A top suggestion is accepted in lenient mode at this share of the minimum.
SUGGESTION_ACCEPT_FACTOR = 0.8

NEW_IDENTITY_CONFIDENCE = 100
EMPTY_NAME_REASON = "empty/null customer name"
NO_MATCH_REASON = "no suitable match found"


class ResolutionPolicy:
    """
    Resolves a customer name against a snapshot of known names.

    Every input resolves to some name: the best known match, or the input
    itself as a new identity. ``resolve`` never raises for empty input or an
    empty reference set.
    """

    def __init__(
        self,
        min_confidence: float = IMPORT_MIN_CONFIDENCE,
        strict_mode: bool = False,
        ranker: CandidateRanker | None = None,
    ) -> None:
        self.min_confidence = min_confidence
        self.strict_mode = strict_mode
        self.ranker = ranker or CandidateRanker()

    def resolve(self, name: str | None, reference_names: Iterable[str]) -> ResolutionResult:
        if not name or not name.strip():
            return ResolutionResult(
                original_name=name or "",
                resolved_name=name or "",
                confidence=NEW_IDENTITY_CONFIDENCE,
                reason=EMPTY_NAME_REASON,
                outcome=ResolutionOutcome.NEW_IDENTITY,
            )

        if not is_redacted(name):
            # A full name is never replaced by a masked one.
            reference_names = [ref for ref in reference_names if not is_redacted(ref)]

        ranked = self.ranker.rank(
            name,
            reference_names,
            min_similarity=self.min_confidence,
            max_results=1,
            strict_mode=self.strict_mode,
        )

        best = ranked.best_match
        if best is not None:
            return ResolutionResult(
                original_name=name,
                resolved_name=best.reference_name,
                confidence=best.confidence,
                reason=best.reason,
                outcome=ResolutionOutcome.MATCHED_EXISTING,
            )

        suggestion = ranked.best_suggestion
        if (
            not self.strict_mode
            and suggestion is not None
            and suggestion.confidence >= self.min_confidence * SUGGESTION_ACCEPT_FACTOR
        ):
            return ResolutionResult(
                original_name=name,
                resolved_name=suggestion.reference_name,
                confidence=suggestion.confidence,
                reason=f"suggestion: {suggestion.reason}",
                outcome=ResolutionOutcome.MATCHED_EXISTING,
            )

        return ResolutionResult(
            original_name=name,
            resolved_name=name,
            confidence=NEW_IDENTITY_CONFIDENCE,
            reason=NO_MATCH_REASON,
            outcome=ResolutionOutcome.NEW_IDENTITY,
        )


def find_matches(
    name: str,
    reference_names: Iterable[str],
    min_similarity: float = INTERACTIVE_MIN_SIMILARITY,
    max_results: int = INTERACTIVE_MAX_RESULTS,
    strict_mode: bool = False,
    ranker: CandidateRanker | None = None,
) -> RankedCandidates:
    """
    Full ranked candidate lists for human review.

    Nothing is applied; callers show matches and suggestions and let a
    person pick.
    """
    ranker = ranker or CandidateRanker()
    ranked = ranker.rank(
        name,
        reference_names,
        min_similarity=min_similarity,
        max_results=max_results,
        strict_mode=strict_mode,
    )
    logger.info(
        "Found %d matches, %d suggestions for %r",
        len(ranked.matches),
        len(ranked.suggestions),
        name,
    )
    return ranked
