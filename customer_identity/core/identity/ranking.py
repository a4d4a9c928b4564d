"""
Ranking of reference names for one redacted customer name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .matching import DEFAULT_MIN_SIMILARITY, NameMatcher
from .models import CandidateMatch, RankedCandidates

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 5

# Non-matching candidates scoring at least this share of the minimum are
# offered as suggestions.
SUGGESTION_FACTOR = 0.6


def _by_confidence(candidates: list[CandidateMatch]) -> list[CandidateMatch]:
    # sorted() is stable: ties keep reference-set order.
    return sorted(candidates, key=lambda c: c.confidence, reverse=True)


class CandidateRanker:
    """
    Scans a reference set and buckets every name into matches, suggestions
    or misses.

    The scan is linear in the size of the reference set, which is bounded by
    the distinct customers of one import run.
    """

    def rank(
        self,
        redacted: str,
        reference_names: Iterable[str],
        min_similarity: float = DEFAULT_MIN_SIMILARITY,
        max_results: int = DEFAULT_MAX_RESULTS,
        strict_mode: bool = False,
    ) -> RankedCandidates:
        """
        Rank reference names against a redacted name.

        Args:
            redacted: Customer name as delivered, possibly containing ``*``
            reference_names: Known customer names
            min_similarity: Confidence floor for a match (0-100)
            max_results: Cap applied to matches and to suggestions
            strict_mode: Only commit to censor matches above ``min_similarity``

        Returns:
            RankedCandidates; ``no_matches`` echoes the input when nothing
            matched
        """
        names = [name for name in reference_names if name]
        if not redacted or not names:
            return RankedCandidates(no_matches=[redacted if redacted is not None else ""])

        matcher = NameMatcher(min_similarity=min_similarity, strict_mode=strict_mode)
        matches: list[CandidateMatch] = []
        suggestions: list[CandidateMatch] = []

        for name in names:
            candidate = matcher.evaluate(redacted, name)
            if candidate.is_match:
                matches.append(candidate)
            elif candidate.score >= min_similarity * SUGGESTION_FACTOR:
                suggestions.append(candidate)

        limit = max(0, max_results)
        result = RankedCandidates(
            matches=_by_confidence(matches)[:limit],
            suggestions=_by_confidence(suggestions)[:limit],
        )
        if not result.matches:
            result.no_matches.append(redacted)

        logger.debug(
            "Ranked %r against %d names: %d matches, %d suggestions",
            redacted,
            len(names),
            len(result.matches),
            len(result.suggestions),
        )
        return result
