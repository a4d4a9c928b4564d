"""
Matching strategies for customer identity resolution.

This module combines the individual strategies into one verdict per
(redacted name, reference name) pair:
- Exact matching (same name ignoring case and surrounding whitespace)
- Censor-pattern matching (visible parts of a redacted name)
- General similarity (Levenshtein distance)

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

from .censor import match_censor
from .models import CandidateMatch, CensorMatch, MatchStrategy
from .similarity import round_score, similarity

DEFAULT_MIN_SIMILARITY = 70.0

# A failed censor match scoring at least this share of the minimum is kept
# as a near miss.
NEAR_MISS_FACTOR = 0.8


def match_exact(redacted: str, candidate: str) -> bool:
    return redacted.casefold().strip() == candidate.casefold().strip()


class NameMatcher:
    """
    Evaluates one redacted name against one reference name.

    Strategies are applied in a fixed order and the first one that decides
    wins:
    1. Exact match (confidence: 100)
    2. Censor pattern match (confidence: 0-95)
    3. General similarity at or above ``min_similarity``
    4. Censor near miss (not a match, kept for suggestions)
    5. Whichever of the two scores is higher (not a match)

    Usage:
        matcher = NameMatcher(min_similarity=75)
        candidate = matcher.evaluate("a***rifai", "ahmadrifai")
        if candidate.is_match:
            print(f"Matched via {candidate.strategy.value}")
    """

    def __init__(self, min_similarity: float = DEFAULT_MIN_SIMILARITY, strict_mode: bool = False) -> None:
        self.min_similarity = min_similarity
        self.strict_mode = strict_mode

    def evaluate(self, redacted: str, candidate: str) -> CandidateMatch:
        """
        Compare a (possibly redacted) name with a known customer name.

        Always returns a CandidateMatch, failed comparisons included, so
        that callers can rank near misses.
        """
        if match_exact(redacted, candidate):
            return self._result(redacted, candidate, 100.0, MatchStrategy.EXACT, "exact match", True)

        censor = match_censor(candidate, redacted)
        general = similarity(candidate, redacted)

        if censor.is_match:
            # Strict mode only commits to censor matches above the floor.
            is_match = censor.confidence >= self.min_similarity if self.strict_mode else True
            return self._censor_result(redacted, candidate, censor, "censor pattern", is_match)

        if general >= self.min_similarity:
            return self._general_result(redacted, candidate, general, True)

        if censor.confidence >= self.min_similarity * NEAR_MISS_FACTOR:
            return self._censor_result(redacted, candidate, censor, "potential censor match", False)

        if censor.confidence > general:
            return self._censor_result(redacted, candidate, censor, "censor pattern", False)
        return self._general_result(redacted, candidate, general, False)

    def _censor_result(
        self, redacted: str, candidate: str, censor: CensorMatch, label: str, is_match: bool
    ) -> CandidateMatch:
        return self._result(
            redacted,
            candidate,
            censor.confidence,
            MatchStrategy.CENSOR_PATTERN,
            f"{label}: {censor.reason}",
            is_match,
        )

    def _general_result(self, redacted: str, candidate: str, score: float, is_match: bool) -> CandidateMatch:
        return self._result(
            redacted,
            candidate,
            score,
            MatchStrategy.GENERAL_SIMILARITY,
            f"general similarity: {round_score(score)}%",
            is_match,
        )

    @staticmethod
    def _result(
        redacted: str,
        candidate: str,
        score: float,
        strategy: MatchStrategy,
        reason: str,
        is_match: bool,
    ) -> CandidateMatch:
        return CandidateMatch(
            redacted_name=redacted,
            reference_name=candidate,
            score=score,
            confidence=round_score(score),
            strategy=strategy,
            reason=reason,
            is_match=is_match,
        )
