"""
Domain models for customer identity resolution.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MatchStrategy(Enum):
    """Strategies in the order the matching engine tries them."""

    EXACT = "exact"
    CENSOR_PATTERN = "censor-pattern"
    GENERAL_SIMILARITY = "general-similarity"


class ResolutionOutcome(Enum):
    MATCHED_EXISTING = "matched-existing"
    NEW_IDENTITY = "new-identity"


@dataclass(frozen=True)
class CensorMatch:
    """
    Verdict of comparing a redacted name against one unredacted name.

    Example:
        original "ahmadrifai" vs redacted "a***rifai":
        - is_match: True
        - confidence: 80.0
        - reason: "100% parts match with 60% character coverage"
    """
    is_match: bool
    confidence: float
    reason: str


@dataclass(frozen=True)
class CandidateMatch:
    """
    Result of comparing one redacted name against one reference name.

    ``score`` is the raw 0-100 figure used for thresholds; ``confidence`` is
    the same figure rounded for display and ranking.
    """
    redacted_name: str
    """The (possibly redacted) input name"""

    reference_name: str
    """The known customer name it was compared against"""

    score: float
    """Unrounded confidence score (0 to 100)"""

    confidence: int
    """Rounded confidence score (0 to 100)"""

    strategy: MatchStrategy
    """The strategy that produced the score"""

    reason: str
    """Human-readable justification"""

    is_match: bool
    """Whether the candidate counts as a match under the current policy"""

    def to_dict(self) -> dict[str, Any]:
        return {
            "redacted_name": self.redacted_name,
            "reference_name": self.reference_name,
            "confidence": self.confidence,
            "strategy": self.strategy.value,
            "reason": self.reason,
            "is_match": self.is_match,
        }


@dataclass
class RankedCandidates:
    """Matches, suggestions and misses for one redacted name."""
    matches: list[CandidateMatch] = field(default_factory=list)
    suggestions: list[CandidateMatch] = field(default_factory=list)
    no_matches: list[str] = field(default_factory=list)

    @property
    def best_match(self) -> CandidateMatch | None:
        return self.matches[0] if self.matches else None

    @property
    def best_suggestion(self) -> CandidateMatch | None:
        return self.suggestions[0] if self.suggestions else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "matches": [m.to_dict() for m in self.matches],
            "suggestions": [s.to_dict() for s in self.suggestions],
            "no_matches": list(self.no_matches),
        }


@dataclass(frozen=True)
class ResolutionResult:
    """Final decision for one customer name."""
    original_name: str
    resolved_name: str
    confidence: int
    reason: str
    outcome: ResolutionOutcome

    @property
    def is_new(self) -> bool:
        return self.outcome is ResolutionOutcome.NEW_IDENTITY

    @property
    def changed(self) -> bool:
        return self.resolved_name != self.original_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_name": self.original_name,
            "resolved_name": self.resolved_name,
            "confidence": self.confidence,
            "reason": self.reason,
            "outcome": self.outcome.value,
        }


@dataclass(frozen=True)
class ReferenceSetStats:
    """Aggregate figures over a set of known customer names."""
    total_unique_names: int
    redacted_names: int
    redaction_rate: float
    """Percentage of names containing a mask character (0 to 100)"""

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_unique_names": self.total_unique_names,
            "redacted_names": self.redacted_names,
            "redaction_rate": self.redaction_rate,
        }
