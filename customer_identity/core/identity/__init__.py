"""
Customer identity resolution domain logic.

This module handles:
- Edit-distance similarity between names
- Matching of marketplace-redacted names ("f***iawindy")
- Strategy selection and candidate ranking
- The match / suggestion / new-identity decision
- The per-run reference set of known names

All logic is pure business logic with no I/O dependencies.
"""

from __future__ import annotations

from .censor import MASK_CHAR, is_redacted, match_censor, visible_parts
from .matching import NameMatcher, match_exact
from .models import (
    CandidateMatch,
    CensorMatch,
    MatchStrategy,
    RankedCandidates,
    ReferenceSetStats,
    ResolutionOutcome,
    ResolutionResult,
)
from .ranking import CandidateRanker
from .reference import ReferenceSetManager
from .resolution import ResolutionPolicy, find_matches
from .similarity import levenshtein_distance, similarity
from .statistics import reference_stats

__all__ = [
    "MASK_CHAR",
    "CandidateMatch",
    "CandidateRanker",
    "CensorMatch",
    "MatchStrategy",
    "NameMatcher",
    "RankedCandidates",
    "ReferenceSetManager",
    "ReferenceSetStats",
    "ResolutionOutcome",
    "ResolutionPolicy",
    "ResolutionResult",
    "find_matches",
    "is_redacted",
    "levenshtein_distance",
    "match_censor",
    "match_exact",
    "reference_stats",
    "similarity",
    "visible_parts",
]
