from __future__ import annotations

import json

from ..config import MatchingSettings
from ..core.identity import RankedCandidates, find_matches
from ..store import CustomerHistory


def run(
    history: CustomerHistory,
    name: str,
    settings: MatchingSettings,
    *,
    min_similarity: float | None = None,
    max_results: int | None = None,
    json_output: bool = False,
) -> RankedCandidates:
    ranked = find_matches(
        name,
        history.distinct_customers(),
        min_similarity=settings.suggest_min_similarity if min_similarity is None else min_similarity,
        max_results=settings.suggest_max_results if max_results is None else max_results,
        strict_mode=settings.strict_mode,
    )
    if json_output:
        print(json.dumps(ranked.to_dict(), indent=2, sort_keys=True))
        return ranked
    if ranked.matches:
        print("Matches:")
        for candidate in ranked.matches:
            print(f"  {candidate.reference_name} ({candidate.confidence}%, {candidate.reason})")
    if ranked.suggestions:
        print("Suggestions:")
        for candidate in ranked.suggestions:
            print(f"  {candidate.reference_name} ({candidate.confidence}%, {candidate.reason})")
    if ranked.no_matches:
        print(f"No match for: {', '.join(ranked.no_matches)}")
    return ranked
