from __future__ import annotations

import json

from ..core.identity import ReferenceSetStats, reference_stats
from ..store import CustomerHistory


def run(history: CustomerHistory, *, json_output: bool = False) -> ReferenceSetStats:
    stats = reference_stats(history.distinct_customers())
    if json_output:
        print(json.dumps(stats.to_dict(), indent=2, sort_keys=True))
        return stats
    print(f"Unique customers: {stats.total_unique_names}")
    print(f"Redacted customers: {stats.redacted_names}")
    print(f"Redaction rate: {stats.redaction_rate:.1f}%")
    return stats
