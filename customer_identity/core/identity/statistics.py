"""
Read-only figures over a set of customer names.
"""

from __future__ import annotations

from collections.abc import Iterable

from .censor import is_redacted
from .models import ReferenceSetStats


def reference_stats(names: Iterable[str]) -> ReferenceSetStats:
    """
    Count distinct names and how many of them are still redacted.

    Blank names are ignored. The rate is a percentage and is 0 for an empty
    set.
    """
    unique = {name for name in names if name and name.strip()}
    redacted = sum(1 for name in unique if is_redacted(name))
    rate = (redacted / len(unique)) * 100 if unique else 0.0
    return ReferenceSetStats(
        total_unique_names=len(unique),
        redacted_names=redacted,
        redaction_rate=rate,
    )
