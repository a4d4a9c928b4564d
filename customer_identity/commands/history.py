from __future__ import annotations

import json
from typing import Optional

from ..store import CustomerStore


def run(
    store: CustomerStore,
    *,
    limit: int = 50,
    outcome: Optional[str] = None,
    json_output: bool = False,
) -> None:
    records = store.list_resolutions(limit=limit, outcome=outcome)
    if not records:
        print("No resolutions recorded.")
        return
    if json_output:
        print(json.dumps(records, indent=2, sort_keys=True))
        return
    for record in records:
        print(
            f"[{record['id']}] {record['created_at']} {record['outcome']}: "
            f"{record['original_name']} -> {record['resolved_name']}"
        )
        reason = (record.get("payload") or {}).get("reason")
        if reason:
            print(f"  reason: {reason}")
