from __future__ import annotations

import json
from pathlib import Path

from ..config import Settings
from ..core.identity import ResolutionResult
from ..importer import ImportSummary, process_customer_list
from ..store import CustomerStore
from .names_file import read_names


def run(
    store: CustomerStore,
    settings: Settings,
    path: Path,
    *,
    dry_run: bool = False,
    json_output: bool = False,
) -> tuple[list[ResolutionResult], ImportSummary]:
    names = read_names(path)
    results, summary = process_customer_list(
        names,
        store,
        matching=settings.matching,
        importing=settings.importing,
        persist=not dry_run,
    )
    if not dry_run:
        for result in results:
            if result.original_name != settings.importing.unknown_customer:
                store.record_resolution(result)

    if json_output:
        payload = {
            "results": [result.to_dict() for result in results],
            "summary": summary.to_dict(),
            "dry_run": dry_run,
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
        return results, summary

    for result in results:
        marker = "NEW" if result.is_new else "MATCH"
        print(
            f"{marker:5} {result.original_name} -> {result.resolved_name} "
            f"({result.confidence}%, {result.reason})"
        )
    print(
        f"\n{summary.total} rows: {summary.matched} matched, {summary.new_identities} new, "
        f"{summary.auto_merged} merged, {summary.skipped} skipped, {len(summary.errors)} errors"
    )
    if dry_run:
        print("Dry run: nothing was written.")
    return results, summary
