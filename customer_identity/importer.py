"""
Customer-name resolution for one bulk sales import.

Rows are resolved strictly in order: a name admitted as a new identity at
row N is matchable from row N+1 on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Optional

from .config import ImportSettings, MatchingSettings
from .core.identity import (
    ReferenceSetManager,
    ResolutionOutcome,
    ResolutionPolicy,
    ResolutionResult,
)
from .core.identity.resolution import EMPTY_NAME_REASON, NEW_IDENTITY_CONFIDENCE
from .store import CustomerHistory

logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    total: int = 0
    matched: int = 0
    new_identities: int = 0
    auto_merged: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "matched": self.matched,
            "new_identities": self.new_identities,
            "auto_merged": self.auto_merged,
            "skipped": self.skipped,
            "errors": list(self.errors),
        }


class CustomerImportRun:
    """
    Resolves the customer field of every row of one import.

    Owns no global state: each run gets its own ReferenceSetManager, so
    concurrent imports never see each other's names.
    """

    def __init__(
        self,
        reference: ReferenceSetManager,
        matching: Optional[MatchingSettings] = None,
        importing: Optional[ImportSettings] = None,
        policy: Optional[ResolutionPolicy] = None,
    ) -> None:
        self.reference = reference
        self.matching = matching or MatchingSettings()
        self.importing = importing or ImportSettings()
        self.policy = policy or ResolutionPolicy(
            min_confidence=self.matching.min_confidence,
            strict_mode=self.matching.strict_mode,
        )
        self.summary = ImportSummary()
        self.merges: list[ResolutionResult] = []

    def resolve_row(self, raw_customer: object) -> ResolutionResult:
        """Resolve one row's customer field; never raises."""
        self.summary.total += 1
        placeholder = self.importing.unknown_customer
        name = "" if raw_customer is None else str(raw_customer).strip()

        if not name or name == placeholder:
            self.summary.skipped += 1
            return ResolutionResult(
                original_name=placeholder,
                resolved_name=placeholder,
                confidence=NEW_IDENTITY_CONFIDENCE,
                reason=EMPTY_NAME_REASON,
                outcome=ResolutionOutcome.NEW_IDENTITY,
            )

        try:
            result = self.policy.resolve(name, self.reference.snapshot())
        except Exception as exc:
            logger.warning("Error matching customer %r, keeping original name: %s", name, exc)
            self.summary.errors.append(f"{name}: {exc}")
            return ResolutionResult(
                original_name=name,
                resolved_name=name,
                confidence=0,
                reason=f"resolution failed: {exc}",
                outcome=ResolutionOutcome.NEW_IDENTITY,
            )

        if not result.is_new and not self.importing.auto_merge:
            result = ResolutionResult(
                original_name=name,
                resolved_name=name,
                confidence=NEW_IDENTITY_CONFIDENCE,
                reason=f"auto-merge disabled, candidate {result.resolved_name!r} ({result.reason})",
                outcome=ResolutionOutcome.NEW_IDENTITY,
            )

        if result.is_new:
            self.reference.record(result, placeholder=placeholder)
            self.summary.new_identities += 1
            logger.debug("New customer identity: %r", name)
            return result

        self.summary.matched += 1
        if result.changed:
            self.summary.auto_merged += 1
            self.merges.append(result)
            logger.info(
                "Customer matched: %r -> %r (%d%% confidence)",
                result.original_name,
                result.resolved_name,
                result.confidence,
            )
        return result

    def process(self, names: Iterable[object]) -> list[ResolutionResult]:
        results = [self.resolve_row(name) for name in names]
        logger.info(
            "Customer resolution complete: %d rows, %d matched, %d new, %d merged, %d errors",
            self.summary.total,
            self.summary.matched,
            self.summary.new_identities,
            self.summary.auto_merged,
            len(self.summary.errors),
        )
        return results


def process_customer_list(
    names: Iterable[object],
    history: CustomerHistory,
    matching: Optional[MatchingSettings] = None,
    importing: Optional[ImportSettings] = None,
    persist: bool = False,
) -> tuple[list[ResolutionResult], ImportSummary]:
    """
    Resolve a list of customer names against stored history.

    The reference set is seeded once from ``history``. With ``persist`` the
    resolved names are written back, the way an import writes sales records.
    """
    seed = history.distinct_customers()
    reference = ReferenceSetManager(seed)
    logger.info("Found %d existing customers for matching", len(reference))

    run = CustomerImportRun(reference, matching=matching, importing=importing)
    results = run.process(names)

    if persist:
        placeholder = run.importing.unknown_customer
        for result in results:
            if result.resolved_name and result.resolved_name != placeholder:
                history.add_customer(result.resolved_name)
    return results, run.summary
