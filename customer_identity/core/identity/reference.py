"""
Per-run set of known customer names.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import ResolutionResult


class ReferenceSetManager:
    """
    Known customer names for one import run.

    Seeded from historical records, then grown with every name resolved as a
    new identity so that later rows can match names first seen earlier in the
    same run. Names are only ever added, deduplicated on exact string value.

    Not thread-safe: one instance per run, driven by that run's row loop.
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        # dict keeps insertion order, so snapshots rank deterministically.
        self._names: dict[str, None] = {}
        if names is not None:
            self.seed(names)

    def seed(self, names: Iterable[str]) -> int:
        """Add historical names, skipping blanks. Returns how many were new."""
        added = 0
        for name in names:
            if name and name.strip() and self.propose(name):
                added += 1
        return added

    def propose(self, name: str) -> bool:
        """Add a name unless already present. Returns True when added."""
        if not name or not name.strip() or name in self._names:
            return False
        self._names[name] = None
        return True

    def record(self, result: ResolutionResult, placeholder: str | None = None) -> bool:
        """Propose the original name of a new-identity result."""
        if not result.is_new:
            return False
        if placeholder is not None and result.original_name == placeholder:
            return False
        return self.propose(result.original_name)

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._names)
