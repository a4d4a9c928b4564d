from __future__ import annotations

from pathlib import Path

from ..store import CustomerStore
from .names_file import read_names


def run(store: CustomerStore, path: Path) -> int:
    names = [name for name in read_names(path) if name]
    added = store.add_customers(names)
    print(f"Added {added} of {len(names)} customer names ({len(names) - added} already known).")
    return added
