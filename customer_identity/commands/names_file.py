from __future__ import annotations

from pathlib import Path


def read_names(path: Path) -> list[str]:
    """One customer name per line; blank lines are kept as empty rows."""
    text = path.read_text(encoding="utf-8-sig")
    return [line.strip() for line in text.splitlines()]
