from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from threading import Lock
from typing import Any, Optional, Protocol

from .core.identity.models import ResolutionResult


class CustomerHistory(Protocol):
    """Protocol for the store of previously seen customer names."""

    def distinct_customers(self) -> list[str]:
        """All distinct, non-blank customer names on record."""
        ...

    def add_customer(self, name: str) -> None:
        """Record a customer name written to a sales record."""
        ...


class CustomerStore:
    """SQLite-backed history of customer names and resolution decisions."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()
        self._conn = sqlite3.connect(self.path, check_same_thread=False)
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS customers (
                name TEXT PRIMARY KEY,
                first_seen TEXT NOT NULL
            )
            """
        )
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS resolutions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                original_name TEXT NOT NULL,
                resolved_name TEXT NOT NULL,
                outcome TEXT NOT NULL,
                payload TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        self._conn.commit()

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def distinct_customers(self) -> list[str]:
        with self._lock:
            cursor = self._conn.execute("SELECT name FROM customers ORDER BY rowid")
            rows = cursor.fetchall()
        return [row[0] for row in rows]

    def add_customer(self, name: str) -> None:
        if not name or not name.strip():
            return
        with self._lock:
            self._conn.execute(
                "INSERT OR IGNORE INTO customers(name, first_seen) VALUES(?, CURRENT_TIMESTAMP)",
                (name,),
            )
            self._conn.commit()

    def add_customers(self, names: list[str]) -> int:
        rows = [(name,) for name in names if name and name.strip()]
        with self._lock:
            before = self._conn.total_changes
            self._conn.executemany(
                "INSERT OR IGNORE INTO customers(name, first_seen) VALUES(?, CURRENT_TIMESTAMP)",
                rows,
            )
            self._conn.commit()
            return self._conn.total_changes - before

    def record_resolution(self, result: ResolutionResult) -> None:
        payload = result.to_dict()
        with self._lock:
            self._conn.execute(
                """
                INSERT INTO resolutions(original_name, resolved_name, outcome, payload, created_at)
                VALUES(?, ?, ?, ?, CURRENT_TIMESTAMP)
                """,
                (
                    result.original_name,
                    result.resolved_name,
                    result.outcome.value,
                    json.dumps(payload, sort_keys=True),
                ),
            )
            self._conn.commit()

    def list_resolutions(self, limit: int = 50, outcome: Optional[str] = None) -> list[dict[str, Any]]:
        limit = max(1, min(int(limit), 1000))
        query = "SELECT id, original_name, resolved_name, outcome, payload, created_at FROM resolutions"
        params: list[Any] = []
        if outcome:
            query += " WHERE outcome = ?"
            params.append(outcome)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)
        with self._lock:
            rows = self._conn.execute(query, params).fetchall()
        records = []
        for row_id, original, resolved, outcome_value, payload, created_at in rows:
            try:
                decoded = json.loads(payload)
            except json.JSONDecodeError:
                decoded = {}
            records.append(
                {
                    "id": row_id,
                    "original_name": original,
                    "resolved_name": resolved,
                    "outcome": outcome_value,
                    "payload": decoded,
                    "created_at": created_at,
                }
            )
        return records
