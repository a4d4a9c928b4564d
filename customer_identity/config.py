from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator


class MatchingSettings(BaseModel):
    min_confidence: float = 75.0
    strict_mode: bool = False
    suggest_min_similarity: float = 70.0
    suggest_max_results: int = 10

    @field_validator("min_confidence", "suggest_min_similarity")
    @classmethod
    def _check_score(cls, value: float) -> float:
        if not 0 <= value <= 100:
            raise ValueError("confidence must be between 0 and 100")
        return value

    @field_validator("suggest_max_results")
    @classmethod
    def _check_max_results(cls, value: int) -> int:
        if value < 1:
            raise ValueError("suggest_max_results must be at least 1")
        return value


class ImportSettings(BaseModel):
    unknown_customer: str = "-"
    auto_merge: bool = True


class StoreSettings(BaseModel):
    path: Path = Path("./cache/customers.sqlite3")

    @field_validator("path", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        return Path(value).expanduser().resolve()


class Settings(BaseModel):
    matching: MatchingSettings = MatchingSettings()
    importing: ImportSettings = ImportSettings()
    store: StoreSettings = StoreSettings()

    @classmethod
    def load(cls, path: Optional[Path]) -> "Settings":
        if path is None:
            return cls()
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "config.yaml", cwd / "config.yml"):
        if candidate.exists():
            return candidate
    return None
