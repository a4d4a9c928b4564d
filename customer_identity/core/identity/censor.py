"""
Matching of marketplace-redacted names against known customer names.

Marketplaces hide part of a buyer's name behind asterisks, for example
"friliawindy" may arrive as "f***iawindy". The visible parts of the redacted
name are searched for, in order, inside the candidate name and the coverage
is mapped onto a fixed ladder of confidence bands.

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re

from .models import CensorMatch
from .similarity import round_score

MASK_CHAR = "*"
MASK_RUN = re.compile(r"\*+")

# Confidence bands, checked top to bottom. Callers rely on these values.
FULL_MATCH_PART_RATIO = 1.0
FULL_MATCH_CHAR_RATIO = 0.7
FULL_MATCH_CAP = 95.0

PARTIAL_MATCH_PART_RATIO = 0.8
PARTIAL_MATCH_CHAR_RATIO = 0.5
PARTIAL_MATCH_CAP = 85.0
PARTIAL_MATCH_WEIGHT = 50

POSSIBLE_MATCH_PART_RATIO = 0.6
POSSIBLE_MATCH_CHAR_RATIO = 0.3
POSSIBLE_MATCH_CAP = 75.0
POSSIBLE_MATCH_WEIGHT = 40

LOW_MATCH_CAP = 50.0
LOW_MATCH_WEIGHT = 30


def is_redacted(name: str | None) -> bool:
    """True when the name contains at least one mask character."""
    return bool(name) and MASK_CHAR in name


def visible_parts(redacted: str) -> list[str]:
    """
    Split a redacted name on runs of mask characters.

    Examples:
        "f***iawindy" → ["f", "iawindy"]
        "***" → []
        "a**b***c" → ["a", "b", "c"]
    """
    return [part for part in MASK_RUN.split(redacted) if part]


def _pct(ratio: float) -> int:
    return round_score(ratio * 100)


def match_censor(original: str, redacted: str) -> CensorMatch:
    """
    Check whether a redacted name is consistent with an unredacted one.

    The visible parts are searched greedily left to right, each search
    starting after the previous hit. ``part_ratio`` is the share of parts
    found and ``char_ratio`` the share of the original's characters they
    cover.

    Args:
        original: Known, unredacted customer name
        redacted: Name as delivered by the marketplace

    Returns:
        CensorMatch with verdict, 0-100 confidence and reason
    """
    clean_original = (original or "").casefold().strip()
    clean_redacted = (redacted or "").casefold().strip()

    if not clean_original or not clean_redacted:
        return CensorMatch(is_match=False, confidence=0.0, reason="empty strings")

    if MASK_CHAR not in clean_redacted:
        return CensorMatch(is_match=False, confidence=0.0, reason="no censorship pattern found")

    parts = visible_parts(clean_redacted)
    if not parts:
        return CensorMatch(is_match=False, confidence=0.0, reason="no visible characters")

    position = 0
    matched_parts = 0
    matched_chars = 0
    for part in parts:
        found = clean_original.find(part, position)
        if found != -1:
            matched_parts += 1
            matched_chars += len(part)
            position = found + len(part)

    part_ratio = matched_parts / len(parts)
    char_ratio = matched_chars / len(clean_original)

    if part_ratio == FULL_MATCH_PART_RATIO and char_ratio >= FULL_MATCH_CHAR_RATIO:
        return CensorMatch(
            is_match=True,
            confidence=min(FULL_MATCH_CAP, char_ratio * 100),
            reason=f"all visible parts match, {_pct(char_ratio)}% character coverage",
        )

    if part_ratio >= PARTIAL_MATCH_PART_RATIO and char_ratio >= PARTIAL_MATCH_CHAR_RATIO:
        return CensorMatch(
            is_match=True,
            confidence=min(PARTIAL_MATCH_CAP, (part_ratio + char_ratio) * PARTIAL_MATCH_WEIGHT),
            reason=f"{_pct(part_ratio)}% parts match with {_pct(char_ratio)}% character coverage",
        )

    if part_ratio >= POSSIBLE_MATCH_PART_RATIO and char_ratio >= POSSIBLE_MATCH_CHAR_RATIO:
        return CensorMatch(
            is_match=False,
            confidence=min(POSSIBLE_MATCH_CAP, (part_ratio + char_ratio) * POSSIBLE_MATCH_WEIGHT),
            reason=f"possible match: {_pct(part_ratio)}% parts, {_pct(char_ratio)}% characters",
        )

    return CensorMatch(
        is_match=False,
        confidence=min(LOW_MATCH_CAP, (part_ratio + char_ratio) * LOW_MATCH_WEIGHT),
        reason=f"low similarity: {_pct(part_ratio)}% parts, {_pct(char_ratio)}% characters",
    )
