"""
Edit-distance similarity between customer names.

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic Levenshtein distance (insert, delete, substitute each cost 1).

    Only two rows of the matrix are kept, the result is identical to the
    full-matrix recurrence.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + cost,  # substitution
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """
    Case-insensitive (case-folded) similarity score between two names.

    Examples:
        similarity("Budi", "budi") → 100.0
        similarity("sitinuraini", "s***nuraini") → 72.7...
        similarity("", "") → 100.0
        similarity("", "x") → 0.0

    Returns:
        ``(max_len - distance) / max_len * 100``, in the range 0 to 100
    """
    folded_a = (a or "").casefold()
    folded_b = (b or "").casefold()
    max_len = max(len(folded_a), len(folded_b))
    if max_len == 0:
        return 100.0
    distance = levenshtein_distance(folded_a, folded_b)
    return (max_len - distance) / max_len * 100


def round_score(score: float) -> int:
    """Round a 0-100 score half up (72.5 → 73), the way scores are displayed."""
    return int(score + 0.5)
