from __future__ import annotations

from dataclasses import dataclass

from ..core.identity import ResolutionPolicy
from .output import failed, ok

# (known customer, name as redacted by the marketplace)
SCENARIOS: tuple[tuple[str, str], ...] = (
    ("friliawindy", "f***iaawindy"),
    ("johndoe123", "j***doe123"),
    ("mariaangel", "m***angel"),
    ("budisantoso", "b***santoso"),
    ("sitinuraini", "s***nuraini"),
    ("ahmadrifai", "a***rifai"),
)


@dataclass(slots=True)
class SelfTestReport:
    ok: bool
    checks: list[str]
    success_rate: float


# Settings of the standalone best-match lookup: higher floor, no suggestions.
STRICT_MIN_CONFIDENCE = 80.0


def run(min_confidence: float = 75.0, strict: bool = False) -> SelfTestReport:
    """Replay SCENARIOS through the import policy, or the strict lookup."""
    known = [original for original, _ in SCENARIOS]
    if strict:
        policy = ResolutionPolicy(min_confidence=STRICT_MIN_CONFIDENCE, strict_mode=True)
    else:
        policy = ResolutionPolicy(min_confidence=min_confidence, strict_mode=False)
    checks: list[str] = []
    passed = 0
    for original, redacted in SCENARIOS:
        result = policy.resolve(redacted, known)
        detail = f"-> {result.resolved_name} ({result.confidence}%, {result.reason})"
        if result.resolved_name == original:
            passed += 1
            checks.append(ok(redacted, detail))
        else:
            checks.append(failed(redacted, f"expected {original} {detail}"))
    rate = passed / len(SCENARIOS) * 100
    return SelfTestReport(ok=passed == len(SCENARIOS), checks=checks, success_rate=rate)
