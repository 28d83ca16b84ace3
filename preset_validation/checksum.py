from __future__ import annotations
import re

from .models import ChecksumProcedure

_CANONICAL_PREFIX = re.compile(r"[0-9]{13}")

# Weighted procedures: (sum of digit * weight) mod 11 mod 10 over the 12 body digits.
_WEIGHTS: dict[ChecksumProcedure, tuple[int, ...]] = {
    ChecksumProcedure.A: (0, 0, 0, 0, 0, 7, 6, 5, 8, 4, 3, 2),
    ChecksumProcedure.B: (0, 0, 2, 9, 0, 8, 7, 6, 5, 4, 3, 2),
    ChecksumProcedure.REGIONAL_ALT: (0, 3, 2, 1, 0, 7, 6, 5, 4, 3, 2, 1),
}


def _weighted(body: str, weights: tuple[int, ...]) -> int:
    total = sum(int(d) * w for d, w in zip(body, weights))
    return total % 11 % 10


def _standard(body: str) -> int:
    """Alternating 1-2 weights, two-digit products reduced to their cross sum."""
    total = 0
    for i, d in enumerate(body):
        product = int(d) * (2 if i % 2 else 1)
        total += product - 9 if product > 9 else product
    return (10 - total % 10) % 10


def _resolve(procedure: ChecksumProcedure | str) -> ChecksumProcedure:
    try:
        return ChecksumProcedure(procedure)
    except ValueError:
        return ChecksumProcedure.STANDARD


def expected_check_digit(body: str, procedure: ChecksumProcedure | str) -> int:
    """Return the check digit for the first 12 digits of body."""
    body = body[:12]
    weights = _WEIGHTS.get(_resolve(procedure))
    if weights is None:
        return _standard(body)
    return _weighted(body, weights)


def verify_check_digit(canonical: str, procedure: ChecksumProcedure | str) -> bool:
    """True if position 12 of canonical matches the digit computed from positions 0-11."""
    if not _CANONICAL_PREFIX.match(canonical):
        return False
    return expected_check_digit(canonical, procedure) == int(canonical[12])
