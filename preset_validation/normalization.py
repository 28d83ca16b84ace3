from __future__ import annotations
import re
from typing import Any

from .models import TaxOffice
from .registry import TaxOfficeRegistry

# Supported input formats (digits only, after stripping):
#   10 digits: FF BBB UUUU P       old format without state number
#   11 digits: FF BBB UUUUU P      formats used by some states
#   12 digits: LL FF BBB UUUU P    state and office number, no filler
#   13 digits: LL FF 0 BBB UUUU P  ELSTER unified format
# LL = state number, FF = office number, B = district, U = sequence, P = check digit.
_NON_DIGITS = re.compile(r"\D+", re.ASCII)
_VALID_LENGTHS = frozenset({10, 11, 12, 13})

# NRW uses a 4-digit district and a 3-digit sequence.
NRW_STATE_NUMBER = "05"


def normalize_tax_number(value: Any) -> str:
    """Strip formatting and return the digits, or "" if the length class is not supported."""
    if value is None or value == "":
        return ""
    digits = _NON_DIGITS.sub("", str(value))
    if len(digits) not in _VALID_LENGTHS:
        return ""
    return digits


def to_canonical(digits: str, regional_code: str) -> str | None:
    """Build the canonical ELSTER form of digits for the given regional code.

    For 10 and 11 digits the state number comes from regional_code and the
    office number from the input; 12-digit input already carries both.
    11-digit input yields 14 characters; only the first 13 take part in the
    check digit test.
    """
    state = regional_code[:2]
    nrw = state == NRW_STATE_NUMBER

    if len(digits) == 10:
        office = digits[:2]
        if nrw:
            return f"{state}{office}0{digits[2:6]}{digits[6:10]}"
        return f"{state}{office}0{digits[2:5]}{digits[5:9]}{digits[9]}"

    if len(digits) == 11:
        office = digits[:2]
        if nrw:
            return f"{state}{office}0{digits[2:6]}{digits[6:11]}"
        return f"{state}{office}0{digits[2:5]}{digits[5:9]}{digits[9:11]}"

    if len(digits) == 12:
        if nrw:
            return f"{digits[:4]}0{digits[4:8]}{digits[8:12]}"
        return f"{digits[:4]}0{digits[4:7]}{digits[7:11]}{digits[11]}"

    if len(digits) == 13:
        return digits

    return None


def expand_candidates(digits: str, registry: TaxOfficeRegistry) -> list[tuple[TaxOffice, str]]:
    """Return (office, canonical) pairs for every region the input may belong to.

    Order follows the registry. 12 and 13 digits name their region directly;
    shorter inputs only carry the office number, which is matched across all
    states.
    """
    if len(digits) in (12, 13):
        office = registry.get(digits[:4])
        offices = [office] if office else []
    else:
        offices = registry.by_office_number(digits[:2])

    candidates: list[tuple[TaxOffice, str]] = []
    for office in offices:
        canonical = to_canonical(digits, office.code)
        if canonical:
            candidates.append((office, canonical))
    return candidates
