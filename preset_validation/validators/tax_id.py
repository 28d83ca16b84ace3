from __future__ import annotations
import re
from typing import Any

from .base import BaseValidator

# German Steueridentifikationsnummer (IdNr): 11 digits, the last one a check digit
# computed with the ISO 7064-derived mod-11 algorithm mandated by § 139b AO.
_TAX_ID_PATTERN = re.compile(r"\d{11}", re.ASCII)
_WHITESPACE = re.compile(r"\s+")


def calculate_tax_id_check_digit(digits: str) -> int:
    """Return the check digit (0-9) for the first 10 digits of a tax ID."""
    product = 10
    for d in digits[:10]:
        total = (int(d) + product) % 10
        if total == 0:
            total = 10
        product = (total * 2) % 11
    check = (11 - product) % 11
    return 0 if check == 10 else check


class TaxIdValidator(BaseValidator):
    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        digits = _WHITESPACE.sub("", value)
        if not _TAX_ID_PATTERN.fullmatch(digits):
            return False
        return calculate_tax_id_check_digit(digits) == int(digits[10])
