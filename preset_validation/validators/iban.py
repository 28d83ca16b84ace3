from __future__ import annotations
import re
from typing import Any

from .base import BaseValidator
from ..country_codes import CountryCodes

# 2 letters (country), 2 digits (check digits), then the alphanumeric BBAN.
_IBAN_PATTERN = re.compile(r"[A-Z]{2}\d{2}[A-Z0-9]+", re.ASCII)
# Spaces, slashes and hyphens are formatting only.
_SEPARATORS = re.compile(r"[\s/-]+")

IBAN_MIN_LENGTH = 15
IBAN_MAX_LENGTH = 34


def _mod97(iban_chars: str) -> int:
    """ISO 7064 MOD-97-10 over digits and letters (A=10 ... Z=35)."""
    remainder = 0
    for ch in iban_chars:
        if ch.isdigit():
            remainder = (remainder * 10 + int(ch)) % 97
        else:
            val = ord(ch) - ord("A") + 10
            remainder = (remainder * 100 + val) % 97
    return remainder


def clean_iban(raw: str) -> str:
    return _SEPARATORS.sub("", raw).upper()


class IbanValidator(BaseValidator):
    def __init__(self, country_codes: CountryCodes | None = None) -> None:
        self._country_codes = country_codes or CountryCodes()

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        clean = clean_iban(value)
        if not IBAN_MIN_LENGTH <= len(clean) <= IBAN_MAX_LENGTH:
            return False
        if not _IBAN_PATTERN.fullmatch(clean):
            return False
        if clean[:2] not in self._country_codes:
            return False
        # Move the first 4 chars to the end, then check MOD97
        rearranged = clean[4:] + clean[:4]
        return _mod97(rearranged) == 1
