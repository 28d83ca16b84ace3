from __future__ import annotations
import re
from typing import Any

from .base import BaseValidator
from ..country_codes import CountryCodes

# ISO 9362: bank code (4 letters), country code (2 letters),
# location code (2 alphanumerics), optional branch code (3 alphanumerics).
_BIC_PATTERN = re.compile(r"[A-Z]{4}([A-Z]{2})[A-Z0-9]{2}(?:[A-Z0-9]{3})?", re.ASCII)
_SEPARATORS = re.compile(r"[\s/-]+")


class BicValidator(BaseValidator):
    def __init__(self, country_codes: CountryCodes | None = None) -> None:
        self._country_codes = country_codes or CountryCodes()

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        clean = _SEPARATORS.sub("", value).upper()
        if len(clean) not in (8, 11):
            return False
        match = _BIC_PATTERN.fullmatch(clean)
        if match is None:
            return False
        return match.group(1) in self._country_codes
