from __future__ import annotations
import logging
from typing import Any

from .base import BaseValidator
from ..checksum import verify_check_digit
from ..models import Reason, ValidationOutcome
from ..normalization import expand_candidates, normalize_tax_number
from ..registry import TaxOfficeRegistry

logger = logging.getLogger(__name__)


class TaxNumberValidator(BaseValidator):
    """German Steuernummer in 10, 11, 12 or 13 digit notation.

    Shorter notations are expanded into one canonical candidate per matching
    tax office; the first candidate whose check digit matches wins.
    """

    def __init__(self, registry: TaxOfficeRegistry | None = None) -> None:
        self._registry = registry or TaxOfficeRegistry()

    @property
    def registry(self) -> TaxOfficeRegistry:
        return self._registry

    def validate(self, value: Any) -> bool:
        return self.validate_detailed(value).valid

    def validate_detailed(self, value: Any) -> ValidationOutcome:
        outcome = self._check(normalize_tax_number(value))
        if not outcome.valid:
            logger.debug("Tax number rejected: %s", outcome.reason.value)
        return outcome

    def _check(self, digits: str) -> ValidationOutcome:
        if not digits:
            return ValidationOutcome.failure(Reason.INVALID_LENGTH)
        if digits.count("0") == len(digits):
            return ValidationOutcome.failure(Reason.ALL_ZEROS)

        if len(digits) == 13:
            office = self._registry.get(digits[:4])
            if office is None:
                return ValidationOutcome.failure(Reason.UNKNOWN_REGIONAL_CODE)
            if not verify_check_digit(digits, office.procedure):
                # Region is known, so report which office rejected the number
                return ValidationOutcome.failure(Reason.INVALID_CHECK_DIGIT, office)
            return ValidationOutcome.success(digits, office)

        candidates = expand_candidates(digits, self._registry)
        if not candidates:
            return ValidationOutcome.failure(Reason.UNKNOWN_REGIONAL_CODE)
        for office, canonical in candidates:
            if verify_check_digit(canonical, office.procedure):
                return ValidationOutcome.success(canonical, office)
        return ValidationOutcome.failure(Reason.INVALID_CHECK_DIGIT_ALL_CANDIDATES)
