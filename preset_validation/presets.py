from __future__ import annotations
import logging
from functools import lru_cache
from typing import Any

from .country_codes import CountryCodes
from .models import ValidationOutcome, ValidationPreset
from .registry import TaxOfficeRegistry
from .validators.base import BaseValidator
from .validators.bic import BicValidator
from .validators.iban import IbanValidator
from .validators.tax_id import TaxIdValidator
from .validators.tax_number import TaxNumberValidator

logger = logging.getLogger(__name__)


class PresetValidator:
    """Routes (preset, value) pairs to the matching validator.

    One registry and one country-code set are loaded here and shared by
    every validator.
    """

    def __init__(
        self,
        registry: TaxOfficeRegistry | None = None,
        country_codes: CountryCodes | None = None,
    ) -> None:
        self.registry = registry or TaxOfficeRegistry()
        self.country_codes = country_codes or CountryCodes()
        self._tax_number = TaxNumberValidator(self.registry)
        self._validators: dict[ValidationPreset, BaseValidator] = {
            ValidationPreset.TAX_ID: TaxIdValidator(),
            ValidationPreset.TAX_NUMBER: self._tax_number,
            ValidationPreset.IBAN: IbanValidator(self.country_codes),
            ValidationPreset.BIC: BicValidator(self.country_codes),
        }

    def validator(self, preset: ValidationPreset) -> BaseValidator:
        return self._validators[preset]

    def run(self, preset: ValidationPreset | str, value: Any) -> bool:
        """Validate value with the given preset; fails closed on bad input."""
        if not value or not isinstance(value, str):
            return False
        try:
            key = ValidationPreset(preset)
        except ValueError:
            logger.warning("Unknown validation preset: %r", preset)
            return False
        return self._validators[key].validate(value)

    def validate_tax_number_detailed(self, value: Any) -> ValidationOutcome:
        return self._tax_number.validate_detailed(value)


@lru_cache(maxsize=1)
def default_validator() -> PresetValidator:
    """Shared instance over the packaged data files, built on first use."""
    return PresetValidator()


def validate_german_tax_id(value: Any) -> bool:
    return default_validator().validator(ValidationPreset.TAX_ID).validate(value)


def validate_german_tax_number(value: Any) -> bool:
    return default_validator().validate_tax_number_detailed(value).valid


def validate_detailed_german_tax_number(value: Any) -> ValidationOutcome:
    return default_validator().validate_tax_number_detailed(value)


def validate_iban(value: Any) -> bool:
    return default_validator().validator(ValidationPreset.IBAN).validate(value)


def validate_bic(value: Any) -> bool:
    return default_validator().validator(ValidationPreset.BIC).validate(value)


def run_validation_preset(preset: ValidationPreset | str, value: Any) -> bool:
    return default_validator().run(preset, value)
