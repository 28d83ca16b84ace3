"""preset-validation: Prüfung deutscher Steuer-IDs und Steuernummern sowie IBAN und BIC."""
from .country_codes import CountryCodes
from .models import ChecksumProcedure, Reason, TaxOffice, ValidationOutcome, ValidationPreset
from .presets import (
    PresetValidator,
    run_validation_preset,
    validate_bic,
    validate_detailed_german_tax_number,
    validate_german_tax_id,
    validate_german_tax_number,
    validate_iban,
)
from .registry import TaxOfficeRegistry

__all__ = [
    "ChecksumProcedure",
    "CountryCodes",
    "PresetValidator",
    "Reason",
    "TaxOffice",
    "TaxOfficeRegistry",
    "ValidationOutcome",
    "ValidationPreset",
    "run_validation_preset",
    "validate_bic",
    "validate_detailed_german_tax_number",
    "validate_german_tax_id",
    "validate_german_tax_number",
    "validate_iban",
]
