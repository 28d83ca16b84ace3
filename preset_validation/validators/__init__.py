from .base import BaseValidator
from .tax_id import TaxIdValidator, calculate_tax_id_check_digit
from .tax_number import TaxNumberValidator
from .iban import IbanValidator
from .bic import BicValidator

__all__ = [
    "BaseValidator",
    "TaxIdValidator",
    "TaxNumberValidator",
    "IbanValidator",
    "BicValidator",
    "calculate_tax_id_check_digit",
]
