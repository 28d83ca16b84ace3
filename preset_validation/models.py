from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class ValidationPreset(str, Enum):
    TAX_ID = "taxId"
    TAX_NUMBER = "taxNumber"
    IBAN = "iban"
    BIC = "bic"


class ChecksumProcedure(str, Enum):
    A = "A"
    B = "B"
    REGIONAL_ALT = "regional-alt"
    STANDARD = "standard"


class Reason(str, Enum):
    INVALID_LENGTH = "invalid length or characters"
    ALL_ZEROS = "all zeros"
    UNKNOWN_REGIONAL_CODE = "unknown regional code"
    INVALID_CHECK_DIGIT = "invalid check digit"
    INVALID_CHECK_DIGIT_ALL_CANDIDATES = "invalid check digit for all candidate regions"


@dataclass(frozen=True)
class TaxOffice:
    code: str  # BUFA: state number (2) + office number (2)
    procedure: ChecksumProcedure
    state_name: str

    @property
    def state_number(self) -> str:
        return self.code[:2]

    @property
    def office_number(self) -> str:
        return self.code[2:4]


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    canonical: str | None = None
    regional_code: str | None = None
    state_name: str | None = None
    reason: Reason | None = None

    @classmethod
    def success(cls, canonical: str, office: TaxOffice) -> ValidationOutcome:
        return cls(
            valid=True,
            canonical=canonical,
            regional_code=office.code,
            state_name=office.state_name,
        )

    @classmethod
    def failure(cls, reason: Reason, office: TaxOffice | None = None) -> ValidationOutcome:
        """Rejected outcome; region fields are only set when the office is known."""
        return cls(
            valid=False,
            regional_code=office.code if office else None,
            state_name=office.state_name if office else None,
            reason=reason,
        )

    def __bool__(self) -> bool:
        return self.valid
