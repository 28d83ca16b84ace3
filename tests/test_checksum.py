from __future__ import annotations
import pytest
from preset_validation import ChecksumProcedure
from preset_validation.checksum import expected_check_digit, verify_check_digit


@pytest.mark.parametrize(
    ("body", "procedure", "expected"),
    [
        ("111601234567", ChecksumProcedure.A, 8),
        ("113001234567", ChecksumProcedure.B, 8),
        ("511701234567", ChecksumProcedure.REGIONAL_ALT, 8),
        ("051201234567", ChecksumProcedure.REGIONAL_ALT, 4),
        ("910101234567", ChecksumProcedure.STANDARD, 1),
        ("223001234567", ChecksumProcedure.STANDARD, 5),
        ("284501234567", ChecksumProcedure.STANDARD, 0),
    ],
)
def test_expected_check_digit(body: str, procedure: ChecksumProcedure, expected: int) -> None:
    assert expected_check_digit(body, procedure) == expected


def test_procedure_by_name() -> None:
    assert expected_check_digit("111601234567", "A") == 8
    assert expected_check_digit("511701234567", "regional-alt") == 8


def test_unknown_procedure_falls_back_to_standard() -> None:
    assert verify_check_digit("9101012345671", "BOGUS")
    assert not verify_check_digit("9101012345672", "BOGUS")


def test_verify_uses_position_12_only() -> None:
    # 11-digit inputs yield 14 characters; the trailing one is not checked
    assert verify_check_digit("91010123456719", ChecksumProcedure.STANDARD)


def test_verify_rejects_wrong_digit() -> None:
    for check in "023456789":
        assert not verify_check_digit("910101234567" + check, ChecksumProcedure.STANDARD)


def test_verify_rejects_malformed() -> None:
    assert not verify_check_digit("91010123456", ChecksumProcedure.STANDARD)
    assert not verify_check_digit("91010123456X1", ChecksumProcedure.STANDARD)
