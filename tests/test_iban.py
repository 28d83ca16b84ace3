import pytest
from preset_validation import CountryCodes
from preset_validation.validators.iban import IbanValidator


@pytest.fixture(scope="module")
def validator():
    return IbanValidator(CountryCodes())


@pytest.mark.parametrize(
    "iban",
    [
        "DE89370400440532013000",
        "DE44500105175407324931",
        "GB82WEST12345698765432",
        "FR1420041010050500013M02606",
        "ES9121000418450200051332",
        "IT60X0542811101000000123456",
        "AT611904300234573201",
        "CH9300762011623852957",
        "NL91ABNA0417164300",
        "PL61109010140000071219812874",
        "NO9386011117947",
    ],
)
def test_valid_ibans(validator, iban):
    assert validator.validate(iban)


def test_iban_with_spaces(validator):
    assert validator.validate("DE89 3704 0044 0532 0130 00")
    assert validator.validate("GB82 WEST 1234 5698 7654 32")


def test_iban_with_slashes_and_hyphens(validator):
    assert validator.validate("DE89-3704-0044-0532-0130-00")
    assert validator.validate("DE89/3704/0044/0532/0130/00")


def test_case_insensitive(validator):
    assert validator.validate("de89370400440532013000")
    assert validator.validate("De89370400440532013000")


@pytest.mark.parametrize("position", [2, 3])
def test_flipped_check_digit(validator, position):
    iban = "DE89370400440532013000"
    for digit in "0123456789":
        if digit == iban[position]:
            continue
        mutated = iban[:position] + digit + iban[position + 1 :]
        assert not validator.validate(mutated), mutated


def test_invalid_checksum(validator):
    assert not validator.validate("DE89370400440532013001")
    assert not validator.validate("GB82WEST12345698765433")


def test_wrong_length(validator):
    assert not validator.validate("DE123")
    assert not validator.validate("DE89370400440532013000123456789012345")


def test_invalid_format(validator):
    assert not validator.validate("1234567890123456")
    assert not validator.validate("DEAA370400440532013000")
    assert not validator.validate("DE89370400440532013.00")


def test_country_not_in_set(validator):
    # Checksum is correct, but SA is not an accepted country
    assert not validator.validate("SA0380000000608010167519")
    assert not validator.validate("XX89370400440532013000")


def test_empty_and_non_string(validator):
    assert not validator.validate("")
    assert not validator.validate(None)
    assert not validator.validate(12345678901234567)
