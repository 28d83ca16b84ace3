from __future__ import annotations
import logging
import pytest
from preset_validation import ChecksumProcedure, CountryCodes, TaxOfficeRegistry


@pytest.fixture(scope="module")
def registry() -> TaxOfficeRegistry:
    return TaxOfficeRegistry()


def test_packaged_registry_size(registry: TaxOfficeRegistry) -> None:
    assert 500 <= len(registry) <= 600


@pytest.mark.parametrize(
    ("code", "procedure", "state_name"),
    [
        ("1116", ChecksumProcedure.A, "Berlin"),
        ("1130", ChecksumProcedure.B, "Berlin"),
        ("5117", ChecksumProcedure.REGIONAL_ALT, "Nordrhein-Westfalen"),
        ("9101", ChecksumProcedure.STANDARD, "Bayern"),
        ("2478", ChecksumProcedure.STANDARD, "Bremen"),
        ("4160", ChecksumProcedure.STANDARD, "Thüringen"),
    ],
)
def test_lookup(registry: TaxOfficeRegistry, code: str, procedure: ChecksumProcedure, state_name: str) -> None:
    office = registry.get(code)
    assert office is not None
    assert office.procedure == procedure
    assert office.state_name == state_name
    assert office.state_number == code[:2]
    assert office.office_number == code[2:]


def test_unknown_code(registry: TaxOfficeRegistry) -> None:
    assert registry.get("9999") is None
    assert "9999" not in registry
    assert "1116" in registry


def test_by_office_number(registry: TaxOfficeRegistry) -> None:
    assert [o.code for o in registry.by_office_number("78")] == ["2478"]
    assert registry.by_office_number("99") == []


def test_by_state_number(registry: TaxOfficeRegistry) -> None:
    bremen = registry.by_state_number("24")
    assert len(bremen) == 11
    assert {o.state_name for o in bremen} == {"Bremen"}


def test_iteration_keeps_file_order(registry: TaxOfficeRegistry) -> None:
    codes = [o.code for o in registry]
    assert codes == sorted(codes)
    assert codes[0] == "1010"


def test_custom_file(tmp_path) -> None:
    path = tmp_path / "offices.txt"
    path.write_text(
        "# comment\n\n2198;B;Schleswig-Holstein\n1198; A ;Berlin\n",
        encoding="utf-8",
    )
    registry = TaxOfficeRegistry(path)
    assert len(registry) == 2
    assert [o.code for o in registry] == ["2198", "1198"]
    assert registry.get("1198").procedure == ChecksumProcedure.A


def test_unknown_procedure_falls_back(tmp_path, caplog) -> None:
    path = tmp_path / "offices.txt"
    path.write_text("1198;BAYERN_11ER;Berlin\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="preset_validation.registry"):
        registry = TaxOfficeRegistry(path)
    assert registry.get("1198").procedure == ChecksumProcedure.STANDARD
    assert "BAYERN_11ER" in caplog.text


@pytest.mark.parametrize("line", ["1198;A", "11A8;A;Berlin", "119;A;Berlin"])
def test_malformed_line_raises(tmp_path, line: str) -> None:
    path = tmp_path / "offices.txt"
    path.write_text(f"1116;A;Berlin\n{line}\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        TaxOfficeRegistry(path)


# ---------------------------------------------------------------------------
# Country codes
# ---------------------------------------------------------------------------


def test_country_codes_packaged() -> None:
    codes = CountryCodes()
    assert len(codes) == 49
    assert "DE" in codes
    assert "GB" in codes
    assert "ZZ" not in codes


def test_country_codes_custom_file(tmp_path) -> None:
    path = tmp_path / "codes.txt"
    path.write_text("# EU only\nde\nAT\n\n", encoding="utf-8")
    codes = CountryCodes(path)
    assert list(codes) == ["AT", "DE"]
