from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator

from .models import ChecksumProcedure, TaxOffice

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

_PROCEDURES: dict[str, ChecksumProcedure] = {p.value: p for p in ChecksumProcedure}


class TaxOfficeRegistry:
    """Read-only lookup of regional tax-office codes (BUFA).

    Built once from a data file and shared by reference; entries keep the
    file order, which is the order candidate regions are tried in.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._offices: dict[str, TaxOffice] = {}
        self._load_file(path or _DATA_DIR / "tax_offices.txt")
        logger.debug("Loaded %d tax offices", len(self._offices))

    def _load_file(self, path: Path) -> None:
        with path.open(encoding="utf-8") as fh:
            for lineno, line in enumerate(fh, start=1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                parts = [p.strip() for p in line.split(";")]
                if len(parts) != 3 or len(parts[0]) != 4 or not parts[0].isdigit():
                    raise ValueError(f"{path}:{lineno}: malformed tax office entry {line!r}")
                code, procedure_name, state_name = parts
                self._offices[code] = TaxOffice(
                    code=code,
                    procedure=self._procedure(procedure_name, code),
                    state_name=state_name,
                )

    @staticmethod
    def _procedure(name: str, code: str) -> ChecksumProcedure:
        procedure = _PROCEDURES.get(name)
        if procedure is None:
            logger.warning(
                "Unknown checksum procedure %r for tax office %s, using standard", name, code
            )
            return ChecksumProcedure.STANDARD
        return procedure

    def get(self, code: str) -> TaxOffice | None:
        return self._offices.get(code)

    def by_office_number(self, office_number: str) -> list[TaxOffice]:
        """All offices whose office-number component matches, across every state."""
        return [o for o in self._offices.values() if o.office_number == office_number]

    def by_state_number(self, state_number: str) -> list[TaxOffice]:
        return [o for o in self._offices.values() if o.state_number == state_number]

    def __contains__(self, code: object) -> bool:
        return code in self._offices

    def __iter__(self) -> Iterator[TaxOffice]:
        return iter(self._offices.values())

    def __len__(self) -> int:
        return len(self._offices)
