from __future__ import annotations
from pathlib import Path
from typing import Iterator

_DATA_DIR = Path(__file__).parent / "data"


class CountryCodes:
    """ISO 3166-1 alpha-2 codes accepted in IBAN and BIC country fields."""

    def __init__(self, path: Path | None = None) -> None:
        codes: set[str] = set()
        with (path or _DATA_DIR / "country_codes.txt").open(encoding="utf-8") as fh:
            for line in fh:
                code = line.strip()
                if code and not code.startswith("#"):
                    codes.add(code.upper())
        self._codes = frozenset(codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._codes))

    def __len__(self) -> int:
        return len(self._codes)
