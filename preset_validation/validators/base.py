from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any


class BaseValidator(ABC):
    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Return True if value is valid. Never raises."""
        ...
