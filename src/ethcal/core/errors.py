from __future__ import annotations

from typing import Any


class EthcalError(Exception):
    """Base error."""

class InvalidFieldError(EthcalError, ValueError):
    """Raised when a year, month or day is out of range for its calendar."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        super().__init__(f"invalid {field} {value!r}: {reason}")

class UnknownMonthError(EthcalError, KeyError):
    """Raised when a month number has no entry in a month-name table."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownNamesError(EthcalError, KeyError):
    """Raised when a name table key is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""

class UnknownAttributeError(EthcalError, KeyError):
    """Raised when a day attribute is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
