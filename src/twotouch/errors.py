"""Exception types raised by table loading and conversion."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNENCODABLE = "unencodable"
    UNDECODABLE = "undecodable"
    INVALID_INPUT = "invalid_input"
    CONFIGURATION = "configuration"


class TwoTouchError(Exception):
    """Base class for every error raised by this package."""

    kind: ErrorKind


class ConversionError(TwoTouchError, ValueError):
    """A single encode/decode call could not produce a result."""


class UnencodableError(ConversionError):
    """No table can encode the whole text (or the text is empty)."""

    kind = ErrorKind.UNENCODABLE

    def __init__(self, text: str, table: str | None = None) -> None:
        self.text = text
        self.table = table
        if not text:
            msg = "cannot encode empty text"
        elif table:
            msg = f"table {table!r} cannot encode {text!r}"
        else:
            msg = f"no table can encode {text!r}"
        super().__init__(msg)


class UndecodableError(ConversionError):
    """No table can tokenize the whole digit string."""

    kind = ErrorKind.UNDECODABLE

    def __init__(self, digits: str, table: str | None = None) -> None:
        self.digits = digits
        self.table = table
        if not digits:
            msg = "cannot decode empty input"
        elif table:
            msg = f"table {table!r} cannot decode {digits!r}"
        else:
            msg = f"no table can decode {digits!r}"
        super().__init__(msg)


class InvalidInputError(ConversionError):
    """Decode input contains a character other than 0-9."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, digits: str, position: int) -> None:
        self.digits = digits
        self.position = position
        super().__init__(
            f"non-digit character {digits[position]!r} at position {position} in {digits!r}"
        )


class ConfigurationError(TwoTouchError):
    """A code table (or the table set) is invalid; raised before any conversion."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, table: str, problems: list[str]) -> None:
        self.table = table
        self.problems = list(problems)
        summary = "; ".join(self.problems[:5])
        if len(self.problems) > 5:
            summary += f"; ... ({len(self.problems) - 5} more)"
        super().__init__(f"invalid table {table!r}: {summary}")
