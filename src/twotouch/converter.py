"""Multi-table two-touch converter.

Encoding tries every table and returns one candidate per table that can
encode the whole text. Decoding returns the text from the first table,
in priority order, that tokenizes the whole digit string.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass, replace

from twotouch.codec import decode_digits, encode_text
from twotouch.config.schema import ConverterConfig, NormalisationConfig
from twotouch.errors import (
    ConfigurationError,
    InvalidInputError,
    UndecodableError,
    UnencodableError,
)
from twotouch.normalise.unicode_cleanup import normalise_text
from twotouch.tables.loader import load_builtin_table, load_builtin_tables, load_table
from twotouch.tables.models import CodeTable

logger = logging.getLogger(__name__)

_NON_DIGIT_RE = re.compile(r"[^0-9]")


@dataclass(frozen=True)
class DecodeCandidate:
    table: str
    text: str


def check_digits(digits: str) -> None:
    """Raise for empty input or any character outside 0-9."""
    if not digits:
        raise UndecodableError(digits)
    bad = _NON_DIGIT_RE.search(digits)
    if bad is not None:
        raise InvalidInputError(digits, bad.start())


class Converter:
    """Encode/decode over an immutable, priority-ordered set of tables."""

    def __init__(
        self,
        tables: Iterable[CodeTable],
        normalisation: NormalisationConfig | None = None,
    ) -> None:
        ordered = sorted(tables, key=lambda t: t.priority)
        if not ordered:
            raise ConfigurationError("<converter>", ["no code tables given"])
        seen: set[str] = set()
        duplicates = []
        for t in ordered:
            if t.name in seen:
                duplicates.append(t.name)
            seen.add(t.name)
        if duplicates:
            raise ConfigurationError(
                "<converter>", [f"duplicate table name {name!r}" for name in duplicates]
            )
        self._tables: tuple[CodeTable, ...] = tuple(ordered)
        self._by_name = {t.name: t for t in ordered}
        self.normalisation = normalisation or NormalisationConfig()

    @classmethod
    def from_config(cls, config: ConverterConfig) -> Converter:
        tables = []
        for source in config.tables:
            if source.path is not None:
                tables.append(load_table(source.path, priority=source.priority))
                continue
            table = load_builtin_table(source.builtin)
            if source.priority is not None and source.priority != table.priority:
                table = replace(table, priority=source.priority)
            tables.append(table)
        return cls(tables, config.normalisation)

    @classmethod
    def default(cls) -> Converter:
        """Converter over every bundled table."""
        return cls(load_builtin_tables())

    @property
    def tables(self) -> tuple[CodeTable, ...]:
        return self._tables

    def table(self, name: str) -> CodeTable:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"no table named {name!r}") from None

    def _resolve_table(self, table: CodeTable | str) -> CodeTable:
        return self.table(table) if isinstance(table, str) else table

    def encode(self, text: str) -> list[str]:
        """Return one digit string per table that encodes all of ``text``."""
        normalised = normalise_text(text, self.normalisation)
        if not normalised:
            raise UnencodableError(text)
        candidates = []
        for table in self._tables:
            encoded = encode_text(table, normalised)
            if encoded is not None:
                candidates.append(encoded)
        if not candidates:
            raise UnencodableError(text)
        return candidates

    def encode_with(self, text: str, table: CodeTable | str) -> str:
        """Encode using a single table."""
        table = self._resolve_table(table)
        normalised = normalise_text(text, self.normalisation)
        encoded = encode_text(table, normalised) if normalised else None
        if encoded is None:
            raise UnencodableError(text, table.name)
        return encoded

    def decode(self, digits: str) -> str:
        """Return the text from the first table that tokenizes all of ``digits``."""
        check_digits(digits)
        for table in self._tables:
            decoded = decode_digits(table, digits)
            if decoded is not None:
                logger.debug("Decoded %r with table %s", digits, table.name)
                return decoded
        raise UndecodableError(digits)

    def decode_with(self, digits: str, table: CodeTable | str) -> str:
        """Decode using a single table."""
        table = self._resolve_table(table)
        check_digits(digits)
        decoded = decode_digits(table, digits)
        if decoded is None:
            raise UndecodableError(digits, table.name)
        return decoded

    def decode_candidates(self, digits: str) -> list[DecodeCandidate]:
        """Every table's full decode of ``digits``, in priority order.

        Unlike :meth:`decode` this does not stop at the first success; an
        empty list means no table can decode the input.
        """
        check_digits(digits)
        found = []
        for table in self._tables:
            decoded = decode_digits(table, digits)
            if decoded is not None:
                found.append(DecodeCandidate(table.name, decoded))
        return found


_default_lock = threading.Lock()
_default_converter: Converter | None = None


def default_converter() -> Converter:
    """Process-wide converter over the bundled tables, built on first use."""
    global _default_converter
    with _default_lock:
        if _default_converter is None:
            _default_converter = Converter.default()
        return _default_converter


def encode(text: str) -> list[str]:
    return default_converter().encode(text)


def decode(digits: str) -> str:
    return default_converter().decode(digits)
