"""Greedy longest-match tokenizers for a single code table.

Both directions commit to the longest match at each position and never
backtrack. A ``None`` result means the table cannot handle the whole input;
callers decide whether that is an error.
"""

from __future__ import annotations

import logging

from twotouch.tables.models import CodeTable

logger = logging.getLogger(__name__)


def tokenize_text(table: CodeTable, text: str) -> list[str] | None:
    """Split text into canonical units of ``table``.

    At each position the longest spelling (unit or alias) the table knows is
    taken, so ``か゛`` becomes ``が`` and a whole phrase wins over its
    syllables.
    """
    units: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        for length in range(min(table.max_unit_length, end - pos), 0, -1):
            unit = table.resolve(text[pos : pos + length])
            if unit is not None:
                units.append(unit)
                pos += length
                break
        else:
            logger.debug(
                "Table %s has no unit for %r at position %d", table.name, text[pos], pos
            )
            return None
    return units


def encode_text(table: CodeTable, text: str) -> str | None:
    """Concatenate the codes of every unit in ``text``, or None.

    The concatenation must read back to the same units under greedy
    decoding; otherwise the table cannot represent the text unambiguously
    and the attempt fails.
    """
    units = tokenize_text(table, text)
    if not units:
        return None
    encoded = "".join(table.forward[u] for u in units)
    if decode_digits(table, encoded) != "".join(units):
        logger.debug(
            "Table %s encodes %r as %r, which decodes to different text",
            table.name, text, encoded,
        )
        return None
    return encoded


def tokenize_digits(table: CodeTable, digits: str) -> list[str] | None:
    """Split a digit string into codes of ``table``.

    Scanning(p) moves to Scanning(p + len(code)) on the longest code that
    prefixes ``digits[p:]``; no match at p < len(digits) fails the attempt.
    """
    codes: list[str] = []
    pos = 0
    end = len(digits)
    while pos < end:
        for length in range(min(table.max_code_length, end - pos), 1, -1):
            code = digits[pos : pos + length]
            if code in table.reverse:
                codes.append(code)
                pos += length
                break
        else:
            logger.debug(
                "Table %s has no code at position %d of %r", table.name, pos, digits
            )
            return None
    return codes


def decode_digits(table: CodeTable, digits: str) -> str | None:
    """Decode a full digit string with one table, or None."""
    codes = tokenize_digits(table, digits)
    if not codes:
        return None
    return "".join(table.reverse[c] for c in codes)
