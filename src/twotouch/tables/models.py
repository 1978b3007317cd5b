"""Immutable code table: one historical two-touch standard.

A table is a bijection between phonetic units (a kana, a letter, a voiced
kana, or a whole pager phrase) and digit codes. Aliases are alternative
spellings that resolve to a unit on the encode side only; they never take
part in the bijection.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def upper_ascii(text: str) -> str:
    """Upper-case ASCII letters, leave everything else untouched."""
    return "".join(ch.upper() if ch.isascii() else ch for ch in text)


@dataclass(frozen=True, eq=False)
class CodeTable:
    """Bidirectional unit <-> code mapping.

    Build instances through :func:`twotouch.tables.loader.build_table`, which
    validates the bijection; the constructor trusts its inputs.
    """

    name: str
    priority: int
    forward: Mapping[str, str]
    reverse: Mapping[str, str]
    aliases: Mapping[str, str] = field(default_factory=dict)
    description: str = ""
    fold_ascii_case: bool = False
    max_code_length: int = field(init=False)
    max_unit_length: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "forward", MappingProxyType(dict(self.forward)))
        object.__setattr__(self, "reverse", MappingProxyType(dict(self.reverse)))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(
            self, "max_code_length", max((len(c) for c in self.reverse), default=0)
        )
        spellings = [*self.forward, *self.aliases]
        object.__setattr__(
            self, "max_unit_length", max((len(s) for s in spellings), default=0)
        )

    def lookup_code(self, unit: str) -> str | None:
        return self.forward.get(unit)

    def lookup_unit(self, code: str) -> str | None:
        return self.reverse.get(code)

    def resolve(self, spelling: str) -> str | None:
        """Return the canonical unit a spelling stands for, or None."""
        if self.fold_ascii_case:
            spelling = upper_ascii(spelling)
        if spelling in self.forward:
            return spelling
        return self.aliases.get(spelling)

    def units(self) -> Iterator[str]:
        return iter(self.forward)

    def codes(self) -> Iterator[str]:
        return iter(self.reverse)

    def __len__(self) -> int:
        return len(self.forward)

    def __contains__(self, unit: object) -> bool:
        return unit in self.forward

    def __repr__(self) -> str:
        return (
            f"CodeTable(name={self.name!r}, priority={self.priority}, "
            f"units={len(self)}, max_code_length={self.max_code_length})"
        )
