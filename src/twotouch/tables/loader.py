"""Load, validate and build code tables from YAML/JSON data files."""

from __future__ import annotations

import logging
import threading
import unicodedata
from importlib import resources
from pathlib import Path
from typing import Any

import orjson
import yaml
from pydantic import BaseModel, Field, ValidationError

from twotouch.errors import ConfigurationError
from twotouch.tables.models import CodeTable

logger = logging.getLogger(__name__)

BUILTIN_TABLES = ("pager_phrases", "standard", "pager_phrases_alt")

# Combining voiced / semi-voiced sound marks -> their spacing forms
_SPACING_MARKS = {"゙": "゛", "゚": "゜"}

_builtin_lock = threading.Lock()
_builtin_cache: dict[str, CodeTable] = {}


class TableDef(BaseModel):
    """On-disk shape of a code table."""

    name: str
    priority: int = 100
    description: str = ""
    fold_ascii_case: bool = False
    combine_modifiers: bool = False
    # Lists of pairs rather than mappings so duplicated units stay visible
    entries: list[tuple[str, str]] = Field(default_factory=list)
    aliases: list[tuple[str, str]] = Field(default_factory=list)


def _check_entries(
    entries: list[tuple[str, str]],
) -> tuple[dict[str, str], dict[str, str], list[str]]:
    forward: dict[str, str] = {}
    reverse: dict[str, str] = {}
    problems: list[str] = []
    for unit, code in entries:
        if not unit:
            problems.append(f"empty unit for code {code!r}")
            continue
        if len(code) < 2 or not code.isascii() or not code.isdigit():
            problems.append(f"invalid code {code!r} for unit {unit!r}")
            continue
        known = forward.get(unit)
        if known == code:
            logger.debug("Dropping duplicate entry %r -> %r", unit, code)
            continue
        if known is not None:
            problems.append(f"unit {unit!r} has codes {known!r} and {code!r}")
            continue
        owner = reverse.get(code)
        if owner is not None:
            problems.append(f"code {code!r} is shared by {owner!r} and {unit!r}")
            continue
        forward[unit] = code
        reverse[code] = unit
    return forward, reverse, problems


def _check_aliases(
    aliases: list[tuple[str, str]], forward: dict[str, str]
) -> tuple[dict[str, str], list[str]]:
    resolved: dict[str, str] = {}
    problems: list[str] = []
    for alias, unit in aliases:
        if alias in forward:
            problems.append(f"alias {alias!r} is already a unit")
        elif unit not in forward:
            problems.append(f"alias {alias!r} points to unknown unit {unit!r}")
        elif resolved.get(alias, unit) != unit:
            problems.append(
                f"alias {alias!r} points to both {resolved[alias]!r} and {unit!r}"
            )
        else:
            resolved[alias] = unit
    return resolved, problems


def modifier_aliases(forward: dict[str, str]) -> dict[str, str]:
    """Map base + spacing mark spellings (``か゛``) to combined units (``が``)."""
    combined: dict[str, str] = {}
    for unit in forward:
        if len(unit) != 1:
            continue
        decomposed = unicodedata.normalize("NFD", unit)
        if len(decomposed) != 2 or decomposed[1] not in _SPACING_MARKS:
            continue
        base, mark = decomposed[0], _SPACING_MARKS[decomposed[1]]
        if base in forward and mark in forward:
            combined[base + mark] = unit
    return combined


def build_table(definition: TableDef) -> CodeTable:
    """Validate a table definition and freeze it into a CodeTable.

    All problems are collected before raising so a broken data file can be
    fixed in one pass.
    """
    forward, reverse, problems = _check_entries(definition.entries)
    aliases, alias_problems = _check_aliases(definition.aliases, forward)
    problems.extend(alias_problems)
    if problems:
        raise ConfigurationError(definition.name, problems)

    if definition.combine_modifiers:
        for spelling, unit in modifier_aliases(forward).items():
            aliases.setdefault(spelling, unit)

    table = CodeTable(
        name=definition.name,
        priority=definition.priority,
        forward=forward,
        reverse=reverse,
        aliases=aliases,
        description=definition.description,
        fold_ascii_case=definition.fold_ascii_case,
    )
    logger.info(
        "Loaded table %s: %d units, %d aliases, max code length %d",
        table.name, len(table), len(table.aliases), table.max_code_length,
    )
    return table


def parse_table(raw: Any, source: str) -> CodeTable:
    """Validate raw decoded data (YAML/JSON) and build a table."""
    if not isinstance(raw, dict):
        raise ConfigurationError(source, ["table file must contain a mapping"])
    try:
        definition = TableDef.model_validate(raw)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise ConfigurationError(str(raw.get("name", source)), problems) from exc
    return build_table(definition)


def load_table(path: Path | str, priority: int | None = None) -> CodeTable:
    """Read a ``.yaml``/``.yml`` or ``.json`` table file."""
    path = Path(path)
    data = path.read_bytes()
    if path.suffix.lower() == ".json":
        try:
            raw = orjson.loads(data)
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError(path.name, [f"invalid JSON: {exc}"]) from exc
    else:
        try:
            raw = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise ConfigurationError(path.name, [f"invalid YAML: {exc}"]) from exc
    if priority is not None and isinstance(raw, dict):
        raw = {**raw, "priority": priority}
    return parse_table(raw, path.name)


def load_builtin_table(name: str) -> CodeTable:
    """Load one bundled table; each is parsed at most once per process."""
    if name not in BUILTIN_TABLES:
        raise ConfigurationError(
            name, [f"unknown builtin table {name!r}; choose from {', '.join(BUILTIN_TABLES)}"]
        )
    with _builtin_lock:
        table = _builtin_cache.get(name)
        if table is None:
            resource = resources.files("twotouch.tables") / "data" / f"{name}.yaml"
            raw = yaml.safe_load(resource.read_text(encoding="utf-8"))
            table = parse_table(raw, f"{name}.yaml")
            _builtin_cache[name] = table
    return table


def load_builtin_tables() -> list[CodeTable]:
    """All bundled tables, lowest priority value first."""
    tables = [load_builtin_table(name) for name in BUILTIN_TABLES]
    return sorted(tables, key=lambda t: t.priority)
