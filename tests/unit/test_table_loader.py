"""Tests for table validation and loading."""

from __future__ import annotations

from pathlib import Path

import orjson
import pytest

from twotouch.errors import ConfigurationError, ErrorKind
from twotouch.tables.loader import (
    BUILTIN_TABLES,
    TableDef,
    build_table,
    load_builtin_table,
    load_builtin_tables,
    load_table,
    modifier_aliases,
)


def _def(entries, aliases=(), **kw) -> TableDef:
    return TableDef(name="t", entries=list(entries), aliases=list(aliases), **kw)


class TestBuildTable:
    def test_minimal(self):
        table = build_table(_def([("あ", "11"), ("い", "12")]))
        assert table.lookup_code("い") == "12"
        assert table.lookup_unit("11") == "あ"

    def test_identical_duplicates_dropped(self):
        table = build_table(_def([("あ", "11"), ("あ", "11")]))
        assert len(table) == 1

    def test_unit_with_two_codes(self):
        with pytest.raises(ConfigurationError) as excinfo:
            build_table(_def([("あ", "11"), ("あ", "12")]))
        assert "unit 'あ' has codes '11' and '12'" in excinfo.value.problems

    def test_shared_code(self):
        with pytest.raises(ConfigurationError) as excinfo:
            build_table(_def([("あ", "11"), ("い", "11")]))
        assert "code '11' is shared by 'あ' and 'い'" in excinfo.value.problems

    @pytest.mark.parametrize("code", ["1", "1a", "", "１２"])
    def test_invalid_codes(self, code):
        with pytest.raises(ConfigurationError):
            build_table(_def([("あ", code)]))

    def test_empty_unit(self):
        with pytest.raises(ConfigurationError):
            build_table(_def([("", "11")]))

    def test_alias_to_unknown_unit(self):
        with pytest.raises(ConfigurationError) as excinfo:
            build_table(_def([("あ", "11")], [("ぉ", "お")]))
        assert excinfo.value.problems == ["alias 'ぉ' points to unknown unit 'お'"]

    def test_alias_shadowing_unit(self):
        with pytest.raises(ConfigurationError):
            build_table(_def([("あ", "11"), ("い", "12")], [("い", "あ")]))

    def test_alias_with_two_targets(self):
        with pytest.raises(ConfigurationError):
            build_table(_def([("あ", "11"), ("い", "12")], [("x", "あ"), ("x", "い")]))

    def test_all_problems_reported(self, fixtures_dir: Path):
        with pytest.raises(ConfigurationError) as excinfo:
            load_table(fixtures_dir / "broken_table.yaml")
        err = excinfo.value
        assert err.kind == ErrorKind.CONFIGURATION
        assert err.table == "broken"
        assert len(err.problems) == 5

    def test_combine_modifiers(self):
        table = build_table(
            _def(
                [("か", "21"), ("゛", "04"), ("゜", "05"), ("が", "2104"), ("ぱ", "6105")],
                combine_modifiers=True,
            )
        )
        assert table.resolve("か゛") == "が"
        # は is not a unit here, so no spelling for ぱ is derived
        assert table.resolve("は゜") is None


class TestModifierAliases:
    def test_voiced_and_semi_voiced(self):
        forward = {"は": "61", "゛": "04", "゜": "05", "ば": "6104", "ぱ": "6105"}
        assert modifier_aliases(forward) == {"は゛": "ば", "は゜": "ぱ"}

    def test_ignores_multi_char_units(self):
        assert modifier_aliases({"がっこう": "1", "か": "2", "゛": "3"}) == {}


class TestLoadTable:
    def test_yaml(self, mini_table):
        assert mini_table.name == "mini"
        assert mini_table.priority == 50
        assert mini_table.max_code_length == 4
        assert mini_table.resolve("ex") == "x"

    def test_priority_override(self, fixtures_dir: Path):
        table = load_table(fixtures_dir / "mini_table.yaml", priority=1)
        assert table.priority == 1

    def test_json(self, tmp_path: Path):
        p = tmp_path / "t.json"
        p.write_bytes(
            orjson.dumps({"name": "js", "priority": 2, "entries": [["あ", "11"]]})
        )
        table = load_table(p)
        assert table.name == "js"
        assert table.lookup_code("あ") == "11"

    def test_invalid_yaml(self, tmp_path: Path):
        p = tmp_path / "bad.yaml"
        p.write_text("name: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_table(p)

    def test_not_a_mapping(self, tmp_path: Path):
        p = tmp_path / "list.yaml"
        p.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_table(p)

    def test_schema_errors_reported(self, tmp_path: Path):
        p = tmp_path / "noname.yaml"
        p.write_text("entries:\n  - ['あ', '11', '12']\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as excinfo:
            load_table(p)
        assert excinfo.value.problems


class TestBuiltinTables:
    def test_priority_order(self):
        names = [t.name for t in load_builtin_tables()]
        assert names == ["pager_phrases", "standard", "pager_phrases_alt"]

    def test_all_builtins_load(self):
        for name in BUILTIN_TABLES:
            assert len(load_builtin_table(name)) > 0

    def test_loaded_once(self):
        assert load_builtin_table("standard") is load_builtin_table("standard")

    def test_unknown(self):
        with pytest.raises(ConfigurationError) as excinfo:
            load_builtin_table("nope")
        assert excinfo.value.kind == ErrorKind.CONFIGURATION
        assert "unknown builtin table 'nope'" in excinfo.value.problems[0]

    def test_standard_shape(self):
        table = load_builtin_table("standard")
        assert table.max_code_length == 4
        assert table.lookup_code("ん") == "03"
        assert table.lookup_code("\\") == "76"
        assert table.resolve("ゃ") == "や"
        assert table.resolve("ぱ") == "ぱ"
        assert table.resolve("ほ゜") == "ぽ"
