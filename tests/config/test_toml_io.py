# topmark:header:start
#
#   project      : IniMark
#   file         : test_toml_io.py
#   file_relpath : tests/config/test_toml_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML loading helpers (`inimark.config.io`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inimark.config.io import (
    extract_settings_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_default_template_text,
    load_defaults_dict,
    load_toml_dict,
    parse_toml_text,
)
from inimark.config.model import MutableSettings

if TYPE_CHECKING:
    from pathlib import Path


def test_template_matches_runtime_defaults() -> None:
    """The packaged template parses to the runtime defaults and drops the license block."""
    text = load_default_template_text()
    assert "topmark:header" not in text
    assert parse_toml_text(text) == load_defaults_dict()
    assert MutableSettings.from_toml_dict(parse_toml_text(text)).freeze() == (
        MutableSettings.from_defaults().freeze()
    )


def test_defaults_dict_is_a_fresh_copy() -> None:
    """Mutating the returned defaults does not affect later calls."""
    first = load_defaults_dict()
    first["io"]["encoding"] = "latin-1"
    assert load_defaults_dict()["io"]["encoding"] == "utf-8"


def test_load_toml_dict_failures(tmp_path: Path) -> None:
    """Missing and malformed files load as an empty dict."""
    broken = tmp_path / "broken.toml"
    broken.write_text("[io\nencoding = ", encoding="utf-8")
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    assert load_toml_dict(broken) == {}


def test_extract_settings_table(tmp_path: Path) -> None:
    """Plain files use the whole document; ``pyproject.toml`` uses ``[tool.inimark]``."""
    data = {"io": {"encoding": "utf-8"}}
    assert extract_settings_table(tmp_path / "inimark.toml", data) is data
    pyproject = tmp_path / "pyproject.toml"
    assert extract_settings_table(pyproject, data) is None
    nested = {"tool": {"inimark": data}}
    assert extract_settings_table(pyproject, nested) == data


def test_getters() -> None:
    """Getters return typed values and ``None`` (or ``{}``) for the wrong shape."""
    table = {
        "s": "text",
        "i": 3,
        "b": True,
        "l": ["a", "b"],
        "t": {"k": 1},
        "mixed": ["a", 1],
    }
    assert get_string_value_or_none(table, "s") == "text"
    assert get_string_value_or_none(table, "i") is None
    assert get_int_value_or_none(table, "i") == 3
    assert get_int_value_or_none(table, "b") is None
    assert get_bool_value_or_none(table, "b") is True
    assert get_bool_value_or_none(table, "s") is None
    assert get_string_list_value_or_none(table, "l") == ["a", "b"]
    assert get_string_list_value_or_none(table, "s") == ["text"]
    assert get_string_list_value_or_none(table, "mixed") is None
    assert get_string_list_value_or_none(table, "missing") is None
    assert get_table_value(table, "t") == {"k": 1}
    assert get_table_value(table, "s") == {}
    assert get_table_value(table, "missing") == {}
