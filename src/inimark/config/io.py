# topmark:header:start
#
#   project      : IniMark
#   file         : io.py
#   file_relpath : src/inimark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values from them.

Sources:
    - the runtime defaults, defined in code (`load_defaults_dict`);
    - the packaged, annotated template ``inimark-default.toml``;
    - on-disk ``inimark.toml`` files or the ``[tool.inimark]`` table of a
      ``pyproject.toml``.

Parsing is done with ``tomlkit`` and returned as plain ``dict`` structures.
Getters never raise: a missing key yields the default, a value of the wrong
shape yields the default and a warning.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from inimark.config.keys import Toml
from inimark.config.logging import get_logger
from inimark.constants import (
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_ENCODING,
    DEFAULT_NEWLINE,
    DEFAULT_TEMP_SUFFIX,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOML_NAME,
    HEADER_BLOCK_END_MARKER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from inimark.config.logging import InimarkLogger

TomlTable = dict[str, Any]

logger: InimarkLogger = get_logger(__name__)


# --- TOML file I/O ---


def load_defaults_dict() -> TomlTable:
    """Return IniMark's runtime defaults as a TOML-shaped dict.

    Performs no I/O. The returned value is a new dict so callers can mutate it.
    """
    return {
        Toml.SECTION_IO: {
            Toml.KEY_ENCODING: DEFAULT_ENCODING,
            Toml.KEY_NEWLINE: DEFAULT_NEWLINE,
        },
        Toml.SECTION_WRITER: {
            Toml.KEY_CACHE_CAPACITY: DEFAULT_CACHE_CAPACITY,
            Toml.KEY_TEMP_SUFFIX: DEFAULT_TEMP_SUFFIX,
            Toml.KEY_UPDATE_EXISTING: False,
        },
        Toml.SECTION_RENDER: {
            Toml.KEY_FILTERS: [],
        },
    }


def load_default_template_text() -> str:
    """Return the bundled ``inimark-default.toml`` without its license header block.

    Raises:
        OSError: If the packaged resource cannot be read.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    text: str = resource.read_text(encoding="utf-8")
    lines: list[str] = text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_BLOCK_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return text


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        tomlkit.exceptions.ParseError: On malformed TOML.
    """
    return tomlkit.parse(text).unwrap()


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file, returning ``{}`` when it cannot be read or parsed."""
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error("Error reading TOML from %s: %s", path, exc)
    except TomlkitParseError as exc:
        logger.error("Error parsing TOML from %s: %s", path, exc)
    except (TypeError, ValueError) as exc:
        logger.error("Invalid TOML data in %s: %s", path, exc)
    return {}


def extract_settings_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the IniMark table of a parsed file.

    For ``pyproject.toml`` this is ``[tool.inimark]`` (``None`` when absent);
    for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool = data.get(Toml.SECTION_TOOL)
    section = tool.get(Toml.SECTION_TOOL_INIMARK) if isinstance(tool, dict) else None
    if not isinstance(section, dict) or not section:
        logger.debug("[tool.inimark] section missing in %s", path)
        return None
    return section


# --- Getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key``, or ``{}`` (with a warning) when it is not a table."""
    value: Any = table.get(key, {})
    if isinstance(value, dict):
        return value
    logger.warning("Expected a table for [%s], got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string at ``key``, or ``None`` when missing or not a string."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for %r, got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Return the integer at ``key``, or ``None`` when missing or not an integer."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for %r, got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Return the boolean at ``key``, or ``None`` when missing or not a boolean."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %r, got %r; ignoring", key, value)
    return None


def get_string_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return the list of strings at ``key``.

    A bare string is accepted as a one-item list. Returns ``None`` when the key is
    missing or the value has another shape.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return [str(v) for v in value]
    logger.warning("Expected a list of strings for %r, got %r; ignoring", key, value)
    return None
