# topmark:header:start
#
#   project      : IniMark
#   file         : keys.py
#   file_relpath : src/inimark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for IniMark configuration.

These names are the external configuration API (``inimark.toml`` and
``[tool.inimark]`` in ``pyproject.toml``); renaming one is a breaking change.
The ordering mirrors ``inimark-default.toml``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by IniMark configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_INIMARK: Final[str] = "inimark"

    # [io]
    SECTION_IO: Final[str] = "io"

    KEY_ENCODING: Final[str] = "encoding"
    KEY_NEWLINE: Final[str] = "newline"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_CACHE_CAPACITY: Final[str] = "cache_capacity"
    KEY_TEMP_SUFFIX: Final[str] = "temp_suffix"
    KEY_UPDATE_EXISTING: Final[str] = "update_existing"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_FILTERS: Final[str] = "filters"
