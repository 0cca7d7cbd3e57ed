# topmark:header:start
#
#   project      : IniMark
#   file         : constants.py
#   file_relpath : src/inimark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

INIMARK_VERSION: str = get_version("inimark")

# Placeholder key/name carried by empty properties and sections:
SENTINEL_KEY: str = ";_;"

# Name of the bundled default config inside the package `inimark.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "inimark.config"
DEFAULT_TOML_CONFIG_NAME: str = "inimark-default.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

HEADER_BLOCK_END_MARKER: str = "topmark:header:end"

# Upsert rewrite defaults (lines held in memory before flushing to the temp file):
DEFAULT_CACHE_CAPACITY: int = 4096
DEFAULT_TEMP_SUFFIX: str = ".tmp"

DEFAULT_ENCODING: str = "utf-8"
DEFAULT_NEWLINE: str = "\n"

# Environment variables honored at runtime:
ENV_LOG_LEVEL: str = "INIMARK_LOG_LEVEL"
ENV_CONFIG_PATH: str = "INIMARK_CONFIG"
