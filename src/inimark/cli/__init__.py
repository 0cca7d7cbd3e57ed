# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark CLI package.

This package groups the Click command definitions and supporting utilities
for the ``inimark`` command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        inimark = "inimark.cli.main:cli"

All subcommands live in `inimark.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
