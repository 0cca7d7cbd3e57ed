# topmark:header:start
#
#   project      : IniMark
#   file         : _common.py
#   file_relpath : src/inimark/cli/commands/_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plumbing shared by the subcommands: context lookups and path checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inimark.cli.errors import InimarkFileNotFoundError
from inimark.config.model import get_settings
from inimark.io.paths import is_valid_file, is_valid_path

if TYPE_CHECKING:
    from pathlib import Path

    from inimark.cli.console import ConsoleLike
    from inimark.config.model import Settings


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_settings(ctx: click.Context) -> Settings:
    """Return the settings stored by the group callback (process defaults otherwise)."""
    ctx.ensure_object(dict)
    settings: Settings | None = ctx.obj.get("settings")
    return settings if settings is not None else get_settings()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``> 0`` verbose, ``< 0`` quiet)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def require_file(path: Path) -> None:
    """Raise when ``path`` is not an existing, non-empty file.

    Raises:
        InimarkFileNotFoundError: If the file is missing, empty or a directory.
    """
    if not is_valid_file(path):
        raise InimarkFileNotFoundError(f"Not a readable, non-empty file: {path}")


def require_path(path: Path) -> None:
    """Raise when ``path`` cannot name a file.

    Raises:
        InimarkFileNotFoundError: If the path is blank or denotes a directory.
    """
    if not is_valid_path(path):
        raise InimarkFileNotFoundError(f"Invalid file path: {path}")
