# topmark:header:start
#
#   project      : IniMark
#   file         : get.py
#   file_relpath : src/inimark/cli/commands/get.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark ``get`` command: print one property value."""

from __future__ import annotations

from pathlib import Path

import click

from inimark.cli.commands._common import get_console, get_effective_settings, require_file
from inimark.cli.exit_codes import ExitCode
from inimark.io.reader import read_value


@click.command(
    name="get",
    help="Print the value of KEY in SECTION (exit 1 when empty or missing).",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("section")
@click.argument("key")
@click.pass_context
def get_command(ctx: click.Context, file: Path, section: str, key: str) -> None:
    """Print the value of ``key`` in ``[section]``."""
    console = get_console(ctx)
    require_file(file)
    value = read_value(file, section, key, settings=get_effective_settings(ctx))
    if not value:
        ctx.exit(ExitCode.NOT_FOUND)
    console.print(value)
