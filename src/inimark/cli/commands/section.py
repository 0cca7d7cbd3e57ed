# topmark:header:start
#
#   project      : IniMark
#   file         : section.py
#   file_relpath : src/inimark/cli/commands/section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark ``section`` command: print one section."""

from __future__ import annotations

from pathlib import Path

import click

from inimark.cli.commands._common import get_console, get_effective_settings, require_file
from inimark.cli.exit_codes import ExitCode
from inimark.cli.options import render_options, resolve_filters
from inimark.io.reader import read_section


@click.command(
    name="section",
    help="Print section NAME (exit 1 when absent).",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("name")
@render_options
@click.pass_context
def section_command(
    ctx: click.Context,
    file: Path,
    name: str,
    filter_names: tuple[str, ...],
    formatted: bool,
) -> None:
    """Print section ``name`` of ``file``."""
    console = get_console(ctx)
    settings = get_effective_settings(ctx)
    require_file(file)
    section = read_section(file, name, settings=settings)
    if section is None:
        ctx.exit(ExitCode.NOT_FOUND)
    filters = resolve_filters(filter_names, formatted=formatted, default=settings.filters)
    console.print(section.to_string(filters))
