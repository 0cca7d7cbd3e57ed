# topmark:header:start
#
#   project      : IniMark
#   file         : show.py
#   file_relpath : src/inimark/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark ``show`` command.

Prints a document, or only its first ``--limit`` sections, rendered with the
given filters.
"""

from __future__ import annotations

from pathlib import Path

import click

from inimark.cli.commands._common import (
    get_console,
    get_effective_settings,
    get_effective_verbosity,
    require_file,
)
from inimark.cli.options import render_options, resolve_filters
from inimark.config.logging import get_logger
from inimark.io.loader import load

logger = get_logger(__name__)


@click.command(
    name="show",
    help="Print an INI document (or its first N sections).",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Maximum number of sections to print (0 prints all).",
)
@render_options
@click.pass_context
def show_command(
    ctx: click.Context,
    file: Path,
    limit: int,
    filter_names: tuple[str, ...],
    formatted: bool,
) -> None:
    """Print ``file`` rendered with the selected filters."""
    console = get_console(ctx)
    settings = get_effective_settings(ctx)
    require_file(file)

    filters = resolve_filters(filter_names, formatted=formatted, default=settings.filters)
    document = load(file, limit, settings=settings)
    logger.debug("show %s: %d section(s), filters=%r", file, document.section_count, filters)

    text = document.to_string(filters)
    if text:
        console.print(text)
    if get_effective_verbosity(ctx) > 0:
        more = " (more available)" if document.has_more else ""
        console.warn(f"{document.section_count} section(s) shown{more}")
