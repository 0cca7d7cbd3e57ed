# topmark:header:start
#
#   project      : IniMark
#   file         : version.py
#   file_relpath : src/inimark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark ``version`` command.

Prints the IniMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from inimark.cli.commands._common import get_console, get_effective_verbosity
from inimark.constants import INIMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of IniMark.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of IniMark."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("IniMark version:", bold=True, underline=True))
        console.print(f"    {console.styled(INIMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(INIMARK_VERSION, bold=True))
