# topmark:header:start
#
#   project      : IniMark
#   file         : main.py
#   file_relpath : src/inimark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``inimark`` command.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``console``: the [`ClickConsole`][inimark.cli.console.ClickConsole] for program output;
- ``verbosity_level``: the program-output verbosity (``-v``/``-q``);
- ``settings``: the frozen [`Settings`][inimark.config.model.Settings].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from inimark.cli.commands.get import get_command
from inimark.cli.commands.section import section_command
from inimark.cli.commands.set import set_command
from inimark.cli.commands.show import show_command
from inimark.cli.commands.version import version_command
from inimark.cli.console import ClickConsole
from inimark.cli.errors import InimarkConfigError
from inimark.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from inimark.config.logging import get_logger, resolve_env_log_level, setup_logging
from inimark.config.model import get_settings, load_settings

if TYPE_CHECKING:
    from inimark.cli.console import ConsoleLike
    from inimark.config.logging import InimarkLogger

logger: InimarkLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, color, logging, settings) on the Click context.

    Raises:
        InimarkConfigError: If the settings file yields invalid settings.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    try:
        settings = load_settings(config_path) if config_path is not None else get_settings()
    except ValueError as exc:
        raise InimarkConfigError(f"Invalid settings: {exc}") from exc
    ctx.obj["settings"] = settings
    logger.debug("CLI settings: %s", settings)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="IniMark: read, page through and edit extended INI files.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (inimark.toml or pyproject.toml with [tool.inimark]).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the IniMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'inimark show FILE' to print a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(show_command)

cli.add_command(get_command)

cli.add_command(set_command)

cli.add_command(section_command)

if __name__ == "__main__":
    cli()
