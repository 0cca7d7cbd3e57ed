# topmark:header:start
#
#   project      : IniMark
#   file         : set.py
#   file_relpath : src/inimark/cli/commands/set.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark ``set`` command: single-property upsert."""

from __future__ import annotations

from pathlib import Path

import click

from inimark.cli.commands._common import (
    get_console,
    get_effective_settings,
    get_effective_verbosity,
    require_path,
)
from inimark.cli.errors import (
    InimarkEncodingError,
    InimarkIOError,
    InimarkPermissionDeniedError,
    InimarkUsageError,
)
from inimark.io.writer import upsert


@click.command(
    name="set",
    help="Set KEY=VALUE in SECTION, creating the file or section when missing.",
)
@click.argument("file", type=click.Path(path_type=Path))
@click.argument("section")
@click.argument("key")
@click.argument("value")
@click.option(
    "--update/--append",
    "update_existing",
    default=None,
    help="Replace existing KEY lines, or keep them and add a new line "
    "(default: [writer].update_existing).",
)
@click.pass_context
def set_command(
    ctx: click.Context,
    file: Path,
    section: str,
    key: str,
    value: str,
    update_existing: bool | None,
) -> None:
    """Upsert ``key=value`` into ``[section]`` of ``file``."""
    console = get_console(ctx)
    require_path(file)
    try:
        result = upsert(
            file, section, key, value, update_existing, settings=get_effective_settings(ctx)
        )
    except UnicodeError as exc:
        raise InimarkEncodingError(f"{file}: {exc}") from exc
    except PermissionError as exc:
        raise InimarkPermissionDeniedError(str(exc)) from exc
    except OSError as exc:
        raise InimarkIOError(str(exc)) from exc
    except ValueError as exc:
        raise InimarkUsageError(str(exc)) from exc

    if get_effective_verbosity(ctx) < 0:
        return
    status = result.status.colored() if console.enable_color else result.status.value
    console.print(f"{result.path}: {status}")
    if get_effective_verbosity(ctx) > 0:
        detail = f"[{section.strip()}] {key.strip()}={value}"
        console.print(f"    {detail} ({result.bytes_written} bytes)")
