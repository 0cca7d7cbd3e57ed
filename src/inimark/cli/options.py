# topmark:header:start
#
#   project      : IniMark
#   file         : options.py
#   file_relpath : src/inimark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolvers.

Program-output verbosity (``-v``/``-q``) is separate from internal logging,
which is configured through ``INIMARK_LOG_LEVEL``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from inimark.cli.errors import InimarkUsageError
from inimark.core.enum_mixins import enum_names
from inimark.model.types import Filters

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Returns:
        int: ``verbose_count`` when positive, ``-quiet_count`` otherwise (0 is the default).

    Raises:
        InimarkUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise InimarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count if verbose_count > 0 else -quiet_count


def resolve_filters(names: Iterable[str], *, formatted: bool, default: Filters) -> Filters:
    """Combine ``--filter`` names and ``--formatted`` into one `Filters` value.

    Falls back to ``default`` when neither option was given.
    """
    names = list(names)
    if not names and not formatted:
        return default
    try:
        filters = Filters.from_names(names)
    except ValueError as exc:
        raise InimarkUsageError(str(exc)) from exc
    return filters | Filters.FORMATTED if formatted else filters


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--no-color`` flag."""
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output.",
    )(f)


def render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--filter`` (repeatable) and ``--formatted`` to a command that prints text."""
    f = click.option(
        "--filter",
        "filter_names",
        multiple=True,
        type=click.Choice(enum_names(Filters), case_sensitive=False),
        help="Rendering filter; may be repeated (e.g. TRIM_COMMENT).",
    )(f)
    f = click.option(
        "--formatted",
        is_flag=True,
        default=False,
        help="Separate sections with blank lines.",
    )(f)
    return f
