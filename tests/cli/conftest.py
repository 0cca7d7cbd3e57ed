# topmark:header:start
#
#   project      : IniMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running IniMark through Click's test runner.

Paths passed to the CLI in these tests are absolute (under ``tmp_path``), so
the working directory does not matter.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from inimark.cli.exit_codes import ExitCode
from inimark.cli.main import cli
from inimark.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall the TRACE-level test logging replaced by the CLI entry point.

    Yields:
        None: Control to the test.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["show", "a.ini"]``.
            ``--no-color`` is prepended so output can be compared verbatim.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["get", str(path), "Person", "FirstName"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    args: list[str] = ["--no-color"]
    if isinstance(argv, str):
        args.append(argv)
    elif argv is not None:
        args.extend(argv)
    runner = CliRunner()
    return runner.invoke(cli, args, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_NOT_FOUND(result: Result) -> None:
    """Assert that a lookup command found nothing (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.NOT_FOUND, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
