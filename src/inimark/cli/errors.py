# topmark:header:start
#
#   project      : IniMark
#   file         : errors.py
#   file_relpath : src/inimark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IniMark CLI.

Raise these in commands to exit with a standardized message and exit code.
When a project console is present in the Click context, errors are printed
through it; otherwise Click's default styling applies.
"""

from __future__ import annotations

from typing import IO, Any

import click

from inimark.cli.exit_codes import ExitCode


class InimarkCliError(click.ClickException):
    """Base class for all IniMark CLI errors."""

    exit_code = ExitCode.IO_ERROR

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class InimarkUsageError(InimarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class InimarkConfigError(InimarkCliError):
    """Error for configuration errors (unreadable or invalid settings)."""

    exit_code = ExitCode.CONFIG_ERROR


class InimarkFileNotFoundError(InimarkCliError):
    """Error when an input path is invalid or does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class InimarkPermissionDeniedError(InimarkCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class InimarkIOError(InimarkCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class InimarkEncodingError(InimarkCliError):
    """Error for text decoding/encoding errors."""

    exit_code = ExitCode.ENCODING_ERROR
