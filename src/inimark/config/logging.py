# topmark:header:start
#
#   project      : IniMark
#   file         : logging.py
#   file_relpath : src/inimark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom IniMark logging with TRACE logging.

This module extends the standard logging module with IniMark-specific features:
a TRACE level below DEBUG (used for per-line codec decisions such as dropped
malformed lines), a logger class exposing ``trace()``, and colored output.

Library code only ever calls [`get_logger`][inimark.config.logging.get_logger];
handlers are installed by the CLI and by the test suite through
[`setup_logging`][inimark.config.logging.setup_logging].
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from inimark.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class InimarkLogger(logging.Logger):
    """Logger class for IniMark with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(InimarkLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records by severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Map a level name (``"TRACE"``, ``"debug"``) or a numeric string to a level.

    Returns ``None`` for unknown or empty input.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors INIMARK_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(ENV_LOG_LEVEL))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][inimark.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> InimarkLogger:
    """Retrieve an InimarkLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        InimarkLogger: An InimarkLogger instance.
    """
    return cast("InimarkLogger", logging.getLogger(name))
