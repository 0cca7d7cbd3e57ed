# topmark:header:start
#
#   project      : IniMark
#   file         : errors.py
#   file_relpath : src/inimark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the IniMark library.

Library code raises these; the CLI maps them onto Click exceptions with
sysexits-style exit codes (see `inimark.cli.errors`).
"""

from __future__ import annotations


class InimarkError(Exception):
    """Base class for all IniMark library errors."""


class InvalidPathError(InimarkError, ValueError):
    """Raised when a destination path is not usable for writing.

    Attributes:
        path (str): The offending path as given by the caller.
    """

    def __init__(self, path: str, reason: str = "invalid path") -> None:
        self.path = path
        super().__init__(f"{reason}: {path!r}")
