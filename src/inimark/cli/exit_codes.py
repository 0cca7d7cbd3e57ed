# topmark:header:start
#
#   project      : IniMark
#   file         : exit_codes.py
#   file_relpath : src/inimark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the IniMark CLI.

IniMark aligns with the BSD ``sysexits`` convention where practical, so that
other tooling can interpret failures consistently. ``NOT_FOUND = 1`` is used by
the lookup commands (``get``, ``section``) when nothing matches.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the IniMark CLI.

    Attributes:
        SUCCESS: Successful execution.
        NOT_FOUND: The requested value or section does not exist.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding/encoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    NOT_FOUND = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG
