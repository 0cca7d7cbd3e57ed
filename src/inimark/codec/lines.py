# topmark:header:start
#
#   project      : IniMark
#   file         : lines.py
#   file_relpath : src/inimark/codec/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line splitting helpers shared by the in-memory parser and the comment builder."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` on ``\r\n``, ``\r`` or ``\n`` (mixed endings allowed)."""
    return _NEWLINE_RE.split(text)


def content_lines(text: str) -> Iterator[str]:
    """Yield the trimmed, non-blank lines of ``text``."""
    for line in split_lines(text):
        stripped = line.strip()
        if stripped:
            yield stripped


def strip_line_ending(line: str) -> str:
    """Drop the terminator of a line read from a text stream, keeping other whitespace."""
    return line.rstrip("\r\n")
