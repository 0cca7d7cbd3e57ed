# topmark:header:start
#
#   project      : IniMark
#   file         : affix.py
#   file_relpath : src/inimark/codec/affix.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Affix codec: wrap text in the marker pair of an entity kind, and strip it again.

The extended INI format encodes line roles with fixed prefix/suffix pairs:

| Kind     | Prefix  | Suffix  |
|----------|---------|---------|
| header   | ``###--`` | ``--###`` |
| footer   | ``##--``  | ``--##``  |
| disabled | ``#--``   | ``--#``   |
| comment  | ``;``     |           |
| section  | ``[``     | ``]``     |

``disabled`` composes with ``section`` and with a raw ``key=value`` line; it does
not compose with ``header``/``footer``.

All functions here are pure.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Final


class Affix(Enum):
    """Prefix/suffix pair of each entity kind."""

    HEADER = ("###--", "--###")
    FOOTER = ("##--", "--##")
    DISABLED = ("#--", "--#")
    COMMENT = (";", "")
    SECTION = ("[", "]")

    def __init__(self, prefix: str, suffix: str) -> None:
        self.prefix: str = prefix
        self.suffix: str = suffix

    def wrap(self, text: str) -> str:
        """Return ``text`` enclosed in this kind's prefix and suffix."""
        return f"{self.prefix}{text}{self.suffix}"

    def encloses(self, text: str) -> bool:
        """Return True if ``text`` starts with the prefix AND ends with the suffix.

        Prefix and suffix may not overlap, so ``"###--###"`` is not a header.
        """
        return (
            len(text) >= len(self.prefix) + len(self.suffix)
            and text.startswith(self.prefix)
            and text.endswith(self.suffix)
        )


# Leading run: any of the prefixes, a bare '#', or whitespace.
# Trailing run: any of the suffixes, a bare '#' or ';', or whitespace.
_CLEAN_RE: Final[re.Pattern[str]] = re.compile(
    r"(?:###--|##--|#--|;|#|\s|\[)*(?P<clean>.+?)(?:--###|--##|--#|#|;|\]|\s)*",
    re.DOTALL,
)


def as_header(text: str) -> str:
    """Wrap ``text`` as a header line (``###--text--###``)."""
    return Affix.HEADER.wrap(text)


def as_footer(text: str) -> str:
    """Wrap ``text`` as a footer line (``##--text--##``)."""
    return Affix.FOOTER.wrap(text)


def as_disabled(text: str) -> str:
    """Wrap ``text`` (a section or ``key=value`` line) as disabled (``#--text--#``)."""
    return Affix.DISABLED.wrap(text)


def as_comment(text: str) -> str:
    """Prefix ``text`` with the comment marker (``;text``)."""
    return Affix.COMMENT.wrap(text)


def as_section(text: str) -> str:
    """Wrap ``text`` as a section header (``[text]``)."""
    return Affix.SECTION.wrap(text)


def is_header(text: str) -> bool:
    """Return True if ``text`` carries both header markers."""
    return Affix.HEADER.encloses(text)


def is_footer(text: str) -> bool:
    """Return True if ``text`` carries both footer markers."""
    return Affix.FOOTER.encloses(text)


def is_disabled(text: str) -> bool:
    """Return True if ``text`` carries both disabled markers."""
    return Affix.DISABLED.encloses(text)


def clean_affix(text: str | None) -> str:
    """Strip any leading and trailing affix runs from ``text``.

    Leading runs may mix ``###--``, ``##--``, ``#--``, ``;``, ``#``, ``[`` and
    whitespace; trailing runs may mix ``--###``, ``--##``, ``--#``, ``#``, ``;``,
    ``]`` and whitespace. The inner text is returned trimmed.

    Args:
        text (str | None): Raw text, possibly wrapped in markers.

    Returns:
        str: The inner text, or ``""`` for ``None`` or blank input.

    Example:
        ```python
        assert clean_affix(";# #; text;;##  ; # ") == "text"
        ```
    """
    if text is None or not text.strip():
        return ""
    match = _CLEAN_RE.fullmatch(text)
    if match is None:
        return text.strip()
    return match.group("clean").strip()
