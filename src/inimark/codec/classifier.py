# topmark:header:start
#
#   project      : IniMark
#   file         : classifier.py
#   file_relpath : src/inimark/codec/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classify one text line into a typed token of the extended INI grammar.

```
###--<text>--###      header line
##--<text>--##        footer line
;<text>  or  #<text>  comment line
[<name>]              enabled section
#--[<name>]--#        disabled section
<key>=<value>         enabled property
#--<key>=<value>--#   disabled property
```

[`classify`][inimark.codec.classifier.classify] applies the rules in that order
(header, footer, comment, section, property) and returns one member of the
[`LineToken`][inimark.codec.classifier.LineToken] union; consumers dispatch on it
with ``match``. Anything else is an
[`UnrecognizedLine`][inimark.codec.classifier.UnrecognizedLine], which every
consumer drops.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Union

from inimark.codec.affix import Affix, is_disabled, is_footer, is_header

_SECTION_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<pre>#--)?\[(?P<name>.+)\](?P<post>--#)?",
)

# Keys exclude '[', '#', ';' and whitespace; the value runs to the end of the
# line, minus a trailing disabled marker.
_PROPERTY_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<pre>#--)?(?P<key>[^\[#;\s]+?)=(?P<value>.*?)(?P<post>--#)?",
)


@dataclass(frozen=True, slots=True)
class BlankLine:
    """An empty or whitespace-only line."""


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """A ``###--text--###`` line; ``text`` is the raw (still wrapped) line."""

    text: str


@dataclass(frozen=True, slots=True)
class FooterLine:
    """A ``##--text--##`` line; ``text`` is the raw (still wrapped) line."""

    text: str


@dataclass(frozen=True, slots=True)
class CommentLine:
    """A ``;text`` or ``#text`` line; ``text`` is the raw (still prefixed) line."""

    text: str


@dataclass(frozen=True, slots=True)
class SectionLine:
    """A ``[name]`` or ``#--[name]--#`` line; ``name`` is trimmed and never blank."""

    name: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class PropertyLine:
    """A ``key=value`` or ``#--key=value--#`` line."""

    key: str
    value: str
    enabled: bool


@dataclass(frozen=True, slots=True)
class UnrecognizedLine:
    """Any line matching none of the grammar rules."""

    text: str


LineToken = Union[
    BlankLine,
    HeaderLine,
    FooterLine,
    CommentLine,
    SectionLine,
    PropertyLine,
    UnrecognizedLine,
]


def _both_markers(match: re.Match[str]) -> bool:
    return match.group("pre") is not None and match.group("post") is not None


def is_comment(line: str) -> bool:
    """Return True if a trimmed line is a comment line.

    A comment starts with ``;`` or ``#``, is not a header, footer or disabled
    line, does not start with ``[`` nor end with ``]``, and contains no ``=``.
    """
    return (
        line.startswith((Affix.COMMENT.prefix, "#"))
        and not is_disabled(line)
        and not is_footer(line)
        and not is_header(line)
        and not line.startswith(Affix.SECTION.prefix)
        and not line.endswith(Affix.SECTION.suffix)
        and "=" not in line
    )


def classify(line: str) -> LineToken:
    """Classify a single line of text.

    Leading and trailing whitespace is ignored.

    Args:
        line (str): One line, without its line terminator.

    Returns:
        LineToken: The typed token; the first matching rule wins.
    """
    text = line.strip()
    if not text:
        return BlankLine()
    if is_header(text):
        return HeaderLine(text)
    if is_footer(text):
        return FooterLine(text)
    if is_comment(text):
        return CommentLine(text)

    m = _SECTION_RE.fullmatch(text)
    if m is not None and m.group("name").strip():
        return SectionLine(name=m.group("name").strip(), enabled=not _both_markers(m))

    m = _PROPERTY_RE.fullmatch(text)
    if m is not None:
        return PropertyLine(
            key=m.group("key"),
            value=m.group("value"),
            enabled=not _both_markers(m),
        )

    return UnrecognizedLine(text)
