# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/codec/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-level codec of the extended INI grammar (affixes and line classification)."""

from __future__ import annotations

from inimark.codec.affix import (
    Affix,
    as_comment,
    as_disabled,
    as_footer,
    as_header,
    as_section,
    clean_affix,
    is_disabled,
    is_footer,
    is_header,
)
from inimark.codec.classifier import (
    BlankLine,
    CommentLine,
    FooterLine,
    HeaderLine,
    LineToken,
    PropertyLine,
    SectionLine,
    UnrecognizedLine,
    classify,
    is_comment,
)
from inimark.codec.lines import content_lines, split_lines, strip_line_ending

__all__ = [
    "Affix",
    "BlankLine",
    "CommentLine",
    "FooterLine",
    "HeaderLine",
    "LineToken",
    "PropertyLine",
    "SectionLine",
    "UnrecognizedLine",
    "as_comment",
    "as_disabled",
    "as_footer",
    "as_header",
    "as_section",
    "classify",
    "clean_affix",
    "content_lines",
    "is_comment",
    "is_disabled",
    "is_footer",
    "is_header",
    "split_lines",
    "strip_line_ending",
]
