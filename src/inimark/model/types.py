# topmark:header:start
#
#   project      : IniMark
#   file         : types.py
#   file_relpath : src/inimark/model/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumerations shared by the value model, the serializer and the configuration layer."""

from __future__ import annotations

from enum import Enum, IntFlag
from typing import TYPE_CHECKING

from inimark.core.enum_mixins import enum_from_name

if TYPE_CHECKING:
    from collections.abc import Iterable


class CommentKind(str, Enum):
    """Role of a comment block; selects the affix used when rendering it."""

    COMMENT = "comment"
    HEADER = "header"
    FOOTER = "footer"


class Status(str, Enum):
    """Filter applied by `Section.get_properties` and `Document.get_sections`."""

    ALL = "all"
    ENABLED = "enabled"
    DISABLED = "disabled"

    def accepts(self, enabled: bool) -> bool:
        """Return True if an element with the given ``enabled`` flag passes this filter."""
        if self is Status.ALL:
            return True
        return enabled == (self is Status.ENABLED)


class Filters(IntFlag):
    """Rendering options for `to_string`.

    Attributes:
        NONE: Render everything.
        TRIM_COMMENT: Omit element comments (header/footer are governed separately).
        TRIM_HEADER: Omit the document header block.
        TRIM_FOOTER: Omit the document footer block.
        TRIM_DISABLED: Omit disabled documents, sections and properties.
        FORMATTED: Separate sections, header and footer with blank lines.
    """

    NONE = 0
    TRIM_COMMENT = 1 << 0
    TRIM_HEADER = 1 << 1
    TRIM_FOOTER = 1 << 2
    TRIM_DISABLED = 1 << 3
    FORMATTED = 1 << 4

    TRIM_COMMENT_DISABLED = TRIM_COMMENT | TRIM_DISABLED
    TRIM_COMMENT_DISABLED_FORMATTED = TRIM_COMMENT_DISABLED | FORMATTED
    TRIM_HEADER_FOOTER = TRIM_HEADER | TRIM_FOOTER
    TRIM_HEADER_FOOTER_FORMATTED = TRIM_HEADER_FOOTER | FORMATTED
    TRIM_COMMENT_HEADER_FOOTER = TRIM_COMMENT | TRIM_HEADER | TRIM_FOOTER
    TRIM_COMMENT_HEADER_FOOTER_FORMATTED = TRIM_COMMENT_HEADER_FOOTER | FORMATTED
    TRIM_COMMENT_HEADER_FOOTER_DISABLED = TRIM_COMMENT_HEADER_FOOTER | TRIM_DISABLED
    TRIM_COMMENT_HEADER_FOOTER_DISABLED_FORMATTED = TRIM_COMMENT_HEADER_FOOTER_DISABLED | FORMATTED

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Filters:
        """Combine flag names (case-insensitive) into one value.

        Raises:
            ValueError: If a name does not denote a `Filters` member.
        """
        result = cls.NONE
        for name in names:
            member = enum_from_name(cls, name, case_insensitive=True)
            if member is None:
                raise ValueError(f"Unknown filter name: {name!r}")
            result |= member
        return result
