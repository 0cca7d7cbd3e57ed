# topmark:header:start
#
#   project      : IniMark
#   file         : comment.py
#   file_relpath : src/inimark/model/comment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comment blocks: element comments, document headers and document footers.

A [`Comment`][inimark.model.comment.Comment] is immutable; edits go through a
[`CommentBuilder`][inimark.model.comment.CommentBuilder] obtained from
``Comment.builder()`` or ``comment.thaw()``. Lines are stored *without* their
affixes and are unique by that cleaned form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inimark.codec.affix import clean_affix
from inimark.codec.lines import content_lines
from inimark.model.types import CommentKind, Filters
from inimark.rendering.text import render_comment

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class Comment:
    """Immutable, ordered block of comment lines.

    Attributes:
        kind (CommentKind): Selects the affix used when rendering.
        lines (tuple[str, ...]): Cleaned, non-blank, unique lines in insertion order.
    """

    kind: CommentKind = CommentKind.COMMENT
    lines: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when the block holds no lines."""
        return not self.lines

    @property
    def line_count(self) -> int:
        """Number of lines in the block."""
        return len(self.lines)

    @classmethod
    def builder(
        cls,
        source: Comment | Iterable[str] | None = None,
        *,
        kind: CommentKind | None = None,
    ) -> CommentBuilder:
        """Return a builder seeded from an existing comment or from raw lines.

        Args:
            source (Comment | Iterable[str] | None): Comment to copy, or raw lines to append.
            kind (CommentKind | None): Overrides the kind (defaults to the source's kind,
                or ``COMMENT``).

        Returns:
            CommentBuilder: A new, independent builder.
        """
        builder = CommentBuilder()
        if isinstance(source, Comment):
            builder.kind = source.kind
            builder.lines = list(source.lines)
        elif source is not None:
            for line in source:
                builder.append_line(line)
        if kind is not None:
            builder.kind = kind
        return builder

    def thaw(self) -> CommentBuilder:
        """Return a builder holding a copy of this comment."""
        return Comment.builder(self)

    def to_string(self, filters: Filters = Filters.NONE) -> str:
        """Render the block, one wrapped line per entry.

        Filters do not apply at this level: whether a comment is shown is decided by
        the element that owns it.
        """
        return render_comment(self, filters)

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class CommentBuilder:
    """Mutable staging area for a [`Comment`][inimark.model.comment.Comment]."""

    kind: CommentKind = CommentKind.COMMENT
    lines: list[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        """Number of lines staged so far."""
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        """True when no line is staged."""
        return not self.lines

    def as_type(self, kind: CommentKind) -> CommentBuilder:
        """Set the comment kind."""
        self.kind = kind
        return self

    def append_line(self, line: str | None) -> CommentBuilder:
        """Append the affix-free form of ``line``.

        Blank lines and lines already present (after cleaning) are ignored.
        """
        cleaned = clean_affix(line)
        if cleaned and cleaned not in self.lines:
            self.lines.append(cleaned)
        return self

    def remove_line_at(self, index: int) -> CommentBuilder:
        """Remove the line at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self.lines):
            del self.lines[index]
        return self

    def merge(self, other: Comment | None) -> CommentBuilder:
        """Append the lines of ``other`` that are not present yet."""
        if other is not None:
            for line in other.lines:
                self.append_line(line)
        return self

    def parse(self, text: str | None) -> CommentBuilder:
        """Append each non-blank line of ``text``."""
        if text:
            for line in content_lines(text):
                self.append_line(line)
        return self

    def clear(self) -> CommentBuilder:
        """Drop all staged lines."""
        self.lines.clear()
        return self

    def build(self) -> Comment:
        """Freeze the staged lines into a [`Comment`][inimark.model.comment.Comment]."""
        return Comment(kind=self.kind, lines=tuple(self.lines))


def coerce_comment(
    comment: Comment | str | None,
    kind: CommentKind = CommentKind.COMMENT,
) -> Comment:
    """Coerce ``comment`` into a block of the given ``kind``.

    A string is parsed line by line and ``None`` gives an empty block.
    """
    if comment is None:
        return Comment(kind=kind)
    if isinstance(comment, str):
        return Comment.builder(kind=kind).parse(comment).build()
    if comment.kind is kind:
        return comment
    return Comment.builder(comment, kind=kind).build()
