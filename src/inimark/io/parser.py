# topmark:header:start
#
#   project      : IniMark
#   file         : parser.py
#   file_relpath : src/inimark/io/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble documents, sections, properties and comments from lines of text.

[`DocumentAssembler`][inimark.io.parser.DocumentAssembler] is the state machine
shared by in-memory parsing and by the streaming loader
(`inimark.io.loader`). It consumes one ``(line_index, line)`` pair at a time:

1. Blank lines are skipped; a pending comment is kept.
2. Header and footer lines go to the document header and footer.
3. Comment lines accumulate into the pending comment.
4. Section lines either stop the assembler (when the section limit is reached)
   or start/merge the current section, which takes the pending comment.
5. Property lines are added to the current section with the pending comment.
   Properties seen before any section are dropped.

Unrecognized lines are dropped and logged at TRACE level.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inimark.codec.classifier import (
    BlankLine,
    CommentLine,
    FooterLine,
    HeaderLine,
    PropertyLine,
    SectionLine,
    UnrecognizedLine,
    classify,
)
from inimark.codec.lines import split_lines
from inimark.config.logging import get_logger
from inimark.model.comment import Comment, CommentBuilder
from inimark.model.document import Document, DocumentBuilder
from inimark.model.property import Property, PropertyBuilder
from inimark.model.section import Section, SectionBuilder

if TYPE_CHECKING:
    from inimark.config.logging import InimarkLogger

logger: InimarkLogger = get_logger(__name__)


class DocumentAssembler:
    """Line-driven state machine populating a `DocumentBuilder`.

    Args:
        builder (DocumentBuilder): Receives header/footer lines, sections and properties.
        limit (int): Stop before the section line that would exceed ``limit`` distinct
            sections; ``0`` means no limit.

    Attributes:
        stopped_at (int): Line index to resume from after a limit stop, else ``-1``.
            When a comment precedes the next section, this is the index of its first
            line, so the comment is not lost on resumption.
    """

    def __init__(self, builder: DocumentBuilder, limit: int = 0) -> None:
        self.builder = builder
        self.limit = max(limit, 0)
        self.stopped_at: int = -1
        self._pending = CommentBuilder()
        self._pending_start: int = -1
        self._current: SectionBuilder | None = None
        self._loaded: set[str] = set()

    @property
    def sections_loaded(self) -> int:
        """Number of distinct sections assembled so far."""
        return len(self._loaded)

    def _take_pending(self) -> Comment:
        comment = self._pending.build()
        self._pending = CommentBuilder()
        self._pending_start = -1
        return comment

    def _flush_section(self) -> None:
        if self._current is not None:
            self.builder.append_section(self._current.build())
            self._current = None

    def finish(self) -> DocumentBuilder:
        """Hand the section in progress over to the builder and return the builder."""
        self._flush_section()
        return self.builder

    def feed(self, index: int, line: str) -> bool:
        """Process one line.

        Args:
            index (int): Zero-based line index within the source.
            line (str): The line, with or without its terminator.

        Returns:
            bool: False when the section limit was reached and the caller must stop
            feeding lines (``line`` itself was not consumed).
        """
        match classify(line):
            case BlankLine():
                pass
            case HeaderLine(text=text):
                self.builder.append_header_line(text)
            case FooterLine(text=text):
                self.builder.append_footer_line(text)
            case CommentLine(text=text):
                if self._pending.is_empty:
                    self._pending_start = index
                self._pending.append_line(text)
            case SectionLine(name=name, enabled=enabled):
                if self.limit and name not in self._loaded and self.sections_loaded >= self.limit:
                    self.stopped_at = self._pending_start if self._pending_start >= 0 else index
                    logger.debug("Section limit %d reached at line %d", self.limit, index)
                    self._flush_section()
                    return False
                self._flush_section()
                self._current = (
                    Section.builder()
                    .with_name(name)
                    .with_comment(self._take_pending())
                    .enable(enabled)
                )
                self._loaded.add(name)
            case PropertyLine(key=key, value=value, enabled=enabled):
                comment = self._take_pending()
                if self._current is None:
                    logger.trace("Line %d: property %r outside any section dropped", index, key)
                else:
                    self._current.append_property(
                        Property.builder()
                        .with_key(key)
                        .with_value(value)
                        .with_comment(comment)
                        .enable(enabled)
                        .build()
                    )
            case UnrecognizedLine(text=text):
                logger.trace("Line %d: unrecognized line dropped: %r", index, text)
        return True


def parse_document_into(builder: DocumentBuilder, text: str | None) -> DocumentBuilder:
    """Feed every line of ``text`` into ``builder``."""
    if not text or not text.strip():
        return builder
    assembler = DocumentAssembler(builder)
    for index, line in enumerate(split_lines(text)):
        assembler.feed(index, line)
    return assembler.finish()


def parse_section_into(builder: SectionBuilder, text: str | None) -> SectionBuilder:
    """Populate ``builder`` from the first section of ``text``.

    The comment right above the ``[name]`` line becomes the section comment; the
    following properties keep their own comments. Parsing stops at the next
    section line; header, footer and unrecognized lines are ignored.
    """
    if not text or not text.strip():
        return builder
    found = False
    pending = CommentBuilder()
    for line in split_lines(text):
        match classify(line):
            case CommentLine(text=comment_text):
                pending.append_line(comment_text)
            case SectionLine(name=name, enabled=enabled):
                if found:
                    break
                found = True
                builder.with_name(name).with_comment(pending.build()).enable(enabled)
                pending = CommentBuilder()
            case PropertyLine(key=key, value=value, enabled=enabled) if found:
                builder.append_property(
                    Property.builder()
                    .with_key(key)
                    .with_value(value)
                    .with_comment(pending.build())
                    .enable(enabled)
                    .build()
                )
                pending = CommentBuilder()
            case _:
                pass
    return builder


def parse_property_into(builder: PropertyBuilder, text: str | None) -> PropertyBuilder:
    """Populate ``builder`` from ``text``: comments, then the first ``key=value`` line."""
    if not text or not text.strip():
        return builder
    comment = builder.comment.thaw()
    for line in split_lines(text):
        match classify(line):
            case CommentLine(text=comment_text):
                comment.append_line(comment_text)
            case PropertyLine(key=key, value=value, enabled=enabled):
                builder.with_key(key).with_value(value).enable(enabled)
                break
            case _:
                pass
    builder.comment = comment.build()
    return builder


def parse_document(text: str | None) -> Document:
    """Parse document text into a [`Document`][inimark.model.document.Document]."""
    return parse_document_into(Document.builder(), text).build()


def parse_section(text: str | None) -> Section:
    """Parse the first section of ``text`` (the empty section when there is none)."""
    return parse_section_into(Section.builder(), text).build()


def parse_property(text: str | None) -> Property:
    """Parse the first property of ``text`` (the empty property when there is none)."""
    return parse_property_into(Property.builder(), text).build()


def parse_comment(text: str | None) -> Comment:
    """Parse ``text`` into a comment block, one entry per non-blank line."""
    return Comment.builder().parse(text).build()
