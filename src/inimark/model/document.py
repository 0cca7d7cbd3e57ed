# topmark:header:start
#
#   project      : IniMark
#   file         : document.py
#   file_relpath : src/inimark/model/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documents: header block, named sections and footer block.

Design:
    - [`Document`][inimark.model.document.Document] is frozen and holds tuples;
      it can be shared freely.
    - [`DocumentBuilder`][inimark.model.document.DocumentBuilder] holds private
      lists and is the only place where invariants are enforced: section names
      are unique (appending a known name merges into the existing section), and
      removals by index/name are no-ops when the target is missing.
    - Loading is bounded and resumable: after a limited ``load`` the document
      records ``resume_cursor``, the line index where ``load_next`` resumes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inimark.constants import SENTINEL_KEY
from inimark.io.paths import is_valid_path
from inimark.model.comment import Comment, coerce_comment
from inimark.model.section import Section
from inimark.model.types import CommentKind, Filters, Status
from inimark.rendering.text import render_document

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from inimark.config.model import Settings
    from inimark.io.paths import PathLike
    from inimark.io.writer import WriteResult
    from inimark.model.property import Property


def index_of_section(sections: Sequence[Section], name: str | None) -> int:
    """Return the index of the section called ``name``, or ``-1``."""
    for i, section in enumerate(sections):
        if section.name == name:
            return i
    return -1


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable extended INI document.

    Attributes:
        header (Comment): Header block (kind ``HEADER``).
        footer (Comment): Footer block (kind ``FOOTER``).
        enabled (bool): False renders every section disabled.
        file_path (str): Source/destination file, ``""`` when unset.
        resume_cursor (int): Line index where the next page starts, ``-1`` when there
            is nothing left to load.
        sections (tuple[Section, ...]): Sections in insertion order, unique by name.
    """

    header: Comment = field(default_factory=lambda: Comment(kind=CommentKind.HEADER))
    footer: Comment = field(default_factory=lambda: Comment(kind=CommentKind.FOOTER))
    enabled: bool = True
    file_path: str = ""
    resume_cursor: int = -1
    sections: tuple[Section, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when there are no sections or all of them are empty."""
        return all(s.is_empty for s in self.sections)

    @property
    def section_count(self) -> int:
        """Number of sections."""
        return len(self.sections)

    @property
    def has_more(self) -> bool:
        """True when a bounded load stopped before the end of the file."""
        return self.resume_cursor >= 0

    def get_sections(self, status: Status = Status.ALL) -> tuple[Section, ...]:
        """Return the sections whose stored enabled flag passes ``status``."""
        return tuple(s for s in self.sections if status.accepts(s.enabled))

    def get_section(self, name: str) -> Section:
        """Return the section called ``name``, or the empty section."""
        return self.section_at(index_of_section(self.sections, name))

    def section_at(self, index: int) -> Section:
        """Return the section at ``index``, or the empty section when out of range."""
        if 0 <= index < len(self.sections):
            return self.sections[index]
        return Section()

    def contains_section(self, name: str) -> bool:
        """Return True if a section called ``name`` exists."""
        return index_of_section(self.sections, name) >= 0

    @classmethod
    def builder(cls, source: Document | None = None) -> DocumentBuilder:
        """Return a builder, optionally seeded from ``source``."""
        if source is None:
            return DocumentBuilder()
        return DocumentBuilder(
            header=source.header,
            footer=source.footer,
            enabled=source.enabled,
            file_path=source.file_path,
            resume_cursor=source.resume_cursor,
            sections=list(source.sections),
        )

    def thaw(self) -> DocumentBuilder:
        """Return a builder holding a copy of this document."""
        return Document.builder(self)

    def to_string(self, filters: Filters = Filters.NONE) -> str:
        """Render as text (see `inimark.rendering.text.render_document`)."""
        return render_document(self, filters)

    def __str__(self) -> str:
        return self.to_string()

    def write(
        self,
        path: PathLike = "",
        filters: Filters | None = None,
        *,
        settings: Settings | None = None,
    ) -> WriteResult:
        """Write ``to_string(filters)`` to ``path`` (or to ``file_path`` when omitted).

        Args:
            path (PathLike): Destination; falls back to ``file_path`` when not a valid path.
            filters (Filters | None): Rendering options; ``None`` uses ``settings.filters``.
            settings (Settings | None): Runtime settings (defaults to `get_settings()`).

        Returns:
            WriteResult: What was written where.

        Raises:
            InvalidPathError: If neither ``path`` nor ``file_path`` is a valid path.
        """
        from inimark.io.writer import write_document

        return write_document(self, path, filters, settings=settings)


@dataclass
class DocumentBuilder:
    """Mutable staging area for a [`Document`][inimark.model.document.Document]."""

    header: Comment = field(default_factory=lambda: Comment(kind=CommentKind.HEADER))
    footer: Comment = field(default_factory=lambda: Comment(kind=CommentKind.FOOTER))
    enabled: bool = True
    file_path: str = ""
    resume_cursor: int = -1
    sections: list[Section] = field(default_factory=list)

    def with_file(self, path: PathLike | None) -> DocumentBuilder:
        """Set the file path; ignored unless ``path`` is a valid path."""
        if path is not None and is_valid_path(path):
            self.file_path = os.fspath(path)
        return self

    def with_resume_cursor(self, cursor: int) -> DocumentBuilder:
        """Set the resume cursor (negative values are stored as ``-1``)."""
        self.resume_cursor = cursor if cursor >= 0 else -1
        return self

    def enable(self, flag: bool = True) -> DocumentBuilder:
        """Set the enabled flag."""
        self.enabled = flag
        return self

    def with_header(self, header: Comment | str | None) -> DocumentBuilder:
        """Replace the header; the block is retyped to ``HEADER``."""
        self.header = coerce_comment(header, CommentKind.HEADER)
        return self

    def with_footer(self, footer: Comment | str | None) -> DocumentBuilder:
        """Replace the footer; the block is retyped to ``FOOTER``."""
        self.footer = coerce_comment(footer, CommentKind.FOOTER)
        return self

    def append_header_line(self, line: str) -> DocumentBuilder:
        """Append one line to the header block (duplicates are dropped)."""
        self.header = self.header.thaw().append_line(line).build()
        return self

    def append_footer_line(self, line: str) -> DocumentBuilder:
        """Append one line to the footer block (duplicates are dropped)."""
        self.footer = self.footer.thaw().append_line(line).build()
        return self

    def append_section(self, section: Section | None) -> DocumentBuilder:
        """Append ``section``, or merge it into the existing section of the same name."""
        if section is None or section.name == SENTINEL_KEY:
            return self
        index = index_of_section(self.sections, section.name)
        if index >= 0:
            self.sections[index] = self.sections[index].thaw().merge(section).build()
        else:
            self.sections.append(section)
        return self

    def append_sections(self, sections: Iterable[Section]) -> DocumentBuilder:
        """Append each of ``sections`` (see `append_section`)."""
        for section in sections:
            self.append_section(section)
        return self

    def remove_section(self, name: str) -> DocumentBuilder:
        """Remove the section called ``name``; no-op when absent."""
        return self.remove_section_at(index_of_section(self.sections, name))

    def remove_section_at(self, index: int) -> DocumentBuilder:
        """Remove the section at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self.sections):
            del self.sections[index]
        return self

    def clear_sections(self) -> DocumentBuilder:
        """Drop every section (header, footer and cursor are kept)."""
        self.sections.clear()
        return self

    def append_property(self, section_name: str | None, prop: Property | None) -> DocumentBuilder:
        """Append ``prop`` to ``section_name``, creating the section when missing.

        No-op for a blank section name or a ``None`` property.
        """
        if section_name is None or not section_name.strip() or prop is None:
            return self
        index = index_of_section(self.sections, section_name.strip())
        if index >= 0:
            self.sections[index] = self.sections[index].thaw().append_property(prop).build()
        else:
            self.sections.append(
                Section.builder().with_name(section_name).append_property(prop).build()
            )
        return self

    def remove_property(
        self,
        section_name: str,
        key: str,
        value: str | None = None,
    ) -> DocumentBuilder:
        """Remove the first matching property of ``section_name``; no-op when absent."""
        index = index_of_section(self.sections, section_name)
        if index >= 0:
            self.sections[index] = self.sections[index].thaw().remove_property(key, value).build()
        return self

    def remove_property_at(self, section_name: str, property_index: int) -> DocumentBuilder:
        """Remove the property at ``property_index`` of ``section_name``; no-op when absent."""
        index = index_of_section(self.sections, section_name)
        if index >= 0:
            self.sections[index] = (
                self.sections[index].thaw().remove_property_at(property_index).build()
            )
        return self

    def merge(self, other: Document | None) -> DocumentBuilder:
        """Union header/footer lines and append or merge every section of ``other``.

        ``file_path`` and ``resume_cursor`` are copied only when unset here.
        """
        if other is None:
            return self
        if not self.file_path.strip():
            self.file_path = other.file_path
        if self.resume_cursor < 0:
            self.resume_cursor = other.resume_cursor
        self.header = self.header.thaw().merge(other.header).build()
        self.footer = self.footer.thaw().merge(other.footer).build()
        return self.append_sections(other.sections)

    def parse(self, text: str | None) -> DocumentBuilder:
        """Populate from document text (header, comments, sections, footer)."""
        from inimark.io.parser import parse_document_into

        return parse_document_into(self, text)

    def load(
        self,
        limit: int = 0,
        path: PathLike = "",
        *,
        settings: Settings | None = None,
    ) -> DocumentBuilder:
        """Stream a file into this builder from its first line.

        Args:
            limit (int): Maximum number of sections to load; ``0`` loads everything.
            path (PathLike): File to read; falls back to ``file_path`` when not a
                valid, non-empty file. No-op when neither is.
            settings (Settings | None): Runtime settings (encoding).

        Returns:
            DocumentBuilder: ``self``, with ``resume_cursor`` set when ``limit`` stopped
            the load early.
        """
        from inimark.io.loader import load_into

        return load_into(self, limit=limit, path=path, settings=settings)

    def load_next(self, limit: int = 0, *, settings: Settings | None = None) -> DocumentBuilder:
        """Clear the sections and load the next page starting at ``resume_cursor``.

        No-op when there is no recorded cursor or ``file_path`` is not a valid file.
        """
        from inimark.io.loader import load_next_into

        return load_next_into(self, limit=limit, settings=settings)

    def build(self) -> Document:
        """Freeze into a [`Document`][inimark.model.document.Document]."""
        return Document(
            header=self.header,
            footer=self.footer,
            enabled=self.enabled,
            file_path=self.file_path,
            resume_cursor=self.resume_cursor,
            sections=tuple(self.sections),
        )
