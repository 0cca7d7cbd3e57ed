# topmark:header:start
#
#   project      : IniMark
#   file         : section.py
#   file_relpath : src/inimark/model/section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sections: a named, ordered group of properties unique by ``(key, value)``.

Note that uniqueness is by *pair*: ``Age=30`` and ``Age=90`` may coexist in the
same section, while a second ``Age=30`` is silently dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from inimark.constants import SENTINEL_KEY
from inimark.model.comment import Comment, coerce_comment
from inimark.model.property import Property
from inimark.model.types import Filters, Status
from inimark.rendering.text import render_section

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def index_of_property(
    properties: Sequence[Property],
    key: str | None,
    value: str | None = None,
) -> int:
    """Return the index of the first property matching ``key`` (and ``value`` if given).

    Returns:
        int: The index, or ``-1`` when nothing matches.
    """
    for i, prop in enumerate(properties):
        if prop.key == key and (value is None or prop.value == value):
            return i
    return -1


@dataclass(frozen=True, slots=True)
class Section:
    """Immutable named group of properties.

    Attributes:
        name (str): Section name; the placeholder ``";_;"`` marks an unnamed section.
        comment (Comment): Comment shown above the ``[name]`` line.
        enabled (bool): False renders the section (and all its properties) disabled.
        properties (tuple[Property, ...]): Properties in insertion order.
    """

    name: str = SENTINEL_KEY
    comment: Comment = field(default_factory=Comment)
    enabled: bool = True
    properties: tuple[Property, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when unnamed, without properties, or holding only empty properties."""
        return (
            self.name == SENTINEL_KEY
            or not self.properties
            or all(p.is_empty for p in self.properties)
        )

    @property
    def property_count(self) -> int:
        """Number of properties."""
        return len(self.properties)

    def get_properties(self, status: Status = Status.ALL) -> tuple[Property, ...]:
        """Return the properties whose stored enabled flag passes ``status``."""
        return tuple(p for p in self.properties if status.accepts(p.enabled))

    def get_property(self, key: str, value: str | None = None) -> Property:
        """Return the first property with ``key`` (and ``value``), or the empty property."""
        return self.property_at(index_of_property(self.properties, key, value))

    def property_at(self, index: int) -> Property:
        """Return the property at ``index``, or the empty property when out of range."""
        if 0 <= index < len(self.properties):
            return self.properties[index]
        return Property()

    def contains_property(self, key: str, value: str | None = None) -> bool:
        """Return True if a property with ``key`` (and ``value``) exists."""
        return index_of_property(self.properties, key, value) >= 0

    @classmethod
    def builder(cls, source: Section | None = None) -> SectionBuilder:
        """Return a builder, optionally seeded from ``source``."""
        if source is None:
            return SectionBuilder()
        return SectionBuilder(
            name=source.name,
            comment=source.comment,
            enabled=source.enabled,
            properties=list(source.properties),
        )

    @classmethod
    def of(
        cls,
        name: str,
        *properties: Property,
        comment: Comment | str | None = None,
        enabled: bool = True,
    ) -> Section:
        """Shortcut for ``Section.builder().with_name(name)...build()``.

        Raises:
            ValueError: If ``name`` is blank.
        """
        return (
            SectionBuilder()
            .with_name(name)
            .with_comment(comment)
            .enable(enabled)
            .append_properties(properties)
            .build()
        )

    def thaw(self) -> SectionBuilder:
        """Return a builder holding a copy of this section."""
        return Section.builder(self)

    def to_string(self, filters: Filters = Filters.NONE) -> str:
        """Render as text (see `inimark.rendering.text.render_section`)."""
        return render_section(self, filters)

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class SectionBuilder:
    """Mutable staging area for a [`Section`][inimark.model.section.Section]."""

    name: str = SENTINEL_KEY
    comment: Comment = field(default_factory=Comment)
    enabled: bool = True
    properties: list[Property] = field(default_factory=list)

    def with_name(self, name: str | None) -> SectionBuilder:
        """Set the section name.

        Raises:
            ValueError: If ``name`` is ``None`` or blank.
        """
        if name is None or not name.strip():
            raise ValueError("Section name must not be empty or whitespace.")
        self.name = name.strip()
        return self

    def with_comment(self, comment: Comment | str | None) -> SectionBuilder:
        """Replace the comment (a string is parsed; ``None`` clears it)."""
        self.comment = coerce_comment(comment)
        return self

    def enable(self, flag: bool = True) -> SectionBuilder:
        """Set the enabled flag."""
        self.enabled = flag
        return self

    def append_property(self, prop: Property | None) -> SectionBuilder:
        """Append ``prop`` unless it is ``None``, empty, or its ``(key, value)`` exists."""
        if prop is None or prop.is_empty:
            return self
        if index_of_property(self.properties, prop.key, prop.value) < 0:
            self.properties.append(prop)
        return self

    def append_properties(self, props: Iterable[Property]) -> SectionBuilder:
        """Append each of ``props`` (see `append_property`)."""
        for prop in props:
            self.append_property(prop)
        return self

    def remove_property(self, key: str, value: str | None = None) -> SectionBuilder:
        """Remove the first property with ``key`` (and ``value``); no-op when absent."""
        return self.remove_property_at(index_of_property(self.properties, key, value))

    def remove_property_at(self, index: int) -> SectionBuilder:
        """Remove the property at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self.properties):
            del self.properties[index]
        return self

    def merge(self, other: Section | None) -> SectionBuilder:
        """Union comments and append the properties of ``other`` whose pair is new.

        The name and enabled flag are kept; an unnamed builder adopts the name of
        ``other``.
        """
        if other is None:
            return self
        if self.name == SENTINEL_KEY:
            self.name = other.name
        self.comment = self.comment.thaw().merge(other.comment).build()
        return self.append_properties(other.properties)

    def parse(self, text: str | None) -> SectionBuilder:
        """Populate from the first section found in ``text``."""
        from inimark.io.parser import parse_section_into

        return parse_section_into(self, text)

    def build(self) -> Section:
        """Freeze into a [`Section`][inimark.model.section.Section]."""
        return Section(
            name=self.name,
            comment=self.comment,
            enabled=self.enabled,
            properties=tuple(self.properties),
        )
