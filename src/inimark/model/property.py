# topmark:header:start
#
#   project      : IniMark
#   file         : property.py
#   file_relpath : src/inimark/model/property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Properties: ``key=value`` entries with an optional comment and an enabled flag."""

from __future__ import annotations

from dataclasses import dataclass, field

from inimark.constants import SENTINEL_KEY
from inimark.model.comment import Comment, coerce_comment
from inimark.model.types import Filters
from inimark.rendering.text import render_property


@dataclass(frozen=True, slots=True)
class Property:
    """Immutable ``key=value`` entry.

    Attributes:
        key (str): Non-blank key; the placeholder ``";_;"`` marks the empty property.
        value (str): Raw value text (may be empty).
        comment (Comment): Comment shown above the entry.
        enabled (bool): False renders the entry as ``#--key=value--#``.
    """

    key: str = SENTINEL_KEY
    value: str = ""
    comment: Comment = field(default_factory=Comment)
    enabled: bool = True

    @property
    def is_empty(self) -> bool:
        """True for the placeholder property (no key set)."""
        return self.key == SENTINEL_KEY

    @classmethod
    def builder(cls, source: Property | None = None) -> PropertyBuilder:
        """Return a builder, optionally seeded from ``source``."""
        if source is None:
            return PropertyBuilder()
        return PropertyBuilder(
            key=source.key,
            value=source.value,
            comment=source.comment,
            enabled=source.enabled,
        )

    @classmethod
    def of(
        cls,
        key: str,
        value: str | None = "",
        *,
        comment: Comment | str | None = None,
        enabled: bool = True,
    ) -> Property:
        """Shortcut for ``Property.builder().with_key(key)...build()``.

        Raises:
            ValueError: If ``key`` is blank.
        """
        return (
            PropertyBuilder()
            .with_key(key)
            .with_value(value)
            .with_comment(comment)
            .enable(enabled)
            .build()
        )

    def thaw(self) -> PropertyBuilder:
        """Return a builder holding a copy of this property."""
        return Property.builder(self)

    def to_string(self, filters: Filters = Filters.NONE) -> str:
        """Render as text (see `inimark.rendering.text.render_property`)."""
        return render_property(self, filters)

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class PropertyBuilder:
    """Mutable staging area for a [`Property`][inimark.model.property.Property]."""

    key: str = SENTINEL_KEY
    value: str = ""
    comment: Comment = field(default_factory=Comment)
    enabled: bool = True

    def with_key(self, key: str | None) -> PropertyBuilder:
        """Set the key.

        Raises:
            ValueError: If ``key`` is ``None`` or blank.
        """
        if key is None or not key.strip():
            raise ValueError("Property key must not be empty or whitespace.")
        self.key = key.strip()
        return self

    def with_value(self, value: str | None) -> PropertyBuilder:
        """Set the value; ``None`` stores ``""``."""
        self.value = value if value is not None else ""
        return self

    def with_comment(self, comment: Comment | str | None) -> PropertyBuilder:
        """Replace the comment.

        A string is parsed line by line; ``None`` clears the comment.
        """
        self.comment = coerce_comment(comment)
        return self

    def enable(self, flag: bool = True) -> PropertyBuilder:
        """Set the enabled flag."""
        self.enabled = flag
        return self

    def parse(self, text: str | None) -> PropertyBuilder:
        """Populate from text: comment lines up to the first ``key=value`` line.

        Lines after that first property are ignored; text without a property line
        only contributes its comment.
        """
        from inimark.io.parser import parse_property_into

        return parse_property_into(self, text)

    def build(self) -> Property:
        """Freeze into a [`Property`][inimark.model.property.Property]."""
        return Property(
            key=self.key,
            value=self.value,
            comment=self.comment,
            enabled=self.enabled,
        )

