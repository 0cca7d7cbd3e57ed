# topmark:header:start
#
#   project      : IniMark
#   file         : text.py
#   file_relpath : src/inimark/rendering/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize the value model to extended INI text.

Rules applied at every level:

- An empty element renders as ``""`` and contributes nothing to its parent.
- With ``Filters.TRIM_DISABLED`` a disabled element renders as ``""``.
- A disabled document renders each section disabled, and a disabled section
  renders each property disabled. This cascade only affects the output; the
  stored ``enabled`` flags are left untouched.
- Output is trimmed and uses ``\\n`` as line separator.

The model classes call into this module from their ``to_string`` methods; this
module only reads their attributes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from inimark.codec.affix import as_comment, as_disabled, as_footer, as_header, as_section
from inimark.model.types import CommentKind, Filters

if TYPE_CHECKING:
    from collections.abc import Callable

    from inimark.model.comment import Comment
    from inimark.model.document import Document
    from inimark.model.property import Property
    from inimark.model.section import Section

NEWLINE: Final[str] = "\n"

_WRAPPERS: Final[dict[CommentKind, Callable[[str], str]]] = {
    CommentKind.COMMENT: as_comment,
    CommentKind.HEADER: as_header,
    CommentKind.FOOTER: as_footer,
}


def _join(parts: list[str], separator: str = NEWLINE) -> str:
    return separator.join(p for p in parts if p).strip()


def render_comment(comment: Comment, filters: Filters = Filters.NONE) -> str:
    """Render each line of ``comment`` wrapped with its kind's affix."""
    del filters  # comments are filtered by their owner
    if comment.is_empty:
        return ""
    wrap = _WRAPPERS[comment.kind]
    return _join([wrap(line) for line in comment.lines])


def render_property(
    prop: Property,
    filters: Filters = Filters.NONE,
    *,
    force_disabled: bool = False,
) -> str:
    """Render a property: optional comment, then ``key=value`` or ``#--key=value--#``.

    Args:
        prop (Property): The property to render.
        filters (Filters): Rendering options.
        force_disabled (bool): Render as disabled regardless of ``prop.enabled``
            (set by a disabled parent section).

    Returns:
        str: The rendered text, or ``""`` when nothing is to be shown.
    """
    enabled = prop.enabled and not force_disabled
    if prop.is_empty or (Filters.TRIM_DISABLED in filters and not enabled):
        return ""

    parts: list[str] = []
    if Filters.TRIM_COMMENT not in filters:
        parts.append(render_comment(prop.comment))
    entry = f"{prop.key}={prop.value}"
    parts.append(entry if enabled else as_disabled(entry))
    return _join(parts)


def render_section(
    section: Section,
    filters: Filters = Filters.NONE,
    *,
    force_disabled: bool = False,
) -> str:
    """Render a section: optional comment, the ``[name]`` line, then its properties.

    Args:
        section (Section): The section to render.
        filters (Filters): Rendering options.
        force_disabled (bool): Render as disabled regardless of ``section.enabled``
            (set by a disabled document).

    Returns:
        str: The rendered text, or ``""`` when nothing is to be shown.
    """
    enabled = section.enabled and not force_disabled
    if section.is_empty or (Filters.TRIM_DISABLED in filters and not enabled):
        return ""

    parts: list[str] = []
    if Filters.TRIM_COMMENT not in filters:
        parts.append(render_comment(section.comment))
    title = as_section(section.name)
    parts.append(title if enabled else as_disabled(title))
    parts.extend(
        render_property(prop, filters, force_disabled=not enabled) for prop in section.properties
    )
    return _join(parts)


def render_document(document: Document, filters: Filters = Filters.NONE) -> str:
    """Render a whole document: header block, sections, footer block.

    With ``Filters.FORMATTED`` sections are separated by one blank line, and the
    header and footer blocks by two blank lines from the sections.
    """
    if document.is_empty or (Filters.TRIM_DISABLED in filters and not document.enabled):
        return ""

    formatted = Filters.FORMATTED in filters
    body = _join(
        [
            render_section(section, filters, force_disabled=not document.enabled)
            for section in document.sections
        ],
        NEWLINE * 2 if formatted else NEWLINE,
    )

    parts: list[str] = []
    if Filters.TRIM_HEADER not in filters:
        parts.append(render_comment(document.header))
    parts.append(body)
    if Filters.TRIM_FOOTER not in filters:
        parts.append(render_comment(document.footer))
    return _join(parts, NEWLINE * 3 if formatted else NEWLINE)
