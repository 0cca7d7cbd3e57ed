# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text serialization of comments, properties, sections and documents."""

from __future__ import annotations

from inimark.rendering.text import (
    render_comment,
    render_document,
    render_property,
    render_section,
)

__all__ = [
    "render_comment",
    "render_document",
    "render_property",
    "render_section",
]
