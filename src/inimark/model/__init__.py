# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable value model of an extended INI document and its builders.

Every value type is a frozen dataclass paired with a mutable builder:

| Value      | Builder           |
|------------|-------------------|
| `Comment`  | `CommentBuilder`  |
| `Property` | `PropertyBuilder` |
| `Section`  | `SectionBuilder`  |
| `Document` | `DocumentBuilder` |

Use ``X.builder()`` to start from scratch, ``x.thaw()`` to edit a copy of an
existing value, and ``builder.build()`` to freeze the result.
"""

from __future__ import annotations

from inimark.model.comment import Comment, CommentBuilder
from inimark.model.document import Document, DocumentBuilder
from inimark.model.property import Property, PropertyBuilder
from inimark.model.section import Section, SectionBuilder
from inimark.model.types import CommentKind, Filters, Status

__all__ = [
    "Comment",
    "CommentBuilder",
    "CommentKind",
    "Document",
    "DocumentBuilder",
    "Filters",
    "Property",
    "PropertyBuilder",
    "Section",
    "SectionBuilder",
    "Status",
]
