# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IniMark package.

IniMark reads, pages through and edits extended INI files: plain
``[section]`` / ``key=value`` files with comments attached to sections and
properties, a header and a footer block, and disabled (``#--...--#``)
sections and properties. It exposes an immutable document model with
builders, a bounded resumable loader, point readers, a crash-safe
single-property upsert, and a small CLI.
"""

from __future__ import annotations

from inimark.api import (
    ResumeToken,
    WriteResult,
    WriteStatus,
    iter_pages,
    load,
    load_async,
    load_next,
    load_next_async,
    load_page,
    load_page_async,
    parse,
    read_section,
    read_section_async,
    read_value,
    read_value_async,
    upsert,
    upsert_async,
    write,
    write_async,
)
from inimark.core.errors import InimarkError, InvalidPathError
from inimark.model import (
    Comment,
    CommentBuilder,
    CommentKind,
    Document,
    DocumentBuilder,
    Filters,
    Property,
    PropertyBuilder,
    Section,
    SectionBuilder,
    Status,
)

__all__ = [
    "Comment",
    "CommentBuilder",
    "CommentKind",
    "Document",
    "DocumentBuilder",
    "Filters",
    "InimarkError",
    "InvalidPathError",
    "Property",
    "PropertyBuilder",
    "ResumeToken",
    "Section",
    "SectionBuilder",
    "Status",
    "WriteResult",
    "WriteStatus",
    "iter_pages",
    "load",
    "load_async",
    "load_next",
    "load_next_async",
    "load_page",
    "load_page_async",
    "parse",
    "read_section",
    "read_section_async",
    "read_value",
    "read_value_async",
    "upsert",
    "upsert_async",
    "write",
    "write_async",
]
