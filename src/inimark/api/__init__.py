# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public IniMark API (stable surface).

Thin wrappers around `inimark.io` for integrations that do not want to reach
into the internal modules:

| Operation              | Sync          | Async               |
|------------------------|---------------|---------------------|
| parse text             | `parse`       | n/a                 |
| load                   | `load`        | `load_async`        |
| load next page         | `load_next`   | `load_next_async`   |
| load by token          | `load_page`   | `load_page_async`   |
| write document         | `write`       | `write_async`       |
| single-property upsert | `upsert`      | `upsert_async`      |
| read value             | `read_value`  | `read_value_async`  |
| read section           | `read_section`| `read_section_async`|

Every I/O function accepts an optional frozen
[`Settings`][inimark.config.model.Settings]; when omitted, the process
default from `get_settings()` applies.

Async variants run the blocking call in a worker thread via
``asyncio.to_thread``. Each call is independent; concurrent upserts on the
same file are not serialized.

Example:
    ```python
    from inimark import api

    api.upsert("people.ini", "Person", "Age", "31", update_existing=True)
    assert api.read_value("people.ini", "Person", "Age") == "31"

    page, token = api.load_page("people.ini", limit=10)
    while token is not None:
        page, token = api.load_page("people.ini", token, 10)
    ```
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from inimark.io.loader import ResumeToken, iter_pages
from inimark.io.loader import load as _load
from inimark.io.loader import load_next as _load_next
from inimark.io.loader import load_page as _load_page
from inimark.io.parser import parse_document
from inimark.io.reader import read_section as _read_section
from inimark.io.reader import read_value as _read_value
from inimark.io.writer import WriteResult, WriteStatus, write_document
from inimark.io.writer import upsert as _upsert

if TYPE_CHECKING:
    from inimark.config.model import Settings
    from inimark.io.paths import PathLike
    from inimark.model.document import Document
    from inimark.model.section import Section
    from inimark.model.types import Filters

__all__ = [
    "ResumeToken",
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


def parse(text: str | None) -> Document:
    """Parse extended INI text into a `Document`."""
    return parse_document(text)


def load(path: PathLike, limit: int = 0, *, settings: Settings | None = None) -> Document:
    """Load ``path``, or only its first ``limit`` sections when ``limit > 0``."""
    return _load(path, limit, settings=settings)


def load_next(document: Document, limit: int = 0, *, settings: Settings | None = None) -> Document:
    """Load the page following a bounded ``document``."""
    return _load_next(document, limit, settings=settings)


def load_page(
    path: PathLike,
    token: ResumeToken | None = None,
    limit: int = 0,
    *,
    settings: Settings | None = None,
) -> tuple[Document, ResumeToken | None]:
    """Load one page; the returned token is ``None`` once the file is exhausted."""
    return _load_page(path, token, limit, settings=settings)


def write(
    document: Document,
    path: PathLike = "",
    filters: Filters | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Write ``document`` to ``path`` (or its own ``file_path``).

    Raises:
        InvalidPathError: If no valid destination is available.
    """
    return write_document(document, path, filters, settings=settings)


def upsert(
    file: PathLike,
    section_name: str,
    key: str,
    value: str | None,
    update_existing: bool | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Set ``key=value`` in ``[section_name]`` of ``file`` without loading the whole file.

    Raises:
        InvalidPathError: If ``file`` is not a valid path.
        ValueError: If ``section_name`` or ``key`` is blank.
    """
    return _upsert(file, section_name, key, value, update_existing, settings=settings)


def read_value(
    file: PathLike, section_name: str, key: str, *, settings: Settings | None = None
) -> str:
    """Return the value of ``key`` in ``[section_name]``, or ``""``."""
    return _read_value(file, section_name, key, settings=settings)


def read_section(file: PathLike, name: str, *, settings: Settings | None = None) -> Section | None:
    """Return section ``name`` of ``file``, or ``None``."""
    return _read_section(file, name, settings=settings)


# --- Async wrappers ---


async def load_async(
    path: PathLike, limit: int = 0, *, settings: Settings | None = None
) -> Document:
    """Async [`load`][inimark.api.load]."""
    return await asyncio.to_thread(load, path, limit, settings=settings)


async def load_next_async(
    document: Document, limit: int = 0, *, settings: Settings | None = None
) -> Document:
    """Async [`load_next`][inimark.api.load_next]."""
    return await asyncio.to_thread(load_next, document, limit, settings=settings)


async def load_page_async(
    path: PathLike,
    token: ResumeToken | None = None,
    limit: int = 0,
    *,
    settings: Settings | None = None,
) -> tuple[Document, ResumeToken | None]:
    """Async [`load_page`][inimark.api.load_page]."""
    return await asyncio.to_thread(load_page, path, token, limit, settings=settings)


async def write_async(
    document: Document,
    path: PathLike = "",
    filters: Filters | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Async [`write`][inimark.api.write]."""
    return await asyncio.to_thread(write, document, path, filters, settings=settings)


async def upsert_async(
    file: PathLike,
    section_name: str,
    key: str,
    value: str | None,
    update_existing: bool | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Async [`upsert`][inimark.api.upsert]."""
    return await asyncio.to_thread(
        upsert, file, section_name, key, value, update_existing, settings=settings
    )


async def read_value_async(
    file: PathLike, section_name: str, key: str, *, settings: Settings | None = None
) -> str:
    """Async [`read_value`][inimark.api.read_value]."""
    return await asyncio.to_thread(read_value, file, section_name, key, settings=settings)


async def read_section_async(
    file: PathLike, name: str, *, settings: Settings | None = None
) -> Section | None:
    """Async [`read_section`][inimark.api.read_section]."""
    return await asyncio.to_thread(read_section, file, name, settings=settings)
