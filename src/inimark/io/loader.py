# topmark:header:start
#
#   project      : IniMark
#   file         : loader.py
#   file_relpath : src/inimark/io/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded, resumable streaming load of extended INI files.

Files are read line by line and fed to a
[`DocumentAssembler`][inimark.io.parser.DocumentAssembler]; only the sections
of the current page are held in memory.

Pagination:
    ``load(path, limit=N)`` stops before the (N+1)-th distinct section and records
    the line index to resume from (``Document.resume_cursor``). ``load_next``
    re-opens the file, skips every line before that index, clears the
    previously loaded sections and loads the next page. Merging the pages
    (``DocumentBuilder.merge``) yields the same document as one unbounded load.
    When a page reaches the end of the file the cursor is reset to ``-1``.

    [`load_page`][inimark.io.loader.load_page] exposes the same protocol with an
    explicit [`ResumeToken`][inimark.io.loader.ResumeToken] instead of a document.

Read failures (``OSError``, ``UnicodeDecodeError``) are logged at WARNING and
leave whatever was loaded before the failure.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from inimark.codec.lines import strip_line_ending
from inimark.config.logging import get_logger
from inimark.config.model import get_settings
from inimark.io.parser import DocumentAssembler
from inimark.io.paths import is_valid_file
from inimark.model.document import Document, DocumentBuilder

if TYPE_CHECKING:
    from collections.abc import Iterator

    from inimark.config.logging import InimarkLogger
    from inimark.config.model import Settings
    from inimark.io.paths import PathLike

logger: InimarkLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ResumeToken:
    """Where the next page of a bounded load starts.

    Attributes:
        path (str): The file being paginated.
        line_index (int): Zero-based index of the first line of the next page.
    """

    path: str
    line_index: int


def stream_into(
    builder: DocumentBuilder,
    path: PathLike,
    *,
    start: int = 0,
    limit: int = 0,
    settings: Settings | None = None,
) -> int:
    """Feed the lines of ``path`` from index ``start`` into ``builder``.

    Args:
        builder (DocumentBuilder): Receives the parsed content.
        path (PathLike): File to read.
        start (int): Lines before this index are skipped without being processed.
        limit (int): Maximum number of sections to load; ``0`` loads everything.
        settings (Settings | None): Runtime settings (encoding).

    Returns:
        int: Line index to resume from, or ``-1`` when the end of the file was reached
        (or the file could not be read).
    """
    settings = settings or get_settings()
    assembler = DocumentAssembler(builder, limit)
    try:
        with open(path, encoding=settings.encoding) as fh:
            for index, raw in enumerate(fh):
                if index < start:
                    continue
                if not assembler.feed(index, strip_line_ending(raw)):
                    break
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        assembler.finish()
        return -1
    assembler.finish()
    logger.debug(
        "Loaded %d section(s) from %s (start=%d, limit=%d, resume=%d)",
        assembler.sections_loaded,
        path,
        start,
        limit,
        assembler.stopped_at,
    )
    return assembler.stopped_at


def load_into(
    builder: DocumentBuilder,
    *,
    limit: int = 0,
    path: PathLike = "",
    settings: Settings | None = None,
) -> DocumentBuilder:
    """Load ``path`` (or ``builder.file_path``) into ``builder`` from the first line.

    No-op when neither names a valid, non-empty file.
    """
    if is_valid_file(path):
        builder.file_path = os.fspath(path)
    elif not is_valid_file(builder.file_path):
        logger.debug("Nothing to load: %r / %r is not a valid file", path, builder.file_path)
        return builder
    cursor = stream_into(builder, builder.file_path, limit=limit, settings=settings)
    return builder.with_resume_cursor(cursor)


def load_next_into(
    builder: DocumentBuilder,
    *,
    limit: int = 0,
    settings: Settings | None = None,
) -> DocumentBuilder:
    """Replace the sections of ``builder`` with the page starting at its resume cursor.

    No-op when there is no recorded cursor or the file is gone.
    """
    if builder.resume_cursor < 0 or not is_valid_file(builder.file_path):
        logger.debug("Nothing to resume for %r", builder.file_path)
        return builder
    start = builder.resume_cursor
    builder.clear_sections()
    cursor = stream_into(builder, builder.file_path, start=start, limit=limit, settings=settings)
    return builder.with_resume_cursor(cursor)


def load(path: PathLike, limit: int = 0, *, settings: Settings | None = None) -> Document:
    """Load a document (or its first ``limit`` sections) from ``path``.

    Returns an empty document when ``path`` is missing, empty or unreadable.
    """
    return load_into(Document.builder(), limit=limit, path=path, settings=settings).build()


def load_next(document: Document, limit: int = 0, *, settings: Settings | None = None) -> Document:
    """Return the page following ``document`` (header and footer are carried over).

    Returns ``document`` unchanged when it has no resume cursor.
    """
    if not document.has_more:
        return document
    return load_next_into(document.thaw(), limit=limit, settings=settings).build()


def load_page(
    path: PathLike,
    token: ResumeToken | None = None,
    limit: int = 0,
    *,
    settings: Settings | None = None,
) -> tuple[Document, ResumeToken | None]:
    """Load one page of ``path``.

    Args:
        path (PathLike): File to paginate (ignored when ``token`` is given).
        token (ResumeToken | None): Where to resume; ``None`` starts at the first line.
        limit (int): Maximum number of sections in the page; ``0`` loads the rest.
        settings (Settings | None): Runtime settings (encoding).

    Returns:
        tuple[Document, ResumeToken | None]: The page and the token of the next page,
        ``None`` when the end of the file was reached.
    """
    builder = Document.builder()
    if token is None:
        load_into(builder, limit=limit, path=path, settings=settings)
    else:
        builder.with_file(token.path).with_resume_cursor(token.line_index)
        load_next_into(builder, limit=limit, settings=settings)
    document = builder.build()
    if document.resume_cursor < 0:
        return document, None
    return document, ResumeToken(path=document.file_path, line_index=document.resume_cursor)


def iter_pages(
    path: PathLike,
    limit: int,
    *,
    settings: Settings | None = None,
) -> Iterator[Document]:
    """Yield consecutive pages of at most ``limit`` sections until the end of ``path``."""
    document, token = load_page(path, limit=limit, settings=settings)
    yield document
    while token is not None:
        document, token = load_page(path, token, limit, settings=settings)
        yield document
