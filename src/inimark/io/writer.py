# topmark:header:start
#
#   project      : IniMark
#   file         : writer.py
#   file_relpath : src/inimark/io/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whole-document writes and the single-property upsert rewrite.

[`upsert`][inimark.io.writer.upsert] never loads the whole file. It streams
the original line by line into a bounded line cache that is spilled to
``<file><temp_suffix>`` whenever it holds ``Settings.cache_capacity`` lines,
then replaces the original with the temp file in one ``os.replace`` call.
A crash before that call leaves the original untouched (and an orphan temp
file, which the next upsert truncates).

Edit rules:
    - Lines outside the target section are copied verbatim.
    - Footer lines are deferred and written last.
    - In the target section, a ``key=`` line is replaced
      (``update_existing=True``) or kept and followed by one new ``key=value``
      line (``update_existing=False``).
    - When the target section exists but lacks the key, ``key=value`` is added
      after its last property (comments trailing the section stay below it).
    - When the target section is missing, ``[section]`` and ``key=value`` are
      appended before the footer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from yachalk import chalk

from inimark.codec.affix import as_section
from inimark.codec.classifier import (
    BlankLine,
    CommentLine,
    FooterLine,
    PropertyLine,
    SectionLine,
    classify,
)
from inimark.codec.lines import strip_line_ending
from inimark.config.logging import get_logger
from inimark.config.model import get_settings
from inimark.core.errors import InvalidPathError
from inimark.io.paths import is_valid_file, is_valid_path
from inimark.model.document import Document
from inimark.model.property import Property
from inimark.model.section import Section
from inimark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from inimark.config.logging import InimarkLogger
    from inimark.config.model import Settings
    from inimark.io.paths import PathLike
    from inimark.model.types import Filters

logger: InimarkLogger = get_logger(__name__)


class WriteStatus(ColoredStrEnum):
    """Outcome of a write, with a display color for the CLI."""

    WRITTEN = ("written", chalk.green)
    CREATED = ("created", chalk.green_bright)
    REPLACED = ("replaced", chalk.yellow)
    INSERTED = ("inserted", chalk.cyan)
    APPENDED = ("appended", chalk.blue)
    SECTION_ADDED = ("section added", chalk.magenta)


@dataclass(frozen=True, slots=True)
class WriteResult:
    """What a write did.

    Attributes:
        path (Path): The file written.
        status (WriteStatus): How the file was changed.
        bytes_written (int): Size of the file after the write.
    """

    path: Path
    status: WriteStatus
    bytes_written: int


def _write_text(path: Path, text: str, settings: Settings) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding=settings.encoding, newline="") as fh:
        fh.write(text.replace("\n", settings.newline))
    return path.stat().st_size


def write_document(
    document: Document,
    path: PathLike = "",
    filters: Filters | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Write ``document.to_string(filters)`` to ``path`` or to ``document.file_path``.

    Missing parent directories are created.

    Raises:
        InvalidPathError: If neither ``path`` nor ``document.file_path`` is a valid path.
        OSError: If the file cannot be written.
    """
    settings = settings or get_settings()
    if is_valid_path(path):
        target = Path(path)
    elif is_valid_path(document.file_path):
        target = Path(document.file_path)
    else:
        raise InvalidPathError(os.fspath(path) or document.file_path)
    text = document.to_string(settings.filters if filters is None else filters)
    size = _write_text(target, text, settings)
    logger.info("Wrote %s (%d bytes)", target, size)
    return WriteResult(path=target, status=WriteStatus.WRITTEN, bytes_written=size)


class _SpillCache:
    """Bounded line cache spilled to a temp file whenever it is full."""

    def __init__(self, temp_path: Path, settings: Settings) -> None:
        self.temp_path = temp_path
        self.capacity = settings.cache_capacity
        self.encoding = settings.encoding
        self.newline = settings.newline
        self.lines: list[str] = []
        self.flushes = 0

    def add(self, line: str) -> None:
        self.lines.append(line)
        if len(self.lines) >= self.capacity:
            self.flush()

    def extend(self, lines: list[str]) -> None:
        for line in lines:
            self.add(line)

    def flush(self) -> None:
        # The first flush truncates any temp file left over by an interrupted run.
        mode = "w" if self.flushes == 0 else "a"
        with self.temp_path.open(mode, encoding=self.encoding, newline="") as fh:
            for line in self.lines:
                fh.write(line + self.newline)
        logger.trace("Flushed %d line(s) to %s", len(self.lines), self.temp_path)
        self.lines.clear()
        self.flushes += 1


def upsert(
    file: PathLike,
    section_name: str,
    key: str,
    value: str | None,
    update_existing: bool | None = None,
    *,
    settings: Settings | None = None,
) -> WriteResult:
    """Set ``key=value`` in section ``section_name`` of ``file``, rewriting it in place.

    Args:
        file (PathLike): The INI file; created (with parent directories) when missing.
        section_name (str): Target section.
        key (str): Property key.
        value (str | None): Property value (``None`` writes an empty value).
        update_existing (bool | None): Replace matching ``key`` lines with a single
            line, dropping any further matches in repeated ``[section]`` blocks
            (True), or keep them and insert a new line after the first one (False);
            ``None`` uses ``settings.update_existing``. Either way the file ends up
            with exactly one new ``key=value`` line.
        settings (Settings | None): Runtime settings (defaults to `get_settings()`).

    Returns:
        WriteResult: The file, what was done, and its new size.

    Raises:
        InvalidPathError: If ``file`` is not a valid path.
        ValueError: If ``section_name`` or ``key`` is blank.
        OSError: If the file or its temp file cannot be written.
    """
    if not is_valid_path(file):
        raise InvalidPathError(str(file))
    settings = settings or get_settings()
    replace = settings.update_existing if update_existing is None else update_existing

    # Both raise ValueError on blank input before any I/O.
    prop = Property.of(key, value)
    section = Section.of(section_name, prop)
    path = Path(file)

    if not is_valid_file(path):
        fresh = Document.builder().append_section(section).build()
        size = _write_text(path, fresh.to_string(), settings)
        logger.info("Created %s with [%s] %s", path, section.name, prop.key)
        return WriteResult(path=path, status=WriteStatus.CREATED, bytes_written=size)

    new_line = prop.to_string()
    cache = _SpillCache(Path(f"{path}{settings.temp_suffix}"), settings)
    footer: list[str] = []
    held: list[str] = []
    status: WriteStatus | None = None
    found_section = False
    in_target = False
    done = False

    def leave_target() -> None:
        nonlocal status, done
        if not done:
            cache.add(new_line)
            status = WriteStatus.APPENDED
            done = True
        cache.extend(held)
        held.clear()

    with path.open(encoding=settings.encoding) as fh:
        for raw in fh:
            line = strip_line_ending(raw)
            match classify(line):
                case FooterLine():
                    footer.append(line)
                case SectionLine(name=name):
                    if in_target:
                        leave_target()
                    in_target = name == section.name
                    found_section = found_section or in_target
                    cache.add(line)
                case BlankLine() | CommentLine() if in_target:
                    held.append(line)
                case PropertyLine(key=k) if in_target:
                    cache.extend(held)
                    held.clear()
                    if k != prop.key:
                        cache.add(line)
                    elif replace:
                        # One line survives; later matches (any block) are dropped.
                        if not done:
                            cache.add(new_line)
                            status = WriteStatus.REPLACED
                            done = True
                    else:
                        cache.add(line)
                        if not done:
                            cache.add(new_line)
                            status = WriteStatus.INSERTED
                            done = True
                case _:
                    if in_target:
                        cache.extend(held)
                        held.clear()
                    cache.add(line)

    if in_target:
        leave_target()
    if not found_section:
        cache.add(as_section(section.name))
        cache.add(new_line)
        status = WriteStatus.SECTION_ADDED
    cache.extend(footer)
    cache.flush()

    os.replace(cache.temp_path, path)
    size = path.stat().st_size
    final = status or WriteStatus.APPENDED
    logger.info("Upserted [%s] %s in %s (%s)", section.name, prop.key, path, final.value)
    return WriteResult(path=path, status=final, bytes_written=size)
