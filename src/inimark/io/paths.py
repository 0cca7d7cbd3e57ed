# topmark:header:start
#
#   project      : IniMark
#   file         : paths.py
#   file_relpath : src/inimark/io/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path checks used before any read or write."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Union

from inimark.config.logging import get_logger

if TYPE_CHECKING:
    from inimark.config.logging import InimarkLogger

logger: InimarkLogger = get_logger(__name__)

PathLike = Union[str, os.PathLike[str]]


def is_valid_path(path: PathLike | None) -> bool:
    """Return True if ``path`` can name a file to write.

    The path must be non-blank, free of NUL characters, must not end with a
    path separator and must not denote an existing directory. The file itself
    does not need to exist.
    """
    if path is None:
        return False
    text = os.fspath(path)
    if not text.strip() or "\0" in text:
        return False
    if text.endswith((os.sep, "/")) or (os.altsep is not None and text.endswith(os.altsep)):
        return False
    try:
        return not Path(text).is_dir()
    except OSError as exc:
        logger.debug("Cannot stat %r: %s", text, exc)
        return False


def is_valid_file(path: PathLike | None) -> bool:
    """Return True if ``path`` names an existing, non-empty regular file."""
    if path is None or not is_valid_path(path):
        return False
    try:
        candidate = Path(path)
        return candidate.is_file() and candidate.stat().st_size > 0
    except OSError as exc:
        logger.debug("Cannot stat %r: %s", path, exc)
        return False
