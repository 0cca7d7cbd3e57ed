# topmark:header:start
#
#   project      : IniMark
#   file         : reader.py
#   file_relpath : src/inimark/io/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Point reads that stream a file without loading the whole document.

Both readers keep at most one section in memory and return an empty result
(``""`` or ``None``) when the file is missing, empty or unreadable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inimark.codec.classifier import CommentLine, PropertyLine, SectionLine, classify
from inimark.codec.lines import strip_line_ending
from inimark.config.logging import get_logger
from inimark.config.model import get_settings
from inimark.io.paths import is_valid_file
from inimark.model.comment import CommentBuilder
from inimark.model.property import Property
from inimark.model.section import Section, SectionBuilder

if TYPE_CHECKING:
    from inimark.config.logging import InimarkLogger
    from inimark.config.model import Settings
    from inimark.io.paths import PathLike

logger: InimarkLogger = get_logger(__name__)


def read_value(
    file: PathLike,
    section_name: str,
    key: str,
    *,
    settings: Settings | None = None,
) -> str:
    """Return the value of ``key`` in section ``section_name`` of ``file``.

    The first property with ``key`` (enabled or not) found after a
    ``[section_name]`` line wins.

    Returns:
        str: The value, or ``""`` when nothing matches or the file cannot be read.
    """
    if not is_valid_file(file):
        return ""
    settings = settings or get_settings()
    target = section_name.strip()
    wanted = key.strip()
    in_target = False
    try:
        with open(file, encoding=settings.encoding) as fh:
            for raw in fh:
                match classify(strip_line_ending(raw)):
                    case SectionLine(name=name):
                        in_target = name == target
                    case PropertyLine(key=k, value=value) if in_target and k == wanted:
                        return value
                    case _:
                        pass
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", file, exc)
    return ""


def read_section(
    file: PathLike,
    name: str,
    *,
    settings: Settings | None = None,
) -> Section | None:
    """Rebuild section ``name`` of ``file``.

    The section keeps its comment, enabled flag and properties (with their
    comments). Repeated ``[name]`` blocks are merged.

    Returns:
        Section | None: The section, or ``None`` when it is absent or empty.
    """
    if not is_valid_file(file):
        return None
    settings = settings or get_settings()
    target = name.strip()
    builder: SectionBuilder | None = None
    in_target = False
    pending = CommentBuilder()
    try:
        with open(file, encoding=settings.encoding) as fh:
            for raw in fh:
                match classify(strip_line_ending(raw)):
                    case CommentLine(text=text):
                        pending.append_line(text)
                    case SectionLine(name=found, enabled=enabled):
                        in_target = found == target
                        if in_target:
                            block = (
                                Section.builder()
                                .with_name(found)
                                .with_comment(pending.build())
                                .enable(enabled)
                            )
                            if builder is None:
                                builder = block
                            else:
                                builder.merge(block.build())
                        pending = CommentBuilder()
                    case PropertyLine(key=k, value=value, enabled=enabled):
                        if in_target and builder is not None:
                            builder.append_property(
                                Property.of(k, value, comment=pending.build(), enabled=enabled)
                            )
                        pending = CommentBuilder()
                    case _:
                        pass
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read %s: %s", file, exc)
    if builder is None:
        return None
    section = builder.build()
    logger.debug("Read section %r from %s (%d properties)", target, file, section.property_count)
    return None if section.is_empty else section
