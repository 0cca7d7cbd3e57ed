# topmark:header:start
#
#   project      : IniMark
#   file         : model.py
#   file_relpath : src/inimark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime settings for IniMark I/O.

This module follows an immutable/mutable split:

- [`MutableSettings`][inimark.config.model.MutableSettings] is a draft whose
  fields are ``None`` until a layer sets them. Layers (defaults, TOML files,
  CLI overrides) are combined with ``merge_with`` (last wins).
- [`Settings`][inimark.config.model.Settings] is the frozen snapshot handed to
  the loader, the readers and the writers. Call ``thaw()`` to edit a copy.

Every I/O function takes an optional ``settings`` argument and falls back to
[`get_settings`][inimark.config.model.get_settings] when it is omitted.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from inimark.config.io import (
    extract_settings_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from inimark.config.keys import Toml
from inimark.config.logging import get_logger
from inimark.constants import (
    DEFAULT_CACHE_CAPACITY,
    DEFAULT_ENCODING,
    DEFAULT_NEWLINE,
    DEFAULT_TEMP_SUFFIX,
    ENV_CONFIG_PATH,
)
from inimark.model.types import Filters

if TYPE_CHECKING:
    from inimark.config.io import TomlTable
    from inimark.config.logging import InimarkLogger

logger: InimarkLogger = get_logger(__name__)

VALID_NEWLINES: tuple[str, ...] = ("\n", "\r\n", "\r")


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        encoding (str): Text encoding for reads and writes.
        newline (str): Line terminator used when writing files.
        cache_capacity (int): Lines held by the upsert rewrite before each flush.
        temp_suffix (str): Suffix of the upsert temp file (``<file><suffix>``).
        filters (Filters): Default filters for whole-document writes.
        update_existing (bool): Default upsert mode (replace vs. insert after).
        config_files (tuple[Path, ...]): TOML files that contributed to this snapshot.
    """

    encoding: str = DEFAULT_ENCODING
    newline: str = DEFAULT_NEWLINE
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    temp_suffix: str = DEFAULT_TEMP_SUFFIX
    filters: Filters = Filters.NONE
    update_existing: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableSettings:
        """Return a mutable copy of these settings."""
        return MutableSettings(
            encoding=self.encoding,
            newline=self.newline,
            cache_capacity=self.cache_capacity,
            temp_suffix=self.temp_suffix,
            filters=self.filters,
            update_existing=self.update_existing,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return these settings in the shape of ``inimark-default.toml``."""
        return {
            Toml.SECTION_IO: {
                Toml.KEY_ENCODING: self.encoding,
                Toml.KEY_NEWLINE: self.newline,
            },
            Toml.SECTION_WRITER: {
                Toml.KEY_CACHE_CAPACITY: self.cache_capacity,
                Toml.KEY_TEMP_SUFFIX: self.temp_suffix,
                Toml.KEY_UPDATE_EXISTING: self.update_existing,
            },
            Toml.SECTION_RENDER: {
                Toml.KEY_FILTERS: [
                    f.name for f in Filters if f.name and f in self.filters and _is_single(f)
                ],
            },
        }


def _is_single(flag: Filters) -> bool:
    return flag.value != 0 and flag.value & (flag.value - 1) == 0


@dataclass
class MutableSettings:
    """Mutable settings draft; ``None`` means "not set by this layer"."""

    encoding: str | None = None
    newline: str | None = None
    cache_capacity: int | None = None
    temp_suffix: str | None = None
    filters: Filters | None = None
    update_existing: bool | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Settings:
        """Validate and freeze into [`Settings`][inimark.config.model.Settings].

        Unset fields take the built-in defaults.

        Raises:
            ValueError: If a set value is out of range (unknown encoding, unsupported
                newline, capacity below 1, blank temp suffix).
        """
        encoding = self.encoding if self.encoding is not None else DEFAULT_ENCODING
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {encoding!r}") from exc

        newline = self.newline if self.newline is not None else DEFAULT_NEWLINE
        if newline not in VALID_NEWLINES:
            raise ValueError(f"Unsupported newline: {newline!r}")

        capacity = self.cache_capacity if self.cache_capacity is not None else DEFAULT_CACHE_CAPACITY
        if capacity < 1:
            raise ValueError(f"cache_capacity must be >= 1, got {capacity}")

        suffix = self.temp_suffix if self.temp_suffix is not None else DEFAULT_TEMP_SUFFIX
        if not suffix.strip():
            raise ValueError("temp_suffix must not be blank")

        return Settings(
            encoding=encoding,
            newline=newline,
            cache_capacity=capacity,
            temp_suffix=suffix,
            filters=self.filters if self.filters is not None else Filters.NONE,
            update_existing=bool(self.update_existing),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableSettings:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings | None:
        """Load a draft from ``inimark.toml`` or from ``[tool.inimark]`` in ``pyproject.toml``.

        Returns:
            MutableSettings | None: The draft, or ``None`` when the file holds no
            IniMark table.
        """
        logger.debug("Loading settings from %s", path)
        table = extract_settings_table(path, load_toml_dict(path))
        if table is None:
            return None
        draft = cls.from_toml_dict(table)
        draft.config_files = [path]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableSettings:
        """Build a draft from a TOML-shaped dict; invalid values are warned about and skipped."""
        io_table = get_table_value(data, Toml.SECTION_IO)
        writer_table = get_table_value(data, Toml.SECTION_WRITER)
        render_table = get_table_value(data, Toml.SECTION_RENDER)

        draft = cls(
            encoding=get_string_value_or_none(io_table, Toml.KEY_ENCODING),
            newline=get_string_value_or_none(io_table, Toml.KEY_NEWLINE),
            cache_capacity=get_int_value_or_none(writer_table, Toml.KEY_CACHE_CAPACITY),
            temp_suffix=get_string_value_or_none(writer_table, Toml.KEY_TEMP_SUFFIX),
            update_existing=get_bool_value_or_none(writer_table, Toml.KEY_UPDATE_EXISTING),
        )

        names = get_string_list_value_or_none(render_table, Toml.KEY_FILTERS)
        if names is not None:
            try:
                draft.filters = Filters.from_names(names)
            except ValueError as exc:
                logger.warning("Ignoring [%s].%s: %s", Toml.SECTION_RENDER, Toml.KEY_FILTERS, exc)

        draft.sanitize()
        return draft

    def sanitize(self) -> None:
        """Drop (with a warning) values that `freeze` would reject."""
        if self.encoding is not None:
            try:
                codecs.lookup(self.encoding)
            except LookupError:
                logger.warning("Ignoring unknown encoding %r", self.encoding)
                self.encoding = None
        if self.newline is not None and self.newline not in VALID_NEWLINES:
            logger.warning("Ignoring unsupported newline %r", self.newline)
            self.newline = None
        if self.cache_capacity is not None and self.cache_capacity < 1:
            logger.warning("Ignoring cache_capacity %d (must be >= 1)", self.cache_capacity)
            self.cache_capacity = None
        if self.temp_suffix is not None and not self.temp_suffix.strip():
            logger.warning("Ignoring blank temp_suffix")
            self.temp_suffix = None

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableSettings(
            encoding=other.encoding if other.encoding is not None else self.encoding,
            newline=other.newline if other.newline is not None else self.newline,
            cache_capacity=other.cache_capacity
            if other.cache_capacity is not None
            else self.cache_capacity,
            temp_suffix=other.temp_suffix if other.temp_suffix is not None else self.temp_suffix,
            filters=other.filters if other.filters is not None else self.filters,
            update_existing=other.update_existing
            if other.update_existing is not None
            else self.update_existing,
            config_files=self.config_files + other.config_files,
        )


def load_settings(config_file: Path | None = None) -> Settings:
    """Build settings from the defaults, optionally overlaid with one TOML file.

    Args:
        config_file (Path | None): ``inimark.toml`` or ``pyproject.toml`` to apply
            on top of the defaults. Unreadable files are logged and skipped.

    Returns:
        Settings: The frozen result.
    """
    draft = MutableSettings.from_defaults()
    if config_file is not None:
        overlay = MutableSettings.from_toml_file(config_file)
        if overlay is not None:
            draft = draft.merge_with(overlay)
    return draft.freeze()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide default settings.

    Honors ``INIMARK_CONFIG`` (path to a TOML file) on first use; the result is
    cached, call ``get_settings.cache_clear()`` after changing the environment.
    """
    env_path = os.environ.get(ENV_CONFIG_PATH)
    return load_settings(Path(env_path) if env_path else None)
