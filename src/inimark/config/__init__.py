# topmark:header:start
#
#   project      : IniMark
#   file         : __init__.py
#   file_relpath : src/inimark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for IniMark.

Notes:
    Build settings with `MutableSettings` and `freeze()` them into `Settings`
    before passing them to the I/O functions. Do not mutate a frozen
    `Settings`; call `Settings.thaw()`, edit, then `freeze()` again.
"""

from __future__ import annotations

from inimark.config import logging
from inimark.config.model import MutableSettings, Settings, get_settings, load_settings

__all__ = [
    "MutableSettings",
    "Settings",
    "get_settings",
    "load_settings",
    "logging",
]
