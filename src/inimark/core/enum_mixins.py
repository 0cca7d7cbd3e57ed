# topmark:header:start
#
#   project      : IniMark
#   file         : enum_mixins.py
#   file_relpath : src/inimark/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for IniMark (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_name(enum_cls, name, *, case_insensitive=False)``:
        Typed lookup by ``name`` from ``__members__``. Returns ``None`` on miss.
    - ``enum_names(enum_cls)``:
        Member names in definition order, aliases included (used for CLI choices
        and for validating TOML lists of flag names).

Example:
    ```python
    from inimark.core.enum_mixins import enum_from_name
    from inimark.model.types import Filters

    assert enum_from_name(Filters, "trim_comment", case_insensitive=True) is Filters.TRIM_COMMENT
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(
    enum_cls: type[_E],
    key_name: str | None,
    *,
    case_insensitive: bool = False,
) -> _E | None:
    """Return the enum member for ``key_name`` from ``enum_cls.__members__``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g., ``'TRIM_COMMENT'``). If ``None``,
            returns ``None``.
        case_insensitive (bool): If True, lookup is performed with ``key_name.upper()``.

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if key_name is None:
        return None
    target: str = key_name.strip().upper() if case_insensitive else key_name
    member: Any | None = enum_cls.__members__.get(target)
    return cast("_E | None", member)


def enum_names(enum_cls: type[Enum]) -> list[str]:
    """Return all member names of ``enum_cls`` (aliases included)."""
    return list(enum_cls.__members__)
