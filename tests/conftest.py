# topmark:header:start
#
#   project      : IniMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the IniMark test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable settings split:

    - Build settings with `inimark.config.MutableSettings`, then `freeze()` them
      into `inimark.config.Settings` before passing them to I/O functions.
    - Do **not** mutate a frozen `Settings`. Call `Settings.thaw()`, edit the
      returned `MutableSettings`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from inimark.config import MutableSettings, get_settings, logging
from tests.samples import sample_document_text

if TYPE_CHECKING:
    from pathlib import Path

    from inimark.config import Settings

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_inimark_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure IniMark's runtime log level and settings are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variables.

    Yields:
        None: Control to the test; the settings cache is cleared around it.
    """
    monkeypatch.delenv("INIMARK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("INIMARK_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_settings(**overrides: Any) -> Settings:
    """Return frozen `Settings` built from the defaults and ``overrides``.

    Args:
        **overrides (Any): Field values set on the `MutableSettings` draft.

    Returns:
        Settings: The frozen settings.
    """
    draft = MutableSettings.from_defaults()
    for name, value in overrides.items():
        setattr(draft, name, value)
    return draft.freeze()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the three-section sample document (Person, Animal, Robot) to disk.

    Args:
        tmp_path (Path): Pytest temporary directory.

    Returns:
        Path: The written ``sample.ini``.
    """
    path = tmp_path / "sample.ini"
    path.write_text(sample_document_text() + "\n", encoding="utf-8")
    return path
