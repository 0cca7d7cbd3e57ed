# topmark:header:start
#
#   project      : IniMark
#   file         : test_upsert.py
#   file_relpath : tests/io/test_upsert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the streaming single-property rewrite (`inimark.io.writer.upsert`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from inimark.core.errors import InvalidPathError
from inimark.io.loader import load
from inimark.io.reader import read_section, read_value
from inimark.io.writer import WriteStatus, upsert
from tests.conftest import make_settings, parametrize
from tests.samples import FOOTER_LINE, sample_document_text

if TYPE_CHECKING:
    from pathlib import Path


def _keys(path: Path, section: str) -> list[str]:
    found = read_section(path, section)
    assert found is not None
    return [p.key for p in found.properties]


def test_creates_missing_file_and_parents(tmp_path: Path) -> None:
    """A missing file is created together with its parent directories."""
    path = tmp_path / "nested" / "dir" / "new.ini"
    result = upsert(path, "Person", "name", "jon")
    assert result.status is WriteStatus.CREATED
    assert result.path == path
    assert path.read_text(encoding="utf-8") == "[Person]\nname=jon"
    assert result.bytes_written == path.stat().st_size


def test_replace_existing_key(sample_file: Path) -> None:
    """`update_existing=True` replaces the key in place."""
    result = upsert(sample_file, "Person", "Age", "90", update_existing=True)
    assert result.status is WriteStatus.REPLACED
    assert _keys(sample_file, "Person") == ["FirstName", "LastName", "Age"]
    age = read_section(sample_file, "Person").get_property("Age")  # type: ignore[union-attr]
    assert age.value == "90"
    assert age.enabled


def test_insert_after_existing_key(sample_file: Path) -> None:
    """`update_existing=False` keeps the old line and inserts the new one after it."""
    result = upsert(sample_file, "Person", "Age", "90", update_existing=False)
    assert result.status is WriteStatus.INSERTED
    assert _keys(sample_file, "Person") == ["FirstName", "LastName", "Age", "Age"]
    assert "#--Age=30--#\nAge=90\n" in sample_file.read_text(encoding="utf-8")


def test_replace_collapses_duplicate_keys(tmp_path: Path) -> None:
    """Replacing leaves a single line even when the key appears several times."""
    path = tmp_path / "dup.ini"
    path.write_text("[P]\nAge=30\nAge=31\n", encoding="utf-8")
    result = upsert(path, "P", "Age", "90", update_existing=True)
    assert result.status is WriteStatus.REPLACED
    assert path.read_text(encoding="utf-8").splitlines() == ["[P]", "Age=90"]


def test_replace_across_repeated_section_blocks(tmp_path: Path) -> None:
    """A key appended to the first block is not written again in a later block of the same name."""
    path = tmp_path / "repeated.ini"
    path.write_text("[P]\na=1\n[Q]\nx=1\n[P]\nAge=30\n", encoding="utf-8")
    result = upsert(path, "P", "Age", "90", update_existing=True)
    assert result.status is WriteStatus.APPENDED
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == ["[P]", "a=1", "Age=90", "[Q]", "x=1", "[P]"]
    assert read_value(path, "P", "Age") == "90"


def test_default_mode_comes_from_settings(sample_file: Path) -> None:
    """Without an explicit mode, `Settings.update_existing` decides."""
    result = upsert(sample_file, "Person", "Age", "90", settings=make_settings(update_existing=True))
    assert result.status is WriteStatus.REPLACED


def test_append_to_existing_section(sample_file: Path) -> None:
    """A new key goes after the last property; trailing comments stay below it."""
    result = upsert(sample_file, "Person", "Sex", "Male")
    assert result.status is WriteStatus.APPENDED
    assert _keys(sample_file, "Person") == ["FirstName", "LastName", "Age", "Sex"]
    text = sample_file.read_text(encoding="utf-8")
    assert "#--Age=30--#\nSex=Male\n;Section 2.\n[Animal]" in text
    assert read_value(sample_file, "Animal", "Kind") == "Cat"


def test_append_to_last_section(sample_file: Path) -> None:
    """Appending to the last section keeps the footer last."""
    upsert(sample_file, "Robot", "Weight", "2t")
    lines = sample_file.read_text(encoding="utf-8").splitlines()
    assert lines[-2:] == ["Weight=2t", FOOTER_LINE]


def test_add_missing_section_before_footer(sample_file: Path) -> None:
    """A missing section is appended before the footer."""
    result = upsert(sample_file, "Insect", "Type", "Fly")
    assert result.status is WriteStatus.SECTION_ADDED
    body = sample_document_text().removesuffix(FOOTER_LINE)
    expected = f"{body}[Insect]\nType=Fly\n{FOOTER_LINE}\n"
    assert sample_file.read_text(encoding="utf-8") == expected
    assert load(sample_file).section_count == 4


def test_other_sections_untouched(sample_file: Path) -> None:
    """Only the target section changes."""
    before = load(sample_file)
    upsert(sample_file, "Person", "Age", "31", update_existing=True)
    after = load(sample_file)
    assert after.get_section("Animal") == before.get_section("Animal")
    assert after.get_section("Robot") == before.get_section("Robot")
    assert after.header == before.header
    assert after.footer == before.footer


@parametrize("capacity", [1, 2, 7])
def test_small_cache_capacity_gives_same_result(tmp_path: Path, capacity: int) -> None:
    """The spill cache size does not change the output."""
    reference = tmp_path / "reference.ini"
    spilled = tmp_path / "spilled.ini"
    for path in (reference, spilled):
        path.write_text(sample_document_text() + "\n", encoding="utf-8")
    upsert(reference, "Animal", "Legs", "4")
    upsert(spilled, "Animal", "Legs", "4", settings=make_settings(cache_capacity=capacity))
    assert spilled.read_bytes() == reference.read_bytes()


def test_orphan_temp_file_is_truncated(sample_file: Path) -> None:
    """A temp file left by an interrupted run does not leak into the result."""
    orphan = sample_file.with_name(sample_file.name + ".tmp")
    orphan.write_text("[Garbage]\njunk=1\n", encoding="utf-8")
    upsert(sample_file, "Person", "Sex", "Male")
    assert not orphan.exists()
    assert "Garbage" not in sample_file.read_text(encoding="utf-8")


def test_newline_setting(sample_file: Path) -> None:
    """The rewritten file uses the configured line terminator."""
    upsert(sample_file, "Person", "Sex", "Male", settings=make_settings(newline="\r\n"))
    data = sample_file.read_bytes()
    assert b"Sex=Male\r\n" in data
    assert b"\n" not in data.replace(b"\r\n", b"")


def test_value_none_writes_empty_value(sample_file: Path) -> None:
    """`None` is written as an empty value."""
    upsert(sample_file, "Person", "Nickname", None)
    assert "Nickname=\n" in sample_file.read_text(encoding="utf-8")


def test_names_are_trimmed(sample_file: Path) -> None:
    """Surrounding whitespace in section names and keys is ignored."""
    result = upsert(sample_file, "  Person ", " Age ", "90", update_existing=True)
    assert result.status is WriteStatus.REPLACED


@parametrize(("section", "key"), [("", "k"), ("   ", "k"), ("S", ""), ("S", "  ")])
def test_blank_names_rejected(sample_file: Path, section: str, key: str) -> None:
    """Blank section names or keys raise before the file is touched."""
    before = sample_file.read_bytes()
    with pytest.raises(ValueError):
        upsert(sample_file, section, key, "v")
    assert sample_file.read_bytes() == before


@parametrize("bad", ["", "   "])
def test_invalid_path_rejected(bad: str) -> None:
    """Blank paths raise `InvalidPathError`."""
    with pytest.raises(InvalidPathError):
        upsert(bad, "S", "k", "v")


def test_directory_path_rejected(tmp_path: Path) -> None:
    """A directory is not a valid target."""
    with pytest.raises(InvalidPathError):
        upsert(tmp_path, "S", "k", "v")
