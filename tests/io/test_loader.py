# topmark:header:start
#
#   project      : IniMark
#   file         : test_loader.py
#   file_relpath : tests/io/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bounded, resumable loader (`inimark.io.loader`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inimark.io.loader import ResumeToken, iter_pages, load, load_next, load_page
from inimark.model.document import Document
from tests.conftest import make_settings
from tests.samples import rendered_sample_text

if TYPE_CHECKING:
    from pathlib import Path


def test_full_load(sample_file: Path) -> None:
    """An unbounded load reads everything and leaves no cursor."""
    document = load(sample_file)
    assert document.to_string() == rendered_sample_text()
    assert document.file_path == str(sample_file)
    assert document.resume_cursor == -1
    assert not document.has_more


def test_paging_one_section_at_a_time(sample_file: Path) -> None:
    """Each page holds one section; the header is carried over and the cursor advances."""
    first = load(sample_file, 1)
    assert first.to_string() == rendered_sample_text("Person", footer=False)
    # The cursor points at the comment above [Animal].
    assert first.resume_cursor == 10

    second = load_next(first, 1)
    assert second.to_string() == rendered_sample_text("Animal", footer=False)
    assert second.resume_cursor == 18

    third = load_next(second, 1)
    assert third.to_string() == rendered_sample_text("Robot")
    assert third.resume_cursor == -1
    assert load_next(third, 1) is third


def test_remainder_after_first_page(sample_file: Path) -> None:
    """`limit=0` on the next page loads everything that is left."""
    rest = load_next(load(sample_file, 1))
    assert rest.to_string() == rendered_sample_text("Animal", "Robot")
    assert not rest.has_more


def test_pagination_equivalence(sample_file: Path) -> None:
    """Merging the pages yields the same rendering as one unbounded load."""
    first = load(sample_file, 2)
    second = load_next(first, 2)
    merged = first.thaw().merge(second).build()
    assert merged.to_string() == load(sample_file).to_string()


def test_four_sections_first_page_then_remainder(tmp_path: Path) -> None:
    """Two sections, then the rest with `limit=0`, merge back into the full document."""
    path = tmp_path / "four.ini"
    path.write_text("[A]\na=1\n[B]\nb=2\n[C]\nc=3\n[D]\nd=4\n", encoding="utf-8")
    first = load(path, 2)
    assert [s.name for s in first.sections] == ["A", "B"]
    assert first.has_more
    rest = load_next(first, 0)
    assert [s.name for s in rest.sections] == ["C", "D"]
    assert not rest.has_more
    merged = first.thaw().merge(rest).build()
    assert merged.to_string() == load(path, 0).to_string()


def test_builder_load_and_load_next(sample_file: Path) -> None:
    """The builder methods drive the same loader."""
    builder = Document.builder().load(1, sample_file)
    assert [s.name for s in builder.sections] == ["Person"]
    builder.load_next(1)
    assert [s.name for s in builder.sections] == ["Animal"]
    builder.load_next()
    assert [s.name for s in builder.sections] == ["Robot"]
    assert builder.resume_cursor == -1
    # Nothing left: no-op.
    builder.load_next()
    assert [s.name for s in builder.sections] == ["Robot"]


def test_builder_load_falls_back_to_file_path(sample_file: Path) -> None:
    """Without a valid `path` argument the builder's own file is loaded."""
    builder = Document.builder().with_file(sample_file).load(0, "")
    assert builder.build().section_count == 3


def test_load_page_tokens(sample_file: Path) -> None:
    """`load_page` hands out explicit resume tokens until the file is exhausted."""
    page, token = load_page(sample_file, limit=2)
    assert [s.name for s in page.sections] == ["Person", "Animal"]
    assert token == ResumeToken(path=str(sample_file), line_index=18)

    page, token = load_page(sample_file, token, 2)
    assert [s.name for s in page.sections] == ["Robot"]
    assert token is None


def test_iter_pages(sample_file: Path) -> None:
    """`iter_pages` yields every page in order."""
    names = [[s.name for s in page.sections] for page in iter_pages(sample_file, 1)]
    assert names == [["Person"], ["Animal"], ["Robot"]]


def test_missing_empty_and_directory_paths(tmp_path: Path) -> None:
    """Missing, empty and directory paths load as the empty document."""
    empty = tmp_path / "empty.ini"
    empty.write_text("", encoding="utf-8")
    for path in (tmp_path / "missing.ini", empty, tmp_path):
        document = load(path)
        assert document.is_empty
        assert document.file_path == ""


def test_undecodable_file_is_logged_and_empty(tmp_path: Path) -> None:
    """Decoding errors are caught; the result is what was read before the error."""
    path = tmp_path / "bad.ini"
    path.write_bytes(b"[A]\na=1\n\xff\xfe\n")
    document = load(path)
    assert document.resume_cursor == -1
    assert not document.has_more


def test_encoding_setting(tmp_path: Path) -> None:
    """Files are decoded with the configured encoding."""
    path = tmp_path / "latin.ini"
    path.write_bytes("[Café]\nname=Renée\n".encode("latin-1"))
    document = load(path, settings=make_settings(encoding="latin-1"))
    assert document.get_section("Café").get_property("name").value == "Renée"
