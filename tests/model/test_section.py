# topmark:header:start
#
#   project      : IniMark
#   file         : test_section.py
#   file_relpath : tests/model/test_section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Section` and `SectionBuilder`."""

from __future__ import annotations

import pytest

from inimark.model.property import Property
from inimark.model.section import Section
from inimark.model.types import Filters, Status


def _person() -> Section:
    return Section.of(
        "Person",
        Property.of("FirstName", "Jon"),
        Property.of("Age", "30", enabled=False),
        comment="People",
    )


def test_with_name_rejects_blank() -> None:
    """Blank section names are a validation error."""
    with pytest.raises(ValueError, match="must not be empty"):
        Section.builder().with_name("  ")


def test_section_without_properties_is_empty() -> None:
    """A section renders only when it holds at least one non-empty property."""
    assert Section.of("Lonely").is_empty
    assert Section.of("Lonely").to_string() == ""
    assert Section().is_empty


def test_append_property_skips_duplicates_and_empties() -> None:
    """Duplicate (key, value) pairs, `None` and empty properties are ignored."""
    section = (
        Section.builder()
        .with_name("S")
        .append_property(Property.of("k", "1"))
        .append_property(Property.of("k", "1"))
        .append_property(Property.of("k", "2"))
        .append_property(Property())
        .append_property(None)
        .build()
    )
    assert [(p.key, p.value) for p in section.properties] == [("k", "1"), ("k", "2")]


def test_lookups() -> None:
    """Lookups by key, (key, value) and index fall back to the empty property."""
    section = _person()
    assert section.get_property("FirstName").value == "Jon"
    assert section.get_property("Age", "30").key == "Age"
    assert section.get_property("Missing").is_empty
    assert section.property_at(1).key == "Age"
    assert section.property_at(-1).is_empty
    assert section.property_at(99).is_empty
    assert section.contains_property("FirstName")
    assert not section.contains_property("FirstName", "Jane")
    assert section.property_count == 2


def test_get_properties_by_status() -> None:
    """Status filters on the stored enabled flag."""
    section = _person()
    assert [p.key for p in section.get_properties()] == ["FirstName", "Age"]
    assert [p.key for p in section.get_properties(Status.ENABLED)] == ["FirstName"]
    assert [p.key for p in section.get_properties(Status.DISABLED)] == ["Age"]


def test_render() -> None:
    """Comment, title, then properties; filters apply to every level."""
    section = _person()
    assert section.to_string() == ";People\n[Person]\nFirstName=Jon\n#--Age=30--#"
    assert section.to_string(Filters.TRIM_COMMENT_DISABLED) == "[Person]\nFirstName=Jon"


def test_disabled_section_cascades_without_mutating() -> None:
    """A disabled section renders all its properties disabled but keeps their flags."""
    section = Section.of("Robot", Property.of("Color", "Green"), enabled=False)
    assert section.to_string() == "#--[Robot]--#\n#--Color=Green--#"
    assert section.to_string(Filters.TRIM_DISABLED) == ""
    assert section.properties[0].enabled


def test_remove_property() -> None:
    """Removal by key and by index; misses are no-ops."""
    builder = _person().thaw()
    builder.remove_property("Missing").remove_property_at(5).remove_property_at(-1)
    assert len(builder.properties) == 2
    builder.remove_property("FirstName")
    assert [p.key for p in builder.properties] == ["Age"]
    builder.remove_property_at(0)
    assert builder.properties == []


def test_merge() -> None:
    """Merging unions comments and appends properties whose pair is new."""
    other = Section.of(
        "Person",
        Property.of("FirstName", "Jon"),
        Property.of("LastName", "Doe"),
        comment="More people",
    )
    merged = _person().thaw().merge(other).build()
    assert merged.comment.lines == ("People", "More people")
    assert [p.key for p in merged.properties] == ["FirstName", "Age", "LastName"]


def test_unnamed_builder_adopts_name_on_merge() -> None:
    """An unnamed builder takes the name of the merged section."""
    merged = Section.builder().merge(_person()).build()
    assert merged.name == "Person"


def test_parse_first_section_only() -> None:
    """`parse` reads the first section and stops at the next one."""
    text = "k0=dropped\n;sec\n[A]\n;prop\na=1\n[B]\nb=2"
    section = Section.builder().parse(text).build()
    assert section.name == "A"
    assert section.comment.lines == ("sec",)
    assert [(p.key, p.value) for p in section.properties] == [("a", "1")]
    assert section.properties[0].comment.lines == ("prop",)
