# topmark:header:start
#
#   project      : IniMark
#   file         : test_comment.py
#   file_relpath : tests/model/test_comment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Comment` and `CommentBuilder`."""

from __future__ import annotations

from inimark.model.comment import Comment, coerce_comment
from inimark.model.types import CommentKind


def test_append_line_cleans_and_deduplicates() -> None:
    """Lines are stored without affixes; blanks and duplicates are dropped."""
    comment = (
        Comment.builder()
        .append_line(";first")
        .append_line("   ")
        .append_line(None)
        .append_line("# first")
        .append_line("second")
        .build()
    )
    assert comment.lines == ("first", "second")
    assert comment.line_count == 2


def test_render_uses_kind_affix() -> None:
    """Rendering wraps each line with the affix of the comment kind."""
    lines = ["one", "two"]
    assert Comment.builder(lines).build().to_string() == ";one\n;two"
    assert Comment.builder(lines, kind=CommentKind.HEADER).build().to_string() == (
        "###--one--###\n###--two--###"
    )
    assert str(Comment.builder(lines, kind=CommentKind.FOOTER).build()) == (
        "##--one--##\n##--two--##"
    )


def test_empty_comment_renders_nothing() -> None:
    """An empty block renders as the empty string."""
    assert Comment().is_empty
    assert Comment().to_string() == ""


def test_parse_splits_lines() -> None:
    """`parse` appends one entry per non-blank line."""
    comment = Comment.builder().parse(";a\r\n\n   \n;b \r;a").build()
    assert comment.lines == ("a", "b")


def test_thaw_is_independent() -> None:
    """Editing a thawed builder leaves the frozen comment untouched."""
    original = Comment.builder(["x"]).build()
    edited = original.thaw().append_line("y").remove_line_at(0).build()
    assert original.lines == ("x",)
    assert edited.lines == ("y",)


def test_remove_line_at_ignores_out_of_range() -> None:
    """Out-of-range indexes are no-ops."""
    builder = Comment.builder(["x"])
    builder.remove_line_at(-1).remove_line_at(5)
    assert builder.lines == ["x"]


def test_merge_unions_lines() -> None:
    """`merge` appends only the lines not yet present."""
    merged = Comment.builder(["a", "b"]).merge(Comment.builder(["b", "c"]).build()).build()
    assert merged.lines == ("a", "b", "c")


def test_clear_and_as_type() -> None:
    """`clear` drops lines; `as_type` changes the kind."""
    builder = Comment.builder(["a"]).as_type(CommentKind.FOOTER).clear()
    assert builder.is_empty
    assert builder.build().kind is CommentKind.FOOTER


def test_coerce_comment() -> None:
    """Strings are parsed, `None` is empty, and comments are retyped when needed."""
    assert coerce_comment(None).is_empty
    assert coerce_comment(";a\n;b").lines == ("a", "b")
    header = coerce_comment(Comment.builder(["h"]).build(), CommentKind.HEADER)
    assert header.kind is CommentKind.HEADER
    assert header.lines == ("h",)
