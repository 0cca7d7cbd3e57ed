# topmark:header:start
#
#   project      : IniMark
#   file         : test_cli_edit.py
#   file_relpath : tests/cli/test_cli_edit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `get`, `section` and `set`, including their exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inimark.cli.exit_codes import ExitCode
from inimark.io.reader import read_section, read_value
from tests.cli.conftest import (
    assert_FILE_NOT_FOUND,
    assert_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_get_prints_value(sample_file: Path) -> None:
    """`get` prints the raw value."""
    result = run_cli(["get", str(sample_file), "Animal", "Color"])
    assert_SUCCESS(result)
    assert result.output == "Ash-Grey\n"


@mark_cli
@parametrize(("section", "key"), [("Animal", "Legs"), ("Insect", "Type")])
def test_get_missing_exits_not_found(sample_file: Path, section: str, key: str) -> None:
    """A missing key or section exits with 1 and prints nothing."""
    result = run_cli(["get", str(sample_file), section, key])
    assert_NOT_FOUND(result)
    assert result.output == ""


@mark_cli
def test_get_missing_file(tmp_path: Path) -> None:
    """`get` on a missing file exits with FILE_NOT_FOUND."""
    assert_FILE_NOT_FOUND(run_cli(["get", str(tmp_path / "nope.ini"), "A", "a"]))


@mark_cli
def test_section_prints_section(sample_file: Path) -> None:
    """`section` prints the section with its comments."""
    result = run_cli(["section", str(sample_file), "Animal"])
    assert_SUCCESS(result)
    assert result.output.splitlines()[:2] == [";Section 2.", "[Animal]"]
    assert "Kind=Cat" in result.output


@mark_cli
def test_section_with_filter(sample_file: Path) -> None:
    """Filters apply to the printed section."""
    result = run_cli(["section", str(sample_file), "Robot", "--filter", "TRIM_COMMENT"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "#--[Robot]--#",
        "#--BodyType=Iron--#",
        "#--Color=Green--#",
        "#--Model=3000-246--#",
    ]


@mark_cli
def test_section_missing(sample_file: Path) -> None:
    """An absent section exits with 1."""
    assert_NOT_FOUND(run_cli(["section", str(sample_file), "Insect"]))


@mark_cli
def test_set_creates_file(tmp_path: Path) -> None:
    """`set` creates a missing file and reports it."""
    path = tmp_path / "new" / "people.ini"
    result = run_cli(["set", str(path), "Person", "Name", "Jon"])
    assert_SUCCESS(result)
    assert result.output == f"{path}: created\n"
    assert read_value(path, "Person", "Name") == "Jon"


@mark_cli
@parametrize(
    ("flag", "status", "count"),
    [("--update", "replaced", 1), ("--append", "inserted", 2)],
)
def test_set_update_or_append(sample_file: Path, flag: str, status: str, count: int) -> None:
    """`--update` replaces the key; `--append` inserts a second line."""
    result = run_cli(["set", str(sample_file), "Person", "Age", "90", flag])
    assert_SUCCESS(result)
    assert result.output.strip().endswith(status)
    person = read_section(sample_file, "Person")
    assert person is not None
    assert [p.key for p in person.properties].count("Age") == count


@mark_cli
def test_set_quiet_and_verbose(sample_file: Path) -> None:
    """`-q` silences the report; `-v` adds the written property."""
    quiet = run_cli(["-q", "set", str(sample_file), "Animal", "Legs", "4"])
    assert_SUCCESS(quiet)
    assert quiet.output == ""

    verbose = run_cli(["-v", "set", str(sample_file), "Insect", "Type", "Fly"])
    assert_SUCCESS(verbose)
    assert "section added" in verbose.output
    assert "[Insect] Type=Fly" in verbose.output


@mark_cli
def test_set_blank_key_is_usage_error(sample_file: Path) -> None:
    """Blank keys are rejected with USAGE_ERROR."""
    assert_USAGE_ERROR(run_cli(["set", str(sample_file), "Person", "  ", "x"]))


@mark_cli
def test_set_directory_path(tmp_path: Path) -> None:
    """A directory is not a valid target."""
    assert_FILE_NOT_FOUND(run_cli(["set", str(tmp_path), "A", "a", "1"]))


@mark_cli
def test_set_undecodable_file(tmp_path: Path) -> None:
    """Files that cannot be decoded exit with ENCODING_ERROR."""
    path = tmp_path / "binary.ini"
    path.write_bytes(b"[A]\na=\xff\xfe\n")
    result = run_cli(["set", str(path), "A", "b", "1"])
    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output


@mark_cli
def test_verbose_and_quiet_conflict(sample_file: Path) -> None:
    """`-v` and `-q` together are a usage error."""
    assert_USAGE_ERROR(run_cli(["-v", "-q", "show", str(sample_file)]))


@mark_cli
def test_missing_config_file(sample_file: Path, tmp_path: Path) -> None:
    """A missing `--config` file is rejected by Click."""
    missing = run_cli(["--config", str(tmp_path / "missing.toml"), "show", str(sample_file)])
    assert missing.exit_code == 2
