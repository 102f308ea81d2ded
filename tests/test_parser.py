"""Tests for gofr_dotenv.parser."""

from pathlib import Path
from unittest.mock import patch

import pytest

from gofr_dotenv.exceptions import (
    DotenvError,
    EnvEncodingError,
    EnvNameError,
    EnvSyntaxError,
    EnvValueError,
    PathNotAccessibleError,
)
from gofr_dotenv.parser import is_comment, parse_file, parse_line, parse_lines, read_lines


class TestReadLines:
    """The line-reading primitive."""

    def test_strips_newlines_and_skips_blank_lines(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("A1=x\n\n   \nB2=y\r\nC3=z")

        assert read_lines(str(env_file)) == ["A1=x", "B2=y", "C3=z"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(PathNotAccessibleError):
            read_lines(str(tmp_path / "missing"))

    def test_directory_is_not_a_file(self, tmp_path: Path):
        with pytest.raises(PathNotAccessibleError):
            read_lines(str(tmp_path))

    def test_invalid_utf8(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"A1=caf\xe9\n")

        with pytest.raises(EnvEncodingError) as exc_info:
            read_lines(str(env_file))

        assert exc_info.value.code == "INVALID_ENCODING"
        assert exc_info.value.details["source"] == str(env_file)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_open_failure_is_a_path_error(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("A1=x\n")

        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(PathNotAccessibleError) as exc_info:
                read_lines(str(env_file))

        assert exc_info.value.path == str(env_file)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_control_character_line_is_not_blank(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"A1=x\n\x1f\n")

        assert read_lines(str(env_file)) == ["A1=x", "\x1f"]


class TestParseLine:
    """Single declaration parsing."""

    def test_simple(self):
        assert parse_line("DB_HOST=example.host") == ("DB_HOST", "example.host")

    def test_whitespace_is_trimmed(self):
        assert parse_line("  DB_HOST   =   example.host  ") == ("DB_HOST", "example.host")

    def test_tabs_are_trimmed(self):
        assert parse_line("\tDB_HOST=\texample.host\t") == ("DB_HOST", "example.host")

    @pytest.mark.parametrize(
        "line, value",
        [
            ("A1=x\x1f", "x\x1f"),
            ("A1=x\x0b", "x\x0b"),
            ("A1=\x0cx", "\x0cx"),
            ("A1=\x85x", "\x85x"),
        ],
    )
    def test_control_characters_are_not_trimmed(self, line, value):
        with pytest.raises(EnvValueError) as exc_info:
            parse_line(line)
        assert exc_info.value.value == value

    def test_control_character_around_name_is_rejected(self):
        with pytest.raises(EnvNameError):
            parse_line("\x1cA1=x")

    def test_empty_value(self):
        assert parse_line("DB_PASS=") == ("DB_PASS", "")

    def test_splits_on_first_equals_only(self):
        assert parse_line("QUERY=a=1&b=2") == ("QUERY", "a=1&b=2")

    def test_missing_equals(self):
        with pytest.raises(EnvSyntaxError) as exc_info:
            parse_line("bad line no equals")

        assert exc_info.value.line == "bad line no equals"
        assert exc_info.value.code == "WRONG_DEFINITION"
        assert "bad line no equals" in str(exc_info.value)

    @pytest.mark.parametrize("line", ["1st_ENV=x", "App-Env=x", "=x", "A=x"])
    def test_invalid_name(self, line):
        with pytest.raises(EnvNameError):
            parse_line(line)

    def test_invalid_value(self):
        with pytest.raises(EnvValueError) as exc_info:
            parse_line("GREETING=hello\tworld")
        assert exc_info.value.value == "hello\tworld"

    def test_escaped_control_characters_are_kept_verbatim(self):
        assert parse_line(r"GREETING=hello\tworld\n") == ("GREETING", r"hello\tworld\n")


class TestParseLines:
    """Parsing a sequence of lines into a variable set."""

    def test_comments_are_skipped(self):
        lines = ["# comment", "   # indented comment", "A1=x", "#B2=y"]
        assert parse_lines(lines) == {"A1": "x"}

    def test_hash_inside_value_is_not_a_comment(self):
        assert parse_lines(["COLOR=#ff0000"]) == {"COLOR": "#ff0000"}

    def test_later_duplicate_wins(self):
        assert parse_lines(["A1=first", "A1=second"]) == {"A1": "second"}

    def test_empty_input(self):
        assert parse_lines([]) == {}

    def test_error_carries_source(self):
        with pytest.raises(EnvSyntaxError) as exc_info:
            parse_lines(["A1=x", "broken"], source="/srv/app/.env")
        assert exc_info.value.details == {"line": "broken", "source": "/srv/app/.env"}


class TestParseFile:
    """Parsing whole files."""

    def test_correct_syntax(self, tmp_path: Path):
        env_file = tmp_path / ".correct-syntax"
        env_file.write_text("# Example\nvarOne=First\n\nvar2 = Second\nvarThree=3rd\n")

        assert parse_file(str(env_file)) == {"varOne": "First", "var2": "Second", "varThree": "3rd"}

    def test_only_comments(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("# nothing here\n\n")

        assert parse_file(str(env_file)) == {}

    def test_wrong_syntax_fails_atomically(self, tmp_path: Path):
        env_file = tmp_path / ".wrong-syntax"
        env_file.write_text("GOOD=1\nbad line no equals\nALSO_GOOD=2\n")

        with pytest.raises(EnvSyntaxError) as exc_info:
            parse_file(str(env_file))
        assert exc_info.value.details["source"] == str(env_file)

    def test_invalid_utf8_is_a_dotenv_error(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_bytes(b"A1=ok\nB2=caf\xe9\n")

        with pytest.raises(DotenvError):
            parse_file(str(env_file))

    def test_is_deterministic(self, tmp_path: Path):
        env_file = tmp_path / ".env"
        env_file.write_text("B2=2\nA1=1\nC3=3\n")

        assert parse_file(str(env_file)) == parse_file(str(env_file))


@pytest.mark.parametrize(
    "line, expected",
    [("#x", True), ("  # x", True), ("\t#x", True), ("X=#", False), ("X=1", False)],
)
def test_is_comment(line, expected):
    assert is_comment(line) is expected
