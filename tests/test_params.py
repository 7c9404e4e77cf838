"""Tests for command parameter parsing."""

import pytest

from gvt.core.params import parse_history_limit, parse_target_file, parse_user_message, parse_version_id
from gvt.errors import InvalidVersionError


class TestTargetFile:
    def test_first_param(self):
        assert parse_target_file(["foo.txt", "-m", "msg"]) == "foo.txt"

    def test_missing(self):
        assert parse_target_file([]) is None

    def test_message_flag_first(self):
        """`add -m msg` names no file."""
        assert parse_target_file(["-m", "msg"]) is None


class TestUserMessage:
    def test_trailing_pair(self):
        assert parse_user_message(["foo.txt", "-m", "hello"]) == "hello"

    def test_absent(self):
        assert parse_user_message(["foo.txt"]) is None

    def test_flag_not_second_to_last(self):
        assert parse_user_message(["foo.txt", "-m", "a", "b"]) is None

    def test_strips_one_quote_pair(self):
        assert parse_user_message(["f", "-m", '"quoted"']) == "quoted"

    def test_strip_is_not_recursive(self):
        assert parse_user_message(["f", "-m", '""twice""']) == '"twice"'

    def test_single_quote_char_kept(self):
        assert parse_user_message(["f", "-m", '"']) == '"'

    def test_unbalanced_quote_kept(self):
        assert parse_user_message(["f", "-m", '"open']) == '"open'


class TestVersionId:
    @pytest.mark.parametrize("raw,expected", [("0", 0), ("12", 12), ("+3", 3), ("-1", -1)])
    def test_integers(self, raw, expected):
        assert parse_version_id(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.0", " 1", "1_0"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidVersionError):
            parse_version_id(raw)


class TestHistoryLimit:
    def test_valid(self):
        assert parse_history_limit(["-last", "3"]) == 3

    @pytest.mark.parametrize(
        "params",
        [[], ["-last"], ["-last", "x"], ["-last", "0"], ["-last", "-2"], ["-first", "2"], ["-last", "2", "x"]],
    )
    def test_lenient_fallback(self, params):
        """Malformed counts fall back to the full history instead of failing."""
        assert parse_history_limit(params) is None
