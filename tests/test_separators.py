import pytest
from envpath.envpath_separators import (
    detect_separator, colon_separator, question_mark_separator,
    chunk, split_expression, split_terminator,
)
from envpath.envpath_datatypes import COLONS, QUESTION_MARKS


def test_detect_separator_earliest_variant_wins():
    assert detect_separator("a：b:c", COLONS) == "："
    assert detect_separator("a:b：c", COLONS) == ":"
    assert detect_separator("abc", COLONS) is None


def test_question_mark_variants():
    assert question_mark_separator("a ? b") == "?"
    assert question_mark_separator("a ？ b") == "？"
    assert question_mark_separator("ab") is None


def test_colon_separator_fullwidth():
    assert colon_separator("$env： home") == "："


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("$env: home", ["$env", "home"]),
        ("  $dir :cfg  ", ["$dir", "cfg"]),
        ("$env： xdg-data-home", ["$env", "xdg-data-home"]),
        # only the first colon splits
        ("$proj(com.x.y): data ? (a.b.c): cfg", ["$proj(com.x.y)", "data ? (a.b.c): cfg"]),
        ("$env:", ["$env", ""]),
    ],
)
def test_split_expression(expr, expected):
    assert split_expression(expr) == expected


def test_split_expression_without_colon_is_not_an_expression():
    assert split_expression(".local") == []
    assert chunk("a:b", None) == []


@pytest.mark.parametrize(
    "s,expected",
    [
        ("", []),
        ("a", ["a"]),
        ("a ? b", ["a ", " b"]),
        ("a ?? b", ["a ", "", " b"]),
        ("a ?", ["a "]),
        ("a ??", ["a ", ""]),
        ("?", [""]),
    ],
)
def test_split_terminator(s, expected):
    assert split_terminator(s, "?") == expected
