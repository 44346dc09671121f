import pytest
from envpath.envpath_datatypes import Break, Continue, ProjectGroup
from envpath.envpath_rules import (
    try_fold, parse_rules, resolve_chain, trailing_ident,
    parse_project_rules, resolve_project_chain,
)

TABLE = {"a": "/a", "b": "/b", "c": "/c"}


def lookup(ident):
    return TABLE.get(ident)


def never(_):
    return False


def always(_):
    return True


def test_try_fold_stops_at_break():
    seen = []

    def step(acc, x):
        seen.append(x)
        return Break(x) if x == 2 else Continue(acc)

    assert try_fold([1, 2, 3], None, step) == Break(2)
    assert seen == [1, 2]


def test_try_fold_returns_continue_when_exhausted():
    assert try_fold(["x", "y"], None, lambda acc, x: Continue(x)) == Continue("y")
    assert try_fold([], "init", lambda acc, x: Break(x)) == Continue("init")


@pytest.mark.parametrize(
    "chain,expected",
    [
        ("a", "/a"),
        ("nope", None),
        ("a ? b", "/a"),
        ("nope ? b", "/b"),
        ("nope ? nada ? c", "/c"),
        ("? b", "/b"),
        ("a ?", "/a"),
        ("nope ? nada", None),
    ],
)
def test_single_question_mark_takes_first_present(chain, expected):
    assert resolve_chain(chain, lookup, exists=never) == expected


def test_double_question_mark_requires_existence():
    assert resolve_chain("a ?? b", lookup, exists=never) == "/b"
    assert resolve_chain("a ?? b", lookup, exists=always) == "/a"
    assert resolve_chain("a ?? b", lookup, exists=lambda p: p == "/b") == "/b"


def test_dangling_double_question_mark():
    assert resolve_chain("a ??", lookup, exists=never) is None
    assert resolve_chain("a ??", lookup, exists=always) == "/a"


def test_mixed_operators():
    # a exists? no -> b is present -> stop
    assert resolve_chain("a ?? b ? c", lookup, exists=never) == "/b"
    assert resolve_chain("nope ? a ?? c", lookup, exists=never) == "/c"


def test_fullwidth_question_mark():
    assert resolve_chain("nope ？ b", lookup, exists=never) == "/b"


def test_empty_string_does_not_exist_by_default():
    assert resolve_chain("e ?? b", {"e": "", "b": "/b"}.get) == "/b"


def test_parse_rules_reports_break_or_continue():
    assert parse_rules("a ? b", lookup, "?", exists=never) == Break("/a")
    assert parse_rules("nope ? b", lookup, "?", exists=never) == Continue("/b")


@pytest.mark.parametrize(
    "segment,expected",
    [
        ("data", "data"),
        ("(com.x.y): data", "data"),
        ("(com.x.y)： cfg ", "cfg"),
    ],
)
def test_trailing_ident(segment, expected):
    assert trailing_ident(segment) == expected


# -----------------------------------------------------------------
# $proj chains
# -----------------------------------------------------------------

PROJ_TABLE = {
    ("cfg", "com.a.b"): "/a/cfg",
    ("data", "com.x.yz"): "/x/data",
    ("cfg", "com.x.yz"): "/x/cfg",
    ("state", "org.o.app"): "/o/state",
}


def proj_lookup(ident, group):
    return PROJ_TABLE.get((ident, group.name))


def test_project_chain_single_group():
    assert resolve_project_chain("$proj(com.a.b)", "cfg", proj_lookup) == "/a/cfg"
    assert resolve_project_chain("$proj(com.a.b)", "data", proj_lookup) is None


def test_project_chain_switches_group():
    remain = "state ? cfg ?? data ? (com.x.y.z): data ?? cfg"
    # nothing exists: the trailing cfg is looked up in the switched group
    assert resolve_project_chain("$proj(com.a.b)", remain, proj_lookup, exists=never) == "/x/cfg"
    assert resolve_project_chain("$proj(com.a.b)", remain, proj_lookup,
                                 exists=lambda p: p == "/x/data") == "/x/data"
    assert resolve_project_chain("$proj(com.a.b)", remain, proj_lookup, exists=always) == "/a/cfg"


def test_project_chain_keeps_switched_group():
    remain = "nope ? (com.x.y.z): nope ? cfg"
    assert resolve_project_chain("$proj(com.a.b)", remain, proj_lookup, exists=never) == "/x/cfg"


def test_project_chain_malformed_group_stops():
    assert resolve_project_chain("$proj", "cfg ? data", proj_lookup) is None
    flow = parse_project_rules("$proj(com.a.b)", "nope ? (oops: cfg", "?", proj_lookup, exists=never)
    assert flow == Break(None)


def test_project_chain_remix_segments():
    remixed = []

    def remix(segment):
        remixed.append(segment)
        return "/remixed"

    out = resolve_project_chain("$proj(com.a.b)", "nope ? env * HOME", proj_lookup,
                                remix=remix, exists=never)
    assert out == "/remixed"
    assert remixed == ["env * HOME"]
    assert resolve_project_chain("$proj(com.a.b)", "dir * cfg", proj_lookup, remix=remix) == "/remixed"


def test_project_lookup_receives_group():
    calls = []

    def spy(ident, group):
        calls.append((ident, group))
        return None

    resolve_project_chain("$proj(org.o.app)", "state ? (q): x", spy, exists=never)
    assert calls == [("state", ProjectGroup("org", "o", "app")), ("x", ProjectGroup("q", "", "q"))]
