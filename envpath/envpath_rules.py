"""
Fallback-chain folding for `?` and `??`.

A chain such as `user ?? userprofile ? home` is split on the detected
question mark. Splitting `a ?? b` yields `['a', '', 'b']` while `a ? b`
yields `['a', 'b']`, so an empty segment is what marks the stronger `??`
operator: the value held so far must also exist on disk.

The fold runs over `(accumulator, segment)`:

  - absent,  empty     -> keep going with nothing held
  - absent,  non-empty -> look the segment up
  - present, non-empty -> stop, keep the held value
  - present, empty     -> stop if the held value exists on disk, else drop it
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, Optional, TypeVar, Union

from envpath.envpath_datatypes import Break, Continue, COLONS, ProjectGroup
from envpath.envpath_separators import question_mark_separator, split_terminator
from envpath.envpath_project import parse_group
from envpath.envpath_remix import starts_with_remix_expr

_LOG = logging.getLogger("envpath.rules")

T = TypeVar("T")
Flow = Union[Continue, Break]
Lookup = Callable[[str], Optional[str]]
ProjectLookup = Callable[[str, ProjectGroup], Optional[str]]
Exists = Callable[[str], bool]


def path_exists(value: str) -> bool:
    return os.path.exists(value)


def try_fold(items: Iterable[T], initial: Optional[str], step: Callable[[Optional[str], T], Flow]) -> Flow:
    """Left fold that stops at the first Break."""
    acc = initial
    for item in items:
        flow = step(acc, item)
        if isinstance(flow, Break):
            return flow
        acc = flow.value
    return Continue(acc)


def _check_held(acc: str, exists: Exists) -> Flow:
    if exists(acc):
        return Break(acc)
    _LOG.debug("'%s' does not exist on disk, trying the next alternative", acc)
    return Continue(None)


def parse_rules(s: str, lookup: Lookup, separator: str, *, exists: Exists = path_exists) -> Flow:
    """Folds the alternatives in `s` (the text after `$ns:`) with `lookup`."""
    def step(acc: Optional[str], segment: str) -> Flow:
        segment = segment.strip()
        if acc is None:
            if not segment:
                return Continue(None)
            return Continue(lookup(segment))
        if segment:
            return Break(acc)
        return _check_held(acc, exists)

    return try_fold(split_terminator(s, separator), None, step)


def resolve_chain(s: str, lookup: Lookup, *, exists: Exists = path_exists) -> Optional[str]:
    """Resolves a whole alternatives chain to at most one value."""
    separator = question_mark_separator(s)
    if separator is None:
        return lookup(s)
    return parse_rules(s, lookup, separator, exists=exists).value


def trailing_ident(segment: str) -> str:
    """Text after the last colon variant of `segment`, trimmed."""
    cut = max(segment.rfind(c) for c in COLONS)
    return segment[cut + 1:].strip()


def parse_project_rules(first: str,
                        remain: str,
                        separator: str,
                        lookup: ProjectLookup,
                        *,
                        remix: Optional[Lookup] = None,
                        exists: Exists = path_exists) -> Flow:
    """
    Folds a `$proj` chain. Each alternative resolves within the current
    project group, which starts as the group in `first` (the `$proj(...)`
    tag) and switches whenever an alternative carries its own `(...)`.

        $proj(com.a.b): state ? cfg ?? data ? (com.x.y.z): data ?? cfg
    """
    current = {"chunk": first}

    def step(acc: Optional[str], item) -> Flow:
        idx, segment = item
        segment = segment.strip()
        if acc is None:
            if not segment:
                return Continue(None)
            if remix is not None and starts_with_remix_expr(segment):
                return Continue(remix(segment))
            if "(" in segment:
                current["chunk"] = segment
            elif idx == 0:
                current["chunk"] = first
            group = parse_group(current["chunk"])
            if group is None:
                _LOG.debug("Malformed project group in %r", current["chunk"])
                return Break(None)
            return Continue(lookup(trailing_ident(segment), group))
        if segment:
            return Break(acc)
        return _check_held(acc, exists)

    return try_fold(enumerate(split_terminator(remain, separator)), None, step)


def resolve_project_chain(first: str,
                          remain: str,
                          lookup: ProjectLookup,
                          *,
                          remix: Optional[Lookup] = None,
                          exists: Exists = path_exists) -> Optional[str]:
    separator = question_mark_separator(remain)
    if separator is None:
        if remix is not None and starts_with_remix_expr(remain):
            return remix(remain)
        group = parse_group(first)
        if group is None:
            return None
        return lookup(remain, group)
    return parse_project_rules(first, remain, separator, lookup, remix=remix, exists=exists).value


__all__ = [
    "path_exists",
    "try_fold",
    "parse_rules",
    "resolve_chain",
    "trailing_ident",
    "parse_project_rules",
    "resolve_project_chain",
]
