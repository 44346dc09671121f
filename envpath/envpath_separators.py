from __future__ import annotations

from typing import List, Optional, Tuple

from envpath.envpath_datatypes import COLONS, QUESTION_MARKS

CHUNK_NUM = 2


def detect_separator(expr: str, variants: Tuple[str, str]) -> Optional[str]:
    """
    Returns whichever of the two variant characters occurs first in `expr`,
    or None when neither does.
    """
    found = [(idx, c) for c in variants if (idx := expr.find(c)) != -1]
    if not found:
        return None
    return min(found)[1]


def colon_separator(expr: str) -> Optional[str]:
    return detect_separator(expr, COLONS)


def question_mark_separator(expr: str) -> Optional[str]:
    return detect_separator(expr, QUESTION_MARKS)


def chunk(expr: str, colon: Optional[str]) -> List[str]:
    """
    Splits `expr` at the first `colon` into a trimmed [tag, remainder] pair.
    An empty list means the string is not an expression.
    """
    if not colon or colon not in expr:
        return []
    return [part.strip() for part in expr.split(colon, CHUNK_NUM - 1)]


def split_expression(expr: str) -> List[str]:
    """Detects the colon variant of `expr` and chunks it."""
    return chunk(expr, colon_separator(expr))


def split_terminator(s: str, sep: str) -> List[str]:
    """
    Splits `s` on `sep` like str.split, except that a single trailing empty
    piece (from a terminating separator) is dropped.
    """
    if not s:
        return []
    parts = s.split(sep)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


__all__ = [
    "detect_separator",
    "colon_separator",
    "question_mark_separator",
    "chunk",
    "split_expression",
    "split_terminator",
]
