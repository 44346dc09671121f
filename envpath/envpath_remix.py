"""
Inline cross-namespace references ("remix" expressions).

Any alternative may borrow another namespace with `<tag> * <ident>`:

    $const: empty ?? env * HOME ? dir * dl
    $dir: runtime ? proj * (com.x.y): data

The identifier after `*` is passed through verbatim, so `env * home` reads
`$home`, not `$HOME`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from envpath.envpath_datatypes import Namespace, REMIX_MARK
from envpath.envpath_separators import split_expression
from envpath.envpath_project import parse_group

if TYPE_CHECKING:
    from envpath.envpath_resolver import Resolver

_LOG = logging.getLogger("envpath.remix")


def starts_with_remix_expr(segment: str) -> bool:
    """True when the text before the first `*` starts with a remix tag."""
    head, mark, _ = segment.partition(REMIX_MARK)
    if not mark:
        return False
    return Namespace.from_remix(head.strip()) is not None


def _remix_ident(segment: str, ns: Namespace) -> Optional[str]:
    rest = segment.removeprefix(ns.remix_tag).strip()
    if not rest.startswith(REMIX_MARK):
        return None
    return rest.lstrip(REMIX_MARK).strip()


def handle_remix(segment: str, ns: Namespace, resolver: 'Resolver') -> Optional[str]:
    ident = _remix_ident(segment, ns)
    if ident is None or not resolver.config.enabled(ns):
        return None
    match ns:
        case Namespace.ENV:
            return resolver.providers.env(ident)
        case Namespace.DIR:
            return resolver.lookup_dir(ident)
        case Namespace.CONST:
            return resolver.lookup_const(ident)
        case Namespace.VAL:
            return resolver.lookup_val(ident)
        case Namespace.PROJ:
            chunks = split_expression(ident)
            if len(chunks) < 2:
                return None
            group = parse_group(chunks[0])
            if group is None:
                return None
            return resolver.lookup_proj(chunks[1], group)


def parse_remix_expr(segment: str, resolver: 'Resolver') -> Optional[str]:
    """Dispatches a remix segment to the first namespace whose tag it starts with."""
    segment = segment.strip()
    for ns in Namespace:
        if not segment.startswith(ns.remix_tag):
            continue
        value = handle_remix(segment, ns, resolver)
        if value is not None:
            _LOG.debug("remix %r -> %r", segment, value)
            return value
    return None


__all__ = ["starts_with_remix_expr", "handle_remix", "parse_remix_expr"]
