"""
Resolves raw path sequences into paths.

Each element of the sequence is either a literal component (`".local"`)
or an expression (`"$env: xdg_data_home ? home"`). The resolved components
are joined left to right; a recognised expression that yields no value makes
the whole path unresolved.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from envpath.envpath_config import ResolverConfig, DEFAULT_CONFIG
from envpath.envpath_datatypes import Namespace, ProjectGroup
from envpath.envpath_providers import Providers
from envpath.envpath_remix import parse_remix_expr, starts_with_remix_expr
from envpath.envpath_rules import Exists, path_exists, resolve_chain, resolve_project_chain
from envpath.envpath_separators import question_mark_separator, split_expression

_LOG = logging.getLogger("envpath.resolver")


def normalize_env_ident(ident: str) -> str:
    """`xdg-data-home` → `XDG_DATA_HOME`."""
    return ident.upper().replace("-", "_")


def normalize_ident(ident: str) -> str:
    return ident.lower()


def normalize_chain(remain: str, normalize: Callable[[str], str]) -> str:
    """
    Applies `normalize` to every alternative of a chain except remix
    segments, which keep their case: `home ? env * home` → `HOME ? env * home`.
    """
    separator = question_mark_separator(remain)
    if separator is None:
        return remain if starts_with_remix_expr(remain) else normalize(remain)
    return separator.join(
        seg if starts_with_remix_expr(seg) else normalize(seg)
        for seg in remain.split(separator)
    )


class Resolver:
    """Holds the injected providers and configuration for one or more resolutions."""
    def __init__(self,
                 providers: Optional[Providers] = None,
                 config: Optional[ResolverConfig] = None,
                 *,
                 exists: Exists = path_exists):
        self.config = config or DEFAULT_CONFIG
        self.providers = providers or Providers.default(self.config)
        self.exists = exists

    # -- per-namespace lookups (one alternative each) --

    def _remix_or(self, ident: str, provider) -> Optional[str]:
        if starts_with_remix_expr(ident):
            return parse_remix_expr(ident, self)
        return provider(ident)

    def lookup_env(self, ident: str) -> Optional[str]:
        return self._remix_or(ident, self.providers.env)

    def lookup_const(self, ident: str) -> Optional[str]:
        return self._remix_or(ident, self.providers.const)

    def lookup_dir(self, ident: str) -> Optional[str]:
        return self._remix_or(ident, self.providers.dir)

    def lookup_val(self, ident: str) -> Optional[str]:
        return self._remix_or(ident, self.providers.val)

    def lookup_proj(self, ident: str, group: ProjectGroup) -> Optional[str]:
        if starts_with_remix_expr(ident):
            return parse_remix_expr(ident, self)
        return self.providers.proj(ident, group)

    def _remix(self, segment: str) -> Optional[str]:
        return parse_remix_expr(segment, self)

    # -- expressions --

    def classify(self, s: str) -> Tuple[Optional[Namespace], list]:
        """Returns (namespace, chunks); namespace is None for literal text."""
        chunks = split_expression(s)
        if len(chunks) < 2:
            return None, chunks
        ns = Namespace.from_tag(chunks[0])
        if ns is None or not self.config.enabled(ns):
            return None, chunks
        return ns, chunks

    def resolve_expression(self, s: str) -> Tuple[bool, Optional[str]]:
        """
        Resolves one raw element. Returns (is_expression, value); literal
        text comes back as (False, s).
        """
        s = s.strip()
        ns, chunks = self.classify(s)
        if ns is None:
            return False, s
        tag, remain = chunks
        match ns:
            case Namespace.ENV:
                value = resolve_chain(normalize_chain(remain, normalize_env_ident), self.lookup_env, exists=self.exists)
            case Namespace.CONST:
                value = resolve_chain(normalize_chain(remain, normalize_ident), self.lookup_const, exists=self.exists)
            case Namespace.DIR:
                value = resolve_chain(normalize_chain(remain, normalize_ident), self.lookup_dir, exists=self.exists)
            case Namespace.VAL:
                value = resolve_chain(normalize_chain(remain, normalize_ident), self.lookup_val, exists=self.exists)
            case Namespace.PROJ:
                value = resolve_project_chain(tag, normalize_chain(remain, normalize_ident), self.lookup_proj,
                                              remix=self._remix, exists=self.exists)
        _LOG.debug("%r -> %r", s, value)
        return True, value

    def assemble(self, raw: Iterable[str]) -> Optional[Path]:
        """Joins every resolved element; None as soon as one expression has no value."""
        acc = Path()
        for s in raw:
            is_expr, value = self.resolve_expression(s)
            if value is None:
                _LOG.debug("Unresolved path component %r", s)
                return None
            if not is_expr:
                _LOG.debug("Treating %r as a literal path component", value)
            acc = acc / value
        return acc


def resolve(raw: Iterable[str],
            providers: Optional[Providers] = None,
            config: Optional[ResolverConfig] = None) -> Optional[Path]:
    """Resolves a raw sequence into a Path, or None when any expression is unresolved."""
    return Resolver(providers, config).assemble(raw)


__all__ = ["Resolver", "resolve", "normalize_env_ident", "normalize_ident", "normalize_chain"]
