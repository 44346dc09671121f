"""
EnvPath: a raw path sequence together with the path it resolves to.

    >>> p = EnvPath.new(["$env: home", ".local", "share", "$const: pkg"])
    >>> p.exists()

Only the raw sequence is authoritative; the resolved `path` is recomputed by
`de()` and is never serialized.
"""

from __future__ import annotations

import collections.abc
import os
from pathlib import Path
from typing import Any, Iterable, List, Optional

from envpath.envpath_config import ResolverConfig
from envpath.envpath_datatypes import RawFormatError
from envpath.envpath_providers import Providers
from envpath.envpath_resolver import Resolver


def _new_raw(raw: Iterable[Any]) -> List[str]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, collections.abc.Iterable):
        raise RawFormatError(raw)
    out = []
    for item in raw:
        if not isinstance(item, str):
            raise RawFormatError(raw)
        out.append(item)
    return out


class EnvPath(os.PathLike):
    """A raw sequence of path expressions and its resolved Path (or None)."""
    def __init__(self, raw: Iterable[str] = (), *,
                 providers: Optional[Providers] = None,
                 config: Optional[ResolverConfig] = None):
        self.raw: List[str] = _new_raw(raw)
        self.path: Optional[Path] = None
        self.providers = providers
        self.config = config

    @classmethod
    def new(cls, raw: Iterable[str], **kwargs) -> 'EnvPath':
        """Creates an EnvPath and resolves it immediately."""
        return cls(raw, **kwargs).de()

    # -- raw accessors; none of these resolve --

    def get_raw(self) -> List[str]:
        return self.raw

    def set_raw(self, raw: Iterable[str]) -> None:
        self.raw = _new_raw(raw)

    def clear_raw(self) -> None:
        self.raw = []

    # -- resolution --

    def de(self) -> 'EnvPath':
        """Resolves `raw` into `path` and returns self."""
        self.path = Resolver(self.providers, self.config).assemble(self.raw)
        return self

    # -- path-like behaviour --

    def exists(self) -> bool:
        return self.path is not None and self.path.exists()

    def display(self) -> str:
        return "" if self.path is None else str(self.path)

    def __fspath__(self) -> str:
        if self.path is None:
            raise ValueError(f"EnvPath {self.raw!r} is not resolved")
        return os.fspath(self.path)

    def __truediv__(self, other) -> Path:
        if self.path is None:
            raise ValueError(f"EnvPath {self.raw!r} is not resolved")
        return self.path / other

    def __bool__(self) -> bool:
        return self.path is not None

    def __iter__(self):
        return iter(self.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def __repr__(self) -> str:
        return f"EnvPath(raw={self.raw!r}, path={self.display() if self.path is not None else None!r})"

    def __eq__(self, other):
        if not isinstance(other, EnvPath):
            return NotImplemented
        return self.raw == other.raw and self.path == other.path

    def __hash__(self):
        return hash((tuple(self.raw), self.path))


__all__ = ["EnvPath"]
