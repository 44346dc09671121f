"""
Provider bundle injected into the resolver.

A provider maps one identifier to an optional string. The resolver never
reaches for process-wide tables itself; it only calls what it is given
here, so tests can swap any namespace for a plain dict lookup.
"""

from __future__ import annotations

import os
from typing import Callable, Optional

from envpath.envpath_config import ResolverConfig, DEFAULT_CONFIG
from envpath.envpath_datatypes import ProjectGroup
from envpath.envpath_consts import match_consts
from envpath.envpath_dirs import match_base_dirs
from envpath.envpath_project import match_proj_dirs
from envpath.envpath_values import match_values

Provider = Callable[[str], Optional[str]]
ProjectProvider = Callable[[str, ProjectGroup], Optional[str]]


def env_var(name: str) -> Optional[str]:
    if not name:
        return None
    return os.environ.get(name)


class Providers:
    """One lookup per namespace. Missing ones fall back to the built-in tables."""
    def __init__(self,
                 env: Optional[Provider] = None,
                 const: Optional[Provider] = None,
                 dir: Optional[Provider] = None,
                 proj: Optional[ProjectProvider] = None,
                 val: Optional[Provider] = None,
                 *,
                 config: ResolverConfig = DEFAULT_CONFIG):
        self.env: Provider = env or env_var
        self.const: Provider = const or (lambda ident: match_consts(
            ident, pkg_name=config.pkg_name, pkg_version=config.pkg_version))
        self.dir: Provider = dir or (lambda ident: match_base_dirs(
            ident, pkg_name=config.pkg_name, rand_length=config.rand_length))
        self.proj: ProjectProvider = proj or match_proj_dirs
        self.val: Provider = val or (lambda ident: match_values(
            ident, rand_length=config.rand_length))

    @classmethod
    def default(cls, config: ResolverConfig = DEFAULT_CONFIG) -> 'Providers':
        return cls(config=config)

    def __repr__(self) -> str:
        return "<Providers env={!r} const={!r} dir={!r} proj={!r} val={!r}>".format(
            getattr(self.env, "__name__", self.env),
            getattr(self.const, "__name__", self.const),
            getattr(self.dir, "__name__", self.dir),
            getattr(self.proj, "__name__", self.proj),
            getattr(self.val, "__name__", self.val),
        )


__all__ = ["Provider", "ProjectProvider", "Providers", "env_var"]
