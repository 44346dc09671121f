"""
Project identities and per-project directories for `$proj(...)`.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from envpath.envpath_datatypes import ProjectGroup
from envpath import envpath_dirs as dirs


def parse_group(chunk: str) -> Optional[ProjectGroup]:
    """
    Extracts the `(qualifier.organization.application)` group from `chunk`.

    One part is the application; two parts are qualifier.application; more
    than three parts fold the rest into the application name. Unmatched
    parentheses yield None.
    """
    start = chunk.find("(")
    end = chunk.rfind(")")
    if start == -1 or end == -1 or end < start:
        return None
    parts = [p.strip() for p in chunk[start + 1:end].split(".")]
    match len(parts):
        case 1:
            return ProjectGroup(parts[0], "", parts[0])
        case 2:
            return ProjectGroup(parts[0], "", parts[1])
        case 3:
            return ProjectGroup(parts[0], parts[1], parts[2])
        case _:
            return ProjectGroup(parts[0], parts[1], "".join(parts[2:]))


_WS = re.compile(r"\s+")


class ProjectDirs:
    """Per-project directories following the platform conventions.

    Linux: `$XDG_*_HOME/<app>`; macOS: `~/Library/.../<qual.org.app>`;
    Windows: `%APPDATA%\\<org>\\<app>\\{config,data}`.
    """
    def __init__(self, project_path: Path):
        self._project_path = project_path

    @classmethod
    def from_group(cls, group: ProjectGroup) -> Optional['ProjectDirs']:
        if dirs.home_dir() is None:
            return None
        if dirs.IS_WINDOWS:
            rel = Path(group.organization) / group.application if group.organization else Path(group.application)
        elif dirs.IS_MACOS:
            rel = Path(".".join(_WS.sub("-", p.strip()) for p in
                                (group.qualifier, group.organization, group.application) if p))
        else:
            rel = Path(_WS.sub("", group.application.strip().lower()))
        if not str(rel) or str(rel) == ".":
            return None
        return cls(rel)

    def project_path(self) -> Path:
        return self._project_path

    def _join(self, base: Optional[Path], *tail: str) -> Optional[Path]:
        if base is None:
            return None
        return base.joinpath(self._project_path, *tail)

    def cache_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self._join(dirs.data_local_dir(), "cache")
        return self._join(dirs.cache_dir())

    def config_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self._join(dirs.config_dir(), "config")
        return self._join(dirs.config_dir())

    def config_local_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self._join(dirs.config_local_dir(), "config")
        return self._join(dirs.config_local_dir())

    def data_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self._join(dirs.data_dir(), "data")
        return self._join(dirs.data_dir())

    def data_local_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self._join(dirs.data_local_dir(), "data")
        return self._join(dirs.data_local_dir())

    def preference_dir(self) -> Optional[Path]:
        if dirs.IS_WINDOWS:
            return self.config_dir()
        return self._join(dirs.preference_dir())

    def runtime_dir(self) -> Optional[Path]:
        return self._join(dirs.runtime_dir())

    def state_dir(self) -> Optional[Path]:
        return self._join(dirs.state_dir())

    def __repr__(self) -> str:
        return f"<ProjectDirs {self._project_path}>"


def match_proj_dirs(ident: str, group: ProjectGroup) -> Optional[str]:
    """Resolves one project directory identifier within `group`."""
    proj = ProjectDirs.from_group(group)
    match ident:
        case "path":
            return str(proj.project_path()) if proj is not None else group.name
        case _ if proj is None:
            return None
        case "cache":
            p = proj.cache_dir()
        case "cfg" | "config":
            p = proj.config_dir()
        case "data":
            p = proj.data_dir()
        case "local-data" | "local_data":
            p = proj.data_local_dir()
        case "local-cfg" | "local_cfg" | "local_config":
            p = proj.config_local_dir()
        case "pref" | "preference":
            p = proj.preference_dir()
        case "runtime":
            p = proj.runtime_dir()
        case "state":
            p = proj.state_dir()
        case _:
            return None
    return str(p) if p is not None else None


__all__ = ["parse_group", "ProjectDirs", "match_proj_dirs"]
