"""
Resolver configuration.

The four namespace switches mirror optional features: a disabled namespace
is treated as unknown, so `$dir: home` becomes a literal path component and
`dir * home` resolves to nothing. `$env:` is always available.

A configuration can be built from a mapping or loaded from a JSON, YAML or
TOML file:

    consts: true
    dirs: true
    project: true
    value: true
    pkg_name: myapp
    pkg_version: 1.2.0
    rand_length: 16
"""

from __future__ import annotations

import collections.abc
import os
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from envpath.envpath_datatypes import ConfigError, Namespace
from envpath.envpath_values import DEFAULT_RAND_LENGTH, MAX_RAND_LENGTH

_EXT_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}


@dataclass(frozen=True)
class ResolverConfig:
    consts: bool = True
    dirs: bool = True
    project: bool = True
    value: bool = True
    pkg_name: str = "envpath"
    pkg_version: str = ""
    rand_length: int = DEFAULT_RAND_LENGTH

    def enabled(self, ns: Namespace) -> bool:
        match ns:
            case Namespace.ENV:
                return True
            case Namespace.CONST:
                return self.consts
            case Namespace.DIR:
                return self.dirs
            case Namespace.PROJ:
                return self.project
            case Namespace.VAL:
                return self.value

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'ResolverConfig':
        """Builds a config from a mapping; unknown keys and wrong types raise ConfigError."""
        if data is None:
            return cls()
        if not isinstance(data, collections.abc.Mapping):
            raise ConfigError("<root>", f"expected a mapping, got {type(data).__name__}")
        known = {f.name: f for f in fields(cls)}
        kwargs = {}
        for key, val in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ConfigError(str(key), "unknown option")
            default = known[name].default
            if isinstance(default, bool):
                if not isinstance(val, bool):
                    raise ConfigError(str(key), f"expected true/false, got {val!r}")
            elif isinstance(default, int):
                if isinstance(val, bool) or not isinstance(val, int) or not 0 <= val <= MAX_RAND_LENGTH:
                    raise ConfigError(str(key), f"expected an integer in 0..{MAX_RAND_LENGTH}, got {val!r}")
            else:
                if not isinstance(val, (str, int, float)):
                    raise ConfigError(str(key), f"expected a string, got {val!r}")
                val = str(val)
            kwargs[name] = val
        return cls(**kwargs)

    @classmethod
    def load(cls, path: str | os.PathLike) -> 'ResolverConfig':
        """Loads a config file; the format follows the file extension."""
        from envpath.envpath_serialize import deserialize  # lazy import to avoid cycles

        ext = os.path.splitext(os.fspath(path))[1].lower()
        fmt = _EXT_FORMATS.get(ext)
        if fmt is None:
            raise ConfigError(os.fspath(path), f"unsupported config file type {ext!r}")
        with open(path, "rb") as f:
            data = f.read()
        parsed = deserialize(data, fmt=fmt)
        if isinstance(parsed, str):
            if not parsed.strip():
                return cls()
            raise ConfigError(os.fspath(path), "could not parse config file")
        return cls.from_mapping(parsed)


DEFAULT_CONFIG = ResolverConfig()

__all__ = ["ResolverConfig", "DEFAULT_CONFIG"]
