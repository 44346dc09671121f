from __future__ import annotations

import json
import tomllib
from xml.parsers.expat import ExpatError
from typing import Any, Optional
import collections.abc

import toml
import xmltodict
import yaml

from envpath.envpath_datatypes import RawFormatError

# TOML needs a table and XML a single root around the raw list
RAW_KEY = "path"
XML_ROOT = "envpath"


# --------------------------
# Helpers
# --------------------------

def _norm_text(data: bytes | bytearray | str) -> str:
    if isinstance(data, (bytes, bytearray)):
        # config files and raw sequences are always utf-8
        return data.decode('utf-8', errors='replace')
    if isinstance(data, str):
        return data
    return str(data)


def _to_builtin(obj: Any) -> Any:
    # xmltodict hands back dict subclasses; flatten to plain dicts/lists
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(x) for x in obj]
    if isinstance(obj, collections.abc.Mapping):
        return {k: _to_builtin(v) for k, v in obj.items()}
    return obj


def detect_format(text: str) -> Optional[str]:
    """
    Sniffs 'json' or 'xml' from the first non-blank character.
    Anything else is left to the caller (None).
    """
    s = text.lstrip()
    if s.startswith('{') or s.startswith('['):
        return 'json'
    if s.startswith('<'):
        return 'xml'
    return None


# --------------------------
# Public API
# --------------------------

def deserialize(data: bytes | bytearray | str,
                *,
                fmt: Optional[str] = None) -> Any:
    """
    Convert file contents (bytes/string) to native Python structures.
    Supported fmt: 'json', 'yaml', 'toml', 'xml'.
    If fmt is None, the format is sniffed from the text.
    Returns the raw text when the data cannot be parsed.
    """
    text = _norm_text(data)
    f = (fmt or detect_format(text))
    if f == 'json':
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            # JSON-labelled YAML still loads
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError:
                return text
    if f == 'yaml':
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError:
            return text
    if f == 'toml':
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError:
            return text
    if f == 'xml':
        try:
            return _to_builtin(xmltodict.parse(text))
        except ExpatError:
            return text
    return text


def serialize(value: Any,
              *,
              fmt: str,
              pretty: bool = True,
              xml_root: str = "root") -> str:
    """
    Convert a native Python value into a textual representation.
    - fmt: 'json' | 'yaml' | 'toml' | 'xml'
    - For XML, if value is not a dict, it will be wrapped under {xml_root: value}
    """
    f = (fmt or '').lower()
    built = _to_builtin(value)
    if f == 'json':
        return json.dumps(built, ensure_ascii=False, indent=2 if pretty else None)
    if f == 'yaml':
        return yaml.safe_dump(built, sort_keys=False, allow_unicode=True)
    if f == 'toml':
        if not isinstance(built, dict):
            raise ValueError("TOML documents must be tables")
        return toml.dumps(built)
    if f == 'xml':
        root = built if isinstance(built, dict) else {xml_root: built}
        return xmltodict.unparse(root, pretty=pretty)
    raise ValueError(f"Unsupported serialization format: {fmt!r}")


# --------------------------
# EnvPath helpers
# --------------------------

def dumps(env_path, fmt: str = "json", *, pretty: bool = True) -> str:
    """
    Serializes only the raw sequence of an EnvPath (or any list of strings).
    JSON and YAML get a bare list; TOML wraps it under RAW_KEY and XML
    under an XML_ROOT element.
    """
    raw = list(getattr(env_path, "raw", env_path))
    f = (fmt or '').lower()
    if f == "toml":
        return serialize({RAW_KEY: raw}, fmt=f, pretty=pretty)
    if f == "xml":
        return serialize({XML_ROOT: {RAW_KEY: raw}}, fmt=f, pretty=pretty)
    return serialize(raw, fmt=f, pretty=pretty)


def _extract_raw(value: Any, *, nested: bool = False) -> list:
    if isinstance(value, collections.abc.Mapping):
        if len(value) != 1:
            raise RawFormatError(value)
        (inner,) = value.values()
        # <envpath><path>a</path></envpath> comes back as {"envpath": {"path": "a"}}
        if isinstance(inner, collections.abc.Mapping):
            return _extract_raw(inner, nested=True)
        value = inner
        nested = True
    if nested and isinstance(value, str):
        return [value]
    if nested and value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise RawFormatError(value)
    return value


def loads(data: bytes | bytearray | str, fmt: Optional[str] = None, **kwargs):
    """Reads a raw sequence and returns a resolved EnvPath."""
    from envpath.envpath_core import EnvPath  # lazy import to avoid cycles

    parsed = deserialize(data, fmt=fmt)
    return EnvPath.new(_extract_raw(parsed), **kwargs)


__all__ = [
    "deserialize",
    "serialize",
    "detect_format",
    "dumps",
    "loads",
    "RAW_KEY",
    "XML_ROOT",
]
