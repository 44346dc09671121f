"""
Standard base directories for `$dir: ident`.

Linux follows the XDG base directory and user directory conventions,
macOS the `~/Library` layout, and Windows the known-folder environment
variables. Each getter returns a Path, or None when the platform has no
such directory.
"""

from __future__ import annotations

import logging
import os
import re
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional

from envpath.envpath_values import get_random_value

_LOG = logging.getLogger("envpath.dirs")

IS_WINDOWS = sys.platform == "win32"
IS_MACOS = sys.platform == "darwin"
IS_UNIX = os.name == "posix"


def home_dir() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        return None


def _home_join(*parts: str) -> Optional[Path]:
    home = home_dir()
    return home.joinpath(*parts) if home is not None else None


def _env_path(name: str) -> Optional[Path]:
    raw = os.environ.get(name)
    if raw:
        return Path(raw).expanduser()
    return None


def xdg_path(env_var: str, *fallback: str) -> Optional[Path]:
    """`$env_var` when it is set to an absolute path, else `~/<fallback>`."""
    p = _env_path(env_var)
    if p is not None and p.is_absolute():
        return p
    return _home_join(*fallback)


# -----------------------------------------------------------------
# Base directories
# -----------------------------------------------------------------

def cache_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return _env_path("LOCALAPPDATA")
    if IS_MACOS:
        return _home_join("Library", "Caches")
    return xdg_path("XDG_CACHE_HOME", ".cache")


def config_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return _env_path("APPDATA")
    if IS_MACOS:
        return _home_join("Library", "Application Support")
    return xdg_path("XDG_CONFIG_HOME", ".config")


def config_local_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return _env_path("LOCALAPPDATA")
    return config_dir()


def data_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return _env_path("APPDATA")
    if IS_MACOS:
        return _home_join("Library", "Application Support")
    return xdg_path("XDG_DATA_HOME", ".local", "share")


def data_local_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return _env_path("LOCALAPPDATA")
    return data_dir()


def executable_dir() -> Optional[Path]:
    if IS_WINDOWS or IS_MACOS:
        return None
    p = _env_path("XDG_BIN_HOME")
    if p is not None and p.is_absolute():
        return p
    data = data_dir()
    return data.parent / "bin" if data is not None else None


def preference_dir() -> Optional[Path]:
    if IS_MACOS:
        return _home_join("Library", "Preferences")
    return config_dir()


def runtime_dir() -> Optional[Path]:
    if IS_WINDOWS or IS_MACOS:
        return None
    p = _env_path("XDG_RUNTIME_DIR")
    return p if p is not None and p.is_absolute() else None


def state_dir() -> Optional[Path]:
    if IS_WINDOWS or IS_MACOS:
        return None
    return xdg_path("XDG_STATE_HOME", ".local", "state")


def font_dir() -> Optional[Path]:
    if IS_WINDOWS:
        return None
    if IS_MACOS:
        return _home_join("Library", "Fonts")
    data = data_dir()
    return data / "fonts" if data is not None else None


# -----------------------------------------------------------------
# User directories (Desktop, Downloads, ...)
# -----------------------------------------------------------------

_USER_DIR_LINE = re.compile(r'^\s*(XDG_[A-Z]+_DIR)\s*=\s*"(.*)"\s*$')


def _read_user_dirs() -> Dict[str, str]:
    """Parses `user-dirs.dirs` into {XDG_X_DIR: value}; missing file → {}."""
    cfg = config_dir()
    if cfg is None:
        return {}
    out: Dict[str, str] = {}
    try:
        with open(cfg / "user-dirs.dirs", "r", encoding="utf-8") as f:
            for line in f:
                m = _USER_DIR_LINE.match(line)
                if m:
                    out[m.group(1)] = m.group(2)
    except OSError:
        return {}
    return out


def user_dir(xdg_key: str, default_name: str) -> Optional[Path]:
    """
    Resolves a user directory: `$XDG_<KEY>_DIR`, then `user-dirs.dirs`, then
    `~/<default_name>`. On macOS and Windows always `~/<default_name>`.
    """
    home = home_dir()
    if home is None:
        return None
    if IS_UNIX and not IS_MACOS:
        name = f"XDG_{xdg_key}_DIR"
        raw = os.environ.get(name) or _read_user_dirs().get(name)
        if raw:
            raw = raw.replace("$HOME", str(home))
            p = Path(raw)
            if p.is_absolute():
                return p
    return home / default_name


def desktop_dir() -> Optional[Path]:
    return user_dir("DESKTOP", "Desktop")


def document_dir() -> Optional[Path]:
    return user_dir("DOCUMENTS", "Documents")


def download_dir() -> Optional[Path]:
    return user_dir("DOWNLOAD", "Downloads")


def audio_dir() -> Optional[Path]:
    return user_dir("MUSIC", "Music")


def picture_dir() -> Optional[Path]:
    return user_dir("PICTURES", "Pictures")


def public_dir() -> Optional[Path]:
    return user_dir("PUBLICSHARE", "Public")


def template_dir() -> Optional[Path]:
    if IS_MACOS:
        return None
    if IS_WINDOWS:
        ms = data_dir()
        return ms / "Microsoft" / "Windows" / "Templates" if ms is not None else None
    return user_dir("TEMPLATES", "Templates")


def video_dir() -> Optional[Path]:
    return user_dir("VIDEOS", "Movies" if IS_MACOS else "Videos")


# -----------------------------------------------------------------
# Composite lookups
# -----------------------------------------------------------------

def bin_dir() -> Optional[Path]:
    """`executable_dir()`, else WindowsApps on Windows, else `~/.local/bin`."""
    p = executable_dir()
    if p is not None:
        return p
    if IS_WINDOWS:
        local = data_local_dir()
        return local / "Microsoft" / "WindowsApps" if local is not None else None
    if IS_UNIX:
        return _home_join(".local", "bin")
    local = data_local_dir()
    return local / "bin" if local is not None else None


def fonts_dir() -> Optional[Path]:
    p = font_dir()
    if p is not None:
        return p
    if IS_WINDOWS:
        return Path(os.environ.get("SYSTEMROOT", r"C:\Windows")) / "Fonts"
    return None


def double_ended_path(end: str) -> Optional[str]:
    """First or last entry of `$PATH`."""
    raw = os.environ.get("PATH")
    if not raw:
        return None
    entries = [p for p in raw.split(os.pathsep) if p]
    if not entries:
        return None
    match end:
        case "first":
            return entries[0]
        case "last":
            return entries[-1]
        case _:
            return None


def get_tmp_dir() -> Path:
    """
    `$TMPDIR` when set, else the system temp directory when it is writable,
    else `<cache>/tmp`, else `.tmp`.
    """
    tmpdir = os.environ.get("TMPDIR")
    if tmpdir:
        return Path(tmpdir)
    system = Path(tempfile.gettempdir())
    if os.access(system, os.W_OK):
        return system
    _LOG.debug("%s is not writable, falling back to the cache directory", system)
    cache = cache_dir()
    return cache / "tmp" if cache is not None else Path(".tmp")


def get_tmp_random_dir(prefix: Optional[str] = None, rand_length: Optional[int] = None, *, pkg_name: str = "envpath") -> Path:
    random = get_random_value(rand_length)
    if prefix is None:
        return get_tmp_dir() / f"{pkg_name}_{random}"
    if not prefix.strip():
        return get_tmp_dir() / random
    return get_tmp_dir() / f"{prefix}{random}"


def _windows_env_dir(name: str, fallback: str) -> str:
    return os.environ.get(name) or fallback


def _str(p: Optional[Path]) -> Optional[str]:
    return str(p) if p is not None else None


def match_base_dirs(ident: str, *, pkg_name: str = "envpath", rand_length: Optional[int] = None) -> Optional[str]:
    """Maps a `$dir:` identifier to its directory, None when unknown or unavailable."""
    match ident:
        case "home":
            return _str(home_dir())
        case "cache" | "cli-cache" | "cli_cache":
            return _str(cache_dir())
        case "cfg" | "config":
            return _str(config_dir())
        case "data":
            return _str(data_dir())
        case "local-data" | "local_data" | "cli-data" | "cli_data":
            return _str(data_local_dir())
        case "local-cfg" | "local_cfg" | "local_config" | "cli-cfg" | "cli_cfg" | "cli_config":
            return _str(config_local_dir())
        case "desktop":
            return _str(desktop_dir())
        case "doc" | "document" | "documentation":
            return _str(document_dir())
        case "dl" | "download":
            return _str(download_dir())
        case "bin" | "exe" | "executable":
            return _str(bin_dir())
        case "path" | "first-path" | "first_path":
            return double_ended_path("first")
        case "last-path" | "last_path":
            return double_ended_path("last")
        case "font" | "typeface":
            return _str(fonts_dir())
        case "music" | "audio":
            return _str(audio_dir())
        case "pic" | "picture":
            return _str(picture_dir())
        case "pref" | "preference":
            return _str(preference_dir())
        case "pub" | "public":
            return _str(public_dir())
        case "runtime":
            return _str(runtime_dir())
        case "state":
            return _str(state_dir())
        case "template":
            return _str(template_dir())
        case "video" | "movie":
            return _str(video_dir())
        case "tmp":
            return str(get_tmp_dir())
        case "tmp-rand" | "tmp_random":
            return str(get_tmp_random_dir(rand_length=rand_length, pkg_name=pkg_name))
        case "var-tmp" | "var_tmp" if IS_UNIX:
            return str(Path("/var/tmp") / pkg_name)
        case "temp" | "temporary":
            return tempfile.gettempdir()
        case "empty":
            return ""
        case "program-files" | "program_files" if IS_WINDOWS:
            return _windows_env_dir("ProgramFiles", r"C:\Program Files")
        case "program-files-x86" | "program_files_x86" if IS_WINDOWS:
            return _windows_env_dir("ProgramFiles(x86)", r"C:\Program Files (x86)")
        case "common-program-files" | "common_program_files" if IS_WINDOWS:
            return _windows_env_dir("CommonProgramFiles", r"C:\Program Files\Common Files")
        case "common-program-files-x86" | "common_program_files_x86" if IS_WINDOWS:
            return _windows_env_dir("CommonProgramFiles(x86)", r"C:\Program Files (x86)\Common Files")
        case "program-data" | "program_data" if IS_WINDOWS:
            return _windows_env_dir("ProgramData", r"C:\ProgramData")
        case "microsoft" if IS_WINDOWS:
            data = data_dir()
            return _str(data / "Microsoft" if data is not None else None)
        case "local-low" | "local_low" if IS_WINDOWS:
            local = data_local_dir()
            return _str(local.parent / "LocalLow" if local is not None else None)
        case _:
            return None


__all__ = [
    "home_dir", "cache_dir", "config_dir", "config_local_dir", "data_dir",
    "data_local_dir", "executable_dir", "preference_dir", "runtime_dir",
    "state_dir", "font_dir", "user_dir", "desktop_dir", "document_dir",
    "download_dir", "audio_dir", "picture_dir", "public_dir", "template_dir",
    "video_dir", "bin_dir", "fonts_dir", "double_ended_path", "get_tmp_dir",
    "get_tmp_random_dir", "xdg_path", "match_base_dirs",
]
