"""
Constants for `$const: ident`: architecture, OS name and family, executable
suffix, and the package name/version from the resolver configuration.
"""

from __future__ import annotations

import os
import platform
import sys
from typing import Optional

# platform.machine() spellings folded onto the canonical architecture names
_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "i386": "x86",
    "i586": "x86",
    "i686": "x86",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "powerpc64",
}

# Debian architecture names, keyed by platform.machine() (lower-cased)
_DEB_ARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "riscv64": "riscv64",
    "armv7l": "armhf",
    "armv6l": "armel",
    "armv5tel": "armel",
    "mips": "mipsel",
    "mips64": "mips64el",
    "s390x": "s390x",
    "ppc64le": "ppc64el",
    "i386": "i386",
    "i586": "i386",
    "i686": "i386",
    "x86": "i386",
}


def _machine() -> str:
    return platform.machine().lower()


def get_architecture() -> str:
    m = _machine()
    return _ARCH_ALIASES.get(m, m)


def get_deb_arch() -> str:
    """Debian architecture for this machine, e.g. amd64, arm64, ppc64el."""
    m = _machine()
    return _DEB_ARCH.get(m, get_architecture())


def get_os_name() -> str:
    if hasattr(sys, "getandroidapilevel"):
        return "android"
    p = sys.platform
    if p == "win32":
        return "windows"
    if p == "darwin":
        return "macos"
    for prefix in ("linux", "freebsd", "openbsd", "netbsd", "dragonfly"):
        if p.startswith(prefix):
            return prefix
    return p


def get_os_family() -> str:
    return "windows" if os.name == "nt" else "unix"


def get_exe_extension() -> str:
    return "exe" if os.name == "nt" else ""


def get_exe_suffix() -> str:
    ext = get_exe_extension()
    return f".{ext}" if ext else ""


def match_consts(ident: str, *, pkg_name: str = "envpath", pkg_version: str = "") -> Optional[str]:
    match ident:
        case "arch" | "architecture":
            return get_architecture()
        case "deb_arch" | "deb-arch":
            return get_deb_arch()
        case "os":
            return get_os_name()
        case "family":
            return get_os_family()
        case "exe_suffix":
            return get_exe_suffix()
        case "exe_extension":
            return get_exe_extension()
        case "pkg" | "pkg_name" | "pkg-name":
            return pkg_name
        case "pkg_version" | "pkg-version" | "ver":
            return pkg_version or None
        case "empty":
            return ""
        case _:
            return None


__all__ = [
    "get_architecture",
    "get_deb_arch",
    "get_os_name",
    "get_os_family",
    "get_exe_extension",
    "get_exe_suffix",
    "match_consts",
]
