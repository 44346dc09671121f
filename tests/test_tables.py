import os
import sys
import pytest
from pathlib import Path
from envpath import envpath_consts as consts
from envpath import envpath_dirs as dirs
from envpath.envpath_values import match_values, get_random_value, DEFAULT_RAND_LENGTH, MAX_RAND_LENGTH

linux_only = pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG layout")


# -----------------------------------------------------------------
# $val
# -----------------------------------------------------------------

def test_values_empty_and_unknown():
    assert match_values("empty") == ""
    assert match_values("nope") is None


@pytest.mark.parametrize(
    "ident,length",
    [
        ("rand-8", 8),
        ("rand-0", 0),
        ("rand-x", DEFAULT_RAND_LENGTH),
        ("rand-", DEFAULT_RAND_LENGTH),
        ("rand--3", DEFAULT_RAND_LENGTH),
        ("rand-999999999", DEFAULT_RAND_LENGTH),
        ("rand-1024", 1024),
        ("rand-²", DEFAULT_RAND_LENGTH),
    ],
)
def test_values_random(ident, length):
    v = match_values(ident)
    assert len(v) == length
    assert v.isalnum() or v == ""


def test_random_length_from_config():
    assert len(match_values("rand-x", rand_length=4)) == 4
    assert len(match_values("rand--3", rand_length=4)) == 4
    assert len(match_values(f"rand-{MAX_RAND_LENGTH + 1}", rand_length=4)) == 4
    assert get_random_value(3) != get_random_value(32)


# -----------------------------------------------------------------
# $const
# -----------------------------------------------------------------

def test_consts_package():
    assert consts.match_consts("pkg", pkg_name="demo") == "demo"
    assert consts.match_consts("pkg-version", pkg_version="1.0") == "1.0"
    assert consts.match_consts("ver") is None
    assert consts.match_consts("empty") == ""
    assert consts.match_consts("nope") is None


def test_consts_platform():
    assert consts.match_consts("family") in ("unix", "windows")
    assert consts.match_consts("os")
    suffix = consts.match_consts("exe_suffix")
    ext = consts.match_consts("exe_extension")
    assert suffix == (f".{ext}" if ext else "")


@pytest.mark.parametrize(
    "machine,arch,deb",
    [
        ("AMD64", "x86_64", "amd64"),
        ("x86_64", "x86_64", "amd64"),
        ("arm64", "aarch64", "arm64"),
        ("armv7l", "arm", "armhf"),
        ("ppc64le", "powerpc64", "ppc64el"),
        ("riscv64", "riscv64", "riscv64"),
    ],
)
def test_architecture_names(monkeypatch, machine, arch, deb):
    monkeypatch.setattr(consts.platform, "machine", lambda: machine)
    assert consts.match_consts("arch") == arch
    assert consts.match_consts("deb-arch") == deb


# -----------------------------------------------------------------
# $dir
# -----------------------------------------------------------------

def test_dirs_empty_and_unknown():
    assert dirs.match_base_dirs("empty") == ""
    assert dirs.match_base_dirs("nope") is None


def test_dirs_home():
    assert dirs.match_base_dirs("home") == str(Path.home())


def test_path_ends(monkeypatch):
    monkeypatch.setenv("PATH", os.pathsep.join(["/first", "/mid", "/last"]))
    assert dirs.match_base_dirs("path") == "/first"
    assert dirs.match_base_dirs("first-path") == "/first"
    assert dirs.match_base_dirs("last_path") == "/last"
    monkeypatch.setenv("PATH", "")
    assert dirs.match_base_dirs("path") is None


def test_tmp_prefers_tmpdir(monkeypatch, tmp_path):
    monkeypatch.setenv("TMPDIR", str(tmp_path))
    assert dirs.match_base_dirs("tmp") == str(tmp_path)
    rand = Path(dirs.match_base_dirs("tmp-rand", pkg_name="demo", rand_length=6))
    assert rand.parent == tmp_path
    assert rand.name.startswith("demo_")
    assert len(rand.name) == len("demo_") + 6


def test_tmp_random_dir_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("TMPDIR", str(tmp_path))
    assert dirs.get_tmp_random_dir("x-", 4).name.startswith("x-")
    assert len(dirs.get_tmp_random_dir(" ", 4).name) == 4


def test_tmp_falls_back_to_cache(monkeypatch, tmp_path):
    monkeypatch.delenv("TMPDIR", raising=False)
    monkeypatch.setattr(dirs.os, "access", lambda p, mode: False)
    monkeypatch.setattr(dirs, "cache_dir", lambda: tmp_path)
    assert dirs.get_tmp_dir() == tmp_path / "tmp"
    monkeypatch.setattr(dirs, "cache_dir", lambda: None)
    assert dirs.get_tmp_dir() == Path(".tmp")


@linux_only
def test_xdg_base_dirs(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "c"))
    monkeypatch.setenv("XDG_DATA_HOME", "relative/is/ignored")
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.delenv("XDG_BIN_HOME", raising=False)
    assert dirs.match_base_dirs("cfg") == str(tmp_path / "c")
    assert dirs.match_base_dirs("data") == str(tmp_path / ".local" / "share")
    assert dirs.match_base_dirs("cache") == str(tmp_path / ".cache")
    assert dirs.match_base_dirs("bin") == str(tmp_path / ".local" / "bin")
    assert dirs.match_base_dirs("font") == str(tmp_path / ".local" / "share" / "fonts")
    assert dirs.match_base_dirs("var-tmp", pkg_name="demo") == "/var/tmp/demo"


@linux_only
def test_user_dirs_file(monkeypatch, tmp_path):
    home = tmp_path / "home"
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("XDG_DOWNLOAD_DIR", raising=False)
    monkeypatch.delenv("XDG_MUSIC_DIR", raising=False)
    (tmp_path / "user-dirs.dirs").write_text(
        '# written by xdg-user-dirs-update\nXDG_DOWNLOAD_DIR="$HOME/Dl"\n'
    )
    assert dirs.match_base_dirs("dl") == str(home / "Dl")
    assert dirs.match_base_dirs("music") == str(home / "Music")
    monkeypatch.setenv("XDG_MUSIC_DIR", str(tmp_path / "tunes"))
    assert dirs.match_base_dirs("audio") == str(tmp_path / "tunes")


@linux_only
def test_document_and_picture_dirs(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "none"))
    for key in ("DOCUMENTS", "PICTURES"):
        monkeypatch.delenv(f"XDG_{key}_DIR", raising=False)
    assert dirs.match_base_dirs("doc") == str(tmp_path / "Documents")
    assert dirs.match_base_dirs("pic") == str(tmp_path / "Pictures")


@linux_only
def test_runtime_dir_requires_env(monkeypatch):
    monkeypatch.delenv("XDG_RUNTIME_DIR", raising=False)
    assert dirs.match_base_dirs("runtime") is None
