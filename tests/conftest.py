"""Shared fixtures: fake Cargo build trees."""

from pathlib import Path

import pytest


def make_build_dir(root: Path, name: str, with_out: bool = True) -> Path:
    """Create target/debug/build/<name>[/out] under ``root``."""
    crate_dir = root / name
    crate_dir.mkdir(parents=True)
    if with_out:
        (crate_dir / "out").mkdir()
    return crate_dir


@pytest.fixture
def build_root(tmp_path):
    """The shared target/debug/build directory."""
    root = tmp_path / "proj" / "target" / "debug" / "build"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def out_dir(build_root):
    """OUT_DIR of the crate whose build script is running."""
    return make_build_dir(build_root, "mycrate-abc123") / "out"


@pytest.fixture
def fltk_out(build_root):
    """A populated fltk-sys build output with lib/ and include/."""
    out = make_build_dir(build_root, "fltk-sys-xyz789") / "out"
    lib = out / "lib"
    lib.mkdir()
    for name in ("libfltk.a", "libfltk_images.a", "libcfltk.a", "fltk_z.lib"):
        (lib / name).write_bytes(b"")
    (lib / "pkgconfig").mkdir()
    include = out / "include"
    (include / "FL").mkdir(parents=True)
    (include / "cfl").mkdir()
    return out


@pytest.fixture
def deny_access(monkeypatch):
    """Make Path.is_dir/is_file raise EACCES for one path, as stat() does on a mode-000 parent."""

    def deny(method_name: str, blocked: Path):
        original = getattr(Path, method_name)

        def checked(self, *args, **kwargs):
            if self == blocked:
                raise PermissionError(13, "Permission denied", str(self))
            return original(self, *args, **kwargs)

        monkeypatch.setattr(Path, method_name, checked)

    return deny
