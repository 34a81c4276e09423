"""Locate the fltk-sys build output next to the current build script.

Cargo gives each build script an ``OUT_DIR`` of the form
``target/<profile>/build/<crate>-<hash>/out``. fltk-sys builds FLTK into its
own sibling directory, ``target/<profile>/build/fltk-sys-<hash>/out``, whose
``include/`` and ``lib/`` subdirectories are what native modules need.
"""

import os
import sys
from collections.abc import Mapping
from pathlib import Path

from .constants import FLTK_SYS_MARKER, INCLUDE_SUBDIR, LOG_PREFIX, OUT_SUBDIR
from .env import out_dir_from_environ
from .errors import DirectoryUnreadableError, PathNotFoundError


def build_root(out_dir: Path) -> Path:
    """Return the shared build-output root two levels above ``out_dir``."""
    return Path(os.path.normpath(Path(out_dir) / ".." / ".."))


def _unreadable(path: Path, e: OSError) -> DirectoryUnreadableError:
    return DirectoryUnreadableError(path, e.strerror or str(e))


def is_dir(path: Path) -> bool:
    """Path.is_dir(), raising DirectoryUnreadableError instead of OSError (e.g. EACCES)."""
    try:
        return path.is_dir()
    except OSError as e:
        raise _unreadable(path, e) from e


def is_file(path: Path) -> bool:
    """Path.is_file(), raising DirectoryUnreadableError instead of OSError."""
    try:
        return path.is_file()
    except OSError as e:
        raise _unreadable(path, e) from e


def list_entries(directory: Path) -> list[Path]:
    """List a directory's entries sorted by name."""
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise _unreadable(directory, e) from e
    return sorted(entries, key=lambda p: p.name)


def _list_subdirs(directory: Path) -> list[Path]:
    """List immediate child directories, sorted by name."""
    return [p for p in list_entries(directory) if is_dir(p)]


def find_fltk_out_dir(
    out_dir: Path,
    marker: str = FLTK_SYS_MARKER,
    verbose: bool = False,
) -> Path | None:
    """
    Find the ``out`` directory of the sibling fltk-sys build.

    Siblings are checked in lexicographic order, so when several builds of
    fltk-sys are present the smallest matching name with an existing
    ``out`` directory wins.

    Args:
        out_dir: The current build script's output directory
        marker: Substring identifying the toolkit's build directory
        verbose: Print progress to stderr

    Returns:
        Path to ``<build root>/<match>/out``, or None if no sibling matches

    Raises:
        DirectoryUnreadableError: If the build root or a candidate cannot be read
    """
    root = build_root(out_dir)
    if verbose:
        print(f"{LOG_PREFIX} Scanning {root} for '{marker}'", file=sys.stderr)

    for subdir in _list_subdirs(root):
        if marker not in subdir.name:
            continue
        candidate = subdir / OUT_SUBDIR
        if is_dir(candidate):
            if verbose:
                print(f"{LOG_PREFIX} Found {candidate}", file=sys.stderr)
            return candidate
        if verbose:
            print(f"{LOG_PREFIX} Skipping {subdir.name}: no {OUT_SUBDIR}/ directory", file=sys.stderr)

    return None


def require_fltk_out_dir(
    out_dir: Path,
    marker: str = FLTK_SYS_MARKER,
    verbose: bool = False,
) -> Path:
    """Like find_fltk_out_dir, but raise PathNotFoundError instead of returning None."""
    found = find_fltk_out_dir(out_dir, marker=marker, verbose=verbose)
    if found is None:
        raise PathNotFoundError(
            None, f"'{marker}' build output under {build_root(out_dir)}"
        )
    return found


def fltk_include_dir(fltk_out: Path) -> Path:
    """Return the directory holding the FL/ and cfl/ headers."""
    include = Path(fltk_out) / INCLUDE_SUBDIR
    if not is_dir(include):
        raise PathNotFoundError(include, "FLTK include directory")
    return include


def fltk_out_dir(
    environ: Mapping[str, str] | None = None,
    marker: str = FLTK_SYS_MARKER,
    verbose: bool = False,
) -> Path | None:
    """Locate the fltk-sys output directory using ``OUT_DIR`` from the environment."""
    return find_fltk_out_dir(out_dir_from_environ(environ), marker=marker, verbose=verbose)
