"""Emit Cargo link directives for FLTK and its system libraries."""

import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TextIO

from .constants import CORE_LIBS, FLTK_SYS_MARKER, LIB_SUBDIR, LOG_PREFIX, STATIC_LIB_PREFIX
from .env import BuildEnv
from .locator import is_file, list_entries, require_fltk_out_dir
from .models import Features, LinkDirective, TargetOS
from .platforms import cxx_runtime_directives, system_directives


def strip_lib_prefix(name: str) -> str:
    """Drop one leading "lib", as in libfltk.a -> fltk."""
    if name.startswith(STATIC_LIB_PREFIX):
        return name[len(STATIC_LIB_PREFIX):]
    return name


def _list_files(directory: Path) -> list[Path]:
    return [p for p in list_entries(directory) if is_file(p)]


def static_lib_directives(lib_dir: Path) -> list[LinkDirective]:
    """
    Return the search path for ``lib_dir`` and a static link for each file in it.

    The search path always comes first. The fixed cfltk and fltk
    libraries are appended after the directory listing.

    Raises:
        DirectoryUnreadableError: If ``lib_dir`` cannot be listed
    """
    lib_dir = Path(lib_dir)
    directives = [LinkDirective.search(lib_dir)]
    for lib in _list_files(lib_dir):
        directives.append(LinkDirective.static(strip_lib_prefix(lib.stem)))
    directives.extend(LinkDirective.static(name) for name in CORE_LIBS)
    return directives


def link_directives(
    fltk_out: Path,
    target_os: TargetOS,
    features: Features | None = None,
) -> list[LinkDirective]:
    """All directives needed to link FLTK statically for ``target_os``."""
    directives = static_lib_directives(Path(fltk_out) / LIB_SUBDIR)
    directives.extend(system_directives(target_os, features))
    return directives


def module_link_directives(lib_dir: Path, name: str, target_os: TargetOS) -> list[LinkDirective]:
    """Directives for a user's own static native module built against FLTK."""
    directives = [LinkDirective.search(lib_dir), LinkDirective.static(name)]
    directives.extend(cxx_runtime_directives(target_os))
    return directives


def emit(directives: Iterable[LinkDirective], stream: TextIO | None = None) -> None:
    """Write one rendered directive per line."""
    if stream is None:
        stream = sys.stdout
    for directive in directives:
        stream.write(directive.render() + "\n")


def link_fltk(
    environ: Mapping[str, str] | None = None,
    features: Features | None = None,
    stream: TextIO | None = None,
    marker: str = FLTK_SYS_MARKER,
    verbose: bool = False,
) -> list[LinkDirective]:
    """
    Locate fltk-sys and print the directives to link against it.

    Args:
        environ: Environment to read OUT_DIR and CARGO_CFG_TARGET_OS from
            (default: os.environ)
        features: Overrides the CARGO_FEATURE_NO_* switches when given
        stream: Where to write directives (default: stdout)
        marker: Substring identifying the fltk-sys build directory
        verbose: Print progress to stderr

    Returns:
        The emitted directives

    Raises:
        MissingEnvironmentError: If a required variable is unset
        PathNotFoundError: If no fltk-sys build output exists
        DirectoryUnreadableError: If a directory cannot be listed
    """
    build_env = BuildEnv.from_environ(environ)
    if features is None:
        features = build_env.features

    fltk_out = require_fltk_out_dir(build_env.out_dir, marker=marker, verbose=verbose)
    # Computed in full before anything is written
    directives = link_directives(fltk_out, build_env.target_os, features)

    if verbose:
        print(
            f"{LOG_PREFIX} Emitting {len(directives)} directives for {build_env.target_os.value}",
            file=sys.stderr,
        )
    emit(directives, stream)
    return directives
