"""Locate a built fltk-sys and link native modules against FLTK."""

from .emitter import (
    emit,
    link_directives,
    link_fltk,
    module_link_directives,
    static_lib_directives,
    strip_lib_prefix,
)
from .env import BuildEnv, out_dir_from_environ
from .errors import (
    DirectoryUnreadableError,
    FltkBuildError,
    MissingEnvironmentError,
    PathNotFoundError,
)
from .locator import (
    build_root,
    find_fltk_out_dir,
    fltk_include_dir,
    fltk_out_dir,
    require_fltk_out_dir,
)
from .models import Features, LinkDirective, LinkKind, TargetOS
from .platforms import cxx_runtime_directives, system_directives

__version__ = "0.1.0"

__all__ = [
    "BuildEnv",
    "DirectoryUnreadableError",
    "Features",
    "FltkBuildError",
    "LinkDirective",
    "LinkKind",
    "MissingEnvironmentError",
    "PathNotFoundError",
    "TargetOS",
    "build_root",
    "cxx_runtime_directives",
    "emit",
    "find_fltk_out_dir",
    "fltk_include_dir",
    "fltk_out_dir",
    "link_directives",
    "link_fltk",
    "module_link_directives",
    "out_dir_from_environ",
    "require_fltk_out_dir",
    "static_lib_directives",
    "strip_lib_prefix",
    "system_directives",
]
