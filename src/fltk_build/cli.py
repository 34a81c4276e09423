"""Command-line interface for locating and linking a built fltk-sys."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .constants import ENV_MARKER, ENV_OUT_DIR, ENV_TARGET_OS, FLTK_SYS_MARKER
from .emitter import emit, link_directives, module_link_directives
from .env import features_from_environ
from .errors import FltkBuildError, MissingEnvironmentError
from .locator import fltk_include_dir, require_fltk_out_dir
from .models import Features, TargetOS
from .platforms import SYSTEM_LIBS, system_directives

# stdout carries directives only; everything else goes to stderr
console = Console(stderr=True, soft_wrap=True)


def _fail(e: Exception):
    console.print(f"[red]Error: {escape(str(e))}[/red]")
    sys.exit(1)


def _resolve_target_os(target_os: str | None) -> TargetOS:
    if not target_os:
        raise MissingEnvironmentError(ENV_TARGET_OS)
    return TargetOS.from_name(target_os)


def _resolve_features(no_gdiplus: bool, no_pango: bool) -> Features:
    """Command-line switches win; otherwise fall back to CARGO_FEATURE_*."""
    from_env = features_from_environ()
    return Features(
        no_gdiplus=no_gdiplus or from_env.no_gdiplus,
        no_pango=no_pango or from_env.no_pango,
    )


def _out_dir_option(f):
    return click.option(
        "--out-dir",
        envvar=ENV_OUT_DIR,
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help=f"Build script output directory (default: ${ENV_OUT_DIR})",
    )(f)


def _target_os_option(f):
    return click.option(
        "--target-os",
        envvar=ENV_TARGET_OS,
        default=None,
        help=f"Target operating system (default: ${ENV_TARGET_OS})",
    )(f)


def _marker_option(f):
    return click.option(
        "--marker",
        envvar=ENV_MARKER,
        default=FLTK_SYS_MARKER,
        show_default=True,
        help="Substring identifying the fltk-sys build directory",
    )(f)


def _feature_options(f):
    f = click.option("--no-pango", is_flag=True, help="Do not link the pango/cairo stack (Unix-like targets)")(f)
    f = click.option("--no-gdiplus", is_flag=True, help="Do not link gdiplus (Windows targets)")(f)
    return f


@click.group()
@click.version_option(version=__version__)
def main():
    """Locate a built fltk-sys and emit Cargo link directives for FLTK."""
    pass


@main.command("out-dir")
@_out_dir_option
@_marker_option
@click.option("--include", "show_include", is_flag=True, help="Print the include directory instead")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def out_dir_cmd(out_dir, marker, show_include, verbose):
    """Print the fltk-sys output directory.

    Example:
        OUT_DIR=target/debug/build/mycrate-abc123/out fltk-build out-dir --include
    """
    try:
        if out_dir is None:
            raise MissingEnvironmentError(ENV_OUT_DIR)
        fltk_out = require_fltk_out_dir(out_dir, marker=marker, verbose=verbose)
        result = fltk_include_dir(fltk_out) if show_include else fltk_out
    except FltkBuildError as e:
        _fail(e)

    click.echo(str(result))


@main.command()
@_out_dir_option
@_target_os_option
@_feature_options
@_marker_option
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def link(out_dir, target_os, no_gdiplus, no_pango, marker, verbose):
    """Print the directives to statically link FLTK and its system libraries.

    Meant to be run from a build script; every value defaults to the
    environment Cargo provides.
    """
    try:
        if out_dir is None:
            raise MissingEnvironmentError(ENV_OUT_DIR)
        platform = _resolve_target_os(target_os)
        features = _resolve_features(no_gdiplus, no_pango)
        fltk_out = require_fltk_out_dir(out_dir, marker=marker, verbose=verbose)
        directives = link_directives(fltk_out, platform, features)
    except FltkBuildError as e:
        _fail(e)

    if verbose:
        console.print(f"[dim]Emitting {len(directives)} directives from {escape(str(fltk_out))}[/dim]")
    emit(directives)


@main.command("link-module")
@click.argument("name")
@click.option(
    "--lib-dir",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory containing the module's static library",
)
@_target_os_option
def link_module(name, lib_dir, target_os):
    """Print the directives to link a native module NAME built against FLTK.

    Adds the C++ runtime the module needs on the target platform.
    """
    try:
        platform = _resolve_target_os(target_os)
    except FltkBuildError as e:
        _fail(e)

    emit(module_link_directives(lib_dir, name, platform))


@main.command()
@_target_os_option
@_feature_options
def platforms(target_os, no_gdiplus, no_pango):
    """Show the system libraries linked on each platform."""
    features = _resolve_features(no_gdiplus, no_pango)
    targets = [TargetOS.from_name(target_os)] if target_os else list(SYSTEM_LIBS)

    table = Table(title="System libraries")
    table.add_column("Platform", style="cyan")
    table.add_column("Kind")
    table.add_column("Library")
    table.add_column("Optional")

    for platform in targets:
        fixed = set(SYSTEM_LIBS[platform])
        for directive in system_directives(platform, features):
            kind = directive.kind.value if directive.kind else "-"
            optional = "" if directive in fixed else "yes"
            table.add_row(platform.value, kind, directive.value, optional)

    console.print(table)
