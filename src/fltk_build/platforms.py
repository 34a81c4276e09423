"""System libraries FLTK needs on each target platform."""

from .models import Features, LinkDirective, TargetOS

_MACOS_FRAMEWORKS = ("Carbon", "Cocoa", "ApplicationServices")

_WINDOWS_DYLIBS = (
    "ws2_32",
    "comctl32",
    "gdi32",
    "oleaut32",
    "ole32",
    "uuid",
    "shell32",
    "advapi32",
    "comdlg32",
    "winspool",
    "user32",
    "kernel32",
    "odbc32",
)

_ANDROID_LIBS = ("log", "android", "c++_shared")

# X11 and rendering libraries, followed by fontconfig
_UNIX_DYLIBS = (
    "pthread",
    "X11",
    "Xext",
    "Xinerama",
    "Xcursor",
    "Xrender",
    "Xfixes",
    "Xft",
    "fontconfig",
)

_PANGO_DYLIBS = (
    "pango-1.0",
    "pangoxft-1.0",
    "gobject-2.0",
    "cairo",
    "pangocairo-1.0",
)

SYSTEM_LIBS: dict[TargetOS, tuple[LinkDirective, ...]] = {
    TargetOS.MACOS: tuple(LinkDirective.framework(n) for n in _MACOS_FRAMEWORKS),
    TargetOS.WINDOWS: tuple(LinkDirective.dylib(n) for n in _WINDOWS_DYLIBS),
    TargetOS.ANDROID: tuple(LinkDirective.lib(n) for n in _ANDROID_LIBS),
    TargetOS.OTHER: tuple(LinkDirective.dylib(n) for n in _UNIX_DYLIBS),
}

# Optional libraries: (platform, Features attribute that disables them, directives)
OPTIONAL_LIBS: tuple[tuple[TargetOS, str, tuple[LinkDirective, ...]], ...] = (
    (TargetOS.WINDOWS, "no_gdiplus", (LinkDirective.dylib("gdiplus"),)),
    (TargetOS.OTHER, "no_pango", tuple(LinkDirective.dylib(n) for n in _PANGO_DYLIBS)),
)

CXX_RUNTIME: dict[TargetOS, tuple[LinkDirective, ...]] = {
    TargetOS.WINDOWS: (),  # MSVC links its C++ runtime implicitly
    TargetOS.MACOS: (LinkDirective.lib("c++"),),
    TargetOS.ANDROID: (LinkDirective.lib("stdc++"),),
    TargetOS.OTHER: (LinkDirective.lib("stdc++"),),
}


def system_directives(target_os: TargetOS, features: Features | None = None) -> list[LinkDirective]:
    """
    Return the system library directives for a platform.

    The fixed list for ``target_os`` comes first, followed by any optional
    libraries whose disabling switch is off in ``features``.
    """
    if features is None:
        features = Features()
    directives = list(SYSTEM_LIBS[target_os])
    for platform, switch, extra in OPTIONAL_LIBS:
        if platform is target_os and not getattr(features, switch):
            directives.extend(extra)
    return directives


def cxx_runtime_directives(target_os: TargetOS) -> list[LinkDirective]:
    """Return the C++ standard library a native module must link against."""
    return list(CXX_RUNTIME[target_os])
