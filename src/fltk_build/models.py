"""Data models for link directives."""

from dataclasses import dataclass
from enum import Enum


class TargetOS(str, Enum):
    """Operating system the final binary is built for."""

    MACOS = "macos"
    WINDOWS = "windows"
    ANDROID = "android"
    OTHER = "other"  # linux, the BSDs and every other Unix-like target

    @classmethod
    def from_name(cls, name: str) -> "TargetOS":
        """Map a CARGO_CFG_TARGET_OS value onto a platform branch."""
        name = name.strip().lower()
        for member in (cls.MACOS, cls.WINDOWS, cls.ANDROID):
            if member.value == name:
                return member
        return cls.OTHER


class LinkKind(str, Enum):
    """Kind of library passed to rustc-link-lib."""

    STATIC = "static"
    DYLIB = "dylib"
    FRAMEWORK = "framework"


LINK_SEARCH = "link-search"
LINK_LIB = "link-lib"


@dataclass(frozen=True)
class LinkDirective:
    """One line of linker configuration understood by the build tool."""

    action: str  # LINK_SEARCH or LINK_LIB
    value: str
    kind: LinkKind | None = None
    namespace: str = "cargo"

    @classmethod
    def search(cls, path) -> "LinkDirective":
        return cls(LINK_SEARCH, str(path))

    @classmethod
    def static(cls, name: str) -> "LinkDirective":
        return cls(LINK_LIB, name, LinkKind.STATIC)

    @classmethod
    def dylib(cls, name: str) -> "LinkDirective":
        return cls(LINK_LIB, name, LinkKind.DYLIB)

    @classmethod
    def framework(cls, name: str) -> "LinkDirective":
        return cls(LINK_LIB, name, LinkKind.FRAMEWORK)

    @classmethod
    def lib(cls, name: str) -> "LinkDirective":
        """Library without an explicit kind; the linker default applies."""
        return cls(LINK_LIB, name)

    def render(self) -> str:
        if self.action == LINK_SEARCH:
            return f"{self.namespace}:rustc-link-search=native={self.value}"
        if self.kind is None:
            return f"{self.namespace}:rustc-link-lib={self.value}"
        return f"{self.namespace}:rustc-link-lib={self.kind.value}={self.value}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Features:
    """Build-time switches that drop optional system libraries."""

    no_gdiplus: bool = False  # Windows: skip the GDI+ helper
    no_pango: bool = False  # Unix-like: skip the pango/cairo text stack
