"""Exceptions raised while locating FLTK build output."""

from pathlib import Path


class FltkBuildError(Exception):
    """Base class for all fltk-build failures."""

    pass


class MissingEnvironmentError(FltkBuildError):
    """A required environment variable is not set."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Environment variable {variable} is not set")


class PathNotFoundError(FltkBuildError):
    """An expected build output directory does not exist."""

    def __init__(self, path: Path | None, what: str):
        self.path = path
        if path is None:
            super().__init__(f"Could not find {what}")
        else:
            super().__init__(f"Could not find {what}: {path}")


class DirectoryUnreadableError(FltkBuildError):
    """Listing a directory failed (missing, permissions, I/O error)."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Cannot read directory {path}: {reason}")
