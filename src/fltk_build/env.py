"""Read build configuration from the environment Cargo provides."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .constants import ENV_NO_GDIPLUS, ENV_NO_PANGO, ENV_OUT_DIR, ENV_TARGET_OS
from .errors import MissingEnvironmentError
from .models import Features, TargetOS

_FALSE_VALUES = ("", "0", "false")


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise MissingEnvironmentError(name)
    return value


def flag_from_environ(environ: Mapping[str, str], name: str) -> bool:
    """Cargo sets CARGO_FEATURE_<NAME> for every enabled feature."""
    value = environ.get(name)
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


def features_from_environ(environ: Mapping[str, str] | None = None) -> Features:
    if environ is None:
        environ = os.environ
    return Features(
        no_gdiplus=flag_from_environ(environ, ENV_NO_GDIPLUS),
        no_pango=flag_from_environ(environ, ENV_NO_PANGO),
    )


def out_dir_from_environ(environ: Mapping[str, str] | None = None) -> Path:
    """Read the build script output directory from the environment."""
    if environ is None:
        environ = os.environ
    return Path(_require(environ, ENV_OUT_DIR))


def target_os_from_environ(environ: Mapping[str, str] | None = None) -> TargetOS:
    if environ is None:
        environ = os.environ
    return TargetOS.from_name(_require(environ, ENV_TARGET_OS))


@dataclass
class BuildEnv:
    """Everything the link emitter needs from the invoking build."""

    out_dir: Path
    target_os: TargetOS
    features: Features = field(default_factory=Features)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> "BuildEnv":
        """
        Build a BuildEnv from environment variables.

        Raises:
            MissingEnvironmentError: If OUT_DIR or CARGO_CFG_TARGET_OS is unset
        """
        if environ is None:
            environ = os.environ
        return cls(
            out_dir=out_dir_from_environ(environ),
            target_os=target_os_from_environ(environ),
            features=features_from_environ(environ),
        )
