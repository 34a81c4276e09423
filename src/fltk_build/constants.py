"""Shared constants for fltk-build."""

# Environment variables set by Cargo for build scripts
ENV_OUT_DIR = "OUT_DIR"
ENV_TARGET_OS = "CARGO_CFG_TARGET_OS"
ENV_NO_GDIPLUS = "CARGO_FEATURE_NO_GDIPLUS"
ENV_NO_PANGO = "CARGO_FEATURE_NO_PANGO"
ENV_MARKER = "FLTK_BUILD_MARKER"

# Substring identifying the fltk-sys build directory in target/<profile>/build
FLTK_SYS_MARKER = "fltk-sys"

# Layout of a build script's output directory
OUT_SUBDIR = "out"
LIB_SUBDIR = "lib"
INCLUDE_SUBDIR = "include"

STATIC_LIB_PREFIX = "lib"

# Core libraries built by fltk-sys, always linked statically
CORE_LIBS = ("cfltk", "fltk")

# Prefix for verbose progress messages
LOG_PREFIX = "[fltk-build]"
