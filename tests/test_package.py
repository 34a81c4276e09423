"""Tests for the package's public API."""

import fltk_build


class TestPublicApi:
    def test_all_names_resolve(self):
        for name in fltk_build.__all__:
            assert hasattr(fltk_build, name), name

    def test_operations_exported(self):
        for name in (
            "build_root",
            "cxx_runtime_directives",
            "emit",
            "out_dir_from_environ",
            "strip_lib_prefix",
        ):
            assert name in fltk_build.__all__

    def test_strip_lib_prefix_via_package(self):
        assert fltk_build.strip_lib_prefix("libcfltk") == "cfltk"
