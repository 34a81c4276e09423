"""Tests for link directive models."""

import pytest

from fltk_build.models import Features, LinkDirective, LinkKind, TargetOS


class TestTargetOS:
    """Tests for mapping target names onto platform branches."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("macos", TargetOS.MACOS),
            ("windows", TargetOS.WINDOWS),
            ("android", TargetOS.ANDROID),
            ("linux", TargetOS.OTHER),
            ("freebsd", TargetOS.OTHER),
            ("ios", TargetOS.OTHER),
        ],
    )
    def test_from_name(self, name, expected):
        assert TargetOS.from_name(name) is expected

    def test_from_name_normalises_case_and_whitespace(self):
        assert TargetOS.from_name(" Windows\n") is TargetOS.WINDOWS


class TestLinkDirective:
    """Tests for rendering directives as build-tool lines."""

    def test_render_search(self, tmp_path):
        directive = LinkDirective.search(tmp_path / "lib")
        assert directive.render() == f"cargo:rustc-link-search=native={tmp_path / 'lib'}"

    def test_render_static(self):
        assert LinkDirective.static("fltk").render() == "cargo:rustc-link-lib=static=fltk"

    def test_render_dylib(self):
        assert LinkDirective.dylib("X11").render() == "cargo:rustc-link-lib=dylib=X11"

    def test_render_framework(self):
        assert LinkDirective.framework("Cocoa").render() == "cargo:rustc-link-lib=framework=Cocoa"

    def test_render_without_kind(self):
        """Libraries without a kind omit the kind segment."""
        assert LinkDirective.lib("log").render() == "cargo:rustc-link-lib=log"

    def test_custom_namespace(self):
        directive = LinkDirective("link-lib", "fltk", LinkKind.STATIC, namespace="other")
        assert directive.render() == "other:rustc-link-lib=static=fltk"

    def test_str_is_render(self):
        directive = LinkDirective.dylib("cairo")
        assert str(directive) == directive.render()

    def test_directives_are_hashable_and_comparable(self):
        assert LinkDirective.dylib("cairo") == LinkDirective.dylib("cairo")
        assert LinkDirective.dylib("cairo") != LinkDirective.static("cairo")
        assert len({LinkDirective.dylib("cairo"), LinkDirective.dylib("cairo")}) == 1


class TestFeatures:
    def test_defaults_enable_everything(self):
        features = Features()
        assert features.no_gdiplus is False
        assert features.no_pango is False
