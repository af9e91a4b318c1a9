"""Tests for short name computation."""

from __future__ import annotations

import logging

import pytest

from disqualified import (
    SPECIAL_TYPE_CHARS,
    DisplayShortName,
    ShortName,
    collapse_type_name,
    shorten,
)

# ---------------------------------------------------------------------------
# Collapser
# ---------------------------------------------------------------------------


class TestCollapseTypeName:
    """Tests for collapse_type_name()."""

    def test_no_separator_returns_same_object(self):
        """A span without a separator comes back untouched."""
        span = "test_system"
        assert collapse_type_name(span) is span

    def test_strips_module_path(self):
        assert collapse_type_name("a::b::c::Type") == "Type"

    def test_keeps_trailing_boundary(self):
        """The boundary character ending a fragment is part of the suffix."""
        assert collapse_type_name("alloc::vec::Vec<") == "Vec<"

    def test_boundary_only(self):
        assert collapse_type_name(",") == ","
        assert collapse_type_name("") == ""

    def test_enum_owner_kept(self):
        """A type-like segment before the last separator is kept."""
        assert collapse_type_name("bevy_render::RenderSet::Prepare") == "RenderSet::Prepare"

    def test_enum_without_module_returns_same_object(self):
        span = "Option::None"
        assert collapse_type_name(span) is span

    def test_only_ascii_uppercase_marks_a_type(self):
        assert collapse_type_name("ķràźÿ::Москва::東京>") == "東京>"

    def test_leading_separator(self):
        assert collapse_type_name("::Foo") == "Foo"


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


class TestShorten:
    """Tests for shorten()."""

    def test_trivial(self):
        assert shorten("test_system") == "test_system"

    def test_trivial_returns_input_object(self):
        """No boundaries and no separators: nothing is copied."""
        name = "test_system"
        assert shorten(name) is name

    def test_path_separated(self):
        assert shorten("bevy_prelude::make_fun_game") == "make_fun_game"

    def test_tuple_type(self):
        assert shorten("(String, String)") == "(String, String)"

    def test_array_type(self):
        assert shorten("[i32; 3]") == "[i32; 3]"

    def test_trivial_generics(self):
        assert shorten("a<B>") == "a<B>"

    def test_multiple_type_parameters(self):
        assert shorten("a<B, C>") == "a<B, C>"

    def test_enums(self):
        assert shorten("Option::None") == "Option::None"
        assert shorten("Option::Some(2)") == "Option::Some(2)"
        assert shorten("bevy_render::RenderSet::Prepare") == "RenderSet::Prepare"

    def test_generics(self):
        name = "bevy_render::camera::camera::extract_cameras<bevy_render::camera::bundle::Camera3d>"
        assert shorten(name) == "extract_cameras<Camera3d>"

    def test_module_stripping_through_nesting(self):
        assert shorten("mod::f<mod2::T1, mod3::T2>") == "f<T1, T2>"

    def test_nested_generics(self):
        name = (
            "bevy::mad_science::do_mad_science<mad_science::Test<mad_science::Tube>, "
            "bavy::TypeSystemAbuse>"
        )
        assert shorten(name) == "do_mad_science<Test<Tube>, TypeSystemAbuse>"

    def test_std_collections(self):
        assert shorten("alloc::vec::Vec<core::option::Option<u32>>") == "Vec<Option<u32>>"

    def test_utf8_generics(self):
        assert shorten("bévï::camérą::łørđ::_öñîòñ<ķràźÿ::Москва::東京>") == "_öñîòñ<東京>"

    def test_sub_path_after_closing_bracket(self):
        assert (
            shorten("bevy_asset::assets::Assets<bevy_scene::dynamic_scene::DynamicScene>::asset_event_system")
            == "Assets<DynamicScene>::asset_event_system"
        )
        assert shorten("pkg::Assets<pkg2::Scene>::event_system") == "Assets<Scene>::event_system"
        assert shorten("(String, String)::default") == "(String, String)::default"
        assert shorten("[i32; 16]::default") == "[i32; 16]::default"

    def test_sub_path_after_bracket_is_collapsed(self):
        """Module segments after a kept separator are still stripped."""
        assert shorten("Vec<T>::inner::method") == "Vec<T>::method"

    def test_separator_after_open_bracket_is_prefix(self):
        """Only closing brackets continue a path."""
        assert shorten("f<::a::B>") == "f<B>"

    def test_slices_and_references(self):
        assert shorten("&[core::option::Option<alloc::string::String>]") == "&[Option<String>]"

    def test_function_pointer(self):
        assert shorten("fn(alloc::string::String) -> core::option::Option<u8>") == (
            "fn(String) -> Option<u8>"
        )

    def test_empty(self):
        assert shorten("") == ""

    @pytest.mark.parametrize(
        "name",
        [
            "unbalanced<a::B",
            "a::b>>::c",
            "::",
            ">::",
            "a::::b",
            ":::",
            "<<>>",
        ],
    )
    def test_malformed_input_does_not_raise(self, name):
        """Any text shortens to some text without errors."""
        assert isinstance(shorten(name), str)

    def test_unbalanced_still_collapses(self):
        assert shorten("unbalanced<a::B") == "unbalanced<B"

    @pytest.mark.parametrize(
        "name",
        [
            "alloc::vec::Vec<core::option::Option<u32>>",
            "bevy_asset::assets::Assets<bevy_scene::Scene>::asset_event_system",
            "bevy_render::RenderSet::Prepare",
            "bévï::camérą::łørđ::_öñîòñ<ķràźÿ::Москва::東京>",
            "[core::option::Option<u8>; 4]",
            "(a::B, c::D)::default",
        ],
    )
    def test_idempotent(self, name):
        once = shorten(name)
        assert shorten(once) == once

    @pytest.mark.parametrize(
        "name",
        [
            "alloc::vec::Vec<core::option::Option<u32>>",
            "bevy::mad_science::do_mad_science<mad_science::Test<mad_science::Tube>, bavy::TypeSystemAbuse>",
            "[a::b::C; 3]",
            "(x::Y, z::W)::default",
        ],
    )
    def test_boundary_characters_preserved(self, name):
        """Boundary characters appear in the same order and number."""

        def boundaries(text):
            return [c for c in text if c in SPECIAL_TYPE_CHARS]

        assert boundaries(shorten(name)) == boundaries(name)


# ---------------------------------------------------------------------------
# ShortName
# ---------------------------------------------------------------------------


class TestShortName:
    """Tests for the ShortName value type."""

    def test_str_is_short(self):
        assert str(ShortName("bevy_prelude::make_fun_game")) == "make_fun_game"

    def test_short_property(self):
        assert ShortName("a::b::C<d::E>").short == "C<E>"

    def test_original_passes_through(self):
        name = "bevy_render::camera::Camera3d"
        assert ShortName(name).original is name

    def test_format_spec_applies_to_short_form(self):
        name = ShortName("bevy_render::camera::Camera3d")
        assert f"{name}" == "Camera3d"
        assert f"{name:>10}" == "  Camera3d"
        assert f"[{name:<10}]" == "[Camera3d  ]"

    def test_repr_shows_original(self):
        assert repr(ShortName("a::B")) == "ShortName('a::B')"

    def test_equality_and_hash(self):
        assert ShortName("a::B") == ShortName("a::B")
        assert ShortName("a::B") != ShortName("c::B")
        assert len({ShortName("a::B"), ShortName("a::B")}) == 1

    def test_not_equal_to_str(self):
        assert ShortName("B") != "B"

    def test_rejects_non_str(self):
        with pytest.raises(TypeError, match="expects a str"):
            ShortName(42)

    def test_immutable(self):
        name = ShortName("a::B")
        with pytest.raises(AttributeError):
            name.other = "x"

    def test_of_class(self):
        class Camera3d:
            pass

        assert str(ShortName.of(Camera3d)) == "Camera3d"
        assert ShortName.of(Camera3d).original.endswith("::Camera3d")

    def test_of_generic(self):
        assert str(ShortName.of(dict[str, list[int]])) == "dict<str, list<int>>"


# ---------------------------------------------------------------------------
# DisplayShortName
# ---------------------------------------------------------------------------


class TestDisplayShortName:
    """Tests for the DisplayShortName adapter."""

    def test_str(self):
        assert str(DisplayShortName("core::option::Option<u32>")) == "Option<u32>"

    def test_format(self):
        assert f"{DisplayShortName('a::b::C'):^5}" == "  C  "

    def test_wraps_any_textual_value(self):
        class Named:
            def __str__(self):
                return "pkg::mod::Thing"

        assert str(DisplayShortName(Named())) == "Thing"

    def test_lazy_in_logging(self, caplog):
        logger = logging.getLogger("disqualified.tests")
        with caplog.at_level(logging.INFO, logger="disqualified.tests"):
            logger.info("running %s", DisplayShortName("app::systems::movement<app::Player>"))
        assert "running movement<Player>" in caplog.text
