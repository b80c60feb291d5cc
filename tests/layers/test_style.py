"""Tests for simplestyle property resolution."""

import pytest
from mapgeojson.colors import Color
from mapgeojson.config import Settings
from mapgeojson.style import resolve_style

BLUE = Color(0, 0, 255)


class TestDefaults:
    """Empty properties produce the documented defaults."""

    def test_empty_properties(self):
        style = resolve_style({})
        assert style.stroke_width == 2.0
        assert style.fill_color == BLUE.with_alpha(0.5)
        assert style.stroke_color == BLUE.with_alpha(1.0)
        assert style.icon_color == BLUE
        assert style.stroke_dashed is False
        assert style.visible is True

    def test_none_properties(self):
        assert resolve_style(None) == resolve_style({})

    def test_settings_override_defaults(self):
        cfg = Settings(default_color="#ff0000", default_stroke_width=4, default_fill_opacity=0.25)
        style = resolve_style({}, cfg)
        assert style.stroke_width == 4.0
        assert style.fill_color == Color(255, 0, 0, 0.25)
        assert style.icon_color == Color(255, 0, 0)


class TestColors:
    """marker-color, stroke and fill."""

    def test_marker_color(self):
        assert resolve_style({"marker-color": "#ff0000"}).icon_color == Color(255, 0, 0)

    def test_stroke_color_with_opacity(self):
        style = resolve_style({"stroke": "#00ff00", "stroke-opacity": 0.4})
        assert style.stroke_color == Color(0, 255, 0, 0.4)

    def test_fill_color_with_opacity(self):
        style = resolve_style({"fill": "yellow", "fill-opacity": 0.8})
        assert style.fill_color == Color(255, 255, 0, 0.8)

    def test_marker_color_falls_back_to_stroke(self):
        style = resolve_style({"stroke": "#00ff00"})
        assert style.icon_color == Color(0, 255, 0)

    def test_stroke_falls_back_to_marker_color(self):
        style = resolve_style({"marker-color": "#ff0000"})
        assert style.stroke_color == Color(255, 0, 0)

    def test_each_key_wins_for_its_own_attribute(self):
        style = resolve_style({"marker-color": "#ff0000", "stroke": "#00ff00"})
        assert style.icon_color == Color(255, 0, 0)
        assert style.stroke_color == Color(0, 255, 0)

    def test_malformed_color_falls_back(self, log_messages):
        style = resolve_style({"fill": "not-a-color", "stroke": 12})
        assert style.fill_color == BLUE.with_alpha(0.5)
        assert style.stroke_color == BLUE
        assert any("fill" in m for m in log_messages)


class TestNumbers:
    """Opacity clamping, stroke width, wrong types."""

    @pytest.mark.parametrize("value, expected", [(1.5, 1.0), (-1, 0.0), (0.3, 0.3)])
    def test_fill_opacity_clamped(self, value, expected):
        assert resolve_style({"fill-opacity": value}).fill_color.alpha == pytest.approx(expected)

    def test_stroke_opacity_clamped(self):
        assert resolve_style({"stroke-opacity": 7}).stroke_color.alpha == 1.0

    def test_stroke_width(self):
        assert resolve_style({"stroke-width": 3.5}).stroke_width == 3.5

    def test_negative_stroke_width_clamped(self):
        assert resolve_style({"stroke-width": -4}).stroke_width == 0.0

    @pytest.mark.parametrize("value", ["3", True, None, [1], float("nan")])
    def test_wrong_type_width_uses_default(self, value):
        assert resolve_style({"stroke-width": value}).stroke_width == 2.0

    def test_oversized_integer_width_uses_default(self):
        """An integer too large for a float falls back instead of raising."""
        assert resolve_style({"stroke-width": 10 ** 400}).stroke_width == 2.0

    def test_oversized_integer_opacity_uses_default(self):
        assert resolve_style({"fill-opacity": -(10 ** 400)}).fill_color.alpha == 0.5

    def test_wrong_type_opacity_uses_default(self):
        assert resolve_style({"fill-opacity": "0.1"}).fill_color.alpha == 0.5


class TestFlags:
    """Dash and visibility."""

    def test_dasharray_presence_means_dashed(self):
        assert resolve_style({"stroke-dasharray": "5,5"}).stroke_dashed is True
        assert resolve_style({"stroke-dasharray": [5, 5]}).stroke_dashed is True

    def test_null_dasharray_is_solid(self):
        assert resolve_style({"stroke-dasharray": None}).stroke_dashed is False

    def test_visible_false(self):
        assert resolve_style({"visible": False}).visible is False

    def test_non_boolean_visible_ignored(self):
        assert resolve_style({"visible": "no"}).visible is True

    def test_unknown_keys_ignored(self):
        assert resolve_style({"marker-size": "large", "foo": 1}) == resolve_style({})
