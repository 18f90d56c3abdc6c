import math

import pytest

from plotartist.markers import Markers, MarkerStyle, into_marker
from plotartist.paths import Path, square


def test_parse_known_symbols():
    assert Markers.parse("o") is Markers.CIRCLE
    assert Markers.parse("^") is Markers.TRIANGLE_UP
    assert Markers.parse("#11") is Markers.CARET_DOWN_BASE


def test_parse_none_forms():
    assert Markers.parse("") is Markers.NONE
    assert Markers.parse("none") is Markers.NONE


def test_parse_unknown_raises():
    with pytest.raises(ValueError, match="unknown marker symbol"):
        Markers.parse("q")


@pytest.mark.parametrize("marker", [m for m in Markers if m is not Markers.NONE])
def test_symbol_round_trip_and_path(marker):
    assert Markers.parse(marker.value) is marker
    path = marker.get_path()
    assert len(path) > 0


def test_none_has_no_path():
    with pytest.raises(ValueError):
        Markers.NONE.get_path()


def test_is_filled_only_square():
    assert Markers.SQUARE.is_filled()
    assert not Markers.CIRCLE.is_filled()


def test_triangle_up_points():
    pts = Markers.TRIANGLE_UP.get_path().points
    assert pts == [(0.0, 1.0), (-1.0, -1.0), (1.0, -1.0)]


def test_triangle_down_is_flipped():
    b = Markers.TRIANGLE_DOWN.get_path().get_bounds()
    assert b.ymin == pytest.approx(-1.0)
    assert b.ymax == pytest.approx(1.0)
    pts = Markers.TRIANGLE_DOWN.get_path().points
    assert pts[0].y == pytest.approx(-1.0)


def test_pixel_scaled_ignores_scale():
    b = Markers.PIXEL.get_scaled_path(50.0).get_bounds()
    assert (b.xmin, b.xmax) == (-2.0, 2.0)


def test_scaled_path_uses_scale():
    b = Markers.SQUARE.get_scaled_path(3.0).get_bounds()
    assert (b.xmin, b.ymin, b.xmax, b.ymax) == (-3.0, -3.0, 3.0, 3.0)


def test_circle_within_unit():
    for p in Markers.CIRCLE.get_path().points:
        assert math.hypot(p.x, p.y) <= 1.01


def test_marker_style_default_size():
    style = MarkerStyle(square())
    b = style.get_path().get_bounds()
    assert (b.xmin, b.xmax) == (-MarkerStyle.DEFAULT_SIZE, MarkerStyle.DEFAULT_SIZE)


def test_marker_style_builders_chain():
    style = MarkerStyle.parse("s").size(2.0).color("red").edge_color("blue").line_width(3.0)
    assert style.get_size() == 2.0
    assert style.get_style().get("face_color") == "red"
    assert style.get_style().get("edge_color") == "blue"
    assert style.get_style().get("line_width") == 3.0
    assert style.get_style().get("join_style") == "miter"


def test_into_marker_variants():
    ms = MarkerStyle(square())
    assert into_marker(ms) is ms
    assert into_marker("s").get_path() == MarkerStyle(square()).get_path()
    assert into_marker(Markers.SQUARE).get_path() == ms.get_path()
    path = Path.lines([(0, 0), (1, 1)])
    assert into_marker(path).get_path().points[-1] == (10.0, 10.0)


def test_into_marker_rejects_other():
    with pytest.raises(TypeError):
        into_marker(3)


def test_marker_style_parse_unknown():
    with pytest.raises(ValueError):
        MarkerStyle.parse("zz")