import numpy as np
import pytest

from plotartist.artist import PathStyle, ToCanvas
from plotartist.lines import DrawStyle, Lines2d, PathCollection, build_path
from plotartist.markers import Markers
from plotartist.paths import Affine2d, Bounds, PathCode, square


class RecordingRenderer:
    def __init__(self):
        self.paths = []
        self.markers = []

    def draw_path(self, path, style):
        self.paths.append((path, style))

    def draw_markers(self, path, style, markers):
        self.markers.append((path, style, list(markers)))

    def to_px(self, size):
        return size


def ops(path):
    return [c.op for c in path]


def test_lines_repr_from_source_case():
    lines = Lines2d.from_xy([1.0, 2.0, 4.0, 8.0], [10.0, 20.0, 40.0, 80.0])
    assert repr(lines) == "Lines2D[(1, 10), (2, 20), ..., (8, 80)]"


def test_repr_short_forms():
    assert repr(Lines2d.from_xy([1.0], [2.0])) == "Lines2D[(1, 2)]"
    assert repr(Lines2d.from_xy([1.0, 3.5], [2.0, 4.0])) == "Lines2D[(1, 2), (3.5, 4)]"


def test_from_xy_length_mismatch():
    with pytest.raises(ValueError):
        Lines2d.from_xy([1.0, 2.0], [1.0])


def test_from_value_requires_two_columns():
    with pytest.raises(ValueError):
        Lines2d(np.zeros((3, 3)))


def test_from_y_x_coords():
    lines = Lines2d.from_y([5.0, 6.0, 7.0])
    assert list(lines.get_xy()[:, 0]) == pytest.approx(list(np.linspace(0.0, 3.0, 3)))
    assert list(lines.get_xy()[:, 1]) == [5.0, 6.0, 7.0]


def test_build_path_default():
    path = build_path([[0, 0], [1, 1], [2, 0]], DrawStyle.DEFAULT)
    assert ops(path) == [PathCode.Op.MOVE_TO, PathCode.Op.LINE_TO, PathCode.Op.LINE_TO]
    assert path.points == [(0, 0), (1, 1), (2, 0)]


def test_build_path_steps_pre():
    path = build_path([[0, 0], [1, 1], [2, 0]], DrawStyle.STEPS_PRE)
    assert path.points == [(0, 0), (0, 1), (1, 1), (1, 0), (2, 0)]


def test_build_path_steps_mid():
    path = build_path([[0, 0], [1, 1], [2, 0]], DrawStyle.STEPS_MID)
    assert path.points == [(0, 0), (0.5, 0), (0.5, 1), (1, 1), (1.5, 1), (1.5, 0), (2, 0)]


def test_build_path_steps_post():
    path = build_path([[0, 0], [1, 1], [2, 0]], DrawStyle.STEPS_POST)
    assert path.points == [(0, 0), (1, 0), (1, 1), (2, 1), (2, 0)]


def test_build_path_empty():
    assert len(build_path(np.zeros((0, 2)))) == 0


def test_bounds_follow_data():
    lines = Lines2d.from_xy([1.0, 4.0, 2.0], [-1.0, 3.0, 0.0])
    assert lines.bounds() == Bounds(1.0, -1.0, 4.0, 3.0)
    lines.set_xy([0.0, 1.0], [5.0, 6.0])
    assert lines.bounds() == Bounds(0.0, 5.0, 1.0, 6.0)


def test_set_draw_style_rebuilds_path():
    lines = Lines2d.from_xy([0.0, 1.0], [0.0, 1.0])
    lines.set_draw_style(DrawStyle.STEPS_POST)
    assert lines.path.points == [(0, 0), (1, 0), (1, 1)]


def test_draw_transforms_path():
    lines = Lines2d.from_xy([0.0, 1.0], [0.0, 1.0])
    renderer = RecordingRenderer()
    to_canvas = ToCanvas(Affine2d.eye().scale(2.0, 3.0).translate(1.0, 0.0))
    lines.draw(renderer, to_canvas, PathStyle(edge_color="k"))
    assert len(renderer.paths) == 1
    path, style = renderer.paths[0]
    assert path.points == [(1, 0), (3, 3)]
    assert style.get("edge_color") == "k"
    assert renderer.markers == []


def test_invisible_draws_nothing():
    lines = Lines2d.from_xy([0.0, 1.0], [0.0, 1.0])
    lines.visible = False
    renderer = RecordingRenderer()
    lines.draw(renderer, ToCanvas(), PathStyle())
    assert renderer.paths == []


def test_marker_draws_collection():
    lines = Lines2d.from_xy([0.0, 1.0], [0.0, 2.0]).marker("s")
    renderer = RecordingRenderer()
    lines.draw(renderer, ToCanvas(Affine2d.eye().translate(10.0, 0.0)), PathStyle(face_color="red"))
    assert len(renderer.markers) == 1
    _, style, placements = renderer.markers[0]
    assert [p.affine.transform_point((0, 0)) for p in placements] == [(10, 0), (11, 2)]
    assert all(p.color == "red" for p in placements)
    assert style.get("join_style") == "miter"


def test_set_xy_rebuilds_marker_collection():
    lines = Lines2d.from_xy([0.0], [0.0]).marker(Markers.CIRCLE)
    lines.set_xy([1.0, 2.0], [3.0, 4.0])
    assert lines.collection.bounds() == Bounds(1.0, 3.0, 2.0, 4.0)


def test_legend_requires_label():
    lines = Lines2d.from_xy([0.0, 1.0], [0.0, 1.0])
    assert lines.get_legend() is None
    lines.set_label("A")
    label, draw = lines.get_legend()
    assert label == "A"
    renderer = RecordingRenderer()
    draw(renderer, PathStyle(), Bounds(0.0, 0.0, 10.0, 4.0))
    assert renderer.paths[0][0].points == [(0, 2), (10, 2)]
    lines.set_label("")
    assert lines.get_legend() is None


def test_collection_requires_two_columns():
    with pytest.raises(ValueError):
        PathCollection(square(), np.zeros((2, 3)))


def test_collection_repr_and_default_color():
    coll = PathCollection(square(), [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
    assert repr(coll) == "Collection[(1, 2), (3, 4), ..., (5, 6)]"
    renderer = RecordingRenderer()
    coll.draw(renderer, ToCanvas(), PathStyle())
    assert [p.color for p in renderer.markers[0][2]] == ["black"] * 3