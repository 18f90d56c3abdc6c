import numpy as np
import pytest

from plotartist.grid_color import Colorbar, GridColor, Shading
from plotartist.paths import Bounds, Path, Point, bounds_path


class FakeCanvas:
    bounds = Bounds(0.0, 0.0, 100.0, 100.0)

    def transform_point(self, point):
        return Point(float(point[0]), float(point[1]))

    def transform_path(self, path):
        return path

    def transform_points(self, points):
        return np.asarray(points, dtype=float)


class FakeRenderer:
    def __init__(self):
        self.meshes = []
        self.paths = []

    def draw_mesh2d_color(self, mesh):
        self.meshes.append(mesh)

    def draw_path(self, path, style):
        self.paths.append((path, style))

    def to_px(self, value):
        return value


def identity(v):
    return v


def test_rank_check():
    with pytest.raises(ValueError):
        GridColor([1.0, 2.0])
    grid = GridColor([[1.0]])
    with pytest.raises(ValueError):
        grid.set_data(np.zeros((2, 2, 2)))


def test_bounds_depend_on_shading():
    grid = GridColor(np.zeros((2, 3)))
    assert grid.bounds() == Bounds(0.0, 0.0, 3.0, 2.0)
    grid.set_shading(Shading.GOURAUD)
    assert grid.bounds() == Bounds(0.0, 0.0, 2.0, 1.0)


def test_flat_mesh_triangles():
    data = np.array([[0.0, 5.0, 1.0], [10.0, 2.0, 3.0]])
    grid = GridColor(data).set_color_map(identity)
    renderer = FakeRenderer()
    grid.draw(renderer, FakeCanvas(), None)

    mesh = renderer.meshes[0]
    assert len(mesh) == 2 * data.size
    first = mesh.triangles[0]
    assert [p for p, _ in first] == [Point(0, 0), Point(1, 0), Point(1, 1)]
    second = mesh.triangles[1]
    assert [p for p, _ in second] == [Point(0, 0), Point(0, 1), Point(1, 1)]
    for tri in mesh.triangles:
        assert len({c for _, c in tri}) == 1


def test_flat_colors_are_normalized():
    data = np.array([[0.0, 5.0], [10.0, 2.0]])
    grid = GridColor(data).set_color_map(identity)
    renderer = FakeRenderer()
    grid.draw(renderer, FakeCanvas(), None)
    colors = [tri[0][1] for tri in renderer.meshes[0].triangles[::2]]
    assert colors[0] == 0.0
    assert colors[2] == 1.0
    assert all(0.0 <= c <= 1.0 for c in colors)


def test_gouraud_mesh_uses_corner_colors():
    data = np.arange(12.0).reshape(3, 4)
    grid = GridColor(data).set_color_map(identity).set_shading(Shading.GOURAUD)
    renderer = FakeRenderer()
    grid.draw(renderer, FakeCanvas(), None)
    mesh = renderer.meshes[0]
    assert len(mesh) == 2 * 2 * 3
    tri = mesh.triangles[0]
    assert tri[0][1] == 0.0
    assert tri[0][1] < tri[1][1] < tri[2][1]
    assert mesh.triangles[-1][2][1] == 1.0


def test_set_norm_fixes_range():
    grid = GridColor(np.array([[1.0, 2.0], [3.0, 4.0]]))
    grid.set_norm(-5.0, 5.0)
    grid.draw(FakeRenderer(), FakeCanvas(), None)
    assert grid.norm.min == -5.0
    assert grid.norm.max == 5.0


def test_default_color_map_spans_data():
    grid = GridColor(np.array([[0.0, 1.0]]))
    renderer = FakeRenderer()
    grid.draw(renderer, FakeCanvas(), None)
    low = renderer.meshes[0].triangles[0][0][1]
    high = renderer.meshes[0].triangles[2][0][1]
    assert low != high
    assert all(0.0 <= c <= 1.0 for c in low + high)


def test_colorbar_resize_bounds():
    bar = Colorbar()
    assert bar.bounds() == Bounds.zero()
    pos = Bounds(10.0, 20.0, 30.0, 220.0)
    bar.resize(pos)
    assert bar.bounds() == Bounds(0.0, 0.0, 2.0, 101.0)
    assert bar.data.shape == (101, 2)
    assert bar.pos == pos


def test_colorbar_draw_fills_pos_and_outlines():
    pos = Bounds(10.0, 20.0, 30.0, 220.0)
    bar = Colorbar().resize(pos)
    renderer = FakeRenderer()
    bar.draw(renderer, FakeCanvas(), None)

    mesh = renderer.meshes[0]
    assert len(mesh) == 2 * 101 * 2
    xs = [p.x for tri in mesh.triangles for p, _ in tri]
    ys = [p.y for tri in mesh.triangles for p, _ in tri]
    assert min(xs) == pytest.approx(pos.xmin)
    assert max(xs) == pytest.approx(pos.xmax)
    assert min(ys) == pytest.approx(pos.ymin)
    assert max(ys) == pytest.approx(pos.ymax)

    outline, _ = renderer.paths[-1]
    assert isinstance(outline, Path)
    assert outline == bounds_path(pos)


def test_colorbar_draw_before_resize_fails():
    with pytest.raises(ValueError):
        Colorbar().draw(FakeRenderer(), FakeCanvas(), None)