"""Color grids (pcolormesh-style cell meshes) and colorbars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Union

import numpy as np

from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .norm import Norm, Norms
from .paths import Affine2d, Bounds, Path, Point, PointLike, bounds_path

ColorMap = Callable[[float], Any]

_LOW = (0.0, 0.25, 0.6, 1.0)
_HIGH = (1.0, 0.6, 0.1, 1.0)


def _default_color_map(value: float) -> tuple:
    """Linear blend from blue (0) to orange (1), clamped to the unit interval."""
    t = min(max(float(value), 0.0), 1.0)
    return tuple(lo + (hi - lo) * t for lo, hi in zip(_LOW, _HIGH))


class Shading(Enum):
    """How grid cells are colored."""

    FLAT = "flat"
    GOURAUD = "gouraud"


@dataclass
class Mesh2dColor:
    """Triangles whose vertices each carry a color."""

    triangles: list = field(default_factory=list)

    def triangle(self, a: tuple, b: tuple, c: tuple) -> None:
        """Add a triangle of three ``(point, color)`` vertices."""
        self.triangles.append(tuple((Point(float(p[0]), float(p[1])), color) for p, color in (a, b, c)))

    def __len__(self) -> int:
        return len(self.triangles)


def _as_grid(data: Any) -> np.ndarray:
    grid = np.asarray(data, dtype=float)
    if grid.ndim != 2:
        raise ValueError(f"color grid requires 2d value, got shape {grid.shape}")
    return grid


def _normalize_unit(data: np.ndarray) -> np.ndarray:
    lo, hi = float(data.min()), float(data.max())
    if hi == lo:
        return np.zeros_like(data)
    return (data - lo) / (hi - lo)


class GridColor(ArtistDraw):
    """Colored grid: cell ``(j, i)`` covers ``[i, i+1] x [j, j+1]`` in data space."""

    def __init__(self, data: Any) -> None:
        self.data = _as_grid(data)
        self.xy = np.zeros((0, 2))
        self.color_map: ColorMap = _default_color_map
        self.shading = Shading.FLAT
        self.norm = Norm.from_norms(Norms.LINEAR)
        self._is_stale = True

    def set_data(self, data: Any) -> "GridColor":
        self.data = _as_grid(data)
        self._is_stale = True
        return self

    def set_norm_type(self, norm: Union[Norm, Norms]) -> "GridColor":
        self.norm = norm if isinstance(norm, Norm) else Norm.from_norms(Norms(norm))
        self._is_stale = True
        return self

    def set_color_map(self, color_map: ColorMap) -> "GridColor":
        if not callable(color_map):
            raise TypeError("color map must be callable")
        self.color_map = color_map
        self._is_stale = True
        return self

    def set_shading(self, shading: Shading) -> "GridColor":
        self.shading = Shading(shading)
        self._is_stale = True
        return self

    def set_norm(self, vmin: float, vmax: float) -> "GridColor":
        """Fix the normalization range."""
        self.norm.vmin(vmin)
        self.norm.vmax(vmax)
        self._is_stale = True
        return self

    def bounds(self) -> Bounds:
        rows, cols = self.data.shape
        if self.shading is Shading.GOURAUD:
            rows, cols = rows - 1, cols - 1
        return Bounds(0.0, 0.0, float(cols), float(rows))

    def _refresh(self) -> None:
        if not self._is_stale:
            return
        self._is_stale = False
        rows, cols = self.data.shape
        jj, ii = np.mgrid[0:rows + 1, 0:cols + 1]
        self.xy = np.stack([ii.ravel(), jj.ravel()], axis=-1).astype(float)
        self.norm.set_bounds(self.data)

    def _canvas_grid(self, to_canvas: ToCanvas) -> np.ndarray:
        rows, cols = self.data.shape
        xy = np.asarray(to_canvas.transform_points(self.xy), dtype=float)
        return xy.reshape(rows + 1, cols + 1, 2)

    def _flat_mesh(self, to_canvas: ToCanvas) -> Mesh2dColor:
        grid = self._canvas_grid(to_canvas)
        norm = _normalize_unit(self.data)
        rows, cols = norm.shape
        mesh = Mesh2dColor()
        for j in range(rows):
            for i in range(cols):
                c = self.color_map(float(norm[j, i]))
                p00, p01 = grid[j, i], grid[j, i + 1]
                p10, p11 = grid[j + 1, i], grid[j + 1, i + 1]
                mesh.triangle((p00, c), (p01, c), (p11, c))
                mesh.triangle((p00, c), (p10, c), (p11, c))
        return mesh

    def _gouraud_mesh(self, to_canvas: ToCanvas) -> Mesh2dColor:
        grid = self._canvas_grid(to_canvas)
        norm = _normalize_unit(self.data)
        rows, cols = norm.shape
        colors = [[self.color_map(float(v)) for v in row] for row in norm]
        mesh = Mesh2dColor()
        for j in range(rows - 1):
            for i in range(cols - 1):
                v00 = (grid[j, i], colors[j][i])
                v01 = (grid[j, i + 1], colors[j][i + 1])
                v10 = (grid[j + 1, i], colors[j + 1][i])
                v11 = (grid[j + 1, i + 1], colors[j + 1][i + 1])
                mesh.triangle(v00, v01, v11)
                mesh.triangle(v00, v10, v11)
        return mesh

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        self._refresh()
        if self.shading is Shading.GOURAUD:
            mesh = self._gouraud_mesh(to_canvas)
        else:
            mesh = self._flat_mesh(to_canvas)
        renderer.draw_mesh2d_color(mesh)


class _AffineCanvas:
    """Maps points through an affine transform into a fixed canvas frame."""

    def __init__(self, transform: Affine2d, frame: Bounds) -> None:
        self._transform = transform
        self.bounds = frame

    def transform_point(self, point: PointLike) -> Point:
        return self._transform.transform_point(point)

    def transform_path(self, path: Path) -> Path:
        return self._transform.transform_path(path)

    def transform_points(self, points: Any) -> np.ndarray:
        t = self._transform
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        x, y = pts[:, 0], pts[:, 1]
        return np.stack([t.a * x + t.b * y + t.c, t.d * x + t.e * y + t.f], axis=-1)


class Colorbar(ArtistDraw):
    """Vertical color scale filling a canvas rectangle, outlined in black."""

    STEPS = 101

    def __init__(self) -> None:
        self._bounds = Bounds.zero()
        self.pos = Bounds.zero()
        self.data = np.array([0.0, 1.0])
        self.mesh = GridColor([[0.0]])

    def set_pos(self, pos: Bounds) -> "Colorbar":
        self.pos = pos
        return self

    def resize(self, pos: Bounds) -> "Colorbar":
        """Rebuild the color scale and place it in ``pos``."""
        self._bounds = Bounds(0.0, 0.0, 2.0, float(self.STEPS))
        x = np.linspace(0.0, 1.0, self.STEPS)
        self.data = np.stack([x, x], axis=-1)
        self.mesh.set_data(self.data)
        self.pos = pos
        return self

    def bounds(self) -> Bounds:
        return self._bounds

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        """Draw the scale; raises ``ValueError`` if ``resize`` has not been called."""
        transform = self._bounds.affine_to(self.pos)
        self.mesh.draw(renderer, _AffineCanvas(transform, self.pos), style)

        outline = (
            PathStyle()
            .face_color(0x0)
            .edge_color(0xFF)
            .cap_style("projecting")
            .line_width(0.7)
        )
        renderer.draw_path(bounds_path(self.pos), outline)


__all__ = ["Shading", "GridColor", "Colorbar", "Mesh2dColor", "Optional"][:4]