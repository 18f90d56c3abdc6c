"""Patch artists: arbitrary filled paths, arrows, lines and pie wedges."""

from __future__ import annotations

import math
from typing import Any, Optional

from . import paths
from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .paths import Affine2d, Angle, Bounds, Path, Point, PointLike, _pt


class Patch(ArtistDraw):
    """A filled path in data coordinates with an optional legend label."""

    def __init__(self, path: Path) -> None:
        if not isinstance(path, Path):
            raise TypeError(f"patch requires a Path, got {type(path).__name__}")
        self.path = path
        self.transform = Affine2d.eye()
        self.xform_path = path
        self.label: Optional[str] = None
        self.style = PathStyle()

    @classmethod
    def rect(cls, p0: PointLike, p1: PointLike) -> "Patch":
        return cls(paths.rect(p0, p1))

    def _update_transform(self) -> None:
        self.xform_path = self.path.map(self.transform.transform_point)

    def set_transform(self, transform: Affine2d) -> "Patch":
        self.transform = transform
        self._update_transform()
        return self

    def set_path(self, path: Path) -> "Patch":
        self.path = path
        self._update_transform()
        return self

    def set_label(self, label: str) -> "Patch":
        """Set the legend label; an empty label removes it."""
        self.label = label or None
        return self

    def bounds(self) -> Bounds:
        return Bounds.none()

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        path = to_canvas.transform_path(self.path)
        renderer.draw_path(path, self.style.push(style))

    def get_legend(self) -> Optional[tuple]:
        """``(label, draw)`` where ``draw(renderer, style, bounds)`` draws the swatch."""
        if self.label is None:
            return None
        own = self.style.copy()

        def draw(renderer: Renderer, top_style: Any, bounds: Bounds) -> None:
            swatch = Path.lines([
                (bounds.xmin, bounds.ymid()),
                (bounds.xmax, bounds.ymid()),
            ])
            renderer.draw_path(swatch, own.push(top_style))

        return (self.label, draw)


def _unit_fraction(name: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")
    return value


class Arrow:
    """Arrow shape from a start point along a direction; setters chain."""

    def __init__(self, xy: PointLike, dxdy: PointLike) -> None:
        self.xy = _pt(xy)
        self.dxdy = _pt(dxdy)
        self._width = 1.0
        self._head_width = 0.6
        self._head_length = 0.2
        self._tail_width = 0.2

    def tail_width(self, width: float) -> "Arrow":
        self._tail_width = _unit_fraction("tail width", width)
        return self

    def head_width(self, width: float) -> "Arrow":
        self._head_width = _unit_fraction("head width", width)
        return self

    def head_length(self, length: float) -> "Arrow":
        self._head_length = _unit_fraction("head length", length)
        return self

    def width(self, width: float) -> "Arrow":
        self._width = float(width)
        return self

    def to_path(self) -> Path:
        x, y = self.xy
        dx, dy = self.dxdy

        s_tail = 0.5 * self._tail_width * self._width
        s_head = 0.5 * self._head_width * self._width

        hypot = math.hypot(dx, dy)
        if hypot == 0:
            raise ValueError("arrow direction must be non-zero")
        tx, ty = dy / hypot, -dx / hypot

        x_tail, y_tail = tx * s_tail, ty * s_tail
        xt_head, yt_head = tx * s_head, ty * s_head

        tail_length = 1.0 - self._head_length
        dx_head, dy_head = tail_length * dx, tail_length * dy

        return (
            Path.move_to(x - x_tail, y - y_tail)
            .line_to(x + x_tail, y + y_tail)
            .line_to(x + x_tail + dx_head, y + y_tail + dy_head)
            .line_to(x + xt_head + dx_head, y + yt_head + dy_head)
            .line_to(x + dx, y + dy)
            .line_to(x - xt_head + dx_head, y - yt_head + dy_head)
            .close_poly(x - x_tail + dx_head, y - y_tail + dy_head)
        )

    def into_artist(self) -> Patch:
        return Patch(self.to_path())


def arrow(xy: PointLike, dxdy: PointLike) -> Arrow:
    return Arrow(xy, dxdy)


class Line(ArtistDraw):
    """A single canvas line segment; its path is built on first request."""

    def __init__(self, p0: PointLike, p1: PointLike) -> None:
        self.p0 = _pt(p0)
        self.p1 = _pt(p1)
        self._path: Optional[Path] = None

    def get_path(self) -> Path:
        if self._path is None:
            self._path = Path.lines([self.p0, self.p1])
        return self._path

    def bounds(self) -> Bounds:
        return self.get_path().get_bounds()

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        if self._path is not None:
            renderer.draw_path(to_canvas.transform_path(self._path), style)

    def __repr__(self) -> str:
        return f"Line({self.p0!r}, {self.p1!r})"


class Wedge(ArtistDraw):
    """A pie wedge of a circle between two angles."""

    def __init__(self, center: PointLike, radius: float, angle: tuple) -> None:
        self.center = _pt(center)
        self.radius = float(radius)
        start, end = angle
        if not isinstance(start, Angle) or not isinstance(end, Angle):
            raise TypeError("wedge angles must be Angle values")
        self.angle = (start, end)
        self._path: Optional[Path] = None

    def get_path(self) -> Path:
        if self._path is None:
            transform = (
                Affine2d.eye()
                .scale(self.radius, self.radius)
                .translate(self.center.x, self.center.y)
            )
            self._path = paths.wedge(self.angle).map(transform.transform_point)
        return self._path

    def bounds(self) -> Bounds:
        return self.get_path().get_bounds()

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        if self._path is not None:
            renderer.draw_path(to_canvas.transform_path(self._path), style)

    def __repr__(self) -> str:
        return (
            f"Wedge(({self.center.x}, {self.center.y}), {self.radius}, "
            f"[{self.angle[0].to_degrees()}, {self.angle[1].to_degrees()}])"
        )


__all__ = ["Patch", "Arrow", "Line", "Wedge", "arrow", "Point"]