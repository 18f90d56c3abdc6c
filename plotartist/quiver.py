"""Vector-field arrows (quiver) and horizontal reference lines."""

from __future__ import annotations

from typing import Any

import numpy as np

from . import paths
from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .paths import Bounds, Path

_EPSILON = float(np.finfo(np.float32).eps)


def arrow_path(x: float, y: float, u: float, v: float) -> Path:
    """Arrow polygon starting at ``(x, y)`` and ending at ``(x + u, y + v)``.

    A zero vector is drawn as a tiny square centred on the point.
    """
    wt = 0.07
    xt, yt = v * wt, -u * wt

    wh = 0.25
    xh, yh = v * wh, -u * wh

    lh = 0.6
    uh, vh = lh * u, lh * v

    if u == 0.0 and v == 0.0:
        return paths.rect((x - 0.1 * wt, y - 0.1 * wt), (x + 0.1 * wt, y + 0.1 * wt))

    return (
        Path.move_to(x - xt, y - yt)
        .line_to(x + xt, y + yt)
        .line_to(x + xt + uh, y + yt + vh)
        .line_to(x + xh + uh, y + yh + vh)
        .line_to(x + u, y + v)
        .line_to(x - xh + uh, y - yh + vh)
        .close_poly(x - xt + uh, y - yt + vh)
    )


class Quiver(ArtistDraw):
    """Grid of arrows: ``u[j, i], v[j, i]`` is the vector at ``(x[i], y[j])``.

    Arrows are scaled so the longest one spans one grid step.
    """

    def __init__(self, x: Any, y: Any, u: Any, v: Any) -> None:
        self.x = np.ravel(np.asarray(x, dtype=float))
        self.y = np.ravel(np.asarray(y, dtype=float))
        self.u = np.asarray(u, dtype=float)
        self.v = np.asarray(v, dtype=float)

        if self.u.shape != self.v.shape:
            raise ValueError(
                f"quiver requires matching u,v shape. u={self.u.shape}, v={self.v.shape}"
            )
        if len(self.x) < 2 or len(self.y) < 2:
            raise ValueError("quiver requires at least two x and two y values")
        if self.u.shape != (len(self.y), len(self.x)):
            raise ValueError(
                f"quiver u,v shape must be (len(y), len(x)) = "
                f"{(len(self.y), len(self.x))}, got {self.u.shape}"
            )

        self.style = PathStyle().color("k")
        self.extent = Bounds.none()
        self.paths: list = []
        self._update()

    def _update(self) -> None:
        self.extent = Bounds(
            float(self.x.min()), float(self.y.min()),
            float(self.x.max()), float(self.y.max()),
        )

        magnitude = np.hypot(self.u, self.v)
        largest = max(float(magnitude.max()), _EPSILON)

        dx = (self.x[1] - self.x[0]) / largest
        dy = (self.y[1] - self.y[0]) / largest

        self.paths = [
            arrow_path(float(xi), float(yj), float(self.u[j, i] * dx), float(self.v[j, i] * dy))
            for j, yj in enumerate(self.y)
            for i, xi in enumerate(self.x)
        ]

    def bounds(self) -> Bounds:
        return self.extent

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        style = self.style.push(style)
        for path in self.paths:
            renderer.draw_path(to_canvas.transform_path(path), style)


def _fraction(name: str, value: float) -> float:
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")
    return value


class HorizontalLine(ArtistDraw):
    """Horizontal line at data height ``y`` spanning a fraction of the frame width."""

    def __init__(self, x_min: float, x_max: float, y: float) -> None:
        self.x_min = _fraction("x_min", x_min)
        self.x_max = _fraction("x_max", x_max)
        self.y = float(y)
        self.style = PathStyle()
        self.visible = True
        self.z_order = 0.0
        self.pos = Bounds.none()

    def set_pos(self, pos: Bounds) -> "HorizontalLine":
        """Fix the canvas frame the line spans; otherwise the canvas bounds are used."""
        self.pos = pos
        return self

    def bounds(self) -> Bounds:
        return Bounds.none()

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        if not self.visible:
            return

        y = to_canvas.transform_point((0.0, self.y)).y
        pos = self.pos if not self.pos.is_none() else to_canvas.bounds

        path = Path.move_to(pos.xmin + self.x_min * pos.width(), y).line_to(
            pos.xmin + self.x_max * pos.width(), y
        )
        renderer.draw_path(path, self.style.push(style))

    def __repr__(self) -> str:
        return f"HorizontalLine[{self.y!r}]"