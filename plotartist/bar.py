"""Bar charts and histograms built from rectangle paths."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from . import paths
from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .paths import Bounds, Path


def _vector(name: str, value: Any) -> np.ndarray:
    data = np.asarray(value, dtype=float)
    if data.ndim != 1:
        raise ValueError(f"{name} requires 1D data, got shape {data.shape}")
    return data


def _draw_paths(
    path_list: list, own: PathStyle, renderer: Renderer, to_canvas: ToCanvas, style: Any
) -> None:
    style = own.push(style)
    for path in path_list:
        renderer.draw_path(to_canvas.transform_path(path), style)


class Bar(ArtistDraw):
    """Vertical bars of the given heights with optional x, width and bottom."""

    DEFAULT_HALF_WIDTH = 0.4

    def __init__(self, data: Any) -> None:
        self.height = _vector("bar", data)
        if len(self.height) == 0:
            raise ValueError("bar requires at least one value")
        self.x: Optional[np.ndarray] = None
        self.width: Optional[np.ndarray] = None
        self.bottom: Optional[np.ndarray] = None
        self.style = PathStyle()
        self.extent = Bounds.none()
        self.paths: list = []
        self._is_stale = True
        self._update()

    def _matching(self, name: str, value: Any, allow_scalar: bool) -> np.ndarray:
        arr = np.asarray(value, dtype=float)
        if allow_scalar and arr.size == 1:
            return np.full(len(self.height), float(arr.ravel()[0]))
        if arr.shape != self.height.shape:
            raise ValueError(
                f"bar {name} must match data. {name}={arr.shape} data={self.height.shape}"
            )
        return arr

    def set_data(self, data: Any) -> "Bar":
        data = np.asarray(data, dtype=float)
        if data.shape != self.height.shape:
            raise ValueError(
                f"bar data shape must match initial data. new={data.shape} old={self.height.shape}"
            )
        self.height = data
        self._mark_stale()
        return self

    def set_x(self, x: Any) -> "Bar":
        self.x = self._matching("x", x, allow_scalar=False)
        self._mark_stale()
        return self

    def set_width(self, width: Any) -> "Bar":
        self.width = self._matching("width", width, allow_scalar=True)
        self._mark_stale()
        return self

    def set_bottom(self, bottom: Any) -> "Bar":
        self.bottom = self._matching("bottom", bottom, allow_scalar=True)
        self._mark_stale()
        return self

    def _mark_stale(self) -> None:
        self._is_stale = True
        self._update()

    def _update(self) -> None:
        if not self._is_stale:
            return
        self._is_stale = False

        n = len(self.height)
        x = self.x if self.x is not None else np.linspace(0.0, n - 1.0, n)
        bottom = self.bottom if self.bottom is not None else np.zeros(n)
        w2 = self.width * 0.5 if self.width is not None else np.full(n, self.DEFAULT_HALF_WIDTH)
        top = bottom + self.height

        self.extent = Bounds(
            float(x.min() - w2[0]),
            float(bottom.min()),
            float(x.max() + w2[-1]),
            float(top.max()),
        )
        self.paths = [
            paths.rect((xi - wi, bi), (xi + wi, ti))
            for xi, wi, bi, ti in zip(x.tolist(), w2.tolist(), bottom.tolist(), top.tolist())
        ]

    def bounds(self) -> Bounds:
        return self.extent

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        _draw_paths(self.paths, self.style, renderer, to_canvas, style)


class Histogram(ArtistDraw):
    """Histogram of 1D data drawn as adjacent rectangles."""

    def __init__(self, data: Any, bins: Any = 10) -> None:
        self.data = _vector("histogram", data)
        self.bins_spec = bins
        self.style = PathStyle()
        self.bins = np.zeros(1)
        self.count = np.zeros(1)
        self.extent = Bounds.none()
        self.paths: list = []
        self._is_stale = True
        self._update()

    def set_data(self, data: Any) -> "Histogram":
        self.data = _vector("histogram", data)
        self._is_stale = True
        self._update()
        return self

    def _update(self) -> None:
        if not self._is_stale:
            return
        self._is_stale = False

        count, bins = np.histogram(self.data, bins=self.bins_spec)
        self.count = count.astype(float)
        self.bins = bins.astype(float)

        self.extent = Bounds(
            float(self.bins[0]), 0.0, float(self.bins[-1]), float(self.count.max())
        )
        self.paths = [
            paths.rect((lo, 0.0), (hi, c))
            for lo, hi, c in zip(self.bins[:-1].tolist(), self.bins[1:].tolist(), self.count.tolist())
        ]

    def bounds(self) -> Bounds:
        return self.extent

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        _draw_paths(self.paths, self.style, renderer, to_canvas, style)


__all__ = ["Bar", "Histogram", "Path"]