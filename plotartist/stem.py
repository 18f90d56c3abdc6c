"""Stem plots: vertical lines from a baseline to each point, capped by markers."""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .lines import PathCollection, _as_xy, _bounds_of, _describe, _stack
from .markers import Markers
from .paths import Bounds, Path, PathCode


def build_stem_paths(xy: Any) -> list:
    """One vertical segment from ``(x, 0)`` to ``(x, y)`` per row of ``xy``."""
    points = _as_xy(xy)
    return [
        Path((PathCode.move_to((float(x), 0.0)), PathCode.line_to((float(x), float(y)))))
        for x, y in points
    ]


class Stem(ArtistDraw):
    """Stem plot of points with a red baseline at y = 0."""

    MARKER_SIZE = 3.0

    def __init__(self, xy: Any) -> None:
        self.xy = _as_xy(xy)
        self.paths = build_stem_paths(self.xy)
        self.marker: Optional[Markers] = Markers.CIRCLE
        self.markers: Optional[PathCollection] = None

        self.line_style = PathStyle()
        self.baseline_style = PathStyle().color("red")
        self.marker_style = PathStyle()

        self.label: Optional[str] = None
        self.extent = _bounds_of(self.xy)
        self._is_stale = True

    @classmethod
    def from_xy(cls, x: Any, y: Any) -> "Stem":
        return cls(_stack(x, y))

    def set_label(self, label: str) -> "Stem":
        """Set the legend label; an empty label removes it."""
        self.label = label or None
        return self

    def _resize(self, renderer: Renderer) -> None:
        if not self._is_stale:
            return
        self._is_stale = False

        scale = renderer.to_px(self.MARKER_SIZE)
        if self.marker is not None:
            self.markers = PathCollection(self.marker.get_scaled_path(scale), self.xy)

    def bounds(self) -> Bounds:
        return self.extent

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        self._resize(renderer)

        line_style = self.line_style.push(style)
        for path in self.paths:
            renderer.draw_path(to_canvas.transform_path(path), line_style)

        if self.markers is not None:
            self.markers.draw(renderer, to_canvas, self.marker_style.push(style))

        baseline = Path.lines([(self.extent.xmin, 0.0), (self.extent.xmax, 0.0)])
        renderer.draw_path(to_canvas.transform_path(baseline), self.baseline_style.push(style))

    def get_legend(self) -> Optional[tuple]:
        """``(label, draw)`` where ``draw(renderer, style, bounds)`` draws the swatch."""
        if self.label is None:
            return None
        own = self.line_style.copy()

        def draw(renderer: Renderer, parent_style: Any, bounds: Bounds) -> None:
            swatch = Path.lines([
                (bounds.xmin, bounds.ymid()),
                (bounds.xmax, bounds.ymid()),
            ])
            renderer.draw_path(swatch, own.push(parent_style))

        return (self.label, draw)

    def __repr__(self) -> str:
        return _describe("Stem", np.asarray(self.xy))