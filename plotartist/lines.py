"""Line plots and collections of markers placed at data points."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, NamedTuple, Optional

import numpy as np

from .artist import ArtistDraw, PathStyle, Renderer, Stale, ToCanvas
from .markers import MarkerStyle, into_marker
from .paths import Affine2d, Bounds, Path, PathCode


class DrawStyle(Enum):
    """How consecutive points of a line are joined."""

    DEFAULT = "default"
    STEPS_PRE = "steps-pre"
    STEPS_MID = "steps-mid"
    STEPS_POST = "steps-post"


class MeshStyle(NamedTuple):
    """One placement of a marker: its fill color and its canvas transform."""

    color: Any
    affine: Affine2d


def _as_xy(value: Any) -> np.ndarray:
    xy = np.asarray(value, dtype=float)
    if xy.ndim != 2:
        raise ValueError(f"point data must be rank 2, got shape {xy.shape}")
    if xy.shape[1] != 2:
        raise ValueError(f"point data must have two columns [x, y], got shape {xy.shape}")
    return xy


def _stack(x: Any, y: Any) -> np.ndarray:
    xs = np.ravel(np.asarray(x, dtype=float))
    ys = np.ravel(np.asarray(y, dtype=float))
    if len(xs) != len(ys):
        raise ValueError(f"x and y lengths must match: {len(xs)} != {len(ys)}")
    return np.stack([xs, ys], axis=-1)


def _bounds_of(xy: np.ndarray) -> Bounds:
    return Bounds.from_points(map(tuple, xy))


def _fmt(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def _describe(name: str, xy: np.ndarray) -> str:
    pts = [f"({_fmt(x)}, {_fmt(y)})" for x, y in xy]
    if len(pts) <= 2:
        return f"{name}[{', '.join(pts)}]"
    return f"{name}[{pts[0]}, {pts[1]}, ..., {pts[-1]}]"


def build_path(xy: Any, draw_style: DrawStyle = DrawStyle.DEFAULT) -> Path:
    """Path through the rows of ``xy`` joined according to ``draw_style``."""
    points = _as_xy(xy)
    codes: list = []
    prev_x = prev_y = 0.0

    for i, (x, y) in enumerate(points):
        x, y = float(x), float(y)
        if i == 0:
            codes.append(PathCode.move_to((x, y)))
        elif draw_style is DrawStyle.DEFAULT:
            codes.append(PathCode.line_to((x, y)))
        elif draw_style is DrawStyle.STEPS_PRE:
            codes.append(PathCode.line_to((prev_x, y)))
            codes.append(PathCode.line_to((x, y)))
        elif draw_style is DrawStyle.STEPS_MID:
            mid = (prev_x + x) * 0.5
            codes.append(PathCode.line_to((mid, prev_y)))
            codes.append(PathCode.line_to((mid, y)))
            codes.append(PathCode.line_to((x, y)))
        else:
            codes.append(PathCode.line_to((x, prev_y)))
            codes.append(PathCode.line_to((x, y)))
        prev_x, prev_y = x, y

    return Path(tuple(codes))


class PathCollection(ArtistDraw):
    """A single canvas-space path drawn at every data point."""

    def __init__(self, path: Path, xy: Any) -> None:
        self.path = path
        self.xy = _as_xy(xy)
        self.style = PathStyle()
        self._bounds = _bounds_of(self.xy)

    def bounds(self) -> Bounds:
        return self._bounds

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        canvas_xy = to_canvas.transform_points(self.xy)
        style = self.style.push(style)
        color = style.get_face_color()
        if color is None:
            color = "black"
        markers = [
            MeshStyle(color, Affine2d.eye().translate(float(x), float(y)))
            for x, y in canvas_xy
        ]
        renderer.draw_markers(self.path, style, markers)

    def __repr__(self) -> str:
        return _describe("Collection", self.xy)


class Lines2d(ArtistDraw):
    """A polyline through data points, optionally decorated with markers."""

    def __init__(self, lines: Any) -> None:
        self.xy = _as_xy(lines)
        self.draw_style = DrawStyle.DEFAULT
        self.path = build_path(self.xy, self.draw_style)
        self.style = PathStyle()
        self.label: Optional[str] = None
        self.marker_style: Optional[MarkerStyle] = None
        self.collection: Optional[PathCollection] = None
        self.visible = True
        self.z_order = 0.0
        self._bounds = _bounds_of(self.xy)
        self.stale_id = Stale()

    @classmethod
    def from_xy(cls, x: Any, y: Any) -> "Lines2d":
        return cls(_stack(x, y))

    @classmethod
    def from_y(cls, y: Any) -> "Lines2d":
        ys = np.ravel(np.asarray(y, dtype=float))
        n = len(ys)
        return cls(_stack(np.linspace(0.0, float(n), n), ys))

    def _changed(self) -> None:
        self.stale_id = Stale()

    def set_xy(self, x: Any, y: Any) -> "Lines2d":
        self.xy = _stack(x, y)
        self.path = build_path(self.xy, self.draw_style)
        self._bounds = _bounds_of(self.xy)
        if self.marker_style is not None:
            self.collection = PathCollection(self.marker_style.get_path(), self.xy)
        self._changed()
        return self

    def get_xy(self) -> np.ndarray:
        return self.xy.copy()

    def marker(self, marker: Any) -> "Lines2d":
        style = into_marker(marker)
        self.collection = PathCollection(style.get_path(), self.xy)
        self.marker_style = style
        self._changed()
        return self

    def set_draw_style(self, draw_style: DrawStyle) -> "Lines2d":
        self.draw_style = DrawStyle(draw_style)
        self.path = build_path(self.xy, self.draw_style)
        self._changed()
        return self

    def set_label(self, label: str) -> "Lines2d":
        """Set the legend label; an empty label removes it."""
        self.label = label or None
        return self

    def bounds(self) -> Bounds:
        return self._bounds

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        if not self.visible:
            return
        path = to_canvas.transform_path(self.path)
        style = self.style.push(style)
        renderer.draw_path(path, style)

        if self.collection is not None and self.marker_style is not None:
            marker_style = self.marker_style.get_style().push(style)
            self.collection.draw(renderer, to_canvas, marker_style)

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

    def __repr__(self) -> str:
        return _describe("Lines2D", self.xy)