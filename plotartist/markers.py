"""Marker symbols and marker styles used to decorate data points."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .artist import PathStyle
from .paths import Path, PathCode, square, circle, unit_polygon, unit_polygon_alt, unit_star


class Markers(Enum):
    """Marker shapes, valued by the symbol that selects them."""

    NONE = "none"
    POINT = "."
    PIXEL = ","
    CIRCLE = "o"
    TRIANGLE_DOWN = "v"
    TRIANGLE_UP = "^"
    TRIANGLE_LEFT = "<"
    TRIANGLE_RIGHT = ">"
    TRI_DOWN = "1"
    TRI_UP = "2"
    TRI_LEFT = "3"
    TRI_RIGHT = "4"
    OCTAGON = "8"
    SQUARE = "s"
    PENTAGON = "p"
    PLUS_FILLED = "P"
    STAR = "*"
    HEXAGON = "h"
    HEXAGON2 = "H"
    PLUS = "+"
    X = "x"
    X_FILLED = "X"
    DIAMOND = "D"
    THIN_DIAMOND = "d"
    VERT_LINE = "|"
    HORIZ_LINE = "_"
    TICK_LEFT = "#0"
    TICK_RIGHT = "#1"
    TICK_UP = "#2"
    TICK_DOWN = "#3"
    CARET_LEFT = "#4"
    CARET_RIGHT = "#5"
    CARET_UP = "#6"
    CARET_DOWN = "#7"
    CARET_LEFT_BASE = "#8"
    CARET_RIGHT_BASE = "#9"
    CARET_UP_BASE = "#10"
    CARET_DOWN_BASE = "#11"

    @classmethod
    def parse(cls, text: str) -> "Markers":
        """Marker for a symbol such as ``"o"`` or ``"#3"``; ``""`` means none."""
        if text == "":
            return cls.NONE
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"'{text}' is an unknown marker symbol") from None

    def is_filled(self) -> bool:
        return self is Markers.SQUARE

    def get_path(self) -> Path:
        """The marker's outline in unit coordinates, [-1, 1] x [-1, 1]."""
        try:
            build = _MARKER_PATHS[self]
        except KeyError:
            raise ValueError(f"marker {self.name} has no path") from None
        return build()

    def get_scaled_path(self, scale: float) -> Path:
        if self is Markers.PIXEL:
            return self.get_path().scale(2.0, 2.0)
        return self.get_path().scale(scale, scale)


def _triangle_path() -> Path:
    return Path.closed_poly([(0.0, 1.0), (-1.0, -1.0), (1.0, -1.0)])


def _tri_path() -> Path:
    return Path((
        PathCode.move_to((0.0, 1.0)),
        PathCode.line_to((0.0, 0.0)),
        PathCode.move_to((-0.86, -0.5)),
        PathCode.line_to((0.0, 0.0)),
        PathCode.move_to((0.86, -0.5)),
        PathCode.line_to((0.0, 0.0)),
    ))


def _plus_path() -> Path:
    return Path((
        PathCode.move_to((-1.0, 0.0)),
        PathCode.line_to((1.0, 0.0)),
        PathCode.move_to((0.0, -1.0)),
        PathCode.line_to((0.0, 1.0)),
    ))


def _plus_filled_path() -> Path:
    outline = [
        (-3.0, -1.0), (-3.0, 1.0), (-1.0, 1.0), (-1.0, 3.0),
        (1.0, 3.0), (1.0, 1.0), (3.0, 1.0), (3.0, -1.0),
        (1.0, -1.0), (1.0, -3.0), (-1.0, -3.0), (-1.0, -1.0),
    ]
    return Path.closed_poly([(x / 3.0, y / 3.0) for x, y in outline])


def _tick_path() -> Path:
    return Path((PathCode.move_to((0.0, 0.0)), PathCode.line_to((0.0, 1.0))))


def _vert_path() -> Path:
    return Path((PathCode.move_to((0.0, -1.0)), PathCode.line_to((0.0, 1.0))))


def _horiz_path() -> Path:
    return Path((PathCode.move_to((-1.0, 0.0)), PathCode.line_to((1.0, 0.0))))


def _caret_path() -> Path:
    return Path.closed_poly([(0.0, 0.0), (-0.86, 1.0), (0.86, -1.0)])


def _caret_base_path() -> Path:
    return Path.closed_poly([(-0.86, 0.0), (0.86, 0.0), (0.0, 1.0)])


_MARKER_PATHS: dict[Markers, Callable[[], Path]] = {
    Markers.CIRCLE: circle,
    Markers.POINT: lambda: circle().scale(0.5, 0.5),
    Markers.PIXEL: square,
    Markers.TRIANGLE_DOWN: lambda: _triangle_path().rotate_deg(180.0),
    Markers.TRIANGLE_UP: _triangle_path,
    Markers.TRIANGLE_LEFT: lambda: _triangle_path().rotate_deg(90.0),
    Markers.TRIANGLE_RIGHT: lambda: _triangle_path().rotate_deg(270.0),
    Markers.TRI_DOWN: lambda: _tri_path().rotate_deg(180.0),
    Markers.TRI_UP: _tri_path,
    Markers.TRI_LEFT: lambda: _tri_path().rotate_deg(90.0),
    Markers.TRI_RIGHT: lambda: _tri_path().rotate_deg(270.0),
    Markers.SQUARE: square,
    Markers.PENTAGON: lambda: unit_polygon(5),
    Markers.HEXAGON: lambda: unit_polygon(6),
    Markers.HEXAGON2: lambda: unit_polygon(6).rotate_deg(30.0),
    Markers.OCTAGON: lambda: unit_polygon_alt(8),
    Markers.DIAMOND: lambda: unit_polygon(4),
    Markers.THIN_DIAMOND: lambda: unit_polygon(4).scale(0.5, 1.0),
    Markers.STAR: lambda: unit_star(5, 0.381966),
    Markers.PLUS: _plus_path,
    Markers.PLUS_FILLED: _plus_filled_path,
    Markers.X: lambda: _plus_path().rotate_deg(45.0),
    Markers.X_FILLED: lambda: _plus_filled_path().rotate_deg(45.0),
    Markers.VERT_LINE: _vert_path,
    Markers.HORIZ_LINE: _horiz_path,
    Markers.TICK_LEFT: lambda: _tick_path().rotate_deg(90.0),
    Markers.TICK_RIGHT: lambda: _tick_path().rotate_deg(270.0),
    Markers.TICK_UP: _tick_path,
    Markers.TICK_DOWN: lambda: _tick_path().rotate_deg(180.0),
    Markers.CARET_LEFT: lambda: _caret_path().rotate_deg(90.0),
    Markers.CARET_RIGHT: lambda: _caret_path().rotate_deg(270.0),
    Markers.CARET_UP: _caret_path,
    Markers.CARET_DOWN: lambda: _caret_path().rotate_deg(180.0),
    Markers.CARET_LEFT_BASE: lambda: _caret_base_path().rotate_deg(90.0),
    Markers.CARET_RIGHT_BASE: lambda: _caret_base_path().rotate_deg(270.0),
    Markers.CARET_UP_BASE: _caret_base_path,
    Markers.CARET_DOWN_BASE: lambda: _caret_base_path().rotate_deg(180.0),
}


class MarkerStyle:
    """A marker outline with a size and a path style; setters chain."""

    DEFAULT_SIZE = 10.0

    def __init__(self, path: Path) -> None:
        self._path = path
        self._size = self.DEFAULT_SIZE
        self.style = PathStyle().join_style("miter")

    @classmethod
    def parse(cls, text: str) -> "MarkerStyle":
        return cls(Markers.parse(text).get_path())

    def get_path(self) -> Path:
        """The outline scaled to the marker size."""
        return self._path.scale(self._size, self._size)

    def get_style(self) -> PathStyle:
        return self.style

    def get_size(self) -> float:
        return self._size

    def color(self, color: Any) -> "MarkerStyle":
        self.style.color(color)
        return self

    def edge_color(self, color: Any) -> "MarkerStyle":
        self.style.edge_color(color)
        return self

    def face_color(self, color: Any) -> "MarkerStyle":
        self.style.face_color(color)
        return self

    def join_style(self, style: Any) -> "MarkerStyle":
        self.style.join_style(style)
        return self

    def cap_style(self, style: Any) -> "MarkerStyle":
        self.style.cap_style(style)
        return self

    def line_width(self, value: float) -> "MarkerStyle":
        self.style.line_width(value)
        return self

    def size(self, size: float) -> "MarkerStyle":
        self._size = float(size)
        return self


def into_marker(value: Any) -> MarkerStyle:
    """Coerce a marker style, a ``Markers`` member, a symbol or a unit path."""
    if isinstance(value, MarkerStyle):
        return value
    if isinstance(value, Markers):
        return MarkerStyle(value.get_path())
    if isinstance(value, str):
        return MarkerStyle.parse(value)
    if isinstance(value, Path):
        return MarkerStyle(value)
    raise TypeError(f"cannot make a marker from {type(value).__name__}")