"""Text artists placed in data coordinates or in canvas space."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .artist import ArtistDraw, PathStyle, Renderer, ToCanvas
from .paths import Bounds, Point, PointLike, _pt


@dataclass
class TextStyle:
    """Font size and font handle for drawn text."""

    SIZE_DEFAULT = 12.0

    size: Optional[float] = None
    font: Any = None

    def get_size(self) -> float:
        return self.size if self.size is not None else self.SIZE_DEFAULT


class TextCoords(Enum):
    """Coordinate system of a text position."""

    DATA = "data"
    FRAME_FRACTION = "frame_fraction"

    def to_canvas(self, pos: PointLike, to_canvas: ToCanvas) -> Point:
        p = _pt(pos)
        if self is TextCoords.DATA:
            return to_canvas.transform_point(p)
        frame = to_canvas.bounds
        return Point(
            frame.xmin + p.x * frame.width(),
            frame.ymin + p.y * frame.height(),
        )


class Text(ArtistDraw):
    """A string drawn at a position given in data or frame-fraction coordinates."""

    DESC = 0.3

    def __init__(self, pos: PointLike, text: str) -> None:
        self.pos = _pt(pos)
        self.coords = TextCoords.DATA
        self.text = str(text)
        self.path_style = PathStyle()
        self.text_style = TextStyle()
        self.family: Optional[str] = None
        self.angle = 0.0

    def set_text(self, text: str) -> "Text":
        self.text = str(text)
        return self

    def set_pos(self, pos: PointLike) -> "Text":
        self.pos = _pt(pos)
        return self

    def set_coord(self, coord: TextCoords) -> "Text":
        self.coords = TextCoords(coord)
        return self

    def set_family(self, family: str) -> "Text":
        self.family = family
        return self

    def set_size(self, size: float) -> "Text":
        self.text_style.size = float(size)
        return self

    def height(self) -> float:
        return 0.0

    def bounds(self) -> Bounds:
        return Bounds.none()

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        pos = self.coords.to_canvas(self.pos, to_canvas)
        style = self.path_style.push(style)

        if not self.text:
            return

        if self.family is not None:
            self.text_style.font = renderer.font(self.family)

        renderer.draw_text(pos, self.text, 0.0, style, self.text_style)


class TextCanvas(ArtistDraw):
    """Optional label drawn centred at the bottom of a canvas rectangle."""

    DESC = 0.3

    def __init__(self) -> None:
        self.pos = Bounds.none()
        self.extent = Bounds.zero()
        self.text: Optional[str] = None
        self.path_style = PathStyle()
        self.text_style = TextStyle()
        self.angle = 0.0

    def label(self, text: str) -> "TextCanvas":
        """Set the text; an empty string clears it."""
        self.text = text or None
        return self

    def update_pos(self, renderer: Renderer, pos: Bounds) -> None:
        if self.text is None:
            self.extent = Bounds.zero()
            return
        self.pos = pos
        size = self.text_style.get_size()
        width = len(self.text) * size
        self.extent = Bounds.extent(renderer.to_px(width), renderer.to_px(size))

    def height(self) -> float:
        return self.extent.height()

    def bounds(self) -> Bounds:
        return self.extent

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        if self.text is None or self.pos.is_none():
            return
        renderer.draw_text(
            Point(self.pos.xmid(), self.pos.ymin),
            self.text,
            self.angle,
            self.path_style.push(style),
            self.text_style,
        )