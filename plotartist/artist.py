"""Artist protocol, styles, canvas transforms and artist containers."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence, TypeVar

import numpy as np

from .paths import Affine2d, Bounds, Path, Point, PointLike

R = TypeVar("R")

_STALE_VALUE = (1 << 64) - 1


@dataclass(frozen=True)
class Stale:
    """Version counter used to detect when cached drawing data is out of date."""

    value: int = _STALE_VALUE

    @classmethod
    def new_for_update(cls) -> "Stale":
        return cls(0)

    @classmethod
    def stale(cls) -> "Stale":
        return cls(_STALE_VALUE)

    def is_stale(self) -> bool:
        return self.value == _STALE_VALUE

    def update(self) -> "Stale":
        if self.is_stale():
            raise ValueError("cannot update a stale version")
        return Stale(self.value + 1)

    def eq_or(self, other: "Stale", fn: Callable[[], Any]) -> "Stale":
        """Call ``fn`` when ``other`` differs from this version or this is stale."""
        if self != other or self.is_stale():
            fn()
        return self


class PathStyle:
    """Layered path style: unset values fall back to the parent style."""

    KEYS = frozenset({
        "face_color", "edge_color", "line_width", "line_style",
        "join_style", "cap_style", "alpha", "hatch",
    })

    def __init__(self, parent: Optional[Any] = None, **values: Any) -> None:
        unknown = set(values) - self.KEYS
        if unknown:
            raise TypeError(f"unknown style keys: {sorted(unknown)}")
        self._parent = parent
        self._values = dict(values)

    def _set(self, key: str, value: Any) -> "PathStyle":
        self._values[key] = value
        return self

    def color(self, color: Any) -> "PathStyle":
        """Set both face and edge color."""
        self._values["face_color"] = color
        self._values["edge_color"] = color
        return self

    def face_color(self, color: Any) -> "PathStyle":
        return self._set("face_color", color)

    def edge_color(self, color: Any) -> "PathStyle":
        return self._set("edge_color", color)

    def line_width(self, width: float) -> "PathStyle":
        return self._set("line_width", float(width))

    def line_style(self, style: Any) -> "PathStyle":
        return self._set("line_style", style)

    def join_style(self, style: Any) -> "PathStyle":
        return self._set("join_style", style)

    def cap_style(self, style: Any) -> "PathStyle":
        return self._set("cap_style", style)

    def alpha(self, alpha: float) -> "PathStyle":
        return self._set("alpha", float(alpha))

    def hatch(self, hatch: Any) -> "PathStyle":
        return self._set("hatch", hatch)

    def get(self, key: str) -> Any:
        if key not in self.KEYS:
            raise KeyError(key)
        if key in self._values:
            return self._values[key]
        if self._parent is not None:
            return self._parent.get(key)
        return None

    def get_face_color(self) -> Any:
        return self.get("face_color")

    def push(self, parent: Optional[Any]) -> "PathStyle":
        """A copy of this style layered over ``parent``."""
        return PathStyle(parent, **self._values)

    def copy(self) -> "PathStyle":
        return PathStyle(self._parent, **self._values)

    def __repr__(self) -> str:
        return f"PathStyle({self._values!r})"


class Renderer(Protocol):
    """Drawing backend used by artists."""

    def draw_path(self, path: Path, style: Any) -> None: ...

    def draw_markers(self, path: Path, style: Any, markers: Sequence[Any]) -> None: ...

    def draw_text(
        self, pos: Point, text: str, angle: float, style: Any, text_style: Any
    ) -> None: ...

    def draw_mesh2d_color(self, mesh: Any) -> None: ...

    def to_px(self, size: float) -> float: ...


class ToCanvas:
    """Transform from data coordinates to canvas coordinates."""

    def __init__(
        self,
        affine: Optional[Affine2d] = None,
        bounds: Optional[Bounds] = None,
        stale: Optional[Stale] = None,
    ) -> None:
        self.affine = affine if affine is not None else Affine2d.eye()
        self.bounds = bounds if bounds is not None else Bounds.none()
        self.stale = stale if stale is not None else Stale.new_for_update()

    @classmethod
    def from_bounds(
        cls, data: Bounds, canvas: Bounds, stale: Optional[Stale] = None
    ) -> "ToCanvas":
        return cls(data.affine_to(canvas), canvas, stale)

    def transform_point(self, point: PointLike) -> Point:
        return self.affine.transform_point(point)

    def transform_path(self, path: Path) -> Path:
        return self.affine.transform_path(path)

    def transform_points(self, points: Any) -> np.ndarray:
        """Transform an (N, 2) array of points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        a = self.affine
        linear = np.array([[a.a, a.d], [a.b, a.e]])
        return pts @ linear + np.array([a.c, a.f])


class ArtistDraw(ABC):
    """Something that has data bounds and can draw itself."""

    @abstractmethod
    def bounds(self) -> Bounds:
        ...

    @abstractmethod
    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        ...

    def get_legend(self) -> Any:
        return None


def _cycle_style(cycle: Sequence[PathStyle], style: Any, index: int) -> Any:
    if not cycle:
        return style
    return cycle[index % len(cycle)].push(style)


class ArtistView:
    """Handle to an artist stored in an ``ArtistContainer``."""

    def __init__(self, container: "ArtistContainer", index: int) -> None:
        self._container = container
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def read(self, fn: Callable[[Any], R]) -> R:
        with self._container._lock:
            return fn(self._container._artists[self._index])

    def write(self, fn: Callable[[Any], R]) -> R:
        with self._container._lock:
            return fn(self._container._artists[self._index])


class ArtistContainer:
    """Ordered, thread-safe collection of artists with a style cycle."""

    def __init__(self, cycle: Iterable[PathStyle] = ()) -> None:
        self._artists: list = []
        self._lock = threading.RLock()
        self._cycle = list(cycle)

    def cycle(self, styles: Iterable[PathStyle]) -> None:
        self._cycle = list(styles)

    def add(self, artist: ArtistDraw) -> ArtistView:
        with self._lock:
            self._artists.append(artist)
            return ArtistView(self, len(self._artists) - 1)

    def __len__(self) -> int:
        with self._lock:
            return len(self._artists)

    def bounds(self, bounds: Optional[Bounds] = None) -> Bounds:
        result = bounds if bounds is not None else Bounds.none()
        with self._lock:
            for artist in self._artists:
                result = result.union(artist.bounds())
        return result

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        with self._lock:
            for i, artist in enumerate(self._artists):
                artist.draw(renderer, to_canvas, _cycle_style(self._cycle, style, i))

    def get_handlers(self) -> list:
        with self._lock:
            legends = (artist.get_legend() for artist in self._artists)
            return [legend for legend in legends if legend is not None]


class Container(ArtistDraw):
    """An artist grouping other artists under a shared style and cycle."""

    def __init__(self, cycle: Iterable[PathStyle] = ()) -> None:
        self.artists: list = []
        self.style = PathStyle()
        self.cycle = list(cycle)

    def push(self, artist: ArtistDraw) -> None:
        self.artists.append(artist)

    def bounds(self) -> Bounds:
        result = Bounds.none()
        for artist in self.artists:
            result = result.union(artist.bounds())
        return result

    def draw(self, renderer: Renderer, to_canvas: ToCanvas, style: Any) -> None:
        own = self.style.push(style)
        for i, artist in enumerate(self.artists):
            artist.draw(renderer, to_canvas, _cycle_style(self.cycle, own, i))