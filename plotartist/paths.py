"""Geometry primitives (points, paths, bounds, affine transforms) and unit path shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Sequence, Union

from typing import NamedTuple

PI = math.pi
TAU = math.tau


class Point(NamedTuple):
    """A 2D point."""

    x: float
    y: float


PointLike = Union[Point, Sequence[float]]


def _pt(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    return Point(float(value[0]), float(value[1]))


@dataclass(frozen=True)
class PathCode:
    """One drawing command of a path together with the points it uses."""

    class Op(Enum):
        MOVE_TO = "move_to"
        LINE_TO = "line_to"
        BEZIER2 = "bezier2"
        BEZIER3 = "bezier3"
        CLOSE_POLY = "close_poly"

    op: "PathCode.Op"
    points: tuple

    _ARITY = {
        "move_to": 1,
        "line_to": 1,
        "bezier2": 2,
        "bezier3": 3,
        "close_poly": 1,
    }

    def __post_init__(self) -> None:
        points = tuple(_pt(p) for p in self.points)
        expected = self._ARITY[self.op.value]
        if len(points) != expected:
            raise ValueError(
                f"{self.op.value} takes {expected} point(s), got {len(points)}"
            )
        object.__setattr__(self, "points", points)

    @classmethod
    def move_to(cls, p: PointLike) -> "PathCode":
        return cls(cls.Op.MOVE_TO, (p,))

    @classmethod
    def line_to(cls, p: PointLike) -> "PathCode":
        return cls(cls.Op.LINE_TO, (p,))

    @classmethod
    def bezier2(cls, p1: PointLike, p2: PointLike) -> "PathCode":
        return cls(cls.Op.BEZIER2, (p1, p2))

    @classmethod
    def bezier3(cls, p1: PointLike, p2: PointLike, p3: PointLike) -> "PathCode":
        return cls(cls.Op.BEZIER3, (p1, p2, p3))

    @classmethod
    def close_poly(cls, p: PointLike) -> "PathCode":
        return cls(cls.Op.CLOSE_POLY, (p,))

    @property
    def last(self) -> Point:
        """The end point of this command."""
        return self.points[-1]

    def map(self, fn: Callable[[Point], PointLike]) -> "PathCode":
        return PathCode(self.op, tuple(_pt(fn(p)) for p in self.points))


@dataclass(frozen=True)
class Path:
    """An immutable sequence of path codes; builder methods return new paths."""

    codes: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", tuple(self.codes))

    @classmethod
    def move_to(cls, x: float, y: float) -> "Path":
        return cls((PathCode.move_to((x, y)),))

    @classmethod
    def closed_poly(cls, points: Iterable[PointLike]) -> "Path":
        pts = [_pt(p) for p in points]
        if len(pts) < 2:
            raise ValueError("closed polygon requires at least two points")
        codes = [PathCode.move_to(pts[0])]
        codes.extend(PathCode.line_to(p) for p in pts[1:-1])
        codes.append(PathCode.close_poly(pts[-1]))
        return cls(tuple(codes))

    @classmethod
    def lines(cls, points: Iterable[PointLike]) -> "Path":
        pts = [_pt(p) for p in points]
        if not pts:
            return cls(())
        codes = [PathCode.move_to(pts[0])]
        codes.extend(PathCode.line_to(p) for p in pts[1:])
        return cls(tuple(codes))

    def _append(self, code: PathCode) -> "Path":
        return Path(self.codes + (code,))

    def line_to(self, x: float, y: float) -> "Path":
        return self._append(PathCode.line_to((x, y)))

    def bezier2_to(self, p1: PointLike, p2: PointLike) -> "Path":
        return self._append(PathCode.bezier2(p1, p2))

    def bezier3_to(self, p1: PointLike, p2: PointLike, p3: PointLike) -> "Path":
        return self._append(PathCode.bezier3(p1, p2, p3))

    def close_poly(self, x: float, y: float) -> "Path":
        return self._append(PathCode.close_poly((x, y)))

    def __add__(self, other: "Path") -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.codes + other.codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[PathCode]:
        return iter(self.codes)

    @property
    def points(self) -> list:
        """Every point of the path, control points included, in order."""
        return [p for code in self.codes for p in code.points]

    def map(self, fn: Callable[[Point], PointLike]) -> "Path":
        return Path(tuple(code.map(fn) for code in self.codes))

    def scale(self, sx: float, sy: float) -> "Path":
        return self.map(lambda p: Point(p.x * sx, p.y * sy))

    def rotate(self, radians: float) -> "Path":
        c, s = math.cos(radians), math.sin(radians)
        return self.map(lambda p: Point(c * p.x - s * p.y, s * p.x + c * p.y))

    def rotate_deg(self, degrees: float) -> "Path":
        return self.rotate(math.radians(degrees))

    def get_bounds(self) -> "Bounds":
        return Bounds.from_points(self.points)


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle; a bounds of NaN values means "no bounds"."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def none(cls) -> "Bounds":
        nan = math.nan
        return cls(nan, nan, nan, nan)

    @classmethod
    def zero(cls) -> "Bounds":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def unit(cls) -> "Bounds":
        return cls(0.0, 0.0, 1.0, 1.0)

    @classmethod
    def extent(cls, width: float, height: float) -> "Bounds":
        return cls(0.0, 0.0, float(width), float(height))

    @classmethod
    def from_corners(cls, p0: PointLike, p1: PointLike) -> "Bounds":
        a, b = _pt(p0), _pt(p1)
        return cls(min(a.x, b.x), min(a.y, b.y), max(a.x, b.x), max(a.y, b.y))

    @classmethod
    def from_points(cls, points: Iterable[PointLike]) -> "Bounds":
        pts = [_pt(p) for p in points]
        if not pts:
            return cls.none()
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), min(ys), max(xs), max(ys))

    def is_none(self) -> bool:
        return any(math.isnan(v) for v in (self.xmin, self.ymin, self.xmax, self.ymax))

    def union(self, other: "Bounds") -> "Bounds":
        if self.is_none():
            return other
        if other.is_none():
            return self
        return Bounds(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def p0(self) -> Point:
        return Point(self.xmin, self.ymin)

    def p1(self) -> Point:
        return Point(self.xmax, self.ymax)

    def width(self) -> float:
        return self.xmax - self.xmin

    def height(self) -> float:
        return self.ymax - self.ymin

    def xmid(self) -> float:
        return 0.5 * (self.xmin + self.xmax)

    def ymid(self) -> float:
        return 0.5 * (self.ymin + self.ymax)

    def affine_to(self, other: "Bounds") -> "Affine2d":
        """Affine transform mapping this rectangle onto ``other``."""
        w, h = self.width(), self.height()
        if w == 0 or h == 0:
            raise ValueError("cannot map from degenerate bounds")
        return (
            Affine2d.eye()
            .translate(-self.xmin, -self.ymin)
            .scale(other.width() / w, other.height() / h)
            .translate(other.xmin, other.ymin)
        )


@dataclass(frozen=True)
class Affine2d:
    """2D affine transform: x' = a*x + b*y + c, y' = d*x + e*y + f.

    ``translate``, ``scale`` and ``rotate`` apply after the existing transform.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    @classmethod
    def eye(cls) -> "Affine2d":
        return cls()

    def translate(self, dx: float, dy: float) -> "Affine2d":
        return Affine2d(self.a, self.b, self.c + dx, self.d, self.e, self.f + dy)

    def scale(self, sx: float, sy: float) -> "Affine2d":
        return Affine2d(
            self.a * sx, self.b * sx, self.c * sx,
            self.d * sy, self.e * sy, self.f * sy,
        )

    def rotate(self, radians: float) -> "Affine2d":
        co, si = math.cos(radians), math.sin(radians)
        return Affine2d(
            co * self.a - si * self.d,
            co * self.b - si * self.e,
            co * self.c - si * self.f,
            si * self.a + co * self.d,
            si * self.b + co * self.e,
            si * self.c + co * self.f,
        )

    def matmul(self, other: "Affine2d") -> "Affine2d":
        """Composition that applies ``other`` first, then ``self``."""
        return Affine2d(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def __matmul__(self, other: "Affine2d") -> "Affine2d":
        return self.matmul(other)

    def transform_point(self, point: PointLike) -> Point:
        p = _pt(point)
        return Point(
            self.a * p.x + self.b * p.y + self.c,
            self.d * p.x + self.e * p.y + self.f,
        )

    def transform_path(self, path: Path) -> Path:
        return path.map(self.transform_point)


@dataclass(frozen=True)
class Angle:
    """An angle, stored in radians."""

    rad: float

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(math.radians(value))

    @classmethod
    def from_unit(cls, value: float) -> "Angle":
        """Angle given as a fraction of a full turn."""
        return cls(value * TAU)

    def to_radians(self) -> float:
        return self.rad

    def to_degrees(self) -> float:
        return math.degrees(self.rad)


def square() -> Path:
    return Path((
        PathCode.move_to((-1.0, -1.0)),
        PathCode.line_to((1.0, -1.0)),
        PathCode.line_to((1.0, 1.0)),
        PathCode.close_poly((-1.0, 1.0)),
    ))


def unit_pos() -> Path:
    return Path((
        PathCode.move_to((0.0, 0.0)),
        PathCode.line_to((1.0, 0.0)),
        PathCode.line_to((1.0, 1.0)),
        PathCode.close_poly((0.0, 1.0)),
    ))


def _polygon(n: int, offset_deg: float) -> Path:
    if n <= 2:
        raise ValueError(f"polygon requires more than two sides, got {n}")
    points = []
    for i in range(n):
        theta = math.radians(i * 360.0 / n + offset_deg)
        points.append((math.cos(theta), math.sin(theta)))
    return Path.closed_poly(points)


def unit_polygon(n: int) -> Path:
    """Regular polygon on the unit circle with a vertex at the top."""
    return _polygon(n, 90.0)


def unit_polygon_alt(n: int) -> Path:
    """Regular polygon on the unit circle rotated by half a side."""
    return _polygon(n, 180.0 / n if n else 0.0)


def unit_star(n: int, r_inner: float) -> Path:
    points = []
    for i in range(n):
        theta = math.radians(i * 360.0 / n + 90.0)
        points.append((math.cos(theta), math.sin(theta)))
        theta2 = theta + PI / n
        points.append((math.cos(theta2) * r_inner, math.sin(theta2) * r_inner))
    return Path.closed_poly(points)


def unit_asterisk(n: int) -> Path:
    codes = []
    for i in range(n):
        theta = math.radians(i * 360.0 / n + 90.0)
        codes.append(PathCode.move_to((0.0, 0.0)))
        codes.append(PathCode.line_to((math.cos(theta), math.sin(theta))))
    return Path(tuple(codes))


def wedge(angle: tuple) -> Path:
    """Pie wedge of the unit circle between two angles, closed at the origin."""
    t0, t1 = angle[0].to_radians(), angle[1].to_radians()
    if not t0 < t1:
        t1 += TAU

    n = int(2.0 ** math.ceil((t1 - t0) / (0.5 * PI)))
    steps = [t0 + (t1 - t0) * i / n for i in range(n + 1)]
    cos = [math.cos(t) for t in steps]
    sin = [math.sin(t) for t in steps]

    dt = (t1 - t0) / n
    t = math.tan(0.5 * dt)
    alpha = math.sin(dt) * (math.sqrt(4.0 + 3.0 * t * t) - 1.0) / 3.0

    codes = [PathCode.move_to((cos[0], sin[0]))]
    for i in range(1, n + 1):
        codes.append(PathCode.bezier3(
            (cos[i - 1] - alpha * sin[i - 1], sin[i - 1] + alpha * cos[i - 1]),
            (cos[i] + alpha * sin[i], sin[i] - alpha * cos[i]),
            (cos[i], sin[i]),
        ))
    codes.append(PathCode.close_poly((0.0, 0.0)))
    return Path(tuple(codes))


def circle() -> Path:
    """Unit circle approximated by eight cubic Bezier segments."""
    magic = 0.2652031
    sqrt_half = math.sqrt(0.5)
    m45 = sqrt_half * magic

    return Path((
        PathCode.move_to((0.0, -1.0)),
        PathCode.bezier3((magic, -1.0), (sqrt_half - m45, -sqrt_half - m45), (sqrt_half, -sqrt_half)),
        PathCode.bezier3((sqrt_half + m45, -sqrt_half + m45), (1.0, -magic), (1.0, 0.0)),
        PathCode.bezier3((1.0, magic), (sqrt_half + m45, sqrt_half - m45), (sqrt_half, sqrt_half)),
        PathCode.bezier3((sqrt_half - m45, sqrt_half + m45), (magic, 1.0), (0.0, 1.0)),
        PathCode.bezier3((-magic, 1.0), (-sqrt_half + m45, sqrt_half + m45), (-sqrt_half, sqrt_half)),
        PathCode.bezier3((-sqrt_half - m45, sqrt_half - m45), (-1.0, magic), (-1.0, 0.0)),
        PathCode.bezier3((-1.0, -magic), (-sqrt_half - m45, -sqrt_half + m45), (-sqrt_half, -sqrt_half)),
        PathCode.bezier3((-sqrt_half + m45, -sqrt_half - m45), (-magic, -1.0), (0.0, -1.0)),
        PathCode.close_poly((0.0, -1.0)),
    ))


def bounds_path(pos: Bounds) -> Path:
    """Closed rectangle outlining ``pos``."""
    return Path((
        PathCode.move_to((pos.xmin, pos.ymin)),
        PathCode.line_to((pos.xmax, pos.ymin)),
        PathCode.line_to((pos.xmax, pos.ymax)),
        PathCode.close_poly((pos.xmin, pos.ymax)),
    ))


def line(p0: PointLike, p1: PointLike) -> Path:
    return Path((PathCode.move_to(p0), PathCode.line_to(p1)))


def rect(p0: PointLike, p1: PointLike) -> Path:
    a, b = _pt(p0), _pt(p1)
    return Path((
        PathCode.move_to(a),
        PathCode.line_to((b.x, a.y)),
        PathCode.line_to((b.x, b.y)),
        PathCode.close_poly((a.x, b.y)),
    ))


def arrow(point: PointLike, dxdy: PointLike, size: float) -> Path:
    """Arrow polygon from ``point`` along ``dxdy``."""
    x, y = _pt(point)
    dx, dy = _pt(dxdy)

    s_tail = 0.1 * size
    s_head = 0.3 * size

    hypot = math.hypot(dx, dy)
    if hypot == 0:
        raise ValueError("arrow direction must be non-zero")
    tx, ty = dy / hypot, -dx / hypot

    x_tail, y_tail = tx * s_tail, ty * s_tail
    xt_head, yt_head = tx * s_head, ty * s_head
    dx_head, dy_head = 0.8 * dx, 0.8 * dy

    return (
        Path.move_to(x - x_tail, y - y_tail)
        .line_to(x + x_tail, y + y_tail)
        .line_to(x + x_tail + dx_head, y + y_tail + dy_head)
        .line_to(x + xt_head + dx_head, y + yt_head + dy_head)
        .line_to(x + dx, y + dy)
        .line_to(x - xt_head + dx_head, y - yt_head + dy_head)
        .close_poly(x - x_tail + dx_head, y - y_tail + dy_head)
    )