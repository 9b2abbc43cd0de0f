from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union
import copy
import logging
import math
import numpy as np

from .errors import InvalidDimension, InvalidGeometry, check_scale_factor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


PointLike = Union[Point, Tuple[float, float], Sequence[float]]


def as_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(float(x), float(y))


@dataclass(frozen=True)
class FrameRect:
    """
    Axis-aligned box given by its center and extents.
    """
    width: float
    height: float
    pos: Point

    @property
    def left(self) -> float:
        return self.pos.x - self.width / 2.0

    @property
    def right(self) -> float:
        return self.pos.x + self.width / 2.0

    @property
    def bottom(self) -> float:
        return self.pos.y - self.height / 2.0

    @property
    def top(self) -> float:
        return self.pos.y + self.height / 2.0

    @staticmethod
    def from_bounds(left: float, bottom: float, right: float, top: float) -> "FrameRect":
        return FrameRect(
            width=right - left,
            height=top - bottom,
            pos=Point((left + right) / 2.0, (bottom + top) / 2.0),
        )


class Shape:
    """
    Common interface of the planar figures.

    ``scale`` works about the shape's own ``anchor``, which is also the point
    ``move_to`` relocates. The frame center reported by ``frame_rect`` is not
    necessarily the anchor.
    """
    def area(self) -> float:
        raise NotImplementedError

    def frame_rect(self) -> FrameRect:
        raise NotImplementedError

    @property
    def anchor(self) -> Point:
        raise NotImplementedError

    def move_to(self, point: PointLike) -> None:
        raise NotImplementedError

    def move_by(self, dx: float, dy: float) -> None:
        raise NotImplementedError

    def scale(self, k: float) -> None:
        raise NotImplementedError

    def copy(self) -> "Shape":
        return copy.copy(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float, pos: PointLike):
        width = float(width)
        height = float(height)
        if not (width > 0.0 and height > 0.0):
            raise InvalidDimension(f"rectangle sides must be positive, got {width!r} x {height!r}")
        self._width = width
        self._height = height
        self._pos = as_point(pos)
        logger.debug("rectangle %r x %r at %s", width, height, self._pos)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def anchor(self) -> Point:
        return self._pos

    pos = anchor

    def area(self) -> float:
        return self._width * self._height

    def frame_rect(self) -> FrameRect:
        return FrameRect(self._width, self._height, self._pos)

    def move_to(self, point: PointLike) -> None:
        self._pos = as_point(point)

    def move_by(self, dx: float, dy: float) -> None:
        self._pos = Point(self._pos.x + dx, self._pos.y + dy)

    def scale(self, k: float) -> None:
        k = check_scale_factor(k)
        logger.debug("rectangle scaled by %r", k)
        self._width *= k
        self._height *= k

    def __repr__(self) -> str:
        return f"Rectangle(width={self._width!r}, height={self._height!r}, pos={self._pos!r})"


class Rubber(Shape):
    """
    Ring between an outer circle (r1, pos1) and an inner circle (r2, pos2).

    The circles need not be concentric, but the inner one must lie inside the
    outer one. The inner center is the anchor: ``move_to`` places it and
    ``scale`` keeps it fixed, carrying the outer center along with the offset
    between them.
    """
    def __init__(self, r1: float, pos1: PointLike, r2: float, pos2: PointLike):
        r1 = float(r1)
        r2 = float(r2)
        if not (r1 > 0.0 and r2 > 0.0):
            raise InvalidDimension(f"rubber radii must be positive, got r1={r1!r}, r2={r2!r}")
        pos1 = as_point(pos1)
        pos2 = as_point(pos2)
        if pos1.distance_to(pos2) + r2 > r1:
            raise InvalidGeometry("inner circle of rubber must lie inside the outer circle")
        self._r1 = r1
        self._r2 = r2
        self._pos1 = pos1
        self._pos2 = pos2
        logger.debug("rubber r1=%r at %s, r2=%r at %s", r1, pos1, r2, pos2)

    @property
    def r1(self) -> float:
        return self._r1

    @property
    def r2(self) -> float:
        return self._r2

    @property
    def pos1(self) -> Point:
        return self._pos1

    @property
    def pos2(self) -> Point:
        return self._pos2

    @property
    def anchor(self) -> Point:
        return self._pos2

    def area(self) -> float:
        return math.pi * (self._r1 * self._r1 - self._r2 * self._r2)

    def frame_rect(self) -> FrameRect:
        return FrameRect(2.0 * self._r1, 2.0 * self._r1, self._pos1)

    def move_to(self, point: PointLike) -> None:
        offset = self._pos1 - self._pos2
        self._pos2 = as_point(point)
        self._pos1 = self._pos2 + offset

    def move_by(self, dx: float, dy: float) -> None:
        delta = Point(dx, dy)
        self._pos1 = self._pos1 + delta
        self._pos2 = self._pos2 + delta

    def scale(self, k: float) -> None:
        k = check_scale_factor(k)
        logger.debug("rubber scaled by %r about %s", k, self._pos2)
        self._pos1 = self._pos2 + k * (self._pos1 - self._pos2)
        self._r1 *= k
        self._r2 *= k

    def __repr__(self) -> str:
        return (
            f"Rubber(r1={self._r1!r}, pos1={self._pos1!r}, "
            f"r2={self._r2!r}, pos2={self._pos2!r})"
        )


def _shoelace_terms(verts: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    x = verts[:, 0]
    y = verts[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    return cross, x + x_next, y + y_next


def signed_area(verts: np.ndarray) -> float:
    cross, _, _ = _shoelace_terms(verts)
    return float(cross.sum() / 2.0)


def centroid(verts: np.ndarray) -> Point:
    """
    Area-weighted centroid of a simple polygon, independent of winding.
    Falls back to the vertex mean for zero-area input.
    """
    cross, sx, sy = _shoelace_terms(verts)
    a = cross.sum() / 2.0
    if a == 0.0:
        mean = verts.mean(axis=0)
        return Point(float(mean[0]), float(mean[1]))
    cx = float((sx * cross).sum() / (6.0 * a))
    cy = float((sy * cross).sum() / (6.0 * a))
    return Point(cx, cy)


class Polygon(Shape):
    """
    Simple polygon defined by an ordered list of vertices (2D points).
    Orientation can be CW or CCW.

    The centroid is computed once at construction and then only translated;
    scaling keeps it fixed and moves the vertices radially around it.
    """
    def __init__(self, vertices: Iterable[PointLike] | np.ndarray):
        if isinstance(vertices, np.ndarray):
            raw = vertices
        else:
            raw = [(p.x, p.y) if isinstance(p, Point) else p for p in vertices]
        try:
            verts = np.array(raw, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidGeometry(f"polygon vertices must be (x, y) number pairs: {e}") from e
        if verts.ndim != 2 or verts.shape[1] != 2:
            raise InvalidGeometry("polygon requires an array/list of vertices of shape (N,2)")
        if verts.shape[0] < 3:
            raise InvalidGeometry(f"polygon requires at least 3 vertices, got {verts.shape[0]}")
        if not np.all(np.isfinite(verts)):
            raise InvalidGeometry("polygon vertices must be finite")
        # np.array copies, so the caller's buffer is never aliased
        self._vertices = verts
        self._pos = centroid(self._vertices)
        logger.debug("polygon with %d vertices, centroid %s", len(self._vertices), self._pos)

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices.copy()

    def __len__(self) -> int:
        return self._vertices.shape[0]

    @property
    def anchor(self) -> Point:
        return self._pos

    pos = anchor

    def area(self) -> float:
        return abs(signed_area(self._vertices))

    def frame_rect(self) -> FrameRect:
        xmin, ymin = self._vertices.min(axis=0)
        xmax, ymax = self._vertices.max(axis=0)
        return FrameRect.from_bounds(float(xmin), float(ymin), float(xmax), float(ymax))

    def move_to(self, point: PointLike) -> None:
        point = as_point(point)
        self._vertices += (point - self._pos).as_array()
        self._pos = point

    def move_by(self, dx: float, dy: float) -> None:
        self._vertices += np.array([dx, dy], dtype=float)
        self._pos = Point(self._pos.x + dx, self._pos.y + dy)

    def scale(self, k: float) -> None:
        k = check_scale_factor(k)
        logger.debug("polygon scaled by %r about %s", k, self._pos)
        center = self._pos.as_array()
        self._vertices = center + k * (self._vertices - center)

    def __copy__(self) -> "Polygon":
        dup = Polygon.__new__(Polygon)
        dup._vertices = self._vertices.copy()
        dup._pos = self._pos
        return dup

    def __deepcopy__(self, memo: dict) -> "Polygon":
        return self.__copy__()

    def __repr__(self) -> str:
        return f"Polygon({self._vertices.tolist()!r})"
