from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence
import logging
import math

from .errors import EmptyShapeCollection, InvalidGeometry, check_scale_factor
from .geometry import FrameRect, Point, PointLike, Shape, as_point

logger = logging.getLogger(__name__)


def _fixed_point(point: PointLike) -> Point:
    point = as_point(point)
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        raise InvalidGeometry(f"scale center must be finite, got {point}")
    return point


def scale_relative(shape: Shape, point: PointLike, k: float) -> None:
    """
    Scale ``shape`` by ``k`` keeping ``point`` fixed.

    Uses only the Shape interface: park the anchor on ``point``, scale there,
    then translate so the frame center ends up at ``point + k * (c0 - point)``.
    The factor is validated before anything moves.
    """
    k = check_scale_factor(k)
    point = _fixed_point(point)
    c0 = shape.frame_rect().pos
    shape.move_to(point)
    shape.scale(k)
    c1 = shape.frame_rect().pos
    target = point + k * (c0 - point)
    shape.move_by(target.x - c1.x, target.y - c1.y)


def scale_relative_all(shapes: Sequence[Shape], point: PointLike, k: float) -> None:
    k = check_scale_factor(k)
    point = _fixed_point(point)
    logger.debug("scaling %d shapes by %r about %s", len(shapes), k, point)
    for shape in shapes:
        scale_relative(shape, point, k)


def union_frame(frames: Sequence[FrameRect]) -> FrameRect:
    if not frames:
        raise EmptyShapeCollection("cannot take the union frame of no shapes")
    left = min(f.left for f in frames)
    right = max(f.right for f in frames)
    bottom = min(f.bottom for f in frames)
    top = max(f.top for f in frames)
    return FrameRect.from_bounds(left, bottom, right, top)


@dataclass(frozen=True)
class AggregateReport:
    areas: List[float]
    total_area: float
    frames: List[FrameRect]
    union: FrameRect

    def __len__(self) -> int:
        return len(self.areas)


def aggregate_report(shapes: Sequence[Shape]) -> AggregateReport:
    """
    Per-shape areas and frames in insertion order, their total and the union frame.
    """
    if len(shapes) == 0:
        raise EmptyShapeCollection("aggregate report needs at least one shape")
    areas = [s.area() for s in shapes]
    total = 0.0
    for a in areas:
        total += a
    frames = [s.frame_rect() for s in shapes]
    return AggregateReport(areas=areas, total_area=total, frames=frames, union=union_frame(frames))
