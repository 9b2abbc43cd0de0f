from typing import Any

import shapely.geometry
from shapely.geometry import Point, box

from .geometry import Polygon, Rectangle, Rubber, Shape


def to_shapely(shape: Shape, resolution: int = 64) -> Any:
    """
    Shapely geometry covering the same region as ``shape``.
    Circles are approximated with ``resolution`` segments per quarter.
    """
    if isinstance(shape, Rectangle):
        f = shape.frame_rect()
        return box(f.left, f.bottom, f.right, f.top)
    if isinstance(shape, Rubber):
        outer = Point(shape.pos1.x, shape.pos1.y).buffer(shape.r1, resolution)
        inner = Point(shape.pos2.x, shape.pos2.y).buffer(shape.r2, resolution)
        return outer.difference(inner)
    if isinstance(shape, Polygon):
        geom = shapely.geometry.Polygon(shape.vertices)
        if not geom.is_valid:
            geom = geom.buffer(0)
        return geom
    raise ValueError(f"no shapely conversion for {type(shape).__name__}")
