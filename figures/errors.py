from __future__ import annotations

import math


class ShapeError(ValueError):
    """Base class for rejected shape construction or transforms."""


class InvalidDimension(ShapeError):
    """Non-positive width, height or radius."""


class InvalidGeometry(ShapeError):
    """Geometry that cannot form a valid shape (e.g. too few vertices)."""


class InvalidScaleFactor(ShapeError):
    def __init__(self, k: float):
        super().__init__(f"scale factor must be positive and finite, got {k!r}")
        self.k = k


class EmptyShapeCollection(ShapeError):
    """Aggregate operations need at least one shape."""


def check_scale_factor(k: float) -> float:
    k = float(k)
    # NaN fails the comparison too
    if not (k > 0.0 and math.isfinite(k)):
        raise InvalidScaleFactor(k)
    return k
