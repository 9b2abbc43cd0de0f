# Re-export core geometry API for convenience
from .errors import (
    ShapeError,
    InvalidDimension,
    InvalidGeometry,
    InvalidScaleFactor,
    EmptyShapeCollection,
)
from .geometry import (
    Point,
    FrameRect,
    Shape,
    Rectangle,
    Rubber,
    Polygon,
)
from .composite import (
    AggregateReport,
    aggregate_report,
    scale_relative,
    scale_relative_all,
    union_frame,
)
from .scene import SceneError, default_scene, load_scene, make_shape, shape_from_dict
