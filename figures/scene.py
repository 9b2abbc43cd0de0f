from __future__ import annotations

from typing import Any, Dict, List, Literal
import json

from .geometry import Point, Polygon, Rectangle, Rubber, Shape


ShapeKind = Literal["rectangle", "rubber", "polygon"]


class SceneError(ValueError):
    """Scene description that cannot be turned into shapes."""


def _point(v: Any, field: str) -> Point:
    try:
        x, y = v
        return Point(float(x), float(y))
    except (TypeError, ValueError) as e:
        raise SceneError(f"'{field}' must be an [x, y] pair, got {v!r}") from e


def _number(d: Dict[str, Any], field: str) -> float:
    if field not in d:
        raise SceneError(f"missing field '{field}'")
    try:
        return float(d[field])
    except (TypeError, ValueError) as e:
        raise SceneError(f"'{field}' must be a number, got {d[field]!r}") from e


def make_shape(kind: ShapeKind, params: Dict[str, Any]) -> Shape:
    if kind == "rectangle":
        return Rectangle(
            _number(params, "width"),
            _number(params, "height"),
            _point(params.get("pos"), "pos"),
        )
    if kind == "rubber":
        return Rubber(
            r1=_number(params, "r1"),
            pos1=_point(params.get("pos1"), "pos1"),
            r2=_number(params, "r2"),
            pos2=_point(params.get("pos2"), "pos2"),
        )
    if kind == "polygon":
        if "vertices" not in params:
            raise SceneError("missing field 'vertices'")
        if not isinstance(params["vertices"], list):
            raise SceneError(f"'vertices' must be a list of [x, y] pairs, got {params['vertices']!r}")
        return Polygon([_point(v, "vertices") for v in params["vertices"]])
    raise SceneError(f"unknown shape kind: {kind!r}")


def shape_from_dict(d: Dict[str, Any]) -> Shape:
    if not isinstance(d, dict) or "kind" not in d:
        raise SceneError("shape entry must be an object with a 'kind'")
    return make_shape(d["kind"], d)


def shapes_from_dict(doc: Dict[str, Any]) -> List[Shape]:
    items = doc.get("shapes") if isinstance(doc, dict) else None
    if not isinstance(items, list):
        raise SceneError("scene must be an object with a 'shapes' list")
    shapes = [shape_from_dict(item) for item in items]
    if not shapes:
        raise SceneError("scene contains no shapes")
    return shapes


def load_scene(path: str) -> List[Shape]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            doc = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"{path}: not valid JSON ({e})") from e
        except UnicodeDecodeError as e:
            raise SceneError(f"{path}: not UTF-8 text ({e})") from e
    return shapes_from_dict(doc)


def default_scene() -> List[Shape]:
    return [
        Rectangle(1.0, 5.0, Point(2.0, 3.0)),
        Rubber(r1=4.4, pos1=Point(1.0, 1.0), r2=1.1, pos2=Point(1.1, 1.1)),
        Polygon([(0.0, 0.0), (1.0, 0.0), (2.0, 2.0), (2.0, 3.0), (1.0, 4.0)]),
    ]
