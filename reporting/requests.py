from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, TextIO

from figures import Point


class MalformedInput(ValueError):
    """Input that is not a sequence of ``x y k`` number triples."""


@dataclass(frozen=True)
class ScaleRequest:
    point: Point
    k: float


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_scale_requests(stream: TextIO) -> Iterator[ScaleRequest]:
    """
    Yield one request per whitespace separated ``x y k`` triple until end of input.
    Triples may span lines. A non-numeric token, a non-finite center or a
    dangling partial triple raises MalformedInput.
    """
    pending: List[float] = []
    for tok in _tokens(stream):
        try:
            pending.append(float(tok))
        except ValueError:
            raise MalformedInput(f"expected a number, got {tok!r}") from None
        if len(pending) == 3:
            x, y, k = pending
            pending = []
            if not (math.isfinite(x) and math.isfinite(y)):
                raise MalformedInput(f"scale center must be finite, got ({x!r}, {y!r})")
            yield ScaleRequest(Point(x, y), k)
    if pending:
        raise MalformedInput(f"incomplete scale request: {' '.join(repr(v) for v in pending)}")
