from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

EXIT_OK = 0
EXIT_MALFORMED_INPUT = 1
EXIT_SHAPE_ERROR = 2


@dataclass(frozen=True)
class DriverConfig:
    scene_path: Optional[str] = None
    precision: int = 2
    verbose: bool = False

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError("precision must be non-negative")
