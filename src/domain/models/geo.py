from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Planar coordinate in metres (y axis pointing up)."""

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"Invalid coordinate: ({self.x}, {self.y})")

    @property
    def label(self) -> str:
        return f"{_format(self.x)}_{_format(self.y)}"

    def distance_to(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


def _format(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)
