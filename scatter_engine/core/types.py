# scatter_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

Point2D = Tuple[float, float]
Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class AreaBounds:
    """Axis-aligned rectangle: left/top corner plus size, like an engine Rect."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def centered_square(cls, half_length: float) -> "AreaBounds":
        return cls(-half_length, -half_length, 2.0 * half_length, 2.0 * half_length)

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    def contains(self, point: Point2D) -> bool:
        """Half-open containment: lower edges are inside, upper edges are outside."""
        px, py = point
        return self.x <= px < self.x_max and self.y <= py < self.y_max
