# scatter_engine/world/gizmos.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Union

from ..core.preset.model import ScatterSettings
from ..core.types import AreaBounds, Point2D


@dataclass(frozen=True)
class GizmoStyle:
    enabled: bool = True
    rect_color: str = "#FFFFFF"
    points_color: str = "#5FAF3A"
    point_radius: float = 0.1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GizmoStyle":
        return cls(
            enabled=bool(data.get("enabled", True)),
            rect_color=str(data.get("rect_color", cls.rect_color)),
            points_color=str(data.get("points_color", cls.points_color)),
            point_radius=float(data.get("point_radius", cls.point_radius)),
        )


@dataclass(frozen=True)
class RectCommand:
    bounds: AreaBounds
    color: str


@dataclass(frozen=True)
class DiscCommand:
    center: Point2D
    radius: float
    color: str


DrawCommand = Union[RectCommand, DiscCommand]


def build_gizmo_commands(
    settings: ScatterSettings, points: Sequence[Point2D], style: GizmoStyle
) -> List[DrawCommand]:
    """Outline of the spawn area first, then one disc per spawn point (in point order)."""
    if not style.enabled:
        return []
    commands: List[DrawCommand] = [
        RectCommand(AreaBounds.centered_square(settings.area_half_length), style.rect_color)
    ]
    commands.extend(
        DiscCommand((float(x), float(y)), style.point_radius, style.points_color)
        for x, y in points
    )
    return commands
