from __future__ import annotations
from dataclasses import dataclass

from ..core.types import Vector3


@dataclass
class PlacedObject:
    """Один объект травы, готовый к инстанцированию движком."""

    prefab_id: str
    position: Vector3
    rotation: Vector3  # эйлер, градусы (pitch, yaw, roll)
    scale: float = 1.0
