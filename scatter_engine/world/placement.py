# ==============================================================================
# File: scatter_engine/world/placement.py
# Purpose: turns 2D spawn points into placed objects in 3D world space.
# ==============================================================================
from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Union

import numpy as np

from ..algorithms.spawn_points import calculate_spawn_points, points_as_array
from ..core.preset.model import ScatterPreset, ScatterSettings
from ..core.types import Point2D, Vector3
from ..core.utils.rng import RNG
from .object_types import PlacedObject

logger = logging.getLogger(__name__)


def world_positions(
    points: Sequence[Point2D], center: Vector3 = (0.0, 0.0, 0.0)
) -> np.ndarray:
    """(N, 3) positions: the 2D plane is the world XZ plane, shifted by `center`."""
    pts = points_as_array(list(points))
    out = np.zeros((len(pts), 3), dtype=np.float64)
    out[:, 0] = pts[:, 0]
    out[:, 2] = pts[:, 1]
    out += np.asarray(center, dtype=np.float64)
    return out


def place_objects(
    points: Sequence[Point2D],
    center: Vector3 = (0.0, 0.0, 0.0),
    prefab_id: str = "grass",
    seed: Union[int, str] = 0,
    random_yaw: bool = True,
) -> List[PlacedObject]:
    """One PlacedObject per point, in point order.

    Yaw is uniform in [0, 360) from a seeded RNG, so the same seed gives the same
    rotations. With random_yaw=False every object keeps rotation (0, 0, 0).
    """
    rng = RNG(seed)
    placed: List[PlacedObject] = []
    for x, y, z in world_positions(points, center):
        yaw = rng.uniform_range(0.0, 360.0) if random_yaw else 0.0
        placed.append(
            PlacedObject(
                prefab_id=prefab_id,
                position=(float(x), float(y), float(z)),
                rotation=(0.0, yaw, 0.0),
            )
        )
    return placed


class GrassSpawner:
    """Computes spawn points and places a prefab on each of them.

    The two steps are separate: calculate_points() has no side effects, spawn()
    builds the PlacedObject list the engine side instantiates.
    """

    def __init__(
        self,
        settings: ScatterSettings,
        prefab_id: str = "grass",
        center: Vector3 = (0.0, 0.0, 0.0),
    ):
        self.settings = settings
        self.prefab_id = prefab_id
        self.center = center

    @classmethod
    def from_preset(cls, preset: ScatterPreset) -> "GrassSpawner":
        return cls(
            preset.scatter,
            prefab_id=str(preset.placement.get("prefab_id", "grass")),
            center=preset.center,
        )

    def calculate_points(self) -> List[Point2D]:
        return calculate_spawn_points(self.settings)

    def spawn(
        self,
        points: Optional[Sequence[Point2D]] = None,
        seed: Union[int, str] = 0,
        random_yaw: bool = True,
    ) -> List[PlacedObject]:
        if points is None:
            points = self.calculate_points()
        placed = place_objects(
            points,
            center=self.center,
            prefab_id=self.prefab_id,
            seed=seed,
            random_yaw=random_yaw,
        )
        logger.info(
            "Placed %d '%s' objects around %s", len(placed), self.prefab_id, self.center
        )
        return placed
