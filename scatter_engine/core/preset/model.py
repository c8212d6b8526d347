# ========================
# file: scatter_engine/core/preset/model.py
# ========================
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class ScatterSettings:
    """Parameters of the two circle families that produce the spawn points.

    area_half_length: half the side of the square spawn area, centered on the origin.
    num_rings: ring indices evaluated per circle family (both use the same count).
    ring_radius_increment: radius growth per ring index.
    stagger_ring_modulo: when the *other* family's ring index is a multiple of it,
        stagger_ring_offset is added to the radius.
    circle_center_offset: moves both circle centers left of the spawn area.
    """

    area_half_length: float
    num_rings: int
    ring_radius_increment: float
    stagger_ring_modulo: int
    stagger_ring_offset: float
    circle_center_offset: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScatterSettings":
        return cls(
            area_half_length=float(data["area_half_length"]),
            num_rings=int(data["num_rings"]),
            ring_radius_increment=float(data["ring_radius_increment"]),
            stagger_ring_modulo=int(data["stagger_ring_modulo"]),
            stagger_ring_offset=float(data["stagger_ring_offset"]),
            circle_center_offset=float(data["circle_center_offset"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "area_half_length": self.area_half_length,
            "num_rings": self.num_rings,
            "ring_radius_increment": self.ring_radius_increment,
            "stagger_ring_modulo": self.stagger_ring_modulo,
            "stagger_ring_offset": self.stagger_ring_offset,
            "circle_center_offset": self.circle_center_offset,
        }


@dataclass(frozen=True)
class ScatterPreset:
    id: str
    version: int
    scatter: ScatterSettings
    placement: Dict[str, Any] = field(default_factory=dict)
    preview: Dict[str, Any] = field(default_factory=dict)

    @property
    def center(self) -> Tuple[float, float, float]:
        x, y, z = self.placement.get("center", (0.0, 0.0, 0.0))
        return float(x), float(y), float(z)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "scatter": self.scatter.to_dict(),
            "placement": dict(self.placement),
            "preview": dict(self.preview),
        }
