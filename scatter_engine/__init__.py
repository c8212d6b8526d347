"""Deterministic grass spawn points from two interleaved families of rings."""
from .algorithms.spawn_points import calculate_spawn_points, generate
from .core.preset import (
    InvalidSettingsError,
    ScatterError,
    ScatterPreset,
    ScatterSettings,
    load_preset,
)
from .core.types import AreaBounds
from .world.placement import GrassSpawner, place_objects

__all__ = [
    "calculate_spawn_points",
    "generate",
    "ScatterSettings",
    "ScatterPreset",
    "load_preset",
    "ScatterError",
    "InvalidSettingsError",
    "AreaBounds",
    "GrassSpawner",
    "place_objects",
]
