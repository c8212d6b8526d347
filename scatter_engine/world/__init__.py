# scatter_engine/world/__init__.py
from .gizmos import DiscCommand, GizmoStyle, RectCommand, build_gizmo_commands
from .object_types import PlacedObject
from .placement import GrassSpawner, place_objects, world_positions

__all__ = [
    "PlacedObject",
    "GrassSpawner",
    "place_objects",
    "world_positions",
    "GizmoStyle",
    "RectCommand",
    "DiscCommand",
    "build_gizmo_commands",
]
