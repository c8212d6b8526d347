# scatter_engine/algorithms/__init__.py
from .rings import (
    circles_intersect,
    intersection_point,
    mirror_intersection_point,
    point_in_bounds,
    ring_radius,
)
from .spawn_points import calculate_spawn_points, generate, points_as_array

__all__ = [
    "ring_radius",
    "circles_intersect",
    "intersection_point",
    "mirror_intersection_point",
    "point_in_bounds",
    "calculate_spawn_points",
    "generate",
    "points_as_array",
]
