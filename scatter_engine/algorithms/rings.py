# ==============================================================================
# File: scatter_engine/algorithms/rings.py
# Purpose: geometry helpers for two families of concentric circles (rings).
# ==============================================================================
from __future__ import annotations
import logging
import math

from ..core.preset.errors import DegenerateGeometryError
from ..core.types import AreaBounds, Point2D

logger = logging.getLogger(__name__)


def ring_radius(
    ring_index: int,
    other_ring_index: int,
    increment: float,
    stagger_modulo: int,
    stagger_offset: float,
) -> float:
    """Radius of ring `ring_index`.

    Every `stagger_modulo` rings of the OTHER circle family the radius gets
    `stagger_offset` added. The stagger must follow the other index, not our own.
    """
    stagger = stagger_offset if other_ring_index % stagger_modulo == 0 else 0.0
    return ring_index * increment + stagger


def circles_intersect(center_distance: float, radius_a: float, radius_b: float) -> bool:
    """True only for two crossing points: no overlap, containment and tangency are False."""
    return (
        radius_a + radius_b > center_distance
        and center_distance > abs(radius_a - radius_b)
    )


def _intersection_terms(
    center_distance: float, radius_a: float, radius_b: float
) -> tuple[float, float]:
    if center_distance <= 0.0:
        raise DegenerateGeometryError(
            f"circle centers coincide (center_distance={center_distance})"
        )

    # a: distance from center A along the center line, h: perpendicular offset
    a = (radius_a * radius_a - radius_b * radius_b + center_distance * center_distance) / (
        2.0 * center_distance
    )
    h_sq = radius_a * radius_a - a * a
    if h_sq < 0.0:
        # float error right at the intersection limit; clamp instead of NaN
        logger.debug("Clamped negative h^2=%g (ra=%g, rb=%g)", h_sq, radius_a, radius_b)
        h_sq = 0.0
    return a / center_distance, math.sqrt(h_sq) / center_distance


def intersection_point(
    center_a: Point2D,
    center_delta: Point2D,
    center_distance: float,
    radius_a: float,
    radius_b: float,
) -> Point2D:
    """Intersection point on the clockwise side of the A->B line.

    center_delta is the vector from center A to center B and center_distance its length.
    For the spawn geometry (centers left of the area) this is the point that can land
    inside the area.
    """
    l_div_d, h_div_d = _intersection_terms(center_distance, radius_a, radius_b)
    dx, dy = center_delta
    return (
        center_a[0] + l_div_d * dx + h_div_d * dy,
        center_a[1] + l_div_d * dy - h_div_d * dx,
    )


def mirror_intersection_point(
    center_a: Point2D,
    center_delta: Point2D,
    center_distance: float,
    radius_a: float,
    radius_b: float,
) -> Point2D:
    """The other intersection point, on the counter-clockwise side of the A->B line."""
    l_div_d, h_div_d = _intersection_terms(center_distance, radius_a, radius_b)
    dx, dy = center_delta
    return (
        center_a[0] + l_div_d * dx - h_div_d * dy,
        center_a[1] + l_div_d * dy + h_div_d * dx,
    )


def point_in_bounds(area_bounds: AreaBounds, point: Point2D) -> bool:
    return area_bounds.contains(point)
