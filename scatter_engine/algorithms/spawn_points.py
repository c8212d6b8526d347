# ==============================================================================
# Файл: scatter_engine/algorithms/spawn_points.py
# Назначение: точки спавна = пересечения двух семейств колец,
#             обрезанные квадратной областью спавна.
# ==============================================================================
from __future__ import annotations
import logging
import math
import time
from typing import List

import numpy as np

from ..core.preset.model import ScatterSettings
from ..core.preset.validators import validate_settings
from ..core.types import AreaBounds, Point2D
from . import rings

logger = logging.getLogger(__name__)


def calculate_spawn_points(settings: ScatterSettings) -> List[Point2D]:
    """Возвращает упорядоченный список точек спавна для `settings`.

    Порядок: по (ring_index_a, ring_index_b) по возрастанию, A снаружи. Дубли сохраняются.
    Чистая и детерминированная функция, между вызовами ничего не кешируется.

    Raises:
        InvalidSettingsError: настройки вне допустимых диапазонов (проверка до геометрии).
    """
    validate_settings(settings)
    s = settings
    t0 = time.perf_counter()

    # Оба центра слева от области, B ровно над A на 2 * half_length
    half = s.area_half_length
    circle_a_center = (-half - s.circle_center_offset, -half)
    center_delta = (0.0, half * 2.0)
    center_distance = math.hypot(*center_delta)
    area_bounds = AreaBounds.centered_square(half)

    spawn_points: List[Point2D] = []
    mirrored = 0

    for ring_index_a in range(s.num_rings):
        for ring_index_b in range(s.num_rings):
            radius_a = rings.ring_radius(
                ring_index_a,
                ring_index_b,
                s.ring_radius_increment,
                s.stagger_ring_modulo,
                s.stagger_ring_offset,
            )
            radius_b = rings.ring_radius(
                ring_index_b,
                ring_index_a,
                s.ring_radius_increment,
                s.stagger_ring_modulo,
                s.stagger_ring_offset,
            )

            if not rings.circles_intersect(center_distance, radius_a, radius_b):
                continue

            point = rings.intersection_point(
                circle_a_center, center_delta, center_distance, radius_a, radius_b
            )
            if rings.point_in_bounds(area_bounds, point):
                spawn_points.append(point)

            # При circle_center_offset >= 0 эта точка всегда левее области
            mirror = rings.mirror_intersection_point(
                circle_a_center, center_delta, center_distance, radius_a, radius_b
            )
            # h, обрезанное до 0, сводит обе точки в одну
            if mirror != point and rings.point_in_bounds(area_bounds, mirror):
                spawn_points.append(mirror)
                mirrored += 1

    logger.debug(
        "Spawn points: %d (%d mirrored) from %d ring pairs in %.2f ms",
        len(spawn_points),
        mirrored,
        s.num_rings * s.num_rings,
        (time.perf_counter() - t0) * 1000.0,
    )
    return spawn_points


# Короткое имя для тех, кто вызывает генератор как обычную функцию
generate = calculate_spawn_points


def points_as_array(points: List[Point2D]) -> np.ndarray:
    """Массив (N, 2) float64 из списка точек; пустой список даёт форму (0, 2)."""
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)
