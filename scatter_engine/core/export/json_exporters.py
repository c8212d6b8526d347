# ==============================================================================
# Файл: scatter_engine/core/export/json_exporters.py
# Назначение: JSON-выгрузка точек спавна и размещённых объектов.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Any, Sequence, Union

import numpy as np

from ..preset.model import ScatterSettings
from ..types import Point2D
from ...world.object_types import PlacedObject

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _default_serializer(o: Any) -> Any:
    if dataclasses.is_dataclass(o):
        return dataclasses.asdict(o)
    if isinstance(o, np.integer):
        return int(o)
    if isinstance(o, np.floating):
        return float(o)
    if isinstance(o, np.ndarray):
        return o.tolist()
    raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")


def _atomic_write_json(path: PathLike, data: Any) -> Path:
    """Пишет во временный файл и подменяет, чтобы не оставлять битый JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")

    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=_default_serializer)
    os.replace(tmp_path, path)
    logger.info("JSON file saved: %s", path)
    return path


def write_spawn_points_json(
    path: PathLike, points: Sequence[Point2D], settings: ScatterSettings
) -> Path:
    """Записывает настройки и упорядоченный список точек."""
    data = {
        "version": "spawn_points_v1",
        "settings": settings.to_dict(),
        "count": len(points),
        "points": [[float(x), float(y)] for x, y in points],
    }
    return _atomic_write_json(path, data)


def write_objects_json(path: PathLike, objects: Sequence[PlacedObject]) -> Path:
    data = [
        {
            "id": obj.prefab_id,
            "position": list(obj.position),
            "rotation": [round(a, 2) for a in obj.rotation],
            "scale": obj.scale,
        }
        for obj in objects
    ]
    return _atomic_write_json(path, data)
