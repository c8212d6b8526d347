# ==============================================================================
# Файл: scatter_engine/pipeline.py
# Назначение: пресет -> точки спавна -> размещённые объекты -> файлы на диске.
# ==============================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .core.export import write_objects_json, write_scatter_preview, write_spawn_points_json
from .core.preset import load_preset
from .core.types import AreaBounds
from .world.gizmos import GizmoStyle, build_gizmo_commands
from .world.placement import GrassSpawner

logger = logging.getLogger(__name__)


def run_scatter(
    source: Union[str, Path, Mapping[str, Any]],
    out_dir: Union[str, Path],
    overrides: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Загружает пресет и пишет spawn_points.json, objects.json и (если включено) preview.png.
    Возвращает пути к файлам и число точек.
    """
    preset = load_preset(source, overrides)
    out = Path(out_dir)

    spawner = GrassSpawner.from_preset(preset)
    points = spawner.calculate_points()
    objects = spawner.spawn(
        points,
        seed=int(preset.placement.get("seed", 0)),
        random_yaw=bool(preset.placement.get("random_yaw", True)),
    )

    result: Dict[str, Any] = {
        "preset_id": preset.id,
        "count": len(points),
        "spawn_points": str(write_spawn_points_json(out / "spawn_points.json", points, preset.scatter)),
        "objects": str(write_objects_json(out / "objects.json", objects)),
        "preview": None,
    }

    style = GizmoStyle.from_dict(preset.preview)
    if style.enabled:
        commands = build_gizmo_commands(preset.scatter, points, style)
        view = AreaBounds.centered_square(preset.scatter.area_half_length)
        px_per_unit = int(preset.preview.get("px_per_unit", 16))
        result["preview"] = str(write_scatter_preview(out / "preview.png", commands, view, px_per_unit))

    logger.info("Scatter '%s': %d points -> %s", preset.id, len(points), out)
    return result
