# ==============================================================================
# File: scatter_engine/core/export/__init__.py
# ==============================================================================
from __future__ import annotations

from .image_exporters import render_gizmos, write_scatter_preview
from .json_exporters import write_objects_json, write_spawn_points_json

__all__ = [
    "render_gizmos",
    "write_scatter_preview",
    "write_objects_json",
    "write_spawn_points_json",
]
