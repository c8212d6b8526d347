# ========================
# file: scatter_engine/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from .version import CURRENT_PRESET_VERSION

# Python mirror of presets/grass/default.json; every loaded preset is merged on top of it
DEFAULT_SCATTER_PRESET: Dict[str, Any] = {
    "id": "grass/default",
    "version": CURRENT_PRESET_VERSION,
    "scatter": {
        "area_half_length": 10.0,
        "num_rings": 40,
        "ring_radius_increment": 0.5,
        "stagger_ring_modulo": 2,
        "stagger_ring_offset": 0.25,
        "circle_center_offset": 2.0,
    },
    "placement": {
        "prefab_id": "grass",
        "seed": 0,
        "center": [0.0, 0.0, 0.0],
        "random_yaw": True,
    },
    "preview": {
        "enabled": True,
        "rect_color": "#FFFFFF",
        "points_color": "#5FAF3A",
        "point_radius": 0.1,
        "px_per_unit": 16,
    },
}
