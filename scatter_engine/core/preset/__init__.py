# ========================
# file: scatter_engine/core/preset/__init__.py
# ========================
from .version import CURRENT_PRESET_VERSION
from .errors import (
    DegenerateGeometryError,
    InvalidSettingsError,
    NotFoundError,
    ScatterError,
)
from .model import ScatterPreset, ScatterSettings
from .loader import load_preset, deep_merge
from .defaults import DEFAULT_SCATTER_PRESET
from .validators import validate_settings

__all__ = [
    "CURRENT_PRESET_VERSION",
    "ScatterError",
    "InvalidSettingsError",
    "NotFoundError",
    "DegenerateGeometryError",
    "ScatterPreset",
    "ScatterSettings",
    "load_preset",
    "deep_merge",
    "validate_settings",
    "DEFAULT_SCATTER_PRESET",
]
