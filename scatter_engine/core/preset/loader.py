# ========================
# file: scatter_engine/core/preset/loader.py
# ========================
from __future__ import annotations
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .defaults import DEFAULT_SCATTER_PRESET
from .model import ScatterPreset, ScatterSettings
from .registry import resolve_preset_path
from .validators import validate_dict
from .version import CURRENT_PRESET_VERSION

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_preset(
    source: Union[str, Path, Mapping[str, Any]],
    overrides: Mapping[str, Any] | None = None,
) -> ScatterPreset:
    """Load a scatter preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g. 'grass/default'), path to a JSON file, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        ScatterPreset (immutable dataclass) ready for use
    Raises:
        NotFoundError: the id does not resolve to a file
        InvalidSettingsError: the merged preset fails validation
    """
    if isinstance(source, Path) or (isinstance(source, str) and Path(source).is_file()):
        data = _load_json_file(Path(source))
    elif isinstance(source, str):
        data = _load_json_file(resolve_preset_path(source))
    elif isinstance(source, Mapping):
        data = dict(source)
    else:
        raise TypeError("source must be str path/id, Path or dict")

    merged = deep_merge(DEFAULT_SCATTER_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    merged["version"] = CURRENT_PRESET_VERSION

    validate_dict(merged)

    preset = ScatterPreset(
        id=merged["id"],
        version=int(merged["version"]),
        scatter=ScatterSettings.from_dict(merged["scatter"]),
        placement=dict(merged.get("placement", {})),
        preview=dict(merged.get("preview", {})),
    )
    logger.debug("Loaded scatter preset '%s': %s", preset.id, preset.scatter)
    return preset
