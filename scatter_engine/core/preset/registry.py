# ========================
# file: scatter_engine/core/preset/registry.py
# ========================
from __future__ import annotations
from pathlib import Path
from typing import List

from .errors import NotFoundError

# Корни поиска пресетов; приложение может добавить свои через add_search_folder()
_PRESET_ROOTS: List[Path] = [Path(__file__).resolve().parents[2] / "presets"]


def resolve_preset_path(preset_id: str) -> Path:
    """Id вида 'grass/default' -> grass/default.json в одном из корней пресетов."""
    rel = preset_id.replace("\\", "/").strip("/") + ".json"
    for root in _PRESET_ROOTS:
        candidate = root / rel
        if candidate.is_file():
            return candidate
    raise NotFoundError(f"Preset id '{preset_id}' not found in presets/ folders")


def add_search_folder(path: str | Path) -> None:
    root = Path(path).resolve()
    if root not in _PRESET_ROOTS:
        _PRESET_ROOTS.append(root)


def list_presets() -> List[str]:
    """Все id пресетов из корней поиска, отсортированы; при совпадении побеждает первый корень."""
    ids = []
    for root in _PRESET_ROOTS:
        if not root.is_dir():
            continue
        for file in root.rglob("*.json"):
            preset_id = file.relative_to(root).with_suffix("").as_posix()
            if preset_id not in ids:
                ids.append(preset_id)
    return sorted(ids)
