# ========================
# file: scatter_engine/core/preset/validators.py
# ========================
from __future__ import annotations
import math
import numbers
from typing import Any, Dict

from .errors import InvalidSettingsError
from .model import ScatterSettings


_SCATTER_KEYS = (
    "area_half_length",
    "num_rings",
    "ring_radius_increment",
    "stagger_ring_modulo",
    "stagger_ring_offset",
    "circle_center_offset",
)
# Эти поля идут в range() и в %, поэтому только целые
_SCATTER_INT_KEYS = ("num_rings", "stagger_ring_modulo")


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidSettingsError(msg)


def _is_number(v: Any) -> bool:
    """Настоящее конечное число (int/float/numpy), не bool и не строка."""
    if isinstance(v, bool) or not isinstance(v, numbers.Real):
        return False
    return math.isfinite(float(v))


def _is_integral(v: Any) -> bool:
    """Целое по значению: 3 и 3.0 подходят (JSON), 2.5 нет."""
    return _is_number(v) and float(v).is_integer()


def _is_int(v: Any) -> bool:
    """Целое по типу: то, что можно без приведения отдать в range()."""
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def _is_hex_color(v: Any) -> bool:
    s = str(v)
    if not s.startswith("#") or len(s) not in (7, 9):
        return False
    try:
        int(s[1:], 16)
    except ValueError:
        return False
    return True


def validate_settings(settings: ScatterSettings) -> None:
    """Проверяет типы и диапазоны ScatterSettings.

    Бросает InvalidSettingsError на первой же ошибке.
    """
    for key in _SCATTER_KEYS:
        _require(_is_number(getattr(settings, key)), f"scatter.{key} must be a finite number")
    for key in _SCATTER_INT_KEYS:
        _require(_is_int(getattr(settings, key)), f"scatter.{key} must be an integer")

    _require(settings.area_half_length > 0.0, "scatter.area_half_length must be > 0")
    _require(settings.num_rings >= 0, "scatter.num_rings must be >= 0")
    _require(
        settings.ring_radius_increment >= 0.0,
        "scatter.ring_radius_increment must be >= 0",
    )
    # modulo по нулю -> ZeroDivisionError в ring_radius
    _require(settings.stagger_ring_modulo != 0, "scatter.stagger_ring_modulo must be != 0")


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Проверка смерженного словаря пресета.

    Бросает InvalidSettingsError на первой же ошибке.
    """
    _require(
        isinstance(cfg.get("id"), str) and cfg["id"],
        "Preset.id must be non-empty string",
    )

    sc = cfg.get("scatter")
    _require(isinstance(sc, dict), "Preset.scatter section is required")
    for key in _SCATTER_KEYS:
        _require(key in sc, f"scatter.{key} is required")
        _require(_is_number(sc[key]), f"scatter.{key} must be a finite number")
    for key in _SCATTER_INT_KEYS:
        _require(_is_integral(sc[key]), f"scatter.{key} must be an integer")

    validate_settings(ScatterSettings.from_dict(sc))

    # Размещение
    pl = dict(cfg.get("placement", {}))
    if pl:
        prefab_id = pl.get("prefab_id", "grass")
        _require(
            isinstance(prefab_id, str) and prefab_id,
            "placement.prefab_id must be non-empty string",
        )
        center = pl.get("center", [0.0, 0.0, 0.0])
        _require(
            isinstance(center, (list, tuple)) and len(center) == 3,
            "placement.center must be [x, y, z]",
        )
        _require(all(_is_number(c) for c in center), "placement.center must be numeric")
        _require(_is_integral(pl.get("seed", 0)), "placement.seed must be an integer")
        _require(
            isinstance(pl.get("random_yaw", True), bool),
            "placement.random_yaw must be true or false",
        )

    # Превью: enabled и point_radius читаются всегда, даже если превью выключено
    pv = dict(cfg.get("preview", {}))
    _require(
        isinstance(pv.get("enabled", True), bool),
        "preview.enabled must be true or false",
    )
    _require(
        _is_number(pv.get("point_radius", 0.0)) and float(pv.get("point_radius", 0.0)) >= 0.0,
        "preview.point_radius must be >= 0",
    )
    if pv.get("enabled", True):
        for k in ("rect_color", "points_color"):
            _require(
                _is_hex_color(pv.get(k, "")),
                f"preview.{k} must be hex like '#RRGGBB' or '#RRGGBBAA'",
            )
        _require(
            _is_integral(pv.get("px_per_unit", 1)) and int(pv.get("px_per_unit", 1)) >= 1,
            "preview.px_per_unit must be an integer >= 1",
        )
