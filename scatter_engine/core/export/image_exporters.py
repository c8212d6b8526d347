# ==============================================================================
# File: scatter_engine/core/export/image_exporters.py
# Purpose: PNG preview of the spawn area, drawn from gizmo commands.
# ==============================================================================
from __future__ import annotations
import logging
from pathlib import Path
from typing import Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageColor, ImageDraw

from ...world.gizmos import DiscCommand, DrawCommand, RectCommand
from ..types import AreaBounds

logger = logging.getLogger(__name__)

BACKGROUND = (24, 24, 24, 255)


def _to_pixels(
    xy: np.ndarray, view: AreaBounds, px_per_unit: int, margin_px: int
) -> np.ndarray:
    """World (x, y) -> image (col, row); world +y points up, image rows go down."""
    xy = np.atleast_2d(np.asarray(xy, dtype=np.float64))
    cols = (xy[:, 0] - view.x) * px_per_unit + margin_px
    rows = (view.y_max - xy[:, 1]) * px_per_unit + margin_px
    return np.stack([cols, rows], axis=1)


def render_gizmos(
    commands: Sequence[DrawCommand],
    view: AreaBounds,
    px_per_unit: int = 16,
    margin_px: int = 4,
) -> Image.Image:
    """Rasterizes gizmo commands in order; `view` is the world rectangle to show."""
    size: Tuple[int, int] = (
        int(round(view.width * px_per_unit)) + 2 * margin_px,
        int(round(view.height * px_per_unit)) + 2 * margin_px,
    )
    img = Image.new("RGBA", size, BACKGROUND)
    draw = ImageDraw.Draw(img)

    for cmd in commands:
        if isinstance(cmd, RectCommand):
            b = cmd.bounds
            (x0, y0), (x1, y1) = _to_pixels(
                np.array([[b.x, b.y_max], [b.x_max, b.y]]), view, px_per_unit, margin_px
            )
            draw.rectangle([x0, y0, x1, y1], outline=ImageColor.getrgb(cmd.color))
        elif isinstance(cmd, DiscCommand):
            (cx, cy), = _to_pixels(np.array(cmd.center), view, px_per_unit, margin_px)
            r = max(1.0, cmd.radius * px_per_unit)
            draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=ImageColor.getrgb(cmd.color))
        else:
            raise TypeError(f"Unknown gizmo command: {type(cmd).__name__}")
    return img


def write_scatter_preview(
    path: Union[str, Path],
    commands: Sequence[DrawCommand],
    view: AreaBounds,
    px_per_unit: int = 16,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not commands:
        logger.warning("Preview %s has no gizmo commands (preview disabled?)", path)
    render_gizmos(commands, view, px_per_unit).save(path)
    logger.info("Preview saved: %s", path)
    return path
