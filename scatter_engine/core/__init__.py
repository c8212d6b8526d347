# scatter_engine/core/__init__.py
from .types import AreaBounds, Point2D, Vector3

__all__ = ["AreaBounds", "Point2D", "Vector3"]
