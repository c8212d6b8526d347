# ========================
# file: scatter_engine/core/preset/errors.py
# ========================
class ScatterError(Exception):
    """Base error for the scatter engine."""


class InvalidSettingsError(ScatterError):
    """Raised when scatter settings or a preset fail validation."""


class NotFoundError(ScatterError):
    """Raised when a preset id or path cannot be resolved."""


class DegenerateGeometryError(ScatterError):
    """Raised when circle geometry has no defined solution (coincident centers)."""
