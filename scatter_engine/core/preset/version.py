# ========================
# file: scatter_engine/core/preset/version.py
# ========================
CURRENT_PRESET_VERSION = 1
