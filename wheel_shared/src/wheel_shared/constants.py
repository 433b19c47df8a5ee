import os

# Storage keys (overridable so several installs can share one redis db)
PERSIST_KEY = os.environ.get("WHEEL_PERSIST_KEY", "spinwheel:enabled")
CONFIG_KEY = os.environ.get("WHEEL_CONFIG_KEY", "spinwheel:config")

# Sector fills, cycled by position
PALETTE = [
    "rgba(255,240,240,0.85)",
    "rgba(240,255,240,0.85)",
    "rgba(240,244,255,0.85)",
    "rgba(255,249,230,0.85)",
]

FULL_REVOLUTIONS = 6
DEFAULT_SPIN_DURATION = 2500
DEFAULT_TITLE = "Spin Wheel"

# Geometry (same units as the wheel size)
DEFAULT_WHEEL_SIZE = 320
WHEEL_PADDING = 20
ITEM_SIZE = 28
EDGE_MARGIN = 2
TICK_INSET = 0
MIN_LABEL_RADIUS = 24
MIN_POINTER_LENGTH = 24
POINTER_INSET = 8

IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "webp", "gif"]
