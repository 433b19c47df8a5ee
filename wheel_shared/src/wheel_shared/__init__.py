from .active_set import active_items, initialize, resync, toggle
from .config import WheelConfig, parse_items
from .enablement import EnablementStore
from .engine import RotationState, Selection, SpinEngine, SpinPhase
from .layout import WheelLayout, compute_layout
from .state import WheelSession, WheelState, reduce

__all__ = [
    "EnablementStore",
    "RotationState",
    "Selection",
    "SpinEngine",
    "SpinPhase",
    "WheelConfig",
    "WheelLayout",
    "WheelSession",
    "WheelState",
    "active_items",
    "compute_layout",
    "initialize",
    "parse_items",
    "reduce",
    "resync",
    "toggle",
]
