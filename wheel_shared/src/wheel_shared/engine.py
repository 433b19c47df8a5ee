"""Spin state machine: IDLE -> SPINNING -> IDLE.

``start`` picks the target and publishes the final rotation; the view
animates toward it and calls ``settle`` once the animation ends. There is
no cancellation and no timeout: if the view never settles, the state stays
SPINNING.
"""

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple

from .constants import FULL_REVOLUTIONS


class SpinPhase(Enum):
    IDLE = "idle"
    SPINNING = "spinning"


@dataclass(frozen=True)
class Selection:
    item: str
    index: int


@dataclass(frozen=True)
class RotationState:
    rotation: float = 0.0
    phase: SpinPhase = SpinPhase.IDLE
    target_index: Optional[int] = None
    captured: Tuple[str, ...] = ()

    @property
    def spinning(self) -> bool:
        return self.phase is SpinPhase.SPINNING


def normalize(angle: float) -> float:
    """Reduce ``angle`` to [0, 360)."""
    out = angle % 360.0
    # tiny negatives round up to exactly 360.0
    if out >= 360.0:
        out = 0.0
    return out


def landed_angle(rotation: float) -> float:
    """Wheel angle under the fixed pointer after ``rotation``."""
    return normalize(-rotation)


def final_rotation(current: float, target_index: int, angle: float, revolutions: int = FULL_REVOLUTIONS) -> float:
    base = normalize(current)
    target_angle = -(target_index + 0.5) * angle
    delta = target_angle - base
    return current + revolutions * 360 + delta


class SpinEngine:
    def __init__(self, rng: Optional[random.Random] = None, revolutions: int = FULL_REVOLUTIONS):
        # delta lies in (-720, 0), so two turns keep every spin moving forward
        if revolutions < 2:
            raise ValueError(f"revolutions must be >= 2, got {revolutions}")
        self.rng = rng or random.Random()
        self.revolutions = revolutions

    def start(self, state: RotationState, active: Sequence[str]) -> RotationState:
        if not active or state.spinning:
            return state
        count = len(active)
        target = self.rng.randrange(count)
        angle = 360.0 / count
        return RotationState(
            rotation=final_rotation(state.rotation, target, angle, self.revolutions),
            phase=SpinPhase.SPINNING,
            target_index=target,
            captured=tuple(active),
        )

    def settle(self, state: RotationState) -> Tuple[RotationState, Optional[Selection]]:
        if not state.spinning:
            return state, None
        idle = replace(state, phase=SpinPhase.IDLE)
        idx = state.target_index
        if idx is None or idx >= len(state.captured):
            return idle, None
        return idle, Selection(item=state.captured[idx], index=idx)
