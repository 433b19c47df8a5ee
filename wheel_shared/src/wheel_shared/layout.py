"""Wheel geometry derived from the active set.

Angles are degrees, clockwise from the pointer at 12 o'clock. Sector ``i``
spans ``[i * angle, (i + 1) * angle)`` in wheel coordinates before rotation.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .constants import (
    DEFAULT_WHEEL_SIZE,
    EDGE_MARGIN,
    ITEM_SIZE,
    MIN_LABEL_RADIUS,
    MIN_POINTER_LENGTH,
    PALETTE,
    POINTER_INSET,
    TICK_INSET,
    WHEEL_PADDING,
)
from .engine import normalize


@dataclass(frozen=True)
class Sector:
    index: int
    label: str
    start: float
    end: float
    mid: float
    color: str


@dataclass(frozen=True)
class WheelLayout:
    sector_angle: float
    colors: List[str]
    wheel_radius: float
    label_radius: int
    pointer_length: float
    sectors: List[Sector] = field(default_factory=list)


def sector_angle(active_count: int) -> float:
    if active_count <= 0:
        return 0.0
    return 360.0 / active_count


def color_assignment(active_count: int) -> List[str]:
    """Cycle the palette by position.

    With ``n % 4 == 1`` the last sector would share a color with the first
    one across the wrap, so it takes a palette color distinct from both
    neighbours. Only that wrap case is repaired; other counts are already
    proper with a 4-color cycle except ``n == 1``, which has no neighbour.
    """
    seq = [PALETTE[i % len(PALETTE)] for i in range(active_count)]
    if active_count > 1 and active_count % 4 == 1:
        first = seq[0]
        prev = seq[-2]
        alt = next((c for c in PALETTE if c != first and c != prev), None)
        if alt is not None:
            seq[-1] = alt
    return seq


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def label_radius(wheel_radius: float, item_size: float, edge_margin: float, tick_inset: float = TICK_INSET) -> int:
    return max(MIN_LABEL_RADIUS, _round_half_up(wheel_radius - (item_size / 2 + tick_inset + edge_margin)))


def pointer_length(wheel_radius: float) -> float:
    return max(MIN_POINTER_LENGTH, wheel_radius - POINTER_INSET)


def sector_angular_position(index: int, angle: float) -> float:
    return index * angle + angle / 2


def sector_at_pointer(rotation: float, active_count: int) -> Optional[int]:
    """Index of the sector sitting under the pointer after ``rotation``."""
    if active_count <= 0:
        return None
    angle = sector_angle(active_count)
    under = normalize(-rotation)
    return min(int(under // angle), active_count - 1)


def compute_layout(
    active: Sequence[str],
    size: float = DEFAULT_WHEEL_SIZE,
    item_size: float = ITEM_SIZE,
    edge_margin: float = EDGE_MARGIN,
) -> WheelLayout:
    count = len(active)
    angle = sector_angle(count)
    colors = color_assignment(count)
    radius = size / 2 - WHEEL_PADDING
    sectors = [
        Sector(
            index=i,
            label=label,
            start=i * angle,
            end=(i + 1) * angle,
            mid=sector_angular_position(i, angle),
            color=colors[i],
        )
        for i, label in enumerate(active)
    ]
    return WheelLayout(
        sector_angle=angle,
        colors=colors,
        wheel_radius=radius,
        label_radius=label_radius(radius, item_size, edge_margin),
        pointer_length=pointer_length(radius),
        sectors=sectors,
    )


def conic_gradient(layout: WheelLayout) -> str:
    if not layout.sectors or layout.sector_angle == 0:
        return ""
    parts = [f"{s.color} {s.start:g}deg {s.end:g}deg" for s in layout.sectors]
    return f"conic-gradient({', '.join(parts)})"
