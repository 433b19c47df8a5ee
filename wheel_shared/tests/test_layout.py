import pytest

from wheel_shared.constants import PALETTE
from wheel_shared.layout import (
    color_assignment,
    compute_layout,
    conic_gradient,
    label_radius,
    pointer_length,
    sector_angle,
    sector_angular_position,
    sector_at_pointer,
)


def test_sector_angle():
    assert sector_angle(0) == 0
    assert sector_angle(1) == 360
    assert sector_angle(3) == 120
    assert sector_angle(8) == 45


def test_colors_cycle_by_position():
    assert color_assignment(4) == PALETTE
    assert color_assignment(6) == PALETTE + PALETTE[:2]
    assert color_assignment(0) == []
    assert color_assignment(1) == [PALETTE[0]]


def test_five_sectors_repair_the_wrap():
    colors = color_assignment(5)
    assert colors[4] != colors[0]
    assert colors[4] != colors[3]
    assert colors[:4] == PALETTE


@pytest.mark.parametrize("count", [2, 3, 4, 5, 6, 7, 8, 9, 13, 21])
def test_no_adjacent_repeats_around_the_circle(count):
    colors = color_assignment(count)
    for i in range(count):
        assert colors[i] != colors[(i + 1) % count]


def test_label_radius_and_floor():
    assert label_radius(140, 28, 2) == 124
    assert label_radius(10, 28, 2) == 24
    # rounds halves up
    assert label_radius(140.5, 28, 2) == 125


def test_pointer_length():
    assert pointer_length(140) == 132
    assert pointer_length(20) == 24


def test_sector_angular_position_is_midpoint():
    assert sector_angular_position(0, 120) == 60
    assert sector_angular_position(2, 120) == 300


def test_compute_layout_scenario_a():
    layout = compute_layout(["Alice", "Bob", "Carol"])
    assert layout.sector_angle == 120
    assert layout.wheel_radius == 140
    assert layout.label_radius == 124
    assert [s.label for s in layout.sectors] == ["Alice", "Bob", "Carol"]
    assert [s.mid for s in layout.sectors] == [60, 180, 300]
    assert layout.sectors[-1].end == 360
    assert [s.color for s in layout.sectors] == layout.colors


def test_compute_layout_empty():
    layout = compute_layout([])
    assert layout.sector_angle == 0
    assert layout.sectors == []
    assert conic_gradient(layout) == ""


def test_conic_gradient():
    layout = compute_layout(["A", "B", "C"])
    assert conic_gradient(layout) == (
        f"conic-gradient({PALETTE[0]} 0deg 120deg, {PALETTE[1]} 120deg 240deg, {PALETTE[2]} 240deg 360deg)"
    )


@pytest.mark.parametrize("count", [1, 3, 7])
def test_sector_at_pointer_inverts_landing(count):
    angle = sector_angle(count)
    for idx in range(count):
        rotation = 360 * 4 - (idx + 0.5) * angle
        assert sector_at_pointer(rotation, count) == idx


def test_sector_at_pointer_empty():
    assert sector_at_pointer(123.0, 0) is None
