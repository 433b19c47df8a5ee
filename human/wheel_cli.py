#!/usr/bin/env python3
import logging
import os
import sys
import time
from typing import Callable, Iterator, List, Optional

from editor.config_editor import ConfigDraft
from editor.config_store import load_config, save_config
from wheel_shared.config import WheelConfig
from wheel_shared.constants import PERSIST_KEY
from wheel_shared.layout import conic_gradient, sector_at_pointer
from wheel_shared.state import WheelSession

FRAME_MS = 40


def ease_out_cubic(progress: float) -> float:
    return 1 - (1 - progress) ** 3


def animation_frames(start: float, end: float, duration_ms: int, frame_ms: int = FRAME_MS) -> Iterator[float]:
    """Rotation values from start to end over duration_ms; the last one is exactly end."""
    steps = max(1, int(duration_ms // frame_ms))
    for i in range(1, steps + 1):
        if i == steps:
            yield end
        else:
            yield start + (end - start) * ease_out_cubic(i / steps)


def render_legend(session: WheelSession) -> List[str]:
    lines = []
    for row in session.legend_rows():
        box = "[x]" if row.included else "[ ]"
        number = str(row.number) if row.number is not None else "-"
        marker = "  <" if row.selected else ""
        lines.append(f"{box} {number:>3}  {row.label}{marker}")
    return lines


def render_wheel(session: WheelSession, config: WheelConfig) -> List[str]:
    layout = session.compute_layout()
    lines = [f"=== {config.title} ==="]
    if config.background_url:
        bg = config.background_url
        lines.append(f"Background: {bg[:60] + '...' if len(bg) > 60 else bg}")
    if not layout.sectors:
        lines.append("(no active items)")
        return lines
    for sector in layout.sectors:
        lines.append(
            f"  #{sector.index + 1:<3} {sector.start:7.2f}-{sector.end:7.2f} deg  {sector.color}  {sector.label}"
        )
    lines.append(
        f"Radius {layout.wheel_radius:g}, labels at {layout.label_radius}, pointer {layout.pointer_length:g}"
    )
    lines.append(f"Fill: {conic_gradient(layout)}")
    under = sector_at_pointer(session.rotation, len(layout.sectors))
    lines.append(f"Pointer: {layout.sectors[under].label}")
    return lines


def show_state(session: WheelSession, config: WheelConfig, legend_position: str = "right") -> None:
    wheel = render_wheel(session, config)
    if legend_position == "none":
        print("\n".join(wheel))
        return
    legend = render_legend(session)
    if legend_position == "top":
        print("\n".join(legend + [""] + wheel))
    else:
        print("\n".join(wheel + ["", "Legend:"] + legend))


def run_spin(session: WheelSession, duration_ms: int, sleep: Optional[Callable[[float], None]] = None) -> Optional[str]:
    sleep = sleep or time.sleep
    start = session.rotation
    target = session.start_spin()
    if target is None:
        print("Nothing to spin: enable at least one item.")
        return None
    captured = session.state.rotation.captured
    for angle in animation_frames(start, target, duration_ms):
        under = sector_at_pointer(angle, len(captured))
        print(f"\r  > {captured[under]:<30}", end="", flush=True)
        sleep(FRAME_MS / 1000)
    print()
    # animation end
    selection = session.settle_spin()
    return selection.item if selection else None


def _read_items_text() -> str:
    print("Enter items, one per line. Finish with an empty line.")
    lines = []
    while True:
        line = input()
        if not line.strip():
            break
        lines.append(line)
    return "\n".join(lines)


def edit_config(config: WheelConfig) -> Optional[WheelConfig]:
    draft = ConfigDraft(config)
    draft.open()
    title = input(f"Title [{draft.title}]: ").strip()
    if title:
        draft.title = title
    bg = input("Background URL or local image path (blank keeps current): ").strip()
    if bg:
        if os.path.exists(bg):
            if not draft.pick_background(bg):
                print("Could not load that image; background unchanged.")
        else:
            draft.background_url = bg
    print("Current items:\n" + (draft.items_text or "(none)"))
    if input("Replace items? [y/N] ").strip().lower() == "y":
        draft.items_text = _read_items_text()
    duration = input(f"Spin duration ms [{draft.spin_duration}]: ").strip()
    if duration and not draft.set_spin_duration(duration):
        print("Not a number; keeping the previous duration.")
    if not draft.can_save:
        print("Need at least one item and a positive duration. Nothing saved.")
        draft.cancel()
        return None
    return draft.save()


def toggle_prompt(session: WheelSession) -> None:
    rows = session.legend_rows()
    for i, row in enumerate(rows, start=1):
        print(f"  {i}. {row.label} ({'on' if row.included else 'off'})")
    choice = input("Item number to toggle: ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(rows):
        print("Invalid choice.")
        return
    label = rows[int(choice) - 1].label
    if not session.toggle_item(label):
        print("Can't change items while the wheel is spinning.")


def _menu_loop() -> int:
    config = load_config()
    session = WheelSession(
        config.items,
        persist_key=PERSIST_KEY,
        on_select=lambda item, idx: print(f"Selected: {item} (#{idx + 1})"),
    )
    legend_position = os.environ.get("WHEEL_LEGEND", "right")

    show_state(session, config, legend_position)
    while True:
        spin_label = "Spin" if session.can_spin else "Spin (disabled)"
        print(f"\nChoose action: [1] {spin_label}  [2] Toggle item  [3] Edit config  [q] Quit")
        choice = input("> ").strip().lower()
        if choice == "q":
            return 0
        if choice not in {"1", "2", "3"}:
            print("Invalid choice. Try again.")
            continue

        if choice == "1":
            run_spin(session, config.spin_duration)
        elif choice == "2":
            toggle_prompt(session)
        elif choice == "3":
            updated = edit_config(config)
            if updated is not None:
                config = updated
                save_config(config)
                session.set_items(config.items)
        show_state(session, config, legend_position)


def main() -> int:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING"))
    try:
        return _menu_loop()
    except (KeyboardInterrupt, EOFError):
        print("\nStopped by user.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
