from typing import Dict, List, Optional, Sequence


def initialize(items: Sequence[str], persisted: Optional[Dict[str, bool]]) -> Dict[str, bool]:
    """Build the enablement map for a new session.

    Saved decisions are reused for items that still exist; everything else
    starts included. Saved entries for vanished items are ignored.
    """
    persisted = persisted or {}
    return {item: persisted.get(item, True) for item in items}


def resync(items: Sequence[str], current: Dict[str, bool]) -> Dict[str, bool]:
    """Re-key ``current`` to match a changed item list."""
    return {item: current.get(item, True) for item in items}


def toggle(items: Sequence[str], current: Dict[str, bool], target: str, spinning: bool) -> Dict[str, bool]:
    if spinning or target not in items:
        return current
    nxt = dict(current)
    nxt[target] = not current.get(target, True)
    return nxt


def active_items(items: Sequence[str], mapping: Dict[str, bool]) -> List[str]:
    return [item for item in items if mapping.get(item, True)]


def active_index_map(active: Sequence[str]) -> Dict[str, int]:
    # duplicate labels resolve to their last position
    return {item: idx for idx, item in enumerate(active)}
