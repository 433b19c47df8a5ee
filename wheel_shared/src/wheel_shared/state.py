"""Wheel state as an explicit reducer plus a thin stateful session.

``reduce`` is pure apart from the engine's random draw: it returns the next
state and a list of effects. ``WheelSession`` owns the current state and runs
the effects (persistence, selection callback).
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .active_set import active_index_map, active_items, initialize, resync, toggle
from .constants import DEFAULT_WHEEL_SIZE, PERSIST_KEY
from .enablement import EnablementStore
from .engine import RotationState, Selection, SpinEngine
from .layout import WheelLayout, compute_layout

logger = logging.getLogger(__name__)


# --- Actions ---

@dataclass(frozen=True)
class SetItems:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class ToggleItem:
    label: str


@dataclass(frozen=True)
class StartSpin:
    pass


@dataclass(frozen=True)
class Settle:
    pass


Action = Union[SetItems, ToggleItem, StartSpin, Settle]


# --- Effects ---

@dataclass(frozen=True)
class SaveEnablement:
    mapping: Dict[str, bool]


@dataclass(frozen=True)
class EmitSelection:
    item: str
    index: int


Effect = Union[SaveEnablement, EmitSelection]


@dataclass(frozen=True)
class WheelState:
    items: Tuple[str, ...] = ()
    enabled: Dict[str, bool] = field(default_factory=dict)
    rotation: RotationState = field(default_factory=RotationState)
    # item list received mid-spin, applied when the spin settles
    pending_items: Optional[Tuple[str, ...]] = None

    @property
    def spinning(self) -> bool:
        return self.rotation.spinning

    @property
    def active(self) -> List[str]:
        return active_items(self.items, self.enabled)


@dataclass(frozen=True)
class LegendRow:
    label: str
    included: bool
    number: Optional[int]
    selected: bool


def reduce(state: WheelState, action: Action, engine: SpinEngine) -> Tuple[WheelState, List[Effect]]:
    if isinstance(action, SetItems):
        items = tuple(action.items)
        if state.spinning:
            return replace(state, pending_items=items), []
        enabled = resync(items, state.enabled)
        effects: List[Effect] = [SaveEnablement(enabled)] if enabled != state.enabled else []
        return replace(state, items=items, enabled=enabled), effects

    if isinstance(action, ToggleItem):
        enabled = toggle(state.items, state.enabled, action.label, state.spinning)
        if enabled is state.enabled:
            return state, []
        return replace(state, enabled=enabled), [SaveEnablement(enabled)]

    if isinstance(action, StartSpin):
        rotation = engine.start(state.rotation, state.active)
        if rotation is state.rotation:
            return state, []
        return replace(state, rotation=rotation), []

    if isinstance(action, Settle):
        if not state.spinning:
            return state, []
        rotation, selection = engine.settle(state.rotation)
        nxt = replace(state, rotation=rotation, pending_items=None)
        effects: List[Effect] = []
        # saves go first so a failing selection callback can't skip them
        if state.pending_items is not None:
            nxt, effects = reduce(nxt, SetItems(state.pending_items), engine)
        if selection is not None:
            effects.append(EmitSelection(selection.item, selection.index))
        return nxt, effects

    raise TypeError(f"Unknown action: {action!r}")


class WheelSession:
    """One wheel bound to a persistence key.

    The enablement map is built once here from storage; afterwards it changes
    only through dispatched actions.
    """

    def __init__(
        self,
        items: Sequence[str],
        persist_key: str = PERSIST_KEY,
        store: Optional[EnablementStore] = None,
        engine: Optional[SpinEngine] = None,
        on_select: Optional[Callable[[str, int], None]] = None,
    ):
        self.persist_key = persist_key
        self.store = store or EnablementStore()
        self.engine = engine or SpinEngine()
        self.on_select = on_select
        self.selected_name: Optional[str] = None
        persisted = self.store.load(persist_key)
        self.state = WheelState(items=tuple(items), enabled=initialize(items, persisted))

    def dispatch(self, action: Action) -> List[Effect]:
        self.state, effects = reduce(self.state, action, self.engine)
        for effect in effects:
            self._run(effect)
        return effects

    def _run(self, effect: Effect) -> None:
        if isinstance(effect, SaveEnablement):
            self.store.save(self.persist_key, effect.mapping)
        elif isinstance(effect, EmitSelection):
            self.selected_name = effect.item
            logger.info("Wheel landed on %s (#%s)", effect.item, effect.index + 1)
            if self.on_select:
                self.on_select(effect.item, effect.index)

    # --- Queries ---

    @property
    def items(self) -> List[str]:
        return list(self.state.items)

    @property
    def enabled(self) -> Dict[str, bool]:
        return dict(self.state.enabled)

    @property
    def spinning(self) -> bool:
        return self.state.spinning

    @property
    def rotation(self) -> float:
        return self.state.rotation.rotation

    @property
    def can_spin(self) -> bool:
        return not self.spinning and bool(self.state.active)

    def compute_active_set(self) -> List[str]:
        return self.state.active

    def compute_layout(self, size: float = DEFAULT_WHEEL_SIZE) -> WheelLayout:
        return compute_layout(self.state.active, size=size)

    def legend_rows(self) -> List[LegendRow]:
        index_of = active_index_map(self.state.active)
        rows = []
        for label in self.state.items:
            included = self.state.enabled.get(label, True)
            idx = index_of.get(label)
            rows.append(LegendRow(
                label=label,
                included=included,
                number=idx + 1 if included and idx is not None else None,
                selected=label == self.selected_name,
            ))
        return rows

    # --- Commands ---

    def set_items(self, items: Sequence[str]) -> None:
        self.dispatch(SetItems(tuple(items)))

    def toggle_item(self, label: str) -> bool:
        before = self.state.enabled
        self.dispatch(ToggleItem(label))
        return self.state.enabled is not before

    def start_spin(self) -> Optional[float]:
        """Start a spin; return the rotation to animate toward, or None if refused."""
        if self.spinning:
            return None
        self.dispatch(StartSpin())
        if not self.spinning:
            return None
        logger.debug("Spin started toward %.3f (target #%s)", self.rotation, self.state.rotation.target_index)
        return self.rotation

    def settle_spin(self) -> Optional[Selection]:
        for effect in self.dispatch(Settle()):
            if isinstance(effect, EmitSelection):
                return Selection(effect.item, effect.index)
        return None
