"""Editable draft of a WheelConfig.

The draft holds raw field values the way a settings form does: the item list
is free text (one item per line) until the draft is saved.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from wheel_shared.config import WheelConfig, parse_items
from wheel_shared.constants import DEFAULT_SPIN_DURATION

from .image_helper import to_data_uri

logger = logging.getLogger(__name__)


class ConfigDraft:
    def __init__(self, initial: Optional[WheelConfig] = None,
                 read_image: Callable[[Union[str, Path]], Optional[str]] = to_data_uri):
        self.is_open = False
        self._read_image = read_image
        self._initial = initial or WheelConfig()
        self._reset(self._initial)

    def _reset(self, cfg: WheelConfig) -> None:
        self.title = cfg.title or ""
        self.background_url = cfg.background_url or ""
        self.items_text = "\n".join(cfg.items)
        self.spin_duration = cfg.spin_duration or DEFAULT_SPIN_DURATION

    def open(self, initial: Optional[WheelConfig] = None) -> None:
        """Show the form; fields always restart from ``initial``."""
        if initial is not None:
            self._initial = initial
        self._reset(self._initial)
        self.is_open = True

    def cancel(self) -> None:
        self.is_open = False

    @property
    def parsed_items(self) -> List[str]:
        return parse_items(self.items_text)

    @property
    def can_save(self) -> bool:
        return bool(self.parsed_items) and self.spin_duration > 0

    def set_spin_duration(self, value) -> bool:
        try:
            self.spin_duration = int(value)
        except (TypeError, ValueError):
            return False
        return True

    def pick_background(self, path: Union[str, Path]) -> bool:
        """Embed a local image as the background; unchanged on failure."""
        uri = self._read_image(path)
        if not uri:
            return False
        self.background_url = uri
        return True

    def save(self) -> Optional[WheelConfig]:
        if not self.can_save:
            return None
        cfg = WheelConfig(
            title=self.title,
            background_url=self.background_url,
            items=self.parsed_items,
            spin_duration=self.spin_duration,
        )
        self._initial = cfg
        self.is_open = False
        logger.info("Saved wheel config with %d items", len(cfg.items))
        return cfg
