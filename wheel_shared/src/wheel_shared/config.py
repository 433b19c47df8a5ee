import re
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_SPIN_DURATION, DEFAULT_TITLE


def parse_items(text: str) -> List[str]:
    """Split editor text into items: one per line, trimmed, blanks dropped.

    Order is kept and duplicates are not removed.
    """
    lines = re.split(r"\r?\n", text or "")
    return [ln.strip() for ln in lines if ln.strip()]


class WheelConfig(BaseModel):
    """Snapshot produced by the editor and consumed by the wheel view."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str = Field(default=DEFAULT_TITLE, description="Heading shown above the wheel")
    background_url: str = Field(default="", alias="backgroundUrl", description="URL or data URI")
    items: List[str] = Field(default_factory=list)
    spin_duration: int = Field(default=DEFAULT_SPIN_DURATION, alias="spinDuration", gt=0, description="Milliseconds")

    @field_validator("items", mode="before")
    @classmethod
    def _clean_items(cls, value):
        if isinstance(value, str):
            return parse_items(value)
        return [str(v).strip() for v in (value or []) if v is not None and str(v).strip()]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
