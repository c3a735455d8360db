"""Domain models for daily themes."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from photo_hunt.domain.entities import Entity

THEME_KIND = "photohunt#theme"


@dataclass(frozen=True, eq=False)
class ThemeRecord(Entity):
    """A daily contest topic scheduled to become active at ``start``."""

    KIND: ClassVar[str] = "Theme"

    id: int
    display_name: str
    created: datetime
    start: datetime
    preview_photo_id: int | None = None
