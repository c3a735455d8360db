"""Theme scheduling."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo

from photo_hunt.domain.errors import EntityNotFoundError
from photo_hunt.domain.themes import ThemeRecord

if TYPE_CHECKING:
    from photo_hunt.domain.photos import PhotoRecord
    from photo_hunt.services.photos import PhotoRepository

_logger = logging.getLogger(__name__)


class ThemeRepository(Protocol):
    """Persistence interface for themes."""

    def get_theme(self, theme_id: int) -> ThemeRecord | None:
        """Return a theme by id, if present."""

    def first_theme_starting_between(
        self, after: datetime, before: datetime
    ) -> ThemeRecord | None:
        """Return the theme with after < start < before and the latest start."""

    def list_themes(self) -> list[ThemeRecord]:
        """Return all themes, latest start first."""

    def create_theme(
        self, display_name: str, created: datetime, start: datetime
    ) -> ThemeRecord:
        """Create and return a theme."""

    def update_theme(self, theme: ThemeRecord) -> ThemeRecord:
        """Persist all fields of an existing theme."""


@dataclass
class ThemeService:
    """Service for selecting and scheduling daily themes."""

    repository: ThemeRepository
    photo_repository: "PhotoRepository"
    timezone: str = "UTC"

    def current_theme(self, now: datetime | None = None) -> ThemeRecord | None:
        """Return the theme active today, or None when none is scheduled.

        When several themes start on the same day the latest start wins.
        """
        day_start, day_end = day_bounds(now, ZoneInfo(self.timezone))
        theme = self.repository.first_theme_starting_between(day_start, day_end)
        if theme is None:
            _logger.info("No current theme: day_start=%s", day_start.isoformat())
        return theme

    def get_theme(self, theme_id: int) -> ThemeRecord:
        """Return a theme or raise ``EntityNotFoundError``."""
        theme = self.repository.get_theme(theme_id)
        if theme is None:
            raise EntityNotFoundError(ThemeRecord.KIND, theme_id)
        return theme

    def list_themes(self) -> list[ThemeRecord]:
        """Return all themes, latest start first."""
        return self.repository.list_themes()

    def create_theme(
        self, display_name: str, start: datetime, now: datetime | None = None
    ) -> ThemeRecord:
        """Schedule a theme. Overlapping days are allowed.

        Naive ``start`` and ``now`` values are taken as local time.
        """
        tz = ZoneInfo(self.timezone)
        created = to_local(now or datetime.now(tz=UTC), tz)
        return self.repository.create_theme(display_name, created, to_local(start, tz))

    def set_preview_photo(self, theme_id: int, photo_id: int | None) -> ThemeRecord:
        """Point the theme's preview at a photo without taking ownership of it."""
        theme = self.get_theme(theme_id)
        return self.repository.update_theme(replace(theme, preview_photo_id=photo_id))

    def preview_photo(self, theme: ThemeRecord) -> "PhotoRecord | None":
        """Resolve the theme's preview photo, if it still exists."""
        if theme.preview_photo_id is None:
            return None
        return self.photo_repository.get_photo(theme.preview_photo_id)


def to_local(value: datetime, tz: ZoneInfo) -> datetime:
    """Convert an aware value to ``tz``, or attach ``tz`` to a naive one."""
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def day_bounds(now: datetime | None, tz: ZoneInfo) -> tuple[datetime, datetime]:
    """Return local midnight and 23:59:59 for the day containing ``now``.

    Aware values are converted to ``tz``; naive values are taken as local.
    """
    local = to_local(now or datetime.now(tz=tz), tz)
    start = local.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start.replace(hour=23, minute=59, second=59)
    return start, end
