"""Supabase-backed theme repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from photo_hunt.domain.themes import ThemeRecord
from photo_hunt.services.themes import ThemeRepository

_COLUMNS = "id, display_name, created, start, preview_photo_id"


@dataclass
class SupabaseThemeRepository(ThemeRepository):
    """Supabase implementation for theme queries."""

    client: Client

    def get_theme(self, theme_id: int) -> ThemeRecord | None:
        """Return a theme by id, if present."""
        response = (
            self.client.table("themes")
            .select(_COLUMNS)
            .eq("id", theme_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_theme(response.data[0])

    def first_theme_starting_between(
        self, after: datetime, before: datetime
    ) -> ThemeRecord | None:
        """Return the latest-starting theme strictly inside the window."""
        response = (
            self.client.table("themes")
            .select(_COLUMNS)
            .gt("start", after.isoformat())
            .lt("start", before.isoformat())
            .order("start", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_theme(response.data[0])

    def list_themes(self) -> list[ThemeRecord]:
        """Return all themes, latest start first."""
        response = (
            self.client.table("themes")
            .select(_COLUMNS)
            .order("start", desc=True)
            .execute()
        )
        return [_parse_theme(row) for row in response.data or []]

    def create_theme(
        self, display_name: str, created: datetime, start: datetime
    ) -> ThemeRecord:
        """Insert a theme and return it."""
        response = (
            self.client.table("themes")
            .insert(
                {
                    "display_name": display_name,
                    "created": created.isoformat(),
                    "start": start.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create theme")
        return _parse_theme(response.data[0])

    def update_theme(self, theme: ThemeRecord) -> ThemeRecord:
        """Write the mutable columns of a theme."""
        response = (
            self.client.table("themes")
            .update(
                {
                    "display_name": theme.display_name,
                    "start": theme.start.isoformat(),
                    "preview_photo_id": theme.preview_photo_id,
                }
            )
            .eq("id", theme.id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update theme")
        return _parse_theme(response.data[0])


def _parse_theme(row: dict[str, object]) -> ThemeRecord:
    preview = row.get("preview_photo_id")
    return ThemeRecord(
        id=int(row["id"]),
        display_name=str(row.get("display_name", "")),
        created=datetime.fromisoformat(str(row["created"])),
        start=datetime.fromisoformat(str(row["start"])),
        preview_photo_id=int(preview) if preview is not None else None,
    )
