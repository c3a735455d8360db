"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from photo_hunt.domain.photos import PhotoRecord
from photo_hunt.services.photos import PhotoRepository

_COLUMNS = (
    "id, owner_user_id, owner_display_name, owner_profile_url, owner_profile_photo, "
    "theme_id, theme_display_name, image_blob_key, created"
)


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .eq("id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def list_photos(
        self,
        theme_id: int | None = None,
        owner_user_ids: list[int] | None = None,
    ) -> list[PhotoRecord]:
        """Return photos matching the filters, newest first."""
        query = self.client.table("photos").select(_COLUMNS)
        if theme_id is not None:
            query = query.eq("theme_id", theme_id)
        if owner_user_ids is not None:
            query = query.in_("owner_user_id", owner_user_ids)
        response = query.order("created", desc=True).execute()
        return [_parse_photo(row) for row in response.data or []]

    def create_photo(self, payload: dict[str, object]) -> PhotoRecord:
        """Insert a photo row and return it."""
        row = dict(payload)
        created = row.get("created")
        if isinstance(created, datetime):
            row["created"] = created.isoformat()
        response = self.client.table("photos").insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create photo")
        return _parse_photo(response.data[0])

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo row."""
        self.client.table("photos").delete().eq("id", photo_id).execute()


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    return PhotoRecord(
        id=int(row["id"]),
        owner_user_id=int(row["owner_user_id"]),
        theme_id=int(row["theme_id"]),
        image_blob_key=row.get("image_blob_key"),
        created=datetime.fromisoformat(str(row["created"])),
        owner_display_name=row.get("owner_display_name"),
        owner_profile_url=row.get("owner_profile_url"),
        owner_profile_photo=row.get("owner_profile_photo"),
        theme_display_name=row.get("theme_display_name"),
    )
