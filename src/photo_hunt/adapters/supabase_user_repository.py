"""Supabase-backed user repository."""

from dataclasses import asdict, dataclass

from supabase import Client

from photo_hunt.domain.entities import EntityKey
from photo_hunt.domain.users import UserRecord
from photo_hunt.services.users import UserRepository

_COLUMNS = (
    "id, email, google_user_id, google_display_name, google_public_profile_url, "
    "google_public_profile_photo_url, google_access_token, google_refresh_token, "
    "google_expires_in, google_expires_at"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_users(self, keys: list[EntityKey]) -> dict[EntityKey, UserRecord]:
        """Batch load users, keyed in request order; missing ids are omitted."""
        ids = list(dict.fromkeys(key.id for key in keys))
        if not ids:
            return {}
        response = self.client.table("users").select(_COLUMNS).in_("id", ids).execute()
        by_id = {row["id"]: _parse_user(row) for row in response.data or []}
        return {
            UserRecord.key(user_id): by_id[user_id]
            for user_id in ids
            if user_id in by_id
        }

    def get_by_google_user_id(self, google_user_id: str) -> UserRecord | None:
        """Return the user linked to a Google account, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("google_user_id", google_user_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user: UserRecord) -> UserRecord:
        """Write every column of an existing user."""
        payload = asdict(user)
        payload.pop("id")
        response = (
            self.client.table("users").update(payload).eq("id", user.id).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        email=row.get("email"),
        google_user_id=row.get("google_user_id"),
        google_display_name=row.get("google_display_name"),
        google_public_profile_url=row.get("google_public_profile_url"),
        google_public_profile_photo_url=row.get("google_public_profile_photo_url"),
        google_access_token=row.get("google_access_token"),
        google_refresh_token=row.get("google_refresh_token"),
        google_expires_in=int(row.get("google_expires_in") or 0),
        google_expires_at=int(row.get("google_expires_at") or 0),
    )
