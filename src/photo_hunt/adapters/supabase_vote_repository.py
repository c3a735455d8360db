"""Supabase-backed vote repository."""

from dataclasses import dataclass

from supabase import Client

from photo_hunt.domain.votes import VoteRecord
from photo_hunt.services.votes import VoteRepository


@dataclass
class SupabaseVoteRepository(VoteRepository):
    """Supabase implementation for vote persistence."""

    client: Client

    def count_votes(self, photo_id: int) -> int:
        """Return an exact count of the photo's votes."""
        response = (
            self.client.table("votes")
            .select("id", count="exact")
            .eq("photo_id", photo_id)
            .execute()
        )
        if response.count is not None:
            return response.count
        return len(response.data or [])

    def find_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord | None:
        """Return the owner's vote on the photo, if any."""
        response = (
            self.client.table("votes")
            .select("id, owner_user_id, photo_id")
            .eq("owner_user_id", owner_user_id)
            .eq("photo_id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_vote(response.data[0])

    def create_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord:
        """Insert a vote row and return it."""
        response = (
            self.client.table("votes")
            .insert({"owner_user_id": owner_user_id, "photo_id": photo_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create vote")
        return _parse_vote(response.data[0])

    def delete_vote(self, vote_id: int) -> None:
        """Delete a vote row."""
        self.client.table("votes").delete().eq("id", vote_id).execute()

    def delete_votes_for_photo(self, photo_id: int) -> None:
        """Delete every vote on a photo."""
        self.client.table("votes").delete().eq("photo_id", photo_id).execute()


def _parse_vote(row: dict[str, object]) -> VoteRecord:
    return VoteRecord(
        id=int(row["id"]),
        owner_user_id=int(row["owner_user_id"]),
        photo_id=int(row["photo_id"]),
    )
