"""Supabase-backed friend edge repository."""

from dataclasses import dataclass

from supabase import Client

from photo_hunt.domain.users import FriendEdge
from photo_hunt.services.friends import FriendEdgeRepository


@dataclass
class SupabaseFriendEdgeRepository(FriendEdgeRepository):
    """Supabase implementation for directed user-to-user edges."""

    client: Client

    def list_edges(self, owner_user_id: int) -> list[FriendEdge]:
        """Return the owner's edges in insertion order."""
        response = (
            self.client.table("user_edges")
            .select("id, owner_user_id, friend_user_id")
            .eq("owner_user_id", owner_user_id)
            .order("id", desc=False)
            .execute()
        )
        return [_parse_edge(row) for row in response.data or []]

    def create_edge(self, owner_user_id: int, friend_user_id: int) -> FriendEdge:
        """Insert a directed edge and return it."""
        response = (
            self.client.table("user_edges")
            .insert({"owner_user_id": owner_user_id, "friend_user_id": friend_user_id})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create friend edge")
        return _parse_edge(response.data[0])


def _parse_edge(row: dict[str, object]) -> FriendEdge:
    return FriendEdge(
        id=int(row["id"]),
        owner_user_id=int(row["owner_user_id"]),
        friend_user_id=int(row["friend_user_id"]),
    )
