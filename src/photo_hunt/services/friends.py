"""Friend graph resolution."""

from dataclasses import dataclass
from typing import Protocol

from photo_hunt.domain.entities import EntityKey
from photo_hunt.domain.users import FriendEdge, UserRecord
from photo_hunt.services.users import UserRepository


class FriendEdgeRepository(Protocol):
    """Persistence interface for directed user-to-user edges."""

    def list_edges(self, owner_user_id: int) -> list[FriendEdge]:
        """Return the owner's outgoing edges in storage order."""

    def create_edge(self, owner_user_id: int, friend_user_id: int) -> FriendEdge:
        """Create and return a directed edge."""


@dataclass
class FriendService:
    """Resolves a user's circle from the edges they own.

    Edges are directed: an edge A->B makes B a friend of A and says nothing
    about A being a friend of B.
    """

    edge_repository: FriendEdgeRepository
    user_repository: UserRepository

    def friend_ids(self, owner_id: int) -> list[int]:
        """Return friend ids in storage order, duplicates included."""
        edges = self.edge_repository.list_edges(owner_id)
        return [edge.friend_user_id for edge in edges]

    def friend_keys(self, owner_id: int) -> list[EntityKey]:
        """Return user keys for the owner's friends."""
        return [UserRecord.key(friend_id) for friend_id in self.friend_ids(owner_id)]

    def friends(self, owner_id: int) -> list[UserRecord]:
        """Batch load the owner's friends.

        Users that no longer exist are omitted, and a friend reached through
        duplicate edges appears once.
        """
        keys = self.friend_keys(owner_id)
        if not keys:
            return []
        return list(self.user_repository.get_users(keys).values())

    def add_friend(self, owner_id: int, friend_id: int) -> FriendEdge:
        """Add a friend to the owner's circle without a reciprocal edge."""
        return self.edge_repository.create_edge(owner_id, friend_id)
