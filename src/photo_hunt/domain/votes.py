"""Domain models for votes."""

from dataclasses import dataclass
from typing import ClassVar

from photo_hunt.domain.entities import Entity

VOTE_KIND = "photohunt#vote"


@dataclass(frozen=True, eq=False)
class VoteRecord(Entity):
    """One user's vote on one photo.

    Uniqueness per (owner, photo) is not a property of the record; see
    ``VoteService.cast_vote``.
    """

    KIND: ClassVar[str] = "Vote"

    id: int
    owner_user_id: int
    photo_id: int
