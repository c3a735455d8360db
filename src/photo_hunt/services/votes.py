"""Vote recording."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from photo_hunt.domain.errors import EntityNotFoundError
from photo_hunt.domain.photos import PhotoRecord
from photo_hunt.domain.votes import VoteRecord

if TYPE_CHECKING:
    from photo_hunt.services.photos import PhotoRepository

_logger = logging.getLogger(__name__)


class VoteRepository(Protocol):
    """Persistence interface for votes."""

    def count_votes(self, photo_id: int) -> int:
        """Return the number of votes stored for a photo."""

    def find_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord | None:
        """Return a vote by this owner on this photo, if any."""

    def create_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord:
        """Create and return a vote."""

    def delete_vote(self, vote_id: int) -> None:
        """Delete a vote."""

    def delete_votes_for_photo(self, photo_id: int) -> None:
        """Delete every vote on a photo."""


@dataclass
class VoteService:
    """Writes votes, allowing at most one per user per photo.

    The check is a read before the write with no transaction around it, so two
    concurrent casts by the same user can still both insert.
    """

    vote_repository: VoteRepository
    photo_repository: "PhotoRepository"

    def cast_vote(self, owner_id: int, photo_id: int) -> VoteRecord:
        """Record a vote, returning the existing one if the user already voted."""
        if self.photo_repository.get_photo(photo_id) is None:
            raise EntityNotFoundError(PhotoRecord.KIND, photo_id)
        existing = self.vote_repository.find_vote(owner_id, photo_id)
        if existing is not None:
            _logger.info(
                "Duplicate vote ignored: owner_id=%s photo_id=%s", owner_id, photo_id
            )
            return existing
        return self.vote_repository.create_vote(owner_id, photo_id)

    def retract_vote(self, owner_id: int, photo_id: int) -> bool:
        """Remove the user's vote on a photo. Returns False if there was none."""
        existing = self.vote_repository.find_vote(owner_id, photo_id)
        if existing is None:
            return False
        self.vote_repository.delete_vote(existing.id)
        _logger.info("Vote retracted: owner_id=%s photo_id=%s", owner_id, photo_id)
        return True

    def has_voted(self, owner_id: int, photo_id: int) -> bool:
        """Return whether the user already voted for the photo."""
        return self.vote_repository.find_vote(owner_id, photo_id) is not None
