"""Photo submission and read-time materialization."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from photo_hunt.domain.errors import EntityNotFoundError, NoCurrentThemeError
from photo_hunt.domain.photos import DEFAULT_THUMBNAIL_SIZE, PhotoRecord, PhotoView
from photo_hunt.domain.themes import ThemeRecord
from photo_hunt.services.friends import FriendService
from photo_hunt.services.themes import ThemeService
from photo_hunt.services.users import UserService
from photo_hunt.services.votes import VoteRepository

_logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photo records."""

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_photos(
        self,
        theme_id: int | None = None,
        owner_user_ids: list[int] | None = None,
    ) -> list[PhotoRecord]:
        """Return photos matching the filters, newest first."""

    def create_photo(self, payload: dict[str, object]) -> PhotoRecord:
        """Create and return a photo record."""

    def delete_photo(self, photo_id: int) -> None:
        """Delete a photo record."""


class ImageService(Protocol):
    """Interface for the service that stores and serves image bytes."""

    def serving_url(
        self, blob_key: str, size: int | None = None, secure: bool = True
    ) -> str:
        """Return a URL for the image, scaled to ``size`` on the longest edge."""

    def create_upload_url(self, blob_key: str) -> str:
        """Return a URL a client can upload image bytes to."""


@dataclass
class PhotoMaterializer:
    """Computes the presentation fields of a photo at read time.

    Nothing computed here is persisted. The vote count is queried on every
    call, so it reflects the vote store at that moment only.
    """

    vote_repository: VoteRepository
    image_service: ImageService
    base_url: str
    thumbnail_size: int = DEFAULT_THUMBNAIL_SIZE

    def image_url(self, photo: PhotoRecord, size: int | None = None) -> str:
        """Return the serving URL; full size when ``size`` is omitted."""
        if not photo.image_blob_key:
            raise ValueError(f"Photo {photo.id} has no stored image")
        return self.image_service.serving_url(photo.image_blob_key, size, secure=True)

    def vote_count(self, photo: PhotoRecord) -> int:
        """Return the number of votes currently stored for the photo."""
        return self.vote_repository.count_votes(photo.id)

    def vote_action_url(self, photo: PhotoRecord) -> str:
        """Return the page URL that casts a vote for the photo."""
        return f"{self.base_url}/index.html?photoId={photo.id}&action=VOTE"

    def content_url(self, photo: PhotoRecord) -> str:
        """Return the page URL that shows the photo."""
        return f"{self.base_url}/photo.html?photoId={photo.id}"

    def materialize(self, photo: PhotoRecord, voted: bool = False) -> PhotoView:
        """Build the display view of a stored photo."""
        return PhotoView(
            photo=photo,
            num_votes=self.vote_count(photo),
            voted=voted,
            fullsize_url=self.image_url(photo),
            thumbnail_url=self.image_url(photo, self.thumbnail_size),
            vote_cta_url=self.vote_action_url(photo),
            photo_content_url=self.content_url(photo),
        )


@dataclass
class PhotoService:
    """Application service for photo reads and submissions."""

    photo_repository: PhotoRepository
    vote_repository: VoteRepository
    user_service: UserService
    theme_service: ThemeService
    friend_service: FriendService
    materializer: PhotoMaterializer

    def get_photo(self, photo_id: int, viewer_id: int | None = None) -> PhotoView:
        """Return a materialized photo or raise ``EntityNotFoundError``."""
        photo = self.photo_repository.get_photo(photo_id)
        if photo is None:
            raise EntityNotFoundError(PhotoRecord.KIND, photo_id)
        return self._view(photo, viewer_id)

    def list_photos(
        self,
        theme_id: int | None = None,
        owner_user_id: int | None = None,
        viewer_id: int | None = None,
    ) -> list[PhotoView]:
        """Return materialized photos, optionally for one theme or owner."""
        owner_ids = [owner_user_id] if owner_user_id is not None else None
        photos = self.photo_repository.list_photos(
            theme_id=theme_id, owner_user_ids=owner_ids
        )
        return [self._view(photo, viewer_id) for photo in photos]

    def list_friends_photos(
        self,
        owner_id: int,
        theme_id: int | None = None,
        viewer_id: int | None = None,
    ) -> list[PhotoView]:
        """Return photos owned by the users in the owner's circle."""
        friend_ids = list(dict.fromkeys(self.friend_service.friend_ids(owner_id)))
        if not friend_ids:
            return []
        photos = self.photo_repository.list_photos(
            theme_id=theme_id, owner_user_ids=friend_ids
        )
        return [self._view(photo, viewer_id) for photo in photos]

    def submit_photo(
        self,
        owner_id: int,
        image_blob_key: str,
        theme_id: int | None = None,
        now: datetime | None = None,
    ) -> PhotoView:
        """Store a new photo tagged with a theme, the current one by default."""
        owner = self.user_service.get_user(owner_id)
        theme = self._resolve_theme(theme_id, now)
        photo = self.photo_repository.create_photo(
            {
                "owner_user_id": owner.id,
                "owner_display_name": owner.google_display_name,
                "owner_profile_url": owner.google_public_profile_url,
                "owner_profile_photo": owner.google_public_profile_photo_url,
                "theme_id": theme.id,
                "theme_display_name": theme.display_name,
                "image_blob_key": image_blob_key,
                "created": now or datetime.now(tz=UTC),
            }
        )
        _logger.info(
            "Photo submitted: photo_id=%s owner_id=%s theme_id=%s",
            photo.id,
            owner.id,
            theme.id,
        )
        return self.materializer.materialize(photo, voted=False)

    def delete_photo(self, photo_id: int, requester_id: int) -> None:
        """Delete a photo and its votes. Only the owner may do this."""
        photo = self.photo_repository.get_photo(photo_id)
        if photo is None:
            raise EntityNotFoundError(PhotoRecord.KIND, photo_id)
        if photo.owner_user_id != requester_id:
            raise PermissionError(f"User {requester_id} does not own photo {photo_id}")
        self.vote_repository.delete_votes_for_photo(photo_id)
        self.photo_repository.delete_photo(photo_id)

    def create_upload_url(self, blob_key: str) -> str:
        """Return where a client should upload the bytes for ``blob_key``."""
        return self.materializer.image_service.create_upload_url(blob_key)

    def _resolve_theme(self, theme_id: int | None, now: datetime | None) -> ThemeRecord:
        if theme_id is not None:
            return self.theme_service.get_theme(theme_id)
        theme = self.theme_service.current_theme(now)
        if theme is None:
            raise NoCurrentThemeError("No theme is scheduled for today")
        return theme

    def _view(self, photo: PhotoRecord, viewer_id: int | None) -> PhotoView:
        voted = (
            viewer_id is not None
            and self.vote_repository.find_vote(viewer_id, photo.id) is not None
        )
        return self.materializer.materialize(photo, voted=voted)
