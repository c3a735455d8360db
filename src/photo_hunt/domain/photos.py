"""Domain models for photo submissions."""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from photo_hunt.domain.entities import Entity

PHOTO_KIND = "photohunt#photo"
UPLOAD_URL_KIND = "photohunt#uploadurl"
DEFAULT_THUMBNAIL_SIZE = 400


@dataclass(frozen=True, eq=False)
class PhotoRecord(Entity):
    """A stored photo submission.

    Vote counts and URLs are not stored; see ``PhotoView``.
    """

    KIND: ClassVar[str] = "Photo"

    id: int
    owner_user_id: int
    theme_id: int
    image_blob_key: str | None
    created: datetime
    owner_display_name: str | None = None
    owner_profile_url: str | None = None
    owner_profile_photo: str | None = None
    theme_display_name: str | None = None


@dataclass(frozen=True)
class PhotoView:
    """A photo with its read-time derived fields."""

    photo: PhotoRecord
    num_votes: int
    voted: bool
    fullsize_url: str
    thumbnail_url: str
    vote_cta_url: str
    photo_content_url: str

    @property
    def id(self) -> int:
        return self.photo.id
