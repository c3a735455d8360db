"""Pydantic models for the JSON serialization boundary.

Only exposed fields are declared. Internal fields (OAuth tokens, the raw image
blob key) are absent, so they are never emitted and are dropped on input.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from photo_hunt.domain.photos import (
    PHOTO_KIND,
    UPLOAD_URL_KIND,
    PhotoRecord,
    PhotoView,
)
from photo_hunt.domain.themes import THEME_KIND, ThemeRecord
from photo_hunt.domain.users import USER_KIND, UserRecord
from photo_hunt.domain.votes import VOTE_KIND, VoteRecord


class WireModel(BaseModel):
    """Base model using camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    def to_json(self) -> dict[str, object]:
        """Return the JSON-ready payload."""
        return self.model_dump(mode="json", by_alias=True)


class UserJson(WireModel):
    """Exposed user fields."""

    kind: Literal["photohunt#user"] = USER_KIND
    id: int
    email: str | None = None
    google_user_id: str | None = None
    google_display_name: str | None = None
    google_public_profile_url: str | None = None
    google_public_profile_photo_url: str | None = None
    google_expires_at: int = 0

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserJson":
        return cls(
            id=user.id,
            email=user.email,
            google_user_id=user.google_user_id,
            google_display_name=user.google_display_name,
            google_public_profile_url=user.google_public_profile_url,
            google_public_profile_photo_url=user.google_public_profile_photo_url,
            google_expires_at=user.google_expires_at,
        )

    def to_record(self) -> UserRecord:
        """Rebuild a user without credentials."""
        return UserRecord(
            id=self.id,
            email=self.email,
            google_user_id=self.google_user_id,
            google_display_name=self.google_display_name,
            google_public_profile_url=self.google_public_profile_url,
            google_public_profile_photo_url=self.google_public_profile_photo_url,
            google_expires_at=self.google_expires_at,
        )


class ThemeJson(WireModel):
    """Exposed theme fields."""

    kind: Literal["photohunt#theme"] = THEME_KIND
    id: int
    display_name: str
    created: datetime
    start: datetime
    preview_photo_id: int | None = None

    @classmethod
    def from_record(cls, theme: ThemeRecord) -> "ThemeJson":
        return cls(
            id=theme.id,
            display_name=theme.display_name,
            created=theme.created,
            start=theme.start,
            preview_photo_id=theme.preview_photo_id,
        )

    def to_record(self) -> ThemeRecord:
        return ThemeRecord(
            id=self.id,
            display_name=self.display_name,
            created=self.created,
            start=self.start,
            preview_photo_id=self.preview_photo_id,
        )


class VoteJson(WireModel):
    """Exposed vote fields."""

    kind: Literal["photohunt#vote"] = VOTE_KIND
    id: int
    owner_user_id: int
    photo_id: int

    @classmethod
    def from_record(cls, vote: VoteRecord) -> "VoteJson":
        return cls(id=vote.id, owner_user_id=vote.owner_user_id, photo_id=vote.photo_id)

    def to_record(self) -> VoteRecord:
        return VoteRecord(
            id=self.id, owner_user_id=self.owner_user_id, photo_id=self.photo_id
        )


class PhotoJson(WireModel):
    """Exposed photo fields, including the read-time derived ones."""

    kind: Literal["photohunt#photo"] = PHOTO_KIND
    id: int
    owner_user_id: int
    owner_display_name: str | None = None
    owner_profile_url: str | None = None
    owner_profile_photo: str | None = None
    theme_id: int
    theme_display_name: str | None = None
    num_votes: int = 0
    voted: bool = False
    created: datetime
    fullsize_url: str | None = None
    thumbnail_url: str | None = None
    vote_cta_url: str | None = None
    photo_content_url: str | None = None

    @classmethod
    def from_view(cls, view: PhotoView) -> "PhotoJson":
        photo = view.photo
        return cls(
            id=photo.id,
            owner_user_id=photo.owner_user_id,
            owner_display_name=photo.owner_display_name,
            owner_profile_url=photo.owner_profile_url,
            owner_profile_photo=photo.owner_profile_photo,
            theme_id=photo.theme_id,
            theme_display_name=photo.theme_display_name,
            num_votes=view.num_votes,
            voted=view.voted,
            created=photo.created,
            fullsize_url=view.fullsize_url,
            thumbnail_url=view.thumbnail_url,
            vote_cta_url=view.vote_cta_url,
            photo_content_url=view.photo_content_url,
        )

    def to_record(self) -> PhotoRecord:
        """Rebuild the stored fields; the blob key and derived fields are dropped."""
        return PhotoRecord(
            id=self.id,
            owner_user_id=self.owner_user_id,
            theme_id=self.theme_id,
            image_blob_key=None,
            created=self.created,
            owner_display_name=self.owner_display_name,
            owner_profile_url=self.owner_profile_url,
            owner_profile_photo=self.owner_profile_photo,
            theme_display_name=self.theme_display_name,
        )


class UploadUrlJson(WireModel):
    """Where a client should upload image bytes."""

    kind: Literal["photohunt#uploadurl"] = UPLOAD_URL_KIND
    url: str
