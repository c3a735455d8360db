"""Domain models for users and the friend graph."""

from dataclasses import dataclass
from typing import ClassVar

from photo_hunt.domain.entities import Entity

USER_KIND = "photohunt#user"


@dataclass(frozen=True, eq=False)
class UserRecord(Entity):
    """Represents a user profile with linked Google account data."""

    KIND: ClassVar[str] = "User"

    id: int
    email: str | None = None
    google_user_id: str | None = None
    google_display_name: str | None = None
    google_public_profile_url: str | None = None
    google_public_profile_photo_url: str | None = None
    google_access_token: str | None = None
    google_refresh_token: str | None = None
    google_expires_in: int = 0
    google_expires_at: int = 0


@dataclass(frozen=True, eq=False)
class FriendEdge(Entity):
    """Directed edge: the owner added the friend to their circle."""

    KIND: ClassVar[str] = "DirectedUserToUserEdge"

    id: int
    owner_user_id: int
    friend_user_id: int


@dataclass(frozen=True)
class GoogleProfile:
    """Profile fields supplied by the identity provider at linking time."""

    google_user_id: str
    email: str | None
    display_name: str | None
    profile_url: str | None
    profile_photo_url: str | None


@dataclass(frozen=True)
class GoogleCredentials:
    """OAuth token triplet supplied by the identity provider."""

    access_token: str
    refresh_token: str | None
    expires_in: int
