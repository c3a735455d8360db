"""User-related business logic."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol

from photo_hunt.domain.entities import EntityKey
from photo_hunt.domain.errors import EntityNotFoundError
from photo_hunt.domain.users import GoogleCredentials, GoogleProfile, UserRecord

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: int) -> UserRecord | None:
        """Return the user for an id, if present."""

    def get_users(self, keys: list[EntityKey]) -> dict[EntityKey, UserRecord]:
        """Batch load users by key, omitting keys with no stored user."""

    def get_by_google_user_id(self, google_user_id: str) -> UserRecord | None:
        """Return the user linked to a Google account, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""

    def update_user(self, user: UserRecord) -> UserRecord:
        """Persist all fields of an existing user."""


@dataclass
class UserService:
    """Application service for user records and linked credentials."""

    repository: UserRepository

    def get_user(self, user_id: int) -> UserRecord:
        """Return a user or raise ``EntityNotFoundError``."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise EntityNotFoundError(UserRecord.KIND, user_id)
        return user

    def find_by_google_user_id(self, google_user_id: str) -> UserRecord | None:
        """Return the user linked to a Google account, if any."""
        return self.repository.get_by_google_user_id(google_user_id)

    def link_google_account(
        self,
        profile: GoogleProfile,
        credentials: GoogleCredentials,
        now: datetime | None = None,
    ) -> UserRecord:
        """Create or refresh the user for a Google profile and store its tokens."""
        expires_at = _expires_at_ms(credentials.expires_in, now)
        existing = self.repository.get_by_google_user_id(profile.google_user_id)
        if existing is None:
            created = self.repository.create_user(
                {
                    "email": profile.email,
                    "google_user_id": profile.google_user_id,
                    "google_display_name": profile.display_name,
                    "google_public_profile_url": profile.profile_url,
                    "google_public_profile_photo_url": profile.profile_photo_url,
                    "google_access_token": credentials.access_token,
                    "google_refresh_token": credentials.refresh_token,
                    "google_expires_in": credentials.expires_in,
                    "google_expires_at": expires_at,
                }
            )
            _logger.info("Linked new user: user_id=%s", created.id)
            return created

        updated = replace(
            existing,
            email=profile.email or existing.email,
            google_display_name=profile.display_name,
            google_public_profile_url=profile.profile_url,
            google_public_profile_photo_url=profile.profile_photo_url,
            google_access_token=credentials.access_token,
            google_refresh_token=credentials.refresh_token
            or existing.google_refresh_token,
            google_expires_in=credentials.expires_in,
            google_expires_at=expires_at,
        )
        return self.repository.update_user(updated)

    def update_credentials(
        self,
        user_id: int,
        credentials: GoogleCredentials,
        now: datetime | None = None,
    ) -> UserRecord:
        """Store refreshed tokens, keeping the refresh token when none is issued."""
        user = self.get_user(user_id)
        updated = replace(
            user,
            google_access_token=credentials.access_token,
            google_refresh_token=credentials.refresh_token
            or user.google_refresh_token,
            google_expires_in=credentials.expires_in,
            google_expires_at=_expires_at_ms(credentials.expires_in, now),
        )
        return self.repository.update_user(updated)


def _expires_at_ms(expires_in: int, now: datetime | None) -> int:
    """Return the absolute expiry in epoch milliseconds."""
    issued_at = now or datetime.now(tz=UTC)
    return int(issued_at.timestamp() * 1000) + expires_in * 1000
