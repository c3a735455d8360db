"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from itertools import count

import pytest

from photo_hunt.config import Settings
from photo_hunt.containers import AppContainer
from photo_hunt.domain.entities import EntityKey
from photo_hunt.domain.photos import PhotoRecord
from photo_hunt.domain.themes import ThemeRecord
from photo_hunt.domain.users import FriendEdge, UserRecord
from photo_hunt.domain.votes import VoteRecord
from photo_hunt.services.friends import FriendEdgeRepository, FriendService
from photo_hunt.services.photos import (
    ImageService,
    PhotoMaterializer,
    PhotoRepository,
    PhotoService,
)
from photo_hunt.services.themes import ThemeRepository, ThemeService
from photo_hunt.services.users import UserRepository, UserService
from photo_hunt.services.votes import VoteRepository, VoteService


def _ids() -> Iterator[int]:
    return count(1)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[int, UserRecord] = field(default_factory=dict)
    next_id: Iterator[int] = field(default_factory=_ids)

    def add(self, **fields: object) -> UserRecord:
        user = UserRecord(id=next(self.next_id), **fields)
        self.users[user.id] = user
        return user

    def get_user(self, user_id: int) -> UserRecord | None:
        return self.users.get(user_id)

    def get_users(self, keys: list[EntityKey]) -> dict[EntityKey, UserRecord]:
        return {key: self.users[key.id] for key in keys if key.id in self.users}

    def get_by_google_user_id(self, google_user_id: str) -> UserRecord | None:
        for user in self.users.values():
            if user.google_user_id == google_user_id:
                return user
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        return self.add(**payload)

    def update_user(self, user: UserRecord) -> UserRecord:
        self.users[user.id] = user
        return user


@dataclass
class InMemoryFriendEdgeRepository(FriendEdgeRepository):
    """In-memory edge repository for tests."""

    edges: list[FriendEdge] = field(default_factory=list)
    next_id: Iterator[int] = field(default_factory=_ids)

    def list_edges(self, owner_user_id: int) -> list[FriendEdge]:
        return [edge for edge in self.edges if edge.owner_user_id == owner_user_id]

    def create_edge(self, owner_user_id: int, friend_user_id: int) -> FriendEdge:
        edge = FriendEdge(
            id=next(self.next_id),
            owner_user_id=owner_user_id,
            friend_user_id=friend_user_id,
        )
        self.edges.append(edge)
        return edge


@dataclass
class InMemoryThemeRepository(ThemeRepository):
    """In-memory theme repository for tests."""

    themes: dict[int, ThemeRecord] = field(default_factory=dict)
    next_id: Iterator[int] = field(default_factory=_ids)

    def get_theme(self, theme_id: int) -> ThemeRecord | None:
        return self.themes.get(theme_id)

    def first_theme_starting_between(
        self, after: datetime, before: datetime
    ) -> ThemeRecord | None:
        matches = [
            theme for theme in self.themes.values() if after < theme.start < before
        ]
        if not matches:
            return None
        return max(matches, key=lambda theme: theme.start)

    def list_themes(self) -> list[ThemeRecord]:
        return sorted(self.themes.values(), key=lambda theme: theme.start, reverse=True)

    def create_theme(
        self, display_name: str, created: datetime, start: datetime
    ) -> ThemeRecord:
        theme = ThemeRecord(
            id=next(self.next_id),
            display_name=display_name,
            created=created,
            start=start,
        )
        self.themes[theme.id] = theme
        return theme

    def update_theme(self, theme: ThemeRecord) -> ThemeRecord:
        self.themes[theme.id] = theme
        return theme


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """In-memory photo repository for tests."""

    photos: dict[int, PhotoRecord] = field(default_factory=dict)
    next_id: Iterator[int] = field(default_factory=_ids)

    def get_photo(self, photo_id: int) -> PhotoRecord | None:
        return self.photos.get(photo_id)

    def list_photos(
        self,
        theme_id: int | None = None,
        owner_user_ids: list[int] | None = None,
    ) -> list[PhotoRecord]:
        photos = [
            photo
            for photo in self.photos.values()
            if (theme_id is None or photo.theme_id == theme_id)
            and (owner_user_ids is None or photo.owner_user_id in owner_user_ids)
        ]
        return sorted(photos, key=lambda photo: photo.created, reverse=True)

    def create_photo(self, payload: dict[str, object]) -> PhotoRecord:
        photo = PhotoRecord(id=next(self.next_id), **payload)
        self.photos[photo.id] = photo
        return photo

    def delete_photo(self, photo_id: int) -> None:
        self.photos.pop(photo_id, None)


@dataclass
class InMemoryVoteRepository(VoteRepository):
    """In-memory vote repository for tests."""

    votes: dict[int, VoteRecord] = field(default_factory=dict)
    next_id: Iterator[int] = field(default_factory=_ids)
    count_calls: int = 0

    def count_votes(self, photo_id: int) -> int:
        self.count_calls += 1
        return sum(1 for vote in self.votes.values() if vote.photo_id == photo_id)

    def find_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord | None:
        for vote in self.votes.values():
            if vote.owner_user_id == owner_user_id and vote.photo_id == photo_id:
                return vote
        return None

    def create_vote(self, owner_user_id: int, photo_id: int) -> VoteRecord:
        vote = VoteRecord(
            id=next(self.next_id), owner_user_id=owner_user_id, photo_id=photo_id
        )
        self.votes[vote.id] = vote
        return vote

    def delete_vote(self, vote_id: int) -> None:
        self.votes.pop(vote_id, None)

    def delete_votes_for_photo(self, photo_id: int) -> None:
        for vote_id in [v.id for v in self.votes.values() if v.photo_id == photo_id]:
            del self.votes[vote_id]


@dataclass
class FakeImageService(ImageService):
    """Fake image service producing deterministic URLs."""

    requests: list[tuple[str, int | None, bool]] = field(default_factory=list)

    def serving_url(
        self, blob_key: str, size: int | None = None, secure: bool = True
    ) -> str:
        self.requests.append((blob_key, size, secure))
        scheme = "https" if secure else "http"
        url = f"{scheme}://images.example.com/{blob_key}"
        if size is not None:
            url = f"{url}=s{size}"
        return url

    def create_upload_url(self, blob_key: str) -> str:
        return f"https://upload.example.com/{blob_key}?token=abc"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        app_base_url="https://photohunt.example.com/",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def edge_repository() -> InMemoryFriendEdgeRepository:
    return InMemoryFriendEdgeRepository()


@pytest.fixture
def theme_repository() -> InMemoryThemeRepository:
    return InMemoryThemeRepository()


@pytest.fixture
def photo_repository() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture
def vote_repository() -> InMemoryVoteRepository:
    return InMemoryVoteRepository()


@pytest.fixture
def image_service() -> FakeImageService:
    return FakeImageService()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    edge_repository: InMemoryFriendEdgeRepository,
    theme_repository: InMemoryThemeRepository,
    photo_repository: InMemoryPhotoRepository,
    vote_repository: InMemoryVoteRepository,
    image_service: FakeImageService,
) -> AppContainer:
    user_service = UserService(user_repository)
    friend_service = FriendService(
        edge_repository=edge_repository, user_repository=user_repository
    )
    theme_service = ThemeService(
        repository=theme_repository,
        photo_repository=photo_repository,
        timezone=settings.timezone,
    )
    materializer = PhotoMaterializer(
        vote_repository=vote_repository,
        image_service=image_service,
        base_url="https://photohunt.example.com",
        thumbnail_size=settings.thumbnail_size,
    )
    photo_service = PhotoService(
        photo_repository=photo_repository,
        vote_repository=vote_repository,
        user_service=user_service,
        theme_service=theme_service,
        friend_service=friend_service,
        materializer=materializer,
    )
    vote_service = VoteService(
        vote_repository=vote_repository, photo_repository=photo_repository
    )
    return AppContainer(
        settings=settings,
        user_service=user_service,
        friend_service=friend_service,
        theme_service=theme_service,
        photo_materializer=materializer,
        photo_service=photo_service,
        vote_service=vote_service,
    )
