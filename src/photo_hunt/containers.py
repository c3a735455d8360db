"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_hunt.adapters.supabase_friend_edge_repository import (
    SupabaseFriendEdgeRepository,
)
from photo_hunt.adapters.supabase_image_service import SupabaseImageService
from photo_hunt.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_hunt.adapters.supabase_theme_repository import SupabaseThemeRepository
from photo_hunt.adapters.supabase_user_repository import SupabaseUserRepository
from photo_hunt.adapters.supabase_vote_repository import SupabaseVoteRepository
from photo_hunt.app_logging import configure_logging
from photo_hunt.config import Settings, normalize_base_url
from photo_hunt.services.friends import FriendService
from photo_hunt.services.photos import PhotoMaterializer, PhotoService
from photo_hunt.services.themes import ThemeService
from photo_hunt.services.users import UserService
from photo_hunt.services.votes import VoteService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    friend_service: FriendService
    theme_service: ThemeService
    photo_materializer: PhotoMaterializer
    photo_service: PhotoService
    vote_service: VoteService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    edge_repository = SupabaseFriendEdgeRepository(supabase_client)
    theme_repository = SupabaseThemeRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    vote_repository = SupabaseVoteRepository(supabase_client)
    image_service = SupabaseImageService(
        client=supabase_client, bucket=resolved_settings.image_bucket
    )

    user_service = UserService(user_repository)
    friend_service = FriendService(
        edge_repository=edge_repository, user_repository=user_repository
    )
    theme_service = ThemeService(
        repository=theme_repository,
        photo_repository=photo_repository,
        timezone=resolved_settings.timezone,
    )
    materializer = PhotoMaterializer(
        vote_repository=vote_repository,
        image_service=image_service,
        base_url=normalize_base_url(resolved_settings.app_base_url),
        thumbnail_size=resolved_settings.thumbnail_size,
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
        settings=resolved_settings,
        user_service=user_service,
        friend_service=friend_service,
        theme_service=theme_service,
        photo_materializer=materializer,
        photo_service=photo_service,
        vote_service=vote_service,
    )
