# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends() and can be swapped
# out in tests through app.dependency_overrides.
# =============================================================================

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.layout import RootLayout
from core.models.diagnostics import RuntimeEnvironment
from core.models.page import PageMetadata
from core.services.user_service import UserService, UserStore
from lib.supabase_client import SupabaseUserStore


def get_user_store() -> UserStore:
    """
    Get the user store.

    The underlying Supabase client is the process-wide singleton; it is
    created on the first lookup, not here.
    """
    return SupabaseUserStore()


def get_user_service(
    store: Annotated[UserStore, Depends(get_user_store)],
) -> UserService:
    return UserService(store)


def get_runtime_environment(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RuntimeEnvironment:
    """Environment flags reported by the diagnostic routes."""
    return RuntimeEnvironment.from_settings(settings)


def get_page_metadata(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PageMetadata:
    return PageMetadata.from_settings(settings)


def get_root_layout(
    metadata: Annotated[PageMetadata, Depends(get_page_metadata)],
) -> RootLayout:
    return RootLayout(metadata)


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
RuntimeEnvironmentDep = Annotated[RuntimeEnvironment, Depends(get_runtime_environment)]
RootLayoutDep = Annotated[RootLayout, Depends(get_root_layout)]
