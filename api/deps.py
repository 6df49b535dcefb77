"""
FastAPI Dependency Providers for the workout playback API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request
- Auth provider wraps the API key logic in backend.auth

Usage in routers:
    from api.deps import get_completed_routines_repo, get_current_user
    from application.ports import CompletedRoutinesRepository

    @router.get("/aptitudes")
    def aptitudes(
        user_id: str = Depends(get_current_user),
        repo: CompletedRoutinesRepository = Depends(get_completed_routines_repo),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_completed_routines_repo] = lambda: FakeCompletedRoutinesRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    CompletionRepository,
    CompletedRoutinesRepository,
)

# Concrete implementations
from infrastructure import (
    SupabaseCompletionRepository,
    SupabaseCompletedRoutinesRepository,
)

from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import get_current_user as _get_current_user


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_completion_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CompletionRepository:
    """
    Get completion repository instance.

    Returns:
        CompletionRepository: Implementation for completion persistence
    """
    return SupabaseCompletionRepository(client)


def get_completed_routines_repo(
    client: Client = Depends(get_supabase_client_required),
) -> CompletedRoutinesRepository:
    """
    Get completed routines repository instance.

    Returns:
        CompletedRoutinesRepository: Read-only source for aptitude scoring
    """
    return SupabaseCompletedRoutinesRepository(client)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(user_id: str = Depends(_get_current_user)) -> str:
    """
    Get the current authenticated user ID.

    Returns:
        str: Authenticated user ID

    Raises:
        HTTPException: 401 if not authenticated
    """
    return user_id
