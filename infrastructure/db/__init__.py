"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseCompletionRepository,
        SupabaseCompletedRoutinesRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    completion_repo = SupabaseCompletionRepository(client)
    completed_repo = SupabaseCompletedRoutinesRepository(client)
"""

from infrastructure.db.completion_repository import SupabaseCompletionRepository
from infrastructure.db.completed_routines_repository import SupabaseCompletedRoutinesRepository

__all__ = [
    "SupabaseCompletionRepository",
    "SupabaseCompletedRoutinesRepository",
]
