"""
Infrastructure Layer for the workout playback engine.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseCompletionRepository,
    SupabaseCompletedRoutinesRepository,
)

__all__ = [
    "SupabaseCompletionRepository",
    "SupabaseCompletedRoutinesRepository",
]
