"""
Router package for the workout playback API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- sequences: Routine compilation into a playback timeline
- aptitudes: Aptitude radar scores
- completions: Recording finished routines
"""

from api.routers.health import router as health_router
from api.routers.sequences import router as sequences_router
from api.routers.aptitudes import router as aptitudes_router
from api.routers.completions import router as completions_router

__all__ = [
    "health_router",
    "sequences_router",
    "aptitudes_router",
    "completions_router",
]
