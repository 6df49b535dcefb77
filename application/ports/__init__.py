"""
Repository and Collaborator Interfaces (Ports).

This package defines abstract interfaces that decouple the playback engine
from infrastructure (database, audio, navigation). Implementations are
provided in the infrastructure layer and backend services.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import CompletionRepository

    class CompletionService:
        def __init__(self, completion_repo: CompletionRepository):
            self.completion_repo = completion_repo
"""

# Completion persistence
from application.ports.completion_repository import CompletionRepository

# Completed routines (aptitude scoring)
from application.ports.completed_routines_repository import CompletedRoutinesRepository

# Playback collaborators
from application.ports.playback import Navigator, CuePlayer

__all__ = [
    # Completion
    "CompletionRepository",
    # Aptitudes
    "CompletedRoutinesRepository",
    # Playback
    "Navigator",
    "CuePlayer",
]
