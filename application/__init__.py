"""
Application Layer for the workout playback engine.

This package contains:
- ports/: Abstract interfaces for external collaborators
- use_cases/: Workflows coordinating domain logic and ports
"""
