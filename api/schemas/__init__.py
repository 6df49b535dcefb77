"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- sequences: Sequence compilation request/response
- aptitudes: Aptitude radar response
- completions: Routine completion request/response
"""

from api.schemas.aptitudes import AptitudeScoresResponse
from api.schemas.completions import RecordCompletionRequest, RecordCompletionResponse
from api.schemas.sequences import CompileSequenceRequest, CompileSequenceResponse

__all__ = [
    "AptitudeScoresResponse",
    "CompileSequenceRequest",
    "CompileSequenceResponse",
    "RecordCompletionRequest",
    "RecordCompletionResponse",
]
