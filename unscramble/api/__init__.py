"""
API Module - Front-end interface.

Exposes the engine via REST API and a WebSocket snapshot stream.
A front end:
1. Creates a game session
2. Shows the scrambled word, word count and score
3. Sends guess edits, submissions and skips
4. Shows the final score and offers to play again

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    GuessRequest,
    SubmitGuessRequest,
    # Responses
    SessionResponse,
    CommandResponse,
    FinalScoreResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Shared
    SnapshotInfo,
    SessionStatus,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "GuessRequest",
    "SubmitGuessRequest",
    # Responses
    "SessionResponse",
    "CommandResponse",
    "FinalScoreResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Shared
    "SnapshotInfo",
    "SessionStatus",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
