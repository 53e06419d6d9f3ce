"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a front end and the engine.
All responses include explicit types for OpenAPI schema generation.

The unscrambled word is never part of any response.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- GAME_OVER: Command needs a round in progress; reset to play again
- INVALID_CORPUS: Corpus cannot support the requested round length
- VALIDATION_ERROR: Request parameters are out of range
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"
    ENDED = "ended"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    GAME_OVER = "GAME_OVER"
    INVALID_CORPUS = "INVALID_CORPUS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class SnapshotInfo(BaseModel):
    """The published state of a round."""
    scrambled_word: str = Field(description="Letters of the current word, shuffled")
    is_guess_wrong: bool = Field(description="True after a wrong guess, until the next word")
    score: int = Field(ge=0)
    word_count: int = Field(ge=1, description="1-based index of the current word")
    is_game_over: bool

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Start a new game session."""
    seed: Optional[int] = Field(
        default=None, ge=0, description="Random seed; omit for a random one"
    )
    max_words_per_round: Optional[int] = Field(
        default=None, ge=1, description="Round length (server default if omitted)"
    )
    score_increment: Optional[int] = Field(
        default=None, ge=1, description="Points per correct guess (server default if omitted)"
    )


class GuessRequest(BaseModel):
    """Replace the in-progress guess text."""
    guess: str = Field(description="Current contents of the guess field")


class SubmitGuessRequest(BaseModel):
    """
    Submit the in-progress guess.

    If `guess` is given it replaces the in-progress text first, so a
    client can update and submit in one call.
    """
    guess: Optional[str] = None


# =============================================================================
# Response Models
# =============================================================================

class SessionResponse(BaseModel):
    """Session status and current round state."""
    session_id: str
    status: SessionStatus
    seed: int
    max_words_per_round: int
    score_increment: int
    user_guess: str = ""
    rounds_played: int = 0
    snapshot: SnapshotInfo
    created_at: float


class CommandResponse(BaseModel):
    """Result of a player command."""
    success: bool = True
    session_id: str
    status: SessionStatus
    snapshot: SnapshotInfo
    user_guess: str = ""
    guess_correct: Optional[bool] = Field(
        default=None, description="Set for submitted guesses only"
    )


class FinalScoreResponse(BaseModel):
    """End-of-round summary."""
    session_id: str
    is_game_over: bool
    score: int
    max_score: int
    words_played: int
    max_words_per_round: int


class SessionListResponse(BaseModel):
    """List of active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response for ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Service health."""
    status: str = "ok"
    version: str
    env: str
    corpus_name: str
    corpus_size: int
    max_words_per_round: int
    score_increment: int
    active_sessions: int = 0


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None
