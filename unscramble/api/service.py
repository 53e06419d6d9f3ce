"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session commands
2. Manages sessions
3. Formats responses for front ends

This layer is framework-agnostic (can be used with FastAPI, Flask, a CLI, etc.)
Lookups of unknown sessions return ErrorResponse; configuration problems
raise (ConfigError / CorpusValidationError) for the caller to map.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .. import __version__
from ..config import GameConfig
from ..engine_core import CommandResult
from ..session import SessionManager, Session
from .schemas import (
    CreateSessionRequest,
    SessionResponse,
    CommandResponse,
    FinalScoreResponse,
    HealthResponse,
    ErrorResponse,
    ErrorCode,
    SessionStatus,
    SnapshotInfo,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Create session
        session_response = service.create_session(CreateSessionRequest(seed=7))

        # Play
        service.update_guess(session_id, "banana")
        service.submit_guess(session_id)
        service.skip_word(session_id)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)
    env: str = "development"

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session.

        Raises ConfigError for out-of-range rules and
        CorpusValidationError when the corpus is too small for them.
        """
        config = self.session_manager.default_config.with_overrides(
            max_words_per_round=request.max_words_per_round,
            score_increment=request.score_increment,
        )
        session = self.session_manager.create_session(config=config, seed=request.seed)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        """Get session status."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        """End a session."""
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        """List active session IDs."""
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Player commands
    # =========================================================================

    def update_guess(self, session_id: str, guess: str) -> CommandResponse | ErrorResponse:
        """Replace the in-progress guess text."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        return self._command_to_response(session, session.game.update_guess(guess))

    def submit_guess(
        self, session_id: str, guess: str | None = None
    ) -> CommandResponse | ErrorResponse:
        """Submit the in-progress guess, optionally replacing it first."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        if guess is not None:
            session.game.update_guess(guess)
        return self._command_to_response(session, session.game.submit_guess())

    def skip_word(self, session_id: str) -> CommandResponse | ErrorResponse:
        """Skip the current word."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        return self._command_to_response(session, session.game.skip_word())

    def reset(self, session_id: str) -> CommandResponse | ErrorResponse:
        """Start a new round in the same session (play again)."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        return self._command_to_response(session, session.game.reset())

    def get_final_score(self, session_id: str) -> FinalScoreResponse | ErrorResponse:
        """Summary for the end-of-round dialog."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        game = session.game
        return FinalScoreResponse(
            session_id=session_id,
            is_game_over=game.snapshot.is_game_over,
            score=game.snapshot.score,
            max_score=game.config.max_score,
            words_played=len(game.used_words),
            max_words_per_round=game.config.max_words_per_round,
        )

    def health(self) -> HealthResponse:
        """Service health and default rules."""
        config: GameConfig = self.session_manager.default_config
        corpus = self.session_manager.default_corpus
        return HealthResponse(
            version=__version__,
            env=self.env,
            corpus_name=corpus.name,
            corpus_size=len(corpus),
            max_words_per_round=config.max_words_per_round,
            score_increment=config.score_increment,
            active_sessions=len(self.list_sessions()),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _command_to_response(
        self, session: Session, result: CommandResult
    ) -> CommandResponse | ErrorResponse:
        if not result.success:
            return ErrorResponse(
                error=result.error or "Command rejected",
                error_code=_error_code(result.error_code),
                details={"snapshot": SnapshotInfo.model_validate(result.snapshot).model_dump()}
                if result.snapshot is not None else None,
            )
        return CommandResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            snapshot=SnapshotInfo.model_validate(result.snapshot),
            user_guess=session.game.user_guess,
            guess_correct=result.guess_correct,
        )

    def _session_to_response(self, session: Session) -> SessionResponse:
        game = session.game
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            seed=session.seed,
            max_words_per_round=game.config.max_words_per_round,
            score_increment=game.config.score_increment,
            user_guess=game.user_guess,
            rounds_played=session.rounds_played,
            snapshot=SnapshotInfo.model_validate(game.snapshot),
            created_at=session.created_at,
        )


def _error_code(code: str | None) -> ErrorCode:
    try:
        return ErrorCode(code)
    except ValueError:
        logger.warning("Unmapped command error code: %s", code)
        return ErrorCode.INTERNAL_ERROR
