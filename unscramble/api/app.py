"""
FastAPI Application - REST API for game front ends.

Endpoints:
    GET    /api/v1/health                      Service health and default rules
    POST   /api/v1/sessions                    Create game session
    GET    /api/v1/sessions                    List active sessions
    GET    /api/v1/sessions/{id}               Get session status
    DELETE /api/v1/sessions/{id}               End session
    PUT    /api/v1/sessions/{id}/guess         Update the in-progress guess
    POST   /api/v1/sessions/{id}/submit        Submit the guess
    POST   /api/v1/sessions/{id}/skip          Skip the current word
    POST   /api/v1/sessions/{id}/reset         Play again
    GET    /api/v1/sessions/{id}/final-score   End-of-round summary
    WS     /api/v1/sessions/{id}/ws            Snapshot stream

All responses are JSON with explicit Pydantic schemas.
All commands run on the event loop, so a session is never mutated
concurrently.
"""

from typing import Annotated, Optional, Union
import asyncio
import logging
import os

from fastapi import FastAPI, WebSocket, WebSocketDisconnect, Query
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ConfigError, GameConfig
from ..session import SessionManager
from ..words import CorpusValidationError, WordCorpus
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    GuessRequest,
    SubmitGuessRequest,
    # Response models
    SessionResponse,
    CommandResponse,
    FinalScoreResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
    # Nested models
    SnapshotInfo,
)

logger = logging.getLogger(__name__)

# Environment configuration
UNSCRAMBLE_ENV = os.getenv("UNSCRAMBLE_ENV", "development")
UNSCRAMBLE_WORDS_FILE = os.getenv("UNSCRAMBLE_WORDS_FILE", None)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

_STATUS_BY_ERROR = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.GAME_OVER: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: APIService | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Unscramble API",
        description="""
Word unscrambling game - guess the word behind the shuffled letters.

## Round Flow

1. `POST /sessions` starts a round and returns the first scrambled word
2. `PUT /guess` keeps the server in sync with the guess field (optional)
3. `POST /submit` checks the guess; `POST /skip` moves on without scoring
4. When `is_game_over` is true, `GET /final-score` and `POST /reset`

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `GAME_OVER` | Round is finished - reset to play again |
| `INVALID_CORPUS` | Word list too small for the requested round |
| `VALIDATION_ERROR` | Parameters out of range |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or _default_service()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def error_to_response(error: ErrorResponse) -> JSONResponse:
        return make_error_response(
            error.error_code,
            error.error,
            status_code=_STATUS_BY_ERROR.get(error.error_code, 400),
            details=error.details,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            details={"errors": jsonable_encoder(exc.errors())},
        )

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Service"],
        summary="Service health and default rules",
    )
    async def health() -> HealthResponse:
        return api_service.health()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid rules or word list"},
        },
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(
        body: Optional[CreateSessionRequest] = None,
    ) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new game session and start its first round.

        Pass `seed` to replay a known sequence of words.
        """
        request = body or CreateSessionRequest()
        try:
            return api_service.create_session(request)
        except CorpusValidationError as e:
            return make_error_response(
                ErrorCode.INVALID_CORPUS, str(e), details={"errors": e.errors}
            )
        except ConfigError as e:
            return make_error_response(ErrorCode.VALIDATION_ERROR, str(e))

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        """List all active session IDs."""
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        """Get the current status of a game session."""
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "user_ended",
    ) -> EndSessionResponse:
        """End a game session and release resources."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    command_responses = {
        404: {"model": ErrorResponse, "description": "Session not found"},
        409: {"model": ErrorResponse, "description": "Round is over"},
    }

    @app.put(
        "/api/v1/sessions/{session_id}/guess",
        response_model=CommandResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Update the in-progress guess",
    )
    async def update_guess(
        session_id: str, body: GuessRequest
    ) -> Union[CommandResponse, JSONResponse]:
        response = api_service.update_guess(session_id, body.guess)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/submit",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="Submit the guess",
    )
    async def submit_guess(
        session_id: str, body: Optional[SubmitGuessRequest] = None
    ) -> Union[CommandResponse, JSONResponse]:
        """
        Check the guess against the current word (case-insensitive).

        A wrong guess sets `is_guess_wrong`; a correct one scores and
        moves to the next word. The guess text is cleared either way.
        """
        guess = body.guess if body else None
        response = api_service.submit_guess(session_id, guess)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/skip",
        response_model=CommandResponse,
        responses=command_responses,
        tags=["Game"],
        summary="Skip the current word",
    )
    async def skip_word(session_id: str) -> Union[CommandResponse, JSONResponse]:
        response = api_service.skip_word(session_id)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/reset",
        response_model=CommandResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Start a new round (play again)",
    )
    async def reset(session_id: str) -> Union[CommandResponse, JSONResponse]:
        response = api_service.reset(session_id)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/final-score",
        response_model=FinalScoreResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="End-of-round summary",
    )
    async def final_score(session_id: str) -> Union[FinalScoreResponse, JSONResponse]:
        response = api_service.get_final_score(session_id)
        if isinstance(response, ErrorResponse):
            return error_to_response(response)
        return response

    # =========================================================================
    # WebSocket Endpoint
    # =========================================================================

    @app.websocket("/api/v1/sessions/{session_id}/ws")
    async def snapshot_stream(websocket: WebSocket, session_id: str):
        """
        Stream snapshots for a session.

        The current snapshot is sent on connect, then every change.
        """
        session = api_service.session_manager.get_session(session_id)
        if not session:
            await websocket.close(code=4404)
            return

        await websocket.accept()
        loop = asyncio.get_running_loop()
        queue: asyncio.Queue = asyncio.Queue()

        def enqueue(snapshot):
            loop.call_soon_threadsafe(queue.put_nowait, snapshot)

        async def forward_snapshots():
            while True:
                snapshot = await queue.get()
                await websocket.send_json({
                    "type": "snapshot",
                    "payload": SnapshotInfo.model_validate(snapshot).model_dump(),
                })

        async def wait_for_disconnect():
            # Client messages are ignored; reading is how a disconnect is seen
            try:
                while True:
                    await websocket.receive_text()
            except WebSocketDisconnect:
                logger.debug("WebSocket for session %s disconnected", session_id)

        unsubscribe = session.game.snapshots.subscribe(enqueue)
        tasks = {
            asyncio.create_task(forward_snapshots()),
            asyncio.create_task(wait_for_disconnect()),
        }
        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            for task in pending:
                task.cancel()
            for task in done:
                error = task.exception()
                if error is not None and not isinstance(error, WebSocketDisconnect):
                    raise error
        finally:
            unsubscribe()

    return app


def _default_service() -> APIService:
    """Build the service from environment configuration."""
    corpus = WordCorpus.from_file(UNSCRAMBLE_WORDS_FILE) if UNSCRAMBLE_WORDS_FILE else None
    manager = SessionManager(corpus=corpus, config=GameConfig.from_env())
    return APIService(session_manager=manager, env=UNSCRAMBLE_ENV)


# For running directly: uvicorn unscramble.api.app:app
app = create_app()
