"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Player starts a game → create ephemeral session (in-memory only)
2. During the game:
   - Player edits and submits guesses, or skips words
   - Engine scores, advances and publishes snapshots
3. Round ends → session stays around so the player can play again
4. Player leaves → session destroyed, ALL state deleted

PERSISTENCE RULES:
- NO database
- Game state is ephemeral (session-scoped only)
- A session is reconstructible from its corpus, config and seed
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable
import logging
import random
import time
import uuid

from ..config import GameConfig
from ..engine_core import GameSession, GameSnapshot
from ..words import WordCorpus, default_corpus

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Round in progress
    GAME_OVER = "game_over"  # Round finished, waiting for play again
    ENDED = "ended"  # Player left or session expired


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The game (corpus, config, round state)
    - The seed it was started with
    - Session metadata

    The session is destroyed when the player leaves.
    State is NOT persisted.
    """
    session_id: str
    game: GameSession
    seed: int
    created_at: float

    state: SessionState = SessionState.ACTIVE
    last_activity: float = 0.0
    rounds_played: int = 0

    _unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    def is_active(self) -> bool:
        """Check if session can still accept commands."""
        return self.state in {SessionState.ACTIVE, SessionState.GAME_OVER}

    def touch(self) -> None:
        self.last_activity = time.time()

    def _on_snapshot(self, snapshot: GameSnapshot) -> None:
        if self.state == SessionState.ENDED:
            return
        if snapshot.is_game_over:
            if self.state != SessionState.GAME_OVER:
                self.rounds_played += 1
            self.state = SessionState.GAME_OVER
        else:
            self.state = SessionState.ACTIVE


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a corpus, config and seed
    - Track active sessions
    - Clean up idle sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(
        self,
        corpus: WordCorpus | None = None,
        config: GameConfig | None = None,
    ):
        self.default_corpus = corpus if corpus is not None else default_corpus()
        self.default_config = config or GameConfig()
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        corpus: WordCorpus | None = None,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            corpus: Word corpus (defaults to the manager's corpus)
            config: Round rules (defaults to the manager's config)
            seed: Random seed; drawn at random when omitted so the
                session can still be replayed

        Returns:
            New Session with its first round already started

        Raises:
            CorpusValidationError: if the corpus cannot support a round
        """
        if seed is None:
            seed = random.SystemRandom().randrange(2**32)

        game = GameSession(
            corpus=corpus if corpus is not None else self.default_corpus,
            config=config or self.default_config,
            seed=seed,
        )

        now = time.time()
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            seed=seed,
            created_at=now,
            last_activity=now,
        )
        session._unsubscribe = game.snapshots.subscribe(session._on_snapshot)

        self._sessions[session.session_id] = session
        logger.info("Created session %s (seed=%d)", session.session_id, seed)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and clean up.

        The session is removed from memory. Returns False if no such
        session exists.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        session.state = SessionState.ENDED
        if session._unsubscribe:
            session._unsubscribe()
            session._unsubscribe = None
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        End sessions idle for longer than max_age_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id
            for session_id, session in self._sessions.items()
            if current_time - session.last_activity > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return len(to_remove)
