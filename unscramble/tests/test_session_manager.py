"""
Tests for session management.

Tests:
- Session creation with seeds and rules
- Session state tracking through snapshots
- Ending and cleaning up sessions
"""

import pytest

from ..config import GameConfig
from ..session import SessionManager, SessionState
from ..words import CorpusValidationError


class TestSessionManager:
    """Tests for SessionManager."""

    @pytest.fixture
    def manager(self, two_word_corpus, two_word_config):
        return SessionManager(corpus=two_word_corpus, config=two_word_config)

    def test_create_session(self, manager):
        """New sessions are active and tracked."""
        session = manager.create_session(seed=3)

        assert session.session_id in manager.list_active_sessions()
        assert session.seed == 3
        assert session.state == SessionState.ACTIVE
        assert session.game.snapshot.word_count == 1
        assert manager.get_session(session.session_id) is session

    def test_seed_drawn_when_missing(self, manager):
        """A seed is always recorded so the session can be replayed."""
        session = manager.create_session()
        assert isinstance(session.seed, int)

    def test_seeded_sessions_replay(self, manager):
        """Sessions with the same seed start with the same word."""
        first = manager.create_session(seed=11)
        second = manager.create_session(seed=11)
        assert first.game.snapshot == second.game.snapshot
        assert first.session_id != second.session_id

    def test_default_corpus_is_builtin(self):
        """Without a corpus the manager uses the built-in list."""
        manager = SessionManager()
        session = manager.create_session(seed=1)
        assert session.game.corpus.name == "builtin"

    def test_config_override(self, manager, small_corpus):
        """Per-session corpus and config override the manager defaults."""
        session = manager.create_session(
            corpus=small_corpus, config=GameConfig(max_words_per_round=5), seed=1
        )
        assert session.game.corpus is small_corpus
        assert session.game.config.max_words_per_round == 5

    def test_invalid_rules_rejected(self, manager):
        """Rules the corpus cannot support raise on creation."""
        with pytest.raises(CorpusValidationError):
            manager.create_session(config=GameConfig(max_words_per_round=3))
        assert manager.list_active_sessions() == []

    def test_state_follows_game_over(self, manager):
        """Session state tracks the round's game-over flag."""
        session = manager.create_session(seed=2)
        session.game.skip_word()
        session.game.skip_word()

        assert session.state == SessionState.GAME_OVER
        assert session.rounds_played == 1
        assert session.is_active()

        session.game.reset()

        assert session.state == SessionState.ACTIVE
        assert session.rounds_played == 1

    def test_end_session(self, manager):
        """Ended sessions are removed and marked ended."""
        session = manager.create_session(seed=4)

        assert manager.end_session(session.session_id)

        assert manager.get_session(session.session_id) is None
        assert session.state == SessionState.ENDED
        assert not session.is_active()
        assert session.game.snapshots.subscriber_count == 0

    def test_end_unknown_session(self, manager):
        """Ending an unknown session reports failure."""
        assert manager.end_session("nonexistent-id") is False

    def test_cleanup_stale_sessions(self, manager):
        """Idle sessions are cleaned up, recent ones kept."""
        stale = manager.create_session(seed=5)
        fresh = manager.create_session(seed=6)
        stale.last_activity = 0.0

        removed = manager.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == 1
        assert manager.get_session(stale.session_id) is None
        assert manager.get_session(fresh.session_id) is fresh
