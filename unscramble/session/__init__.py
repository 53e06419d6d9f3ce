"""
Session Module - Manages ephemeral game sessions.

A session represents one player's visit:
- Created when the player starts a game
- Holds the GameSession and the seed it was started with
- Survives game over so the player can play again
- Destroyed when the player leaves or the session goes idle

Sessions are EPHEMERAL:
- No persistence to database
- Reconstructible from corpus, config and seed
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
