"""
Engine Core - The word game state machine.

The engine is the runtime that:
1. Validates the corpus against the round rules
2. Picks unused words and scrambles them
3. Applies player commands to the round state
4. Publishes an immutable snapshot after every change
"""

from .state import GameSnapshot, GamePhase
from .command import Command, CommandType, CommandResult
from .observable import SnapshotStore
from .shuffle import shuffle_word, pick_unused_word
from .game import GameSession

__all__ = [
    "GameSnapshot",
    "GamePhase",
    "Command",
    "CommandType",
    "CommandResult",
    "SnapshotStore",
    "shuffle_word",
    "pick_unused_word",
    "GameSession",
]
