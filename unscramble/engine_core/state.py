"""
Game State - The immutable snapshot published to observers.

Design principles:
- Immutable: every change produces a new snapshot
- Value-equal: two snapshots with the same fields are the same state
- Self-contained: everything a front end needs to render one screen
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class GamePhase(Enum):
    """High-level round phases."""
    AWAITING_GUESS = "awaiting_guess"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """
    The observable state of one round at a point in time.

    The unscrambled word is deliberately not part of the snapshot;
    only the session that owns it can see it.
    """
    scrambled_word: str = ""
    is_guess_wrong: bool = False
    score: int = 0
    word_count: int = 1  # 1-based index of the current word
    is_game_over: bool = False

    @property
    def phase(self) -> GamePhase:
        if self.is_game_over:
            return GamePhase.GAME_OVER
        return GamePhase.AWAITING_GUESS

    def copy_with(self, **changes: Any) -> GameSnapshot:
        """Return a new snapshot with some fields replaced."""
        return replace(self, **changes)
