"""
Command System - Commands and results.

Commands represent the four things a player can do:
1. Start (or restart) a round
2. Edit the guess text
3. Submit the guess
4. Skip the current word

All state changes flow through commands.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class CommandType(Enum):
    """Types of commands a session accepts."""
    RESET = "reset"
    UPDATE_GUESS = "update_guess"
    SUBMIT_GUESS = "submit_guess"
    SKIP_WORD = "skip_word"


@dataclass(frozen=True)
class Command:
    """A single player command, with the guess text for UPDATE_GUESS."""
    command_type: CommandType
    text: str | None = None

    @classmethod
    def reset(cls) -> Command:
        return cls(command_type=CommandType.RESET)

    @classmethod
    def update_guess(cls, text: str) -> Command:
        return cls(command_type=CommandType.UPDATE_GUESS, text=text)

    @classmethod
    def submit_guess(cls) -> Command:
        return cls(command_type=CommandType.SUBMIT_GUESS)

    @classmethod
    def skip_word(cls) -> Command:
        return cls(command_type=CommandType.SKIP_WORD)


@dataclass
class CommandResult:
    """
    Result of applying a command.

    Contains:
    - Whether the command was accepted
    - The snapshot after the command (unchanged on failure)
    - Error message and code (on failure)
    - Whether a submitted guess was correct (SUBMIT_GUESS only)
    """
    success: bool
    snapshot: Any | None = None  # GameSnapshot
    error: str | None = None
    error_code: str | None = None
    guess_correct: bool | None = None

    @classmethod
    def failure(
        cls,
        error: str,
        error_code: str | None = None,
        snapshot: Any | None = None,
    ) -> CommandResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code, snapshot=snapshot)

    @classmethod
    def ok(cls, snapshot: Any, guess_correct: bool | None = None) -> CommandResult:
        """Create a success result."""
        return cls(success=True, snapshot=snapshot, guess_correct=guess_correct)
