"""
Game Configuration - Round length and scoring.

Defaults match the classic game: ten words per round, twenty points
per correct guess. Both can be overridden through the environment:

    UNSCRAMBLE_MAX_WORDS          Words per round
    UNSCRAMBLE_SCORE_INCREMENT    Points per correct guess
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import os

MAX_WORDS_PER_ROUND = 10
SCORE_INCREMENT = 20


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed per-session game rules.

    Validated on construction; an invalid config never reaches a session.
    """
    max_words_per_round: int = MAX_WORDS_PER_ROUND
    score_increment: int = SCORE_INCREMENT

    def __post_init__(self):
        if self.max_words_per_round < 1:
            raise ConfigError(
                f"max_words_per_round must be >= 1, got {self.max_words_per_round}"
            )
        if self.score_increment < 1:
            raise ConfigError(
                f"score_increment must be >= 1, got {self.score_increment}"
            )

    @property
    def max_score(self) -> int:
        """Best possible score for one round."""
        return self.max_words_per_round * self.score_increment

    def with_overrides(
        self,
        max_words_per_round: int | None = None,
        score_increment: int | None = None,
    ) -> GameConfig:
        """Return a copy with the given (non-None) values replaced."""
        changes = {}
        if max_words_per_round is not None:
            changes["max_words_per_round"] = max_words_per_round
        if score_increment is not None:
            changes["score_increment"] = score_increment
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GameConfig:
        """Build a config from UNSCRAMBLE_* environment variables."""
        env = os.environ if environ is None else environ
        return cls().with_overrides(
            max_words_per_round=_int_from_env(env, "UNSCRAMBLE_MAX_WORDS"),
            score_increment=_int_from_env(env, "UNSCRAMBLE_SCORE_INCREMENT"),
        )


def _int_from_env(env, name: str) -> int | None:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
