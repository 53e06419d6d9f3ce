"""
Game Session - The round state machine.

The session is the single owner and mutator of round state:
- the word being guessed (never published)
- the set of words already used this round
- the player's in-progress guess
- the published GameSnapshot

Round flow:
    AWAITING_GUESS --correct--> AWAITING_GUESS' | GAME_OVER
    AWAITING_GUESS --wrong----> AWAITING_GUESS (flagged wrong)
    AWAITING_GUESS --skip-----> AWAITING_GUESS' | GAME_OVER
    GAME_OVER      --reset----> AWAITING_GUESS

Given the same corpus, config and seed, a session replays exactly.
"""

from __future__ import annotations
import logging
import random

from ..config import GameConfig
from ..words import WordCorpus, default_corpus, validate_corpus
from .command import Command, CommandType, CommandResult
from .observable import SnapshotStore
from .shuffle import pick_unused_word, shuffle_word
from .state import GameSnapshot

logger = logging.getLogger(__name__)


def guess_matches(guess: str, word: str) -> bool:
    """
    Case-insensitive comparison, one character at a time.

    Lengths must match, so "straße" never matches "strasse".
    """
    if len(guess) != len(word):
        return False
    return all(
        a == b or a.upper() == b.upper() or a.lower() == b.lower()
        for a, b in zip(guess, word)
    )


class GameSession:
    """
    One player's game, from reset to game over (and again on reset).

    Usage:
        session = GameSession(seed=42)
        session.snapshots.subscribe(render)

        session.update_guess("banana")
        session.submit_guess()
        session.skip_word()

    Raises CorpusValidationError on construction if the corpus cannot
    support a full round.
    """

    def __init__(
        self,
        corpus: WordCorpus | None = None,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        self.corpus = corpus if corpus is not None else default_corpus()
        self.config = config or GameConfig()
        self.seed = seed
        self._rng = rng if rng is not None else random.Random(seed)

        validate_corpus(self.corpus, self.config.max_words_per_round, raise_on_error=True)

        self._current_word = ""
        self._used_words: set[str] = set()
        self._user_guess = ""
        self._store: SnapshotStore[GameSnapshot] = SnapshotStore(GameSnapshot())

        self.reset()

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def snapshots(self) -> SnapshotStore[GameSnapshot]:
        """The observable snapshot slot."""
        return self._store

    @property
    def snapshot(self) -> GameSnapshot:
        return self._store.value

    @property
    def user_guess(self) -> str:
        return self._user_guess

    @property
    def current_word(self) -> str:
        """The unscrambled word. For hosts and tests; never sent to players."""
        return self._current_word

    @property
    def used_words(self) -> frozenset[str]:
        return frozenset(self._used_words)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def apply(self, command: Command) -> CommandResult:
        """Dispatch a Command to its handler."""
        handler = self._get_handler(command.command_type)
        if not handler:
            return CommandResult.failure(
                f"No handler for command type: {command.command_type}",
                error_code="NO_HANDLER",
                snapshot=self.snapshot,
            )
        if command.command_type == CommandType.UPDATE_GUESS:
            return handler(command.text or "")
        return handler()

    def reset(self) -> CommandResult:
        """Start a fresh round."""
        self._used_words.clear()
        self._user_guess = ""
        scrambled = self._pick_random_word_and_shuffle()
        self._store.publish(GameSnapshot(scrambled_word=scrambled))
        logger.info("Round started (corpus=%s, seed=%s)", self.corpus.name, self.seed)
        return CommandResult.ok(self.snapshot)

    def update_guess(self, text: str) -> CommandResult:
        """Replace the in-progress guess. Never changes the snapshot."""
        self._user_guess = text
        return CommandResult.ok(self.snapshot)

    def submit_guess(self) -> CommandResult:
        """
        Check the in-progress guess against the current word.

        Case-insensitive. A correct guess scores and advances; a wrong
        one flags the snapshot. The guess text is cleared either way.
        """
        rejected = self._reject_if_game_over("submit_guess")
        if rejected:
            return rejected

        correct = guess_matches(self._user_guess, self._current_word)
        if correct:
            new_score = self.snapshot.score + self.config.score_increment
            self._advance_round(new_score)
        else:
            self._store.publish(self.snapshot.copy_with(is_guess_wrong=True))

        self._user_guess = ""
        return CommandResult.ok(self.snapshot, guess_correct=correct)

    def skip_word(self) -> CommandResult:
        """Move to the next word without changing the score."""
        rejected = self._reject_if_game_over("skip_word")
        if rejected:
            return rejected

        self._advance_round(self.snapshot.score)
        return CommandResult.ok(self.snapshot)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _get_handler(self, command_type: CommandType):
        handlers = {
            CommandType.RESET: self.reset,
            CommandType.UPDATE_GUESS: self.update_guess,
            CommandType.SUBMIT_GUESS: self.submit_guess,
            CommandType.SKIP_WORD: self.skip_word,
        }
        return handlers.get(command_type)

    def _reject_if_game_over(self, command_name: str) -> CommandResult | None:
        if not self.snapshot.is_game_over:
            return None
        logger.info("Rejected %s: game is over", command_name)
        return CommandResult.failure(
            "Game is over - reset to play again",
            error_code="GAME_OVER",
            snapshot=self.snapshot,
        )

    def _advance_round(self, new_score: int) -> None:
        current = self.snapshot
        if len(self._used_words) == self.config.max_words_per_round:
            self._store.publish(current.copy_with(
                is_guess_wrong=False,
                score=new_score,
                is_game_over=True,
            ))
            logger.info(
                "Game over: scored %d of %d", new_score, self.config.max_score
            )
        else:
            self._store.publish(current.copy_with(
                scrambled_word=self._pick_random_word_and_shuffle(),
                is_guess_wrong=False,
                score=new_score,
                word_count=current.word_count + 1,
            ))

    def _pick_random_word_and_shuffle(self) -> str:
        word = pick_unused_word(self.corpus.words, self._used_words, self._rng)
        self._used_words.add(word)
        self._current_word = word
        logger.debug("Picked word %d: %s", len(self._used_words), word)
        return shuffle_word(word, self._rng)
