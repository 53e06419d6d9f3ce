"""
Pytest fixtures for Unscramble tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core import GameSession
from ..words import WordCorpus, default_corpus


@pytest.fixture
def two_word_corpus() -> WordCorpus:
    """The smallest corpus that supports a two-word round."""
    return WordCorpus(words=("cat", "dog"), name="pets")


@pytest.fixture
def small_corpus() -> WordCorpus:
    """A handful of words, enough for short rounds."""
    return WordCorpus(
        words=("apple", "banana", "cherry", "grape", "lemon", "mango"),
        name="fruit",
    )


@pytest.fixture
def two_word_config() -> GameConfig:
    """Two words per round, twenty points per word."""
    return GameConfig(max_words_per_round=2, score_increment=20)


@pytest.fixture
def two_word_session(two_word_corpus, two_word_config) -> GameSession:
    """A seeded two-word session over ["cat", "dog"]."""
    return GameSession(corpus=two_word_corpus, config=two_word_config, seed=42)


@pytest.fixture
def default_session() -> GameSession:
    """A seeded session with the built-in corpus and default rules."""
    return GameSession(corpus=default_corpus(), seed=1234)
