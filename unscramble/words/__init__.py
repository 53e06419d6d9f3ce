"""
Words Module - The candidate word corpus.

A corpus is an immutable, validated list of words that sessions draw
from. It is the only input the engine needs besides a random seed.
"""

from .corpus import WordCorpus
from .builtin import ALL_WORDS, default_corpus
from .validation import (
    CorpusValidationError,
    ValidationResult,
    can_scramble,
    validate_corpus,
)

__all__ = [
    "WordCorpus",
    "ALL_WORDS",
    "default_corpus",
    "CorpusValidationError",
    "ValidationResult",
    "can_scramble",
    "validate_corpus",
]
