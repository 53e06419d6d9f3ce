"""
Corpus Validation - Preconditions a corpus must meet before play.

Validates that:
1. The corpus is non-empty and has no duplicate entries
2. Every word is lowercase
3. Every word can be scrambled into something different from itself
4. The corpus holds at least one round's worth of words

A corpus that fails any of these would make word selection or
shuffling loop forever, so it is rejected before a session starts.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass

from .corpus import WordCorpus


class CorpusValidationError(Exception):
    """Raised when corpus validation fails."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Corpus validation failed with {len(errors)} error(s)")


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def can_scramble(word: str) -> bool:
    """True if some permutation of word differs from word."""
    return len(set(word)) >= 2


def validate_corpus(
    corpus: WordCorpus,
    max_words_per_round: int,
    raise_on_error: bool = False,
) -> ValidationResult:
    """
    Validate a corpus against the round length it will be played with.

    Returns ValidationResult with errors and warnings.
    Raises CorpusValidationError if raise_on_error=True and errors exist.
    """
    errors: list[str] = []
    warnings: list[str] = []

    if len(corpus) == 0:
        errors.append("Corpus is empty")

    duplicates = sorted(w for w, n in Counter(corpus.words).items() if n > 1)
    for word in duplicates:
        errors.append(f"Duplicate word '{word}'")

    for word in corpus.words:
        errors.extend(_validate_word(word))

    distinct = len(set(corpus.words))
    if 0 < distinct < max_words_per_round:
        errors.append(
            f"Corpus has {distinct} distinct word(s) but a round needs {max_words_per_round}"
        )
    elif distinct < 2 * max_words_per_round and distinct > 0:
        warnings.append(
            f"Corpus has only {distinct} words for rounds of {max_words_per_round}; "
            "rounds will repeat often"
        )

    short_words = [w for w in corpus.words if len(w) == 2]
    if short_words:
        warnings.append(
            f"{len(short_words)} two-letter word(s) have a single scrambled form"
        )

    result = ValidationResult(
        valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
    )
    if raise_on_error and not result.valid:
        raise CorpusValidationError(errors)
    return result


def _validate_word(word: str) -> list[str]:
    """Validate a single corpus entry."""
    errors = []
    if not word:
        errors.append("Corpus contains an empty word")
        return errors
    if word != word.lower():
        errors.append(f"Word '{word}' is not lowercase")
    if not can_scramble(word):
        errors.append(f"Word '{word}' has no scrambled form different from itself")
    return errors
