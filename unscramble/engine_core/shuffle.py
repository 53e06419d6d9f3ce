"""
Word selection and scrambling.

Both operations retry until they find an acceptable result. They are
plain loops; termination relies on the corpus preconditions checked in
words.validation (enough distinct words, every word scrambleable).
"""

from __future__ import annotations
import random
from typing import AbstractSet, Sequence


def shuffle_word(word: str, rng: random.Random) -> str:
    """
    Return a uniformly random permutation of word that differs from it.

    Comparison is case-sensitive. Loops forever on words with fewer
    than two distinct characters, so callers must not pass those.
    """
    letters = list(word)
    rng.shuffle(letters)
    while "".join(letters) == word:
        rng.shuffle(letters)
    return "".join(letters)


def pick_unused_word(
    words: Sequence[str],
    used: AbstractSet[str],
    rng: random.Random,
) -> str:
    """Draw uniformly from words, redrawing until the draw is not in used."""
    word = rng.choice(words)
    while word in used:
        word = rng.choice(words)
    return word
