"""
Tests for word scrambling and word selection.

Tests:
- Scrambled words differ from the original
- Scrambled words use exactly the original letters
- Unused-word selection
"""

import random

from ..engine_core.shuffle import shuffle_word, pick_unused_word
from ..words import ALL_WORDS


class TestShuffleWord:
    """Tests for shuffle_word."""

    def test_every_builtin_word_scrambles_to_something_else(self):
        """No built-in word is ever returned unchanged."""
        rng = random.Random(0)
        for word in ALL_WORDS:
            assert shuffle_word(word, rng) != word

    def test_scramble_is_a_permutation(self):
        """Scrambled word has the same letters as the original."""
        rng = random.Random(1)
        for word in ALL_WORDS:
            assert sorted(shuffle_word(word, rng)) == sorted(word)

    def test_two_letter_word_has_one_scramble(self):
        """A two-letter word can only be reversed."""
        rng = random.Random(2)
        for _ in range(20):
            assert shuffle_word("ab", rng) == "ba"

    def test_comparison_is_case_sensitive(self):
        """Letters that differ only in case still count as different."""
        rng = random.Random(3)
        assert shuffle_word("Aa", rng) == "aA"

    def test_repeated_letters(self):
        """Words with repeated letters still scramble."""
        rng = random.Random(4)
        for _ in range(50):
            scrambled = shuffle_word("aab", rng)
            assert scrambled in {"aba", "baa"}

    def test_same_seed_same_result(self):
        """Scrambling is deterministic for a given seed."""
        first = shuffle_word("kaleidoscope", random.Random(99))
        second = shuffle_word("kaleidoscope", random.Random(99))
        assert first == second


class TestPickUnusedWord:
    """Tests for pick_unused_word."""

    def test_picks_from_words(self):
        """Picked word comes from the list."""
        rng = random.Random(0)
        words = ("cat", "dog", "fox")
        assert pick_unused_word(words, set(), rng) in words

    def test_skips_used_words(self):
        """Only the one unused word can be picked."""
        rng = random.Random(0)
        words = ("cat", "dog", "fox", "owl")
        for _ in range(20):
            assert pick_unused_word(words, {"cat", "dog", "owl"}, rng) == "fox"
