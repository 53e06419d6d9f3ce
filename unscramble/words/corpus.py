"""
Word Corpus - The fixed set of candidate words for a game.

A corpus is immutable once built. Sessions draw from it but never
modify it, so one corpus can be shared by any number of sessions.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordCorpus:
    """
    An ordered, immutable sequence of candidate words.

    Validation is separate (see validation.validate_corpus) so that a
    corpus can be inspected and reported on even when it is unusable.
    """
    words: tuple[str, ...]
    name: str = "custom"

    def __post_init__(self):
        # Accept any iterable of strings but always store a tuple
        object.__setattr__(self, "words", tuple(self.words))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.words

    @classmethod
    def from_lines(cls, lines, name: str = "custom") -> WordCorpus:
        """
        Build a corpus from text lines, one word per line.

        Surrounding whitespace is stripped; blank lines and lines
        starting with '#' are ignored. Words are kept as written so
        that validation can report non-lowercase entries.
        """
        words = []
        for line in lines:
            word = line.strip()
            if not word or word.startswith("#"):
                continue
            words.append(word)
        return cls(words=tuple(words), name=name)

    @classmethod
    def from_file(cls, path: str | Path) -> WordCorpus:
        """Load a corpus from a UTF-8 text file."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            corpus = cls.from_lines(f, name=path.stem)
        logger.info("Loaded %d words from %s", len(corpus), path)
        return corpus
