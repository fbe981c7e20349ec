"""
Word Bank

Holds the valid-guess dictionary and the solution list for the game.
"""

import random
from typing import Iterable, List, Optional


class ConfigurationError(ValueError):
    """Raised when the word lists cannot support a game."""


def _normalize(word: str) -> str:
    return word.strip().lower()


class WordBank:
    """
    Immutable pair of word lists.

    valid_words answers "may this be guessed", solutions supplies targets.
    Both are normalized (trimmed, lowercased) on load and blank lines are
    dropped.
    """

    def __init__(self,
                 valid_words: Iterable[str],
                 solutions: Iterable[str],
                 word_length: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.valid_words = frozenset(w for w in (_normalize(w) for w in valid_words) if w)
        self.solutions: List[str] = [w for w in (_normalize(w) for w in solutions) if w]
        self.word_length = word_length
        self._rng = rng or random.Random()

        if not self.valid_words:
            raise ConfigurationError("Valid word list cannot be empty")
        if not self.solutions:
            raise ConfigurationError("Solution word list cannot be empty")

        if word_length is not None:
            bad = [w for w in self.solutions if len(w) != word_length]
            if bad:
                raise ConfigurationError(
                    f"Solutions must be {word_length} letters long, found: {bad[:5]}"
                )

    @classmethod
    def from_text(cls, valid_text: str, solutions_text: str, **kwargs) -> "WordBank":
        """Build a word bank from two line-delimited word lists."""
        return cls(valid_text.splitlines(), solutions_text.splitlines(), **kwargs)

    def is_valid(self, word: str) -> bool:
        """Case- and whitespace-insensitive membership test."""
        if not isinstance(word, str):
            return False
        return _normalize(word) in self.valid_words

    def pick_target(self) -> str:
        """Choose a solution uniformly at random."""
        return self._rng.choice(self.solutions)
