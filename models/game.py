"""
Game state dataclasses for Word Scramble Bot.
A session is an immutable snapshot; every transition returns a new one.
"""
import random
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from models.errors import EmptyWordList


def pick_random_root(words: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """
    Pick a root word uniformly at random.

    Blank entries are skipped. Raises EmptyWordList when nothing is left.
    """
    candidates = [w for w in words if w and w.strip()]
    if not candidates:
        raise EmptyWordList()
    return (rng or random).choice(candidates)


@dataclass(frozen=True)
class ScrambleSession:
    """
    State of a single player's game.

    used_words is ordered most-recent-first.
    """
    root_word: str
    used_words: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def start(
        cls,
        words: Sequence[str],
        rng: Optional[random.Random] = None
    ) -> "ScrambleSession":
        """Start a fresh session with a random root from words."""
        return cls(root_word=pick_random_root(words, rng))

    def accept(self, word: str) -> "ScrambleSession":
        """Return a new session with word at the front of used_words."""
        return replace(self, used_words=(word,) + self.used_words)

    def is_word_used(self, word: str) -> bool:
        return word in self.used_words

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    def word_entries(self) -> List[Tuple[str, int]]:
        """Accepted words paired with their letter counts, newest first."""
        return [(word, len(word)) for word in self.used_words]

    def to_dict(self) -> dict:
        """Convert session to dictionary for debugging/logging."""
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "word_count": self.word_count,
        }
