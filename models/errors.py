"""
Error types for Word Scramble Bot.

Word rejections are recoverable: the session is left as it was and the player
is asked to try again. Word list errors happen when a session is started and
are handed back to the caller instead of stopping the bot.
"""
from enum import Enum
from typing import Optional


class RejectionKind(str, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    DUPLICATE = "duplicate"
    ROOT_WORD = "root_word"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


class WordRejected(Exception):
    """Base class for a candidate word that failed validation."""

    kind: RejectionKind
    title: str = "Word rejected"

    def __init__(self, word: str, message: str):
        super().__init__(message)
        self.word = word
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(word={self.word!r}, message={self.message!r})"


class EmptyWord(WordRejected):
    kind = RejectionKind.EMPTY
    title = "Can't use an empty word"

    def __init__(self, word: str = ""):
        super().__init__(word, "Type a word made from the letters of the root word.")


class WordTooShort(WordRejected):
    kind = RejectionKind.TOO_SHORT
    title = "Word too short"

    def __init__(self, word: str, min_length: int):
        super().__init__(word, f"Words need at least {min_length} letters.")
        self.min_length = min_length


class DuplicateWord(WordRejected):
    kind = RejectionKind.DUPLICATE
    title = "Word used already"

    def __init__(self, word: str):
        super().__init__(word, "Be more original!")


class RootWordReused(WordRejected):
    kind = RejectionKind.ROOT_WORD
    title = "That's the root word"

    def __init__(self, word: str):
        super().__init__(word, "Nice try! Find a different word.")


class WordNotPossible(WordRejected):
    kind = RejectionKind.NOT_POSSIBLE
    title = "Word not possible"

    def __init__(self, word: str, root_word: str):
        super().__init__(word, f"You can't spell that word from '{root_word}'!")
        self.root_word = root_word


class WordNotRecognized(WordRejected):
    kind = RejectionKind.NOT_REAL
    title = "Word not recognized"

    def __init__(self, word: str, reason: Optional[str] = None):
        super().__init__(word, reason or "You can't just make them up, you know!")


class WordListError(Exception):
    """Base class for failures while picking a root word."""


class WordListUnavailable(WordListError):
    def __init__(self, path, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not load word list from {path}{detail}")
        self.path = path


class EmptyWordList(WordListError):
    def __init__(self):
        super().__init__("Word list has no usable words")


class NoActiveGame(Exception):
    """Raised when a player submits a word without a running session."""
