"""
Word rules for Word Scramble Bot.

A candidate goes through the checks below in order and stops at the first
failure:

1. not empty
2. at least ``min_length`` letters (off unless configured)
3. not already used
4. not the root word itself (off unless configured)
5. spellable from the root word's letters
6. a real word according to the dictionary

Checks 1-5 never touch I/O. A session is only replaced after every check has
passed, so a rejected submission leaves it exactly as it was.
"""
from dataclasses import dataclass
from typing import Iterable

from config import SETTINGS, Settings
from models.errors import (
    EmptyWord,
    WordTooShort,
    DuplicateWord,
    RootWordReused,
    WordNotPossible,
    WordNotRecognized,
)
from models.game import ScrambleSession
from services.word_validator import DictionaryOracle


@dataclass(frozen=True)
class WordRules:
    """Tunable parts of the rule chain."""
    language: str = "en"
    min_length: int = 1
    allow_root_word: bool = True

    @classmethod
    def from_settings(cls, settings: Settings = SETTINGS) -> "WordRules":
        return cls(
            language=settings.dictionary_language,
            min_length=settings.min_word_length,
            allow_root_word=settings.allow_root_word,
        )


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and newlines, then lower-case."""
    return raw.strip().lower()


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """True if every letter of word can be taken from root_word, one use per letter."""
    remaining = list(root_word)
    for letter in word:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


def check_letters(word: str, session: ScrambleSession, rules: WordRules) -> None:
    """Run the checks that don't need the dictionary. Raises WordRejected."""
    if not word:
        raise EmptyWord(word)

    if len(word) < rules.min_length:
        raise WordTooShort(word, rules.min_length)

    if not is_original(word, session.used_words):
        raise DuplicateWord(word)

    if not rules.allow_root_word and word == session.root_word:
        raise RootWordReused(word)

    if not is_possible(word, session.root_word):
        raise WordNotPossible(word, session.root_word)


async def check_word(
    word: str,
    session: ScrambleSession,
    dictionary: DictionaryOracle,
    rules: WordRules,
) -> None:
    """Run the full rule chain on an already normalized word."""
    check_letters(word, session, rules)

    result = await dictionary.validate_word(word, rules.language)
    if not result.is_valid:
        # Only surface the lookup reason when the dictionary couldn't answer
        raise WordNotRecognized(word, None if result.definitive else result.reason)


async def submit_word(
    session: ScrambleSession,
    raw: str,
    dictionary: DictionaryOracle,
    rules: WordRules = WordRules(),
) -> ScrambleSession:
    """
    Validate a raw submission against a session.

    Returns the new session with the word at the front of used_words.
    Raises a WordRejected subclass if any rule fails.
    """
    word = normalize(raw)
    await check_word(word, session, dictionary, rules)
    return session.accept(word)
