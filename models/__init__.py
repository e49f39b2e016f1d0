"""Models for Word Scramble Bot - __init__ module."""
from models.db_models import Base, WordCache
from models.errors import (
    RejectionKind,
    WordRejected,
    EmptyWord,
    WordTooShort,
    DuplicateWord,
    RootWordReused,
    WordNotPossible,
    WordNotRecognized,
    WordListError,
    WordListUnavailable,
    EmptyWordList,
    NoActiveGame,
)
from models.game import ScrambleSession, pick_random_root

__all__ = [
    "Base",
    "WordCache",
    "RejectionKind",
    "WordRejected",
    "EmptyWord",
    "WordTooShort",
    "DuplicateWord",
    "RootWordReused",
    "WordNotPossible",
    "WordNotRecognized",
    "WordListError",
    "WordListUnavailable",
    "EmptyWordList",
    "NoActiveGame",
    "ScrambleSession",
    "pick_random_root",
]
