"""Services module for Word Scramble Bot."""
from services.word_validator import (
    DictionaryOracle,
    FreeDictionaryValidator,
    WordSetValidator,
    WordValidationResult,
    create_dictionary,
)
from services.word_rules import WordRules, submit_word
from services.game_manager import GameManager

__all__ = [
    "DictionaryOracle",
    "FreeDictionaryValidator",
    "WordSetValidator",
    "WordValidationResult",
    "create_dictionary",
    "WordRules",
    "submit_word",
    "GameManager",
]
