"""
Pytest configuration for the Word Scramble bot.

Keeps tests offline: dictionaries are in-memory word sets and the database
points at SQLite instead of a real file.
"""

import os

import pytest

# Must be set before config.SETTINGS is created on first import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DICTIONARY_BACKEND", "wordlist")

from services.word_validator import WordSetValidator  # noqa: E402


ENGLISH_WORDS = [
    "plan", "plane", "planet", "planets", "plans", "plant", "plants",
    "lane", "lanes", "net", "nets", "nest", "pale", "pan", "pans", "pant",
    "pants", "pat", "pea", "peat", "pelt", "pen", "pens", "pent", "pest",
    "slant", "slate", "span", "spat", "splat", "stale", "steal", "tan",
    "tape", "taps", "tea", "ten", "tens", "let", "set", "tee", "tees",
    "letters", "settle", "street", "tester", "rest", "tree", "trees", "latte",
]


@pytest.fixture()
def dictionary():
    return WordSetValidator(ENGLISH_WORDS)
