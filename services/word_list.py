"""
Word list loading for Word Scramble Bot.
Reads newline-delimited files of root words or dictionary words.
"""
import logging
from pathlib import Path
from typing import List, Union

from config import LOGGER_NAME_GAME
from models.errors import WordListUnavailable

logger = logging.getLogger(LOGGER_NAME_GAME)


def load_word_list(path: Union[str, Path]) -> List[str]:
    """
    Load a word list file, one word per line.

    Lines are stripped and lower-cased, blank lines are skipped and file
    order is kept. Raises WordListUnavailable if the file can't be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read word list {path}: {e}")
        raise WordListUnavailable(path, e) from e

    words = [line.strip().lower() for line in text.splitlines()]
    words = [w for w in words if w]
    logger.debug(f"Loaded {len(words)} words from {path}")
    return words
