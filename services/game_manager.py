"""
Game Manager Service for Word Scramble Bot.
Handles session lifecycle and serializes word submissions per player.
"""
import asyncio
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from config import SETTINGS, LOGGER_NAME_GAME
from models.errors import NoActiveGame, WordRejected
from models.game import ScrambleSession
from services.word_list import load_word_list
from services.word_rules import WordRules, submit_word
from services.word_validator import DictionaryOracle, create_dictionary

logger = logging.getLogger(LOGGER_NAME_GAME)

# (channel_id, user_id)
GameKey = Tuple[int, int]


class GameManager:
    """
    Manages all active scramble sessions.

    Every player has their own session per channel. Submissions for one
    session run one at a time; different sessions never block each other.
    """

    def __init__(
        self,
        dictionary: Optional[DictionaryOracle] = None,
        rules: Optional[WordRules] = None,
        word_list_path: Optional[Path] = None,
        rng: Optional[random.Random] = None,
    ):
        self._dictionary = dictionary
        self.rules = rules or WordRules.from_settings()
        self.word_list_path = Path(word_list_path or SETTINGS.word_list_path)
        self._rng = rng
        # Active sessions in memory: (channel_id, user_id) -> ScrambleSession
        self._active_games: Dict[GameKey, ScrambleSession] = {}
        self._locks: Dict[GameKey, asyncio.Lock] = {}

    @property
    def dictionary(self) -> DictionaryOracle:
        if self._dictionary is None:
            self._dictionary = create_dictionary()
        return self._dictionary

    def set_dictionary(self, dictionary: DictionaryOracle) -> None:
        self._dictionary = dictionary

    def _lock(self, key: GameKey) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    def get_game(self, channel_id: int, user_id: int) -> Optional[ScrambleSession]:
        """Get a player's session in a channel."""
        return self._active_games.get((channel_id, user_id))

    def has_active_game(self, channel_id: int, user_id: int) -> bool:
        return (channel_id, user_id) in self._active_games

    def active_games_in_channel(self, channel_id: int) -> List[Tuple[int, ScrambleSession]]:
        """All (user_id, session) pairs running in a channel."""
        return [
            (user_id, game)
            for (channel, user_id), game in self._active_games.items()
            if channel == channel_id
        ]

    async def start_game(
        self,
        channel_id: int,
        user_id: int,
        words: Optional[Sequence[str]] = None
    ) -> ScrambleSession:
        """
        Start a new session, replacing any existing one.

        Args:
            channel_id: Discord channel ID
            user_id: Player's Discord user ID
            words: Root words to pick from; loaded from the word list file if omitted

        Raises:
            WordListError: if the word list can't be loaded or has no words
        """
        key = (channel_id, user_id)
        async with self._lock(key):
            if words is None:
                words = load_word_list(self.word_list_path)
            game = ScrambleSession.start(words, self._rng)
            replaced = key in self._active_games
            self._active_games[key] = game

        logger.info(
            f"Game {'restarted' if replaced else 'started'}: channel={channel_id}, "
            f"user={user_id}, root={game.root_word}"
        )
        return game

    async def restart_game(
        self,
        channel_id: int,
        user_id: int,
        words: Optional[Sequence[str]] = None
    ) -> ScrambleSession:
        """Throw away the current session and start over with a new root word."""
        return await self.start_game(channel_id, user_id, words)

    async def submit_word(self, channel_id: int, user_id: int, raw: str) -> ScrambleSession:
        """
        Submit a word to a player's session.

        Returns:
            The updated session

        Raises:
            NoActiveGame: if the player has no session in this channel
            WordRejected: if the word fails a rule; the session is unchanged
        """
        key = (channel_id, user_id)
        async with self._lock(key):
            # Re-read inside the lock, a restart may have happened while waiting
            game = self._active_games.get(key)
            if game is None:
                raise NoActiveGame()

            try:
                updated = await submit_word(game, raw, self.dictionary, self.rules)
            except WordRejected as e:
                logger.debug(
                    f"Word rejected: '{e.word}' ({e.kind.value}) user={user_id}, root={game.root_word}"
                )
                raise

            # A stop while the dictionary was answering wins over the submission
            if self._active_games.get(key) is not game:
                raise NoActiveGame()

            self._active_games[key] = updated

        logger.debug(
            f"Word accepted: '{updated.used_words[0]}' user={user_id}, "
            f"root={updated.root_word}, total={updated.word_count}"
        )
        return updated

    def end_game(self, channel_id: int, user_id: int) -> Optional[ScrambleSession]:
        """
        End a player's session.

        Returns:
            The ended session, None if not found
        """
        key = (channel_id, user_id)
        game = self._active_games.pop(key, None)
        if game:
            logger.info(
                f"Game ended: channel={channel_id}, user={user_id}, "
                f"root={game.root_word}, words={game.word_count}"
            )
        return game

    async def close(self) -> None:
        """Close the dictionary backend."""
        if self._dictionary is not None:
            await self._dictionary.close()


# Global game manager instance
game_manager = GameManager()
