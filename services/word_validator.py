"""
Dictionary services for Word Scramble Bot.

Two backends answer "is this a real word?":
- FreeDictionaryValidator asks the Free Dictionary API (https://dictionaryapi.dev/)
  and caches answers in the database.
- WordSetValidator checks a word list loaded into memory.
"""
import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Iterable, Optional, Union
from urllib.parse import quote

import aiohttp
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from config import SETTINGS, LOGGER_NAME_DICTIONARY, DEFAULT_LANGUAGE, DictionaryBackend, Settings
from models.db_models import WordCache
from services.word_list import load_word_list

logger = logging.getLogger(LOGGER_NAME_DICTIONARY)


@dataclass
class WordValidationResult:
    """Result of a dictionary lookup."""
    word: str
    is_valid: bool
    word_type: Optional[str] = None
    reason: Optional[str] = None
    from_cache: bool = False
    # False when the dictionary could not give an answer (network error etc.)
    definitive: bool = True


class DictionaryOracle(ABC):
    """Answers whether a word is a real word in a language."""

    @abstractmethod
    async def validate_word(
        self,
        word: str,
        language: str = DEFAULT_LANGUAGE
    ) -> WordValidationResult:
        ...

    async def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        result = await self.validate_word(word, language)
        return result.is_valid

    async def close(self) -> None:
        """Release any resources held by the dictionary."""
        return None


class WordSetValidator(DictionaryOracle):
    """Validates words against an in-memory word set. Language is ignored."""

    def __init__(self, words: Iterable[str]):
        self._words = {w.strip().lower() for w in words if w and w.strip()}
        logger.info(f"Word set dictionary initialized with {len(self._words)} words")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordSetValidator":
        return cls(load_word_list(path))

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    async def validate_word(
        self,
        word: str,
        language: str = DEFAULT_LANGUAGE
    ) -> WordValidationResult:
        word_lower = word.lower().strip()
        if word_lower in self._words:
            return WordValidationResult(word=word_lower, is_valid=True)
        return WordValidationResult(
            word=word_lower,
            is_valid=False,
            reason=f"The word '{word_lower}' is not in the dictionary."
        )


class FreeDictionaryValidator(DictionaryOracle):
    """
    Validates words using the Free Dictionary API.
    Includes caching to reduce API calls.
    """

    def __init__(
        self,
        session_factory: Optional[Callable[[], AsyncSession]] = None,
        api_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        cache_expiry_days: Optional[int] = None,
    ):
        self._session_factory = session_factory
        self._api_url = (api_url or SETTINGS.dictionary_api_url).rstrip("/")
        self._timeout_seconds = timeout_seconds or SETTINGS.dictionary_timeout_seconds
        self._cache_expiry_days = cache_expiry_days or SETTINGS.word_cache_expiry_days
        self._http: Optional[aiohttp.ClientSession] = None
        logger.info(f"Word validator initialized using Free Dictionary API ({self._api_url})")

    async def _get_http(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._http is None or self._http.closed:
            self._http = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds)
            )
        return self._http

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._http and not self._http.closed:
            await self._http.close()

    async def validate_word(
        self,
        word: str,
        language: str = DEFAULT_LANGUAGE
    ) -> WordValidationResult:
        """
        Validate a word using the dictionary API with caching.

        Args:
            word: The word to validate
            language: Language code (default: "en")

        Returns:
            WordValidationResult with validation details
        """
        word_lower = word.lower().strip()
        if not word_lower:
            return WordValidationResult(word=word_lower, is_valid=False, reason="Empty word")

        if self._session_factory is None:
            return await self._validate_with_dictionary(word_lower, language)

        async with self._session_factory() as session:
            cached_result = await self._check_cache(word_lower, language, session)
            if cached_result:
                logger.debug(f"Cache hit for word: {word_lower}")
                return cached_result

            logger.info(f"Validating word with Dictionary API: {word_lower}")
            result = await self._validate_with_dictionary(word_lower, language)

            # Don't remember answers we didn't actually get
            if result.definitive:
                await self._store_in_cache(word_lower, language, result, session)

            return result

    async def _check_cache(
        self,
        word: str,
        language: str,
        session: AsyncSession
    ) -> Optional[WordValidationResult]:
        """Check if word exists in cache and is not expired."""
        cache_expiry = datetime.utcnow() - timedelta(days=self._cache_expiry_days)

        stmt = select(WordCache).where(
            WordCache.word == word,
            WordCache.language == language,
            WordCache.validated_at >= cache_expiry
        )

        result = await session.execute(stmt)
        cached = result.scalar_one_or_none()

        if cached:
            return WordValidationResult(
                word=word,
                is_valid=cached.is_valid,
                word_type=cached.word_type,
                reason=cached.reason,
                from_cache=True
            )

        return None

    async def _store_in_cache(
        self,
        word: str,
        language: str,
        result: WordValidationResult,
        session: AsyncSession
    ) -> None:
        """Store validation result in cache."""
        stmt = select(WordCache).where(
            WordCache.word == word,
            WordCache.language == language
        )
        existing = await session.execute(stmt)
        cached = existing.scalar_one_or_none()

        if cached:
            # Expired entry, refresh it
            cached.is_valid = result.is_valid
            cached.word_type = result.word_type
            cached.reason = result.reason
            cached.validated_at = datetime.utcnow()
        else:
            session.add(WordCache(
                word=word,
                language=language,
                is_valid=result.is_valid,
                word_type=result.word_type,
                reason=result.reason
            ))

        try:
            await session.commit()
        except Exception as e:
            logger.warning(f"Failed to cache word '{word}': {e}")
            await session.rollback()

    async def _validate_with_dictionary(self, word: str, language: str) -> WordValidationResult:
        """Call Free Dictionary API to validate the word."""
        try:
            http = await self._get_http()
            url = f"{self._api_url}/{language}/{quote(word)}"

            async with http.get(url) as response:
                if response.status == 200:
                    data = await response.json()
                    return WordValidationResult(
                        word=word,
                        is_valid=True,
                        word_type=self._parse_dictionary_response(data)
                    )
                elif response.status == 404:
                    return WordValidationResult(
                        word=word,
                        is_valid=False,
                        reason=f"The word '{word}' is not found in the dictionary."
                    )
                else:
                    # API error - fail safe, reject word
                    logger.warning(f"Dictionary API returned status {response.status} for word '{word}'")
                    return WordValidationResult(
                        word=word,
                        is_valid=False,
                        reason=f"Could not verify word (API error {response.status}). Please try again.",
                        definitive=False
                    )

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Dictionary API connection error for '{word}': {e!r}")
            return WordValidationResult(
                word=word,
                is_valid=False,
                reason="Could not connect to dictionary service. Please try again.",
                definitive=False
            )

    @staticmethod
    def _parse_dictionary_response(data) -> Optional[str]:
        """Extract the first part of speech from a Free Dictionary API response."""
        if not data or not isinstance(data, list):
            return None

        for entry in data:
            if not isinstance(entry, dict):
                continue
            for meaning in entry.get("meanings", []):
                part_of_speech = meaning.get("partOfSpeech")
                if part_of_speech:
                    return part_of_speech.lower()
        return None


def create_dictionary(settings: Settings = SETTINGS) -> DictionaryOracle:
    """Build the dictionary backend selected in settings."""
    backend = settings.dictionary_backend.lower()

    if backend == DictionaryBackend.WORDLIST:
        if not settings.dictionary_path:
            raise ValueError("DICTIONARY_PATH must be set for the wordlist dictionary backend")
        return WordSetValidator.from_file(settings.dictionary_path)

    if backend == DictionaryBackend.API:
        from database import async_session_factory
        return FreeDictionaryValidator(
            session_factory=async_session_factory,
            api_url=settings.dictionary_api_url,
            timeout_seconds=settings.dictionary_timeout_seconds,
            cache_expiry_days=settings.word_cache_expiry_days,
        )

    raise ValueError(f"Unknown dictionary backend: {settings.dictionary_backend}")
