"""
Configuration settings for the Word Scramble Discord Bot.
Loads environment variables and defines constants.
"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Discord Bot Token
    discord_token: Optional[str] = Field(default=None, validation_alias="DISCORD_TOKEN")

    # Database (dictionary lookup cache)
    database_url: str = Field(
        default="sqlite+aiosqlite:///word_scramble_bot.db",
        validation_alias="DATABASE_URL"
    )

    # Root words, one per line
    word_list_path: Path = Field(
        default=BASE_DIR / "data" / "start.txt",
        validation_alias="WORD_LIST_PATH"
    )

    # Dictionary settings
    dictionary_backend: str = Field(default="api", validation_alias="DICTIONARY_BACKEND")  # "api" or "wordlist"
    dictionary_api_url: str = Field(
        default="https://api.dictionaryapi.dev/api/v2/entries",
        validation_alias="DICTIONARY_API_URL"
    )
    dictionary_path: Optional[Path] = Field(default=None, validation_alias="DICTIONARY_PATH")
    dictionary_language: str = Field(default="en", validation_alias="DICTIONARY_LANGUAGE")
    dictionary_timeout_seconds: float = Field(default=10, validation_alias="DICTIONARY_TIMEOUT_SECONDS")

    # Cache settings
    word_cache_expiry_days: int = Field(default=30, validation_alias="WORD_CACHE_EXPIRY_DAYS")

    # Word rules
    min_word_length: int = Field(default=1, validation_alias="MIN_WORD_LENGTH")
    allow_root_word: bool = Field(default=True, validation_alias="ALLOW_ROOT_WORD")

    # Board display
    max_words_shown: int = Field(default=25, validation_alias="MAX_WORDS_SHOWN")

    # Development mode
    dev_mode: bool = Field(default=False, validation_alias="DEV_MODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Global settings instance
SETTINGS = Settings()

# Dictionary backends
class DictionaryBackend:
    API = "api"
    WORDLIST = "wordlist"

# Logger names
LOGGER_NAME_MAIN = "__main__"
LOGGER_NAME_GAME = "__game__"
LOGGER_NAME_DICTIONARY = "__dictionary__"
LOGGER_NAME_DB = "__database__"

DEFAULT_LANGUAGE = "en"
