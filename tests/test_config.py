"""
Tests for config module.
"""

from config import Settings


def test_discord_token_defaults_to_none(monkeypatch, tmp_path):
    monkeypatch.delenv("DISCORD_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.discord_token is None


def test_discord_token_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DISCORD_TOKEN", "abc123")
    monkeypatch.chdir(tmp_path)

    assert Settings().discord_token == "abc123"
