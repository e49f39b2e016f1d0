"""
Tests for views.game_ui and the chat message filter.
"""

import discord

from cogs.word_handler import looks_like_word
from models.errors import DuplicateWord, EmptyWord, EmptyWordList, WordNotPossible
from models.game import ScrambleSession
from services.word_validator import WordValidationResult
from views.game_ui import GameEmbed, format_word_entries


def test_format_word_entries_shows_letter_counts():
    text = format_word_entries([("slant", 5), ("net", 3)], max_shown=10)

    assert text.splitlines() == ["` 5` slant", "` 3` net"]


def test_format_word_entries_truncates():
    entries = [(f"w{i}", 2) for i in range(30)]

    lines = format_word_entries(entries, max_shown=25).splitlines()

    assert len(lines) == 26
    assert lines[0] == "` 2` w0"
    assert lines[-1] == "*...and 5 more*"


def test_format_word_entries_empty():
    assert "No words yet" in format_word_entries([], max_shown=25)


def test_board_embed():
    game = ScrambleSession(root_word="planets", used_words=("slant", "net"))

    embed = GameEmbed.board(game, "Ada", max_shown=10)

    assert isinstance(embed, discord.Embed)
    assert "planets" in embed.title
    assert embed.description.splitlines()[0] == "` 5` slant"
    assert "2 word(s)" in embed.footer.text


def test_word_accepted_embed_uses_newest_word():
    game = ScrambleSession(root_word="planets", used_words=("slant", "net"))

    embed = GameEmbed.word_accepted(game, "Ada")

    assert "slant" in embed.title
    assert "5 letters" in embed.title


def test_word_rejected_embed_shows_title_and_message():
    embed = GameEmbed.word_rejected(WordNotPossible("xyz", "planets"))

    assert "Word not possible" in embed.title
    assert "planets" in embed.description
    assert "xyz" in embed.footer.text


def test_word_rejected_embed_empty_word_has_no_footer():
    embed = GameEmbed.word_rejected(EmptyWord())

    assert "empty word" in embed.title
    assert embed.footer.text is None


def test_duplicate_word_message():
    embed = GameEmbed.word_rejected(DuplicateWord("plan"))
    assert embed.description == "Be more original!"


def test_word_list_error_embed():
    embed = GameEmbed.word_list_error(EmptyWordList())
    assert "no usable words" in embed.description


def test_game_ended_embed_reports_longest_word():
    game = ScrambleSession(root_word="planets", used_words=("net", "planet", "plan"))

    embed = GameEmbed.game_ended(game, "Ada")

    assert "**3**" in embed.description
    assert "planet" in embed.description.splitlines()[-1]


def test_word_check_embed_statuses():
    valid = GameEmbed.word_check(WordValidationResult(word="plan", is_valid=True, word_type="noun"))
    unknown = GameEmbed.word_check(WordValidationResult(word="pnl", is_valid=False))
    offline = GameEmbed.word_check(
        WordValidationResult(word="plan", is_valid=False, reason="down", definitive=False)
    )

    assert valid.fields[0].value == "Real word"
    assert valid.fields[1].value == "noun"
    assert unknown.fields[0].value == "Not recognized"
    assert offline.fields[0].value == "Could not check"


def test_looks_like_word():
    assert looks_like_word("plan")
    assert looks_like_word("  Plan\n")
    assert not looks_like_word("plan it")
    assert not looks_like_word("lol!")
    assert not looks_like_word("")
