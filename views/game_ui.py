"""
Game UI components for Word Scramble Bot.
Provides embeds for the game board and for rejected words.
"""
from typing import List, Optional, Tuple

import discord

from config import SETTINGS
from models.errors import WordListError, WordRejected
from models.game import ScrambleSession
from services.word_validator import WordValidationResult


def format_word_entries(entries: List[Tuple[str, int]], max_shown: int) -> str:
    """Render accepted words with their letter counts, newest first."""
    if not entries:
        return "*No words yet - type one in the chat!*"

    lines = [f"`{count:>2}` {word}" for word, count in entries[:max_shown]]
    hidden = len(entries) - max_shown
    if hidden > 0:
        lines.append(f"*...and {hidden} more*")
    return "\n".join(lines)


class GameEmbed:
    """Factory for creating game-related embeds."""

    @staticmethod
    def board(
        game: ScrambleSession,
        player_name: str,
        max_shown: Optional[int] = None
    ) -> discord.Embed:
        """Create the board embed: root word and the player's accepted words."""
        embed = discord.Embed(
            title=f"🔤 {game.root_word}",
            description=format_word_entries(
                game.word_entries(),
                max_shown or SETTINGS.max_words_shown
            ),
            color=discord.Color.blurple()
        )
        embed.set_footer(text=f"{player_name} · {game.word_count} word(s) found")
        return embed

    @staticmethod
    def game_started(game: ScrambleSession, player_name: str) -> discord.Embed:
        """Create embed for a new root word."""
        embed = discord.Embed(
            title=f"🎮 Your word is: {game.root_word}",
            description=(
                f"**{player_name}**, make as many words as you can "
                f"from the letters of **{game.root_word}**.\n\n"
                "📝 Type a word in this channel or use `/scramble submit`."
            ),
            color=discord.Color.green()
        )
        return embed

    @staticmethod
    def word_accepted(game: ScrambleSession, player_name: str) -> discord.Embed:
        """Create embed for accepted word."""
        word = game.used_words[0]
        embed = discord.Embed(
            title=f"✅ {word} ({len(word)} letters)",
            description=f"**{player_name}** now has **{game.word_count}** word(s) from **{game.root_word}**.",
            color=discord.Color.green()
        )
        return embed

    @staticmethod
    def word_rejected(error: WordRejected) -> discord.Embed:
        """Create embed for a rejected word (warning only)."""
        embed = discord.Embed(
            title=f"⚠️ {error.title}",
            description=error.message,
            color=discord.Color.orange()
        )
        if error.word:
            embed.set_footer(text=f"You entered: {error.word}")
        return embed

    @staticmethod
    def word_list_error(error: WordListError) -> discord.Embed:
        """Create embed for a game that could not be started."""
        return discord.Embed(
            title="❌ Couldn't start a game",
            description=f"{error}\n\nPlease try again later.",
            color=discord.Color.red()
        )

    @staticmethod
    def no_active_game() -> discord.Embed:
        return discord.Embed(
            title="❌ No game running",
            description="Use `/scramble start` to get a root word.",
            color=discord.Color.dark_gray()
        )

    @staticmethod
    def game_ended(game: ScrambleSession, player_name: str) -> discord.Embed:
        """Create embed for a finished session."""
        longest = max(game.used_words, key=len) if game.used_words else None
        description = f"**{player_name}** found **{game.word_count}** word(s) from **{game.root_word}**."
        if longest:
            description += f"\n📏 Longest: **{longest}** ({len(longest)} letters)"
        return discord.Embed(
            title="🏁 Game over",
            description=description,
            color=discord.Color.gold()
        )

    @staticmethod
    def word_check(result: WordValidationResult) -> discord.Embed:
        """Create embed for a dictionary lookup."""
        if result.is_valid:
            emoji, status, color = "✅", "Real word", discord.Color.green()
        elif not result.definitive:
            emoji, status, color = "⚠️", "Could not check", discord.Color.orange()
        else:
            emoji, status, color = "❌", "Not recognized", discord.Color.red()

        embed = discord.Embed(title=f"{emoji} Word check: {result.word}", color=color)
        embed.add_field(name="Status", value=status, inline=True)

        if result.word_type:
            embed.add_field(name="Word type", value=result.word_type, inline=True)

        if result.reason:
            embed.add_field(name="Details", value=result.reason, inline=False)

        if result.from_cache:
            embed.set_footer(text="📦 From cache")

        return embed

    @staticmethod
    def rules() -> discord.Embed:
        """Create embed with the game rules."""
        embed = discord.Embed(
            title="📜 Word Scramble rules",
            description="Make words from the letters of a random root word!",
            color=discord.Color.blue()
        )

        word_rules = [
            "• Each letter of the root can be used once per word",
            "• No repeating a word you already found",
            "• Words must be real English words",
        ]
        if SETTINGS.min_word_length > 1:
            word_rules.append(f"• Words need at least {SETTINGS.min_word_length} letters")
        if not SETTINGS.allow_root_word:
            word_rules.append("• The root word itself doesn't count")

        embed.add_field(name="⚠️ Word rules", value="\n".join(word_rules), inline=False)

        embed.add_field(
            name="🎮 Commands",
            value=(
                "`/scramble start` - Get a root word\n"
                "`/scramble submit` - Submit a word\n"
                "`/scramble words` - Show your words\n"
                "`/scramble restart` - New root word\n"
                "`/scramble stop` - End your game\n"
                "`/scramble check` - Look up a word"
            ),
            inline=False
        )

        return embed
