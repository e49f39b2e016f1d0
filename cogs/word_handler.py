"""
Word Handler Cog for Word Scramble Bot.
Handles message events for word submissions during active games.
"""
import logging
import re

import discord
from discord.ext import commands

from config import LOGGER_NAME_GAME
from models.errors import NoActiveGame, WordRejected
from services.game_manager import game_manager
from views.game_ui import GameEmbed

logger = logging.getLogger(LOGGER_NAME_GAME)

# Single word, letters only; anything else is ordinary chat
WORD_PATTERN = re.compile(r"^[a-z]+$", re.IGNORECASE)


def looks_like_word(content: str) -> bool:
    """Check if a chat message should be treated as a word submission."""
    return bool(WORD_PATTERN.match(content.strip()))


class WordHandler(commands.Cog):
    """Cog for handling word submissions in active games."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Handle incoming messages for word submissions."""
        # Ignore bots
        if message.author.bot:
            return

        # Only players with a game in this channel
        if not game_manager.has_active_game(message.channel.id, message.author.id):
            return

        if not looks_like_word(message.content):
            return

        await self._process_word(message)

    async def _process_word(self, message: discord.Message):
        """Process a word submission."""
        channel = message.channel

        try:
            game = await game_manager.submit_word(channel.id, message.author.id, message.content)
        except NoActiveGame:
            # Game was stopped while the word was waiting its turn
            return
        except WordRejected as e:
            await message.reply(embed=GameEmbed.word_rejected(e), mention_author=False)
            return

        # Add reaction to the message
        try:
            await message.add_reaction("✅")
        except discord.HTTPException:
            pass

        await channel.send(embed=GameEmbed.word_accepted(game, message.author.display_name))


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(WordHandler(bot))
