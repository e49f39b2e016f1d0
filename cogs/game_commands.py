"""
Game Commands Cog for Word Scramble Bot.
Handles all slash commands related to game management.
"""
import logging

import discord
from discord import app_commands
from discord.ext import commands

from config import SETTINGS, LOGGER_NAME_GAME
from models.errors import NoActiveGame, WordListError, WordRejected
from services.game_manager import game_manager
from views.board_controls import BoardControlsView
from views.game_ui import GameEmbed

logger = logging.getLogger(LOGGER_NAME_GAME)


class GameCommands(commands.Cog):
    """Cog containing all game-related slash commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    scramble = app_commands.Group(
        name="scramble",
        description="Word Scramble game commands"
    )

    def _controls(self, channel_id: int, user: discord.abc.User) -> BoardControlsView:
        """Build the Restart/Stop buttons for a player's board."""
        async def on_restart() -> discord.Embed:
            try:
                game = await game_manager.restart_game(channel_id, user.id)
            except WordListError as e:
                logger.error(f"Restart failed: channel={channel_id}, user={user.id}: {e}")
                return GameEmbed.word_list_error(e)
            return GameEmbed.board(game, user.display_name)

        async def on_stop() -> discord.Embed:
            game = game_manager.end_game(channel_id, user.id)
            if not game:
                return GameEmbed.no_active_game()
            return GameEmbed.game_ended(game, user.display_name)

        return BoardControlsView(owner_id=user.id, on_restart=on_restart, on_stop=on_stop)

    async def _send_new_game(self, interaction: discord.Interaction):
        """Start or restart the caller's session and reply with the board."""
        try:
            game = await game_manager.start_game(interaction.channel_id, interaction.user.id)
        except WordListError as e:
            logger.error(f"Could not start game for user={interaction.user.id}: {e}")
            await interaction.response.send_message(
                embed=GameEmbed.word_list_error(e),
                ephemeral=True
            )
            return

        await interaction.response.send_message(
            embed=GameEmbed.game_started(game, interaction.user.display_name),
            view=self._controls(interaction.channel_id, interaction.user)
        )

    @scramble.command(name="start", description="Start a game with a random root word")
    async def start_game(self, interaction: discord.Interaction):
        """Start a new Word Scramble game."""
        if game_manager.has_active_game(interaction.channel_id, interaction.user.id):
            game = game_manager.get_game(interaction.channel_id, interaction.user.id)
            await interaction.response.send_message(
                f"❌ You already have a game with **{game.root_word}**! "
                "Use `/scramble restart` for a new word.",
                ephemeral=True
            )
            return

        await self._send_new_game(interaction)

    @scramble.command(name="restart", description="Get a new root word")
    async def restart_game(self, interaction: discord.Interaction):
        """Restart with a new root word, dropping the found words."""
        await self._send_new_game(interaction)

    @scramble.command(name="submit", description="Submit a word made from the root word")
    @app_commands.describe(word="Your word")
    async def submit_word(self, interaction: discord.Interaction, word: str):
        """Submit a word."""
        await interaction.response.defer()

        try:
            game = await game_manager.submit_word(
                interaction.channel_id, interaction.user.id, word
            )
        except NoActiveGame:
            await interaction.followup.send(embed=GameEmbed.no_active_game(), ephemeral=True)
            return
        except WordRejected as e:
            await interaction.followup.send(embed=GameEmbed.word_rejected(e))
            return

        await interaction.followup.send(
            embed=GameEmbed.word_accepted(game, interaction.user.display_name)
        )

    @scramble.command(name="words", description="Show your root word and the words you found")
    async def show_words(self, interaction: discord.Interaction):
        """Show the caller's board."""
        game = game_manager.get_game(interaction.channel_id, interaction.user.id)
        if not game:
            await interaction.response.send_message(
                embed=GameEmbed.no_active_game(),
                ephemeral=True
            )
            return

        await interaction.response.send_message(
            embed=GameEmbed.board(game, interaction.user.display_name),
            view=self._controls(interaction.channel_id, interaction.user)
        )

    @scramble.command(name="stop", description="End your game")
    async def stop_game(self, interaction: discord.Interaction):
        """End the caller's game."""
        game = game_manager.end_game(interaction.channel_id, interaction.user.id)
        if not game:
            await interaction.response.send_message(
                embed=GameEmbed.no_active_game(),
                ephemeral=True
            )
            return

        await interaction.response.send_message(
            embed=GameEmbed.game_ended(game, interaction.user.display_name)
        )

    @scramble.command(name="check", description="Check whether a word is in the dictionary")
    @app_commands.describe(word="Word to look up")
    async def check_word(self, interaction: discord.Interaction, word: str):
        """Look up a word without submitting it."""
        await interaction.response.defer(ephemeral=True)

        result = await game_manager.dictionary.validate_word(word, SETTINGS.dictionary_language)
        await interaction.followup.send(embed=GameEmbed.word_check(result), ephemeral=True)

    @scramble.command(name="rules", description="Show the rules")
    async def rules(self, interaction: discord.Interaction):
        """Display game rules."""
        await interaction.response.send_message(embed=GameEmbed.rules())


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(GameCommands(bot))
