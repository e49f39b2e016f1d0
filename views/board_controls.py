"""
Board controls for Word Scramble Bot.
Buttons under a player's board to restart or stop their game.
"""
from typing import Awaitable, Callable, Optional

import discord
from discord import ui


class BoardControlsView(ui.View):
    """
    Restart / Stop buttons for a single player's board.

    Only the owner of the board can press them. The callbacks return the
    embed that replaces the board.
    """

    def __init__(
        self,
        owner_id: int,
        on_restart: Optional[Callable[[], Awaitable[discord.Embed]]] = None,
        on_stop: Optional[Callable[[], Awaitable[discord.Embed]]] = None,
        timeout: float = 900.0  # 15 minutes
    ):
        super().__init__(timeout=timeout)
        self.owner_id = owner_id
        self.on_restart = on_restart
        self.on_stop = on_stop

    async def interaction_check(self, interaction: discord.Interaction) -> bool:
        if interaction.user.id != self.owner_id:
            await interaction.response.send_message(
                "❌ This isn't your game! Use `/scramble start` to play.",
                ephemeral=True
            )
            return False
        return True

    @ui.button(label="Restart", style=discord.ButtonStyle.primary, emoji="🔄")
    async def restart_button(self, interaction: discord.Interaction, button: ui.Button):
        """Handle restart button click."""
        embed = await self.on_restart() if self.on_restart else None
        await interaction.response.edit_message(embed=embed, view=self)

    @ui.button(label="Stop", style=discord.ButtonStyle.danger, emoji="🏁")
    async def stop_button(self, interaction: discord.Interaction, button: ui.Button):
        """Handle stop button click."""
        embed = await self.on_stop() if self.on_stop else None

        # Disable all buttons
        for item in self.children:
            item.disabled = True

        await interaction.response.edit_message(embed=embed, view=self)
        self.stop()
