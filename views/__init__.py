"""Views module for Word Scramble Bot."""
from views.board_controls import BoardControlsView
from views.game_ui import GameEmbed, format_word_entries

__all__ = [
    "BoardControlsView",
    "GameEmbed",
    "format_word_entries",
]
