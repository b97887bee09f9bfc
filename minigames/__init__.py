"""Console menu of mini-games: guess the number, hangman, noughts and crosses, connect 4."""

from .board import Board, CellIndex, Player
from .menu import GAMES, show_menu

__all__ = ["Board", "CellIndex", "Player", "GAMES", "show_menu"]
