"""Infinite_Omok package exports."""

from .Board import Board, Color, Coord
from .Omokgame import Omokgame, Phase, new_game, attempt_move, best_move, reset
from .Match import MatchController, Controller
from .Player import Player, HumanPlayer, AIPlayer

# Subpackages for rules, move scoring, presentation, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Color",
    "Coord",
    "Omokgame",
    "Phase",
    "new_game",
    "attempt_move",
    "best_move",
    "reset",
    "MatchController",
    "Controller",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "gui",
    "utils",
]
