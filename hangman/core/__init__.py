"""
Game state machine for a single Hangman game.

Exports the entity types from `state`, the transitions from `engine`
and the validation errors from `errors`.
"""

from .engine import make_move, mask, new_game, random_name, resign, tally
from .errors import HangmanError, InvalidGuess, InvalidWord
from .state import MAX_TURNS, Game, GameState, Guessed, Hidden, RevealedOnLoss, TallyView

__all__ = [
    "MAX_TURNS",
    "Game",
    "GameState",
    "Guessed",
    "Hidden",
    "RevealedOnLoss",
    "TallyView",
    "HangmanError",
    "InvalidGuess",
    "InvalidWord",
    "make_move",
    "mask",
    "new_game",
    "random_name",
    "resign",
    "tally",
]
