"""
Hangman game package.

Re-exports the core game API so callers can import from `hangman` directly:

    from hangman import new_game, make_move, tally
"""

from .core import (
    MAX_TURNS,
    Game,
    GameState,
    Guessed,
    HangmanError,
    Hidden,
    InvalidGuess,
    InvalidWord,
    RevealedOnLoss,
    TallyView,
    make_move,
    mask,
    new_game,
    random_name,
    resign,
    tally,
)

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
