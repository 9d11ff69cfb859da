from __future__ import annotations

import base64
import logging
import secrets
from dataclasses import replace

from .errors import InvalidGuess, InvalidWord
from .state import (
    MAX_TURNS,
    Game,
    GameState,
    Guessed,
    Hidden,
    LetterView,
    RevealedOnLoss,
    TallyView,
)

logger = logging.getLogger(__name__)

_LOWER_AZ = frozenset("abcdefghijklmnopqrstuvwxyz")
_NAME_MIN, _NAME_MAX = 4, 10


def random_name() -> str:
    """
    Return a random name of 4 to 10 URL-safe characters (A–Z, a–z, 0–9, '-', '_').

    Uses the `secrets` module, so concurrent callers need no coordination.
    """
    length = _NAME_MIN + secrets.randbelow(_NAME_MAX - _NAME_MIN + 1)
    encoded = base64.urlsafe_b64encode(secrets.token_bytes(length)).decode("ascii")
    return encoded.rstrip("=")[:length]


def new_game(word: str, name: str | None = None) -> Game:
    """
    Create a fresh game for the secret `word`.

    Parameters
    ----------
    word : str
        The secret word. Must be non-empty and contain only lowercase a–z.
    name : str | None, optional
        Display identifier for the game; defaults to `random_name()`.

    Returns
    -------
    Game
        A game in the "initializing" state with all 7 turns left.

    Raises
    ------
    InvalidWord
        If `word` is not a string, is empty, or has a character outside a–z.
    """
    if not isinstance(word, str):
        raise InvalidWord(word, f"word must be a string, got {type(word).__name__}")
    if not word:
        raise InvalidWord(word, "word must not be empty")
    if not set(word) <= _LOWER_AZ:
        raise InvalidWord(word)

    game = Game(name=random_name() if name is None else name, letters=tuple(word))
    logger.debug("New game %r with a %d-letter word", game.name, len(game.letters))
    return game


def _is_valid_guess(guess: object) -> bool:
    return isinstance(guess, str) and len(guess) == 1 and guess in _LOWER_AZ


def _score_good_guess(game: Game) -> Game:
    """Won when every distinct letter has been used, otherwise a good guess."""
    won = set(game.letters) <= game.used
    return replace(game, state=GameState.WON if won else GameState.GOOD_GUESS)


def _score_bad_guess(game: Game) -> Game:
    """Spend a turn; the last one loses the game."""
    if game.turns_left == 1:
        return replace(game, state=GameState.LOST, turns_left=0)
    return replace(game, state=GameState.BAD_GUESS, turns_left=game.turns_left - 1)


def make_move(game: Game, guess: str) -> Game:
    """
    Apply a single-letter guess and return a new Game.

    Behavior
    --------
    - A won or lost game is returned unchanged (the same object).
    - A guess other than exactly one letter a–z raises `InvalidGuess`;
      the game is left as it was.
    - A letter already used sets the "already_used" state and costs nothing.
    - A bad guess with no turns left is a no-op: the game is returned unchanged.
    - Otherwise the letter is recorded and scored as a good or bad guess.
    """
    if game.state.is_terminal:
        return game

    if not _is_valid_guess(guess):
        raise InvalidGuess(guess)

    if guess in game.used:
        moved = replace(game, state=GameState.ALREADY_USED)
    elif game.turns_left == 0 and guess not in game.letters:
        return game
    else:
        moved = replace(game, used=game.used | {guess})
        if guess in game.letters:
            moved = _score_good_guess(moved)
        else:
            moved = _score_bad_guess(moved)

    logger.debug(
        "Game %r: guess %r -> %s (%d turns left)",
        moved.name, guess, moved.state.value, moved.turns_left,
    )
    return moved


def _reveal(letter: str, game: Game) -> LetterView:
    if letter in game.used:
        return Guessed(letter)
    if game.state is GameState.LOST:
        return RevealedOnLoss(letter)
    return Hidden()


def tally(game: Game) -> TallyView:
    """
    Externalize `game` without leaking unguessed letters.

    Each position is `Guessed` if its letter was used, `RevealedOnLoss` if the
    game is lost, and `Hidden` otherwise.

    Examples
    --------
    >>> game = make_move(make_move(new_game("anaconda"), "a"), "n")
    >>> tally(game).to_dict()["letters"]
    ['a', 'n', 'a', '_', '_', 'n', '_', 'a']
    """
    return TallyView(
        state=game.state,
        turns_left=game.turns_left,
        letters=tuple(_reveal(letter, game) for letter in game.letters),
        guesses=tuple(sorted(game.used)),
    )


def resign(game: Game, *, override_won: bool = True) -> Game:
    """
    Give up: the game becomes lost; turns and used letters are kept.

    By default this applies to a won game too. Pass `override_won=False`
    to leave a won game as it is.
    """
    if game.state is GameState.WON and not override_won:
        return game
    if game.state is not GameState.LOST:
        logger.debug("Game %r resigned in state %s", game.name, game.state.value)
    return replace(game, state=GameState.LOST)


def mask(view: TallyView) -> str:
    """
    Return a display string for a tally, e.g. 'w i _ _ l _'.

    Letters revealed only because the game was lost are bracketed: '[w] i [b] ...'.
    """
    parts = []
    for letter in view.letters:
        if isinstance(letter, Guessed):
            parts.append(letter.letter)
        elif isinstance(letter, RevealedOnLoss):
            parts.append(f"[{letter.letter}]")
        else:
            parts.append("_")
    return " ".join(parts)


__all__ = ["MAX_TURNS", "random_name", "new_game", "make_move", "tally", "resign", "mask"]
