from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Tuple, Union


from .errors import InvalidWord


MAX_TURNS = 7

_LOWER_AZ = frozenset("abcdefghijklmnopqrstuvwxyz")


def _is_letter(c: object) -> bool:
    return isinstance(c, str) and len(c) == 1 and c in _LOWER_AZ


class GameState(str, Enum):
    """Outcome of the most recent transition of a game."""

    INITIALIZING = "initializing"
    GOOD_GUESS = "good_guess"
    BAD_GUESS = "bad_guess"
    ALREADY_USED = "already_used"
    LOST = "lost"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.WON, GameState.LOST)


@dataclass(frozen=True)
class Game:
    """
    Immutable container for a single Hangman game.

    Notes
    -----
    - Frozen so that the engine always "returns a new game" after each move;
      the owner of a game replaces its reference with the returned value.
    - All transitions (scoring, win/loss, resignation) live in `core.engine`;
      this file only defines the data structures.
    - `letters` is the secret word. It must never be shown to a client
      directly; use `core.engine.tally` instead.
    """

    name: str
    letters: Tuple[str, ...]
    state: GameState = GameState.INITIALIZING
    turns_left: int = MAX_TURNS
    used: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """
        Normalize and validate fields.

        Normalization
        -------------
        - `letters` is stored as a tuple, `used` as a frozenset.

        Validation
        ----------
        - `letters` must be non-empty, each a single letter a–z (`InvalidWord`).
        - `turns_left` must be in 0..MAX_TURNS.
        - `state` must be a `GameState`.
        - `used` may only hold single letters a–z.
        """
        # Because dataclass is frozen, use object.__setattr__ for normalization.
        object.__setattr__(self, "letters", tuple(self.letters))
        object.__setattr__(self, "used", frozenset(self.used))

        word = "".join(str(c) for c in self.letters)
        if not self.letters:
            raise InvalidWord(word, "word must not be empty")
        if not all(_is_letter(c) for c in self.letters):
            raise InvalidWord(word)

        if not isinstance(self.turns_left, int) or not 0 <= self.turns_left <= MAX_TURNS:
            raise ValueError(f"`turns_left` must be in 0..{MAX_TURNS}, got {self.turns_left!r}.")
        if not isinstance(self.state, GameState):
            raise ValueError(f"`state` must be a GameState, got {self.state!r}.")
        if not all(_is_letter(c) for c in self.used):
            raise ValueError("`used` may only contain single letters a–z.")

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks.
        return (
            f"Game(name={self.name!r}, state={self.state.value}, "
            f"turns_left={self.turns_left}, used={sorted(self.used)!r})"
        )


# Letter views: what a client may see at each position of the secret word.

@dataclass(frozen=True)
class Guessed:
    """A letter the player guessed."""
    letter: str

    def to_wire(self) -> str:
        return self.letter


@dataclass(frozen=True)
class RevealedOnLoss:
    """A letter exposed only because the game was lost."""
    letter: str

    def to_wire(self) -> List[str]:
        return [self.letter]


@dataclass(frozen=True)
class Hidden:
    """An unguessed position while the game can still be played."""

    def to_wire(self) -> str:
        return "_"


LetterView = Union[Guessed, RevealedOnLoss, Hidden]


@dataclass(frozen=True)
class TallyView:
    """
    Redacted, client-safe summary of a game.

    `letters` has one entry per position of the secret word; see `Guessed`,
    `RevealedOnLoss` and `Hidden`. `guesses` is sorted alphabetically.
    """

    state: GameState
    turns_left: int
    letters: Tuple[LetterView, ...]
    guesses: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        """
        Return a JSON-ready dict, e.g.

        {"state": "lost", "turns_left": 0,
         "letters": ["a", ["b"], "_"], "guesses": ["a", "z"]}

        A guessed letter is a plain string, a loss-revealed letter a
        single-element list, and a hidden position the string "_".
        """
        return {
            "state": self.state.value,
            "turns_left": self.turns_left,
            "letters": [view.to_wire() for view in self.letters],
            "guesses": list(self.guesses),
        }
