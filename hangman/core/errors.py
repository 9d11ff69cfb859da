from __future__ import annotations


class HangmanError(ValueError):
    """Base class for rejected input to the game engine."""


class InvalidWord(HangmanError):
    """Raised when a secret word contains anything other than a–z."""

    def __init__(self, word: str, message: str | None = None) -> None:
        self.word = word
        super().__init__(message or f"some characters of '{word}' not a-z")


class InvalidGuess(HangmanError):
    """Raised when a guess is not exactly one lowercase letter a–z."""

    def __init__(self, guess: object) -> None:
        self.guess = guess
        super().__init__(f"guess '{guess}' not a-z")
