"""Exceptions raised by the solver core."""

from __future__ import annotations

from typing import List, Tuple


class WordleError(Exception):
    """Base class for everything the solver raises on bad input."""


class InvalidLetter(WordleError, ValueError):
    def __init__(self, char: str):
        super().__init__(f"invalid letter: {char!r} (expected one of a-z)")
        self.char = char


class InvalidWord(WordleError, ValueError):
    def __init__(self, text: str, reason: str = "words must be exactly 5 lowercase letters"):
        super().__init__(f"invalid word {text!r}: {reason}")
        self.text = text


class InvalidPattern(WordleError, ValueError):
    pass


class SolverContradiction(WordleError):
    """No candidate is left although the secret has not been found.

    Either the secret is not in the dictionary the game was built from, or the
    feedback that was applied is inconsistent.
    """

    def __init__(self, secret: str, rounds: List[Tuple[str, str]]):
        played = ", ".join(f"{g}:{p}" for g, p in rounds) or "none"
        super().__init__(f"no candidate left for {secret!r} (rounds played: {played})")
        self.secret = secret
        self.rounds = rounds
