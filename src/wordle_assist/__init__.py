"""Wordle candidate filtering, suggestion ranking and self-play."""

from .errors import InvalidLetter, InvalidPattern, InvalidWord, SolverContradiction, WordleError
from .game import Game
from .letters import ALPHABET, Letter, LetterMap, LetterSet
from .simulation import GameResult, Simulation, simulate_game, wordle_feedback
from .stats import LetterStats
from .words import (
    ALL_GREEN,
    DEFAULT_WORDS_PATH,
    Feedback,
    Filter,
    Pattern,
    Word,
    format_pattern,
    load_words,
    load_words_from_file,
    parse_pattern,
)

__all__ = [
    "ALL_GREEN",
    "ALPHABET",
    "DEFAULT_WORDS_PATH",
    "Feedback",
    "Filter",
    "Game",
    "GameResult",
    "InvalidLetter",
    "InvalidPattern",
    "InvalidWord",
    "Letter",
    "LetterMap",
    "LetterSet",
    "LetterStats",
    "Pattern",
    "Simulation",
    "SolverContradiction",
    "Word",
    "WordleError",
    "format_pattern",
    "load_words",
    "load_words_from_file",
    "parse_pattern",
    "simulate_game",
    "wordle_feedback",
]
