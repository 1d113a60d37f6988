"""
simulation.py

Self-play: the solver guesses against a known secret, with the feedback
computed by the official Wordle coloring rule, until it hits all greens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import SolverContradiction
from .game import Game
from .letters import LetterMap
from .words import ALL_GREEN, WORD_LENGTH, Feedback, Pattern, Word, format_pattern

Round = Tuple[Word, Pattern]


# compute Wordle-style feedback for guess given the secret word
def wordle_feedback(secret: Word, guess: Word) -> Pattern:
    """
    should handle repeated letters correctly: a letter guessed twice against a
    secret holding it once is colored at most once
    """
    # first pass: greens
    res = [Feedback.BLACK] * WORD_LENGTH
    remaining: LetterMap[int] = secret.letter_count()

    for i, (s_ch, g_ch) in enumerate(zip(secret, guess)):
        if g_ch == s_ch:
            res[i] = Feedback.GREEN
            remaining[g_ch] -= 1

    # second pass: yellows (only for non-greens)
    for i, g_ch in enumerate(guess):
        if res[i] == Feedback.BLACK and remaining[g_ch] > 0:
            res[i] = Feedback.YELLOW
            remaining[g_ch] -= 1

    return tuple(res)  # type: ignore


class Simulation:
    def __init__(self, secret: Word, words: Iterable[Word]):
        self.secret = secret
        self.game = Game(words)
        self.rounds: List[Round] = []

    def run(self) -> Iterator[Round]:
        """Yield (guess, feedback) per round, the winning round included.

        Raises SolverContradiction if the pool runs dry first, which means
        the secret is not in the dictionary.
        """
        while True:
            guess = self.game.suggested_word()
            if guess is None:
                raise SolverContradiction(
                    str(self.secret),
                    [(str(g), format_pattern(p)) for g, p in self.rounds],
                )
            feedback = wordle_feedback(self.secret, guess)
            self.game.apply_feedback(guess, feedback)
            self.rounds.append((guess, feedback))
            yield guess, feedback
            if feedback == ALL_GREEN:
                return


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    turns: int
    first_guess: str
    final_candidates: int
    # pool ran dry before the secret was found
    contradiction: bool = False


def simulate_game(secret: Word, words: Iterable[Word], max_turns: Optional[int] = None) -> GameResult:
    sim = Simulation(secret, words)
    turns = 0
    solved = False
    contradiction = False
    try:
        for _, feedback in sim.run():
            turns += 1
            if feedback == ALL_GREEN:
                solved = True
            elif max_turns is not None and turns >= max_turns:
                break
    except SolverContradiction:
        contradiction = True

    first_guess = str(sim.rounds[0][0]) if sim.rounds else ""
    return GameResult(
        secret=str(secret),
        solved=solved,
        turns=turns,
        first_guess=first_guess,
        final_candidates=len(sim.game),
        contradiction=contradiction,
    )
