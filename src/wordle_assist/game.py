"""
game.py

Game ties the candidate pool, the Filter and the LetterStats together. The
pool and the stats are only ever changed together, by apply_feedback().
"""

from __future__ import annotations

import heapq
import pathlib
from typing import Iterable, List, Optional, Tuple

from .letters import LetterSet
from .stats import LetterStats
from .words import DEFAULT_WORDS_PATH, WORD_LENGTH, Feedback, Filter, Pattern, Word, as_pattern, load_words_from_file


class Game:
    def __init__(self, words: Iterable[Word]):
        self._list: List[Word] = list(words)
        self._filter = Filter()
        self._stats = LetterStats.from_words(self._list)

    @classmethod
    def from_file(cls, path: str | pathlib.Path = DEFAULT_WORDS_PATH) -> "Game":
        return cls(load_words_from_file(path))

    # snapshots: changing them does not touch the game
    @property
    def filter(self) -> Filter:
        return self._filter.copy()

    @property
    def stats(self) -> LetterStats:
        return self._stats.copy()

    def words(self) -> Tuple[Word, ...]:
        return tuple(self._list)

    def __len__(self) -> int:
        return len(self._list)

    # top n candidates by relevance; equal scores keep their pool order
    def suggested_words(self, n: int) -> List[Word]:
        return heapq.nlargest(n, self._list, key=self._stats.relevance)

    def suggested_word(self) -> Optional[Word]:
        best = self.suggested_words(1)
        return best[0] if best else None

    def apply_feedback(self, word: Word, feedback: Iterable[int]) -> None:
        self._filter.restrict(word, feedback)
        kept: List[Word] = []
        for candidate in self._list:
            if candidate.matches(self._filter):
                kept.append(candidate)
            else:
                self._stats.remove_word(candidate)
        self._list = kept

    def expected_feedback(self, guess: Word) -> Pattern:
        """Feedback for `guess` that the remaining pool already guarantees.

        A position is green when every candidate has the guessed letter there.
        A letter every candidate contains, but whose position is still open,
        marks the black positions that guessed it yellow. Used to pre-fill
        feedback that the player then only has to confirm.
        """
        if not self._list:
            return as_pattern([Feedback.BLACK] * WORD_LENGTH)
        seen = [LetterSet.empty() for _ in range(WORD_LENGTH)]
        mandatory = LetterSet.full()
        for candidate in self._list:
            mandatory = mandatory & candidate.letter_set()
            for allowed, letter in zip(seen, candidate):
                allowed.insert(letter)

        result = [Feedback.BLACK] * WORD_LENGTH
        for pos, (allowed, letter) in enumerate(zip(seen, guess)):
            fixed = allowed.single()
            if fixed is not None:
                mandatory.remove(fixed)
                if fixed == letter:
                    result[pos] = Feedback.GREEN
        for pos, letter in enumerate(guess):
            if result[pos] == Feedback.BLACK and letter in mandatory:
                result[pos] = Feedback.YELLOW
        return as_pattern(result)

    def __repr__(self) -> str:
        return f"Game(candidates={len(self._list)}, filter={self._filter!r})"
