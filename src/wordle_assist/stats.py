"""Letter frequency statistics over the current candidate pool."""

from __future__ import annotations

from typing import Iterable

from .letters import Letter, LetterMap
from .words import Word


class LetterStats:
    """Co-occurrence table of letters among the candidates.

    counts[x][y] is the number of candidates containing both x and y, so
    counts[x][x] is the number of candidates containing x at all.
    """

    __slots__ = ("total", "counts")

    def __init__(self) -> None:
        self.total = 0
        self.counts: LetterMap[LetterMap[int]] = LetterMap(lambda: LetterMap(int))

    @classmethod
    def from_words(cls, words: Iterable[Word]) -> "LetterStats":
        stats = cls()
        for word in words:
            stats.total += 1
            letters = list(word.letter_set())
            for letter in letters:
                row = stats.counts[letter]
                for other in letters:
                    row[other] += 1
        return stats

    def copy(self) -> "LetterStats":
        clone = LetterStats()
        clone.total = self.total
        for letter, row in self.counts.items():
            clone.counts[letter] = row.copy()
        return clone

    # must be called exactly once for every word dropped from the pool
    def remove_word(self, word: Word) -> None:
        letters = list(word.letter_set())
        self.total -= 1
        for letter in letters:
            row = self.counts[letter]
            for other in letters:
                row[other] -= 1

    def occurrences(self, letter: Letter) -> int:
        return self.counts[letter][letter]

    def co_occurrences(self, letter: Letter, other: Letter) -> int:
        return self.counts[letter][other]

    def relevance(self, word: Word) -> int:
        """Score a word by how evenly its letters split the pool.

        A letter found in exactly half the candidates scores `total`; one found
        in none or all of them scores about total/2. Repeated letters count
        once.
        """
        total = self.total
        half = total // 2
        counts = self.counts
        return sum(total - abs(counts[letter][letter] - half) for letter in word.letter_set())
