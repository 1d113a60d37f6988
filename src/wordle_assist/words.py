"""
words.py

Words, feedback patterns, and the Filter that accumulates what the feedback
tells us about the secret.

Feedback format (text):
- 5 letters of: g (green), y (yellow), b (black/gray), e.g. "bygyb"
- or 5 digits of: 2 (green), 1 (yellow), 0 (black), e.g. "02120"
"""

from __future__ import annotations

import pathlib
import re
from enum import IntEnum
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import InvalidLetter, InvalidPattern, InvalidWord
from .letters import LETTERS, LetterMap, LetterSet, Letter

WORD_LENGTH = 5

# bundled dictionary: the official Wordle answers, one per line
DEFAULT_WORDS_PATH = pathlib.Path(__file__).resolve().parent / "words.txt"


class Feedback(IntEnum):
    BLACK = 0
    YELLOW = 1
    GREEN = 2


Pattern = Tuple[Feedback, Feedback, Feedback, Feedback, Feedback]

ALL_GREEN: Pattern = (Feedback.GREEN,) * WORD_LENGTH  # type: ignore

_PATTERN_CHARS = {"b": Feedback.BLACK, "y": Feedback.YELLOW, "g": Feedback.GREEN}


# parse_pattern converts a string like 'bygyb' or '02120' into a Pattern
def parse_pattern(s: str) -> Pattern:
    s = s.strip().lower()
    if re.fullmatch(r"[gyb]{5}", s):
        return tuple(_PATTERN_CHARS[ch] for ch in s)  # type: ignore
    if re.fullmatch(r"[012]{5}", s):
        return tuple(Feedback(int(ch)) for ch in s)  # type: ignore
    raise InvalidPattern("Pattern must be 5 chars of [g,y,b] or [0,1,2]. Example: 'bygyb' or '02120'.")


def format_pattern(pattern: Sequence[Feedback]) -> str:
    return "".join("byg"[f] for f in pattern)


# normalize any sequence of 5 feedback values (Feedback members or 0/1/2)
def as_pattern(feedback: Iterable[int]) -> Pattern:
    values = list(feedback)
    if len(values) != WORD_LENGTH:
        raise InvalidPattern(f"Expected {WORD_LENGTH} feedback values, got {len(values)}: {values}")
    try:
        return tuple(Feedback(v) for v in values)  # type: ignore
    except ValueError as e:
        raise InvalidPattern(f"Unknown feedback value in {values}") from e


class Word:
    """Exactly five letters. Immutable and hashable."""

    __slots__ = ("letters",)

    def __init__(self, letters: Iterable[int]):
        letters = tuple(Letter(v) for v in letters)
        if len(letters) != WORD_LENGTH:
            raise InvalidWord("".join(map(str, letters)))
        self.letters: Tuple[Letter, ...] = letters

    @classmethod
    def from_text(cls, text: str) -> "Word":
        if len(text) != WORD_LENGTH:
            raise InvalidWord(text)
        try:
            return cls(Letter.from_char(ch) for ch in text)
        except InvalidLetter as e:
            raise InvalidWord(text, f"{e}") from e

    def to_text(self) -> str:
        return "".join(map(str, self.letters))

    def letter_count(self) -> LetterMap[int]:
        count: LetterMap[int] = LetterMap(int)
        for letter in self.letters:
            count[letter] += 1
        return count

    def letter_set(self) -> LetterSet:
        return LetterSet.of(self.letters)

    def matches(self, filter: "Filter") -> bool:
        for letter, allowed in zip(self.letters, filter.mask):
            if not allowed.bits & (1 << letter):
                return False
        return all(actual >= minimum for actual, minimum in zip(self.letter_count(), filter.min_count))

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __getitem__(self, pos: int) -> Letter:
        return self.letters[pos]

    def __len__(self) -> int:
        return WORD_LENGTH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.letters == other.letters

    def __hash__(self) -> int:
        return hash(self.letters)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Word({self.to_text()!r})"


class Filter:
    """Constraints accumulated over all rounds of feedback.

    mask[p] is the set of letters still allowed at position p; min_count[x] is
    the fewest copies of x the secret can contain. Masks only ever lose
    letters and minimums only ever grow.
    """

    __slots__ = ("mask", "min_count")

    def __init__(self) -> None:
        self.mask: List[LetterSet] = [LetterSet.full() for _ in range(WORD_LENGTH)]
        self.min_count: LetterMap[int] = LetterMap(int)

    def restrict(self, word: Word, feedback: Iterable[int]) -> None:
        pattern = as_pattern(feedback)
        # copies of each letter this guess has confirmed so far
        min_count: LetterMap[int] = LetterMap(int)
        for pos, (letter, fb) in enumerate(zip(word, pattern)):
            if fb == Feedback.GREEN:
                self.mask[pos] = LetterSet.of([letter])
                min_count[letter] += 1
            elif fb == Feedback.YELLOW:
                self.mask[pos].remove(letter)
                min_count[letter] += 1
            elif min_count[letter] > 0:
                # surplus copy of a letter already accounted for earlier in this guess
                self.mask[pos].remove(letter)
            else:
                for allowed in self.mask:
                    allowed.remove(letter)
        for letter in LETTERS:
            self.min_count[letter] = max(self.min_count[letter], min_count[letter])

    def copy(self) -> "Filter":
        clone = Filter()
        clone.mask = [allowed.copy() for allowed in self.mask]
        clone.min_count = self.min_count.copy()
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.mask == other.mask and self.min_count == other.min_count

    def __repr__(self) -> str:
        return f"Filter(mask={self.mask!r}, min_count={self.min_count!r})"


# parse a whitespace separated dictionary; any malformed entry is fatal
def load_words(text: str) -> List[Word]:
    words: List[Word] = []
    seen = set()
    for token in text.split():
        # Deduplicate while keeping order
        if token in seen:
            continue
        seen.add(token)
        words.append(Word.from_text(token))
    return words


def load_words_from_file(path: str | pathlib.Path = DEFAULT_WORDS_PATH) -> List[Word]:
    with open(path, "r", encoding="utf-8") as f:
        return load_words(f.read())
