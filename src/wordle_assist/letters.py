"""
letters.py

Compact value types over the 26-letter alphabet:

- Letter: a lowercase letter stored as its index 0..25
- LetterSet: a bitmask with one bit per letter
- LetterMap: a fixed 26-slot table indexed by Letter
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .errors import InvalidLetter

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

EMPTY_BITS = 0
FULL_BITS = (1 << ALPHABET_SIZE) - 1

T = TypeVar("T")


class Letter(int):
    """A letter a-z, stored as 0-25 so it can index tables directly."""

    __slots__ = ()

    def __new__(cls, value: int) -> "Letter":
        if not isinstance(value, int) or not 0 <= value < ALPHABET_SIZE:
            raise InvalidLetter(repr(value))
        return super().__new__(cls, value)

    @classmethod
    def from_char(cls, char: str) -> "Letter":
        if len(char) != 1 or not ("a" <= char <= "z"):
            raise InvalidLetter(char)
        return cls(ord(char) - ord("a"))

    def __str__(self) -> str:
        return ALPHABET[self]

    def __repr__(self) -> str:
        return f"Letter({ALPHABET[self]!r})"


# every letter once, in order; saves re-validating in hot loops
LETTERS: Tuple[Letter, ...] = tuple(Letter(i) for i in range(ALPHABET_SIZE))


class LetterSet:
    """Set of letters backed by an int bitmask.

    insert() and remove() mutate in place and report whether anything changed.
    Iteration always starts over from the current bits, in alphabetical order.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: int = EMPTY_BITS):
        self.bits = bits & FULL_BITS

    @classmethod
    def empty(cls) -> "LetterSet":
        return cls(EMPTY_BITS)

    @classmethod
    def full(cls) -> "LetterSet":
        return cls(FULL_BITS)

    @classmethod
    def of(cls, letters: Iterable[Letter]) -> "LetterSet":
        bits = 0
        for letter in letters:
            bits |= 1 << letter
        return cls(bits)

    def contains(self, letter: Letter) -> bool:
        return self.bits & (1 << letter) != 0

    __contains__ = contains

    def insert(self, letter: Letter) -> bool:
        old = self.bits
        self.bits = old | (1 << letter)
        return old != self.bits

    def remove(self, letter: Letter) -> bool:
        old = self.bits
        self.bits = old & ~(1 << letter)
        return old != self.bits

    def intersect(self, other: "LetterSet") -> "LetterSet":
        return LetterSet(self.bits & other.bits)

    __and__ = intersect

    def inverse(self) -> "LetterSet":
        return LetterSet(~self.bits & FULL_BITS)

    # the only member, or None when the set is empty or has several
    def single(self) -> Optional[Letter]:
        bits = self.bits
        if bits and bits & (bits - 1) == 0:
            return LETTERS[bits.bit_length() - 1]
        return None

    def copy(self) -> "LetterSet":
        return LetterSet(self.bits)

    def __iter__(self) -> Iterator[Letter]:
        bits = self.bits
        while bits:
            low = bits & -bits
            yield LETTERS[low.bit_length() - 1]
            bits ^= low

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterSet):
            return NotImplemented
        return self.bits == other.bits

    def __repr__(self) -> str:
        return "LetterSet({" + ", ".join(repr(str(letter)) for letter in self) + "})"


class LetterMap(Generic[T]):
    """Dense table with one slot per letter.

    LetterMap(int) holds counts; LetterMap(lambda: LetterMap(int)) holds a
    26x26 table.
    """

    __slots__ = ("_slots",)

    def __init__(self, default: Callable[[], T]):
        self._slots: List[T] = [default() for _ in range(ALPHABET_SIZE)]

    def __getitem__(self, letter: Letter) -> T:
        return self._slots[letter]

    def __setitem__(self, letter: Letter, value: T) -> None:
        self._slots[letter] = value

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)

    def __len__(self) -> int:
        return ALPHABET_SIZE

    def items(self) -> Iterator[Tuple[Letter, T]]:
        return zip(LETTERS, self._slots)

    # shallow: nested maps are shared, not copied
    def copy(self) -> "LetterMap[T]":
        clone: LetterMap[T] = LetterMap.__new__(LetterMap)
        clone._slots = list(self._slots)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterMap):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return "LetterMap({" + ", ".join(f"{letter}: {value!r}" for letter, value in self.items()) + "})"
