import unittest

from wordle_assist.errors import InvalidLetter
from wordle_assist.letters import ALPHABET_SIZE, FULL_BITS, Letter, LetterMap, LetterSet


def L(ch: str) -> Letter:
    return Letter.from_char(ch)


class TestLetter(unittest.TestCase):
    def test_from_char(self) -> None:
        assert L("a") == 0
        assert L("z") == 25
        assert str(L("q")) == "q"
        assert L("b") < L("c")

    def test_invalid(self) -> None:
        for bad in ["A", "1", "ab", "", "é"]:
            with self.assertRaises(InvalidLetter):
                L(bad)
        with self.assertRaises(InvalidLetter):
            Letter(26)
        # InvalidLetter is also a ValueError
        with self.assertRaises(ValueError):
            L("?")


class TestLetterSet(unittest.TestCase):
    def test_insert_remove(self) -> None:
        s = LetterSet.empty()
        assert s.insert(L("c"))
        assert not s.insert(L("c"))
        assert s.contains(L("c"))
        assert L("d") not in s
        assert s.remove(L("c"))
        assert not s.remove(L("c"))
        assert s == LetterSet.empty()
        assert not s

    def test_iteration_is_ascending_and_restartable(self) -> None:
        s = LetterSet.of([L("z"), L("a"), L("m")])
        assert [str(x) for x in s] == ["a", "m", "z"]
        assert list(s) == list(s)
        assert len(s) == 3

    def test_full_and_inverse(self) -> None:
        full = LetterSet.full()
        assert full.bits == FULL_BITS
        assert len(full) == ALPHABET_SIZE
        assert list(full) == [Letter(i) for i in range(ALPHABET_SIZE)]
        assert full.inverse() == LetterSet.empty()
        s = LetterSet.of([L("e"), L("y")])
        assert L("e") not in s.inverse()
        assert len(s.inverse()) == 24

    def test_intersect(self) -> None:
        a = LetterSet.of([L("a"), L("b"), L("c")])
        b = LetterSet.of([L("b"), L("c"), L("d")])
        assert a.intersect(b) == LetterSet.of([L("b"), L("c")])
        assert (a & b) == a.intersect(b)
        # pure
        assert len(a) == 3 and len(b) == 3

    def test_single(self) -> None:
        assert LetterSet.of([L("k")]).single() == L("k")
        assert LetterSet.empty().single() is None
        assert LetterSet.of([L("k"), L("l")]).single() is None

    def test_copy_is_independent(self) -> None:
        a = LetterSet.full()
        b = a.copy()
        b.remove(L("a"))
        assert L("a") in a


class TestLetterMap(unittest.TestCase):
    def test_counts(self) -> None:
        m = LetterMap(int)
        assert list(m) == [0] * ALPHABET_SIZE
        m[L("e")] += 2
        assert m[L("e")] == 2
        assert dict(m.items())[L("e")] == 2

    def test_nested_rows_are_independent(self) -> None:
        table = LetterMap(lambda: LetterMap(int))
        table[L("a")][L("b")] += 1
        assert table[L("a")][L("b")] == 1
        assert table[L("b")][L("b")] == 0
        assert table[L("c")][L("b")] == 0

    def test_equality_and_copy(self) -> None:
        a = LetterMap(int)
        b = a.copy()
        assert a == b
        b[L("x")] = 1
        assert a != b
