import pytest

from bitalgebra.bitset import BitSet, popcount


def test_construction():
    bs = BitSet()
    assert not bs
    assert len(bs) == 0
    assert bs.nbytes == 0

    bs = BitSet({1, 2})
    assert len(bs) == 2
    assert list(bs) == [1, 2]
    assert bs.nbytes == 1

    with pytest.raises(ValueError):
        BitSet({2, -1})


def test_repr():
    bs = BitSet()
    assert repr(bs) == "BitSet()"

    bs = BitSet([1, 2])
    assert repr(bs) == "BitSet({1, 2})"


def test_add_widens_to_whole_bytes():
    bs = BitSet()
    bs.add(0)
    assert bs.nbytes == 1
    assert bs.nbits == 8

    bs.add(7)
    assert bs.nbytes == 1

    bs.add(8)
    assert bs.nbytes == 2
    assert list(bs) == [0, 7, 8]

    with pytest.raises(ValueError):
        bs.add(-42)


def test_discard_widens():
    bs = BitSet([1])
    bs.discard(30)
    assert list(bs) == [1]
    assert bs.nbytes == 4

    bs.discard(1)
    assert not bs
    assert bs.nbytes == 4

    with pytest.raises(ValueError):
        bs.discard(-1)


def test_remove():
    bs = BitSet([1, 2])
    bs.remove(2)
    assert 1 in bs
    assert 2 not in bs

    with pytest.raises(KeyError):
        bs.remove(40)


def test_len():
    bs = BitSet()
    bs.add(1)
    bs.add(1)
    bs.add(3)
    assert len(bs) == 2

    bs.remove(3)
    assert len(bs) == 1


def test_binary_operators_pad_to_the_wider_operand():
    left = BitSet([1, 2, 3])
    right = BitSet([2, 3, 20])

    conjunction = left & right
    assert list(conjunction) == [2, 3]
    assert conjunction.nbytes == 3

    disjunction = left | right
    assert list(disjunction) == [1, 2, 3, 20]
    assert len(disjunction) == 4

    exclusive = left ^ right
    assert list(exclusive) == [1, 20]
    assert exclusive.nbytes == 3


def test_invert_flips_trailing_bits():
    bs = BitSet([1, 2, 3])
    inverted = ~bs
    assert list(inverted) == [0, 4, 5, 6, 7]
    assert inverted.nbytes == 1
    assert list(~inverted) == [1, 2, 3]


def test_invert_empty():
    assert not ~BitSet()


def test_copy_is_independent():
    bs = BitSet([1])
    copied = bs.copy()
    copied.add(2)
    assert list(bs) == [1]
    assert list(copied) == [1, 2]


def test_popcount():
    assert popcount(0) == 0
    assert popcount(0b1011) == 3


def test_contains_past_the_highest_bit():
    bs = BitSet([1, 9])
    assert 1 in bs
    assert 9 in bs
    assert 0 not in bs
    assert 8 not in bs
    assert 10_000 not in bs
