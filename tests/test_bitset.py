import pytest

from aoc.bitset import Bitset


SIZES = [1, 7, 63, 64, 65, 130, 200]


@pytest.mark.parametrize("size", SIZES)
def test_empty_and_full(size):
    empty = Bitset.empty(size)
    assert empty.count() == 0
    assert not any(empty.get(i) for i in range(size))

    full = Bitset.full(size)
    assert full.count() == size
    assert all(full.get(i) for i in range(size))


@pytest.mark.parametrize("size", SIZES)
def test_set_reports_new_bits(size):
    for i in range(size):
        bs = Bitset(size)
        assert bs.set(i)
        assert not bs.set(i)
        assert bs.get(i)
        assert bs.count() == 1


def test_set_unset_get():
    bs = Bitset(130)
    for i in (0, 63, 64, 129):
        bs.set(i)
    bs.unset(64)
    assert list(bs) == [0, 63, 129]
    assert 63 in bs
    assert 64 not in bs
    assert 500 not in bs


def test_set_range_within_one_word():
    bs = Bitset(64)
    bs.set_range(2, 5)
    assert list(bs) == [2, 3, 4]


def test_set_range_across_words():
    bs = Bitset(300)
    bs.set_range(60, 200)
    assert bs.count() == 140
    assert not bs.get(59)
    assert bs.get(60)
    assert bs.get(199)
    assert not bs.get(200)


def test_empty_range_is_noop():
    bs = Bitset(10)
    bs.set_range(4, 4)
    bs.unset_range(7, 3)
    assert bs.count() == 0


def test_unset_range_across_words():
    bs = Bitset.full(256)
    bs.unset_range(10, 250)
    assert list(bs) == list(range(10)) + list(range(250, 256))


def test_bitwise_ops():
    a = Bitset(100)
    b = Bitset(100)
    for i in (1, 50, 99):
        a.set(i)
    for i in (50, 70):
        b.set(i)

    assert list(a & b) == [50]
    assert list(a | b) == [1, 50, 70, 99]

    a |= b
    assert a.count() == 4
    a &= b
    assert a == b


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        Bitset(10) & Bitset(11)


def test_out_of_range_index():
    bs = Bitset(10)
    with pytest.raises(IndexError):
        bs.set(10)
    with pytest.raises(IndexError):
        bs.get(-1)
    with pytest.raises(IndexError):
        bs.set_range(5, 11)
