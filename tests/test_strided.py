import pytest

from paxkit.strided import StridedIterator

ARR = list(range(30))


def test_positive_stride():
    itr = StridedIterator(ARR, 0, 3)
    assert itr.value() == 0

    assert itr.increment().value() == 3
    assert itr[2] == 9
    assert itr.value() == 3
    itr += 4
    assert itr.value() == 15
    assert itr.decrement().value() == 12
    itr -= 2
    assert itr.value() == 6

    assert itr.value() == 6
    itr.increment()
    assert itr.value() == 9
    assert itr.value() == 9
    itr.decrement()
    assert itr.value() == 6
    itr += 4

    end = itr + 2
    assert itr.value() == 18
    assert end.value() == 24
    end = itr - 2
    assert itr.value() == 18
    assert end.value() == 12


def test_negative_stride():
    itr = StridedIterator(ARR, 28, -3)
    assert itr.value() == 28

    assert itr.increment().value() == 25
    assert itr[2] == 19
    assert itr.value() == 25
    itr += 4
    assert itr.value() == 13
    assert itr.decrement().value() == 16
    itr -= 2
    assert itr.value() == 22

    assert itr.value() == 22
    itr.increment()
    assert itr.value() == 19
    assert itr.value() == 19
    itr.decrement()
    assert itr.value() == 22

    end = itr + 2
    assert itr.value() == 22
    assert end.value() == 16
    end = itr - 2
    assert itr.value() == 22
    assert end.value() == 28


def test_difference_and_comparison():
    a = StridedIterator(ARR, 1, 3)
    b = a + 4
    assert b - a == 4
    assert a - b == -4
    assert 4 + a == b
    assert a < b
    assert (b - 4) == a


def test_difference_requires_same_stride():
    with pytest.raises(ValueError):
        StridedIterator(ARR, 0, 3) - StridedIterator(ARR, 0, 2)
    with pytest.raises(ValueError):
        StridedIterator(ARR, 4, 3) - StridedIterator(ARR, 0, 3)


def test_out_of_range_raises():
    itr = StridedIterator(ARR, 27, 3)
    with pytest.raises(IndexError):
        itr.increment().value()
    with pytest.raises(IndexError):
        StridedIterator(ARR, 0, -1)[1]