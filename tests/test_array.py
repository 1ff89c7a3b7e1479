import pytest

from algo.array import FixedArray


def _filled(capacity, count):
    arr = FixedArray(capacity)
    for i in range(count):
        arr.insert(i, i + 1)
    return arr


def test_insert():
    arr = _filled(5, 3)
    assert str(arr) == "|1|2|3"

    arr.insert(1, 999)
    assert str(arr) == "|1|999|2|3"

    arr.append(666)
    assert str(arr) == "|1|999|2|3|666"
    assert len(arr) == 5


def test_insert_into_full_array_raises():
    arr = _filled(3, 3)
    with pytest.raises(OverflowError):
        arr.insert(0, 7)
    with pytest.raises(OverflowError):
        arr.append(7)


def test_insert_beyond_capacity_raises():
    arr = _filled(5, 2)
    with pytest.raises(IndexError):
        arr.insert(5, 1)


def test_delete():
    arr = _filled(10, 10)
    for i in range(9, -1, -1):
        assert arr.delete(i) == i + 1
        assert len(arr) == i
    assert str(arr) == ""


def test_delete_from_middle_shifts_left():
    arr = _filled(5, 4)
    assert arr.delete(1) == 2
    assert str(arr) == "|1|3|4"


def test_delete_from_empty_raises():
    arr = FixedArray(4)
    with pytest.raises(IndexError):
        arr.delete(0)


def test_find():
    arr = _filled(10, 10)
    assert arr.find(0) == 1
    assert arr.find(9) == 10
    with pytest.raises(IndexError):
        arr.find(11)


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        FixedArray(0)