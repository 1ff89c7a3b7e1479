import pytest

from algo.linked_list import LinkedList, ListNode


def _make(values):
    lst = LinkedList()
    for value in values:
        lst.insert_to_tail(value)
    return lst


def test_insert_to_head():
    lst = LinkedList()
    for i in range(10):
        lst.insert_to_head(i + 1)
    assert list(lst) == [10, 9, 8, 7, 6, 5, 4, 3, 2, 1]
    assert len(lst) == 10


def test_insert_to_tail():
    lst = _make(range(1, 11))
    assert list(lst) == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert str(lst) == "1->2->3->4->5->6->7->8->9->10"


def test_find_by_index():
    lst = _make(range(1, 11))
    assert lst.find_by_index(0).value == 1
    assert lst.find_by_index(9).value == 10
    assert lst.find_by_index(5).value == 6
    with pytest.raises(IndexError):
        lst.find_by_index(11)


def test_delete_node():
    lst = _make([1, 2, 3])
    assert str(lst) == "1->2->3"

    lst.delete_node(lst.find_by_index(0))
    assert str(lst) == "2->3"

    lst.delete_node(lst.find_by_index(1))
    assert str(lst) == "2"
    assert len(lst) == 1


def test_delete_foreign_node_raises():
    lst = _make([1, 2])
    with pytest.raises(ValueError):
        lst.delete_node(ListNode(1))
    with pytest.raises(ValueError):
        lst.delete_node(None)


def test_insert_after_and_before():
    lst = _make([1, 3])
    lst.insert_before(lst.find_by_index(1), 2)
    lst.insert_after(lst.find_by_index(2), 4)
    assert list(lst) == [1, 2, 3, 4]
    assert len(lst) == 4


def test_insert_before_foreign_node_raises():
    lst = _make([1])
    with pytest.raises(ValueError):
        lst.insert_before(ListNode(5), 0)
    with pytest.raises(ValueError):
        lst.insert_after(None, 0)


def test_reverse_and_delete_from_end():
    lst = _make([1, 2])
    assert str(lst) == "1->2"
    lst.reverse()
    assert str(lst) == "2->1"
    lst.delete_nth_from_end(2)
    assert str(lst) == "2"


def test_reverse_longer_list_round_trip():
    values = list(range(7))
    lst = _make(values)
    lst.reverse()
    assert list(lst) == values[::-1]
    lst.reverse()
    assert list(lst) == values


def test_reverse_single_is_noop():
    lst = _make([5])
    lst.reverse()
    assert list(lst) == [5]


def test_has_cycle():
    lst = _make([1, 2, 3])
    assert lst.has_cycle() is False
    lst.find_by_index(2).next = lst.find_by_index(0)
    assert lst.has_cycle() is True


def test_empty_list_has_no_cycle():
    assert LinkedList().has_cycle() is False


@pytest.mark.parametrize(
    "values, middle",
    [([1], 1), ([1, 2], 1), ([1, 2, 3], 2), ([1, 2, 3, 4], 2), ([1, 2, 3, 4, 5], 3)],
)
def test_find_middle_node(values, middle):
    assert _make(values).find_middle_node().value == middle


def test_find_middle_of_empty_list():
    assert LinkedList().find_middle_node() is None


def test_delete_nth_from_end_bounds():
    lst = _make([1, 2, 3, 4, 5])
    assert lst.delete_nth_from_end(2) == 5
    assert list(lst) == [1, 2, 3, 4]
    assert lst.delete_nth_from_end(len(lst) + 1) == 1
    assert list(lst) == [2, 3, 4]
    with pytest.raises(IndexError):
        lst.delete_nth_from_end(1)
    with pytest.raises(IndexError):
        lst.delete_nth_from_end(5)
    with pytest.raises(IndexError):
        LinkedList().delete_nth_from_end(2)