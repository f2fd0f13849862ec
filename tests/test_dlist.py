import pytest

from libftx.dlist import DoublyLinkedList


def _backwards(lst):
    values = []
    node = lst.last()
    while node is not None:
        values.append(node.value)
        node = node.prev
    return values


def test_build_from_items_keeps_order():
    lst = DoublyLinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3
    assert _backwards(lst) == [2, 1, 3]


def test_push_front_and_back():
    lst = DoublyLinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head.value == "a"
    assert lst.last().value == "c"
    assert lst.head.prev is None


def test_last_of_empty_list_is_none():
    assert DoublyLinkedList().last() is None


def test_remove_middle_relinks_neighbours():
    lst = DoublyLinkedList()
    lst.push_back(1)
    middle = lst.push_back(2)
    lst.push_back(3)
    removed = lst.remove(middle)
    assert removed is middle
    assert middle.next is None and middle.prev is None
    assert list(lst) == [1, 3]
    assert _backwards(lst) == [3, 1]
    assert len(lst) == 2


def test_remove_head_moves_head():
    lst = DoublyLinkedList()
    first = lst.push_back(1)
    lst.push_back(2)
    lst.remove(first)
    assert lst.head.value == 2
    assert lst.head.prev is None


def test_remove_tail_moves_last():
    lst = DoublyLinkedList([1, 2])
    lst.remove(lst.last())
    assert lst.last().value == 1
    assert list(lst) == [1]


def test_remove_only_node_empties_list():
    lst = DoublyLinkedList()
    node = lst.push_back("x")
    lst.remove(node)
    assert list(lst) == []
    assert lst.head is None
    assert lst.last() is None


def test_remove_foreign_node_raises():
    lst = DoublyLinkedList([1])
    other = DoublyLinkedList([1])
    with pytest.raises(ValueError):
        lst.remove(other.head)


def test_remove_twice_raises():
    lst = DoublyLinkedList([1, 2])
    node = lst.head
    lst.remove(node)
    with pytest.raises(ValueError):
        lst.remove(node)


def test_delete_calls_callback_with_value():
    seen = []
    lst = DoublyLinkedList(["a", "b"])
    lst.delete(lst.head, seen.append)
    assert seen == ["a"]
    assert list(lst) == ["b"]


def test_delete_without_callback():
    lst = DoublyLinkedList([5, 6])
    lst.delete(lst.last())
    assert list(lst) == [5]


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [5, 3, 9, 1, 7], [4, 4, 1, 4, 0], list(range(20, 0, -1))],
)
def test_sort_orders_values(values):
    lst = DoublyLinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert _backwards(lst) == sorted(values, reverse=True)
    assert len(lst) == len(values)


def test_sort_keeps_nodes_usable():
    lst = DoublyLinkedList()
    lst.push_back(3)
    node = lst.push_back(1)
    lst.push_back(2)
    lst.sort()
    assert lst.head is node
    lst.remove(node)
    assert list(lst) == [2, 3]