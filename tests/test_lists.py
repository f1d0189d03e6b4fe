import pytest

from cubcaster.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_init_keeps_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_push_front_prepends():
    lst = LinkedList()
    for item in (1, 2, 3):
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]
    assert lst.head.content == 3


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert isinstance(node, Node)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_last_returns_final_node():
    lst = LinkedList(["x", "y"])
    tail = lst.last()
    assert tail.content == "y"
    assert tail.next is None


def test_iterate_visits_in_order():
    seen = []
    lst = LinkedList([5, 6, 7])
    lst.iterate(seen.append)
    assert seen == [5, 6, 7]


def test_clear_calls_delete_on_each():
    deleted = []
    lst = LinkedList(["p", "q"])
    lst.clear(deleted.append)
    assert deleted == ["p", "q"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda v: v * 10)
    assert list(mapped) == [v * 10 for v in [1, 2, 3]]
    assert list(source) == [1, 2, 3]
    assert mapped.head is not source.head


def test_map_failure_releases_partial_results():
    deleted = []

    def func(value):
        if value == 3:
            raise ValueError("bad value")
        return -value

    source = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        source.map(func, deleted.append)
    assert deleted == [-1, -2]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0