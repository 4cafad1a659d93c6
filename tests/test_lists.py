import pytest

from libft.lists import LinkedList, Node


def test_init_preserves_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_and_back():
    lst = LinkedList([2])
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]


def test_add_returns_linked_node():
    lst = LinkedList()
    first = lst.add_back("x")
    second = lst.add_back("y")
    assert first.next is second
    assert lst.head is first
    assert second.next is None


def test_last_returns_final_node():
    lst = LinkedList(["a", "b"])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == "b"
    added = lst.add_back("c")
    assert lst.last() is added


def test_for_each_visits_in_order():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [1, 2, 3]


def test_for_each_requires_callable():
    with pytest.raises(TypeError):
        LinkedList([1]).for_each(None)


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10, lambda x: None)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_deletes_partial_result_on_failure():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert sorted(deleted) == [101, 102]


def test_map_requires_callables():
    with pytest.raises(TypeError):
        LinkedList([1]).map(lambda x: x, None)


def test_clear_calls_delete_back_to_front():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["c", "b", "a"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_len_matches_iteration():
    lst = LinkedList(range(7))
    assert len(lst) == len(list(lst))
    lst.add_front(-1)
    assert len(lst) == 8