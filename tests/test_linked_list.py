import pytest

from dsdemo.linked_list import LinkedList, ListNode


def test_append_keeps_insertion_order():
    names = ["bob", "alice", "carol"]
    assert list(LinkedList(names)) == names


def test_append_to_empty_sets_head():
    items = LinkedList()
    items.append("zed")
    assert isinstance(items.head, ListNode)
    assert items.head.name == "zed"
    assert len(items) == 1


@pytest.mark.parametrize(
    "names",
    [
        ["delta", "alpha", "charlie", "bravo"],
        ["a", "b", "c"],
        ["c", "b", "a"],
        ["m", "m", "a", "z", "m"],
        [],
    ],
)
def test_insert_sorted_keeps_alphabetical_order(names):
    items = LinkedList()
    for name in names:
        items.insert_sorted(name)
    assert list(items) == sorted(names)
    assert len(items) == len(names)


def test_insert_sorted_duplicate_of_head():
    items = LinkedList(["bob"])
    items.insert_sorted("bob")
    items.insert_sorted("al")
    assert list(items) == ["al", "bob", "bob"]


@pytest.mark.parametrize("target", ["a", "b", "c"])
def test_delete_removes_node(target):
    names = ["a", "b", "c"]
    items = LinkedList(names)
    items.delete(target)
    assert list(items) == [n for n in names if n != target]


def test_delete_removes_only_first_match():
    items = LinkedList(["x", "y", "x"])
    items.delete("x")
    assert list(items) == ["y", "x"]


def test_delete_from_empty_list_raises():
    with pytest.raises(IndexError):
        LinkedList().delete("anyone")


def test_delete_missing_name_raises_key_error():
    items = LinkedList(["a", "b"])
    with pytest.raises(KeyError):
        items.delete("q")
    assert list(items) == ["a", "b"]


def test_format_lists_names_with_commas():
    assert LinkedList(["x", "y"]).format() == "x,\ny,\n"


def test_format_of_empty_list_is_empty():
    assert LinkedList().format() == ""


def test_clear_empties_list():
    items = LinkedList(["a", "b"])
    items.clear()
    assert len(items) == 0
    assert items.head is None