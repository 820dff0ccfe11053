import pytest

from dsdemo.stack import Stack


def test_pop_returns_last_pushed():
    stack = Stack()
    for name in ["a", "b", "c"]:
        stack.push(name)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert len(stack) == 0


def test_peek_does_not_remove():
    stack = Stack()
    stack.push("first")
    stack.push("second")
    assert stack.peek() == "second"
    assert len(stack) == 2


def test_iteration_runs_from_top():
    stack = Stack()
    for name in ["x", "y", "z"]:
        stack.push(name)
    assert list(stack) == ["z", "y", "x"]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_reuse_after_emptying():
    stack = Stack()
    stack.push("one")
    stack.pop()
    stack.push("two")
    assert list(stack) == ["two"]
    assert len(stack) == 1