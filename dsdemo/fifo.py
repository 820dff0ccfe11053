"""A first-in, first-out queue of names built on linked nodes."""

from __future__ import annotations

from typing import Iterator

from dsdemo.linked_list import ListNode


class Queue:
    """A queue of names; names leave in the order they arrived."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0

    def enqueue(self, name: str) -> None:
        """Add a name at the back of the queue."""
        node = ListNode(name)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> str:
        """Remove and return the front name; IndexError if the queue is empty."""
        if self._head is None:
            raise IndexError("queue is empty")
        name = self._head.name
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return name

    def peek(self) -> str:
        """Return the front name without removing it; IndexError if empty."""
        if self._head is None:
            raise IndexError("queue is empty")
        return self._head.name

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.name
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"