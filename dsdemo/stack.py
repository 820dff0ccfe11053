"""A last-in, first-out stack of names built on linked nodes."""

from __future__ import annotations

from typing import Iterator

from dsdemo.linked_list import ListNode


class Stack:
    """A stack of names; the newest name is on top."""

    def __init__(self) -> None:
        self._top: ListNode | None = None
        self._size = 0

    def push(self, name: str) -> None:
        """Put a name on top of the stack."""
        self._top = ListNode(name, self._top)
        self._size += 1

    def pop(self) -> str:
        """Remove and return the top name; IndexError if the stack is empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        name = self._top.name
        self._top = self._top.next
        self._size -= 1
        return name

    def peek(self) -> str:
        """Return the top name without removing it; IndexError if empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.name

    def __iter__(self) -> Iterator[str]:
        node = self._top
        while node is not None:
            yield node.name
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"