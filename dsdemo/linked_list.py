"""A singly linked list of names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list of names."""

    name: str
    next: ListNode | None = None


class LinkedList:
    """A singly linked list of names, appended or kept in alphabetical order."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self.head: ListNode | None = None
        for name in names:
            self.append(name)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def append(self, name: str) -> None:
        """Add a name at the end of the list."""
        new_node = ListNode(name)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = new_node
        else:
            last.next = new_node

    def insert_sorted(self, name: str) -> None:
        """Insert a name before the first name that sorts after it."""
        if self.head is None or self.head.name > name:
            self.head = ListNode(name, self.head)
            return
        current = self.head
        while current.next is not None and current.next.name < name:
            current = current.next
        current.next = ListNode(name, current.next)

    def delete(self, name: str) -> None:
        """Remove the first node holding ``name``.

        Raises IndexError when the list is empty and KeyError when the name
        is not in the list.
        """
        if self.head is None:
            raise IndexError("list is already empty")
        if self.head.name == name:
            self.head = self.head.next
            return
        previous = self.head
        while previous.next is not None and previous.next.name != name:
            previous = previous.next
        if previous.next is None:
            raise KeyError(name)
        previous.next = previous.next.next

    def clear(self) -> None:
        """Drop every node."""
        self.head = None

    def __iter__(self) -> Iterator[str]:
        return (node.name for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def format(self) -> str:
        """Render the list one name per line, each followed by a comma."""
        return "".join(f"{name},\n" for name in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"