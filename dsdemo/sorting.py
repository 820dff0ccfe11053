"""Quick sort for integer lists and merge sort for linked lists of names."""

from __future__ import annotations

import random
from typing import MutableSequence

from dsdemo.linked_list import LinkedList, ListNode


def randomize_array(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ``n`` random integers in the range 0 to 99."""
    if n < 0:
        raise ValueError("array size must not be negative")
    source = random if rng is None else rng
    return [source.randrange(100) for _ in range(n)]


def partition(items: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around its last element.

    Smaller elements end up left of the pivot; its final index is returned.
    """
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quick_sort(items: MutableSequence[int], low: int = 0, high: int | None = None) -> None:
    """Sort ``items[low:high + 1]`` in place."""
    if high is None:
        high = len(items) - 1
    while low < high:
        pivot = partition(items, low, high)
        # Recurse into the smaller side to bound the stack depth.
        if pivot - low < high - pivot:
            quick_sort(items, low, pivot - 1)
            low = pivot + 1
        else:
            quick_sort(items, pivot + 1, high)
            high = pivot - 1


def merge(left: ListNode | None, right: ListNode | None) -> ListNode | None:
    """Merge two sorted node chains; on ties the left node comes first."""
    anchor = ListNode("")
    tail = anchor
    while left is not None and right is not None:
        if left.name <= right.name:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return anchor.next


def divide(head: ListNode | None) -> tuple[ListNode | None, ListNode | None]:
    """Split a chain in two; the front half gets the extra node."""
    if head is None or head.next is None:
        return head, None
    slow, fast = head, head.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    right = slow.next
    slow.next = None
    return head, right


def merge_sort(head: ListNode | None) -> ListNode | None:
    """Sort a node chain by name and return its new head."""
    if head is None or head.next is None:
        return head
    left, right = divide(head)
    return merge(merge_sort(left), merge_sort(right))


def sort_list(linked_list: LinkedList) -> None:
    """Sort a linked list in place with merge sort."""
    linked_list.head = merge_sort(linked_list.head)