"""Linked list, stack, queue, hash table, search tree and sorting demos with an interactive menu."""

__version__ = "0.1.0"