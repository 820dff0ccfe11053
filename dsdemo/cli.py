"""Interactive menu that quizzes the user and exercises each data structure."""

from __future__ import annotations

import argparse
import random
import re
import sys
from typing import TextIO

from dsdemo.bst import BinarySearchTree
from dsdemo.fifo import Queue
from dsdemo.hashtable import HashTable
from dsdemo.linked_list import LinkedList
from dsdemo.sorting import quick_sort, randomize_array, sort_list
from dsdemo.stack import Stack

_INT_PATTERN = re.compile(r"[+-]?\d+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_MAIN_MENU = (
    "\n=============================\n"
    "   DATA STRUCTURES CLI APP   \n"
    "=============================\n"
    "1. Array\n"
    "2. Linked List\n"
    "3. Stack\n"
    "4. Queue\n"
    "5. Hash Table\n"
    "6. Binary Search Tree (BST)\n"
    "0. Exit\n"
    "-----------------------------\n"
    "Select an option: "
)


class Console:
    """Whitespace-delimited reading from one stream and writing to another."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self._line = ""

    def _skip_whitespace(self) -> None:
        self._line = self._line.lstrip()
        while not self._line:
            line = self.stdin.readline()
            if not line:
                raise EOFError("end of input")
            self._line = line.lstrip()

    def _read_number(self, pattern: re.Pattern[str]) -> str:
        self._skip_whitespace()
        match = pattern.match(self._line)
        if match is None:
            bad = self._line.split(None, 1)[0]
            self._line = ""
            raise ValueError(f"not a number: {bad!r}")
        self._line = self._line[match.end():]
        return match.group()

    def read_token(self) -> str:
        """Return the next run of non-whitespace characters; EOFError at end."""
        self._skip_whitespace()
        parts = self._line.split(None, 1)
        token = parts[0]
        self._line = self._line[len(token):]
        return token

    def read_int(self) -> int:
        """Read a leading integer.

        On bad input the rest of the line is discarded and ValueError raised.
        """
        return int(self._read_number(_INT_PATTERN))

    def read_float(self) -> float:
        """Read a leading decimal number; bad input is handled as in read_int."""
        return float(self._read_number(_FLOAT_PATTERN))

    def write(self, text: str) -> None:
        """Write text and flush it."""
        self.stdout.write(text)
        self.stdout.flush()


def _read_choice(console: Console) -> int | None:
    try:
        return console.read_int()
    except ValueError:
        return None


def _quiz(console: Console, prompt: str, accepted: tuple[str, ...], right: str, wrong: str) -> None:
    console.write(prompt)
    answer = console.read_token().casefold()
    console.write(right if answer in accepted else wrong)


def demo_array(console: Console, rng: random.Random | None = None) -> None:
    """Quiz on array access, then quick sort random arrays."""
    _quiz(
        console,
        "\nWhat is the Time Complexity of accessing an element in an Array by index? "
        "(in Big-O Notation): ",
        ("o(1)",),
        "Correct! Arrays provide constant time access.\n",
        "Incorrect. It is O(1) because of sequential memory.\n",
    )
    while True:
        console.write("\n--- Array Demo ---\n1. Quick Sort Random Array\n2. Back\nChoice: ")
        choice = _read_choice(console)
        if choice == 2:
            return
        if choice != 1:
            continue
        console.write("Enter array size: ")
        size = _read_choice(console)
        if size is None or size < 0:
            continue
        items = randomize_array(size, rng)
        console.write("Original: " + "".join(f"{value} " for value in items) + "\n")
        quick_sort(items)
        console.write("Sorted:   " + "".join(f"{value} " for value in items) + "\n")


def demo_linked_list(console: Console) -> None:
    """Quiz on sorting lists, then edit a linked list of names."""
    _quiz(
        console,
        "\nTo sort a Linked List, should we use Merge Sort or Quick Sort?: ",
        ("merge", "merge sort"),
        "Correct! Merge Sort doesn't require random access.\n",
        "Incorrect. The answer is Merge Sort.\n",
    )
    names = LinkedList()
    while True:
        console.write(
            "\n--- Linked List Demo ---\n1. Append Node\n2. Insert Alphabetically\n"
            "3. Delete Node\n4. Sort List (Merge Sort)\n5. Print List\n6. Back\nChoice: "
        )
        choice = _read_choice(console)
        if choice == 1:
            console.write("Enter Name: ")
            names.append(console.read_token())
        elif choice == 2:
            console.write("Enter Name: ")
            names.insert_sorted(console.read_token())
        elif choice == 3:
            console.write("Enter Name to Delete: ")
            target = console.read_token()
            try:
                names.delete(target)
            except IndexError:
                console.write("list is already empty.\n")
            except KeyError:
                console.write("Not Found.\n")
        elif choice == 4:
            console.write("Sorting list...\n")
            sort_list(names)
            console.write("List sorted!\n")
            console.write(names.format())
        elif choice == 5:
            console.write(names.format())
        elif choice == 6:
            return


def demo_stack(console: Console) -> None:
    """Quiz on stack order, then push and pop names."""
    _quiz(
        console,
        "\nDoes Stack use LIFO or FIFO: ",
        ("fifo",),
        "Correct!\n",
        "Incorrect. It is a FIFO (First-In-First-Out).\n",
    )
    stack = Stack()
    while True:
        console.write("\n--- Stack Demo ---\n1. Push\n2. Pop\n3. Peek\n4. Print Stack\n5. Back\nChoice: ")
        choice = _read_choice(console)
        if choice == 1:
            console.write("Enter Value: ")
            value = console.read_token()
            stack.push(value)
            console.write(f"{value} was pushed to the stack.\n")
        elif choice == 2:
            try:
                console.write(f"{stack.pop()} was popped from the stack.\n")
            except IndexError:
                console.write("Stack is empty.\n")
        elif choice == 3:
            try:
                console.write(f"{stack.peek()}\n")
            except IndexError:
                console.write("Stack is empty.\n")
        elif choice == 4:
            console.write("Stack Top -> " + "".join(f"{name},\n" for name in stack))
        elif choice == 5:
            return


def demo_queue(console: Console) -> None:
    """Quiz on breadth-first search, then enqueue and dequeue names."""
    _quiz(
        console,
        "\nWhich data structure is used for Breadth-First Search?",
        ("queue",),
        "Correct!\n",
        "Incorrect It is a Queue.\n",
    )
    queue = Queue()
    while True:
        console.write(
            "\n--- Queue Demo ---\n1. Enqueue\n2. Dequeue\n3. Peek\n4. Print Queue\n5. Back\nChoice: "
        )
        choice = _read_choice(console)
        if choice == 1:
            console.write("Enter Value: ")
            queue.enqueue(console.read_token())
        elif choice == 2:
            try:
                name = queue.dequeue()
            except IndexError:
                console.write("Queue is empty.\n")
            else:
                if queue:
                    console.write(f"Dequeued {name}.\n")
                else:
                    console.write(f"Dequeued {name}, queue is now empty.\n")
        elif choice == 3:
            try:
                console.write(f"{queue.peek()}\n")
            except IndexError:
                console.write("Queue is empty.\n")
        elif choice == 4:
            console.write("Queue Front -> " + "".join(f"{name},\n" for name in queue))
        elif choice == 5:
            return


def demo_hashtable(console: Console) -> None:
    """Quiz on hash lookups, then store and find GPAs by name."""
    _quiz(
        console,
        "\nWhat is the average time complexity of a Hash Table lookup? (Big-O Notaion) ",
        ("o(1)",),
        "Correct! It's constant time on average.\n",
        "Incorrect. Ideally, it is O(1).\n",
    )
    console.write("\nEnter Hash Table Size: ")
    size = _read_choice(console)
    if size is None or size <= 0:
        console.write("Invalid table size.\n")
        return
    table = HashTable(size)
    while True:
        console.write("\n--- Hash Table Demo ---\n1. Insert\n2. Search\n3. Print Table\n4. Back\nChoice: ")
        choice = _read_choice(console)
        if choice == 1:
            console.write("Enter Name: ")
            name = console.read_token()
            console.write("Enter GPA: ")
            try:
                gpa = console.read_float()
            except ValueError:
                continue
            table.insert(name, gpa)
        elif choice == 2:
            console.write("Enter Name to Search: ")
            entry = table.search(console.read_token())
            if entry is None:
                console.write("Not Found.\n")
            else:
                console.write(f"Found: {entry.name} with GPA {entry.gpa:.2f}\n")
        elif choice == 3:
            console.write(table.format())
        elif choice == 4:
            return


def demo_bst(console: Console) -> None:
    """Quiz on search trees, then insert, list and find integer keys."""
    _quiz(
        console,
        "\nDoes a Binary Search Tree always guarantee O(log n) search? (yes/no) ",
        ("no",),
        "Correct! It can degrade to O(n) if unbalanced.\n",
        "Incorrect, It can degrade to O(n) if the tree is unbalanced.\n",
    )
    tree = BinarySearchTree()
    while True:
        console.write("\n--- BST Demo ---\n1. Insert\n2. In-Order Traversal\n3. Search\n4. Back\nChoice: ")
        choice = _read_choice(console)
        if choice == 1:
            console.write("Enter integer: ")
            key = _read_choice(console)
            if key is not None:
                tree.insert(key)
        elif choice == 2:
            console.write("Tree: " + "".join(f"{key} " for key in tree.inorder()) + "\n")
        elif choice == 3:
            console.write("Search for: ")
            key = _read_choice(console)
            if key is None:
                continue
            console.write(f"Found {key}!\n" if key in tree else f"{key} not found.\n")
        elif choice == 4:
            return


def run(console: Console, rng: random.Random | None = None) -> int:
    """Show the main menu until the user exits or input ends; return the exit code."""
    demos = {
        1: lambda: demo_array(console, rng),
        2: lambda: demo_linked_list(console),
        3: lambda: demo_stack(console),
        4: lambda: demo_queue(console),
        5: lambda: demo_hashtable(console),
        6: lambda: demo_bst(console),
    }
    try:
        while True:
            console.write(_MAIN_MENU)
            try:
                choice = console.read_int()
            except ValueError:
                continue
            if choice == 0:
                console.write("Exiting...\n")
                return 0
            demo = demos.get(choice)
            if demo is None:
                console.write("Invalid option.\n")
            else:
                demo()
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsdemo", description="Interactive tour of basic data structures."
    )
    parser.parse_args(argv)
    return run(Console(sys.stdin, sys.stdout), random.Random())


if __name__ == "__main__":
    raise SystemExit(main())