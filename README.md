# dsdemo

An interactive command-line tour of classic data structures. Each section
opens with a short quiz question and then lets you work with the
structure directly:

1. **Array**: fill an array with random numbers from 0 to 99 and quick-sort it.
2. **Linked List**: append, insert in alphabetical order, delete, merge-sort and print names.
3. **Stack**: push, pop, peek and print.
4. **Queue**: enqueue, dequeue, peek and print.
5. **Hash Table**: choose a table size, store names with a GPA, look them up and show every bucket.
6. **Binary Search Tree**: insert integers, list them in order and search for them.

## Installation

```
pip install .
```

## Running

```
dsdemo
```

Choose a section by its number from the main menu and enter `0` to exit.
Inside a section, the last option of its menu returns to the main menu.
Input is read as whitespace-separated words, so several answers may be typed
on one line. Input that is not a number where a number is expected is
skipped, and the program ends quietly when standard input runs out.

## Using the structures from Python

Every structure can be used on its own:

```python
from dsdemo.linked_list import LinkedList
from dsdemo.sorting import quick_sort, randomize_array, sort_list
from dsdemo.stack import Stack
from dsdemo.fifo import Queue
from dsdemo.hashtable import HashTable, hash_function
from dsdemo.bst import BinarySearchTree

names = LinkedList(["carol", "alice", "bob"])
sort_list(names)                  # merge sort, in place
print(list(names))                # ['alice', 'bob', 'carol']
names.insert_sorted("beth")
print(names.format(), end="")     # one name per line, each followed by ","

numbers = [5, 3, 9, 1]
quick_sort(numbers)               # or quick_sort(numbers, low, high)
print(numbers)                    # [1, 3, 5, 9]
print(len(randomize_array(10)))   # 10

stack = Stack()
stack.push("a")
stack.push("b")
print(stack.peek())               # b
print(stack.pop())                # b

queue = Queue()
queue.enqueue("a")
queue.enqueue("b")
print(queue.dequeue())            # a

table = HashTable(8)
table.insert("alice", 3.5)
print(table.search("alice"))      # HashEntry(name='alice', gpa=3.5)
print(table.format(), end="")     # "Bucket 0: ... NULL" for every bucket

tree = BinarySearchTree()
for key in (50, 30, 70, 20):
    tree.insert(key)
print(list(tree.inorder()))       # [20, 30, 50, 70]
print(list(tree.preorder()))      # [50, 30, 20, 70]
print(30 in tree)                 # True
print(tree.find_min())            # 20
```

Notes on behaviour:

- `LinkedList.delete` raises `IndexError` on an empty list and `KeyError`
  when the name is absent.
- `Stack.pop`, `Stack.peek`, `Queue.dequeue` and `Queue.peek` raise
  `IndexError` when the structure is empty.
- `HashTable` uses the djb2 string hash (`hash_function`) with separate
  chaining; new entries go to the front of their bucket, and inserting an
  existing name updates its GPA. A size of zero or less raises `ValueError`.
- `BinarySearchTree` ignores duplicate keys: `insert` and `delete` return
  `False` when nothing changed, and `find_min` raises `ValueError` on an
  empty tree.

## What it does not do

Nothing is saved: every structure starts empty each time a section is
entered and is discarded when you go back to the main menu. The trees are
not balanced, and the hash table never grows beyond the size it was given.

## Running the tests

```
pip install ".[test]"
pytest
```