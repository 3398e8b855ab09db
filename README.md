# dsbasics

A small collection of classic data structures written in plain Python, with
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsbasics.game_scores` | `GameEntry` and `Scores`: a fixed-size high-score table kept sorted from highest to lowest |
| `dsbasics.array_stack` | `ArrayStack`: a stack with a fixed capacity (100 by default) |
| `dsbasics.linked_lists` | `SinglyLinkedList` and `DoublyLinkedList` |
| `dsbasics.binary_tree` | `LinkedBinaryTree` and its `Position` handles |
| `dsbasics.search_tree` | `BinarySearchTree` of `Entry` key/value pairs |
| `dsbasics.deque` | `LinkedDeque`: a double-ended queue on a doubly linked list |
| `dsbasics.hash_map` | `HashMap` with separate chaining and `HashEntry` items |
| `dsbasics.priority_queues` | `HeapPriorityQueue`, `ListPriorityQueue`, `Point2D` and the comparators `less_than` and `left_right` |

## Examples

High scores keep only the best entries. When the table is full, a new entry
is dropped unless it beats the lowest score:

```python
from dsbasics.game_scores import GameEntry, Scores

scores = Scores(10)
scores.add(GameEntry("mike", 100))
scores.add(GameEntry("Andy", 5100))
scores.add(GameEntry("Pual", 200))
print([entry.name for entry in scores])   # ['Andy', 'Pual', 'mike']
print(scores.remove(0).name)              # Andy
```

A stack with a capacity:

```python
from dsbasics.array_stack import ArrayStack

stack = ArrayStack(100)
stack.push(7)
stack.push(13)
print(stack.top())   # 13
stack.pop()
print(len(stack))    # 1
```

Linked lists iterate from front to back, and `str()` shows their items
separated by `" - "` and ending in `NULL`:

```python
from dsbasics.linked_lists import DoublyLinkedList

airports = DoublyLinkedList(["SFO"])
airports.add_front("PVD")
airports.add_front("JFK")
print(list(airports))   # ['JFK', 'PVD', 'SFO']
print(airports)         # JFK - PVD - SFO - NULL
```

A binary search tree; iteration yields entries in key order, and
`print_nodes()` writes `key value` lines in preorder:

```python
from dsbasics.search_tree import BinarySearchTree

tree = BinarySearchTree()
for key in (5, 4, 6, 3, 7):
    tree.insert(key, 10)
tree.erase(5)
print(len(tree))                       # 4
print([entry.key for entry in tree])   # [3, 4, 6, 7]
```

A hash map with a custom hash function (the built-in `hash` is the default):

```python
from dsbasics.hash_map import HashMap

names = HashMap(10, lambda key: key)
names.put(0, "Neil")
names.put(14, "Bob")
print(names.find(14).value)   # Bob
print(names.find(13))         # None
```

Priority queues take a "less than" comparator:

```python
from dsbasics.priority_queues import HeapPriorityQueue, less_than

queue = HeapPriorityQueue(less_than)
for value in (10, 9, 8, 7, 6):
    queue.insert(value)
print(queue.min())   # 6
```

## Errors

Operations on an empty structure, or past a capacity, raise exceptions
rather than returning status codes: `IndexError` for empty stacks, lists,
deques, queues and out-of-range score ranks; `KeyError` for erasing a missing
key from `BinarySearchTree` or `HashMap`.

## What it does not do

This is a library only. It has no command-line program and keeps nothing on
disk; the structures live in memory and are used from Python code.