"""An unbalanced binary search tree built on a linked binary tree."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional, TextIO

from dsbasics.binary_tree import LinkedBinaryTree, Position


@dataclass
class Entry:
    """A key-value pair stored in the search tree."""

    key: Any = None
    value: Any = None


class BinarySearchTree:
    """A binary search tree whose leaves are empty sentinel nodes.

    The underlying tree carries a super-root whose left child is the real
    root; every stored entry sits in an internal node.
    """

    def __init__(self) -> None:
        self._tree = LinkedBinaryTree()
        self._tree.expand_external(self._tree.add_root())
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _root(self) -> Position:
        return self._tree.root().left()

    @staticmethod
    def _finder(key: Any, position: Position) -> Position:
        while position.is_internal():
            entry = position.element
            if key < entry.key:
                position = position.left()
            elif entry.key < key:
                position = position.right()
            else:
                break
        return position

    def find(self, key: Any) -> Optional[Entry]:
        """Return the entry with the given key, or None if there is none."""
        position = self._finder(key, self._root())
        return position.element if position.is_internal() else None

    def insert(self, key: Any, value: Any) -> Entry:
        """Add a new entry; equal keys are kept and placed to the right."""
        position = self._finder(key, self._root())
        while position.is_internal():
            position = self._finder(key, position.right())
        self._tree.expand_external(position)
        entry = Entry(key, value)
        position.element = entry
        self._size += 1
        return entry

    def erase(self, key: Any) -> None:
        """Remove one entry with the given key; raise KeyError if absent."""
        position = self._finder(key, self._root())
        if position.is_external():
            raise KeyError(key)
        if position.left().is_external():
            leaf = position.left()
        elif position.right().is_external():
            leaf = position.right()
        else:
            leaf = position.right()
            while leaf.is_internal():
                leaf = leaf.left()
            position.element = leaf.parent().element
        self._tree.remove_above_external(leaf)
        self._size -= 1

    def __iter__(self) -> Iterator[Entry]:
        """Yield entries in key order."""
        stack: list[Position] = []
        position = self._root()
        while stack or position.is_internal():
            while position.is_internal():
                stack.append(position)
                position = position.left()
            position = stack.pop()
            yield position.element
            position = position.right()

    def print_nodes(self, file: Optional[TextIO] = None) -> None:
        """Write each entry as "key value", one per line, in preorder."""
        out = file if file is not None else sys.stdout
        for position in self._tree.positions()[1:]:
            if position.is_internal():
                entry = position.element
                print(f"{entry.key} {entry.value}", file=out)