"""A linked binary tree addressed through positions."""

from __future__ import annotations

from typing import Any, Optional


class _Node:
    __slots__ = ("element", "parent", "left", "right")

    def __init__(self, element: Any = None, parent: Optional["_Node"] = None) -> None:
        self.element = element
        self.parent = parent
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class Position:
    """A handle on one node of a tree."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node) -> None:
        self._node = node

    @staticmethod
    def _wrap(node: Optional[_Node]) -> Optional["Position"]:
        return None if node is None else Position(node)

    @property
    def element(self) -> Any:
        return self._node.element

    @element.setter
    def element(self, value: Any) -> None:
        self._node.element = value

    def left(self) -> Optional["Position"]:
        return self._wrap(self._node.left)

    def right(self) -> Optional["Position"]:
        return self._wrap(self._node.right)

    def parent(self) -> Optional["Position"]:
        return self._wrap(self._node.parent)

    def is_root(self) -> bool:
        return self._node.parent is None

    def is_external(self) -> bool:
        return self._node.left is None and self._node.right is None

    def is_internal(self) -> bool:
        return not self.is_external()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"Position({self._node.element!r})"


class LinkedBinaryTree:
    """A binary tree in which every node has either no children or two."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def root(self) -> Position:
        if self._root is None:
            raise IndexError("tree is empty")
        return Position(self._root)

    def positions(self) -> list[Position]:
        """Return every position in preorder."""
        result: list[Position] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(Position(node))
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def add_root(self, element: Any = None) -> Position:
        """Create the root of an empty tree."""
        if self._root is not None:
            raise ValueError("tree already has a root")
        self._root = _Node(element)
        self._size = 1
        return Position(self._root)

    def expand_external(self, position: Position, left: Any = None, right: Any = None) -> None:
        """Give an external node two children holding the given elements."""
        node = position._node
        if node.left is not None or node.right is not None:
            raise ValueError("position is not external")
        node.left = _Node(left, node)
        node.right = _Node(right, node)
        self._size += 2

    def remove_above_external(self, position: Position) -> Position:
        """Remove an external node and its parent; return the sibling that takes their place."""
        node = position._node
        if node.left is not None or node.right is not None:
            raise ValueError("position is not external")
        parent = node.parent
        if parent is None:
            raise ValueError("position has no parent")
        sibling = parent.right if node is parent.left else parent.left
        grandparent = parent.parent
        if grandparent is None:
            self._root = sibling
        elif parent is grandparent.left:
            grandparent.left = sibling
        else:
            grandparent.right = sibling
        sibling.parent = grandparent
        node.parent = None
        parent.left = parent.right = parent.parent = None
        self._size -= 2
        return Position(sibling)