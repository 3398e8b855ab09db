"""Singly and doubly linked lists."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _SinglyNode:
    __slots__ = ("element", "next")

    def __init__(self, element: Any, next_node: Optional["_SinglyNode"]) -> None:
        self.element = element
        self.next = next_node


class SinglyLinkedList:
    """A linked list with insertion and removal at the front."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[_SinglyNode] = None
        self._size = 0
        for item in reversed(list(items or ())):
            self.add_front(item)

    def is_empty(self) -> bool:
        return self._head is None

    def front(self) -> Any:
        if self._head is None:
            raise IndexError("front of empty list")
        return self._head.element

    def add_front(self, item: Any) -> None:
        self._head = _SinglyNode(item, self._head)
        self._size += 1

    def remove_front(self) -> Any:
        """Remove and return the front item."""
        if self._head is None:
            raise IndexError("remove from empty list")
        old = self._head
        self._head = old.next
        self._size -= 1
        return old.element

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.element
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{item} - " for item in self) + "NULL"


class _DoublyNode:
    __slots__ = ("element", "prev", "next")

    def __init__(self, element: Any = None) -> None:
        self.element = element
        self.prev: Optional["_DoublyNode"] = None
        self.next: Optional["_DoublyNode"] = None


class DoublyLinkedList:
    """A linked list with sentinels, open at both ends."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._header = _DoublyNode()
        self._trailer = _DoublyNode()
        self._header.next = self._trailer
        self._trailer.prev = self._header
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def is_empty(self) -> bool:
        return self._header.next is self._trailer

    def front(self) -> Any:
        if self.is_empty():
            raise IndexError("front of empty list")
        return self._header.next.element

    def back(self) -> Any:
        if self.is_empty():
            raise IndexError("back of empty list")
        return self._trailer.prev.element

    def _add_before(self, successor: _DoublyNode, item: Any) -> None:
        node = _DoublyNode(item)
        node.next = successor
        node.prev = successor.prev
        successor.prev.next = node
        successor.prev = node
        self._size += 1

    def _unlink(self, node: _DoublyNode) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.element

    def add_front(self, item: Any) -> None:
        self._add_before(self._header.next, item)

    def add_back(self, item: Any) -> None:
        self._add_before(self._trailer, item)

    def remove_front(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise IndexError("remove from empty list")
        return self._unlink(self._header.next)

    def remove_back(self) -> Any:
        """Remove and return the back item."""
        if self.is_empty():
            raise IndexError("remove from empty list")
        return self._unlink(self._trailer.prev)

    def __iter__(self) -> Iterator[Any]:
        node = self._header.next
        while node is not self._trailer:
            yield node.element
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{item} - " for item in self) + "NULL"