"""A double-ended queue backed by a doubly linked list."""

from __future__ import annotations

from typing import Any

from dsbasics.linked_lists import DoublyLinkedList


class LinkedDeque:
    """A deque with insertion and removal at either end."""

    def __init__(self) -> None:
        self._items = DoublyLinkedList()

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def front(self) -> Any:
        """Return the first item; raise IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("front of empty deque")
        return self._items.front()

    def back(self) -> Any:
        """Return the last item; raise IndexError if the deque is empty."""
        if self.is_empty():
            raise IndexError("back of empty deque")
        return self._items.back()

    def insert_front(self, item: Any) -> None:
        self._items.add_front(item)

    def insert_back(self, item: Any) -> None:
        self._items.add_back(item)

    def remove_front(self) -> Any:
        """Remove and return the first item."""
        if self.is_empty():
            raise IndexError("removeFront of empty deque")
        return self._items.remove_front()

    def remove_back(self) -> Any:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("removeBack of empty deque")
        return self._items.remove_back()