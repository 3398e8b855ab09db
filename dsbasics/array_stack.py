"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class ArrayStack(Generic[T]):
    """A last-in first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def top(self) -> T:
        """Return the top item without removing it."""
        if self.is_empty():
            raise IndexError("Top of empty stack")
        return self._items[-1]

    def push(self, item: T) -> None:
        """Push an item; raise IndexError when the stack is full."""
        if len(self._items) == self.capacity:
            raise IndexError("Push to full stack")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("Pop from empty stack")
        return self._items.pop()