"""A bounded high-score table kept in descending score order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DEFAULT_MAX_ENTRIES = 10


@dataclass(frozen=True)
class GameEntry:
    """A single game score entry."""

    name: str = ""
    score: int = 0

    def __str__(self) -> str:
        return self.name


class Scores:
    """Stores the highest game scores, best first, up to a fixed number."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries: list[GameEntry] = []

    def add(self, entry: GameEntry) -> None:
        """Insert an entry in score order; ignore it if the table is full and it is too low."""
        if len(self._entries) == self.max_entries:
            if entry.score <= self._entries[-1].score:
                return
            self._entries.pop()
        position = len(self._entries)
        while position > 0 and entry.score > self._entries[position - 1].score:
            position -= 1
        self._entries.insert(position, entry)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexError("Index Out Of Range!")

    def get(self, index: int) -> GameEntry:
        """Return the entry at the given rank."""
        self._check_index(index)
        return self._entries[index]

    def remove(self, index: int) -> GameEntry:
        """Remove and return the entry at the given rank."""
        self._check_index(index)
        return self._entries.pop(index)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[GameEntry]:
        return iter(list(self._entries))