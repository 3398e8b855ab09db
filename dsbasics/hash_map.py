"""A hash map using separate chaining in a fixed number of buckets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

DEFAULT_CAPACITY = 10


@dataclass(eq=False)
class HashEntry:
    """A key-value pair held in a bucket."""

    key: Any
    value: Any


class HashMap:
    """A map from keys to values with one list of entries per bucket."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        hash_function: Callable[[Any], int] = hash,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._buckets: list[list[HashEntry]] = [[] for _ in range(capacity)]
        self._hash = hash_function
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def _bucket(self, key: Any) -> list[HashEntry]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    @staticmethod
    def _locate(bucket: list[HashEntry], key: Any) -> Optional[HashEntry]:
        return next((entry for entry in bucket if entry.key == key), None)

    def find(self, key: Any) -> Optional[HashEntry]:
        """Return the entry for the key, or None if there is none."""
        return self._locate(self._bucket(key), key)

    def put(self, key: Any, value: Any) -> HashEntry:
        """Set the value for a key, adding an entry if the key is new."""
        bucket = self._bucket(key)
        entry = self._locate(bucket, key)
        if entry is None:
            entry = HashEntry(key, value)
            bucket.append(entry)
            self._size += 1
        else:
            entry.value = value
        return entry

    def erase(self, key: Any) -> None:
        """Remove the entry for a key; raise KeyError if absent."""
        bucket = self._bucket(key)
        entry = self._locate(bucket, key)
        if entry is None:
            raise KeyError(key)
        bucket.remove(entry)
        self._size -= 1

    def remove(self, entry: HashEntry) -> None:
        """Remove an entry previously returned by the map."""
        bucket = self._bucket(entry.key)
        for index, candidate in enumerate(bucket):
            if candidate is entry:
                del bucket[index]
                self._size -= 1
                return
        raise KeyError(entry.key)

    def __iter__(self) -> Iterator[HashEntry]:
        """Yield entries bucket by bucket, in insertion order within a bucket."""
        for bucket in self._buckets:
            yield from list(bucket)