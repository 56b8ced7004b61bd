"""A separately chained hash table that doubles in size as it fills."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 10
MAX_LOAD_FACTOR = 0.7
GROWTH_FACTOR = 2


class HashTable(Generic[K, V]):
    """Maps keys to values using a list of buckets of (key, value) pairs."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._count = 0
        self._buckets: list[list[tuple[K, V]]] = []
        self._resize(max(capacity, 1))

    def _bucket(self, key: K) -> list[tuple[K, V]]:
        return self._buckets[hash(key) % len(self._buckets)]

    def _resize(self, capacity: int) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(capacity)]
        for bucket in old:
            for key, value in bucket:
                self._bucket(key).append((key, value))

    def put(self, key: K, value: V) -> None:
        """Store value under key, replacing any value already there."""
        bucket = self._bucket(key)
        for position, (existing, _) in enumerate(bucket):
            if existing == key:
                bucket[position] = (key, value)
                return
        bucket.append((key, value))
        self._count += 1
        if self.load_factor > MAX_LOAD_FACTOR:
            self._resize(self.capacity * GROWTH_FACTOR)

    def get(self, key: K) -> Optional[V]:
        """Return the value stored under key, or None if the key is absent."""
        return next(
            (value for existing, value in self._bucket(key) if existing == key), None
        )

    def remove(self, key: K) -> None:
        """Remove key and its value; do nothing if the key is absent."""
        bucket = self._bucket(key)
        kept = [pair for pair in bucket if pair[0] != key]
        self._count -= len(bucket) - len(kept)
        bucket[:] = kept

    @property
    def load_factor(self) -> float:
        """Number of entries divided by the number of buckets."""
        return self._count / len(self._buckets)

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def dump(self) -> str:
        """Describe every bucket and its chain, one line per bucket."""
        return "\n".join(
            f"{index}:" + "".join(f" -> ({key}, {value})" for key, value in bucket)
            for index, bucket in enumerate(self._buckets)
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Store one entry and print it back."""
    table: HashTable[str, int] = HashTable()
    table.put("age", 5)
    print(table.get("age"))
    return 0