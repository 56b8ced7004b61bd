"""Sequential collections: a first-in first-out queue and a last-in first-out stack."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class SequentialCollection(ABC, Generic[T]):
    """A collection that hands out its items one at a time in a fixed order."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> None:
        """Put a new item into the collection."""
        self._items.append(item)

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the next item; raise IndexError if empty."""

    @abstractmethod
    def peek(self) -> T:
        """Return the next item without removing it; raise IndexError if empty."""

    def remove(self, item: T) -> None:
        """Remove every occurrence of item."""
        self._items = deque(value for value in self._items if value != item)

    def __len__(self) -> int:
        return len(self._items)

    def dump(self) -> str:
        """Describe the contents from front to back."""
        return "".join(f" -> ({value})" for value in self._items)

    def _check_not_empty(self) -> None:
        if not self._items:
            raise IndexError(f"{type(self).__name__} is empty")


class Queue(SequentialCollection[T]):
    """Hands out items in the order they were pushed."""

    def pop(self) -> T:
        self._check_not_empty()
        return self._items.popleft()

    def peek(self) -> T:
        self._check_not_empty()
        return self._items[0]


class Stack(SequentialCollection[T]):
    """Hands out the most recently pushed item first."""

    def pop(self) -> T:
        self._check_not_empty()
        return self._items.pop()

    def peek(self) -> T:
        self._check_not_empty()
        return self._items[-1]