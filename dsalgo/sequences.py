"""Index-based collections: a growable array and a singly linked list."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class Collection(ABC, Generic[T]):
    """Common interface of positional collections."""

    @abstractmethod
    def find(self, item: T) -> int:
        """Return the index of the first occurrence of item, or -1."""

    def __contains__(self, item: object) -> bool:
        return self.find(item) != -1  # type: ignore[arg-type]

    @abstractmethod
    def get(self, index: int) -> T:
        """Return the item at index; raise IndexError if out of range."""

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    @abstractmethod
    def insert_at_beginning(self, item: T) -> None:
        """Insert item before every other item."""

    @abstractmethod
    def insert_at_end(self, item: T) -> None:
        """Insert item after every other item."""

    @abstractmethod
    def insert(self, item: T, index: int) -> None:
        """Insert item so that it ends up at index."""

    @abstractmethod
    def remove_at_beginning(self) -> None:
        """Remove the first item."""

    @abstractmethod
    def remove_at_end(self) -> None:
        """Remove the last item."""

    @abstractmethod
    def remove_at(self, index: int) -> None:
        """Remove the item at index."""

    def remove(self, item: T) -> None:
        """Remove the first occurrence of item, if there is one."""
        location = self.find(item)
        if location != -1:
            self.remove_at(location)

    @abstractmethod
    def __len__(self) -> int:
        """Number of items held."""

    def _check_index(self, index: int, *, allow_end: bool = False) -> None:
        limit = len(self) if allow_end else len(self) - 1
        if not 0 <= index <= limit:
            raise IndexError(f"index {index} out of range for {len(self)} items")

    def _check_not_empty(self) -> None:
        if len(self) == 0:
            raise IndexError(f"remove from empty {type(self).__name__}")


class DynamicArray(Collection[T]):
    """An array that doubles its capacity whenever it runs out of room."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        """Number of items the array can hold before it grows."""
        return self._capacity

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, discarding items that no longer fit."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        del self._items[capacity:]

    def _ensure_room(self) -> None:
        if len(self._items) >= self._capacity:
            self.set_capacity(max(self._capacity * GROWTH_FACTOR, 1))

    def find(self, item: T) -> int:
        try:
            return self._items.index(item)
        except ValueError:
            return -1

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def insert_at_beginning(self, item: T) -> None:
        self.insert(item, 0)

    def insert_at_end(self, item: T) -> None:
        self.insert(item, len(self._items))

    def insert(self, item: T, index: int) -> None:
        self._check_index(index, allow_end=True)
        self._ensure_room()
        self._items.insert(index, item)

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        del self._items[0]

    def remove_at_end(self) -> None:
        self._check_not_empty()
        self._items.pop()

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedList(Collection[T]):
    """A singly linked list that keeps track of its head and tail."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[_Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def _node_at(self, index: int) -> _Node[T]:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range for {self._count} items")

    def find(self, item: T) -> int:
        for index, value in enumerate(self):
            if value == item:
                return index
        return -1

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).data

    def insert_at_beginning(self, item: T) -> None:
        self._head = _Node(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def insert_at_end(self, item: T) -> None:
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._count += 1

    def insert(self, item: T, index: int) -> None:
        self._check_index(index, allow_end=True)
        if index == 0:
            self.insert_at_beginning(item)
        elif index == self._count:
            self.insert_at_end(item)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
            self._count += 1

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        assert self._head is not None
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._count -= 1

    def remove_at_end(self) -> None:
        self._check_not_empty()
        if self._count == 1:
            self._head = self._tail = None
        else:
            before = self._node_at(self._count - 2)
            before.next = None
            self._tail = before
        self._count -= 1

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        if index == 0:
            self.remove_at_beginning()
        elif index == self._count - 1:
            self.remove_at_end()
        else:
            before = self._node_at(index - 1)
            assert before.next is not None
            before.next = before.next.next
            self._count -= 1


def search_speed(length: int, num_tests: int) -> tuple[int, int]:
    """Average nanoseconds per membership test for (LinkedList, DynamicArray)."""
    if length < 0:
        raise ValueError("length must not be negative")
    if num_tests < 1:
        raise ValueError("num_tests must be at least 1")
    linked: LinkedList[int] = LinkedList()
    array: DynamicArray[int] = DynamicArray()
    for _ in range(length):
        number = random.randint(0, length)
        linked.insert_at_end(number)
        array.insert_at_end(number)
    tests = [random.randint(0, length) for _ in range(num_tests)]

    start = time.perf_counter_ns()
    for value in tests:
        _ = value in linked
    linked_speed = (time.perf_counter_ns() - start) // num_tests

    start = time.perf_counter_ns()
    for value in tests:
        _ = value in array
    array_speed = (time.perf_counter_ns() - start) // num_tests

    return linked_speed, array_speed