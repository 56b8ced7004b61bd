"""Comparison sorts that work in place, and a timing comparison between them."""

from __future__ import annotations

import random
import time
from collections.abc import MutableSequence
from heapq import merge
from typing import Any, NamedTuple, Optional

HYBRID_THRESHOLD = 10

_rng = random.Random()


def bubble_sort(array: MutableSequence[Any]) -> None:
    """Sort array ascending in place with bubble sort."""
    unsorted_end = len(array) - 1
    swapped = True
    while swapped and unsorted_end > 0:
        swapped = False
        for index in range(unsorted_end):
            if array[index + 1] < array[index]:
                array[index], array[index + 1] = array[index + 1], array[index]
                swapped = True
        unsorted_end -= 1


def selection_sort(array: MutableSequence[Any]) -> None:
    """Sort array ascending in place with selection sort."""
    size = len(array)
    for position in range(size - 1):
        smallest = min(range(position, size), key=array.__getitem__)
        if smallest != position:
            array[position], array[smallest] = array[smallest], array[position]


def _resolve_range(
    array: MutableSequence[Any], start: int, end: Optional[int]
) -> tuple[int, int]:
    """Return (start, end) with end defaulting to the last index; check bounds."""
    if end is None:
        end = len(array) - 1
    if end < start:
        return start, end
    if start < 0 or end >= len(array):
        raise IndexError(
            f"range {start}..{end} out of bounds for {len(array)} items"
        )
    return start, end


def _insertion_sort(array: MutableSequence[Any], start: int, end: int) -> None:
    for position in range(start + 1, end + 1):
        value = array[position]
        hole = position
        while hole > start and value < array[hole - 1]:
            array[hole] = array[hole - 1]
            hole -= 1
        array[hole] = value


def insertion_sort(
    array: MutableSequence[Any], start: int = 0, end: Optional[int] = None
) -> None:
    """Sort array[start..end] (inclusive) ascending in place with insertion sort."""
    start, end = _resolve_range(array, start, end)
    _insertion_sort(array, start, end)


def _merge_halves(array: MutableSequence[Any], start: int, middle: int, end: int) -> None:
    left = array[start : middle + 1]
    right = array[middle + 1 : end + 1]
    array[start : end + 1] = list(merge(left, right))


def _merge_sort(array: MutableSequence[Any], start: int, end: int, threshold: int) -> None:
    if end - start + 1 < threshold:
        _insertion_sort(array, start, end)
        return
    if start >= end:
        return
    middle = (start + end) // 2
    _merge_sort(array, start, middle, threshold)
    _merge_sort(array, middle + 1, end, threshold)
    _merge_halves(array, start, middle, end)


def merge_sort(
    array: MutableSequence[Any], start: int = 0, end: Optional[int] = None
) -> None:
    """Sort array[start..end] (inclusive) ascending in place with merge sort."""
    start, end = _resolve_range(array, start, end)
    _merge_sort(array, start, end, threshold=0)


def _partition(array: MutableSequence[Any], start: int, end: int) -> tuple[int, int]:
    """Three-way partition around a random pivot; return the bounds of the equal run."""
    pivot_index = _rng.randint(start, end)
    pivot = array[pivot_index]
    lower, current, upper = start, start, end
    while current <= upper:
        value = array[current]
        if value < pivot:
            array[lower], array[current] = array[current], array[lower]
            lower += 1
            current += 1
        elif pivot < value:
            array[current], array[upper] = array[upper], array[current]
            upper -= 1
        else:
            current += 1
    return lower, upper


def quick_sort(
    array: MutableSequence[Any], start: int = 0, end: Optional[int] = None
) -> None:
    """Sort array[start..end] (inclusive) ascending in place with random-pivot quicksort."""
    start, end = _resolve_range(array, start, end)
    while start < end:
        low, high = _partition(array, start, end)
        # Recurse into the smaller side and loop on the larger to bound the depth.
        if low - start < end - high:
            quick_sort(array, start, low - 1)
            start = high + 1
        else:
            quick_sort(array, high + 1, end)
            end = low - 1


def hybrid_sort(
    array: MutableSequence[Any], start: int = 0, end: Optional[int] = None
) -> None:
    """Merge sort array[start..end] until runs are under ten items, then insertion sort."""
    start, end = _resolve_range(array, start, end)
    _merge_sort(array, start, end, threshold=HYBRID_THRESHOLD)


class SortTimes(NamedTuple):
    """Microseconds each sort took on the same random data."""

    merge: int
    quick: int
    insertion: int
    hybrid: int
    builtin: int


def _time_microseconds(action: Any, data: list[int]) -> int:
    start = time.perf_counter_ns()
    action(data)
    return (time.perf_counter_ns() - start) // 1000


def sort_speed(length: int) -> SortTimes:
    """Time merge, quick, insertion, hybrid and built-in sort on a random array."""
    if length < 0:
        raise ValueError("length must not be negative")
    data = [random.randint(0, length) for _ in range(length)]
    return SortTimes(
        merge=_time_microseconds(merge_sort, list(data)),
        quick=_time_microseconds(quick_sort, list(data)),
        insertion=_time_microseconds(insertion_sort, list(data)),
        hybrid=_time_microseconds(hybrid_sort, list(data)),
        builtin=_time_microseconds(list.sort, list(data)),
    )