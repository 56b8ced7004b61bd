"""Linear and binary search, and a comparison of their speed."""

from __future__ import annotations

import random
import time
from bisect import bisect_left
from collections.abc import Sequence
from typing import Any


def linear_search(array: Sequence[Any], key: Any) -> int:
    """Return the first index of key in array, or -1 if it is absent."""
    for index, value in enumerate(array):
        if value == key:
            return index
    return -1


def binary_search(array: Sequence[Any], key: Any) -> int:
    """Return the first index of key in a sorted array, or -1 if it is absent."""
    index = bisect_left(array, key)
    if index < len(array) and array[index] == key:
        return index
    return -1


def random_int_array(length: int, minimum: int, maximum: int) -> list[int]:
    """Return length random ints between minimum and maximum inclusive."""
    if length < 0:
        raise ValueError("length must not be negative")
    if minimum > maximum:
        raise ValueError("minimum must not exceed maximum")
    return [random.randint(minimum, maximum) for _ in range(length)]


def array_search_speed(length: int, num_tests: int) -> tuple[int, int]:
    """Average nanoseconds per search for (linear, binary) on a random array."""
    if num_tests < 1:
        raise ValueError("num_tests must be at least 1")
    array = random_int_array(length, 0, length)
    keys = random_int_array(num_tests, 0, length)

    start = time.perf_counter_ns()
    for key in keys:
        linear_search(array, key)
    linear_speed = (time.perf_counter_ns() - start) // num_tests

    array.sort()
    start = time.perf_counter_ns()
    for key in keys:
        binary_search(array, key)
    binary_speed = (time.perf_counter_ns() - start) // num_tests

    return linear_speed, binary_speed