"""Quick sort variants: first-element pivot, median of three, and iterative."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from functools import cmp_to_key
from typing import Any

_SAMPLE = (6, 4, 2, 3, 1, 5)
_ITERATIVE_SAMPLE = (6, 4, 2, 3, 1, 5, 80, 100, 0)


def _bounds(data: MutableSequence[Any], left: int, right: int | None) -> int:
    return len(data) - 1 if right is None else right


def partition(data: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``data[left:right+1]`` around its first element.

    Returns the pivot's final index; smaller items end up before it and
    larger ones after it.
    """
    first = left
    pivot = data[first]
    left += 1

    while left <= right:
        while data[left] <= pivot and left < right:
            left += 1
        while left <= right and data[right] >= pivot:
            right -= 1
        if left < right:
            data[left], data[right] = data[right], data[left]
        else:
            break

    data[first], data[right] = data[right], data[first]
    return right


def quick_sort(data: MutableSequence[Any], left: int = 0, right: int | None = None) -> None:
    """Sort ``data[left:right+1]`` in place using first-element pivots."""
    right = _bounds(data, left, right)
    if left < right:
        index = partition(data, left, right)
        quick_sort(data, left, index - 1)
        quick_sort(data, index + 1, right)


def partition_median_of_three(data: MutableSequence[Any], left: int, right: int) -> int:
    """Partition ``data[left:right+1]`` around the median of its first three items.

    The range must hold at least three items. Returns the pivot's final index.
    """
    if right - left < 2:
        raise ValueError("median-of-three partition needs at least three items")

    a, b, c = data[left], data[left + 1], data[left + 2]
    if a <= b <= c or c <= b <= a:
        pivot_index = left + 1
    elif b <= a <= c or c <= a <= b:
        pivot_index = left
    else:
        pivot_index = left + 2

    data[left], data[pivot_index] = data[pivot_index], data[left]
    pivot = data[left]

    i = left + 1
    j = right
    while i <= j:
        while i <= j and data[i] <= pivot:
            i += 1
        while i <= j and data[j] >= pivot:
            j -= 1
        if i < j:
            data[i], data[j] = data[j], data[i]

    data[left], data[j] = data[j], data[left]
    return j


def _sort_short(data: MutableSequence[Any], left: int, right: int) -> bool:
    """Handle ranges too short for a median-of-three partition."""
    length = right - left + 1
    if length <= 1:
        return True
    if length == 2:
        if data[left] > data[right]:
            data[left], data[right] = data[right], data[left]
        return True
    return False


def quick_sort_median_of_three(
    data: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Sort ``data[left:right+1]`` in place using median-of-three pivots."""
    right = _bounds(data, left, right)
    if _sort_short(data, left, right):
        return
    index = partition_median_of_three(data, left, right)
    quick_sort_median_of_three(data, left, index - 1)
    quick_sort_median_of_three(data, index + 1, right)


def quick_sort_iterative(
    data: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Sort ``data[left:right+1]`` in place with an explicit stack of ranges.

    The larger side of each partition is pushed first so the smaller one is
    handled next, keeping the stack shallow.
    """
    right = _bounds(data, left, right)
    if left >= right:
        return

    pending: list[tuple[int, int]] = [(left, right)]
    while pending:
        low, high = pending.pop()
        if _sort_short(data, low, high):
            continue

        index = partition_median_of_three(data, low, high)
        left_part = (low, index - 1)
        right_part = (index + 1, high)
        if index - low > high - index:
            ordered = (left_part, right_part)
        else:
            ordered = (right_part, left_part)
        for start, end in ordered:
            if start < end:
                pending.append((start, end))


def compare_ascending(a: Any, b: Any) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def compare_descending(a: Any, b: Any) -> int:
    """Return the opposite of :func:`compare_ascending`."""
    if a > b:
        return -1
    if a < b:
        return 1
    return 0


def _format_values(values: Any) -> str:
    return "".join(f"{value} " for value in values)


def main(argv: list[str] | None = None) -> int:
    """Sort the given integers (or built-in samples) with each variant."""
    if argv is None:
        argv = sys.argv[1:]
    numbers = [int(word) for word in argv] if argv else None

    data = list(numbers if numbers is not None else _SAMPLE)
    quick_sort(data)
    print(_format_values(data))

    data = list(numbers if numbers is not None else _SAMPLE)
    data.sort(key=cmp_to_key(compare_descending))
    print(_format_values(data))

    data = list(numbers if numbers is not None else _SAMPLE)
    quick_sort_median_of_three(data)
    print(_format_values(data))

    data = list(numbers if numbers is not None else _ITERATIVE_SAMPLE)
    quick_sort_iterative(data)
    print(_format_values(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())