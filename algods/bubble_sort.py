"""Bubble sort with optional tracing of each swap."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from typing import Any

_DEFAULT_DATA = (1, 2, 3, 4, 5, 6)


def _format_values(values: MutableSequence[Any]) -> str:
    return "".join(f"{value} " for value in values)


def bubble_sort(data: MutableSequence[Any], trace: bool = False) -> None:
    """Sort ``data`` in place in ascending order.

    Stops early once a pass makes no swap. With ``trace`` set, every swap
    is printed as ``swap (i,j): `` followed by the whole sequence.
    """
    length = len(data)
    for done in range(length - 1):
        swapped = False
        for j in range(length - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
                if trace:
                    print(f"swap ({j},{j + 1}): {_format_values(data)}")
        if not swapped:
            break


def main(argv: list[str] | None = None) -> int:
    """Sort the given integers (or a built-in sample) with tracing on."""
    if argv is None:
        argv = sys.argv[1:]
    data = [int(word) for word in argv] if argv else list(_DEFAULT_DATA)

    print(f"[초기] {_format_values(data)}")
    bubble_sort(data, trace=True)
    print(f"[결과] {_format_values(data)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())