"""Binary search over sorted sequences, iterative and recursive."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence
from typing import Any


def binary_search(arr: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = arr[mid]
        if value == target:
            return mid
        if target < value:
            right = mid - 1
        else:
            left = mid + 1
    return -1


def _search_range(arr: Sequence[Any], left: int, right: int, target: Any) -> int:
    if left > right:
        return -1
    mid = left + (right - left) // 2
    value = arr[mid]
    if value == target:
        return mid
    if value > target:
        return _search_range(arr, left, mid - 1, target)
    return _search_range(arr, mid + 1, right, target)


def binary_search_recursive(arr: Sequence[Any], target: Any) -> int:
    """Recursive binary search; same contract as :func:`binary_search`."""
    return _search_range(arr, 0, len(arr) - 1, target)


def _check(search, arr: Sequence[int], n: int) -> float:
    start = time.process_time()
    for i in range(2 * n):
        found = search(arr, i)
        expected = i if i < n else -1
        if found != expected:
            raise RuntimeError(
                f"search for {i} returned {found}, expected {expected}"
            )
    return time.process_time() - start


def main(argv: list[str] | None = None) -> int:
    """Time both searches over ``[0, n)`` looking up every value in ``[0, 2n)``."""
    parser = argparse.ArgumentParser(description="Benchmark binary search.")
    parser.add_argument("--size", type=int, default=1_000_000,
                        help="number of elements in the searched array")
    args = parser.parse_args(argv)
    n = args.size
    arr = list(range(n))

    elapsed = _check(binary_search, arr, n)
    print(f"Binary Search (Without Recursion): {elapsed} s")

    elapsed = _check(binary_search_recursive, arr, n)
    print(f"Binary Search (Recursion): {elapsed} s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())