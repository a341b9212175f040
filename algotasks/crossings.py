"""Counting crossings between segments joining two parallel lines."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def _merge_runs(left: list[T], right: list[T], key: Callable[[T], int]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Ties take the right-hand element first.
        if key(left[i]) < key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _bottom_up_sort(items: Sequence[T], key: Callable[[T], int]) -> list[T]:
    result = list(items)
    step = 1
    while step < len(result):
        merged: list[T] = []
        for start in range(0, len(result), 2 * step):
            left = result[start:start + step]
            right = result[start + step:start + 2 * step]
            merged.extend(_merge_runs(left, right, key))
        result = merged
        step *= 2
    return result


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) < 2:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    count = left_count + right_count
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            count += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, count


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs i < j with values[i] >= values[j]."""
    return _sort_and_count(list(values))[1]


def count_crossings(segments: Sequence[tuple[int, int]]) -> int:
    """Count crossing pairs among segments given as (x1, x2) end points."""
    ordered = _bottom_up_sort(segments, key=lambda segment: segment[0])
    return count_inversions([x2 for _, x2 in ordered])


def parse_segments(text: str) -> list[tuple[int, int]]:
    """Parse "N" followed by N pairs "x1 x2"."""
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        return [(int(next(tokens)), int(next(tokens))) for _ in range(count)]
    except StopIteration:
        raise ValueError("unexpected end of segment input") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="crossings", description="Count segment crossings.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError as exc:
        print(f"crossings: {exc}", file=sys.stderr)
        return 1
    print(count_crossings(parse_segments(text)))
    return 0