"""Order statistics of a generated sequence by quickselect."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator, Sequence

_INT32 = 2**32
_INT32_HALF = 2**31


def _to_int32(value: int) -> int:
    return (value + _INT32_HALF) % _INT32 - _INT32_HALF


def generate_sequence(a: int, b: int, c: int, x0: int, x1: int, n: int) -> Iterator[int]:
    """Yield n terms of x[i] = a*x[i-2] + b*x[i-1] + c in 32-bit two's-complement arithmetic."""
    if n <= 0:
        return
    yield x0
    if n == 1:
        return
    yield x1
    previous, current = x0, x1
    for _ in range(n - 2):
        previous, current = current, _to_int32(a * previous + b * current + c)
        yield current


def _select(data: list[int], left: int, right: int, k: int) -> None:
    while left <= right:
        pivot = data[left + (right - left) // 2]
        i, j = left, right
        while i <= j:
            while data[i] < pivot:
                i += 1
            while data[j] > pivot:
                j -= 1
            if i <= j:
                data[i], data[j] = data[j], data[i]
                i += 1
                j -= 1
        if k <= j:
            right = j
        elif k >= i:
            left = i
        else:
            return


def kth_range(values: Sequence[int], begin: int, end: int) -> list[int]:
    """Return the begin-th to end-th smallest values (1-based, inclusive) in order."""
    if not 1 <= begin <= end <= len(values):
        raise ValueError(f"invalid range {begin}..{end} for {len(values)} values")
    data = list(values)
    _select(data, 0, len(data) - 1, end - 1)
    _select(data, 0, end - 1, begin - 1)
    return sorted(data[begin - 1:end])


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kth", description="Print a range of order statistics.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        tokens = args.input.read_text().split()
        if len(tokens) < 8:
            raise ValueError("expected n, begin, end, A, B, C, x0 and x1")
        n, begin, end, a, b, c, x0, x1 = (int(token) for token in tokens[:8])
        # The result goes to standard output; the output file is only created.
        args.output.write_text("")
        result = kth_range(list(generate_sequence(a, b, c, x0, x1, n)), begin, end)
    except (OSError, ValueError) as exc:
        print(f"kth: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(" ".join(map(str, result)))
    return 0