"""Order statistics of a long generated sequence using a bounded heap."""

from __future__ import annotations

import argparse
import heapq
import sys
from pathlib import Path

from algotasks.quickselect import generate_sequence


def smallest_range(
    a: int, b: int, c: int, x0: int, x1: int, n: int, begin: int, end: int
) -> list[int]:
    """Return the begin-th to end-th smallest of n generated terms, keeping only end of them."""
    if not 1 <= begin <= end <= n:
        raise ValueError(f"invalid range {begin}..{end} for {n} values")
    smallest = heapq.nsmallest(end, generate_sequence(a, b, c, x0, x1, n))
    return smallest[begin - 1:]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kth", description="Write a range of order statistics.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        tokens = args.input.read_text().split()
        if len(tokens) < 8:
            raise ValueError("expected n, begin, end, A, B, C, x0 and x1")
        n, begin, end, a, b, c, x0, x1 = (int(token) for token in tokens[:8])
        result = smallest_range(a, b, c, x0, x1, n, begin, end)
        args.output.write_text(" ".join(map(str, result)))
    except (OSError, ValueError) as exc:
        print(f"kth: {exc}", file=sys.stderr)
        return 1
    return 0