"""Compensated floating-point summation."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable


def fast_two_sum(a: float, b: float) -> tuple[float, float]:
    """Return the rounded sum of a and b and its rounding error."""
    s = a + b
    bs = s - a
    as_ = s - bs
    error = (a - as_) + (b - bs)
    return s, error


def accurate_sum(numbers: Iterable[float]) -> float:
    """Sum numbers while accumulating the rounding errors separately."""
    total = 0.0
    errors = 0.0
    for number in numbers:
        total, error = fast_two_sum(total, number)
        errors += error
    return total + errors


def format_result(value: float) -> str:
    """Scientific notation with 17 digits after the point."""
    return f"{value:.17e}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="simplesum", description="Sum numbers accurately.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        tokens = args.input.read_text().split()
    except OSError as exc:
        print(f"simplesum: {exc}", file=sys.stderr)
        return 1
    if not tokens:
        print("simplesum: missing count", file=sys.stderr)
        return 1
    count = int(tokens[0])
    numbers = [float(token) for token in tokens[1:count + 1]]
    if len(numbers) < count:
        print("simplesum: fewer numbers than announced", file=sys.stderr)
        return 1
    print(format_result(accurate_sum(numbers)))
    return 0