"""Number of ways to write n as a sum of positive integers, modulo m."""

from __future__ import annotations

import argparse
import sys


def num_of_solutions(n: int, mod: int) -> int:
    """Count the partitions of n, reduced modulo mod (p(0) is 1)."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for total in range(part, n + 1):
            ways[total] = (ways[total] + ways[total - part]) % mod
    return ways[n]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="numofsolutions",
        description="Read n and a modulus from standard input and print the partition count.",
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 2:
        print("numofsolutions: expected n and a modulus", file=sys.stderr)
        return 1
    n, mod = int(tokens[0]), int(tokens[1])
    print(num_of_solutions(n, mod))
    return 0