"""LSD radix sort of words stored column by column."""

from __future__ import annotations

import argparse
import sys
from operator import itemgetter
from pathlib import Path
from typing import Iterable, Sequence


def load_words(rows: Iterable[str], count: int, length: int) -> list[str]:
    """Rebuild count words of the given length from rows holding one position each."""
    columns = []
    for row in rows:
        if len(columns) == length:
            break
        if len(row) < count:
            raise ValueError(f"row {row!r} is shorter than {count} characters")
        columns.append(row[:count])
    if len(columns) < length:
        raise ValueError(f"expected {length} rows, got {len(columns)}")
    return ["".join(letters) for letters in zip(*columns)] if length else [""] * count


def lsd_sort(words: Sequence[str], k: int) -> list[str]:
    """Stably sort words by their last k characters, least significant first."""
    result = list(words)
    if len(result) < 2 or k <= 0:
        return result
    length = len(result[0])
    if k > length:
        raise ValueError("k exceeds the word length")
    for position in reversed(range(length - k, length)):
        result.sort(key=itemgetter(position))
    return result


def first_letters(words: Iterable[str]) -> str:
    """Concatenate the first letter of every word."""
    return "".join(word[0] for word in words)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="radixsort", description="Partial LSD radix sort.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        tokens = args.input.read_text().split()
        if len(tokens) < 3:
            raise ValueError("missing header")
        count, length, k = (int(token) for token in tokens[:3])
        words = load_words(tokens[3:], count, length)
        args.output.write_text(first_letters(lsd_sort(words, k)))
    except (OSError, ValueError) as exc:
        print(f"radixsort: {exc}", file=sys.stderr)
        return 1
    return 0