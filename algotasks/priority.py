"""Min-priority queue with decrease-key, indexed by an open-addressing map."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_CAPACITY = 100_000

_MULTIPLIER = math.sqrt(5)
_WORD = 2**64


@dataclass
class _Entry:
    key: int
    value: int
    deleted: bool = False


class ProbingMap:
    """A fixed-capacity int-to-int map with linear probing; inserts into a full table are dropped."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._slots: list[_Entry | None] = [None] * size

    def _base_hash(self, key: int) -> int:
        scaled = key * _MULTIPLIER
        return math.trunc(self._size * (scaled - math.trunc(scaled)))

    def _probes(self, key: int) -> Iterator[int]:
        base = self._base_hash(key)
        # Probe offsets are reduced as unsigned 64-bit values.
        for step in range(self._size):
            yield ((base + step) % _WORD) % self._size

    def _locate(self, key: int) -> _Entry | None:
        for index in self._probes(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if not slot.deleted and slot.key == key:
                return slot
        return None

    def insert(self, key: int, value: int) -> None:
        """Store value under key unless key is found before a free slot."""
        for index in self._probes(key):
            slot = self._slots[index]
            if slot is None or slot.deleted:
                self._slots[index] = _Entry(key, value)
                return
            if slot.key == key:
                return

    def erase(self, key: int) -> None:
        """Remove key if present."""
        entry = self._locate(key)
        if entry is not None:
            entry.deleted = True

    def find(self, key: int) -> int | None:
        """Return the value stored under key, or None."""
        entry = self._locate(key)
        return None if entry is None else entry.value

    def change(self, key: int, value: int) -> None:
        """Replace the value stored under key, if key is present."""
        entry = self._locate(key)
        if entry is not None:
            entry.value = value


class IndexedHeap:
    """A binary min-heap of bounded size that can lower an item found by value."""

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._capacity = size
        self._data: list[int] = []
        self._positions = ProbingMap(size)

    def __len__(self) -> int:
        return len(self._data)

    def _swap(self, i: int, j: int) -> None:
        data = self._data
        self._positions.change(data[i], j)
        self._positions.change(data[j], i)
        data[i], data[j] = data[j], data[i]

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0 and data[i] < data[(i - 1) // 2]:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        while 2 * i + 1 < len(data):
            child = 2 * i + 1
            if child + 1 < len(data) and data[child + 1] < data[child]:
                child += 1
            if data[i] <= data[child]:
                break
            self._swap(i, child)
            i = child

    def insert(self, x: int) -> None:
        """Add x; raises IndexError when the heap is full."""
        if len(self._data) >= self._capacity:
            raise IndexError("heap is full")
        self._data.append(x)
        position = len(self._data) - 1
        self._positions.insert(x, position)
        self._sift_up(position)

    def extract_min(self) -> int:
        """Remove and return the smallest item; raises IndexError when empty."""
        if not self._data:
            raise IndexError("heap is empty")
        smallest = self._data[0]
        self._positions.erase(smallest)
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._positions.change(last, 0)
            self._sift_down(0)
        return smallest

    def change(self, current: int, new: int) -> None:
        """Replace the item equal to current by new and move it up as needed."""
        index = self._positions.find(current)
        if index is None or index >= len(self._data):
            return
        self._data[index] = new
        self._positions.erase(current)
        self._positions.insert(new, index)
        self._sift_up(index)


def _arguments(words: list[str], count: int, number: int) -> list[int]:
    if len(words) <= count:
        raise ValueError(f"line {number}: {words[0]} needs {count} argument(s)")
    return [int(word) for word in words[1:count + 1]]


def process_commands(lines: Iterable[str]) -> list[str]:
    """Run "push x", "extract-min" and "decrease-key line x" commands; return the output lines.

    decrease-key refers to the value pushed on the given (1-based) line; extract-min
    on an empty queue answers "*".
    """
    heap = IndexedHeap()
    pushed: dict[int, int] = {}
    output: list[str] = []
    for number, line in enumerate(lines, start=1):
        words = line.split()
        if not words:
            continue
        command = words[0]
        if command == "push":
            (x,) = _arguments(words, 1, number)
            heap.insert(x)
            pushed[number] = x
        elif command == "extract-min":
            try:
                output.append(str(heap.extract_min()))
            except IndexError:
                output.append("*")
        elif command == "decrease-key":
            line_number, x = _arguments(words, 2, number)
            heap.change(pushed.get(line_number, 0), x)
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="priorityqueue", description="Run priority queue commands.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        with args.input.open() as source:
            result = process_commands(source)
        args.output.write_text("".join(f"{line}\n" for line in result))
    except (OSError, ValueError) as exc:
        print(f"priorityqueue: {exc}", file=sys.stderr)
        return 1
    return 0