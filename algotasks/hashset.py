"""Open-addressing hash set of integers with linear probing."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from pathlib import Path

_MULTIPLIER = math.sqrt(5)
_WORD = 2**64


@dataclass
class _Slot:
    value: int
    deleted: bool = False


class HashSet:
    """A fixed-capacity set; insertions into a full table are dropped."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._slots: list[_Slot | None] = [None] * size

    def _base_hash(self, x: int) -> int:
        scaled = x * _MULTIPLIER
        return math.trunc(self._size * (scaled - math.trunc(scaled)))

    def _probes(self, x: int):
        base = self._base_hash(x)
        # Probe offsets are reduced as unsigned 64-bit values.
        for step in range(self._size):
            yield ((base + step) % _WORD) % self._size

    def add(self, x: int) -> None:
        """Insert x unless it is found before a free slot."""
        for index in self._probes(x):
            slot = self._slots[index]
            if slot is None or slot.deleted:
                self._slots[index] = _Slot(x)
                return
            if slot.value == x:
                return

    def discard(self, x: int) -> None:
        """Remove x if present."""
        index = self.find(x)
        if index is not None:
            self._slots[index].deleted = True

    def find(self, x: int) -> int | None:
        """Return the slot index holding x, or None."""
        for index in self._probes(x):
            slot = self._slots[index]
            if slot is None:
                return None
            if not slot.deleted and slot.value == x:
                return index
        return None

    def __contains__(self, x: object) -> bool:
        return self.find(x) is not None

    def render(self) -> str:
        """Show every slot, "-" for a free one, each followed by a space."""
        return "".join(
            "- " if slot is None or slot.deleted else f"{slot.value} " for slot in self._slots
        )


def process_commands(text: str) -> list[str]:
    """Run "N" followed by N commands "+ x", "- x", "? x"; return answers to queries."""
    tokens = iter(text.split())
    try:
        count = int(next(tokens))
        commands = [(next(tokens), int(next(tokens))) for _ in range(count)]
    except StopIteration:
        raise ValueError("unexpected end of command input") from None

    table = HashSet(count)
    output = []
    for action, x in commands:
        if action == "+":
            table.add(x)
        elif action == "-":
            table.discard(x)
        elif action == "?":
            output.append("true" if x in table else "false")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hash-hash", description="Run hash set commands.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        result = process_commands(args.input.read_text())
        args.output.write_text("".join(f"{line}\n" for line in result))
    except OSError as exc:
        print(f"hash-hash: {exc}", file=sys.stderr)
        return 1
    return 0