"""A queue that reports the spread between its largest and smallest items."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


class MinMaxStack:
    """A stack that knows its maximum and minimum at all times."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int, int]] = []

    def push(self, x: int) -> None:
        if self._items:
            _, high, low = self._items[-1]
            self._items.append((x, max(x, high), min(x, low)))
        else:
            self._items.append((x, x, x))

    def _last(self) -> tuple[int, int, int]:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def pop(self) -> int:
        value = self._last()[0]
        self._items.pop()
        return value

    def top(self) -> int:
        return self._last()[0]

    def max(self) -> int:
        return self._last()[1]

    def min(self) -> int:
        return self._last()[2]

    def __len__(self) -> int:
        return len(self._items)


class MinMaxQueue:
    """A FIFO queue built from two min-max stacks."""

    def __init__(self) -> None:
        self._back = MinMaxStack()
        self._front = MinMaxStack()

    def push(self, x: int) -> None:
        self._back.push(x)

    def pop(self) -> int:
        if not len(self._front):
            while len(self._back):
                self._front.push(self._back.pop())
        if not len(self._front):
            raise IndexError("queue is empty")
        return self._front.pop()

    def __len__(self) -> int:
        return len(self._front) + len(self._back)

    def diff_max_min(self) -> int:
        """Largest item minus smallest item."""
        stacks = [stack for stack in (self._front, self._back) if len(stack)]
        if not stacks:
            raise IndexError("queue is empty")
        return max(stack.max() for stack in stacks) - min(stack.min() for stack in stacks)


def process_commands(text: str) -> list[str]:
    """Run "n" followed by n commands "+ x", "-", "?"; return the answers to "?"."""
    tokens = iter(text.split())
    queue = MinMaxQueue()
    output = []
    try:
        count = int(next(tokens))
        for _ in range(count):
            command = next(tokens)
            if command == "+":
                queue.push(int(next(tokens)))
            elif command == "-":
                queue.pop()
            elif command == "?":
                output.append(str(queue.diff_max_min()))
    except StopIteration:
        raise ValueError("unexpected end of command input") from None
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minmaxqueue", description="Run min-max queue commands.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        result = process_commands(args.input.read_text())
        args.output.write_text("".join(f"{line}\n" for line in result))
    except OSError as exc:
        print(f"minmaxqueue: {exc}", file=sys.stderr)
        return 1
    return 0