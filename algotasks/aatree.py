"""AA tree: a self-balancing binary search tree of integers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


@dataclass
class _Node:
    data: int
    level: int = 1
    left: _Node | None = None
    right: _Node | None = None


def _skew(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    child = node.left
    if child is not None and child.level == node.level:
        node.left = child.right
        child.right = node
        return child
    return node


def _split(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    child = node.right
    if child is not None and child.right is not None and child.right.level == node.level:
        child.level += 1
        node.right = child.left
        child.left = node
        return child
    return node


def _minimum(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _decrease_level(node: _Node) -> _Node:
    left_level = node.left.level if node.left is not None else 0
    right_level = node.right.level if node.right is not None else 0
    correct = min(left_level, right_level) + 1
    if correct < node.level:
        node.level = correct
        if node.right is not None and correct < node.right.level:
            node.right.level = correct
    return node


def _insert(node: _Node | None, x: int) -> _Node:
    if node is None:
        return _Node(x)
    if x < node.data:
        node.left = _insert(node.left, x)
    elif x > node.data:
        node.right = _insert(node.right, x)
    else:
        return node
    return _split(_skew(node))


def _erase(node: _Node | None, x: int) -> _Node | None:
    if node is None:
        return None
    if x < node.data:
        node.left = _erase(node.left, x)
    elif x > node.data:
        node.right = _erase(node.right, x)
    else:
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = _minimum(node.right)
        node.data = successor.data
        node.right = _erase(node.right, successor.data)

    node = _skew(_decrease_level(node))
    if node.right is not None:
        node.right = _skew(node.right)
        if node.right.right is not None:
            node.right.right = _skew(node.right.right)
    node = _split(node)
    if node.right is not None:
        node.right = _split(node.right)
    return node


class AATree:
    """A set of integers kept in an AA tree."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def insert(self, x: int) -> None:
        """Add x; duplicates are ignored."""
        self._root = _insert(self._root, x)

    def erase(self, x: int) -> None:
        """Remove x if present."""
        self._root = _erase(self._root, x)

    def balance(self) -> int:
        """Level of the root, or 0 for an empty tree."""
        return 0 if self._root is None else self._root.level

    def __contains__(self, x: object) -> bool:
        node = self._root
        while node is not None:
            if x < node.data:
                node = node.left
            elif x > node.data:
                node = node.right
            else:
                return True
        return False


def process_commands(lines: Iterable[str]) -> list[str]:
    """Run a command script ("N" then N lines of "+ x", "- x", "? x") and return the output lines."""
    tokens = (token for line in lines for token in line.split())
    try:
        count = int(next(tokens))
        commands = [(next(tokens), int(next(tokens))) for _ in range(count)]
    except StopIteration:
        raise ValueError("unexpected end of command input") from None

    tree = AATree()
    output = []
    for action, x in commands:
        if action == "+":
            tree.insert(x)
            output.append(str(tree.balance()))
        elif action == "-":
            tree.erase(x)
            output.append(str(tree.balance()))
        elif action == "?":
            output.append("true" if x in tree else "false")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aatree", description="Run AA tree commands.")
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)
    try:
        with args.input.open() as source:
            result = process_commands(source)
        args.output.write_text("".join(f"{line}\n" for line in result))
    except OSError as exc:
        print(f"aatree: {exc}", file=sys.stderr)
        return 1
    return 0