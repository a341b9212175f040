"""Checking whether a set of node descriptions forms a valid B-tree."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from algotasks.avltree import AVLTree

_SEPARATORS = re.compile(r"0x|[:() ]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True, order=True)
class BTreeNode:
    """A B-tree node description; nodes are identified and ordered by id."""

    id: int
    is_leaf: bool = field(default=False, compare=False)
    keys: tuple[int, ...] = field(default=(), compare=False)
    children: tuple[int, ...] = field(default=(), compare=False)


def _tokens(line: str) -> list[str]:
    return [token for token in _SEPARATORS.split(line.rstrip("\r\n")) if token]


def _node_from_tokens(tokens: list[str]) -> BTreeNode:
    words = iter(tokens)
    try:
        is_leaf = next(words) == "leaf"
        node_id = _atoi(next(words))
        keys = tuple(_atoi(next(words)) for _ in range(max(_atoi(next(words)), 0)))
        children: tuple[int, ...] = ()
        if not is_leaf:
            children = tuple(_atoi(next(words)) for _ in range(max(_atoi(next(words)), 0)))
    except StopIteration:
        raise ValueError(f"incomplete node description: {' '.join(tokens)!r}") from None
    return BTreeNode(node_id, is_leaf, keys, children)


def parse_node(line: str) -> BTreeNode:
    """Parse a line such as "branch 0x1: (2: 10 20) (3: 0x2 0x3 0x4)"."""
    return _node_from_tokens(_tokens(line))


def is_btree(nodes: Iterable[BTreeNode], t: int, root: int) -> bool:
    """Check the B-tree properties of minimum degree t starting from node root."""
    tree: AVLTree[BTreeNode] = AVLTree()
    for node in nodes:
        tree.insert(node)

    start = tree.find(BTreeNode(root))
    if start is None:
        return False

    leaf_depth: int | None = None
    visited: set[int] = set()

    def check(node: BTreeNode, depth: int, low: float, high: float) -> bool:
        nonlocal leaf_depth
        if node.id in visited:
            return False
        visited.add(node.id)

        count = len(node.keys)
        if (node.id == root and count < 1) or (node.id != root and count < t - 1) or count > 2 * t - 1:
            return False
        if any(later < earlier for earlier, later in zip(node.keys, node.keys[1:])):
            return False
        if node.keys and (node.keys[0] < low or node.keys[-1] > high):
            return False

        if node.is_leaf:
            if leaf_depth is None:
                leaf_depth = depth
            return leaf_depth == depth

        if len(node.children) != count + 1:
            return False
        for index, child_id in enumerate(node.children):
            child = tree.find(BTreeNode(child_id))
            if child is None:
                return False
            child_low = node.keys[index - 1] if index > 0 else low
            child_high = node.keys[index] if index < count else high
            if not check(child, depth + 1, child_low, child_high):
                return False
        return True

    return check(start, 0, -math.inf, math.inf)


def check_text(text: str) -> bool:
    """Check a description "N t root" followed by N node lines."""
    lines = text.splitlines()
    header = lines[0].split() if lines else []
    if len(header) < 3:
        raise ValueError("missing header")
    count, t, root = (int(token) for token in header[:3])
    body = lines[1:count + 1]
    if len(body) < count:
        raise ValueError(f"expected {count} node lines, got {len(body)}")

    limit = 4 * t + 4
    nodes = []
    for line in body:
        tokens = _tokens(line)
        if len(tokens) > limit:
            return False
        nodes.append(_node_from_tokens(tokens))
    return is_btree(nodes, t, root)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="isbtree", description="Check a B-tree description.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
        result = check_text(text)
    except (OSError, ValueError) as exc:
        print(f"isbtree: {exc}", file=sys.stderr)
        return 1
    print("yes" if result else "no")
    return 0