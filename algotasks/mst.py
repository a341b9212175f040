"""Minimum spanning tree weight with Kruskal's algorithm."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Iterable


class DisjointSet:
    """Union-find over 0..size-1 with union by size and path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of x's set."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding x and y."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return
        if self._size[rx] < self._size[ry]:
            rx, ry = ry, rx
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]


@dataclass(frozen=True)
class Edge:
    begin: int
    end: int
    weight: int


def parse_graph(text: str) -> tuple[int, list[Edge]]:
    """Parse "V E" followed by E lines "begin end weight"."""
    tokens = iter(text.split())
    try:
        vertex_count = int(next(tokens))
        edge_count = int(next(tokens))
        edges = [
            Edge(int(next(tokens)), int(next(tokens)), int(next(tokens)))
            for _ in range(edge_count)
        ]
    except StopIteration:
        raise ValueError("unexpected end of graph input") from None
    return vertex_count, edges


def minimum_spanning_tree_weight(vertex_count: int, edges: Iterable[Edge]) -> int:
    """Total weight of a minimum spanning forest."""
    components = DisjointSet(vertex_count)
    total = 0
    for edge in sorted(edges, key=attrgetter("weight")):
        if components.find(edge.begin) != components.find(edge.end):
            components.union(edge.begin, edge.end)
            total += edge.weight
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="mst", description="Weight of a minimum spanning tree.")
    parser.add_argument("input", type=Path)
    args = parser.parse_args(argv)
    try:
        text = args.input.read_text()
    except OSError as exc:
        print(f"mst: {exc}", file=sys.stderr)
        return 1
    print(minimum_spanning_tree_weight(*parse_graph(text)))
    return 0