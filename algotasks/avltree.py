"""AVL tree: a balanced binary search tree that allows duplicate items."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("data", "left", "right", "height")

    def __init__(self, data: T) -> None:
        self.data = data
        self.left: _Node[T] | None = None
        self.right: _Node[T] | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    if factor < -1:
        if _balance_factor(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    return node


def _insert(node: _Node | None, x: Any) -> _Node:
    if node is None:
        return _Node(x)
    if x < node.data:
        node.left = _insert(node.left, x)
    else:
        node.right = _insert(node.right, x)
    return _rebalance(node)


def _pop_minimum(node: _Node) -> tuple[_Node | None, Any]:
    if node.left is None:
        return node.right, node.data
    node.left, data = _pop_minimum(node.left)
    return _rebalance(node), data


def _erase(node: _Node | None, x: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if x == node.data:
        if node.left is None:
            return node.right, True
        if node.right is None:
            return node.left, True
        node.right, node.data = _pop_minimum(node.right)
        return _rebalance(node), True
    if x < node.data:
        node.left, removed = _erase(node.left, x)
    else:
        node.right, removed = _erase(node.right, x)
    return (_rebalance(node) if removed else node), removed


class AVLTree(Generic[T]):
    """An ordered multiset kept in a height-balanced binary search tree."""

    def __init__(self) -> None:
        self._root: _Node[T] | None = None
        self._count = 0

    def insert(self, x: T) -> None:
        """Add x; equal items are kept after the ones already present."""
        self._root = _insert(self._root, x)
        self._count += 1

    def find(self, x: T) -> T | None:
        """Return the stored item equal to x, or None."""
        node = self._root
        while node is not None:
            if x == node.data:
                return node.data
            node = node.left if x < node.data else node.right
        return None

    def erase(self, x: T) -> None:
        """Remove one item equal to x, if there is one."""
        self._root, removed = _erase(self._root, x)
        if removed:
            self._count -= 1

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, x: object) -> bool:
        node = self._root
        while node is not None:
            if x == node.data:
                return True
            node = node.left if x < node.data else node.right
        return False

    def __iter__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __reversed__(self) -> Iterator[T]:
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.data
            node = node.left