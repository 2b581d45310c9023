"""A self-balancing binary search tree (AVL tree) that records balance factors."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO, Tuple


@dataclass
class _Node:
    value: Any
    balance: int = 0
    left: Optional[_Node] = None
    right: Optional[_Node] = None


def _height(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _balance_of(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_left(k1: _Node) -> _Node:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    return k2


def _rotate_right(k1: _Node) -> _Node:
    k2 = k1.left
    k1.left = k2.right
    k2.right = k1
    return k2


def _refresh_balances(node: Optional[_Node]) -> None:
    if node is not None:
        node.balance = _balance_of(node)
        _refresh_balances(node.left)
        _refresh_balances(node.right)


def _insert(node: Optional[_Node], item: Any) -> _Node:
    if node is None:
        node = _Node(item)
    elif item < node.value:
        node.left = _insert(node.left, item)
    else:
        node.right = _insert(node.right, item)

    node.balance = _balance_of(node)

    if node.balance > 1:
        if node.left.balance > 0:
            node = _rotate_right(node)
        else:
            node.left = _rotate_left(node.left)
            node = _rotate_right(node)
        _refresh_balances(node)
    elif node.balance < -1:
        if node.right.balance < 0:
            node = _rotate_left(node)
        else:
            node.right = _rotate_right(node.right)
            node = _rotate_left(node)
        _refresh_balances(node)

    return node


def _walk_in(node: Optional[_Node]) -> Iterator[Tuple[Any, int]]:
    if node is not None:
        yield from _walk_in(node.left)
        yield node.value, node.balance
        yield from _walk_in(node.right)


def _walk_pre(node: Optional[_Node]) -> Iterator[Tuple[Any, int]]:
    if node is not None:
        yield node.value, node.balance
        yield from _walk_pre(node.left)
        yield from _walk_pre(node.right)


def _walk_post(node: Optional[_Node]) -> Iterator[Tuple[Any, int]]:
    if node is not None:
        yield from _walk_post(node.left)
        yield from _walk_post(node.right)
        yield node.value, node.balance


class AVLTree:
    """An AVL tree of mutually comparable items; equal items go to the right."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.insert(item)

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._size = 0

    def insert(self, item: Any) -> None:
        """Insert an item and rebalance."""
        self._root = _insert(self._root, item)
        self._size += 1

    def walk_inorder(self) -> Iterator[Tuple[Any, int]]:
        """Yield (value, balance factor) pairs in sorted order."""
        return _walk_in(self._root)

    def walk_preorder(self) -> Iterator[Tuple[Any, int]]:
        """Yield (value, balance factor) pairs, each node before its subtrees."""
        return _walk_pre(self._root)

    def walk_postorder(self) -> Iterator[Tuple[Any, int]]:
        """Yield (value, balance factor) pairs, each node after its subtrees."""
        return _walk_post(self._root)

    @staticmethod
    def _write(walk: Callable[[], Iterator[Tuple[Any, int]]], out: Optional[TextIO]) -> None:
        stream = sys.stdout if out is None else out
        for value, balance in walk():
            stream.write(f"{value}\t\t(BF: {balance})\n")

    def inorder(self, out: Optional[TextIO] = None) -> None:
        """Write the nodes in sorted order, one per line, with balance factors."""
        self._write(self.walk_inorder, out)

    def preorder(self, out: Optional[TextIO] = None) -> None:
        """Write the nodes in pre-order, one per line, with balance factors."""
        self._write(self.walk_preorder, out)

    def postorder(self, out: Optional[TextIO] = None) -> None:
        """Write the nodes in post-order, one per line, with balance factors."""
        self._write(self.walk_postorder, out)

    def _find(self, item: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if item > node.value:
                node = node.right
            elif item < node.value:
                node = node.left
            else:
                return node
        return None

    def search(self, item: Any) -> Any:
        """Return the stored item equal to ``item``, or None if there is none."""
        node = self._find(item)
        return None if node is None else node.value

    def height(self) -> int:
        """Number of levels in the tree; 0 when empty."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (value for value, _ in self.walk_inorder())

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None