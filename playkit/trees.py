"""Unbalanced binary search trees with pluggable ordering and node allocation."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    value: Any = None
    left: Optional[Node] = None
    right: Optional[Node] = None


class Arena:
    """A fixed pool of nodes handed out one by one."""

    def __init__(self, capacity: int) -> None:
        self._nodes = [Node() for _ in range(capacity)]
        self._used = 0

    def __len__(self) -> int:
        return self._used

    def new_node(self, value: Any) -> Node:
        if self._used >= len(self._nodes):
            raise IndexError("arena exhausted")
        node = self._nodes[self._used]
        node.value = value
        self._used += 1
        return node


def _walk(node: Optional[Node]) -> Iterator[Node]:
    stack: list[Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def in_order(node: Optional[Node], visit: Callable[[Node], None]) -> None:
    """Call ``visit`` on every node of the subtree, left to right."""
    for n in _walk(node):
        visit(n)


class BinaryTree:
    """A binary search tree; equal values go to the right."""

    def __init__(
        self,
        less: Optional[Callable[[Any, Any], bool]] = None,
        new_node: Callable[[Any], Node] = Node,
    ) -> None:
        self.root: Optional[Node] = None
        self._less = less or operator.lt
        self._new_node = new_node

    def insert(self, value: Any) -> None:
        node = self._new_node(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if self._less(value, current.value):
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def for_each(self, visit: Callable[[Any], None]) -> None:
        for value in self:
            visit(value)

    def __iter__(self) -> Iterator[Any]:
        return (n.value for n in _walk(self.root))