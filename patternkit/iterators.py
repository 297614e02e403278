"""Iteration over a list of ints, a binary tree in order, and file lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class IntSlice:
    """A sequence of integers that can be iterated from the start any number of times."""

    def __init__(self, items: Iterable[int]) -> None:
        self.items = list(items)

    def __iter__(self) -> Iterator[int]:
        yield from self.items


@dataclass
class Node:
    value: int
    left: Node | None = None
    right: Node | None = None


def inorder(root: Node | None) -> Iterator[Node]:
    """Yield the nodes of the tree under ``root`` in order, without recursion."""
    stack: list[Node] = []

    def push_left(node: Node | None) -> None:
        while node is not None:
            stack.append(node)
            node = node.left

    push_left(root)
    while stack:
        node = stack.pop()
        push_left(node.right)
        yield node


@dataclass
class BinaryTree:
    root: Node | None = None

    def __iter__(self) -> Iterator[Node]:
        return inorder(self.root)


def file_lines(path: str) -> Iterator[str]:
    """Open ``path`` now and iterate over its lines without line endings.

    Raises ``OSError`` at once if the file cannot be opened.
    """
    handle = open(path, "rb")

    def lines() -> Iterator[str]:
        with handle:
            for raw in handle:
                if raw.endswith(b"\n"):
                    raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
                yield raw.decode("utf-8", errors="replace")

    return lines()