"""A doubly linked list with node removal and merge sort."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class DNode:
    """One element of a DoublyLinkedList."""

    value: Any
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)
    _owner: Any = field(default=None, init=False, repr=False)


def _merge(left: list[DNode], right: list[DNode]) -> list[DNode]:
    """Merge two sorted node runs; on equal values the right run goes first."""
    a, b = deque(left), deque(right)
    merged: list[DNode] = []
    while a and b:
        if a[0].value < b[0].value:
            merged.append(a.popleft())
        else:
            merged.append(b.popleft())
    merged.extend(a)
    merged.extend(b)
    return merged


def _merge_sort(nodes: list[DNode]) -> list[DNode]:
    if len(nodes) <= 1:
        return nodes
    middle = (len(nodes) + 1) // 2
    return _merge(_merge_sort(nodes[:middle]), _merge_sort(nodes[middle:]))


class DoublyLinkedList:
    """A doubly linked list that keeps its head, tail and size."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: DNode | None = None
        self._tail: DNode | None = None
        self._size = 0
        for value in items:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[DNode]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def _adopt(self, value: Any) -> DNode:
        node = DNode(value)
        node._owner = self
        self._size += 1
        return node

    def push_front(self, value: Any) -> DNode:
        """Add ``value`` at the start of the list and return its node."""
        node = self._adopt(value)
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        else:
            self._tail = node
        self.head = node
        return node

    def push_back(self, value: Any) -> DNode:
        """Add ``value`` at the end of the list and return its node."""
        node = self._adopt(value)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self.head = node
        self._tail = node
        return node

    def last(self) -> DNode | None:
        """Return the last node, or None for an empty list."""
        return self._tail

    def remove(self, node: DNode) -> DNode:
        """Unlink ``node`` from the list and return it, detached.

        Raises ValueError if the node does not belong to this list.
        """
        if node is None or node._owner is not self:
            raise ValueError("node is not in this list")
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if node is self.head:
            self.head = node.next
        if node is self._tail:
            self._tail = node.prev
        node.next = None
        node.prev = None
        node._owner = None
        self._size -= 1
        return node

    def delete(self, node: DNode, delete: Callable[[Any], Any] | None = None) -> None:
        """Unlink ``node`` and hand its value to ``delete`` if one is given."""
        self.remove(node)
        if delete is not None:
            delete(node.value)

    def sort(self) -> None:
        """Sort the list in place by value with merge sort, relinking its nodes."""
        ordered = _merge_sort(list(self._nodes()))
        if not ordered:
            return
        for before, after in pairwise(ordered):
            before.next = after
            after.prev = before
        ordered[0].prev = None
        ordered[-1].next = None
        self.head = ordered[0]
        self._tail = ordered[-1]