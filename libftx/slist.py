"""A singly linked list of arbitrary values."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, TextIO


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    value: Any
    next: Node | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that keeps its head, tail and size."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in items:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Add ``value`` at the start of the list and return its node."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, value: Any) -> Node:
        """Add ``value`` at the end of the list and return its node."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def insert_after(self, node: Node | None, values: Iterable[Any]) -> Node | None:
        """Insert ``values`` right after ``node``, keeping what followed it.

        With ``node`` None the values go to the start of the list. Returns
        the last inserted node, or None when ``values`` is empty.
        """
        chain = [Node(value) for value in values]
        if not chain:
            return None
        for current, following in zip(chain, chain[1:]):
            current.next = following
        first, last = chain[0], chain[-1]
        if node is None:
            last.next = self.head
            self.head = first
            if self._tail is None:
                self._tail = last
        else:
            last.next = node.next
            node.next = first
            if node is self._tail:
                self._tail = last
        self._size += len(chain)
        return last

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        return self._tail

    def pop_front(self) -> Any:
        """Remove the first element and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove the last element and return its value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head is self._tail:
            return self.pop_front()
        previous = self.head
        while previous.next is not self._tail:
            previous = previous.next
        removed = self._tail
        previous.next = None
        self._tail = previous
        self._size -= 1
        return removed.value

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling ``delete`` on each value first if given."""
        if delete is not None:
            for value in self:
                delete(value)
        self.head = None
        self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every value."""
        return LinkedList(func(value) for value in self)

    def print_ints(self, stream: TextIO | None = None) -> None:
        """Write the integer values, one per line, under a heading.

        Nothing is written for an empty list.
        """
        if self.head is None:
            return
        out = sys.stdout if stream is None else stream
        out.write("List content: \n")
        for value in self:
            out.write(f"{int(value)}\n")
        out.write("\n")