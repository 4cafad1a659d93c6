"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list holding a reference to its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def add_front(self, content: Any) -> Node:
        """Put ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The last node, or ``None`` for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        if func is None:
            raise TypeError("func must be callable")
        for node in self._nodes():
            func(node.content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """Return a new list of ``func(content)`` for each node.

        If ``func`` raises, ``delete`` is called on every content already
        produced, and the exception propagates.
        """
        if func is None or delete is None:
            raise TypeError("func and delete must be callable")
        result = LinkedList()
        try:
            for node in self._nodes():
                result.add_back(func(node.content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, calling ``delete`` on each content from back to front."""
        if delete is not None:
            for content in reversed(list(self)):
                delete(content)
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"