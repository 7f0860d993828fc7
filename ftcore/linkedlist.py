"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node that follows."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* to the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Node | None:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to *delete* first, in order."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list holding func(content) for each content.

        If *func* raises, the contents already produced are passed to
        *delete* and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result