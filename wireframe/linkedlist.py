"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps a reference to its first node."""

    def __init__(self, contents: Any = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], Any],
    ) -> "LinkedList":
        """A new list holding ``func(content)`` for every content.

        If ``func`` fails part way, the contents already made are passed to
        ``delete`` and the error is raised again.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result