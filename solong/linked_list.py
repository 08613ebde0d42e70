"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list reached through its first node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` at the front; a missing node or the head itself is ignored."""
        if node is None or node is self.head:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Append ``node`` after the last node; a missing node is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass every content to ``delete`` and empty the list.

        Without a ``delete`` function the list is left untouched.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for node in self._nodes():
            func(node.content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]],
    ) -> Optional[LinkedList]:
        """Return a new list of ``func`` applied to every content.

        If ``func`` gives None for any content, the contents built so far
        are passed to ``delete`` and None is returned.
        """
        mapped = LinkedList()
        for node in self._nodes():
            content = func(node.content)
            if content is None:
                mapped.clear(delete)
                return None
            mapped.add_back(Node(content))
        return mapped

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())