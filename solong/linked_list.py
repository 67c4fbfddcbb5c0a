"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One element of a linked list."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list supporting insertion at either end."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def add_front(self, content: T) -> Node[T]:
        """Insert ``content`` at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: T) -> Node[T]:
        """Append ``content`` to the end of the list and return its node."""
        node: Node[T] = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node[T]]:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every element, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> "LinkedList[U]":
        """Return a new list of ``func`` applied to each content.

        If ``func`` raises, ``delete`` is called on every content already
        produced and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next