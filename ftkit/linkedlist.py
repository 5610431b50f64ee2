"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

__all__ = ["LinkedList"]


class _Node:
    __slots__ = ("content", "next")

    def __init__(self, content: Any) -> None:
        self.content = content
        self.next: _Node | None = None


class LinkedList:
    """Singly linked list supporting front/back insertion, iteration and mapping."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the start of the list."""
        node = _Node(content)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the end of the list."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the final element, or None for an empty list."""
        return None if self._tail is None else self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every element's content, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every content."""
        return LinkedList(func(content) for content in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"