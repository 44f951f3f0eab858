"""Singly linked list with predicate-based search, removal and ordering."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

EMPTY_MESSAGE = "Danh sach rong.\n"


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a singly linked list."""

    data: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list that starts at ``head``."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self.head: Node[T] | None = None
        last: Node[T] | None = None
        for item in items:
            node = Node(item)
            if last is None:
                self.head = node
            else:
                last.next = node
            last = node

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, data: T) -> Node[T]:
        """Insert ``data`` at the head and return its node."""
        self.head = Node(data, self.head)
        return self.head

    def push_back(self, data: T) -> Node[T]:
        """Append ``data`` at the end and return its node."""
        node = Node(data)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def insert_after(self, node: Node[T], data: T) -> Node[T]:
        """Insert ``data`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("a node to insert after is required")
        node.next = Node(data, node.next)
        return node.next

    def find(self, predicate: Callable[[T], bool]) -> Node[T] | None:
        """Return the first node whose data satisfies ``predicate``."""
        return next((node for node in self._nodes() if predicate(node.data)), None)

    def pop_front(self) -> T:
        """Remove the head and return its data."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        return node.data

    def pop_back(self) -> T:
        """Remove the last node and return its data."""
        if self.head is None:
            raise IndexError("pop from empty list")
        if self.head.next is None:
            data = self.head.data
            self.head = None
            return data
        prev = self.head
        while prev.next.next is not None:
            prev = prev.next
        data = prev.next.data
        prev.next = None
        return data

    def remove_after(self, node: Node[T]) -> T:
        """Remove the node following ``node`` and return its data."""
        if node is None or node.next is None:
            raise IndexError("no node to remove after the given node")
        removed = node.next
        node.next = removed.next
        return removed.data

    def remove_if(self, predicate: Callable[[T], bool]) -> int:
        """Remove every element satisfying ``predicate``; return how many went."""
        removed = 0
        while self.head is not None and predicate(self.head.data):
            self.head = self.head.next
            removed += 1
        current = self.head
        while current is not None and current.next is not None:
            if predicate(current.next.data):
                current.next = current.next.next
                removed += 1
            else:
                current = current.next
        return removed

    def sort(self, less: Callable[[T, T], bool] = operator.lt) -> None:
        """Order the list in place by exchanging data between nodes."""
        for first in self._nodes():
            node = first.next
            while node is not None:
                if less(node.data, first.data):
                    first.data, node.data = node.data, first.data
                node = node.next

    def insert_sorted(
        self, data: T, less: Callable[[T, T], bool] = operator.lt
    ) -> Node[T]:
        """Insert ``data`` into a list already ordered by ``less``."""
        if self.head is None or less(data, self.head.data):
            return self.push_front(data)
        prev = self.head
        while prev.next is not None and less(prev.next.data, data):
            prev = prev.next
        return self.insert_after(prev, data)

    def clear(self) -> None:
        """Drop every element."""
        self.head = None

    def render(self, formatter: Callable[[T], str] = str) -> str:
        """Return each element formatted on its own line."""
        if self.head is None:
            return EMPTY_MESSAGE
        return "".join(f"{formatter(data)}\n" for data in self)