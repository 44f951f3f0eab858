"""Doubly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class DoublyNode:
    """One link of a doubly linked list."""

    value: Any
    next: Optional["DoublyNode"] = None
    prev: Optional["DoublyNode"] = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.value!r})"


class DoublyLinkedList:
    """A list linked in both directions, with ``head`` and ``tail``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[DoublyNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def push_front(self, value: Any) -> DoublyNode:
        """Insert ``value`` at the head and return its node."""
        node = DoublyNode(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        return node

    def push_back(self, value: Any) -> DoublyNode:
        """Append ``value`` at the tail and return its node."""
        node = DoublyNode(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        return node

    def insert_after(self, node: DoublyNode, value: Any) -> DoublyNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("a node to insert after is required")
        new = DoublyNode(value, next=node.next, prev=node)
        if node.next is not None:
            node.next.prev = new
        else:
            self.tail = new
        node.next = new
        return new

    def find(self, value: Any) -> DoublyNode | None:
        """Return the first node holding ``value``."""
        return next((node for node in self._nodes() if node.value == value), None)

    def max_node(self) -> DoublyNode | None:
        """Return the first node with the largest value."""
        return max(self._nodes(), key=lambda node: node.value, default=None)

    def min_node(self) -> DoublyNode | None:
        """Return the first node with the smallest value."""
        return min(self._nodes(), key=lambda node: node.value, default=None)

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        if self.head is not None:
            self.head.prev = None
        else:
            self.tail = None
        return node.value

    def pop_back(self) -> Any:
        """Remove the tail and return its value."""
        if self.tail is None:
            raise IndexError("pop from empty list")
        node = self.tail
        self.tail = node.prev
        if self.tail is not None:
            self.tail.next = None
        else:
            self.head = None
        return node.value

    def remove_node(self, node: DoublyNode) -> Any:
        """Unlink ``node`` from the list and return its value."""
        if node is None:
            raise ValueError("a node to remove is required")
        if node is self.head:
            return self.pop_front()
        if node is self.tail:
            return self.pop_back()
        node.prev.next = node.next
        node.next.prev = node.prev
        return node.value

    def clear(self) -> None:
        """Drop every element."""
        self.head = self.tail = None

    def render(self) -> str:
        """Return the values on one line, each followed by a space."""
        return "".join(f"{value} " for value in self) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration of the doubly linked list."""
    out = sys.stdout
    items = DoublyLinkedList()
    items.push_front(10)
    items.push_front(20)
    items.push_back(5)
    items.push_back(15)

    out.write("Danh sach ban dau: ")
    out.write(items.render())

    node = items.find(10)
    if node is not None:
        out.write("Them 99 sau node co gia tri 10\n")
        items.insert_after(node, 99)

    out.write("Danh sach sau khi them: ")
    out.write(items.render())

    out.write(f"Node lon nhat: {items.max_node().value}\n")
    out.write(f"Node nho nhat: {items.min_node().value}\n")

    out.write("Xoa dau, cuoi, node co gia tri 99\n")
    items.pop_front()
    items.pop_back()
    items.remove_node(items.find(99))

    out.write("Danh sach sau khi xoa: ")
    out.write(items.render())

    items.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())