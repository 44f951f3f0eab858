"""Circular singly linked list."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

EMPTY_MESSAGE = "Danh sach rong.\n"


@dataclass(eq=False, repr=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class CircularLinkedList:
    """A singly linked list whose tail links back to its head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[_Node]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node
            node = node.next
            if node is self._head:
                return

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def _push_into_empty(self, value: Any) -> None:
        node = _Node(value)
        node.next = node
        self._head = self._tail = node

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the head."""
        if self._head is None:
            self._push_into_empty(value)
            return
        node = _Node(value, self._head)
        self._tail.next = node
        self._head = node

    def push_back(self, value: Any) -> None:
        """Insert ``value`` after the tail."""
        if self._head is None:
            self._push_into_empty(value)
            return
        node = _Node(value, self._head)
        self._tail.next = node
        self._tail = node

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        if node is self._tail:
            self._head = self._tail = None
        else:
            self._head = node.next
            self._tail.next = self._head
        return node.value

    def pop_back(self) -> Any:
        """Remove the tail and return its value."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._tail
        if node is self._head:
            self._head = self._tail = None
            return node.value
        prev = self._head
        while prev.next is not node:
            prev = prev.next
        prev.next = self._head
        self._tail = prev
        return node.value

    def remove_value(self, value: Any) -> int:
        """Remove every node holding ``value``; return how many went."""
        removed = 0
        while self._head is not None and self._head.value == value:
            self.pop_front()
            removed += 1
        if self._head is None:
            return removed
        prev = self._head
        curr = prev.next
        while curr is not self._head:
            if curr.value == value:
                prev.next = curr.next
                if curr is self._tail:
                    self._tail = prev
                removed += 1
                curr = prev.next
            else:
                prev, curr = curr, curr.next
        return removed

    def clear(self) -> None:
        """Drop every element."""
        self._head = self._tail = None

    def render(self) -> str:
        """Return the values on one line, each followed by a space."""
        if self._head is None:
            return EMPTY_MESSAGE
        return "".join(f"{value} " for value in self) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run a short demonstration of the circular list."""
    out = sys.stdout
    items = CircularLinkedList()
    items.push_back(10)
    items.push_back(20)
    items.push_back(30)
    items.push_front(5)

    out.write("Danh sach hien tai: ")
    out.write(items.render())

    out.write("Xoa dau\n")
    items.pop_front()
    out.write(items.render())

    out.write("Xoa cuoi\n")
    items.pop_back()
    out.write(items.render())

    out.write("Xoa theo gia tri 20\n")
    items.remove_value(20)
    out.write(items.render())

    out.write("Giai phong danh sach\n")
    items.clear()
    out.write(items.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())