"""Singly linked lists, cycle detection and two queue implementations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> ListNode:
        """Insert ``value`` at the start and return its node."""
        self.head = ListNode(value, self.head)
        return self.head

    def append(self, value: Any) -> ListNode:
        """Insert ``value`` at the end and return its node."""
        node = ListNode(value)
        if self.head is None:
            self.head = node
            return node
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = node
        return node

    def insert_after(self, node: ListNode | None, value: Any) -> ListNode:
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("previous node cannot be None")
        node.next = ListNode(value, node.next)
        return node.next

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


class QueueEmptyError(IndexError):
    """Raised when reading from or removing from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a bounded queue that has no free slot."""


class BoundedQueue:
    """A fixed-capacity array queue.

    Slots are not reused until the queue has been emptied completely, so the
    queue reports full once ``capacity`` values have been added since it was
    last empty.
    """

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return not self._slots

    def __len__(self) -> int:
        return len(self._slots) - self._front


class LinkedQueue:
    """An unbounded queue built from linked nodes."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size