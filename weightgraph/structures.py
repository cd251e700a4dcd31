"""Small container types used by the graph algorithms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class QueueOverflowError(OverflowError):
    """Raised when a value is added to a full priority queue."""


class QueueUnderflowError(IndexError):
    """Raised when a value is taken from an empty priority queue."""


class StackOverflowError(OverflowError):
    """Raised when a value is pushed onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when a value is read from an empty stack."""


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")


@dataclass
class Node:
    """A node of a singly linked list of integers."""

    value: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        node: Node | None = self
        while node is not None:
            yield node.value
            node = node.next


@dataclass
class _Entry:
    value: int
    priority: int


class PriorityQueue:
    """A bounded binary min-heap of values keyed by integer priority."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._heap: list[_Entry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, value: object) -> bool:
        return any(entry.value == value for entry in self._heap)

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return not self._heap

    def enqueue(self, value: int, priority: int) -> None:
        """Add ``value`` with ``priority``; lower priorities come out first."""
        if len(self._heap) == self._capacity:
            raise QueueOverflowError("Queue is full")
        self._heap.append(_Entry(value, priority))
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> int:
        """Remove and return the value with the lowest priority."""
        if not self._heap:
            raise QueueUnderflowError("Queue is empty")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.value

    def decrease_key(self, value: int, new_priority: int) -> None:
        """Lower the priority of the first entry holding ``value``."""
        index = next(
            (i for i, entry in enumerate(self._heap) if entry.value == value),
            None,
        )
        if index is None:
            raise ValueError("Value not found in the priority queue")
        if new_priority >= self._heap[index].priority:
            raise ValueError("New priority must be lower than current priority")
        self._heap[index].priority = new_priority
        self._sift_up(index)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority >= heap[parent].priority:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].priority < heap[smallest].priority:
                    smallest = child
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest


class Stack:
    """A bounded last-in, first-out stack of integers."""

    def __init__(self, capacity: int) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return not self._items

    def push(self, value: int) -> None:
        """Push ``value``; a full stack is left unchanged and an error raised."""
        if len(self._items) >= self._capacity:
            raise StackOverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty")
        return self._items[-1]


class UnionFind:
    """Disjoint sets over ``0..size-1`` with union by rank and path compression."""

    def __init__(self, size: int) -> None:
        _check_capacity(size)
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1