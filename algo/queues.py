"""Bounded, circular and linked first-in, first-out queues."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


class Queue(ABC):
    """First-in, first-out container."""

    @abstractmethod
    def enqueue(self, value):
        """Add ``value`` at the tail."""

    @abstractmethod
    def dequeue(self):
        """Remove and return the value at the head."""

    @abstractmethod
    def __str__(self):
        """Describe the queue from head to tail."""


def _describe(values):
    return "head" + "".join(f" <- {value}" for value in values) + " <- tail"


class ArrayQueue(Queue):
    """Queue over a fixed block of slots; freed slots at the front are not reused."""

    def __init__(self, capacity):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots = [None] * capacity
        self._head = 0
        self._tail = 0

    def enqueue(self, value):
        if self._tail == len(self._slots):
            raise OverflowError("queue is full")
        self._slots[self._tail] = value
        self._tail += 1

    def dequeue(self):
        if self._head == self._tail:
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head += 1
        return value

    def __str__(self):
        if self._head == self._tail:
            return "Empty Queue"
        return _describe(self._slots[self._head:self._tail])


class CircularQueue(Queue):
    """Ring buffer queue holding at most ``capacity - 1`` values."""

    def __init__(self, capacity):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots = [None] * capacity
        self._head = 0
        self._tail = 0

    def is_empty(self):
        return self._head == self._tail

    def is_full(self):
        return self._head == (self._tail + 1) % len(self._slots)

    def enqueue(self, value):
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[self._tail] = value
        self._tail = (self._tail + 1) % len(self._slots)

    def dequeue(self):
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        value = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        return value

    def __str__(self):
        if self.is_empty():
            return "Empty queue"
        size = len(self._slots)
        count = (self._tail - self._head) % size
        return _describe(self._slots[(self._head + k) % size] for k in range(count))


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedListQueue(Queue):
    """Unbounded queue stored as a chain of nodes."""

    def __init__(self):
        self._head = None
        self._tail = None
        self._length = 0

    def __len__(self):
        return self._length

    def enqueue(self, value):
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._length += 1

    def dequeue(self):
        if self._head is None:
            raise IndexError("dequeue from empty queue")
        value = self._head.value
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return value

    def _values(self):
        cur = self._head
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __str__(self):
        if self._head is None:
            return "Empty Queue"
        return _describe(self._values())