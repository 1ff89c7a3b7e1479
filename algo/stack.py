"""Stacks backed by a Python list and by a chain of linked nodes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


class Stack(ABC):
    """Last-in, first-out container."""

    @abstractmethod
    def push(self, value):
        """Put ``value`` on top of the stack."""

    @abstractmethod
    def pop(self):
        """Remove and return the top value."""

    @abstractmethod
    def top(self):
        """Return the top value without removing it."""

    @abstractmethod
    def is_empty(self):
        """Tell whether the stack holds no values."""

    @abstractmethod
    def flush(self):
        """Remove every value."""


def _describe(stack):
    if stack.is_empty():
        return "Empty Stack"
    return "\n".join(str(value) for value in stack)


class ArrayStack(Stack):
    """Stack stored in a list, top at the end."""

    def __init__(self):
        self._items = []

    def push(self, value):
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def top(self):
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def is_empty(self):
        return not self._items

    def flush(self):
        self._items.clear()

    def __iter__(self):
        """Yield values from top to bottom."""
        return reversed(self._items)

    def __str__(self):
        return _describe(self)


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedListStack(Stack):
    """Stack stored as a chain of nodes, top first."""

    def __init__(self):
        self._top = None

    def push(self, value):
        self._top = _Node(value, self._top)

    def pop(self):
        if self._top is None:
            raise IndexError("pop from empty stack")
        value = self._top.value
        self._top = self._top.next
        return value

    def top(self):
        if self._top is None:
            raise IndexError("top of empty stack")
        return self._top.value

    def is_empty(self):
        return self._top is None

    def flush(self):
        self._top = None

    def __iter__(self):
        """Yield values from top to bottom."""
        cur = self._top
        while cur is not None:
            yield cur.value
            cur = cur.next

    def __str__(self):
        return _describe(self)