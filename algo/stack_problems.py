"""Stack exercises: a stack that knows its minimum, a queue built on stacks, bracket matching."""

from typing import NamedTuple


class _Entry(NamedTuple):
    value: int
    minimum: int


class MinStack:
    """Stack that reports its smallest value in constant time.

    Each entry remembers the minimum at the time it was pushed.
    """

    def __init__(self):
        self._entries = []

    def push(self, x):
        minimum = x
        if self._entries and self._entries[-1].minimum < x:
            minimum = self._entries[-1].minimum
        self._entries.append(_Entry(x, minimum))

    def pop(self):
        """Remove and return the top value."""
        if not self._entries:
            raise IndexError("pop from empty stack")
        return self._entries.pop().value

    def top(self):
        if not self._entries:
            raise IndexError("top of empty stack")
        return self._entries[-1].value

    def get_min(self):
        if not self._entries:
            raise IndexError("minimum of empty stack")
        return self._entries[-1].minimum

    def __str__(self):
        if not self._entries:
            return "Empty Stack"
        return "".join(f"{entry.value}-{entry.minimum} -> " for entry in self._entries)


class StackQueue:
    """First-in, first-out queue built from two stacks."""

    def __init__(self):
        self._incoming = []
        self._outgoing = []

    def _refill(self):
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise IndexError("queue is empty")

    def push(self, x):
        self._incoming.append(x)

    def pop(self):
        self._refill()
        return self._outgoing.pop()

    def peek(self):
        self._refill()
        return self._outgoing[-1]

    def empty(self):
        return not self._incoming and not self._outgoing


_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = set(_CLOSERS.values())


def is_valid_parentheses(s):
    """Tell whether every bracket in ``s`` is closed in the right order; other characters are ignored."""
    stack = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[char]:
                return False
    return not stack