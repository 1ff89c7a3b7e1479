"""Singly linked list with a sentinel head node."""

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = field(default=None, repr=False)


class LinkedList:
    """Singly linked list addressed by node references."""

    def __init__(self):
        self._head = ListNode(0)
        self._length = 0

    def __len__(self):
        return self._length

    def _nodes(self):
        cur = self._head.next
        while cur is not None:
            yield cur
            cur = cur.next

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __str__(self):
        return "->".join(str(value) for value in self)

    def _predecessor(self, node):
        pre = self._head
        while pre.next is not None:
            if pre.next is node:
                return pre
            pre = pre.next
        raise ValueError("node is not in the list")

    def insert_after(self, node, value):
        """Insert ``value`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("node must not be None")
        new_node = ListNode(value, node.next)
        node.next = new_node
        self._length += 1
        return new_node

    def insert_before(self, node, value):
        """Insert ``value`` right before ``node`` and return the new node."""
        if node is None or node is self._head:
            raise ValueError("node must be a member of the list")
        pre = self._predecessor(node)
        new_node = ListNode(value, node)
        pre.next = new_node
        self._length += 1
        return new_node

    def insert_to_head(self, value):
        """Insert ``value`` at the front of the list."""
        return self.insert_after(self._head, value)

    def insert_to_tail(self, value):
        """Insert ``value`` at the end of the list."""
        cur = self._head
        while cur.next is not None:
            cur = cur.next
        return self.insert_after(cur, value)

    def find_by_index(self, index):
        """Return the node at position ``index``."""
        if not 0 <= index < self._length:
            raise IndexError("index out of range")
        return next(islice(self._nodes(), index, None))

    def delete_node(self, node):
        """Unlink ``node`` from the list."""
        if node is None:
            raise ValueError("node must not be None")
        pre = self._predecessor(node)
        pre.next = node.next
        node.next = None
        self._length -= 1

    def reverse(self):
        """Reverse the list in place; lists of fewer than two nodes are left as is."""
        first = self._head.next
        if first is None or first.next is None:
            return
        pre = None
        cur = first
        while cur is not None:
            cur.next, pre, cur = pre, cur, cur.next
        self._head.next = pre

    def has_cycle(self):
        """Tell whether following ``next`` links ever returns to a visited node."""
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def find_middle_node(self):
        """Return the middle node (the first of two for even lengths), or None."""
        first = self._head.next
        if first is None:
            return None
        if first.next is None:
            return first
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow

    def delete_nth_from_end(self, n):
        """Remove the node n - 1 places before the end and return its value.

        ``n == 2`` removes the last node and ``n == len(self) + 1`` the first.
        """
        if not 2 <= n <= self._length + 1:
            raise IndexError("n out of range")
        fast = self._head
        for _ in range(n - 1):
            fast = fast.next
        slow = self._head
        while fast.next is not None:
            slow = slow.next
            fast = fast.next
        removed = slow.next
        slow.next = removed.next
        removed.next = None
        self._length -= 1
        return removed.value