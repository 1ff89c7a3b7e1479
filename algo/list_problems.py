"""Exercises on bare singly linked lists of integers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: Optional["ListNode"] = None


def build_list(values):
    """Chain ``values`` into nodes and return the head, or None for no values."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head):
    """Return the values of an acyclic list starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def has_cycle_two_pointer(head):
    """Tell whether the list has a cycle, using a slow and a fast pointer."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def has_cycle_visited(head):
    """Tell whether the list has a cycle by remembering every node visited."""
    visited = set()
    while head is not None:
        if head in visited:
            return True
        visited.add(head)
        head = head.next
    return False


def detect_cycle(head):
    """Return the node where the cycle begins, or None when there is no cycle.

    From the first meeting point the entry is as far as it is from the head.
    """
    if head is None or head.next is None:
        return None
    slow, fast = head.next, head.next.next
    while fast is not None and fast.next is not None and slow is not fast:
        slow = slow.next
        fast = fast.next.next
    if slow is not fast:
        return None
    while slow is not head:
        slow, head = slow.next, head.next
    return slow


def reverse_list(head):
    """Reverse the list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(l1, l2):
    """Splice two sorted lists into one sorted list and return its head."""
    anchor = ListNode(0)
    tail = anchor
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return anchor.next


def swap_pairs(head):
    """Swap every two adjacent nodes and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = head.next
    head.next = swap_pairs(new_head.next)
    new_head.next = head
    return new_head


def delete_duplicates(head):
    """Unlink repeated values from a sorted list and return its head."""
    cur = head
    while cur is not None and cur.next is not None:
        if cur.val == cur.next.val:
            cur.next = cur.next.next
        else:
            cur = cur.next
    return head