"""Binary tree nodes and depth-first traversals."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TreeNode:
    """A binary tree node holding an integer."""

    val: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def pre_order(root):
    """Return values in root, left, right order, walking with an explicit stack."""
    if root is None:
        return []
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def in_order(root):
    """Return values in left, root, right order."""
    if root is None:
        return []
    return [*in_order(root.left), root.val, *in_order(root.right)]


def post_order(root):
    """Return values in left, right, root order."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.val]