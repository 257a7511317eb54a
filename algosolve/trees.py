"""Binary trees, binary search trees and queries on them."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_level_order(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order listing of a tree, without trailing Nones."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result


def _spine_height(node: Optional[TreeNode], go_left: bool) -> int:
    height = 0
    while node is not None:
        height += 1
        node = node.left if go_left else node.right
    return height


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree."""
    if root is None:
        return 0
    left_height = _spine_height(root, go_left=True)
    right_height = _spine_height(root, go_left=False)
    if left_height == right_height:
        return 2**left_height - 1
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror a tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits on each root-to-leaf path."""
    total = 0
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, prefix = stack.pop()
        current = 10 * prefix + node.val
        if node.left is None and node.right is None:
            total += current
            continue
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, current))
    return total


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """Return the node holding ``val`` in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def bst_from_preorder(preorder: Iterable[int]) -> Optional[TreeNode]:
    """Build the binary search tree whose preorder traversal is ``preorder``."""
    values = list(preorder)
    pos = 0

    def build(low: float, high: float) -> Optional[TreeNode]:
        nonlocal pos
        if pos >= len(values):
            return None
        key = values[pos]
        if not low < key < high:
            return None
        pos += 1
        node = TreeNode(key)
        node.left = build(low, key)
        node.right = build(key, high)
        return node

    return build(-math.inf, math.inf)


def _locate(root: Optional[TreeNode], x: int):
    stack = [(root, None, 0)] if root is not None else []
    while stack:
        node, parent, depth = stack.pop()
        if node.val == x:
            return parent, depth
        for child in (node.right, node.left):
            if child is not None:
                stack.append((child, node, depth + 1))
    return None


def is_cousins(root: Optional[TreeNode], x: int, y: int) -> bool:
    """Tell whether ``x`` and ``y`` share a depth but not a parent."""
    found_x = _locate(root, x)
    found_y = _locate(root, y)
    if found_x is None or found_y is None:
        return False
    parent_x, depth_x = found_x
    parent_y, depth_y = found_y
    return depth_x == depth_y and parent_x is not parent_y


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack.pop()
        yield top.val
        node = top.right


def kth_smallest(root: Optional[TreeNode], k: int) -> int:
    """Return the k-th smallest value (1-based) of a binary search tree."""
    if k >= 1:
        for position, value in enumerate(_inorder(root), start=1):
            if position == k:
                return value
    raise IndexError(f"tree has no element at position {k}")