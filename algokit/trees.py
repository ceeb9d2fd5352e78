"""Binary tree node type and traversal algorithms."""

from __future__ import annotations

from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Iterable, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare and hash by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, _END)
    if first is _END or first is None:
        return None

    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()

        value = next(items, _END)
        if value is _END:
            break
        if value is not None:
            node.left = TreeNode(value)
            pending.append(node.left)

        value = next(items, _END)
        if value is _END:
            break
        if value is not None:
            node.right = TreeNode(value)
            pending.append(node.right)
    return root


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Return True if the tree is a mirror image of itself around its root."""
    if root is None:
        return True
    pairs = [(root.left, root.right)]
    while pairs:
        p, q = pairs.pop()
        if p is None or q is None:
            if p is not q:
                return False
            continue
        if p.val != q.val:
            return False
        # outer pair and inner pair must mirror each other
        pairs.append((p.left, q.right))
        pairs.append((p.right, q.left))
    return True


def vertical_traversal(root: Optional[TreeNode]) -> list[list[int]]:
    """Group values by column, left to right; within a column by row, ties sorted."""
    if root is None:
        return []
    columns: defaultdict[int, defaultdict[int, list[int]]] = defaultdict(
        lambda: defaultdict(list)
    )
    queue = deque([(root, 0, 0)])
    while queue:
        node, col, row = queue.popleft()
        columns[col][row].append(node.val)
        if node.left is not None:
            queue.append((node.left, col - 1, row + 1))
        if node.right is not None:
            queue.append((node.right, col + 1, row + 1))

    return [
        [val for row in sorted(rows) for val in sorted(rows[row])]
        for _, rows in sorted(columns.items())
    ]


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Level-order values with every other level read right to left."""
    levels: list[list[int]] = []
    level_nodes = [root] if root is not None else []
    left_to_right = True
    while level_nodes:
        values = [node.val for node in level_nodes]
        if not left_to_right:
            values.reverse()
        levels.append(values)
        level_nodes = [
            child
            for node in level_nodes
            for child in (node.left, node.right)
            if child is not None
        ]
        left_to_right = not left_to_right
    return levels


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Values of the rightmost node on each level, top to bottom."""
    view: list[int] = []
    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if depth == len(view):
            view.append(node.val)
        # right child is pushed last so it is visited first
        if node.left is not None:
            stack.append((node.left, depth + 1))
        if node.right is not None:
            stack.append((node.right, depth + 1))
    return view


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the deepest node having both ``p`` and ``q`` as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """All root-to-leaf paths written as ``"a->b->c"``, left subtrees first."""
    paths: list[str] = []
    stack = [(root, str(root.val))] if root is not None else []
    while stack:
        node, path = stack.pop()
        if node.left is None and node.right is None:
            paths.append(path)
            continue
        if node.right is not None:
            stack.append((node.right, f"{path}->{node.right.val}"))
        if node.left is not None:
            stack.append((node.left, f"{path}->{node.left.val}"))
    return paths