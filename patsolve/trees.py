"""Tree puzzles: leaf levels, traversal rebuilding, BST checks and weighted paths."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass


@dataclass
class _Node:
    key: int
    left: _Node | None = None
    right: _Node | None = None


def leaves_by_level(node_count: int, children: Mapping[int, Sequence[int]]) -> list[int]:
    """Count the leaves on each level of a tree rooted at node 1.

    Nodes are numbered from 1 to ``node_count``; ``children`` maps a node to
    its children.  The counts run from level 0 to the deepest level holding a
    leaf.
    """
    for parent, kids in children.items():
        for node in (parent, *kids):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node} is out of range 1..{node_count}")

    levels = {1: 0}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for child in children.get(node, ()):
            if child not in levels:
                levels[child] = levels[node] + 1
                queue.append(child)

    counts = Counter(
        levels.get(node, 0)
        for node in range(1, node_count + 1)
        if not children.get(node)
    )
    deepest = max(counts, default=0)
    return [counts[level] for level in range(deepest + 1)]


def _build(postorder: Sequence[int], inorder: Sequence[int]) -> _Node | None:
    if not postorder:
        return None
    key = postorder[-1]
    try:
        split = list(inorder).index(key)
    except ValueError:
        raise ValueError(f"key {key} is missing from the inorder sequence") from None
    root = _Node(key)
    root.left = _build(postorder[:split], inorder[:split])
    root.right = _build(postorder[split:-1], inorder[split + 1:])
    return root


def level_order(postorder: Sequence[int], inorder: Sequence[int]) -> list[int]:
    """Rebuild a binary tree from its postorder and inorder walks; return its level order."""
    if len(postorder) != len(inorder):
        raise ValueError("postorder and inorder must have the same length")
    root = _build(list(postorder), list(inorder))
    result = []
    queue = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        result.append(node.key)
        queue.extend(child for child in (node.left, node.right) if child)
    return result


def _insert(root: _Node, key: int, mirror: bool) -> bool:
    """Insert ``key`` following preorder rules; return False if that is impossible."""
    node = root
    while True:
        goes_left = key >= node.key if mirror else key < node.key
        if goes_left:
            if node.right is not None:
                return False
            if node.left is None:
                node.left = _Node(key)
                return True
            node = node.left
        else:
            if node.right is None:
                node.right = _Node(key)
                return True
            node = node.right


def _postorder(root: _Node) -> list[int]:
    reversed_order = []
    stack = [root]
    while stack:
        node = stack.pop()
        reversed_order.append(node.key)
        stack.extend(child for child in (node.left, node.right) if child)
    return reversed_order[::-1]


def bst_postorder(preorder: Sequence[int]) -> list[int] | None:
    """Return the postorder walk if ``preorder`` is that of a BST or its mirror image.

    The plain BST is preferred when both fit; ``None`` means neither does.
    """
    if not preorder:
        return []
    bst = _Node(preorder[0])
    mirror = _Node(preorder[0])
    is_bst = is_mirror = True
    for key in preorder[1:]:
        if is_bst:
            is_bst = _insert(bst, key, mirror=False)
        if is_mirror:
            is_mirror = _insert(mirror, key, mirror=True)
        if not is_bst and not is_mirror:
            return None
    return _postorder(bst if is_bst else mirror)


def paths_with_weight(
    weights: Sequence[int],
    children: Mapping[int, Sequence[int]],
    target: int,
) -> list[list[int]]:
    """Return the weights along every root-to-leaf path that sums to ``target``.

    Node 0 is the root.  Heavier children are explored first, so the paths
    come out in non-increasing order.
    """
    if not weights:
        return []
    ordered = {
        parent: sorted(kids, key=lambda child: weights[child], reverse=True)
        for parent, kids in children.items()
    }

    def walk(node: int, path: list[int], total: int) -> Iterator[list[int]]:
        total += weights[node]
        path = path + [weights[node]]
        kids = ordered.get(node, [])
        if total == target and not kids:
            yield path
        elif total < target:
            for child in kids:
                yield from walk(child, path, total)

    return list(walk(0, [], 0))