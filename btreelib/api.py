"""High-level API for btreelib.

Simple functional helpers for the common cases: building a tree from plain
values and reading it back. They wrap the BinaryTree object API.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union
from .core.node import Node
from .core.tree import BinaryTree, LessFunc
from .config import TraversalOrder, TreeConfig


def payload_less(less: Callable[[Any, Any], bool]) -> LessFunc:
    """Lift a comparison over payloads to a comparison over nodes.

    Example:
        >>> tree = BinaryTree(payload_less(lambda a, b: a < b))
    """
    def node_less(a: Node, b: Node) -> bool:
        return less(a.payload, b.payload)
    return node_less


def build_tree(
    payloads: Iterable[Any],
    less: Callable[[Any, Any], bool],
    config: Optional[TreeConfig] = None
) -> BinaryTree:
    """Build a tree by upserting every payload in order.

    Payloads equivalent to one already inserted are dropped.

    Args:
        payloads: Values to insert, in insertion order
        less: Comparison over payloads (not nodes)
        config: Optional tree configuration

    Returns:
        The populated BinaryTree

    Example:
        >>> tree = build_tree([5, 3, 8, 3], lambda a, b: a < b)
        >>> collect_payloads(tree)
        [8, 5, 3]
    """
    tree = BinaryTree(payload_less(less), config)
    for payload in payloads:
        tree.upsert(Node(payload))
    return tree


def collect_payloads(
    tree: BinaryTree,
    order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER
) -> List[Any]:
    """Return the payloads in traversal order."""
    return [node.payload for node in tree.iter_nodes(order)]


def count_nodes(tree: BinaryTree) -> int:
    """Count the nodes reachable from the root."""
    count = 0
    for _ in tree.iter_nodes():
        count += 1
    return count


def get_leaf_nodes(tree: BinaryTree) -> Iterator[Node]:
    """Yield leaf nodes, in in-order sequence."""
    for node in tree.iter_nodes():
        if node.is_leaf():
            yield node


def tree_depth(tree: BinaryTree) -> int:
    """Number of levels in the tree (0 when empty, 1 for a lone root).

    Computed with an explicit stack, so it works on degenerate trees of any
    depth.
    """
    if tree.root is None:
        return 0

    max_depth = 0
    stack = [(tree.root, 1)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            max_depth = depth
        for child in node.children():
            stack.append((child, depth + 1))
    return max_depth


def get_tree_stats(tree: BinaryTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with ``total_nodes``, ``leaf_nodes`` and ``max_depth``

    Example:
        >>> stats = get_tree_stats(tree)
        >>> print(f"Total nodes: {stats['total_nodes']}")
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': tree_depth(tree),
    }

    for node in tree.iter_nodes():
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1

    return stats
