"""Test fixtures for btreelib consumers.

Small helpers that make tree assertions readable: a numeric tree builder,
a recording visitor, and a structural snapshot of raw child references.
"""

from typing import Any, Iterable, List, Optional, Tuple
from ..core.node import Node
from ..core.tree import BinaryTree
from ..config import TreeConfig


def numeric_less(a: Node, b: Node) -> bool:
    """Node ordering by natural payload order."""
    return a.payload < b.payload


def build_numeric_tree(values: Iterable[Any],
                       config: Optional[TreeConfig] = None) -> BinaryTree:
    """Upsert ``values`` in order into a tree ordered by ``numeric_less``."""
    tree = BinaryTree(numeric_less, config)
    for value in values:
        tree.upsert(Node(value))
    return tree


class VisitRecorder:
    """Visitor that remembers what it was called with.

    Example:
        recorder = VisitRecorder()
        tree.traverse_in_order(recorder)
        assert recorder.payloads == [8, 5, 3]
    """

    def __init__(self):
        self.nodes: List[Node] = []

    def __call__(self, node: Node) -> None:
        self.nodes.append(node)

    @property
    def payloads(self) -> List[Any]:
        return [node.payload for node in self.nodes]

    @property
    def calls(self) -> int:
        return len(self.nodes)


def shape_of(tree_or_node) -> Optional[Tuple]:
    """Snapshot raw structure as nested ``(payload, left, right)`` tuples.

    Absent children are None. Accepts a BinaryTree or a Node. Recursive, so
    meant for the small trees tests build.
    """
    node = tree_or_node.root if isinstance(tree_or_node, BinaryTree) else tree_or_node
    if node is None:
        return None
    return (node.payload, shape_of(node.left), shape_of(node.right))
