"""Tree traversal strategies for btreelib.

Traversers implement the depth-first walks over a binary tree. Each one can
run recursively, which is the textbook formulation, or with an explicit
stack, which keeps very deep (degenerate) trees from exhausting the
interpreter's call stack. Both forms visit nodes in the same order.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Union
from .node import Node
from ..config import TraversalOrder


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    A traverser is independent of any particular tree: it walks whatever
    node it is handed, following ``left``/``right`` references.
    """

    def __init__(self, iterative: bool = False):
        """Initialize traverser.

        Args:
            iterative: Use an explicit stack instead of recursion
        """
        self.iterative = iterative

    @abstractmethod
    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        """Walk the subtree rooted at ``root``.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Every node of the subtree exactly once
        """
        pass


class _SymmetricTraverser(TreeTraverser):
    """Visits the first subtree, then the node, then the second subtree."""

    @staticmethod
    @abstractmethod
    def _first(node: Node) -> Optional[Node]:
        pass

    @staticmethod
    @abstractmethod
    def _second(node: Node) -> Optional[Node]:
        pass

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        if self.iterative:
            yield from self._traverse_iterative(root)
        else:
            yield from self._traverse_recursive(root)

    def _traverse_recursive(self, node: Node) -> Iterator[Node]:
        first = self._first(node)
        if first is not None:
            yield from self._traverse_recursive(first)
        yield node
        # Read after the visit: the visitor may have rewired this node
        second = self._second(node)
        if second is not None:
            yield from self._traverse_recursive(second)

    def _traverse_iterative(self, root: Node) -> Iterator[Node]:
        stack: List[Node] = []
        node: Optional[Node] = root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = self._first(node)
            node = stack.pop()
            yield node
            node = self._second(node)


class InOrderTraverser(_SymmetricTraverser):
    """Left subtree, node, right subtree.

    With BinaryTree's insertion rule this walks from the greatest payload
    to the smallest, i.e. descending with respect to ``less``.
    """

    @staticmethod
    def _first(node: Node) -> Optional[Node]:
        return node.left

    @staticmethod
    def _second(node: Node) -> Optional[Node]:
        return node.right


class ReverseTraverser(_SymmetricTraverser):
    """Right subtree, node, left subtree, at every level.

    The exact mirror of InOrderTraverser: ascending with respect to
    ``less``.
    """

    @staticmethod
    def _first(node: Node) -> Optional[Node]:
        return node.right

    @staticmethod
    def _second(node: Node) -> Optional[Node]:
        return node.left


class LegacyReverseTraverser(TreeTraverser):
    """Reverse walk as the original word-count tool performed it.

    Only the root swaps sides: its right subtree is walked in-order, then
    the root is visited, then its left subtree is walked in-order. Every
    node is still visited exactly once, but below the root the order is
    not a reversal of anything.
    """

    def __init__(self, iterative: bool = False):
        super().__init__(iterative)
        self._in_order = InOrderTraverser(iterative)

    def traverse(self, root: Optional[Node]) -> Iterator[Node]:
        if root is None:
            return
        yield from self._in_order.traverse(root.right)
        yield root
        yield from self._in_order.traverse(root.left)


def create_traverser(order: Union[TraversalOrder, str],
                     iterative: bool = False) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or its value
            (in_order, reverse, reverse_legacy)
        iterative: Use an explicit stack instead of recursion

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If the order is not recognized
    """
    strategies = {
        TraversalOrder.IN_ORDER: InOrderTraverser,
        TraversalOrder.REVERSE: ReverseTraverser,
        TraversalOrder.REVERSE_LEGACY: LegacyReverseTraverser,
    }

    if isinstance(order, str):
        try:
            order = TraversalOrder(order.lower())
        except ValueError:
            raise ValueError(
                f"Unknown traversal order: {order}. "
                f"Choose from: {', '.join(o.value for o in TraversalOrder)}"
            ) from None

    if order not in strategies:
        raise ValueError(f"Unknown traversal order: {order!r}")

    return strategies[order](iterative)
