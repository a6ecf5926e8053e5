"""The BinaryTree container.

BinaryTree owns a root reference and a caller-supplied ordering predicate.
It grows by upsert only: nodes are never removed and the tree is never
rebalanced, so insertion order decides its shape.

Insertion rule
--------------
When walking down from the root, a new node ``n`` goes to the LEFT of the
current node ``cur`` when ``less(cur, n)`` holds, and to the RIGHT when
``less(n, cur)`` holds. This is the mirror image of the textbook rule, so:

- ``traverse_in_order`` yields payloads in DESCENDING order of ``less``;
- ``traverse_reverse`` (corrected mode) yields them in ASCENDING order.
"""

import sys
import warnings
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar, Union
from .node import Node
from .traverser import create_traverser
from ..config import ConfigurationError, ReverseMode, TraversalOrder, TreeConfig

P = TypeVar("P")

LessFunc = Callable[[Node, Node], bool]
VisitFunc = Callable[[Node], Any]

# Frames kept free for the visitor and the caller when checking depth
_RECURSION_HEADROOM = 50


class BinaryTree(Generic[P]):
    """Unbalanced binary search tree with upsert and depth-first walks.

    ``less(a, b)`` receives two nodes and must return True when ``a`` sorts
    before ``b``. It should be a strict weak ordering; two nodes are
    equivalent when neither is less than the other. An inconsistent
    predicate produces a badly shaped tree, never an exception from the
    tree itself.

    Not thread-safe. Callers sharing a tree between threads must serialize
    every call, traversals included.

    Example:
        >>> tree = BinaryTree(lambda a, b: a.payload < b.payload)
        >>> for value in (5, 3, 8):
        ...     _ = tree.upsert(Node(value))
        >>> [n.payload for n in tree.iter_nodes(TraversalOrder.REVERSE)]
        [3, 5, 8]
    """

    def __init__(self, less: LessFunc, config: Optional[TreeConfig] = None):
        """Create an empty tree.

        Args:
            less: Ordering predicate over two nodes
            config: Traversal configuration (defaults to TreeConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.less = less
        self.root: Optional[Node[P]] = None
        # Deepest level reached by upsert (root = 1); manual rewiring is not tracked
        self._depth_hint = 0

    def is_empty(self) -> bool:
        return self.root is None

    def upsert(self, node: Node[P]) -> Tuple[Node[P], bool]:
        """Insert ``node`` unless an equivalent node is already present.

        Args:
            node: Candidate node; attached as-is, never copied

        Returns:
            ``(located, inserted)``. When inserted is True, located is
            ``node`` itself. Otherwise located is the equivalent node
            already in the tree and ``node`` is left unattached. Either
            way the caller may update ``located.payload`` in place.
        """
        if self.root is None:
            self.root = node
            self._depth_hint = 1
            return node, True

        less = self.less
        cur = self.root
        depth = 1
        while True:
            depth += 1
            if less(cur, node):
                if cur.left is None:
                    cur.left = node
                    break
                cur = cur.left
            elif less(node, cur):
                if cur.right is None:
                    cur.right = node
                    break
                cur = cur.right
            else:
                return cur, False

        if depth > self._depth_hint:
            self._depth_hint = depth
        return node, True

    def iter_nodes(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> Iterator[Node[P]]:
        """Lazily walk the tree in the given order.

        Child references are read as the walk reaches them, so a node
        rewired while the iterator is suspended is seen in its new shape.
        """
        traverser = create_traverser(order, iterative=self.config.iterative)
        if not self.config.iterative:
            self._check_recursion_depth()
        return traverser.traverse(self.root)

    def __iter__(self) -> Iterator[Node[P]]:
        return self.iter_nodes(TraversalOrder.IN_ORDER)

    def traverse(self, order: Union[TraversalOrder, str], visit: VisitFunc) -> None:
        """Call ``visit(node)`` once per node in the given order.

        The walk always runs to completion; return values of ``visit`` are
        ignored. Exceptions raised by ``visit`` propagate to the caller.
        """
        for node in self.iter_nodes(order):
            visit(node)

    def traverse_in_order(self, visit: VisitFunc) -> None:
        """Visit left subtree, node, right subtree.

        Produces payloads in descending order of ``less``.
        """
        self.traverse(TraversalOrder.IN_ORDER, visit)

    def traverse_reverse(self, visit: VisitFunc,
                         mode: Optional[Union[ReverseMode, str]] = None) -> None:
        """Visit in the mirror order of ``traverse_in_order``.

        Args:
            visit: Callback invoked once per node
            mode: Overrides ``config.reverse_mode`` for this call.
                ReverseMode.CORRECTED mirrors every level (ascending order
                of ``less``). ReverseMode.LEGACY reproduces the original
                tool, which swapped sides only at the root.
        """
        if mode is None:
            order = self.config.reverse_order()
        elif ReverseMode(mode) is ReverseMode.LEGACY:
            order = TraversalOrder.REVERSE_LEGACY
        else:
            order = TraversalOrder.REVERSE
        self.traverse(order, visit)

    def _check_recursion_depth(self) -> None:
        limit = sys.getrecursionlimit() - _RECURSION_HEADROOM
        if self._depth_hint > limit:
            warnings.warn(
                f"Tree depth {self._depth_hint} exceeds the usable recursion "
                f"limit ({limit}); recursive traversal will likely fail. "
                f"Use TreeConfig(iterative=True) for deep trees.",
                RuntimeWarning,
                stacklevel=3
            )

    def __repr__(self) -> str:
        state = "empty" if self.root is None else f"root={self.root!r}"
        return f"{self.__class__.__name__}({state})"
