"""Node abstraction for btreelib.

A Node is deliberately a plain data container: a payload plus two child
slots. All ordering and navigation logic lives in BinaryTree and the
traversers, so the same node type can hold any caller-defined payload.
"""

from typing import Generic, Iterator, Optional, TypeVar

P = TypeVar("P")


class Node(Generic[P]):
    """A vertex of a binary tree.

    The payload is opaque: the tree never looks inside it. Ordering is
    decided entirely by the caller's ``less`` function, which receives
    nodes, not payloads.

    ``left`` and ``right`` are public. Callers may walk the tree by hand or
    rewire it, at the cost of keeping the ordering invariant themselves.

    Nodes compare by identity. Two nodes with equal payloads are still two
    different handles.
    """

    __slots__ = ("payload", "left", "right")

    def __init__(self,
                 payload: P,
                 left: Optional["Node[P]"] = None,
                 right: Optional["Node[P]"] = None):
        """Create a node.

        Args:
            payload: Caller-defined value carried by this node
            left: Optional left child
            right: Optional right child
        """
        self.payload = payload
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator["Node[P]"]:
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(payload={self.payload!r})"
