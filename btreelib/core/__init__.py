"""Core components: nodes, the tree container, and traversal strategies."""

from .node import Node
from .tree import BinaryTree, LessFunc, VisitFunc
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    ReverseTraverser,
    LegacyReverseTraverser,
    create_traverser,
)

__all__ = [
    'Node',
    'BinaryTree',
    'LessFunc',
    'VisitFunc',
    'TreeTraverser',
    'InOrderTraverser',
    'ReverseTraverser',
    'LegacyReverseTraverser',
    'create_traverser',
]
