"""btreelib - Minimal Unbalanced Binary Tree.

btreelib keeps caller-defined payloads in an unbalanced binary search tree
ordered by a caller-supplied ``less`` predicate. It supports insert-or-find
("upsert") and two depth-first walks:

━━━━━━━━━━━━━━━━━━━━━━━━━━
    from btreelib import BinaryTree, Node

    tree = BinaryTree(lambda a, b: a.payload < b.payload)
    node, inserted = tree.upsert(Node(42))
    tree.traverse_in_order(print)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Note the insertion rule: a new node is placed to the LEFT of any node that is
less than it, so in-order walks come out DESCENDING and reverse walks
ASCENDING with respect to ``less``.
"""

__version__ = "0.1.0"

from .core import (
    Node,
    BinaryTree,
    LessFunc,
    VisitFunc,
    TreeTraverser,
    InOrderTraverser,
    ReverseTraverser,
    LegacyReverseTraverser,
    create_traverser,
)
from .config import (
    TraversalOrder,
    ReverseMode,
    TreeConfig,
    ConfigurationError,
)
from .api import (
    payload_less,
    build_tree,
    collect_payloads,
    count_nodes,
    get_leaf_nodes,
    tree_depth,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'Node',
    'BinaryTree',
    'LessFunc',
    'VisitFunc',
    'TreeTraverser',
    'InOrderTraverser',
    'ReverseTraverser',
    'LegacyReverseTraverser',
    'create_traverser',
    # Config
    'TraversalOrder',
    'ReverseMode',
    'TreeConfig',
    'ConfigurationError',
    # API
    'payload_less',
    'build_tree',
    'collect_payloads',
    'count_nodes',
    'get_leaf_nodes',
    'tree_depth',
    'get_tree_stats',
]
