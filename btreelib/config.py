"""Configuration system for btreelib.

This module defines how callers choose traversal behavior: which order a
traversal walks in, how the reverse walk recurses, and whether traversals
use the call stack or an explicit stack.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class TraversalOrder(Enum):
    """Which depth-first order to walk the tree in."""
    IN_ORDER = "in_order"               # left, node, right
    REVERSE = "reverse"                 # right, node, left at every level
    REVERSE_LEGACY = "reverse_legacy"   # right in-order, node, left in-order


class ReverseMode(Enum):
    """How ``traverse_reverse`` descends below the root.

    CORRECTED mirrors the in-order walk at every level. LEGACY swaps sides
    only at the root and walks both subtrees in-order, which is what the
    original word-count tool did.
    """
    CORRECTED = "corrected"
    LEGACY = "legacy"


class ConfigurationError(Exception):
    """Raised when a TreeConfig is not usable."""
    pass


@dataclass
class TreeConfig:
    """Traversal configuration for a BinaryTree.

    Strings are accepted for the enum fields and converted on construction,
    so ``TreeConfig(reverse_mode="legacy")`` works.
    """

    reverse_mode: ReverseMode = ReverseMode.CORRECTED
    iterative: bool = False  # Explicit-stack traversal instead of recursion

    def __post_init__(self):
        if isinstance(self.reverse_mode, str):
            try:
                self.reverse_mode = ReverseMode(self.reverse_mode.lower())
            except ValueError:
                # Left as-is so validate() can report it
                pass

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of problems (empty if the configuration is valid)
        """
        errors = []

        if not isinstance(self.reverse_mode, ReverseMode):
            errors.append(
                f"reverse_mode must be one of "
                f"{', '.join(m.value for m in ReverseMode)}, "
                f"got {self.reverse_mode!r}"
            )

        if not isinstance(self.iterative, bool):
            errors.append(f"iterative must be a bool, got {self.iterative!r}")

        return errors

    def reverse_order(self) -> TraversalOrder:
        """The TraversalOrder that ``traverse_reverse`` should use."""
        if self.reverse_mode is ReverseMode.LEGACY:
            return TraversalOrder.REVERSE_LEGACY
        return TraversalOrder.REVERSE

    @classmethod
    def legacy(cls) -> 'TreeConfig':
        """Config reproducing the original reverse traversal exactly."""
        return cls(reverse_mode=ReverseMode.LEGACY)

    @classmethod
    def deep(cls) -> 'TreeConfig':
        """Config for trees that may be deeper than the recursion limit."""
        return cls(iterative=True)
