"""Testing utilities for btreelib consumers."""

from .fixtures import VisitRecorder, build_numeric_tree, numeric_less, shape_of

__all__ = ['VisitRecorder', 'build_numeric_tree', 'numeric_less', 'shape_of']
