"""Dependency graph abstractions.

This module contains:
- DependencyGraph[T]: An immutable DAG of "requires" relations
- topological_sort: Stable ordering of nodes by their prerequisites
"""

from ._algorithms import CycleDetectedError, topological_sort
from ._dependency_graph import DependencyGraph

__all__ = ["CycleDetectedError", "DependencyGraph", "topological_sort"]
