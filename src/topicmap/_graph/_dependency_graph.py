"""Read-only dependency graph over topic ids."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ._algorithms import topological_sort

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DependencyGraph(Generic[T]):
    """A directed acyclic graph of "requires" relations.

    - prerequisites[b] = (a,) means "b requires a"
    - dependents[a] = (b,) means "a is required by b"

    Node and edge order follow the order the edges were given in, so query
    results are deterministic.

    Attributes:
        _prerequisites: Mapping from node to its direct prerequisites.
        _dependents: Mapping from node to the nodes that require it.

    """

    _prerequisites: dict[T, tuple[T, ...]] = field(default_factory=dict)
    _dependents: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_requirements(cls, requirements: Iterable[tuple[T, Iterable[T]]]) -> DependencyGraph[T]:
        """Build a graph from ``(node, prerequisites)`` pairs.

        Example:
            >>> graph = DependencyGraph.from_requirements([("a", []), ("b", ["a"])])
            >>> graph.prerequisites("b")
            ('a',)

        """
        prerequisites: dict[T, list[T]] = {}
        dependents: dict[T, list[T]] = {}

        for node, required in requirements:
            prerequisites.setdefault(node, [])
            dependents.setdefault(node, [])
            for prerequisite in required:
                prerequisites.setdefault(prerequisite, [])
                dependents.setdefault(prerequisite, []).append(node)
                prerequisites[node].append(prerequisite)

        return cls(
            _prerequisites={k: tuple(dict.fromkeys(v)) for k, v in prerequisites.items()},
            _dependents={k: tuple(dict.fromkeys(v)) for k, v in dependents.items()},
        )

    @property
    def nodes(self) -> tuple[T, ...]:
        """All nodes, in first-seen order."""
        return tuple(self._prerequisites)

    @property
    def edges(self) -> list[tuple[T, T]]:
        """All ``(prerequisite, dependent)`` edges."""
        return [(src, dst) for dst, srcs in self._prerequisites.items() for src in srcs]

    def prerequisites(self, node: T) -> tuple[T, ...]:
        """Direct prerequisites of a node."""
        return self._prerequisites.get(node, ())

    def dependents(self, node: T) -> tuple[T, ...]:
        """Nodes that directly require a node."""
        return self._dependents.get(node, ())

    def roots(self) -> tuple[T, ...]:
        """Nodes without prerequisites."""
        return tuple(n for n in self.nodes if not self._prerequisites[n])

    def leaves(self) -> tuple[T, ...]:
        """Nodes nothing depends on."""
        return tuple(n for n in self.nodes if not self._dependents.get(n))

    def ancestors(self, node: T) -> frozenset[T]:
        """All transitive prerequisites of a node."""
        visited: set[T] = set()
        stack = list(self.prerequisites(node))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.prerequisites(current))
        return frozenset(visited)

    def descendants(self, node: T) -> frozenset[T]:
        """All topics that transitively require a node."""
        visited: set[T] = set()
        stack = list(self.dependents(node))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(self.dependents(current))
        return frozenset(visited)

    def topological_order(self) -> list[T]:
        """Return nodes with every prerequisite before its dependents.

        Raises:
            CycleDetectedError: If the graph contains a cycle.

        """
        return topological_sort(self._dependents)

    def __len__(self) -> int:
        return len(self._prerequisites)

    def __contains__(self, node: object) -> bool:
        return node in self._prerequisites
