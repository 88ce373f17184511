"""Graph algorithms over prerequisite relations."""

import heapq
from collections.abc import Hashable, Mapping, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


class CycleDetectedError(ValueError):
    """The graph contains a cycle."""

    def __init__(self, remaining: Sequence[Hashable]) -> None:
        self.remaining = tuple(remaining)
        msg = f"Cycle detected in graph among {len(self.remaining)} node(s)"
        super().__init__(msg)


def topological_sort(successors: Mapping[T, Sequence[T]]) -> list[T]:
    """Sort a graph topologically (prerequisites before dependents).

    The sort is stable: whenever several nodes are ready, the one that comes
    first in ``successors`` (insertion order, then first mention as a
    successor) is emitted first. An input that is already in dependency order
    is returned unchanged.

    Args:
        successors: Mapping from node to the nodes that depend on it.
            An edge (a -> b) means "b requires a".

    Returns:
        List of nodes in topological order.

    Raises:
        CycleDetectedError: If the graph contains a cycle. ``remaining`` holds
            the nodes that could not be ordered, in declaration order.

    Example:
        >>> topological_sort({"b": [], "a": ["b"]})
        ['a', 'b']

    """
    rank = {node: index for index, node in enumerate(successors)}
    for deps in successors.values():
        for dep in deps:
            rank.setdefault(dep, len(rank))

    indegree = dict.fromkeys(rank, 0)
    for deps in successors.values():
        for dep in deps:
            indegree[dep] += 1

    ready = [rank[node] for node, deg in indegree.items() if deg == 0]
    heapq.heapify(ready)
    by_rank = {index: node for node, index in rank.items()}
    order: list[T] = []

    while ready:
        node = by_rank[heapq.heappop(ready)]
        order.append(node)
        for successor in successors.get(node, ()):
            indegree[successor] -= 1
            if indegree[successor] == 0:
                heapq.heappush(ready, rank[successor])

    if len(order) != len(rank):
        placed = set(order)
        raise CycleDetectedError([node for node in rank if node not in placed])

    return order
