"""Tests for DependencyGraph and topological sorting."""

import pytest

from topicmap._graph import CycleDetectedError, DependencyGraph, topological_sort


class TestTopologicalSort:
    """Tests for the topological_sort algorithm."""

    def test_empty_graph(self) -> None:
        assert topological_sort({}) == []

    def test_linear_chain(self) -> None:
        # a -> b -> c (c requires b, b requires a)
        assert topological_sort({"a": ["b"], "b": ["c"], "c": []}) == ["a", "b", "c"]

    def test_ordered_input_is_kept(self) -> None:
        successors = {"types": ["parametric"], "function": ["currying"], "parametric": [], "currying": []}
        assert topological_sort(successors) == ["types", "function", "parametric", "currying"]

    def test_dependent_declared_first_is_moved_after(self) -> None:
        assert topological_sort({"currying": [], "function": ["currying"]}) == ["function", "currying"]

    def test_ties_follow_declaration_order(self) -> None:
        # d requires both b and c; a is unrelated
        result = topological_sort({"c": ["d"], "a": [], "b": ["d"], "d": []})
        assert result == ["c", "a", "b", "d"]

    def test_nodes_only_mentioned_as_successors(self) -> None:
        assert topological_sort({"a": ["b"]}) == ["a", "b"]

    def test_cycle_detection(self) -> None:
        with pytest.raises(CycleDetectedError, match="Cycle") as exc_info:
            topological_sort({"root": ["a"], "a": ["b"], "b": ["a"]})
        assert exc_info.value.remaining == ("a", "b")

    def test_self_loop_detection(self) -> None:
        with pytest.raises(CycleDetectedError):
            topological_sort({"a": ["a"]})

    def test_cycle_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Cycle"):
            topological_sort({"a": ["b"], "b": ["c"], "c": ["a"]})


class TestDependencyGraph:
    @pytest.fixture
    def graph(self) -> DependencyGraph[str]:
        return DependencyGraph.from_requirements(
            [
                ("function", []),
                ("currying", ["function"]),
                ("types", []),
                ("function-types", ["function", "currying", "types"]),
                ("lifting", ["function"]),
            ],
        )

    def test_nodes_in_first_seen_order(self, graph: DependencyGraph[str]) -> None:
        assert graph.nodes == ("function", "currying", "types", "function-types", "lifting")
        assert len(graph) == 5
        assert "types" in graph
        assert "monad" not in graph

    def test_edges(self, graph: DependencyGraph[str]) -> None:
        assert ("function", "currying") in graph.edges
        assert ("types", "function-types") in graph.edges
        assert len(graph.edges) == 5

    def test_direct_relations(self, graph: DependencyGraph[str]) -> None:
        assert graph.prerequisites("function-types") == ("function", "currying", "types")
        assert graph.dependents("function") == ("currying", "function-types", "lifting")
        assert graph.prerequisites("unknown") == ()

    def test_roots_and_leaves(self, graph: DependencyGraph[str]) -> None:
        assert graph.roots() == ("function", "types")
        assert graph.leaves() == ("function-types", "lifting")

    def test_transitive_relations(self, graph: DependencyGraph[str]) -> None:
        assert graph.ancestors("function-types") == frozenset({"function", "currying", "types"})
        assert graph.descendants("function") == frozenset({"currying", "function-types", "lifting"})
        assert graph.ancestors("function") == frozenset()

    def test_topological_order(self, graph: DependencyGraph[str]) -> None:
        order = graph.topological_order()
        for src, dst in graph.edges:
            assert order.index(src) < order.index(dst)

    def test_prerequisite_before_its_own_entry(self) -> None:
        graph = DependencyGraph.from_requirements([("b", ["a"])])
        assert graph.nodes == ("b", "a")
        assert graph.roots() == ("a",)
