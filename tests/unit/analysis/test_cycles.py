"""Unit tests for cycle detection."""

from wsgraph.analysis.cycles import cycles_equal, detect_cycles, format_cycle


class TestDetectCycles:
    def test_no_cycle(self, graph_factory):
        graph = graph_factory({"a": ["b"], "b": ["c"], "c": []})
        assert detect_cycles(graph) == []

    def test_two_node_cycle(self, graph_factory):
        graph = graph_factory({"a": ["b"], "b": ["a"]})
        cycles = detect_cycles(graph)

        assert len(cycles) == 1
        assert set(cycles[0]) == {"a", "b"}

    def test_cycle_sequence_follows_edges(self, graph_factory):
        graph = graph_factory({"a": ["b"], "b": ["c"], "c": ["a"]})
        (cycle,) = detect_cycles(graph)

        for i, node_id in enumerate(cycle):
            nxt = cycle[(i + 1) % len(cycle)]
            assert nxt in graph.dependencies_of(node_id)

    def test_cycle_is_not_rediscovered_from_other_entry_points(self, graph_factory):
        graph = graph_factory(
            {
                "a": ["b"],
                "b": ["c"],
                "c": ["a"],
                "x": ["b"],
                "y": ["c"],
                "z": ["a", "c"],
            }
        )
        cycles = detect_cycles(graph)

        assert len(cycles) == 1
        assert set(cycles[0]) == {"a", "b", "c"}

    def test_distinct_cycles_are_all_reported(self, graph_factory):
        graph = graph_factory(
            {"a": ["b"], "b": ["a"], "c": ["d"], "d": ["e"], "e": ["c"]}
        )
        cycles = detect_cycles(graph)

        assert sorted(sorted(c) for c in cycles) == [["a", "b"], ["c", "d", "e"]]

    def test_overlapping_cycles_with_different_node_sets(self, graph_factory):
        graph = graph_factory({"a": ["b"], "b": ["a", "c"], "c": ["a"]})
        cycles = detect_cycles(graph)

        assert sorted(sorted(c) for c in cycles) == [["a", "b"], ["a", "b", "c"]]

    def test_self_loop(self, graph_factory):
        graph = graph_factory({"a": ["a"]})
        assert detect_cycles(graph) == [["a"]]

    def test_dangling_edges_are_leaves(self, graph_factory):
        graph = graph_factory({"a": ["ghost"], "b": ["a", "other-ghost"]})
        assert detect_cycles(graph) == []

    def test_deterministic(self, graph_factory):
        edges = {"d": ["a"], "a": ["b", "c"], "b": ["a"], "c": ["d"]}
        first = detect_cycles(graph_factory(edges))
        second = detect_cycles(graph_factory(dict(reversed(list(edges.items())))))
        assert first == second

    def test_empty_graph(self, graph_factory):
        assert detect_cycles(graph_factory({})) == []


class TestCyclesEqual:
    def test_rotation(self):
        assert cycles_equal(["a", "b", "c"], ["b", "c", "a"])

    def test_reflection(self):
        assert cycles_equal(["a", "b", "c"], ["c", "b", "a"])

    def test_different_nodes(self):
        assert not cycles_equal(["a", "b"], ["a", "c"])
        assert not cycles_equal(["a", "b"], ["a", "b", "c"])


def test_format_cycle():
    assert format_cycle(["a", "b"]) == "a → b → a"
    assert format_cycle([]) == ""
