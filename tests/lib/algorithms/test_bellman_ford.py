import random
from itertools import permutations

import networkx as nx
import pytest

from ridegraph.errors import NegativeCycleError, NoPathFoundError, UnknownVertexError
from ridegraph.lib.algorithms.base import INF_COST
from ridegraph.lib.algorithms.bellman_ford import (
    bellman_ford,
    find_path,
    resolve_path,
    shortest_path,
)
from ridegraph.lib.graph import RouteGraph


def _random_graph(seed: int, n_vertices: int = 6, n_edges: int = 10) -> RouteGraph:
    rng = random.Random(seed)
    g = RouteGraph()
    names = [f"N{i}" for i in range(n_vertices)]
    for name in names:
        g.add_vertex(name)
    for _ in range(n_edges):
        u, v = rng.sample(names, 2)
        g.add_edge(u, v, weight=rng.randint(1, 9))
    return g


def _brute_force_cost(g: RouteGraph, src, dst):
    best = INF_COST
    for nodes in nx.all_simple_paths(g, src, dst):
        cost = sum(g.edge_weight(u, v) for u, v in zip(nodes, nodes[1:]))
        best = min(best, cost)
    return best


class TestBellmanFord:
    def test_line(self, line1):
        costs, pred = bellman_ford(line1, "A")
        assert costs == {"A": 0, "B": 1, "C": 2, "D": 3}
        assert pred == {"B": "A", "C": "B", "D": "C"}

    def test_square_prefers_cheaper_side(self, square1):
        costs, pred = bellman_ford(square1, "A")
        assert costs == {"A": 0, "B": 1, "C": 2, "D": 2}
        assert pred["C"] == "B"

    def test_unreachable_vertex_is_infinite(self, star1):
        costs, pred = bellman_ford(star1, "A")
        assert costs["Z"] == INF_COST
        assert "Z" not in pred
        assert costs["B"] == 2

    def test_unknown_source(self, square1):
        with pytest.raises(UnknownVertexError, match="Source vertex 'X'"):
            bellman_ford(square1, "X")

    def test_equal_cost_tie_keeps_first_found(self, manila):
        # Jose->Makati direct (6) ties with Jose->Ana->Makati (2 + 4)
        costs, pred = bellman_ford(manila, "Jose")
        assert costs["Makati"] == 6
        assert pred["Makati"] == "Jose"

    def test_negative_edge_is_a_negative_cycle(self):
        g = RouteGraph()
        for v in ("A", "B", "C"):
            g.add_vertex(v)
        g.add_edge("A", "B", weight=2)
        g.add_edge("B", "C", weight=-1)

        with pytest.raises(NegativeCycleError, match="reachable from 'A'"):
            bellman_ford(g, "A")

    def test_negative_edge_not_reachable(self):
        g = RouteGraph()
        for v in ("A", "B", "C", "D"):
            g.add_vertex(v)
        g.add_edge("A", "B", weight=2)
        g.add_edge("C", "D", weight=-1)

        costs, _ = bellman_ford(g, "A")
        assert costs == {"A": 0, "B": 2, "C": INF_COST, "D": INF_COST}

    def test_negative_self_loop_on_single_vertex(self):
        g = RouteGraph()
        g.add_vertex("A")
        g.add_edge("A", "A", weight=-1)
        with pytest.raises(NegativeCycleError):
            bellman_ford(g, "A")

    def test_zero_weight_edges(self):
        g = RouteGraph()
        for v in ("A", "B", "C"):
            g.add_vertex(v)
        g.add_edge("A", "B", weight=0)
        g.add_edge("B", "C", weight=0)

        costs, pred = bellman_ford(g, "A")
        assert costs == {"A": 0, "B": 0, "C": 0}
        assert pred == {"B": "A", "C": "B"}


class TestShortestPath:
    def test_found(self, manila):
        path = shortest_path(manila, "Juan", "Jose")
        assert path.nodes_seq == ("Juan", "Maria", "Jose")
        assert path.cost == 8

    def test_same_vertex(self, manila, star1):
        for g in (manila, star1):
            for v in g.vertices():
                path = shortest_path(g, v, v)
                assert path.nodes_seq == (v,)
                assert path.cost == 0

    def test_unreachable_returns_none(self, star1):
        assert shortest_path(star1, "A", "Z") is None
        assert shortest_path(star1, "Z", "A") is None

    def test_find_path_raises_when_unreachable(self, star1):
        with pytest.raises(NoPathFoundError, match="from 'A' to 'Z'") as exc_info:
            find_path(star1, "A", "Z")
        assert exc_info.value.src == "A"
        assert exc_info.value.dst == "Z"

    def test_unknown_target(self, square1):
        with pytest.raises(UnknownVertexError, match="Target vertex 'X'"):
            shortest_path(square1, "A", "X")

    def test_parallel_edges_use_cheapest(self, line1):
        path = find_path(line1, "D", "A")
        assert path.nodes_seq == ("D", "C", "B", "A")
        assert path.cost == 3

    def test_symmetric_distances(self, manila):
        for a, b in permutations(manila.vertices(), 2):
            assert find_path(manila, a, b).cost == find_path(manila, b, a).cost

    @pytest.mark.parametrize("seed", range(8))
    def test_optimal_against_brute_force(self, seed):
        g = _random_graph(seed)
        for src, dst in permutations(g.vertices(), 2):
            path = shortest_path(g, src, dst)
            expected = _brute_force_cost(g, src, dst)
            if expected == INF_COST:
                assert path is None
                continue

            assert path.src_node == src
            assert path.dst_node == dst
            for u, v in path.edges_seq:
                assert g.has_edge(u, v)
            assert path.cost == expected
            assert sum(g.edge_weight(u, v) for u, v in path.edges_seq) == expected

    @pytest.mark.parametrize("seed", range(3))
    def test_matches_networkx_dijkstra(self, seed):
        g = _random_graph(seed, n_vertices=12, n_edges=30)
        src = g.vertices()[0]
        costs, _ = bellman_ford(g, src)
        expected = nx.single_source_dijkstra_path_length(g, src, weight="weight")
        assert {v: c for v, c in costs.items() if c != INF_COST} == expected


def test_resolve_path_detects_predecessor_loop():
    costs = {"A": 0, "B": -2, "C": -3}
    pred = {"B": "C", "C": "B"}
    with pytest.raises(NegativeCycleError):
        resolve_path("A", "B", costs, pred)


def test_resolve_path_unknown_target():
    with pytest.raises(UnknownVertexError):
        resolve_path("A", "Q", {"A": 0}, {})
