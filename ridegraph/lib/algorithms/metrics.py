"""Descriptive graph metrics: counts, eccentricity and radius.

Eccentricity here counts hops: the number of edges on the minimal-weight
path to each other vertex, not the weight of that path.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isinf
from typing import Any, Dict, Optional

from ridegraph.lib.algorithms.base import INF_COST, Cost
from ridegraph.lib.algorithms.bellman_ford import bellman_ford, resolve_path
from ridegraph.lib.graph import NodeID, RouteGraph


def vertex_count(graph: RouteGraph) -> int:
    return graph.number_of_nodes()


def edge_count(graph: RouteGraph) -> int:
    # Each undirected edge sits in both endpoints' adjacency, counted once here
    return graph.number_of_edges()


def eccentricity(
    graph: RouteGraph, vertex: NodeID, detect_negative_cycles: bool = True
) -> Cost:
    """
    Return the largest hop count from vertex to any other vertex.

    Args:
        graph: The location graph.
        vertex: The vertex to measure from.
        detect_negative_cycles: Forwarded to bellman_ford().

    Returns:
        The hop count, infinity if some vertex is unreachable, or 0 if the
        graph has no other vertex.
    """
    costs, pred = bellman_ford(graph, vertex, detect_negative_cycles)
    max_hops: Cost = 0
    for target in costs:
        if target == vertex:
            continue
        path = resolve_path(vertex, target, costs, pred)
        if path is None:
            return INF_COST
        max_hops = max(max_hops, path.hops)
    return max_hops


def eccentricities(
    graph: RouteGraph, detect_negative_cycles: bool = True
) -> Dict[NodeID, Cost]:
    """
    Return the eccentricity of every vertex, in registration order.
    """
    return {
        vertex: eccentricity(graph, vertex, detect_negative_cycles)
        for vertex in graph.vertices()
    }


def radius(graph: RouteGraph, detect_negative_cycles: bool = True) -> Cost:
    """
    Return the minimum eccentricity over all vertices.

    Costs one Bellman-Ford run per vertex, so O(V^2 * E) overall.

    Raises:
        ValueError: If the graph has no vertices.
    """
    if graph.number_of_nodes() == 0:
        raise ValueError("Radius is undefined for a graph without vertices.")
    return min(eccentricities(graph, detect_negative_cycles).values())


@dataclass
class GraphStats:
    """Vertex/edge counts and radius of a graph.

    Attributes:
        vertex_count: Number of registered vertices.
        edge_count: Number of registered undirected edges.
        radius: Minimum hop-count eccentricity; infinity if disconnected.
    """

    vertex_count: int
    edge_count: int
    radius: Cost

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-safe dict; an infinite radius becomes None."""
        radius_val: Optional[Cost] = None if isinf(self.radius) else self.radius
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "radius": radius_val,
        }


def graph_stats(graph: RouteGraph, detect_negative_cycles: bool = True) -> GraphStats:
    return GraphStats(
        vertex_count=vertex_count(graph),
        edge_count=edge_count(graph),
        radius=radius(graph, detect_negative_cycles),
    )
