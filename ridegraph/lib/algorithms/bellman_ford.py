"""Single-source shortest paths by Bellman-Ford relaxation.

Relaxation tolerates negative edge weights as long as no negative cycle is
reachable from the source. In an undirected graph every negative edge is
itself such a cycle (u -> v -> u), so the cycle guard rejects it.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ridegraph.errors import NegativeCycleError, NoPathFoundError, UnknownVertexError
from ridegraph.lib.algorithms.base import INF_COST, Cost
from ridegraph.lib.graph import NodeID, RouteGraph
from ridegraph.lib.path import Path
from ridegraph.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(
    graph: RouteGraph,
    src_node: NodeID,
    detect_negative_cycles: bool = True,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, NodeID]]:
    """
    Compute minimal-weight distances from a source to every registered vertex.

    Performs up to |V| - 1 rounds. Each round visits vertices in registration
    order and, for every vertex with a finite distance, relaxes all of its
    edges. Relaxation is strict, so among equal-cost alternatives the first
    one found is kept. Stops early once a round makes no update.

    Args:
        graph: The undirected graph (RouteGraph).
        src_node: Source vertex.
        detect_negative_cycles: If True, run one extra round and fail if any
            distance still improves.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps every registered vertex to its minimal cost from
            src_node; unreachable vertices map to infinity.
          - pred: Maps each reached vertex other than src_node to the vertex
            it was reached from.

    Raises:
        UnknownVertexError: If src_node is not registered.
        NegativeCycleError: If a negative cycle is reachable and detection is on.
    """
    outgoing_adjacencies = graph._adj
    if src_node not in outgoing_adjacencies:
        raise UnknownVertexError(src_node, role="source")

    vertices = list(outgoing_adjacencies)
    costs: Dict[NodeID, Cost] = {node_id: INF_COST for node_id in vertices}
    costs[src_node] = 0
    pred: Dict[NodeID, NodeID] = {}

    def relax_all() -> bool:
        updated = False
        for node_id in vertices:
            if costs[node_id] == INF_COST:
                continue
            for neighbor_id, edges_map in outgoing_adjacencies[node_id].items():
                for e_attr in edges_map.values():
                    new_cost = costs[node_id] + e_attr["weight"]
                    if new_cost < costs[neighbor_id]:
                        costs[neighbor_id] = new_cost
                        pred[neighbor_id] = node_id
                        updated = True
        return updated

    converged = False
    rounds = 0
    for _ in range(len(vertices) - 1):
        rounds += 1
        if not relax_all():
            converged = True
            break

    if detect_negative_cycles and not converged and relax_all():
        raise NegativeCycleError(src_node)

    logger.debug(
        "Bellman-Ford from %s: %d vertices, %d rounds", src_node, len(vertices), rounds
    )
    return costs, pred


def resolve_path(
    src_node: NodeID,
    dst_node: NodeID,
    costs: Dict[NodeID, Cost],
    pred: Dict[NodeID, NodeID],
) -> Optional[Path]:
    """
    Rebuild the path to dst_node from a bellman_ford() result.

    Args:
        src_node: The source the result was computed from.
        dst_node: The target vertex.
        costs: Distances returned by bellman_ford().
        pred: Predecessors returned by bellman_ford().

    Returns:
        The shortest Path, a single-vertex Path when src_node == dst_node,
        or None when dst_node is unreachable.

    Raises:
        UnknownVertexError: If dst_node is not part of the result.
        NegativeCycleError: If the predecessor chain loops.
    """
    if dst_node not in costs:
        raise UnknownVertexError(dst_node, role="target")
    if dst_node == src_node:
        return Path((src_node,), 0)
    if costs[dst_node] == INF_COST:
        return None

    nodes = [dst_node]
    node_id = dst_node
    while node_id != src_node:
        node_id = pred[node_id]
        nodes.append(node_id)
        if len(nodes) > len(costs):
            # Only reachable with detection disabled
            raise NegativeCycleError(src_node)
    nodes.reverse()
    return Path(tuple(nodes), costs[dst_node])


def shortest_path(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: NodeID,
    detect_negative_cycles: bool = True,
) -> Optional[Path]:
    """
    Return the minimal-weight path between two vertices, or None if unreachable.

    Raises:
        UnknownVertexError: If either vertex is not registered.
        NegativeCycleError: If a negative cycle is reachable and detection is on.
    """
    if dst_node not in graph:
        raise UnknownVertexError(dst_node, role="target")
    costs, pred = bellman_ford(graph, src_node, detect_negative_cycles)
    return resolve_path(src_node, dst_node, costs, pred)


def find_path(
    graph: RouteGraph,
    src_node: NodeID,
    dst_node: NodeID,
    detect_negative_cycles: bool = True,
) -> Path:
    """
    Like shortest_path(), but raise NoPathFoundError when dst_node is unreachable.
    """
    path = shortest_path(graph, src_node, dst_node, detect_negative_cycles)
    if path is None:
        raise NoPathFoundError(src_node, dst_node)
    return path
