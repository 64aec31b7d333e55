"""Multi-stop route composition.

A route is the chain of shortest paths driver -> passenger_1 -> ... ->
passenger_n -> destination, visited strictly in the order given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from ridegraph.errors import NoPathFoundError
from ridegraph.lib.algorithms.base import Cost, NodeSeq
from ridegraph.lib.algorithms.bellman_ford import find_path
from ridegraph.lib.graph import NodeID, RouteGraph
from ridegraph.lib.path import Path
from ridegraph.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Route:
    """
    A composed end-to-end route.

    Attributes:
        path: The concatenated path with junction vertices listed once.
        legs: The per-waypoint shortest paths the route was built from.
    """

    path: Path
    legs: List[Path] = field(default_factory=list)

    @property
    def nodes(self) -> NodeSeq:
        return self.path.nodes_seq

    @property
    def cost(self) -> Cost:
        return self.path.cost

    @property
    def src_node(self) -> NodeID:
        return self.path.src_node

    @property
    def dst_node(self) -> NodeID:
        return self.path.dst_node


def compose_route(
    graph: RouteGraph,
    driver: NodeID,
    passengers: Iterable[NodeID],
    destination: NodeID,
    detect_negative_cycles: bool = True,
) -> Route:
    """
    Chain shortest paths through the passengers in the given order.

    Args:
        graph: The location graph.
        driver: Start vertex.
        passengers: Pickup vertices, visited in exactly this order.
        destination: Final vertex.
        detect_negative_cycles: Forwarded to each shortest-path query.

    Returns:
        The composed Route.

    Raises:
        UnknownVertexError: If any waypoint is not registered.
        NoPathFoundError: If any leg has no connecting path.
    """
    waypoints = [driver, *passengers, destination]
    legs: List[Path] = []
    path = Path((driver,), 0)

    for current, nxt in zip(waypoints, waypoints[1:]):
        try:
            leg = find_path(graph, current, nxt, detect_negative_cycles)
        except NoPathFoundError:
            logger.warning(
                "Route %s -> %s broken at leg %s -> %s", driver, destination, current, nxt
            )
            raise
        legs.append(leg)
        path = path.join(leg)

    logger.debug(
        "Composed route %s with cost %s over %d legs", list(path.nodes_seq), path.cost, len(legs)
    )
    return Route(path=path, legs=legs)
