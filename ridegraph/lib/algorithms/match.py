"""Per-passenger match percentages.

A passenger scores ``100 - leg / total * 100`` (floored at 0), where ``total``
is the weight of the whole composed route and ``leg`` the weight of the
shortest path from the route's start to that passenger.
"""

from __future__ import annotations

from typing import Dict, Iterable

from ridegraph.errors import NoPathFoundError
from ridegraph.lib.algorithms.bellman_ford import bellman_ford, resolve_path
from ridegraph.lib.algorithms.route import Route
from ridegraph.lib.graph import NodeID, RouteGraph
from ridegraph.logging import get_logger

logger = get_logger(__name__)


def match_percentages(
    graph: RouteGraph,
    route: Route,
    passengers: Iterable[NodeID],
    zero_distance_match: float = 100.0,
    detect_negative_cycles: bool = True,
) -> Dict[NodeID, float]:
    """
    Score each passenger's pickup detour against the full route.

    Args:
        graph: The graph the route was composed on.
        route: The composed route.
        passengers: Passengers to score; duplicates are scored once.
        zero_distance_match: Value reported for every passenger when the
            route has zero total weight.
        detect_negative_cycles: Forwarded to bellman_ford().

    Returns:
        Mapping of passenger to a percentage in [0, 100].

    Raises:
        NoPathFoundError: If a passenger is unreachable from the route start.
    """
    total = route.cost
    passengers = list(dict.fromkeys(passengers))
    if total == 0:
        logger.debug(
            "Route has zero total weight; using %s for %d passengers",
            zero_distance_match,
            len(passengers),
        )
        return {passenger: float(zero_distance_match) for passenger in passengers}

    # Every leg starts at the same vertex, so one run serves all passengers
    costs, pred = bellman_ford(graph, route.src_node, detect_negative_cycles)

    result: Dict[NodeID, float] = {}
    for passenger in passengers:
        leg = resolve_path(route.src_node, passenger, costs, pred)
        if leg is None:
            raise NoPathFoundError(route.src_node, passenger)
        pct = 100.0 - (leg.cost / total) * 100.0
        result[passenger] = min(100.0, max(0.0, pct))
    return result
