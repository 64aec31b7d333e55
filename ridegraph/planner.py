"""Route planning entry point.

Takes a driver, a destination and an ordered list of passengers, builds a
fresh graph from a topology, and returns the composed route together with
graph statistics and per-passenger match percentages.

Example:
    from ridegraph import default_topology, plan_route_from_payload

    report = plan_route_from_payload({"passengers": ["Jose"]}, default_topology())
    report.to_dict()["route"]  # ['Juan', 'Maria', 'Jose', 'Makati']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ridegraph.config import ROUTE_CONFIG, RouteConfig
from ridegraph.errors import InvalidRequestError
from ridegraph.lib.algorithms.match import match_percentages
from ridegraph.lib.algorithms.metrics import GraphStats, graph_stats
from ridegraph.lib.algorithms.route import Route, compose_route
from ridegraph.logging import get_logger
from ridegraph.topology import Topology, default_topology

logger = get_logger(__name__)


def _require_location(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidRequestError(f"'{field_name}' must be a non-empty string.")
    return value


@dataclass
class RouteRequest:
    """A validated route request.

    Attributes:
        driver: Start location.
        destination: Final location.
        passengers: Pickup locations in visiting order.
    """

    driver: str
    destination: str
    passengers: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, payload: Any, topology: Optional[Topology] = None
    ) -> RouteRequest:
        """Validate a request payload.

        ``driver`` and ``destination`` fall back to the topology defaults when
        the payload omits them.

        Raises:
            InvalidRequestError: If the payload is not a mapping, the passenger
                list is missing or not a list, or any location is not a
                non-empty string.
        """
        if not isinstance(payload, Mapping):
            raise InvalidRequestError("Request body must be a JSON object.")

        passengers = payload.get("passengers")
        if passengers is None or not isinstance(passengers, list):
            raise InvalidRequestError("Passengers must be provided as an array.")
        for idx, passenger in enumerate(passengers):
            _require_location(passenger, f"passengers[{idx}]")

        driver = payload.get("driver")
        if driver is None and topology is not None:
            driver = topology.driver
        destination = payload.get("destination")
        if destination is None and topology is not None:
            destination = topology.destination

        return cls(
            driver=_require_location(driver, "driver"),
            destination=_require_location(destination, "destination"),
            passengers=list(passengers),
        )


@dataclass
class RouteReport:
    """Result of a planned route.

    Attributes:
        message: Human-readable summary line.
        route: The composed route.
        stats: Vertex/edge counts and radius of the graph.
        match_percentages: Passenger to match percentage in [0, 100].
    """

    message: str
    route: Route
    stats: GraphStats
    match_percentages: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-shaped report."""
        data: Dict[str, Any] = {
            "message": self.message,
            "route": list(self.route.nodes),
            "route_cost": self.route.cost,
        }
        data.update(self.stats.to_dict())
        data["match_percentages"] = dict(self.match_percentages)
        return data


def plan_route(
    topology: Topology,
    request: RouteRequest,
    config: Optional[RouteConfig] = None,
) -> RouteReport:
    """Plan a route for one request on a freshly built graph.

    Raises:
        UnknownVertexError: If the topology itself is inconsistent.
        NoPathFoundError: If any leg of the route has no connecting path.
        NegativeCycleError: If the topology contains a negative edge.
    """
    config = config or ROUTE_CONFIG
    logger.info(
        "Planning route %s -> %s with %d passenger(s)",
        request.driver,
        request.destination,
        len(request.passengers),
    )

    graph = topology.build_graph(
        extra_vertices=[request.driver, request.destination, *request.passengers]
    )
    route = compose_route(
        graph,
        request.driver,
        request.passengers,
        request.destination,
        detect_negative_cycles=config.detect_negative_cycles,
    )
    stats = graph_stats(graph, detect_negative_cycles=config.detect_negative_cycles)
    matches = match_percentages(
        graph,
        route,
        request.passengers,
        zero_distance_match=config.zero_distance_match,
        detect_negative_cycles=config.detect_negative_cycles,
    )

    logger.info("Route planned: %s (cost %s)", " -> ".join(route.nodes), route.cost)
    return RouteReport(
        message=config.message,
        route=route,
        stats=stats,
        match_percentages=matches,
    )


def plan_route_from_payload(
    payload: Any,
    topology: Optional[Topology] = None,
    config: Optional[RouteConfig] = None,
) -> RouteReport:
    """Validate a raw request payload and plan it.

    Uses the packaged sample topology when none is given.
    """
    if topology is None:
        topology = default_topology()
    request = RouteRequest.from_dict(payload, topology)
    return plan_route(topology, request, config)
