"""ridegraph: multi-stop ride-share routing over a weighted location graph.

Primary API:
    plan_route() - Compose a driver -> passengers -> destination route and
        report graph statistics and passenger match percentages
    RouteRequest, RouteReport - Request and result of plan_route()
    Topology - Vertices and weighted edges a graph is built from
    RouteGraph, Path - Graph model and path type
    shortest_path() / find_path() - Bellman-Ford shortest paths

Example:
    from ridegraph import RouteRequest, default_topology, plan_route

    topo = default_topology()
    report = plan_route(topo, RouteRequest("Juan", "Makati", ["Jose"]))
    report.route.nodes                 # ('Juan', 'Maria', 'Jose', 'Makati')
    report.match_percentages["Jose"]   # 42.857...
"""

from __future__ import annotations

from ridegraph import cli, logging
from ridegraph._version import __version__
from ridegraph.config import ROUTE_CONFIG, RouteConfig
from ridegraph.errors import (
    InvalidRequestError,
    NegativeCycleError,
    NoPathFoundError,
    RouteError,
    UnknownVertexError,
)
from ridegraph.lib.algorithms.bellman_ford import find_path, shortest_path
from ridegraph.lib.algorithms.match import match_percentages
from ridegraph.lib.algorithms.metrics import GraphStats, graph_stats, radius
from ridegraph.lib.algorithms.route import Route, compose_route
from ridegraph.lib.graph import RouteGraph
from ridegraph.lib.path import Path
from ridegraph.planner import (
    RouteReport,
    RouteRequest,
    plan_route,
    plan_route_from_payload,
)
from ridegraph.topology import (
    Topology,
    TopologyEdge,
    default_topology,
    load_topology_file,
    load_topology_yaml,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "RouteGraph",
    "Path",
    "Route",
    "Topology",
    "TopologyEdge",
    # Planning (primary API)
    "plan_route",
    "plan_route_from_payload",
    "RouteRequest",
    "RouteReport",
    # Algorithms
    "shortest_path",
    "find_path",
    "compose_route",
    "graph_stats",
    "GraphStats",
    "radius",
    "match_percentages",
    # Topology loading
    "default_topology",
    "load_topology_file",
    "load_topology_yaml",
    # Configuration
    "RouteConfig",
    "ROUTE_CONFIG",
    # Errors
    "RouteError",
    "InvalidRequestError",
    "UnknownVertexError",
    "NoPathFoundError",
    "NegativeCycleError",
    # Utilities
    "cli",
    "logging",
]
