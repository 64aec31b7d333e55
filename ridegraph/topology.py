"""Topology descriptions: the vertices and weighted edges a graph is built from.

A topology is plain data, loaded from YAML and validated against the packaged
JSON schema before any graph is built:

    ```yaml
    vertices: [Juan, Maria, Makati]
    edges:
      - {source: Juan, target: Maria, weight: 5}
      - {source: Maria, target: Makati, weight: 9}
    defaults:            # Optional
      driver: Juan
      destination: Makati
    ```
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import jsonschema
import yaml

from ridegraph.lib.algorithms.base import Cost
from ridegraph.lib.graph import RouteGraph
from ridegraph.logging import get_logger

logger = get_logger(__name__)

_RECOGNIZED_KEYS = {"vertices", "edges", "defaults"}


@dataclass(frozen=True)
class TopologyEdge:
    """A two-way road between two locations."""

    source: str
    target: str
    weight: Cost


@dataclass
class Topology:
    """Vertices and edges of a location graph, plus optional request defaults.

    Attributes:
        vertices: Location names, in registration order.
        edges: Weighted undirected edges between listed vertices.
        driver: Default driver location for requests that omit one.
        destination: Default destination for requests that omit one.
    """

    vertices: List[str]
    edges: List[TopologyEdge] = field(default_factory=list)
    driver: Optional[str] = None
    destination: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Topology:
        """Validate a topology mapping and build a Topology from it.

        Raises:
            ValueError: On shape problems, duplicate vertices, or edges and
                defaults that name unlisted vertices.
            jsonschema.ValidationError: If the mapping violates the schema.
        """
        if not isinstance(data, dict):
            raise ValueError("The topology must be a mapping at top-level.")

        extra = set(data.keys()) - _RECOGNIZED_KEYS
        if extra:
            raise ValueError(
                f"Unrecognized top-level key(s) in topology: {', '.join(sorted(map(str, extra)))}. "
                f"Allowed keys are {sorted(_RECOGNIZED_KEYS)}"
            )

        # Early shape checks give clearer messages than the schema does
        if "vertices" in data and not isinstance(data["vertices"], list):
            raise ValueError("'vertices' must be a list")
        if "edges" in data and not isinstance(data["edges"], list):
            raise ValueError("'edges' must be a list")
        for entry in data.get("edges") or []:
            if not isinstance(entry, dict):
                raise ValueError(
                    "Each edge definition must be a mapping with 'source', 'target' and 'weight'"
                )

        jsonschema.validate(data, _load_schema())

        vertices: List[str] = list(data["vertices"])
        seen = set()
        for vertex in vertices:
            if vertex in seen:
                raise ValueError(f"Duplicate vertex '{vertex}' in topology")
            seen.add(vertex)

        edges = []
        for entry in data.get("edges") or []:
            for end in (entry["source"], entry["target"]):
                if end not in seen:
                    raise ValueError(
                        f"Edge {entry['source']}-{entry['target']} references unknown vertex '{end}'"
                    )
            edges.append(TopologyEdge(entry["source"], entry["target"], entry["weight"]))

        defaults = data.get("defaults") or {}
        for role in ("driver", "destination"):
            if role in defaults and defaults[role] not in seen:
                raise ValueError(f"Default {role} '{defaults[role]}' is not a vertex")

        return cls(
            vertices=vertices,
            edges=edges,
            driver=defaults.get("driver"),
            destination=defaults.get("destination"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "vertices": list(self.vertices),
            "edges": [
                {"source": e.source, "target": e.target, "weight": e.weight}
                for e in self.edges
            ],
        }
        defaults = {
            role: value
            for role, value in (("driver", self.driver), ("destination", self.destination))
            if value is not None
        }
        if defaults:
            data["defaults"] = defaults
        return data

    def build_graph(self, extra_vertices: Iterable[str] = ()) -> RouteGraph:
        """Build a fresh RouteGraph.

        Args:
            extra_vertices: Vertices registered before the topology's own, so
                that locations named only by a request still exist (isolated)
                in the graph.

        Returns:
            A new RouteGraph holding all vertices and edges.
        """
        graph = RouteGraph()
        for vertex in extra_vertices:
            graph.add_vertex(vertex)
        for vertex in self.vertices:
            graph.add_vertex(vertex)
        for edge in self.edges:
            graph.add_edge(edge.source, edge.target, weight=edge.weight)

        logger.debug(
            "Built graph with %d vertices and %d edges",
            graph.number_of_nodes(),
            graph.number_of_edges(),
        )
        return graph


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("ridegraph.schemas")
        .joinpath("topology.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_topology_yaml(yaml_str: str) -> Topology:
    """Parse and validate a topology YAML string.

    Raises:
        ValueError: If the YAML is empty, not a mapping, or inconsistent.
        jsonschema.ValidationError: If the document violates the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise ValueError("The provided topology YAML is empty.")
    return Topology.from_dict(data)


def load_topology_file(path: Union[str, Path]) -> Topology:
    """Read and validate a topology YAML file."""
    path = Path(path)
    logger.debug("Loading topology from %s", path)
    return load_topology_yaml(path.read_text(encoding="utf-8"))


def default_topology() -> Topology:
    """Return the packaged five-location sample topology."""
    yaml_str = (
        resources.files("ridegraph.data")
        .joinpath("default_topology.yaml")
        .read_text(encoding="utf-8")
    )
    return load_topology_yaml(yaml_str)
