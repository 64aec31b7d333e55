from __future__ import annotations

from numbers import Real
from typing import Any, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from ridegraph.errors import UnknownVertexError

NodeID = Hashable
EdgeKey = Hashable
Adjacency = List[Tuple[NodeID, Real]]


class RouteGraph(nx.MultiGraph):
    """
    An undirected multigraph of named locations joined by weighted edges.

    This class enforces:
      - Vertices are non-empty strings, whether added through add_vertex(),
        add_node() or add_nodes_from().
      - Vertices must be registered before any edge touches them.
      - Registering a vertex twice is a no-op.
      - Every edge carries a numeric ``weight`` and is reachable from both
        endpoints with that weight.
      - Parallel edges between the same pair are all kept, each under its own
        key.

    Inherits from:
        networkx.MultiGraph
    """

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """
        Add a vertex, rejecting names that are not non-empty strings.

        Args:
            node_for_adding (NodeID): The location name.
            **attr: Arbitrary vertex attributes.

        Raises:
            ValueError: If the name is not a non-empty string.
        """
        if not isinstance(node_for_adding, str) or not node_for_adding:
            raise ValueError(
                f"Vertex must be a non-empty string, got {node_for_adding!r}."
            )
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """
        Add vertices one by one through add_node().

        Accepts bare names or (name, attr_dict) pairs, as networkx does.
        """
        for item in nodes_for_adding:
            is_pair = isinstance(item, tuple) and len(item) == 2
            if is_pair and isinstance(item[1], dict):
                self.add_node(item[0], **{**attr, **item[1]})
            else:
                self.add_node(item, **attr)

    def add_vertex(self, vertex: NodeID) -> None:
        """
        Register a vertex with an empty adjacency, unless already present.

        Raises:
            ValueError: If the name is not a non-empty string.
        """
        if vertex in self:
            return
        self.add_node(vertex)

    def vertices(self) -> List[NodeID]:
        """
        Return registered vertices in registration order.
        """
        return list(self._node)

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeKey] = None,
        weight: Real = 1,
        **attr: Any,
    ) -> EdgeKey:
        """
        Add an undirected weighted edge between two registered vertices.

        Args:
            u_for_edge (NodeID): One endpoint. Must already be registered.
            v_for_edge (NodeID): The other endpoint. Must already be registered.
            key (Optional[EdgeKey]): The edge key. If None, networkx assigns
                the lowest unused integer for this pair. An existing key
                between the two endpoints updates that edge in place.
            weight (Real): Edge weight. Defaults to 1.
            **attr: Arbitrary extra edge attributes.

        Returns:
            EdgeKey: The key associated with this new edge.

        Raises:
            UnknownVertexError: If either endpoint is not registered.
            ValueError: If the weight is not numeric.
        """
        if u_for_edge not in self:
            raise UnknownVertexError(u_for_edge, role="source")
        if v_for_edge not in self:
            raise UnknownVertexError(v_for_edge, role="target")
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise ValueError(f"Edge weight must be a number, got {weight!r}.")

        return super().add_edge(u_for_edge, v_for_edge, key=key, weight=weight, **attr)

    #
    # Convenience methods
    #
    def adjacency_list(self, vertex: NodeID) -> Adjacency:
        """
        Return the (neighbor, weight) pairs of a vertex, grouped by neighbor.

        Neighbors appear in the order their first edge was added, and every
        parallel edge to a neighbor is listed right after the first one, in
        insertion order. This is the order Bellman-Ford relaxes edges in. An
        unknown vertex has an empty list.

        Args:
            vertex (NodeID): The vertex to look up.

        Returns:
            Adjacency: A list of (neighbor, weight) tuples.
        """
        if vertex not in self._adj:
            return []
        return [
            (neighbor, attr["weight"])
            for neighbor, edges_map in self._adj[vertex].items()
            for attr in edges_map.values()
        ]

    def edge_weight(self, u: NodeID, v: NodeID) -> Real:
        """
        Return the smallest weight among the edges joining u and v.

        Raises:
            KeyError: If u and v are not adjacent.
        """
        if u not in self._adj or v not in self._adj[u]:
            raise KeyError(f"No edge between '{u}' and '{v}'.")
        return min(attr["weight"] for attr in self._adj[u][v].values())
