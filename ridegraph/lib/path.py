from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Tuple

from ridegraph.lib.algorithms.base import Cost, NodeSeq
from ridegraph.lib.graph import NodeID


@dataclass(eq=False)
class Path:
    """
    Represents a single path through the graph.

    Attributes:
        nodes_seq (NodeSeq):
            The ordered vertices from source to target. A single-element
            sequence is the zero-length path from a vertex to itself.
        cost (Cost):
            The total edge weight along the path.
    """

    nodes_seq: NodeSeq
    cost: Cost

    def __post_init__(self) -> None:
        self.nodes_seq = tuple(self.nodes_seq)
        if not self.nodes_seq:
            raise ValueError("A path must contain at least one vertex.")

    def __getitem__(self, idx: int) -> NodeID:
        return self.nodes_seq[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes_seq)

    def __len__(self) -> int:
        """
        Return the number of vertices in the path.
        """
        return len(self.nodes_seq)

    @property
    def src_node(self) -> NodeID:
        """
        Return the first node in the path (the source node)."""
        return self.nodes_seq[0]

    @property
    def dst_node(self) -> NodeID:
        """
        Return the last node in the path (the destination node)."""
        return self.nodes_seq[-1]

    @property
    def hops(self) -> int:
        """
        Return the number of edges traversed by the path.
        """
        return len(self.nodes_seq) - 1

    @cached_property
    def edges_seq(self) -> Tuple[Tuple[NodeID, NodeID], ...]:
        """
        Return the consecutive (u, v) vertex pairs along the path.

        Returns:
            A tuple of pairs; empty if the path has a single vertex.
        """
        return tuple(zip(self.nodes_seq, self.nodes_seq[1:]))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (self.nodes_seq == other.nodes_seq) and (self.cost == other.cost)

    def __hash__(self) -> int:
        return hash((self.nodes_seq, self.cost))

    def __repr__(self) -> str:
        return f"Path({list(self.nodes_seq)}, cost={self.cost})"

    def join(self, other: Path) -> Path:
        """
        Append another path that starts where this one ends.

        The shared junction vertex appears once in the result and the costs
        are summed.

        Args:
            other: The path to append. Its source must equal this path's target.

        Returns:
            A new Path from this path's source to the other path's target.

        Raises:
            ValueError: If the paths do not meet at a common vertex.
        """
        if other.src_node != self.dst_node:
            raise ValueError(
                f"Cannot join path ending at '{self.dst_node}' with path "
                f"starting at '{other.src_node}'."
            )
        return Path(self.nodes_seq + other.nodes_seq[1:], self.cost + other.cost)
