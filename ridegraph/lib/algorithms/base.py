from __future__ import annotations

from typing import Tuple, Union

from ridegraph.lib.graph import NodeID

#: Represents numeric cost in the network (e.g. distance, travel time, etc.).
Cost = Union[int, float]

#: An ordered sequence of vertices from a source to a target.
NodeSeq = Tuple[NodeID, ...]

#: Distance assigned to vertices not reached from the source.
INF_COST = float("inf")
