"""Graph primitives and algorithms for ridegraph."""

from ridegraph.lib.graph import RouteGraph
from ridegraph.lib.path import Path

__all__ = [
    "RouteGraph",
    "Path",
]
