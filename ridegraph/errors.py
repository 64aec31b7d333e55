"""Exceptions raised by ridegraph.

Each error also derives from the builtin the rest of the code base would
raise for the same condition (``KeyError`` for lookups, ``ValueError`` for
bad values), so callers catching builtins keep working.
"""

from __future__ import annotations

from typing import Hashable, Optional


class RouteError(Exception):
    """Base exception for route calculation failures."""


class InvalidRequestError(RouteError, ValueError):
    """Raised when a route request is missing fields or malformed."""


class UnknownVertexError(RouteError, KeyError):
    """Raised when an edge or a path query names an unregistered vertex."""

    def __init__(self, vertex: Hashable, role: Optional[str] = None) -> None:
        self.vertex = vertex
        self.role = role
        prefix = f"{role.capitalize()} vertex" if role else "Vertex"
        super().__init__(f"{prefix} '{vertex}' does not exist.")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class NoPathFoundError(RouteError, ValueError):
    """Raised when no path connects the requested source and target."""

    def __init__(self, src: Hashable, dst: Hashable) -> None:
        self.src = src
        self.dst = dst
        super().__init__(f"No path found from '{src}' to '{dst}'.")


class NegativeCycleError(RouteError, ValueError):
    """Raised when relaxation still improves after |V| - 1 rounds."""

    def __init__(self, src: Hashable) -> None:
        self.src = src
        super().__init__(f"Negative-weight cycle reachable from '{src}'.")
