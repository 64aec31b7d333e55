"""Shared graph fixtures."""

from __future__ import annotations

import logging

import pytest

from ridegraph.lib.graph import RouteGraph
from ridegraph.logging import set_global_log_level
from ridegraph.topology import default_topology


@pytest.fixture(autouse=True)
def _fresh_logging():
    yield
    # CLI and logging tests change the global level
    set_global_log_level(logging.INFO)


@pytest.fixture
def line1():
    # Weight:
    #     [1]      [1,3]      [1]
    #  A───────B═════════C───────D

    g = RouteGraph()
    for v in ("A", "B", "C", "D"):
        g.add_vertex(v)

    g.add_edge("A", "B", weight=1, key=0)
    g.add_edge("B", "C", weight=1, key=1)
    g.add_edge("B", "C", weight=3, key=2)
    g.add_edge("C", "D", weight=1, key=3)
    return g


@pytest.fixture
def square1():
    # Weight:
    #       [1]        [1]
    #   ┌─────────B─────────┐
    #   │                   │
    #   A                   C
    #   │                   │
    #   │   [2]        [2]  │
    #   └─────────D─────────┘

    g = RouteGraph()
    for v in ("A", "B", "C", "D"):
        g.add_vertex(v)

    g.add_edge("A", "B", weight=1, key=0)
    g.add_edge("B", "C", weight=1, key=1)
    g.add_edge("A", "D", weight=2, key=2)
    g.add_edge("D", "C", weight=2, key=3)
    return g


@pytest.fixture
def star1():
    # Hub H with four spokes of weight 1; isolated vertex Z.

    g = RouteGraph()
    for v in ("H", "A", "B", "C", "D", "Z"):
        g.add_vertex(v)
    for v in ("A", "B", "C", "D"):
        g.add_edge("H", v, weight=1)
    return g


@pytest.fixture
def manila():
    # Juan–Maria(5) Juan–Jose(10) Juan–Ana(8) Maria–Jose(3) Maria–Ana(7)
    # Jose–Ana(2) Ana–Makati(4) Jose–Makati(6) Maria–Makati(9)
    return default_topology().build_graph()
