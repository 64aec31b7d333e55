"""Command-line interface for ridegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from math import isinf
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from ridegraph.lib.algorithms.metrics import eccentricities, graph_stats
from ridegraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from ridegraph.planner import plan_route_from_payload
from ridegraph.topology import Topology, default_topology, load_topology_file

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return a cost with up to three decimals, trailing zeros trimmed.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; inf -> "inf".
    """
    v = float(value)
    if isinf(v):
        return "inf"
    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _load_topology(path: Optional[Path]) -> Topology:
    if path is None:
        return default_topology()
    return load_topology_file(path)


def _build_payload(
    passengers: List[str],
    driver: Optional[str],
    destination: Optional[str],
    request_path: Optional[Path],
) -> Dict[str, Any]:
    """Merge a JSON request file with command-line overrides."""
    if request_path is not None:
        payload = json.loads(request_path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            # Let request validation report it
            return payload
        if passengers:
            payload["passengers"] = passengers
    else:
        payload = {"passengers": passengers}
    if driver is not None:
        payload["driver"] = driver
    if destination is not None:
        payload["destination"] = destination
    return payload


def _plan(
    passengers: List[str],
    topology_path: Optional[Path],
    driver: Optional[str],
    destination: Optional[str],
    request_path: Optional[Path],
    output: Optional[Path],
) -> None:
    """Plan one route and print the JSON report."""
    start = perf_counter()
    try:
        topology = _load_topology(topology_path)
        payload = _build_payload(passengers, driver, destination, request_path)
        report = plan_route_from_payload(payload, topology)
        json_str = json.dumps(report.to_dict(), indent=2)

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(json_str)
            logger.info(f"Report written to: {output}")
        print(json_str)

        logger.info(f"Route planned in {_format_duration(perf_counter() - start)}")
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to plan route: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to plan route: {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)


def _inspect(topology_path: Optional[Path]) -> None:
    """Print vertex/edge counts, radius and per-vertex eccentricity."""
    try:
        topology = _load_topology(topology_path)
        graph = topology.build_graph()
        stats = graph_stats(graph)
        ecc = eccentricities(graph)
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"ERROR: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect topology: {type(e).__name__}: {e}")
        print(
            f"ERROR: Failed to inspect topology: {type(e).__name__}: {e}",
            file=sys.stderr,
        )
        sys.exit(1)

    print("TOPOLOGY")
    print(f"   Vertices: {stats.vertex_count:,}")
    print(f"   Edges: {stats.edge_count:,}")
    print(f"   Radius: {_format_cost(stats.radius)}")
    if topology.driver or topology.destination:
        print(f"   Default driver: {topology.driver or '-'}")
        print(f"   Default destination: {topology.destination or '-'}")

    rows = [
        [vertex, str(len(graph.adjacency_list(vertex))), _format_cost(value)]
        for vertex, value in ecc.items()
    ]
    if rows:
        print()
        print(_format_table(["Vertex", "Degree", "Eccentricity"], rows))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ridegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ridegraph",
        description="Plan multi-stop ride-share routes over a location graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{route,inspect}",
        help="Available commands",
    )

    route_parser = subparsers.add_parser("route", help="Plan a route")
    route_parser.add_argument(
        "passengers", nargs="*", help="Passenger locations, in pickup order"
    )
    route_parser.add_argument("--driver", help="Driver start location")
    route_parser.add_argument("--destination", help="Final destination")
    route_parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="JSON request file with 'passengers' and optional 'driver'/'destination'",
    )
    route_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Also write the JSON report to this file",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show statistics for a topology"
    )

    for p in (route_parser, inspect_parser):
        p.add_argument(
            "--topology",
            "-t",
            type=Path,
            default=None,
            help="Topology YAML file (default: packaged sample topology)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "route":
        _plan(
            passengers=args.passengers,
            topology_path=args.topology,
            driver=args.driver,
            destination=args.destination,
            request_path=args.request,
            output=args.output,
        )
    elif args.command == "inspect":
        _inspect(args.topology)


if __name__ == "__main__":
    main()
