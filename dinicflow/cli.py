"""Command-line interface for dinicflow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from dinicflow.algorithms.dinic import compute_max_flow
from dinicflow.config import INDEX_OFFSET, DinicConfig
from dinicflow.graph.network import FlowNetwork
from dinicflow.io import read_flow, read_network
from dinicflow.logging import get_logger, set_global_log_level
from dinicflow.shell import run_shell
from dinicflow.types.base import PathSearch

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _with_terminals(
    network: FlowNetwork, source: Optional[int], sink: Optional[int]
) -> FlowNetwork:
    """Return ``network`` re-rooted at 1-based ``source``/``sink`` if given."""
    if source is None and sink is None:
        return network
    new_source = network.source if source is None else source - INDEX_OFFSET
    new_sink = network.sink if sink is None else sink - INDEX_OFFSET
    rerooted = FlowNetwork(network.num_nodes, new_source, new_sink)
    for u, v, capacity in network.edges():
        rerooted.set_capacity(u, v, capacity)
    return rerooted


def _solve(
    net_path: Path,
    flow_path: Optional[Path],
    source: Optional[int],
    sink: Optional[int],
    config: DinicConfig,
    print_flow: bool,
    as_json: bool,
) -> int:
    """Load a network (and optionally a starting flow), run Dinic, report."""
    try:
        network = _with_terminals(read_network(net_path), source, sink)
        if flow_path is not None:
            read_flow(flow_path, network)
    except FileNotFoundError as exc:
        logger.error(f"File not found: {exc.filename}")
        return 1
    except (ValueError, IndexError) as exc:
        logger.error(f"Failed to load input: {type(exc).__name__}: {exc}")
        return 1

    start = perf_counter()
    result = compute_max_flow(network, config=config)
    elapsed = perf_counter() - start
    logger.info(f"Solved in {_format_duration(elapsed)}")

    if as_json:
        payload = result.to_dict(index_offset=INDEX_OFFSET)
        payload["flows"] = [
            {
                "source": u + INDEX_OFFSET,
                "target": v + INDEX_OFFSET,
                "flow": flow,
                "capacity": network.get_capacity(u, v),
            }
            for u, v, flow in network.ledger.flows.nonzero()
        ]
        print(json.dumps(payload, indent=2))
        return 0

    if result.valid is False:
        print("Error! Calculation failed", file=sys.stderr)
    print(f"Flow is: {result.total_flow}")
    if result.total_flow == 0:
        print("Sink is unreachable")
    if print_flow:
        sys.stdout.write(str(network.ledger))
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``dinicflow`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``,
            ``sys.argv`` is used.
    """
    parser = argparse.ArgumentParser(
        prog="dinicflow",
        description="Compute maximum flows with Dinic's algorithm.",
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
        metavar="{solve,shell}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser("solve", help="Compute the max flow of a net file")
    solve_parser.add_argument("net", type=Path, help="Net file (.txt appended if missing)")
    solve_parser.add_argument(
        "--flow", "-f", type=Path, default=None, help="Starting flow file"
    )
    solve_parser.add_argument("--source", type=int, default=None, help="1-based source node")
    solve_parser.add_argument("--sink", type=int, default=None, help="1-based sink node")
    solve_parser.add_argument(
        "--print-flow", "-p", action="store_true", help="List non-zero edge flows"
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    solve_parser.add_argument(
        "--search",
        choices=["greedy", "dfs"],
        default="greedy",
        help="Augmenting path search inside a level graph",
    )
    solve_parser.add_argument(
        "--max-phases", type=int, default=None, help="Stop after this many phases"
    )

    shell_parser = subparsers.add_parser("shell", help="Start the interactive shell")
    shell_parser.add_argument(
        "--search",
        choices=["greedy", "dfs"],
        default="greedy",
        help="Augmenting path search inside a level graph",
    )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        config = DinicConfig(
            path_search=PathSearch.from_string(args.search),
            max_phases=getattr(args, "max_phases", None),
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.command == "solve":
        code = _solve(
            args.net,
            args.flow,
            args.source,
            args.sink,
            config,
            args.print_flow,
            args.json,
        )
    else:
        code = run_shell(config)

    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
