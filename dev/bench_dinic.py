"""Benchmark Dinic max-flow on random dense graphs.

Measures `compute_max_flow` for both path searches and, for reference,
networkx's `maximum_flow_value` on the same graphs, checking that all three
agree on the flow value.

Run examples:

  python -m dev.bench_dinic --nodes 50 --density 0.2 --repeat 5

  python -m dev.bench_dinic --nodes 200 --density 0.05 --seed 3

Notes:
- The script writes no files.
- Graphs are rebuilt for every repetition so that each run starts from zero flow.
"""

from __future__ import annotations

import argparse
import statistics
import time
from typing import Callable, Dict, List

import networkx as nx
import numpy as np

from dinicflow.algorithms.dinic import compute_max_flow
from dinicflow.config import DinicConfig
from dinicflow.graph.convert import to_networkx
from dinicflow.graph.network import FlowNetwork, new_graph
from dinicflow.types.base import PathSearch


def _random_network(nodes: int, density: float, max_capacity: int, seed: int) -> FlowNetwork:
    rng = np.random.default_rng(seed)
    net = new_graph(nodes)
    mask = rng.random((nodes, nodes)) < density
    np.fill_diagonal(mask, False)
    capacities = rng.integers(1, max_capacity + 1, size=(nodes, nodes))
    for u, v in zip(*np.nonzero(mask)):
        net.set_capacity(int(u), int(v), int(capacities[u, v]))
    return net


def _time(fn: Callable[[], int], repeat: int) -> tuple[int, List[float]]:
    timings: List[float] = []
    value = 0
    for _ in range(repeat):
        start = time.perf_counter()
        value = fn()
        timings.append(time.perf_counter() - start)
    return value, timings


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--nodes", type=int, default=60)
    parser.add_argument("--density", type=float, default=0.15)
    parser.add_argument("--max-capacity", type=int, default=100)
    parser.add_argument("--repeat", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    def build() -> FlowNetwork:
        return _random_network(args.nodes, args.density, args.max_capacity, args.seed)

    results: Dict[str, tuple[int, List[float]]] = {}
    for search in PathSearch:
        config = DinicConfig(path_search=search, validate_result=False)
        results[search.name.lower()] = _time(
            lambda: compute_max_flow(build(), config=config).total_flow, args.repeat
        )

    reference = build()
    results["networkx"] = _time(
        lambda: int(
            nx.maximum_flow_value(to_networkx(reference), reference.source, reference.sink)
        ),
        args.repeat,
    )

    values = {name: value for name, (value, _) in results.items()}
    print(f"nodes={args.nodes} density={args.density} edges={reference.graph.num_edges()}")
    for name, (value, timings) in results.items():
        print(
            f"  {name:<16} flow={value:<8} median={statistics.median(timings) * 1000:.1f} ms"
        )
    if len(set(values.values())) != 1:
        raise SystemExit(f"Flow values disagree: {values}")


if __name__ == "__main__":
    main()
