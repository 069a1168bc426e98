"""Dinic's maximum-flow algorithm.

Each phase builds the residual network of the current flow, layers it by BFS
into a level graph and pushes a blocking flow through that level graph. The
run ends once the sink is unreachable in the residual network; the set of
nodes still reachable from the source then forms a minimum cut.

The flow ledger owned by the network is the only state that survives a
phase; residual networks and level graphs are rebuilt every time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from dinicflow.algorithms.blocking_flow import compute_blocking_flow
from dinicflow.algorithms.level_graph import build_level_graph
from dinicflow.algorithms.residual import build_residual
from dinicflow.config import DINIC_CONFIG, DinicConfig
from dinicflow.errors import ConfigurationError
from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.logging import get_logger
from dinicflow.types.base import PathSearch
from dinicflow.types.dto import MaxFlowResult, MinCut, PhaseResult

if TYPE_CHECKING:
    from dinicflow.graph.network import FlowNetwork

logger = get_logger(__name__)


def compute_max_flow(
    network: Optional["FlowNetwork"],
    *,
    config: Optional[DinicConfig] = None,
) -> MaxFlowResult:
    """Run Dinic phases until the sink is unreachable in the residual network.

    The flow already in ``network.ledger`` is the starting point, so a loaded
    feasible flow is extended rather than replaced, and a network already at
    maximum flow runs zero phases.

    Args:
        network: Network whose ledger is updated in place.
        config: Run settings; defaults to ``DINIC_CONFIG``.

    Returns:
        MaxFlowResult with the final flow value, per-phase results and, when
        the run converged, a minimum cut.

    Raises:
        ConfigurationError: If ``network`` is None.

    Example:
        >>> net = new_graph(2)
        >>> net.set_capacity(0, 1, 5)
        >>> compute_max_flow(net).total_flow
        5
    """
    network = _require_network(network)
    config = config or DINIC_CONFIG

    phases: List[PhaseResult] = []
    converged = True
    residual = network.build_residual()
    while residual.is_sink_reachable_from_source():
        if config.max_phases is not None and len(phases) >= config.max_phases:
            logger.warning(
                "Stopping after %d phases with the sink still reachable", len(phases)
            )
            converged = False
            break
        phases.append(_run_phase(network, residual, len(phases) + 1, config.path_search))
        residual = network.build_residual()

    total_flow = network.ledger.get_total_flow()

    valid: Optional[bool] = None
    if config.validate_result:
        valid = network.ledger.is_valid()
        if not valid:
            logger.warning("Computed flow failed validation")

    cut = _cut_from_residual(network.graph, residual) if converged else None

    logger.info(
        "Max flow %d after %d phase%s", total_flow, len(phases), "" if len(phases) == 1 else "s"
    )
    return MaxFlowResult(
        total_flow=total_flow,
        phases=tuple(phases),
        converged=converged,
        valid=valid,
        min_cut=cut,
    )


def step(
    network: Optional["FlowNetwork"],
    *,
    config: Optional[DinicConfig] = None,
    phase: int = 1,
) -> Optional[PhaseResult]:
    """Run a single Dinic phase.

    Args:
        network: Network whose ledger is updated in place.
        config: Run settings; only ``path_search`` applies.
        phase: Number recorded in the returned PhaseResult.

    Returns:
        The phase result, or None when the sink is already unreachable and
        nothing was done.

    Raises:
        ConfigurationError: If ``network`` is None.
    """
    network = _require_network(network)
    config = config or DINIC_CONFIG

    residual = network.build_residual()
    if not residual.is_sink_reachable_from_source():
        logger.debug("Sink unreachable, no phase executed")
        return None
    return _run_phase(network, residual, phase, config.path_search)


def min_cut(network: Optional["FlowNetwork"]) -> MinCut:
    """Minimum cut induced by the network's current flow.

    The source side is every node reachable from the source in the residual
    network. The cut is minimum only when the current flow is maximum.

    Raises:
        ConfigurationError: If ``network`` is None.
    """
    network = _require_network(network)
    return _cut_from_residual(network.graph, network.build_residual())


def _run_phase(
    network: "FlowNetwork",
    residual: CapacitatedGraph,
    phase: int,
    path_search: PathSearch,
) -> PhaseResult:
    level_graph = build_level_graph(residual)
    augmentations, pushed = compute_blocking_flow(level_graph, network.ledger, path_search)
    logger.debug(
        "Phase %d: sink level %d, %d augmenting paths, +%d flow",
        phase,
        level_graph.sink_level,
        augmentations,
        pushed,
    )
    return PhaseResult(
        phase=phase,
        sink_level=level_graph.sink_level,
        augmentations=augmentations,
        flow_added=pushed,
    )


def _cut_from_residual(graph: CapacitatedGraph, residual: CapacitatedGraph) -> MinCut:
    source_side = residual.reachable_from(graph.source)
    edges = tuple(
        (u, v) for u, v, _ in graph.edges() if u in source_side and v not in source_side
    )
    capacity = sum(graph.get_capacity(u, v) for u, v in edges)
    return MinCut(source_side=frozenset(source_side), edges=edges, capacity=capacity)


def _require_network(network: Optional["FlowNetwork"]) -> "FlowNetwork":
    if network is None:
        raise ConfigurationError("Net was not defined")
    return network
