"""Immutable result containers for max-flow runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from dinicflow.types.base import Capacity, NodeIndex

Edge = Tuple[NodeIndex, NodeIndex]


@dataclass(frozen=True)
class PhaseResult:
    """Outcome of one Dinic phase.

    Attributes:
        phase: 1-based phase number within the run.
        sink_level: BFS distance (in edges) from source to sink in this
            phase's level graph.
        augmentations: Number of augmenting paths saturated.
        flow_added: Total flow pushed during the phase.
    """

    phase: int
    sink_level: int
    augmentations: int
    flow_added: Capacity


@dataclass(frozen=True)
class MinCut:
    """Source side of a minimum cut and the original edges crossing it.

    Attributes:
        source_side: Nodes reachable from the source in the residual network.
        edges: Original edges ``(u, v)`` with ``u`` on the source side and
            ``v`` off it, in row-major order.
        capacity: Sum of the capacities of ``edges``.
    """

    source_side: FrozenSet[NodeIndex]
    edges: Tuple[Edge, ...]
    capacity: Capacity


@dataclass(frozen=True)
class MaxFlowResult:
    """Summary of a ``compute_max_flow`` run.

    Attributes:
        total_flow: Flow value (source outflow) after the run.
        phases: Per-phase results in execution order.
        converged: False when the run stopped on ``max_phases`` while the sink
            was still reachable.
        valid: Result of ``FlowLedger.is_valid()`` on the final ledger, or None
            when validation was disabled.
        min_cut: Minimum cut witnessing optimality; None when not converged.
    """

    total_flow: Capacity
    phases: Tuple[PhaseResult, ...] = field(default_factory=tuple)
    converged: bool = True
    valid: Optional[bool] = None
    min_cut: Optional[MinCut] = None

    @property
    def num_phases(self) -> int:
        return len(self.phases)

    def to_dict(self, index_offset: int = 0) -> Dict[str, Any]:
        """Return a JSON-serializable view.

        Args:
            index_offset: Added to every node index (1 for external numbering).
        """
        data: Dict[str, Any] = {
            "total_flow": self.total_flow,
            "converged": self.converged,
            "valid": self.valid,
            "phases": [
                {
                    "phase": p.phase,
                    "sink_level": p.sink_level,
                    "augmentations": p.augmentations,
                    "flow_added": p.flow_added,
                }
                for p in self.phases
            ],
            "min_cut": None,
        }
        if self.min_cut is not None:
            data["min_cut"] = {
                "source_side": sorted(n + index_offset for n in self.min_cut.source_side),
                "edges": [
                    [u + index_offset, v + index_offset] for u, v in self.min_cut.edges
                ],
                "capacity": self.min_cut.capacity,
            }
        return data
