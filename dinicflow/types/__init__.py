"""Shared enums, aliases and result containers."""

from dinicflow.types.base import Capacity, NodeIndex, PathSearch
from dinicflow.types.dto import MaxFlowResult, MinCut, PhaseResult

__all__ = [
    "Capacity",
    "NodeIndex",
    "PathSearch",
    "MaxFlowResult",
    "MinCut",
    "PhaseResult",
]
