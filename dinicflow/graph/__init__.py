"""Dense capacitated graph types."""

from dinicflow.graph.capacitated import CapacitatedGraph
from dinicflow.graph.matrix import DenseMatrix

__all__ = ["CapacitatedGraph", "DenseMatrix"]
