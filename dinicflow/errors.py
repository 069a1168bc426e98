"""Exception types raised by dinicflow.

Each class subclasses the builtin a caller would naturally catch, so
``except IndexError`` and ``except ValueError`` keep working.
"""

from __future__ import annotations


class NodeIndexError(IndexError):
    """A node index lies outside ``[0, n)``."""

    def __init__(self, index: int, num_nodes: int, what: str = "vertex") -> None:
        super().__init__(f"Invalid {what} index {index} (expected 0..{num_nodes - 1})")
        self.index = index
        self.num_nodes = num_nodes


class DomainError(ValueError):
    """A value is outside its mathematical domain.

    Raised for negative capacities or flows, a source equal to the sink, a
    source/sink index out of range at construction time, and node counts
    outside the supported bounds.
    """


class ConfigurationError(ValueError):
    """The algorithm was invoked without a network or with invalid settings."""


class InputFormatError(ValueError):
    """Text input could not be turned into a network or a flow."""
