"""Base aliases and enums for the max-flow algorithms."""

from __future__ import annotations

from enum import IntEnum

#: Node identifier: an integer in ``[0, n)``.
NodeIndex = int

#: Edge capacity or flow amount; always a non-negative integer.
Capacity = int


class PathSearch(IntEnum):
    """Strategies for extracting augmenting paths from a level graph."""

    #: Walk backward from the sink, always taking the predecessor with the
    #: largest remaining capacity; ties go to the lowest node index.
    GREEDY_BACKWARD = 1
    #: Depth-first search from the source with per-node edge pointers that
    #: only advance, so each dead edge is skipped for the rest of the phase.
    DFS = 2

    @classmethod
    def from_string(cls, value: str) -> "PathSearch":
        """Parse a string into a PathSearch value.

        Accepts member names case-insensitively, plus the short forms
        ``greedy`` and ``dfs``.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        aliases = {"GREEDY": cls.GREEDY_BACKWARD}
        key = value.strip().upper()
        if key in aliases:
            return aliases[key]
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid path search '{value}'. Valid values are: {valid}"
            ) from None
