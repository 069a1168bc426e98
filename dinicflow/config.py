"""Constants and tunables for dinicflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dinicflow.errors import ConfigurationError
from dinicflow.types.base import PathSearch

#: Offset between external (file, shell, CLI) node numbers and internal indices.
INDEX_OFFSET = 1

#: Smallest supported node count.
MIN_NUMBER_OF_NODES = 2

#: Largest supported node count; matrices are dense, so memory is O(n^2).
MAX_NUMBER_OF_NODES = 2000


@dataclass
class DinicConfig:
    """Settings for a max-flow run."""

    # How augmenting paths are extracted from a level graph
    path_search: PathSearch = PathSearch.GREEDY_BACKWARD

    # Upper bound on phases; None runs until the sink is unreachable
    max_phases: Optional[int] = None

    # Check conservation and capacity bounds on the final ledger
    validate_result: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.path_search, PathSearch):
            self.path_search = PathSearch.from_string(str(self.path_search))
        if self.max_phases is not None and self.max_phases < 0:
            raise ConfigurationError(
                f"max_phases must be non-negative, got {self.max_phases}"
            )


# Global configuration instance
DINIC_CONFIG = DinicConfig()
