"""Test the configuration module functionality."""

import pytest

from dinicflow.config import (
    DINIC_CONFIG,
    INDEX_OFFSET,
    MAX_NUMBER_OF_NODES,
    MIN_NUMBER_OF_NODES,
    DinicConfig,
)
from dinicflow.errors import ConfigurationError
from dinicflow.types.base import PathSearch


def test_constants():
    assert INDEX_OFFSET == 1
    assert MIN_NUMBER_OF_NODES == 2
    assert MAX_NUMBER_OF_NODES == 2000


def test_defaults():
    config = DinicConfig()
    assert config.path_search == PathSearch.GREEDY_BACKWARD
    assert config.max_phases is None
    assert config.validate_result is True
    assert DINIC_CONFIG == config


def test_path_search_from_string_in_config():
    assert DinicConfig(path_search="dfs").path_search == PathSearch.DFS


def test_negative_max_phases():
    with pytest.raises(ConfigurationError):
        DinicConfig(max_phases=-1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("greedy", PathSearch.GREEDY_BACKWARD),
        ("GREEDY_BACKWARD", PathSearch.GREEDY_BACKWARD),
        (" dfs ", PathSearch.DFS),
        ("Dfs", PathSearch.DFS),
    ],
)
def test_path_search_from_string(text, expected):
    assert PathSearch.from_string(text) == expected


def test_path_search_from_string_invalid():
    with pytest.raises(ValueError, match="Valid values are"):
        PathSearch.from_string("bfs")
