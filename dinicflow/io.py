"""Reading and writing networks and flows as plain text.

Both file kinds share one layout: the node count, then any number of
``source target value`` triplets, all whitespace-separated integers. Node
numbers in files are 1-based (see ``INDEX_OFFSET``); the value is a capacity
in network files and a flow amount in flow files.

Example network file::

    4
    1 2 3
    1 3 2
    2 4 2
    3 4 3
    2 3 1
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple, Union

from dinicflow.config import INDEX_OFFSET
from dinicflow.errors import InputFormatError
from dinicflow.graph.network import FlowNetwork
from dinicflow.logging import get_logger

logger = get_logger(__name__)

INPUT_SUFFIX = ".txt"

Triplet = Tuple[int, int, int]
PathLike = Union[str, Path]


def resolve_input_path(name: PathLike) -> Path:
    """Return ``name`` as a Path, appending ``.txt`` when that suffix is missing."""
    text = str(name)
    if not text.endswith(INPUT_SUFFIX):
        text += INPUT_SUFFIX
    return Path(text)


def _tokenize(text: str) -> Tuple[int, List[Triplet]]:
    """Split text into the node count and 1-based triplets."""
    tokens = text.split()
    if not tokens:
        raise InputFormatError("Input Data incomplete")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError:
        raise InputFormatError("Input Data must be Integers") from None

    node_count, rest = numbers[0], numbers[1:]
    if len(rest) % 3:
        raise InputFormatError("Input Data incomplete")
    triplets = [(rest[i], rest[i + 1], rest[i + 2]) for i in range(0, len(rest), 3)]
    return node_count, triplets


def parse_network(text: str) -> FlowNetwork:
    """Build a network from text; source and sink are the first and last node.

    Raises:
        InputFormatError: If the text is not a sequence of integer triplets.
        DomainError: On an unsupported node count or a negative capacity.
        NodeIndexError: If a triplet names a node outside the network.
    """
    node_count, triplets = _tokenize(text)
    network = FlowNetwork(node_count)
    for source, target, capacity in triplets:
        network.set_capacity(source - INDEX_OFFSET, target - INDEX_OFFSET, capacity)
    logger.debug(
        "Parsed network: %d nodes, %d edges", node_count, network.graph.num_edges()
    )
    return network


def parse_flow(text: str, network: FlowNetwork) -> FlowNetwork:
    """Replace the network's flow with the flow described by ``text``.

    The ledger is cleared, filled with ``set_flow`` and then validated. An
    invalid flow is cleared again before the error is raised, so the network
    never keeps a rejected flow.

    Returns:
        The same network, for chaining.

    Raises:
        InputFormatError: On malformed text, a node-count mismatch, or a
            flow that violates capacity or conservation.
        DomainError: On a negative flow value.
        NodeIndexError: If a triplet names a node outside the network.
    """
    node_count, triplets = _tokenize(text)
    if node_count != network.num_nodes:
        raise InputFormatError(
            f"Number of nodes mismatch: flow has {node_count}, net has {network.num_nodes}"
        )

    ledger = network.ledger
    ledger.clear()
    try:
        for source, target, flow in triplets:
            ledger.set_flow(source - INDEX_OFFSET, target - INDEX_OFFSET, flow)
    except (IndexError, ValueError):
        ledger.clear()
        raise

    problems = ledger.violations()
    if problems:
        ledger.clear()
        raise InputFormatError("This flow is not valid! " + "; ".join(problems))
    return network


def read_network(path: PathLike) -> FlowNetwork:
    """Read a network file (``.txt`` appended when missing).

    Raises:
        FileNotFoundError: If the file does not exist.
        InputFormatError, DomainError, NodeIndexError: See `parse_network`.
    """
    resolved = resolve_input_path(path)
    logger.info("Reading network from %s", resolved)
    return parse_network(resolved.read_text(encoding="utf-8"))


def read_flow(path: PathLike, network: FlowNetwork) -> FlowNetwork:
    """Read a flow file into ``network``'s ledger (see `parse_flow`)."""
    resolved = resolve_input_path(path)
    logger.info("Reading flow from %s", resolved)
    return parse_flow(resolved.read_text(encoding="utf-8"), network)


def format_network(network: FlowNetwork) -> str:
    """Render a network in the input file layout."""
    lines = [str(network.num_nodes)]
    lines.extend(
        f"{u + INDEX_OFFSET} {v + INDEX_OFFSET} {capacity}"
        for u, v, capacity in network.edges()
    )
    return "\n".join(lines) + "\n"


def format_flow(network: FlowNetwork) -> str:
    """Render the network's non-zero flows in the input file layout."""
    lines = [str(network.num_nodes)]
    lines.extend(
        f"{u + INDEX_OFFSET} {v + INDEX_OFFSET} {flow}"
        for u, v, flow in network.ledger.flows.nonzero()
    )
    return "\n".join(lines) + "\n"


def write_network(network: FlowNetwork, path: PathLike) -> Path:
    """Write ``format_network`` output to ``path`` and return the path."""
    target = Path(path)
    target.write_text(format_network(network), encoding="utf-8")
    return target


def write_flow(network: FlowNetwork, path: PathLike) -> Path:
    """Write ``format_flow`` output to ``path`` and return the path."""
    target = Path(path)
    target.write_text(format_flow(network), encoding="utf-8")
    return target
