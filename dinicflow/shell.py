"""Interactive line-oriented shell around the max-flow core.

Commands are case-insensitive and each has a one-letter alias::

    maxflow> net graph
    maxflow> maxflow
    Flow is: 5
    maxflow> currentflow
    (1, 2) (2/3)
    ...

Errors are printed to stderr as ``Error! <message>`` and never end the
session; only QUIT (or end of input) does.
"""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, TextIO

from dinicflow.algorithms.dinic import compute_max_flow, step
from dinicflow.config import DinicConfig
from dinicflow.graph.network import FlowNetwork
from dinicflow.io import read_flow, read_network
from dinicflow.logging import get_logger

logger = get_logger(__name__)

PROMPT = "maxflow> "

HELP_TEXT = (
    "NET: NET <filename> reads data from file <filename> and constructs new net\n"
    "FLOW: FLOW <filename> reads data from file <filename> and adds flow to the net\n"
    "MAXFLOW: calculates maxflow in given net and outputs maxflow capacity\n"
    "PRINTFLOW: calculates maxflow in given net and prints it out\n"
    "STEP: runs a single phase of the algorithm on the current flow\n"
    "DEBUG: prints the adjacency matrix of given net\n"
    "CURRENTFLOW: prints current flow in given net\n"
    "RESIDUAL: prints adjacency matrix of residual net constructed from current net and its flow\n"
    "STRICT: prints the level graph based on current net\n"
    "HELP: provides description of commands that can be used in this program\n"
    "QUIT: quit the program\n"
)


class ShellError(Exception):
    """A command failed; the message is shown to the user."""


class Shell:
    """Read commands from ``stdin`` until QUIT or end of input.

    Args:
        stdin: Command source.
        stdout: Destination for prompts and command output.
        stderr: Destination for ``Error!`` lines.
        config: Settings passed to the max-flow runs.
        prompt: Printed before reading each line; empty string to disable.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        config: Optional[DinicConfig] = None,
        prompt: str = PROMPT,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.config = config
        self.prompt = prompt
        self.network: Optional[FlowNetwork] = None
        self._phase = 0

        self._commands: Dict[str, Callable[[List[str]], bool]] = {}
        for names, handler in (
            (("NET", "N"), self._do_net),
            (("FLOW", "F"), self._do_flow),
            (("MAXFLOW", "M"), self._do_maxflow),
            (("PRINTFLOW", "P"), self._do_printflow),
            (("STEP", "T"), self._do_step),
            (("CURRENTFLOW", "C"), self._do_currentflow),
            (("DEBUG", "D"), self._do_debug),
            (("RESIDUAL", "R"), self._do_residual),
            (("STRICT", "S"), self._do_strict),
            (("HELP", "H"), self._do_help),
            (("QUIT", "Q"), self._do_quit),
        ):
            for name in names:
                self._commands[name] = handler

    def run(self) -> int:
        """Process input until QUIT or EOF and return the exit status."""
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                break
            if not self.execute(line):
                break
        return 0

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the session should end."""
        tokens = line.split()
        if not tokens:
            self.error("Empty command.")
            return True

        handler = self._commands.get(tokens[0].upper())
        if handler is None:
            self.error(
                f"Unknown command {tokens[0]}.\n"
                " Please use HELP to refer to the list of commands"
            )
            return True
        try:
            return handler(tokens[1:])
        except ShellError as exc:
            self.error(str(exc))
        return True

    def error(self, message: str) -> None:
        self.stderr.write(f"Error! {message}\n")
        self.stderr.flush()

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _require_network(self) -> FlowNetwork:
        if self.network is None:
            raise ShellError("Net not defined")
        return self.network

    def _do_net(self, args: List[str]) -> bool:
        if not args:
            raise ShellError("Please give file name with Net input data")
        try:
            self.network = read_network(args[0])
        except FileNotFoundError:
            raise ShellError("File Not Found") from None
        except (ValueError, IndexError) as exc:
            raise ShellError(str(exc)) from None
        self._phase = 0
        return True

    def _do_flow(self, args: List[str]) -> bool:
        if not args:
            raise ShellError("Please give file name with Flow input data")
        network = self._require_network()
        try:
            read_flow(args[0], network)
        except FileNotFoundError:
            raise ShellError("File Not Found") from None
        except (ValueError, IndexError) as exc:
            raise ShellError(str(exc)) from None
        self._phase = 0
        return True

    def _run_max_flow(self) -> FlowNetwork:
        network = self._require_network()
        result = compute_max_flow(network, config=self.config)
        valid = result.valid if result.valid is not None else network.ledger.is_valid()
        if not valid:
            self.error("Calculation failed")
        self._write(f"Flow is: {result.total_flow}\n")
        if result.total_flow == 0:
            self._write("Sink is unreachable\n")
        return network

    def _do_maxflow(self, args: List[str]) -> bool:
        self._run_max_flow()
        return True

    def _do_printflow(self, args: List[str]) -> bool:
        network = self._run_max_flow()
        self._write(str(network.ledger))
        return True

    def _do_step(self, args: List[str]) -> bool:
        network = self._require_network()
        result = step(network, config=self.config, phase=self._phase + 1)
        if result is None:
            self._write("Sink is unreachable\n")
            return True
        self._phase = result.phase
        self._write(
            f"Phase {result.phase}: sink level {result.sink_level}, "
            f"{result.augmentations} paths, +{result.flow_added}\n"
        )
        self._write(f"Flow is: {network.total_flow()}\n")
        return True

    def _do_currentflow(self, args: List[str]) -> bool:
        self._write(str(self._require_network().ledger))
        return True

    def _do_debug(self, args: List[str]) -> bool:
        self._write(str(self._require_network()))
        return True

    def _do_residual(self, args: List[str]) -> bool:
        residual = self._require_network().build_residual()
        self._write("Residual net is:\n" + str(residual))
        return True

    def _do_strict(self, args: List[str]) -> bool:
        self._write(str(self._require_network().build_level_graph()))
        return True

    def _do_help(self, args: List[str]) -> bool:
        self._write(HELP_TEXT)
        return True

    def _do_quit(self, args: List[str]) -> bool:
        return False


def run_shell(config: Optional[DinicConfig] = None) -> int:
    """Run an interactive shell on the process's standard streams."""
    logger.debug("Starting interactive shell")
    return Shell(config=config).run()
