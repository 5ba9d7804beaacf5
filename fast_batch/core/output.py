from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Optional

from rich.console import Console
from rich.text import Text

from fast_batch import config


class Verbosity(IntEnum):
    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256


SHELL_VERBOSITY_LEVELS = {
    -1: Verbosity.QUIET,
    0: Verbosity.NORMAL,
    1: Verbosity.VERBOSE,
    2: Verbosity.VERY_VERBOSE,
    3: Verbosity.DEBUG,
}


def resolve_verbosity(quiet: bool = False, verbose: int = 0) -> Verbosity:
    """
    Map ``-q`` and repeated ``-v`` flags to a verbosity level.

    Without flags the ``SHELL_VERBOSITY`` setting decides.
    """
    if quiet:
        return Verbosity.QUIET
    if verbose >= 3:
        return Verbosity.DEBUG
    if verbose == 2:
        return Verbosity.VERY_VERBOSE
    if verbose == 1:
        return Verbosity.VERBOSE

    level = max(-1, min(3, config.SHELL_VERBOSITY))
    return SHELL_VERBOSITY_LEVELS[level]


class ConsoleOutput:
    """Line writer over a rich console, carrying the verbosity level."""

    timestamp_format = "%Y-%m-%d %H:%M:%S"

    def __init__(self, console: Optional[Console] = None, verbosity: Verbosity = Verbosity.NORMAL):
        self.console = console or Console(highlight=False)
        self.verbosity = verbosity

    @property
    def is_quiet(self) -> bool:
        return self.verbosity == Verbosity.QUIET

    @property
    def is_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERBOSE

    @property
    def is_very_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERY_VERBOSE

    @property
    def is_debug(self) -> bool:
        return self.verbosity >= Verbosity.DEBUG

    def writeln(self, text: str, style: Optional[str] = None) -> None:
        """Write a timestamped line. Callers decide whether the line is shown."""
        stamp = datetime.now().strftime(self.timestamp_format)
        self.console.print(Text.assemble((f"[{stamp}]", "cyan"), " ", (text, style) if style else text))
