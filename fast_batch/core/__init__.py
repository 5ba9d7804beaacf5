"""Core building blocks of a batch run, re-exported for convenient access."""

from .context import BatchContext
from .definition import ArgumentSpec, CommandDefinition, OptionSpec
from .input import CommandInput
from .lifecycle import run_batch
from .outcome import EXIT_CODE_KO, EXIT_CODE_OK, Outcome
from .output import ConsoleOutput, Verbosity, resolve_verbosity
from .parameters import ParameterBag
from .stopwatch import Stopwatch
from .style import BatchStyle

__all__ = [
    "ArgumentSpec",
    "BatchContext",
    "BatchStyle",
    "CommandDefinition",
    "CommandInput",
    "ConsoleOutput",
    "EXIT_CODE_KO",
    "EXIT_CODE_OK",
    "OptionSpec",
    "Outcome",
    "ParameterBag",
    "Stopwatch",
    "Verbosity",
    "resolve_verbosity",
    "run_batch",
]
