"""Batch command contract for app-local commands (run via `fast-batch exec`)."""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from rich.console import Console

from fast_batch.core.context import BatchContext
from fast_batch.core.definition import CommandDefinition
from fast_batch.core.input import CommandInput
from fast_batch.core.lifecycle import run_batch
from fast_batch.core.outcome import EXIT_CODE_KO, EXIT_CODE_OK, Outcome
from fast_batch.core.output import ConsoleOutput, resolve_verbosity
from fast_batch.core.parameters import ParameterSource
from fast_batch.core.style import BatchStyle


class BatchCommand(ABC):
    """
    Base class for batch commands.

    Subclasses declare their arguments in ``configure`` and do their work in
    ``do_execute``, returning ``Outcome.OK`` or ``Outcome.KO``. Missing
    required arguments are asked for before ``do_execute`` runs.
    """

    EXIT_CODE_OK = EXIT_CODE_OK
    EXIT_CODE_KO = EXIT_CODE_KO

    def __init__(self, logger: Optional[logging.Logger] = None, parameters: Optional[ParameterSource] = None):
        self.logger = logger or logging.getLogger(self.__class__.__module__)
        self._parameters = parameters
        self._definition: Optional[CommandDefinition] = None

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def help(self) -> str:
        pass

    def configure(self, definition: CommandDefinition) -> None:
        """Declare arguments and options. Override if needed."""
        pass

    @abstractmethod
    def do_execute(self, context: BatchContext) -> Outcome:
        """Run the batch."""
        raise NotImplementedError

    def boot(self) -> None:
        """Optional boot hook. Override to customize environment before run."""
        from fast_batch.app_provider import boot
        boot()

    @property
    def definition(self) -> CommandDefinition:
        if self._definition is None:
            definition = CommandDefinition()
            self.configure(definition)
            self._definition = definition.freeze()
        return self._definition

    @property
    def parameters(self) -> ParameterSource:
        if self._parameters is None:
            from fast_batch.application import Application
            return Application().parameters
        return self._parameters

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        self.definition.configure_parser(parser)
        parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv, -vvv)")
        parser.add_argument("-q", "--quiet", action="store_true", help="Do not output any message")
        parser.add_argument(
            "-n", "--no-interaction",
            dest="no_interaction",
            action="store_true",
            help="Do not ask for missing arguments",
        )

    def run(
        self,
        argv: Optional[List[str]] = None,
        *,
        console: Optional[Console] = None,
        ask: Optional[Callable[[str], str]] = None,
    ) -> int:
        """Parse ``argv``, run the batch and return its exit code."""
        parser = argparse.ArgumentParser(prog=self.name, description=self.help)
        self.configure_parser(parser)
        args = parser.parse_args(argv)

        return self.run_with(
            CommandInput.from_namespace(self.definition, args, interactive=not args.no_interaction),
            ConsoleOutput(console, resolve_verbosity(args.quiet, args.verbose)),
            ask=ask,
        )

    def run_with(self, command_input: CommandInput, output: ConsoleOutput, *, ask: Optional[Callable[[str], str]] = None) -> int:
        return run_batch(
            self.name,
            self.definition,
            command_input,
            output,
            self.do_execute,
            style=BatchStyle(output.console, ask=ask),
            logger=self.logger,
            parameters=self.parameters,
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
