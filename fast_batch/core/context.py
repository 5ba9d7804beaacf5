from __future__ import annotations

import logging
from typing import Any, Optional

from fast_batch.core.definition import CommandDefinition
from fast_batch.core.input import CommandInput
from fast_batch.core.output import ConsoleOutput
from fast_batch.core.parameters import ParameterBag, ParameterSource
from fast_batch.core.style import BatchStyle


class BatchContext:
    """
    Everything a running batch talks to.

    Decorative output (titles, sections, banners, progress, lines) is only
    rendered when the output is at least verbose. Errors are always logged.
    """

    def __init__(
        self,
        name: str,
        definition: CommandDefinition,
        input: CommandInput,
        output: ConsoleOutput,
        style: Optional[BatchStyle] = None,
        logger: Optional[logging.Logger] = None,
        parameters: Optional[ParameterSource] = None,
    ):
        self.name = name
        self.definition = definition
        self.input = input
        self.output = output
        self.style = style or BatchStyle(output.console)
        self.logger = logger or logging.getLogger("fast_batch.batch")
        self.parameters = parameters if parameters is not None else ParameterBag()

    @property
    def is_verbose(self) -> bool:
        return self.output.is_verbose

    # Input

    def get_argument(self, name: str) -> Any:
        return self.input.get_argument(name)

    def has_argument(self, name: str) -> bool:
        return self.input.has_argument(name)

    def get_option(self, name: str) -> Any:
        return self.input.get_option(name)

    def has_option(self, name: str) -> bool:
        return self.input.has_option(name)

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)

    # Lines

    def writeln(self, text: str, style: Optional[str] = None) -> None:
        if not self.is_verbose:
            return
        self.output.writeln(text, style)

    def writeln_info(self, text: str) -> None:
        self.writeln(text, "green")

    def writeln_comment(self, text: str) -> None:
        self.writeln(text, "yellow")

    def writeln_question(self, text: str) -> None:
        self.writeln(text, "black on cyan")

    def writeln_error(self, text: str) -> None:
        self.logger.error(text)
        self.writeln(text, "white on red")

    # Styled blocks

    def title(self, message: str) -> None:
        if self.is_verbose:
            self.style.title(message)

    def section(self, message: str) -> None:
        if self.is_verbose:
            self.new_line()
            self.style.section(message)

    def success(self, message: str) -> None:
        if self.is_verbose:
            self.new_line()
            self.style.success(message)

    def new_line(self, count: int = 1) -> None:
        if self.is_verbose:
            self.style.new_line(count)

    def ask(self, question: str) -> str:
        return self.style.ask(question)

    # Progress

    def progress_start(self, max: int = 0) -> None:
        if self.is_verbose:
            self.style.progress_start(max)

    def progress_advance(self, step: int = 1) -> None:
        if self.is_verbose:
            self.style.progress_advance(step)

    def progress_finish(self) -> None:
        if self.is_verbose:
            self.style.progress_finish()
            self.new_line()
