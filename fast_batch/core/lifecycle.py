"""Batch lifecycle: initialize, complete missing arguments, execute, report."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fast_batch.core.context import BatchContext
from fast_batch.core.definition import CommandDefinition
from fast_batch.core.input import CommandInput
from fast_batch.core.outcome import Outcome
from fast_batch.core.output import ConsoleOutput
from fast_batch.core.parameters import ParameterSource
from fast_batch.core.stopwatch import Stopwatch
from fast_batch.core.style import BatchStyle

MISSING_ARGUMENTS_SECTION = "Arguments mandatory"

DoExecute = Callable[[BatchContext], Any]


def run_batch(
    name: str,
    definition: CommandDefinition,
    command_input: CommandInput,
    output: ConsoleOutput,
    do_execute: DoExecute,
    *,
    style: Optional[BatchStyle] = None,
    logger: Optional[logging.Logger] = None,
    parameters: Optional[ParameterSource] = None,
) -> int:
    """
    Run one batch and return its exit code (0 ok, 1 ko).

    Exceptions raised while prompting or inside ``do_execute`` are not caught.
    """
    context = BatchContext(name, definition, command_input, output, style, logger, parameters)

    initialize(context)
    if command_input.interactive:
        ask_for_missing_required_arguments(context)
    command_input.validate()

    return execute(context, do_execute)


def initialize(context: BatchContext) -> None:
    context.title(context.name)


def ask_for_missing_required_arguments(context: BatchContext) -> None:
    section_added = False
    for argument in context.definition.arguments:
        if not argument.required or not context.input.is_empty_argument(argument):
            continue

        if not section_added:
            context.section(MISSING_ARGUMENTS_SECTION)
            section_added = True

        value = context.ask(f"Please enter the value of {argument.name}")
        if argument.is_array:
            value = value.split(" ")

        context.input.set_argument(argument.name, value)


def execute(context: BatchContext, do_execute: DoExecute) -> int:
    stopwatch = Stopwatch()
    try:
        result = do_execute(context)
    except BaseException:
        context.style.progress_clear()
        raise
    stopwatch.stop()

    context.writeln_info(f"Batch duration: {stopwatch.rounded(2)} seconds")

    if Outcome.from_result(result) is Outcome.KO:
        return ko(context)
    return ok(context)


def ok(context: BatchContext) -> int:
    context.success(f"Batch {context.name} ended ok")
    return Outcome.OK.exit_code


def ko(context: BatchContext) -> int:
    context.writeln_error(f"Batch {context.name} ended ko")
    return Outcome.KO.exit_code
