from __future__ import annotations

import argparse
from typing import Any, Dict, Optional

from fast_batch.core.definition import ArgumentSpec, CommandDefinition
from fast_batch.exceptions.common_exceptions import InvalidArgumentException, MissingArgumentsException


class CommandInput:
    """Parsed arguments and options bound to a command definition."""

    def __init__(
        self,
        definition: CommandDefinition,
        arguments: Optional[Dict[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None,
        *,
        interactive: bool = True,
    ):
        self.definition = definition
        self.interactive = interactive
        self._arguments: Dict[str, Any] = {spec.name: spec.initial_value() for spec in definition.arguments}
        self._options: Dict[str, Any] = {spec.name: spec.initial_value() for spec in definition.options}

        for name, value in (arguments or {}).items():
            self.set_argument(name, value)
        for name, value in (options or {}).items():
            self.set_option(name, value)

    @classmethod
    def from_namespace(
        cls,
        definition: CommandDefinition,
        namespace: argparse.Namespace,
        *,
        interactive: bool = True,
    ) -> "CommandInput":
        values = vars(namespace)
        arguments = {spec.name: values.get(spec.name) for spec in definition.arguments if spec.name in values}
        options = {}
        for spec in definition.options:
            value = values.get(spec.dest)
            options[spec.name] = spec.initial_value() if value is None else value
        return cls(definition, arguments, options, interactive=interactive)

    @property
    def arguments(self) -> Dict[str, Any]:
        return dict(self._arguments)

    @property
    def options(self) -> Dict[str, Any]:
        return dict(self._options)

    def has_argument(self, name: str) -> bool:
        return self.definition.has_argument(name)

    def get_argument(self, name: str) -> Any:
        if not self.has_argument(name):
            raise InvalidArgumentException(name)
        return self._arguments.get(name)

    def set_argument(self, name: str, value: Any) -> None:
        if not self.has_argument(name):
            raise InvalidArgumentException(name)
        self._arguments[name] = value

    def has_option(self, name: str) -> bool:
        return self.definition.has_option(name)

    def get_option(self, name: str) -> Any:
        if not self.has_option(name):
            raise InvalidArgumentException(name, kind="option")
        return self._options.get(name)

    def set_option(self, name: str, value: Any) -> None:
        if not self.has_option(name):
            raise InvalidArgumentException(name, kind="option")
        self._options[name] = value

    def is_empty_argument(self, argument: ArgumentSpec) -> bool:
        """An argument is empty when unset or bound to an empty sequence."""
        value = self.get_argument(argument.name)
        return value is None or (isinstance(value, (list, tuple)) and len(value) == 0)

    def validate(self) -> None:
        missing = [spec.name for spec in self.definition.arguments if spec.required and self.is_empty_argument(spec)]
        if missing:
            raise MissingArgumentsException(missing)
