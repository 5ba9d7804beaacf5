from __future__ import annotations

import argparse
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from fast_batch.exceptions.common_exceptions import InvalidArgumentException, InvalidDefinitionException


class ArgumentSpec(BaseModel):
    """A positional argument of a batch command."""

    model_config = ConfigDict(frozen=True)

    name: str
    required: bool = False
    is_array: bool = False
    description: str = ""
    default: Any = None

    @model_validator(mode="after")
    def _check_default(self) -> "ArgumentSpec":
        if self.required and self.default not in (None, []):
            raise ValueError(f'Cannot set a default value for required argument "{self.name}".')
        if self.is_array and self.default is not None and not isinstance(self.default, list):
            raise ValueError(f'A default value for array argument "{self.name}" must be a list.')
        return self

    def initial_value(self) -> Any:
        if self.is_array:
            return list(self.default or [])
        return self.default


class OptionSpec(BaseModel):
    """A ``--name`` option of a batch command."""

    model_config = ConfigDict(frozen=True)

    name: str
    shortcut: Optional[str] = None
    accepts_value: bool = False
    is_array: bool = False
    description: str = ""
    default: Any = None

    @model_validator(mode="after")
    def _check_mode(self) -> "OptionSpec":
        if self.is_array and not self.accepts_value:
            raise ValueError(f'Option "{self.name}" cannot be an array without accepting a value.')
        if not self.accepts_value and self.default not in (None, False):
            raise ValueError(f'Cannot set a default value for flag option "{self.name}".')
        return self

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")

    def initial_value(self) -> Any:
        if not self.accepts_value:
            return False
        if self.is_array:
            return list(self.default or [])
        return self.default


class CommandDefinition:
    """
    Ordered arguments and options of a batch command.

    Arguments follow the console rules: nothing may follow an array argument
    and a required argument may not follow an optional one. Once frozen, the
    definition no longer accepts new entries.
    """

    def __init__(self, arguments: Optional[List[ArgumentSpec]] = None, options: Optional[List[OptionSpec]] = None):
        self._arguments: dict[str, ArgumentSpec] = {}
        self._options: dict[str, OptionSpec] = {}
        self._frozen = False
        for argument in arguments or []:
            self.add_argument(argument)
        for option in options or []:
            self.add_option(option)

    def add_argument(self, argument: ArgumentSpec | str, **kwargs) -> "CommandDefinition":
        if isinstance(argument, str):
            argument = ArgumentSpec(name=argument, **kwargs)
        self._ensure_mutable()

        if argument.name in self._arguments:
            raise InvalidDefinitionException(f'An argument with name "{argument.name}" already exists.')

        if self._arguments:
            last = list(self._arguments.values())[-1]
            if last.is_array:
                raise InvalidDefinitionException(f'Cannot add argument "{argument.name}" after an array argument ("{last.name}").')
            if argument.required and not last.required:
                raise InvalidDefinitionException(f'Cannot add required argument "{argument.name}" after optional one ("{last.name}").')

        self._arguments[argument.name] = argument
        return self

    def add_option(self, option: OptionSpec | str, **kwargs) -> "CommandDefinition":
        if isinstance(option, str):
            option = OptionSpec(name=option, **kwargs)
        self._ensure_mutable()

        if option.name in self._options:
            raise InvalidDefinitionException(f'An option named "{option.name}" already exists.')
        if option.shortcut and any(o.shortcut == option.shortcut for o in self._options.values()):
            raise InvalidDefinitionException(f'An option with shortcut "{option.shortcut}" already exists.')

        self._options[option.name] = option
        return self

    @property
    def arguments(self) -> List[ArgumentSpec]:
        return list(self._arguments.values())

    @property
    def options(self) -> List[OptionSpec]:
        return list(self._options.values())

    def has_argument(self, name: str) -> bool:
        return name in self._arguments

    def get_argument(self, name: str) -> ArgumentSpec:
        if name not in self._arguments:
            raise InvalidArgumentException(name)
        return self._arguments[name]

    def has_option(self, name: str) -> bool:
        return name in self._options

    def get_option(self, name: str) -> OptionSpec:
        if name not in self._options:
            raise InvalidArgumentException(name, kind="option")
        return self._options[name]

    def freeze(self) -> "CommandDefinition":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """
        Register arguments and options on an argparse parser.

        Positional arguments are always optional for argparse: a missing
        required value is completed interactively, then validated.
        """
        for argument in self.arguments:
            parser.add_argument(
                argument.name,
                nargs="*" if argument.is_array else "?",
                default=argument.initial_value(),
                help=argument.description or None,
            )

        for option in self.options:
            flags = [f"--{option.name}"]
            if option.shortcut:
                flags.insert(0, f"-{option.shortcut}")

            if not option.accepts_value:
                parser.add_argument(*flags, dest=option.dest, action="store_true", help=option.description or None)
            elif option.is_array:
                parser.add_argument(*flags, dest=option.dest, action="append", default=None, help=option.description or None)
            else:
                parser.add_argument(*flags, dest=option.dest, default=option.initial_value(), help=option.description or None)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise InvalidDefinitionException("Cannot modify a frozen command definition.")
