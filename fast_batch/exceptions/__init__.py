"""Custom exceptions for batch commands."""

from .common_exceptions import (
    AppException,
    InvalidDefinitionException,
    InvalidArgumentException,
    MissingArgumentsException,
    ParameterNotFoundException,
    ProgressNotStartedException,
)


__all__ = [
    "AppException",
    "InvalidDefinitionException",
    "InvalidArgumentException",
    "MissingArgumentsException",
    "ParameterNotFoundException",
    "ProgressNotStartedException",
]
