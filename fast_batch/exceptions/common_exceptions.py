from typing import Iterable, Optional

from fast_batch.utils.serialisation import get_exception_error_type


class AppException(Exception):
    def __init__(self,
        message: str,
        *,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Base exception for batch commands.

        Args:
            message: The error message.
            error_type: The error type (if not provided, it will be inferred from the exception class name).
            data: Extra data describing the error.
        """
        self.message = message
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)


class InvalidDefinitionException(AppException):
    """Raised when a command definition breaks an ordering or uniqueness rule."""


class InvalidArgumentException(AppException):
    def __init__(self, name: str, kind: str = "argument"):
        super().__init__(f'The "{name}" {kind} does not exist.', data={"name": name})
        self.name = name


class MissingArgumentsException(AppException):
    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            f'Not enough arguments (missing: "{", ".join(self.names)}").',
            data={"missing": self.names},
        )


class ParameterNotFoundException(AppException):
    def __init__(self, name: str):
        super().__init__(f'You have requested a non-existent parameter "{name}".', data={"name": name})
        self.name = name


class ProgressNotStartedException(AppException):
    def __init__(self):
        super().__init__("The progress bar is not started.")

