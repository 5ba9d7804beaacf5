from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Protocol

from fast_batch.exceptions.common_exceptions import ParameterNotFoundException


class ParameterSource(Protocol):
    def get(self, name: str) -> Any:
        ...


class ParameterBag(Mapping):
    """Read-only named configuration values of the hosting application."""

    def __init__(self, parameters: Optional[Dict[str, Any]] = None):
        self._parameters: Dict[str, Any] = dict(parameters or {})

    def get(self, name: str, *args) -> Any:
        if name in self._parameters:
            return self._parameters[name]
        if args:
            return args[0]
        raise ParameterNotFoundException(name)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters

    def __iter__(self) -> Iterator[str]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"ParameterBag({self._parameters!r})"
