from typing import Any, Dict, Optional

from fast_batch.core.parameters import ParameterBag
from fast_batch.decorators.singleton_decorator import singleton


@singleton
class Application:
    """
    Singleton application container holding the parameters batches can read.
    """

    def __init__(self):
        """Initialize the application container."""
        self._parameters = ParameterBag()
        self._boot_args: Dict[str, Any] = {}

    @property
    def parameters(self) -> ParameterBag:
        return self._parameters

    def set_parameters(self, parameters: Optional[Dict[str, Any]]) -> None:
        """
        Replace the parameter bag.

        Args:
            parameters: Mapping of parameter name to value
        """
        self._parameters = ParameterBag(parameters)

    def get_parameter(self, name: str) -> Any:
        return self._parameters.get(name)

    def reset(self) -> None:
        """Reset the application state (useful for testing)."""
        self._parameters = ParameterBag()
        self._boot_args.clear()

    def set_boot_args(self, **kwargs) -> None:
        """Set the boot arguments for the application."""
        self._boot_args = kwargs

    def get_boot_args(self) -> Dict[str, Any]:
        """Get the boot arguments for the application."""
        return self._boot_args

    def is_booted(self) -> bool:
        """Check if the application has been booted."""
        return len(self._boot_args.keys()) > 0
