from .file_utils import resolve_cli_path
from .serialisation import pascal_case_to_snake_case, snake_case_to_pascal_case

__all__ = [
    "resolve_cli_path",
    "pascal_case_to_snake_case",
    "snake_case_to_pascal_case",
]
