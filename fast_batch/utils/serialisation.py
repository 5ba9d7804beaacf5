import re


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    # Insert underscores before capital letters, except at the start
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    snake = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return snake


def snake_case_to_pascal_case(snake: str) -> str:
    """
    Convert snake_case to PascalCase.

    Args:
        snake: The snake_case string.

    Returns:
        str: The PascalCase version of the string.
    """
    components = snake.split('_')
    return ''.join(word.capitalize() for word in components)


def is_snake_case(name: str) -> bool:
    """
    Basic check whether a string looks like snake_case.

    Accepts lowercase letters and digits separated by single underscores.
    """
    return re.fullmatch(r"[a-z]+(?:_[a-z0-9]+)*", name) is not None


def is_pascal_case(name: str) -> bool:
    """
    Basic check whether a string looks like PascalCase.

    Accepts sequences starting with an uppercase letter and then alphanumerics.
    """
    return re.fullmatch(r"[A-Z][A-Za-z0-9]*", name) is not None


def get_exception_error_type(exception: Exception) -> str:
    return pascal_case_to_snake_case(exception.__class__.__name__.replace('Exception', ''))


def command_name_from_class(cls: type | str) -> str:
    """Derive a "group:action" command name from a class name, e.g. ImportUsersBatch -> import:users."""
    name = cls if isinstance(cls, str) else cls.__name__
    for suffix in ("BatchCommand", "Command", "Batch"):
        if name.endswith(suffix) and len(name) > len(suffix):
            name = name[:-len(suffix)]
            break
    parts = pascal_case_to_snake_case(name).split("_")
    if len(parts) == 1:
        return parts[0]
    return f"{parts[0]}:{'-'.join(parts[1:])}"
