from .singleton_decorator import singleton

__all__ = [
    "singleton",
]
