"""Contract classes and abstract interfaces.

These are exported so they can be imported directly from :mod:`fast_batch`.
"""

from .batch_command import BatchCommand

__all__ = [
    "BatchCommand",
]
