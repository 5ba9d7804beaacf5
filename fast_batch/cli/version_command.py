"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

import fast_batch
from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    @property
    def name(self) -> str:
        return "version"

    @property
    def help(self) -> str:
        return "Show version information"

    def _get_version(self) -> str:
        """Resolve version from installed package metadata, fallback to the package attribute."""
        try:
            return importlib_metadata.version("fast-batch")
        except importlib_metadata.PackageNotFoundError:
            return fast_batch.__version__

    def execute(self, args: argparse.Namespace) -> None:
        """Show version information."""
        print(f"FastBatch v{self._get_version()}")
