#!/usr/bin/env python3
"""FastBatch CLI - batch commands for FastApp-style projects."""

import argparse
import sys
from typing import List, Optional

from .exec_command import ExecCommand
from .make_command import MakeCommand
from .version_command import VersionCommand


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="FastBatch CLI - scaffold and run batch commands",
        prog="fast-batch"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    commands = [
        ExecCommand(),
        MakeCommand(),
        VersionCommand(),
    ]

    command_map = {}
    for command in commands:
        cmd_parser = subparsers.add_parser(command.name, help=command.help)
        command.configure_parser(cmd_parser)
        command_map[command.name] = command

    args = parser.parse_args(argv)

    if args.command in command_map:
        return command_map[args.command].execute(args) or 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
