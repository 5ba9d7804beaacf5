"""Create batch commands from templates."""

import argparse
import re
from pathlib import Path

from fast_batch import config
from fast_batch.utils.file_utils import resolve_cli_path
from fast_batch.utils.serialisation import (
    command_name_from_class,
    pascal_case_to_snake_case,
    snake_case_to_pascal_case,
    is_pascal_case,
    is_snake_case,
)
from .command_base import CommandBase

TEMPLATES_PATH = Path(__file__).parent.parent / "templates"


class MakeCommand(CommandBase):
    """Command to create a batch command from the template."""

    @property
    def name(self) -> str:
        return "make"

    @property
    def help(self) -> str:
        return "Create a batch command (app/cli/<name>.py)"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("name", help="Class name of the batch (e.g., ImportUsers or import_users)")
        parser.add_argument(
            "--command-name",
            help="Name used with `fast-batch exec` (defaults to one derived from the class name)",
        )
        parser.add_argument(
            "--path",
            help="Override destination directory (relative to project root)",
        )

    def execute(self, args: argparse.Namespace) -> int:
        """Create file from template."""
        template_path = TEMPLATES_PATH / "make" / "batch_command.py"
        if not template_path.exists():
            print(f"❌ Template not found: {template_path}")
            return 1

        # Determine provided name style; default to snake_case if uncertain
        if is_pascal_case(args.name):
            class_name = args.name
            file_name = pascal_case_to_snake_case(class_name)
        else:
            class_name = snake_case_to_pascal_case(args.name)
            file_name = args.name if is_snake_case(args.name) else pascal_case_to_snake_case(class_name)

        command_name = getattr(args, "command_name", None) or command_name_from_class(class_name)
        content = self._process_template(template_path, class_name, command_name)

        try:
            dest_dir = resolve_cli_path(args.path, config.BATCH_COMMANDS_PATH)
        except ValueError as exc:
            print(f"❌ {exc}")
            return 1
        dest_file = dest_dir / f"{file_name}.py"

        if dest_file.exists():
            print(f"❌ File exists: {dest_file}")
            return 1

        dest_file.parent.mkdir(parents=True, exist_ok=True)
        dest_file.write_text(content, encoding='utf-8')

        print(f"✅ Created batch command: {dest_file}")
        print(f"💡 Run it with: fast-batch exec {command_name} -v")
        return 0

    def _process_template(self, template_path: Path, class_name: str, command_name: str) -> str:
        """Process template with class and command name replacement."""
        content = template_path.read_text(encoding='utf-8')
        content = re.sub(r'\bNewClass\b', class_name, content)
        return content.replace('"new:command"', f'"{command_name}"')
