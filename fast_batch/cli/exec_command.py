import argparse
import difflib
import importlib
import importlib.util
import inspect
import pkgutil
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional

from fast_batch import config
from fast_batch.cli.command_base import CommandBase
from fast_batch.contracts.batch_command import BatchCommand


class ExecCommand(CommandBase):
    @property
    def name(self) -> str:
        return "exec"

    @property
    def help(self) -> str:
        return "Run app batch commands from app/cli"

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("exec_command", nargs="?", help="Command name, e.g. group:action")
        parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the batch command")
        parser.add_argument("--list", "-l", dest="list_commands", action="store_true", help="List available batch commands and exit")

    def execute(self, args: argparse.Namespace) -> Optional[int]:
        exec_command = args.exec_command
        if args.list_commands or exec_command is None or exec_command.lower() == "list":
            _list_app_commands()
            return 0

        commands = _discover_app_commands()
        target = commands.get(exec_command)
        if not target:
            print(f"❌ Unknown batch command: {args.exec_command}")
            _suggest_similar(args.exec_command, list(commands.keys()))
            print("Use 'fast-batch exec --list' to see available batch commands.")
            return BatchCommand.EXIT_CODE_KO

        target.boot()
        return target.run(args.args)


def _commands_path() -> Path:
    return Path.cwd() / config.BATCH_COMMANDS_PATH


def _package_name() -> str:
    return config.BATCH_COMMANDS_PATH.strip("/").replace("/", ".")


def _list_app_commands() -> None:
    commands = _discover_app_commands()
    if not commands:
        print(f"No batch commands found under {config.BATCH_COMMANDS_PATH}")
        return
    print("Available batch commands:\n")
    for name, cmd in sorted(commands.items()):
        print(f"  {name:20} {cmd.help}")


def _discover_app_commands() -> dict[str, BatchCommand]:
    results: dict[str, BatchCommand] = {}
    app_cli_path = _commands_path()
    if not app_cli_path.exists() or not app_cli_path.is_dir():
        return results

    _ensure_project_path_on_syspath(Path.cwd())

    _load_provider_commands(results)
    imported_modules = _load_package_modules(results)
    _load_fallback_modules(app_cli_path, imported_modules, results)

    return results


def _load_provider_commands(results: dict[str, BatchCommand]) -> None:
    try:
        provider = importlib.import_module(f"{_package_name()}.provider")
    except ModuleNotFoundError:
        return
    except Exception as exc:
        print(f"⚠️  Failed loading {_package_name()}.provider: {exc}")
        return

    get_commands = getattr(provider, "get_commands", None)
    if callable(get_commands):
        for cmd in get_commands():
            _register_command(cmd, results)


def _load_package_modules(results: dict[str, BatchCommand]) -> set[str]:
    imported: set[str] = set()
    package_name = _package_name()
    try:
        pkg = importlib.import_module(package_name)
    except ModuleNotFoundError:
        return imported
    except Exception as exc:
        print(f"⚠️  Failed importing {package_name}: {exc}")
        return imported

    module_path = getattr(pkg, "__path__", None)
    if module_path is None:
        _collect_module_commands(pkg, results)
        return imported

    for _, module_name, _ in pkgutil.iter_modules(module_path):
        if module_name.startswith("__") or module_name == "provider":
            continue
        try:
            mod = importlib.import_module(f"{package_name}.{module_name}")
        except Exception as exc:
            print(f"⚠️  Skipping {package_name}.{module_name}: {exc}")
            continue
        imported.add(module_name)
        _collect_module_commands(mod, results)
    return imported


def _load_fallback_modules(app_cli_path: Path, imported_modules: set[str], results: dict[str, BatchCommand]) -> None:
    for module_path in sorted(app_cli_path.glob("*.py")):
        module_name = module_path.stem
        if module_name.startswith("__") or module_name == "provider" or module_name in imported_modules:
            continue

        spec = importlib.util.spec_from_file_location(f"{_package_name()}.{module_name}", module_path)
        if spec is None or spec.loader is None:
            print(f"⚠️  Skipping {module_path.name}: unable to create module spec")
            continue

        module = importlib.util.module_from_spec(spec)
        sys.modules[spec.name] = module
        try:
            spec.loader.exec_module(module)  # type: ignore[union-attr]
        except Exception as exc:
            print(f"⚠️  Skipping {module_path.name}: {exc}")
            continue
        _collect_module_commands(module, results)


def _collect_module_commands(module: ModuleType, results: dict[str, BatchCommand]) -> None:
    for obj in module.__dict__.values():
        if (
            isinstance(obj, type)
            and issubclass(obj, BatchCommand)
            and obj is not BatchCommand
            and not inspect.isabstract(obj)
            and obj.__module__ == module.__name__
        ):
            _register_command(obj(), results)


def _register_command(command: BatchCommand, results: dict[str, BatchCommand]) -> None:
    if command.name in results:
        raise ValueError(f"Duplicate batch command: {command.name}")
    results[command.name] = command


def _ensure_project_path_on_syspath(project_path: Path) -> None:
    project_str = str(project_path)
    if project_str not in sys.path:
        sys.path.insert(0, project_str)
        importlib.invalidate_caches()


def _suggest_similar(target: str, choices: list[str]) -> None:
    matches = difflib.get_close_matches(target, choices, n=3, cutoff=0.4)
    if matches:
        print("Did you mean:")
        for m in matches:
            print(f"  {m}")
