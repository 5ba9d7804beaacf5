from pathlib import Path

import pytest

from fast_batch.cli.main import main

GREET_COMMAND = '''
from fast_batch import BatchCommand, BatchContext, CommandDefinition, Outcome


class Greet(BatchCommand):
    @property
    def name(self) -> str:
        return "greet:user"

    @property
    def help(self) -> str:
        return "Say hello"

    def configure(self, definition: CommandDefinition) -> None:
        definition.add_argument("user", required=True)
        definition.add_option("fail")

    def boot(self) -> None:
        pass

    def do_execute(self, context: BatchContext) -> Outcome:
        print(f"hello {context.get_argument('user')}")
        return Outcome.KO if context.get_option("fail") else Outcome.OK
'''


@pytest.fixture
def project(tmp_path, monkeypatch, purge_app_modules):
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))
    cli_dir = tmp_path / "app" / "cli"
    cli_dir.mkdir(parents=True)
    (tmp_path / "app" / "__init__.py").write_text("", encoding="utf-8")
    (cli_dir / "__init__.py").write_text("", encoding="utf-8")
    (cli_dir / "greet.py").write_text(GREET_COMMAND, encoding="utf-8")
    return tmp_path


def test_exec_runs_app_batch_and_returns_exit_code(project, capsys):
    assert main(["exec", "greet:user", "ada"]) == 0
    assert "hello ada" in capsys.readouterr().out


def test_exec_returns_one_on_ko(project, capsys):
    assert main(["exec", "greet:user", "ada", "--fail"]) == 1
    assert "hello ada" in capsys.readouterr().out


def test_exec_lists_commands(project, capsys):
    assert main(["exec", "--list"]) == 0
    out = capsys.readouterr().out
    assert "greet:user" in out
    assert "Say hello" in out


def test_exec_suggests_similar_names(project, capsys):
    assert main(["exec", "greet:usr"]) == 1
    out = capsys.readouterr().out
    assert "Unknown batch command: greet:usr" in out
    assert "greet:user" in out


def test_exec_without_app_cli_finds_nothing(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main(["exec", "--list"]) == 0
    assert "No batch commands found" in capsys.readouterr().out


def test_make_then_exec(tmp_path, monkeypatch, purge_app_modules, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.syspath_prepend(str(tmp_path))

    assert main(["make", "ImportUsers"]) == 0
    assert Path("app/cli/import_users.py").exists()

    assert main(["exec", "--list"]) == 0
    assert "import:users" in capsys.readouterr().out


def test_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.startswith("FastBatch v")
