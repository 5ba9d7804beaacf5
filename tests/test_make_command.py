import argparse
from pathlib import Path

from fast_batch.cli.make_command import MakeCommand


def test_make_batch_from_pascal_case_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    command = MakeCommand()
    args = argparse.Namespace(name="ImportUsers", command_name=None, path=None)

    assert command.execute(args) == 0

    generated = Path("app/cli/import_users.py")
    assert generated.exists()

    content = generated.read_text(encoding="utf-8")
    assert "class ImportUsers(BatchCommand):" in content
    assert 'return "import:users"' in content
    assert "def do_execute(self, context: BatchContext) -> Outcome:" in content
    assert "NewClass" not in content


def test_make_batch_from_snake_case_name_with_explicit_command_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    args = argparse.Namespace(name="purge_tokens", command_name="tokens:purge", path="batches")

    assert MakeCommand().execute(args) == 0

    content = Path("batches/purge_tokens.py").read_text(encoding="utf-8")
    assert "class PurgeTokens(BatchCommand):" in content
    assert 'return "tokens:purge"' in content


def test_make_refuses_to_overwrite(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    args = argparse.Namespace(name="ImportUsers", command_name=None, path=None)

    MakeCommand().execute(args)
    assert MakeCommand().execute(args) == 1

    assert "File exists" in capsys.readouterr().out


def test_make_rejects_paths_outside_project(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    args = argparse.Namespace(name="ImportUsers", command_name=None, path="../elsewhere")

    assert MakeCommand().execute(args) == 1
    assert "inside the project directory" in capsys.readouterr().out
