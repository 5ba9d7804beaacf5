import pytest
from rich.progress import Progress

from fast_batch.core.style import BatchStyle
from fast_batch.exceptions import ProgressNotStartedException


def test_title_and_section_are_underlined(console):
    style = BatchStyle(console)

    style.title("import:users")
    style.section("Arguments mandatory")

    lines = console.file.getvalue().splitlines()
    assert lines[:2] == ["import:users", "============"]
    assert "Arguments mandatory" in lines
    assert "-" * len("Arguments mandatory") in lines


def test_success_block(console):
    style = BatchStyle(console)

    style.success("Batch import:users ended ok")

    assert "[OK] Batch import:users ended ok" in console.file.getvalue()


def test_ask_uses_injected_callable(console):
    asked = []
    style = BatchStyle(console, ask=lambda question: asked.append(question) or "answer")

    assert style.ask("Please enter the value of source") == "answer"
    assert asked == ["Please enter the value of source"]


def test_progress_must_be_started(console):
    style = BatchStyle(console)

    with pytest.raises(ProgressNotStartedException):
        style.progress_advance()
    with pytest.raises(ProgressNotStartedException):
        style.progress_finish()


def test_progress_runs_to_completion(console):
    style = BatchStyle(console)

    style.progress_start(3)
    style.progress_advance()
    style.progress_advance(2)
    style.progress_finish()

    with pytest.raises(ProgressNotStartedException):
        style.progress_advance()


def test_progress_without_max_finishes_on_current_count(console):
    style = BatchStyle(console)

    style.progress_start()
    style.progress_advance(4)
    style.progress_finish()


def test_starting_a_bar_stops_the_running_one(console, monkeypatch):
    stopped = []
    original_stop = Progress.stop

    def stop(progress):
        stopped.append(progress)
        original_stop(progress)

    monkeypatch.setattr(Progress, "stop", stop)
    style = BatchStyle(console)

    style.progress_start(5)
    first = style._progress
    style.progress_start(2)

    assert stopped == [first]
    assert style._progress is not first
    style.progress_finish()


def test_progress_clear_is_safe_without_a_bar(console):
    style = BatchStyle(console)

    style.progress_clear()
    style.progress_start(3)
    style.progress_advance()
    style.progress_clear()

    with pytest.raises(ProgressNotStartedException):
        style.progress_finish()
