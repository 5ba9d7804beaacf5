from __future__ import annotations

from typing import Callable, Optional

from rich.cells import cell_len
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn, TimeElapsedColumn
from rich.prompt import Prompt
from rich.text import Text

from fast_batch.exceptions.common_exceptions import ProgressNotStartedException


class BatchStyle:
    """
    Styled reporter for batch commands.

    Renders titles, sections, result blocks and a progress bar on a rich
    console, and asks questions through ``Prompt.ask`` unless an ``ask``
    callable is injected. It never checks verbosity itself.
    """

    def __init__(self, console: Optional[Console] = None, ask: Optional[Callable[[str], str]] = None):
        self.console = console or Console(highlight=False)
        self._ask = ask
        self._progress: Optional[Progress] = None
        self._task: Optional[TaskID] = None

    def title(self, message: str) -> None:
        self.console.print(Text(message, style="bold yellow"))
        self.console.print(Text("=" * cell_len(message), style="yellow"))
        self.console.line()

    def section(self, message: str) -> None:
        self.console.print(Text(message, style="bold yellow"))
        self.console.print(Text("-" * cell_len(message), style="yellow"))
        self.console.line()

    def success(self, message: str) -> None:
        self._block("OK", message, "black on green")

    def new_line(self, count: int = 1) -> None:
        self.console.line(count)

    def ask(self, question: str) -> str:
        if self._ask is not None:
            return self._ask(question)
        return Prompt.ask(Text(f" {question}", style="green"), console=self.console)

    def progress_start(self, max: int = 0) -> None:
        self.progress_clear()
        self._progress = Progress(
            TextColumn(" "),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._progress.start()
        self._task = self._progress.add_task("", total=max or None)

    def progress_advance(self, step: int = 1) -> None:
        progress, task = self._current_progress()
        progress.advance(task, step)

    def progress_finish(self) -> None:
        progress, task = self._current_progress()
        state = next(t for t in progress.tasks if t.id == task)
        if state.total is None or state.completed > state.total:
            progress.update(task, total=state.completed)
        progress.update(task, completed=state.total)
        self.progress_clear()

    def progress_clear(self) -> None:
        """Stop a running bar where it stands, if there is one."""
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task = None

    def _current_progress(self) -> tuple[Progress, TaskID]:
        if self._progress is None or self._task is None:
            raise ProgressNotStartedException()
        return self._progress, self._task

    def _block(self, label: str, message: str, style: str) -> None:
        self.console.print(Text(f" [{label}] {message}", style=style))
        self.console.line()
