from __future__ import annotations

from fast_batch import BatchCommand, BatchContext, CommandDefinition, Outcome


class NewClass(BatchCommand):
    @property
    def name(self) -> str:
        # Use namespaced name like "group:action"
        return "new:command"

    @property
    def help(self) -> str:
        return "Describe what this batch does"

    def configure(self, definition: CommandDefinition) -> None:
        definition.add_argument("target", required=True, description="What to process")
        definition.add_option("dry-run", description="Do not write anything")

    def do_execute(self, context: BatchContext) -> Outcome:
        items = [context.get_argument("target")]

        context.progress_start(len(items))
        for item in items:
            context.writeln_comment(f"Processing {item}")
            context.progress_advance()
        context.progress_finish()

        return Outcome.OK
