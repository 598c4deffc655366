"""Interactive task shell - the offline-capable client.

Every line typed is one user action on the sync controller; the screen is
re-rendered from the derived view after each action.
"""

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter

from tasktrack.adapters.rest_api import RestApiTaskRepository
from tasktrack.config import get_config_manager
from tasktrack.models import SyncMode, Task, ViewFilter
from tasktrack.services.api.client import APIClient
from tasktrack.services.sync_controller import Outcome, OperationResult, SyncController
from tasktrack.utils.ui.console import apply_output_config, get_console
from tasktrack.utils.ui.formatters import format_error, format_info, render_task_list

from .decorators import command_wrapper

console = get_console()

HELP_TEXT = """\
  add <description>        create a task
  toggle <n>               flip task n between pending and completed
  edit <n> <description>   change the description of task n
  rm <n>                   delete task n
  filter all|pending|completed
  mode remote|local        switch where changes are sent
  dismiss                  hide the error banner
  ls                       redraw the task list
  help                     show this help
  quit                     leave the shell
"""

COMMANDS = ["add", "toggle", "edit", "rm", "filter", "mode", "dismiss", "ls", "help", "quit"]


class ShellSession:
    """Parses shell lines into controller calls and renders the result."""

    def __init__(self, controller: SyncController):
        self.controller = controller

    def render(self) -> None:
        c = self.controller
        render_task_list(
            tasks=c.view(),
            counts=c.counts(),
            view_filter=c.view_filter,
            mode=c.mode,
            last_error=c.last_error,
            loading=c.loading,
        )

    def _task_at(self, position: str) -> Task | None:
        """Resolve a 1-based position in the current view."""
        view = self.controller.view()
        if position.isdigit() and 1 <= int(position) <= len(view):
            return view[int(position) - 1]
        format_error(f"No task at position '{position}'")
        return None

    def _report(self, result: OperationResult) -> None:
        if result.outcome in (Outcome.VALIDATION_ERROR, Outcome.NOT_FOUND):
            format_error(result.message or "Operation failed")
        elif result.outcome is Outcome.DISCARDED:
            format_info(result.message or "Response ignored")

    async def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should exit."""
        command, _, rest = line.strip().partition(" ")
        if not command:
            return True
        command, rest = command.lower(), rest.strip()
        args = rest.split()
        c = self.controller

        if command in ("quit", "exit"):
            return False
        if command == "help":
            console.print(HELP_TEXT)
            return True

        if command == "add":
            self._report(await c.create(rest))
        elif command in ("toggle", "edit", "rm", "delete"):
            if not args:
                format_error(f"Usage: {command} <n>")
                return True
            task = self._task_at(args[0])
            if task is None:
                return True
            if command == "toggle":
                self._report(await c.toggle(task.id))
            elif command == "edit":
                self._report(await c.update(task.id, description=rest.partition(" ")[2].strip()))
            else:
                self._report(await c.delete(task.id))
        elif command == "filter":
            try:
                c.set_filter(args[0] if args else "")
            except ValueError:
                format_error("Usage: filter all|pending|completed")
                return True
        elif command == "mode":
            try:
                mode = SyncMode(args[0] if args else "")
            except ValueError:
                format_error("Usage: mode remote|local")
                return True
            await c.set_mode(mode)
        elif command == "dismiss":
            c.dismiss_error()
        elif command != "ls":
            format_error(f"Unknown command '{command}'. Type 'help' for a list.")
            return True

        self.render()
        return True

    async def run(self) -> None:
        """Read-eval-render loop until quit or EOF."""
        session: PromptSession = PromptSession(
            completer=WordCompleter(COMMANDS + [f.value for f in ViewFilter] + [m.value for m in SyncMode])
        )
        self.render()
        while True:
            try:
                line = await session.prompt_async("tasks> ")
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if not await self.handle(line):
                break


@command_wrapper
async def shell(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    mode: SyncMode | None = typer.Option(None, "--mode", "-m", help="Start in remote or local mode"),
) -> None:
    """Open the interactive task client."""
    config = get_config_manager(profile).config
    apply_output_config(config.output)
    controller = SyncController(
        RestApiTaskRepository(APIClient(config.api)),
        mode=mode or config.client.mode,
        view_filter=config.client.filter,
    )
    try:
        await controller.start()
        await ShellSession(controller).run()
    finally:
        await controller.close()
