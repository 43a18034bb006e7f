"""
Interactive quiz shell.

A ``cmd.Cmd`` loop over the shared quiz commands. Every command reports
its own errors and returns to the prompt; only ``quit``, ``q`` or end of
input leave the shell.
"""
from __future__ import annotations

import cmd
from collections.abc import Callable

from loguru import logger
from rich.console import Console
from rich.markup import escape

from config import Settings, get_settings
from src.cli import commands
from src.core.exceptions import QuizError, QuizValidationError
from src.db.quiz_store import QuizStore


class QuizShell(cmd.Cmd):
    """Line-oriented front end for managing and playing quizzes."""

    intro = None

    def __init__(
        self,
        store: QuizStore,
        console: Console | None = None,
        settings: Settings | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.store = store
        self.console = console or Console()
        self.settings = settings or get_settings()
        self.prompt = self.settings.prompt_text

    def _run(self, command: Callable, *args) -> None:
        """Run a command, printing any quiz error instead of raising it."""
        try:
            command(self.console, self.store, *args)
        except QuizValidationError as e:
            self.console.print("[bold red]Error:[/] The quiz is invalid:")
            for message in e.messages:
                self.console.print(f"  [red]{escape(message)}[/]")
        except QuizError as e:
            logger.warning(f"Command failed: {e}")
            self.console.print(f"[bold red]Error:[/] {escape(str(e))}")

    @staticmethod
    def _arg(arg: str) -> str | None:
        return arg.split()[0] if arg.strip() else None

    def emptyline(self) -> bool:
        # Do not repeat the previous command
        return False

    def default(self, line: str) -> None:
        self.console.print(f"[bold red]Error:[/] Unknown command: '{escape(line.split()[0])}'")
        self.console.print("Use [green]help[/] to see the available commands.")

    def do_help(self, arg: str) -> None:
        commands.print_help(self.console)

    do_h = do_help

    def do_list(self, arg: str) -> None:
        self._run(commands.list_quizzes)

    def do_show(self, arg: str) -> None:
        self._run(commands.show_quiz, self._arg(arg))

    def do_add(self, arg: str) -> None:
        self._run(commands.add_quiz)

    def do_delete(self, arg: str) -> None:
        self._run(commands.delete_quiz, self._arg(arg))

    def do_edit(self, arg: str) -> None:
        self._run(commands.edit_quiz, self._arg(arg))

    def do_test(self, arg: str) -> None:
        self._run(commands.try_quiz, self._arg(arg))

    def do_play(self, arg: str) -> None:
        self._run(commands.play_quizzes, self.settings.play_seed)

    do_p = do_play

    def do_credits(self, arg: str) -> None:
        commands.show_credits(self.console, self.settings)

    def do_quit(self, arg: str) -> bool:
        return True

    do_q = do_quit

    def do_EOF(self, arg: str) -> bool:
        self.console.print()
        return True

    def postloop(self) -> None:
        self.console.print("[dim]Bye![/]")


def run_shell(store: QuizStore, console: Console | None = None) -> None:
    """Run the shell until quit; Ctrl+C at the prompt only cancels the line."""
    shell = QuizShell(store, console=console)
    while True:
        try:
            shell.cmdloop()
            return
        except KeyboardInterrupt:
            shell.console.print("^C")
