"""
Typer CLI for the quiz trainer.

Commands:
    quiz                 - Launch the interactive quiz shell
    quiz list            - List the stored quizzes
    quiz show <id>       - Show a quiz with its answer
    quiz add             - Add a quiz interactively
    quiz edit <id>       - Edit a quiz interactively
    quiz delete <id>     - Delete a quiz
    quiz test <id>       - Answer a single quiz
    quiz play            - Answer every quiz in random order until the first miss
    quiz credits         - Show the authors

Usage:
    quiz --help
    quiz play --seed 42
    python -m src.cli.main list
"""

from __future__ import annotations

import os
import sys

# Fix Windows encoding issues for Unicode characters
if sys.platform == "win32":
    os.environ.setdefault("PYTHONIOENCODING", "utf-8")
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from config import Settings, get_settings
from src.cli import commands
from src.core.exceptions import QuizError, QuizValidationError
from src.play import Aborted, Lost

app = typer.Typer(
    help="quiz: store question/answer pairs and play them from the terminal",
    no_args_is_help=False,  # Running without args opens the interactive shell
    invoke_without_command=True,
)

console = Console()


def configure_logging(settings: Settings) -> None:
    """Route loguru output to stderr and, optionally, a rotating log file."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB", retention=3)


def _store():
    try:
        return commands.open_store()
    except QuizError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


def _report_error(e: QuizError) -> None:
    if isinstance(e, QuizValidationError):
        console.print("[bold red]Error:[/] The quiz is invalid:")
        for message in e.messages:
            console.print(f"  [red]{escape(message)}[/]")
    else:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
    raise typer.Exit(code=1)


@app.callback()
def main_callback(ctx: typer.Context):
    """
    Quiz trainer.

    Run without arguments to open the interactive shell, or use a
    subcommand for a single operation.
    """
    configure_logging(get_settings())

    if ctx.invoked_subcommand is None:
        from src.cli.shell import run_shell

        run_shell(_store(), console=console)


@app.command("list")
def list_cmd():
    """List the stored quizzes."""
    try:
        commands.list_quizzes(console, _store())
    except QuizError as e:
        _report_error(e)


@app.command("show")
def show_cmd(quiz_id: Annotated[str, typer.Argument(help="Quiz id")]):
    """Show the question and answer of a quiz."""
    try:
        commands.show_quiz(console, _store(), quiz_id)
    except QuizError as e:
        _report_error(e)


@app.command("add")
def add_cmd():
    """Add a new quiz interactively."""
    try:
        commands.add_quiz(console, _store())
    except QuizError as e:
        _report_error(e)


@app.command("edit")
def edit_cmd(quiz_id: Annotated[str, typer.Argument(help="Quiz id")]):
    """Edit a quiz interactively."""
    try:
        commands.edit_quiz(console, _store(), quiz_id)
    except QuizError as e:
        _report_error(e)


@app.command("delete")
def delete_cmd(quiz_id: Annotated[str, typer.Argument(help="Quiz id")]):
    """Delete a quiz."""
    try:
        commands.delete_quiz(console, _store(), quiz_id)
    except QuizError as e:
        _report_error(e)


@app.command("test")
def test_cmd(quiz_id: Annotated[str, typer.Argument(help="Quiz id")]):
    """Answer a single quiz."""
    try:
        commands.try_quiz(console, _store(), quiz_id)
    except QuizError as e:
        _report_error(e)


@app.command("play")
def play_cmd(
    seed: Annotated[
        Optional[int], typer.Option("--seed", "-s", help="Random seed for the question order")
    ] = None,
):
    """
    Answer every quiz in random order until the first wrong answer.

    Exits with code 0 on a win, 1 on a miss, 2 when the game was aborted.
    """
    settings = get_settings()
    outcome = commands.play_quizzes(console, _store(), seed if seed is not None else settings.play_seed)
    if isinstance(outcome, Lost):
        raise typer.Exit(code=1)
    if isinstance(outcome, Aborted):
        raise typer.Exit(code=2)


@app.command("credits")
def credits_cmd():
    """Show the authors."""
    commands.show_credits(console)


if __name__ == "__main__":
    app()
