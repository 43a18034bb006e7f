"""
Quiz commands shared by the typer CLI and the interactive shell.

Each command prints through a rich Console and raises ``QuizError``
subclasses for the caller to report; none of them exit the process.
"""
from __future__ import annotations

import asyncio
import random

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from config import Settings, get_settings
from src.core.exceptions import InputFailure, InvalidQuizIdError
from src.db.database import init_db, seed_defaults
from src.db.quiz_store import QuizStore
from src.play import (
    ConsolePrompter,
    PlaySession,
    Prompter,
    QuizItem,
    SessionOutcome,
    answers_match,
    build_report,
)

COMMAND_HELP = [
    ("h|help", "Show this help."),
    ("list", "List the existing quizzes."),
    ("show <id>", "Show the question and answer of the given quiz."),
    ("add", "Add a new quiz interactively."),
    ("delete <id>", "Delete the given quiz."),
    ("edit <id>", "Edit the given quiz."),
    ("test <id>", "Try the given quiz."),
    ("p|play", "Play: answer every quiz in random order."),
    ("credits", "Credits."),
    ("q|quit", "Quit the program."),
]


def open_store(settings: Settings | None = None) -> QuizStore:
    """Create tables if needed, seed an empty store, return a QuizStore."""
    settings = settings or get_settings()
    init_db()
    if settings.seed_default_quizzes:
        seed_defaults()
    return QuizStore()


def validate_id(raw: str | None) -> int:
    """Parse an <id> command parameter. The whole value must be an integer ("3abc" is rejected)."""
    if raw is None or not str(raw).strip():
        raise InvalidQuizIdError("Missing <id> parameter.")
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidQuizIdError("The <id> parameter is not a number.") from None


def ask_text(text: str, default: str | None = None, console: Console | None = None) -> str:
    """Prompt for one line of text; a closed input stream raises InputFailure."""
    try:
        if default is None:
            answer = Prompt.ask(f"[red]{escape(text)}[/]", console=console)
        else:
            answer = Prompt.ask(f"[red]{escape(text)}[/]", default=default, console=console)
    except EOFError:
        raise InputFailure("input stream closed") from None
    return answer.strip()


def format_quiz(item: QuizItem, with_answer: bool = True) -> str:
    line = f"\\[[magenta]{item.id}[/]]: {escape(item.question)}"
    if with_answer:
        line += f" [magenta]=>[/] {escape(item.answer)}"
    return line


def print_help(console: Console) -> None:
    console.print("Commands:")
    for usage, description in COMMAND_HELP:
        console.print(f"  [cyan]{escape(usage)}[/] - {description}")


def list_quizzes(console: Console, store: QuizStore) -> None:
    items = store.fetch_all()
    if not items:
        console.print("[dim]No quizzes stored yet. Use 'add' to create one.[/]")
    for item in items:
        console.print(format_quiz(item, with_answer=False))


def show_quiz(console: Console, store: QuizStore, raw_id: str | None) -> QuizItem:
    item = store.get(validate_id(raw_id))
    console.print(format_quiz(item))
    return item


def add_quiz(console: Console, store: QuizStore) -> QuizItem:
    question = ask_text("Enter a question:", console=console)
    answer = ask_text("Enter the answer:", console=console)
    item = store.create(question, answer)
    console.print(f" [magenta]Added[/]: {escape(item.question)} [magenta]=>[/] {escape(item.answer)}")
    return item


def delete_quiz(console: Console, store: QuizStore, raw_id: str | None) -> None:
    quiz_id = validate_id(raw_id)
    store.delete(quiz_id)
    console.print(f"Deleted quiz [magenta]{quiz_id}[/].")


def edit_quiz(console: Console, store: QuizStore, raw_id: str | None) -> QuizItem:
    current = store.get(validate_id(raw_id))
    question = ask_text("Enter the question:", default=current.question, console=console)
    answer = ask_text("Enter the answer:", default=current.answer, console=console)
    item = store.update(current.id, question, answer)
    console.print(
        f"Quiz [magenta]{item.id}[/] changed to: "
        f"{escape(item.question)} [magenta]=>[/] {escape(item.answer)}"
    )
    return item


def try_quiz(console: Console, store: QuizStore, raw_id: str | None) -> bool:
    """Ask a single quiz; returns whether the answer was correct."""
    item = store.get(validate_id(raw_id))
    answer = ask_text(f"{item.question}?", console=console)
    correct = answers_match(answer, item.answer)
    if correct:
        console.print("[bold green]CORRECT[/]")
    else:
        console.print("[bold red]INCORRECT[/]")
    return correct


def play_quizzes(
    console: Console,
    store: QuizStore,
    seed: int | None = None,
    prompter: Prompter | None = None,
) -> SessionOutcome:
    """
    Play every quiz in random order until the first miss.

    Ctrl+C while a question is pending ends the game as
    ``Aborted(score, "cancelled")`` and still prints the report.
    """
    prompter = prompter or ConsolePrompter(console)
    rng = random.Random(seed) if seed is not None else None

    def on_answer(quiz: QuizItem, answer: str, correct: bool) -> None:
        if correct:
            console.print("[green]Correct answer[/]")
        else:
            console.print("[red]Incorrect answer[/]")

    session = PlaySession(prompter, rng=rng, on_answer=on_answer)
    try:
        outcome = asyncio.run(session.play(store))
    except KeyboardInterrupt:
        console.print()
        outcome = session.interrupted()
    logger.info(f"Play finished: {outcome}")

    report = build_report(outcome)
    console.print(f"[bold {report.style}]{escape(report.headline)}[/]")
    for line in report.lines[1:]:
        console.print(line, style="magenta")
    return outcome


def show_credits(console: Console, settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    console.print("Authors:")
    for author in settings.credits_authors:
        console.print(f"  [green]{escape(author)}[/]")
