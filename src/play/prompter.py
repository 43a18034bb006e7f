"""
Prompters: where a play session gets its answers from.

A prompter asks one question at a time and resolves to the user's answer
with surrounding whitespace already stripped. When no answer can be
produced it raises ``InputFailure`` instead of returning something that
could be mistaken for a wrong answer.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Protocol

from loguru import logger
from rich.console import Console
from rich.text import Text

from src.core.exceptions import InputFailure


class Prompter(Protocol):
    """Protocol for answer sources."""

    async def ask(self, text: str) -> str:
        """Show ``text`` and return the stripped answer. Raises InputFailure."""
        ...


class ConsolePrompter:
    """
    Reads answers from the terminal through a rich Console.

    Each question is read on a daemon thread so the event loop stays free
    while the user types; cancelling the awaiting task never blocks on the
    pending read.
    """

    def __init__(self, console: Console | None = None, style: str = "red"):
        self.console = console or Console()
        self.style = style

    async def ask(self, text: str) -> str:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()

        def _resolve(answer: str | None, error: BaseException | None) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(answer)

        def _read() -> None:
            answer: str | None = None
            error: BaseException | None = None
            try:
                answer = self.console.input(Text(f"{text} ", style=self.style)).strip()
            except EOFError:
                error = InputFailure("input stream closed")
            except Exception as e:  # Intentionally broad - the future must always resolve
                error = InputFailure(f"could not read answer: {e}")

            try:
                loop.call_soon_threadsafe(_resolve, answer, error)
            except RuntimeError:
                # Loop already closed: the session was cancelled mid-question.
                logger.debug("Dropping answer read after event loop shutdown")

        threading.Thread(target=_read, name="quiz-prompt", daemon=True).start()
        return await future
