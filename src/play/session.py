"""
Play Session: ask every quiz once, in random order, until a miss.

The session owns a pool of not-yet-asked quizzes and a running score.
Each iteration draws one quiz uniformly at random from the pool, removes
it, and waits for the answer. A correct answer scores a point and moves
on; the first wrong answer ends the game. Emptying the pool wins it.

Usage:
    session = PlaySession(ConsolePrompter(), rng=random.Random(42))
    outcome = await session.start(store.fetch_all())

    # or, loading from the store with failures surfaced as Aborted:
    outcome = await play(store, ConsolePrompter())
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable, Sequence
from typing import Protocol

from loguru import logger

from src.core.exceptions import InputFailure, StoreFailure
from src.play.answers import answers_match
from src.play.models import (
    Aborted,
    Lost,
    QuizItem,
    SessionOutcome,
    SessionState,
    Won,
)
from src.play.prompter import Prompter

AnswerCallback = Callable[[QuizItem, str, bool], None]


class QuizSource(Protocol):
    """The part of the quiz store a play session needs."""

    def fetch_all(self) -> list[QuizItem]:
        ...


class PlaySession:
    """
    One play-through from a loaded question set to a terminal outcome.

    Exactly one question is outstanding at any time. ``on_answer`` is
    called after every answer with ``(quiz, answer, correct)`` so the
    caller can render per-answer feedback.
    """

    def __init__(
        self,
        prompter: Prompter,
        rng: random.Random | None = None,
        on_answer: AnswerCallback | None = None,
    ):
        self.prompter = prompter
        self.rng = rng or random.Random()
        self.on_answer = on_answer

        self.state = SessionState.LOADING
        self.score = 0
        self.asked_ids: list[int] = []
        self.outcome: SessionOutcome | None = None
        self._pool: list[QuizItem] = []

    @property
    def remaining(self) -> int:
        """Number of quizzes still in the pool."""
        return len(self._pool)

    def _draw(self) -> QuizItem:
        """Remove and return a uniformly random quiz from the pool."""
        index = self.rng.randrange(len(self._pool))
        return self._pool.pop(index)

    def _finish(self, outcome: SessionOutcome) -> SessionOutcome:
        if isinstance(outcome, Won):
            self.state = SessionState.WON
        elif isinstance(outcome, Lost):
            self.state = SessionState.LOST
        else:
            self.state = SessionState.ABORTED
        self.outcome = outcome
        logger.debug(f"Play session finished: {outcome} ({len(self.asked_ids)} asked)")
        return outcome

    def interrupted(self, cause: str = "cancelled") -> SessionOutcome:
        """
        Outcome to report when the driver was interrupted (Ctrl+C).

        Keeps the outcome already recorded on cancellation, otherwise
        aborts with the score reached so far.
        """
        if self.outcome is None:
            self._finish(Aborted(self.score, cause))
        return self.outcome

    async def play(self, store: QuizSource) -> SessionOutcome:
        """
        Load every quiz from ``store`` once and play them.

        A store failure ends the game as ``Aborted(0, cause)`` before any
        question is asked.
        """
        try:
            items = store.fetch_all()
        except StoreFailure as e:
            logger.error(f"Could not load quizzes for play: {e}")
            return self._finish(Aborted(0, str(e)))

        return await self.start(items)

    async def start(self, items: Sequence[QuizItem]) -> SessionOutcome:
        """Run the session over ``items`` and return its outcome."""
        if self.state is not SessionState.LOADING:
            raise RuntimeError("A play session can only be started once")

        self._pool = list(items)
        self.score = 0
        logger.debug(f"Play session started with {len(self._pool)} quizzes")

        while self._pool:
            quiz = self._draw()
            self.asked_ids.append(quiz.id)
            self.state = SessionState.AWAITING_ANSWER

            try:
                answer = await self.prompter.ask(quiz.question)
            except InputFailure as e:
                logger.warning(f"No answer for quiz {quiz.id}: {e}")
                return self._finish(Aborted(self.score, str(e)))
            except asyncio.CancelledError:
                # Record the outcome for the driver, but let cancellation propagate
                logger.warning(f"Play session cancelled while waiting on quiz {quiz.id}")
                self._finish(Aborted(self.score, "cancelled"))
                raise
            except Exception as e:
                logger.exception(f"Prompter failed on quiz {quiz.id}")
                return self._finish(Aborted(self.score, str(e) or type(e).__name__))

            correct = answers_match(answer, quiz.answer)
            if self.on_answer is not None:
                self.on_answer(quiz, answer, correct)

            if not correct:
                return self._finish(Lost(self.score))
            self.score += 1

        return self._finish(Won(self.score))


async def play(
    store: QuizSource,
    prompter: Prompter,
    rng: random.Random | None = None,
    on_answer: AnswerCallback | None = None,
) -> SessionOutcome:
    """Play every quiz in ``store`` with a fresh session."""
    session = PlaySession(prompter, rng=rng, on_answer=on_answer)
    return await session.play(store)
