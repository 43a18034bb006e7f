"""
Quiz Store: CRUD over the quizzes table.

Every read returns detached ``QuizItem`` copies, so callers never hold a
live ORM row. ``fetch_all`` is a snapshot of the table at call time.

Database errors surface as ``StoreFailure``; a missing row as
``QuizNotFoundError``; empty fields as ``QuizValidationError``.

Usage:
    store = QuizStore()
    item = store.create("Capital of Italy", "Rome")
    items = store.fetch_all()
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from src.core.exceptions import QuizNotFoundError, QuizValidationError, StoreFailure
from src.db.database import session_scope
from src.db.models.quiz import Quiz, check_quiz_fields
from src.play.models import QuizItem


def _to_item(quiz: Quiz) -> QuizItem:
    return QuizItem(id=quiz.id, question=quiz.question, answer=quiz.answer)


class QuizStore:
    """Single-user, synchronous access to stored quizzes."""

    def __init__(self, session_factory: sessionmaker | None = None):
        self.session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Generator[Session, None, None]:
        try:
            with session_scope(self.session_factory) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Quiz store failed to {action}: {e}")
            raise StoreFailure(f"Could not {action}: {e}") from e

    def _get_row(self, session: Session, quiz_id: int) -> Quiz:
        quiz = session.get(Quiz, quiz_id)
        if quiz is None:
            raise QuizNotFoundError(quiz_id)
        return quiz

    def fetch_all(self) -> list[QuizItem]:
        """Snapshot of every stored quiz, ordered by id."""
        with self._session("load quizzes") as session:
            rows = session.scalars(select(Quiz).order_by(Quiz.id)).all()
            items = [_to_item(row) for row in rows]
        logger.debug(f"Fetched {len(items)} quizzes")
        return items

    def count(self) -> int:
        with self._session("count quizzes") as session:
            return session.scalar(select(func.count()).select_from(Quiz)) or 0

    def get(self, quiz_id: int) -> QuizItem:
        with self._session(f"load quiz {quiz_id}") as session:
            return _to_item(self._get_row(session, quiz_id))

    def create(self, question: str, answer: str) -> QuizItem:
        """Store a new quiz. Both fields are trimmed and must be non-empty."""
        messages = check_quiz_fields(question, answer)
        if messages:
            raise QuizValidationError(messages)

        with self._session("add quiz") as session:
            quiz = Quiz(question=question, answer=answer)
            session.add(quiz)
            session.flush()
            item = _to_item(quiz)

        logger.info(f"Added quiz {item.id}")
        return item

    def update(self, quiz_id: int, question: str, answer: str) -> QuizItem:
        """Replace the question and answer of an existing quiz."""
        messages = check_quiz_fields(question, answer)
        if messages:
            raise QuizValidationError(messages)

        with self._session(f"edit quiz {quiz_id}") as session:
            quiz = self._get_row(session, quiz_id)
            quiz.question = question
            quiz.answer = answer
            session.flush()
            item = _to_item(quiz)

        logger.info(f"Edited quiz {quiz_id}")
        return item

    def delete(self, quiz_id: int) -> None:
        with self._session(f"delete quiz {quiz_id}") as session:
            session.delete(self._get_row(session, quiz_id))

        logger.info(f"Deleted quiz {quiz_id}")
