"""
Quiz model: one stored question/answer pair.

Both fields are required and must contain something other than
whitespace. Values are stored trimmed.
"""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from src.core.exceptions import QuizValidationError

from .base import Base

FIELD_LABELS = {
    "question": "Question",
    "answer": "Answer",
}


def check_quiz_fields(question: str | None, answer: str | None) -> list[str]:
    """Return one message per empty field (empty list when valid)."""
    messages = []
    for field, value in (("question", question), ("answer", answer)):
        if value is None or not value.strip():
            messages.append(f"{FIELD_LABELS[field]} must not be empty.")
    return messages


class Quiz(Base):
    """A question and its expected answer."""

    __tablename__ = "quizzes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(default=func.now())
    updated_at: Mapped[datetime] = mapped_column(default=func.now(), onupdate=func.now())

    @validates("question", "answer")
    def _validate_text(self, key: str, value: str | None) -> str:
        if value is None or not value.strip():
            raise QuizValidationError([f"{FIELD_LABELS[key]} must not be empty."])
        return value.strip()

    def __repr__(self) -> str:
        return f"<Quiz id={self.id} question={self.question!r}>"
