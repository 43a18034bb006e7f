"""
Value types for play sessions.

A session works on detached ``QuizItem`` copies and ends in exactly one
``SessionOutcome``: ``Won``, ``Lost`` or ``Aborted``. None of these outlive
the play command that produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class QuizItem:
    """A question/answer pair, copied out of the store."""

    id: int
    question: str
    answer: str


class SessionState(str, Enum):
    """States of the play session state machine."""

    LOADING = "loading"
    AWAITING_ANSWER = "awaiting_answer"
    WON = "won"
    LOST = "lost"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.WON, SessionState.LOST, SessionState.ABORTED)


@dataclass(frozen=True)
class Won:
    """Every quiz in the pool was answered correctly."""

    score: int


@dataclass(frozen=True)
class Lost:
    """The first wrong answer ended the session."""

    score: int


@dataclass(frozen=True)
class Aborted:
    """The session could not continue (input closed, store unavailable, cancelled)."""

    score: int
    cause: str


SessionOutcome = Union[Won, Lost, Aborted]
