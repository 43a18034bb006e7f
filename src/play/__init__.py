"""
Play Module for random "ask them all" quiz games.

Provides:
- PlaySession: draw-without-replacement game loop, ends on first miss
- SessionReport: final-score messages for an outcome
- ConsolePrompter: terminal answer source
"""

from src.play.answers import answers_match, normalize_answer
from src.play.models import (
    Aborted,
    Lost,
    QuizItem,
    SessionOutcome,
    SessionState,
    Won,
)
from src.play.prompter import ConsolePrompter, Prompter
from src.play.report import SessionReport, build_report
from src.play.session import PlaySession, play

__all__ = [
    "QuizItem",
    "SessionState",
    "SessionOutcome",
    "Won",
    "Lost",
    "Aborted",
    "PlaySession",
    "play",
    "Prompter",
    "ConsolePrompter",
    "SessionReport",
    "build_report",
    "answers_match",
    "normalize_answer",
]
