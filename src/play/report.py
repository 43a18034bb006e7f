"""
Final-score messages for a finished play session.

Pure: takes an outcome, returns the lines to print. The CLI decides where
they go.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.play.models import Aborted, Lost, SessionOutcome, Won


@dataclass(frozen=True)
class SessionReport:
    """Renderable summary of a session outcome."""

    outcome: SessionOutcome
    lines: list[str]
    style: str  # rich style for the headline

    @property
    def headline(self) -> str:
        return self.lines[0]

    @property
    def score(self) -> int:
        return self.outcome.score


def score_line(score: int) -> str:
    noun = "correct answer" if score == 1 else "correct answers"
    return f"Final score: {score} {noun}"


def build_report(outcome: SessionOutcome) -> SessionReport:
    """Map an outcome to its headline and score lines."""
    if isinstance(outcome, Won):
        lines = ["CONGRATULATIONS, you answered them all!", score_line(outcome.score)]
        style = "green"
    elif isinstance(outcome, Lost):
        lines = ["Incorrect answer. Game over.", score_line(outcome.score)]
        style = "red"
    elif isinstance(outcome, Aborted):
        lines = [f"Game aborted: {outcome.cause}", score_line(outcome.score)]
        style = "yellow"
    else:
        raise TypeError(f"Unknown session outcome: {outcome!r}")

    return SessionReport(outcome=outcome, lines=lines, style=style)
