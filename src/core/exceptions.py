"""
Error taxonomy for the quiz trainer.

Wrong answers are not errors: they end a play session as a normal ``Lost``
outcome. Everything here is a failure that carries a message through to the
user.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for all quiz trainer errors."""
    pass


class InputFailure(QuizError):
    """Raised when the prompter cannot produce an answer (closed stdin, I/O error)."""
    pass


class StoreFailure(QuizError):
    """Raised when the quiz store cannot be read or written."""
    pass


class QuizNotFoundError(QuizError):
    """Raised when no quiz exists for the requested id."""

    def __init__(self, quiz_id: int):
        self.quiz_id = quiz_id
        super().__init__(f"There is no quiz with id={quiz_id}.")


class InvalidQuizIdError(QuizError):
    """Raised when an <id> parameter is missing or not an integer."""
    pass


class QuizValidationError(QuizError):
    """Raised when a quiz fails field validation. One message per failed check."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("The quiz is invalid: " + "; ".join(self.messages))
