"""
Core Module - Shared errors used across the store, play engine and CLI.

Design Principle:
Domain modules (src/db/, src/play/, src/cli/) raise and catch the errors
defined here rather than defining their own.
"""

from src.core.exceptions import (
    InputFailure,
    InvalidQuizIdError,
    QuizError,
    QuizNotFoundError,
    QuizValidationError,
    StoreFailure,
)

__all__ = [
    "QuizError",
    "InputFailure",
    "StoreFailure",
    "QuizNotFoundError",
    "InvalidQuizIdError",
    "QuizValidationError",
]
