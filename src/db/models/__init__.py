# SQLAlchemy models
from .base import Base
from .quiz import Quiz

__all__ = [
    "Base",
    "Quiz",
]
