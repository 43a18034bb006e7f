"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import asyncio
import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.exceptions import InputFailure  # noqa: E402
from src.db.database import init_db  # noqa: E402
from src.db.quiz_store import QuizStore  # noqa: E402
from src.play.models import QuizItem  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


# ========================================
# Oracles (scripted stand-ins for the console prompter)
# ========================================


class ScriptedPrompter:
    """Answers prompts in order from a list; an Exception entry is raised instead."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts: list[str] = []

    async def ask(self, text: str) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise InputFailure("no more scripted answers")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer.strip()


class AnswerKeyPrompter:
    """Answers each question from a question -> answer mapping, whatever the order."""

    def __init__(self, key: dict[str, str], hang_after: int | None = None):
        self.key = dict(key)
        self.hang_after = hang_after
        self.prompts: list[str] = []

    async def ask(self, text: str) -> str:
        self.prompts.append(text)
        if self.hang_after is not None and len(self.prompts) > self.hang_after:
            await asyncio.Event().wait()
        return self.key[text].strip()


@pytest.fixture
def scripted_prompter():
    """Factory for prompters that replay a fixed answer list."""
    return ScriptedPrompter


@pytest.fixture
def answer_key_prompter():
    """Factory for prompters that look answers up by question text."""
    return AnswerKeyPrompter


@pytest.fixture
def correct_oracle():
    """Factory for an oracle that answers every item correctly."""
    def _make(items):
        return AnswerKeyPrompter({item.question: item.answer for item in items})
    return _make


# ========================================
# Sample data
# ========================================


@pytest.fixture
def sample_items():
    """The two-quiz set used by the play scenarios."""
    return [
        QuizItem(id=1, question="2+2?", answer="4"),
        QuizItem(id=2, question="Capital of France?", answer="Paris"),
    ]


@pytest.fixture
def capital_items():
    """A larger pool for ordering and uniqueness checks."""
    capitals = [
        ("Italy", "Rome"),
        ("France", "Paris"),
        ("Spain", "Madrid"),
        ("Portugal", "Lisbon"),
        ("Germany", "Berlin"),
        ("Austria", "Vienna"),
        ("Greece", "Athens"),
    ]
    return [
        QuizItem(id=i, question=f"Capital of {country}?", answer=city)
        for i, (country, city) in enumerate(capitals, start=1)
    ]


# ========================================
# Store
# ========================================


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    yield factory
    engine.dispose()


@pytest.fixture
def store(session_factory):
    """Empty quiz store."""
    return QuizStore(session_factory)
