from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker

from config import get_settings
from src.db.models.base import Base
from src.db.models.quiz import Quiz

settings = get_settings()

engine = create_engine(settings.database_url, echo=settings.log_level == "DEBUG", pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

# Starter quizzes for an empty store
DEFAULT_QUIZZES = [
    ("Capital of Italy", "Rome"),
    ("Capital of France", "Paris"),
    ("Capital of Spain", "Madrid"),
    ("Capital of Portugal", "Lisbon"),
]


def get_engine():
    """Get the database engine."""
    return engine


def init_db(bind=None) -> None:
    """Initialize database tables."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables initialized")


@contextmanager
def session_scope(factory: sessionmaker | None = None) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:  # Intentionally broad - rollback on any error before re-raising
        session.rollback()
        raise
    finally:
        session.close()


def seed_defaults(factory: sessionmaker | None = None) -> int:
    """Insert the starter quizzes if the store is empty. Returns rows added."""
    with session_scope(factory) as session:
        existing = session.scalar(select(func.count()).select_from(Quiz))
        if existing:
            return 0
        session.add_all(Quiz(question=q, answer=a) for q, a in DEFAULT_QUIZZES)

    logger.info(f"Seeded {len(DEFAULT_QUIZZES)} starter quizzes")
    return len(DEFAULT_QUIZZES)
