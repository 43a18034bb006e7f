"""
Answer matching shared by ``play`` and ``test``.
"""

from __future__ import annotations


def normalize_answer(text: str) -> str:
    """Trim surrounding whitespace and case-fold."""
    return text.strip().casefold()


def answers_match(given: str, expected: str) -> bool:
    """
    Check a submitted answer against the stored one.

    Case-insensitive and blind to leading/trailing whitespace. Inner
    whitespace and spelling must match exactly.
    """
    return normalize_answer(given) == normalize_answer(expected)
