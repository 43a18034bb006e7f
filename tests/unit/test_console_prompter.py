"""
Unit tests for the terminal prompter.
"""

import asyncio
import io

import pytest
from rich.console import Console

from src.core.exceptions import InputFailure
from src.play.prompter import ConsolePrompter


@pytest.fixture
def prompter():
    return ConsolePrompter(Console(file=io.StringIO(), force_terminal=False))


class TestConsolePrompter:
    """Reading answers on a worker thread."""

    @pytest.mark.asyncio
    async def test_answer_is_stripped(self, prompter, monkeypatch):
        seen = []

        def fake_input(prompt):
            seen.append(str(prompt))
            return "   Paris  "

        monkeypatch.setattr(prompter.console, "input", fake_input)

        answer = await prompter.ask("Capital of France?")

        assert answer == "Paris"
        assert seen == ["Capital of France? "]

    @pytest.mark.asyncio
    async def test_closed_input_raises_input_failure(self, prompter, monkeypatch):
        def fake_input(prompt):
            raise EOFError

        monkeypatch.setattr(prompter.console, "input", fake_input)

        with pytest.raises(InputFailure, match="closed"):
            await prompter.ask("2+2?")

    @pytest.mark.asyncio
    async def test_io_error_raises_input_failure(self, prompter, monkeypatch):
        def fake_input(prompt):
            raise OSError("bad file descriptor")

        monkeypatch.setattr(prompter.console, "input", fake_input)

        with pytest.raises(InputFailure, match="bad file descriptor"):
            await prompter.ask("2+2?")

    @pytest.mark.asyncio
    async def test_undecodable_input_raises_input_failure(self, prompter, monkeypatch):
        def fake_input(prompt):
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        monkeypatch.setattr(prompter.console, "input", fake_input)

        with pytest.raises(InputFailure, match="invalid start byte"):
            await asyncio.wait_for(prompter.ask("2+2?"), timeout=5)
