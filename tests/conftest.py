from __future__ import annotations
# mypy: ignore-errors

from datetime import datetime
from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from domain.replies.loader import BUNDLED_REPLIES, load_reply_book
from orchestrator.session import ChatSession

CLOSING_LINE = "धन्यवाद! 🙏 Aapka apna VIKAS CSC – Vikas ke sath aapke vikas ki baat."


@pytest.fixture
def book():
    return load_reply_book(BUNDLED_REPLIES)


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 11, 5, 15, 45)


@pytest.fixture
def session(book, fixed_clock) -> ChatSession:
    return ChatSession(book=book, clock=fixed_clock)


class FakeMessage:
    def __init__(self, text: str | None) -> None:
        self.text = text
        self.answers: list[str] = []

    async def answer(self, text: str, **kwargs) -> None:
        self.answers.append(text)


class FakeCommand:
    def __init__(self, args: str | None) -> None:
        self.args = args
