"""Per-chat conversation state kept around the stateless reply engine."""
from __future__ import annotations

import uuid
from collections import OrderedDict, deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Literal, Optional
from zoneinfo import ZoneInfo

from core.logging import get_logger
from core.settings import settings
from dialogue.extractors import extract_name
from domain.replies.loader import default_reply_book
from domain.replies.models import ReplyBook

from orchestrator.engine import generate_reply

log = get_logger("session")

Author = Literal["user", "assistant"]


@dataclass(frozen=True, slots=True)
class ChatMessage:
    id: str
    author: Author
    content: str
    timestamp: str

    def lines(self) -> List[str]:
        return self.content.split("\n")


def format_time(now: datetime) -> str:
    # matches the en-IN clock on the counter screen, e.g. "03:45 pm"
    return now.strftime("%I:%M %p").lower()


def _now() -> datetime:
    return datetime.now(ZoneInfo(settings.TZ))


@dataclass
class ChatSession:
    book: ReplyBook = field(default_factory=default_reply_book)
    known_name: str = ""
    clock: Callable[[], datetime] = _now
    history: Iterable[ChatMessage] = ()
    history_limit: int = field(default_factory=lambda: settings.HISTORY_LIMIT)

    def __post_init__(self) -> None:
        # oldest messages fall off once the limit is reached
        self.history = deque(self.history, maxlen=self.history_limit)
        if not self.history:
            self.history.append(self._message("assistant", self.welcome()))

    def welcome(self) -> str:
        return "\n".join([*self.book.welcome, self.book.closing_line])

    def _message(self, author: Author, content: str) -> ChatMessage:
        return ChatMessage(uuid.uuid4().hex, author, content, format_time(self.clock()))

    def set_name(self, name: str) -> None:
        self.known_name = (name or "").strip()

    def display_name(self) -> str:
        name = self.known_name.strip()
        return f"{name} ji" if name else "dost"

    def submit(self, text: str) -> Optional[str]:
        """Record a user message and the assistant reply; blank input is ignored."""
        trimmed = (text or "").strip()
        if not trimmed:
            return None

        name_from_text = extract_name(trimmed)
        if name_from_text and not self.known_name:
            self.known_name = name_from_text
            log.info("name_adopted", name=name_from_text)

        reply = generate_reply(trimmed, name_from_text or self.known_name, self.book)
        self.history.append(self._message("user", trimmed))
        self.history.append(self._message("assistant", reply))
        return reply


class SessionStore:
    """In-memory sessions keyed by chat id, least recently used evicted first.

    Nothing survives a restart.
    """

    def __init__(self, factory: Callable[[], ChatSession] = ChatSession, limit: Optional[int] = None) -> None:
        self._factory = factory
        self._limit = limit or settings.SESSION_LIMIT
        self._sessions: "OrderedDict[int, ChatSession]" = OrderedDict()

    def get(self, chat_id: int) -> ChatSession:
        session = self._sessions.get(chat_id)
        if session is not None:
            self._sessions.move_to_end(chat_id)
            return session
        session = self._factory()
        self._sessions[chat_id] = session
        log.info("session_created", chat_id=chat_id)
        while len(self._sessions) > self._limit:
            evicted, _ = self._sessions.popitem(last=False)
            log.info("session_evicted", chat_id=evicted)
        return session

    def reset(self, chat_id: int) -> ChatSession:
        self._sessions.pop(chat_id, None)
        return self.get(chat_id)

    def __len__(self) -> int:
        return len(self._sessions)
