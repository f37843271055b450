import pytest
# mypy: ignore-errors

from types import SimpleNamespace

from bot.middlewares.session_context import SessionContextMiddleware
from orchestrator.session import ChatSession, SessionStore


@pytest.fixture
def store(book, fixed_clock) -> SessionStore:
    return SessionStore(lambda: ChatSession(book=book, clock=fixed_clock))


class RecordingHandler:
    def __init__(self) -> None:
        self.calls: list[dict] = []

    async def __call__(self, event, data):
        self.calls.append(dict(data))
        return "handled"


@pytest.mark.asyncio
async def test_session_from_event_chat(store) -> None:
    middleware = SessionContextMiddleware(store)
    handler = RecordingHandler()
    event = SimpleNamespace(chat=SimpleNamespace(id=42))

    assert await middleware(handler, event, {}) == "handled"
    data = handler.calls[0]
    assert data["chat_id"] == 42
    assert data["session"] is store.get(42)


@pytest.mark.asyncio
async def test_same_chat_same_session(store) -> None:
    middleware = SessionContextMiddleware(store)
    handler = RecordingHandler()
    event = SimpleNamespace(chat=SimpleNamespace(id=5))

    await middleware(handler, event, {})
    await middleware(handler, event, {})
    assert handler.calls[0]["session"] is handler.calls[1]["session"]
    assert len(store) == 1


@pytest.mark.asyncio
async def test_falls_back_to_event_chat_data(store) -> None:
    middleware = SessionContextMiddleware(store)
    handler = RecordingHandler()
    # update-level events carry no chat attribute of their own
    update = SimpleNamespace()

    await middleware(handler, update, {"event_chat": SimpleNamespace(id=77)})
    assert handler.calls[0]["chat_id"] == 77
    assert handler.calls[0]["session"] is store.get(77)


@pytest.mark.asyncio
async def test_passes_through_without_chat(store) -> None:
    middleware = SessionContextMiddleware(store)
    handler = RecordingHandler()

    assert await middleware(handler, SimpleNamespace(), {"other": 1}) == "handled"
    assert handler.calls[0] == {"other": 1}
    assert len(store) == 0
