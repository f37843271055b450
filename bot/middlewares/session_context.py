# bot/middlewares/session_context.py
from aiogram import BaseMiddleware
from typing import Callable, Dict, Any, Awaitable

from core.logging import bind_chat

class SessionContextMiddleware(BaseMiddleware):
    def __init__(self, session_store):
        super().__init__()
        self.sessions = session_store

    async def __call__(self,
                       handler: Callable[[Any, Dict[str, Any]], Awaitable[Any]],
                       event: Any,
                       data: Dict[str, Any]) -> Any:
        # Session lookup by chat, so a group chat shares one known name
        chat = getattr(event, "chat", None) or data.get("event_chat")
        if chat:
            bind_chat(chat.id)
            data["chat_id"] = chat.id
            data["session"] = self.sessions.get(chat.id)
        return await handler(event, data)
