"""Reply engine: name extraction, intent classification and reply composition."""
from __future__ import annotations

from typing import Optional

from core.logging import get_logger
from dialogue.extractors import extract_name
from dialogue.intents import match_intent, normalize
from domain.replies.composer import compose, compose_empty
from domain.replies.models import ReplyBook

log = get_logger("reply_engine")


def generate_reply(raw_input: str, known_name: str, book: Optional[ReplyBook] = None) -> str:
    """Build the assistant reply for one user message.

    ``known_name`` is the caller's stored name; when it is blank the name is
    taken from a self-introduction in the message itself, if any. Nothing is
    stored between calls.
    """
    text = (raw_input or "").strip()
    name = (known_name or "").strip()

    if not text:
        return compose_empty(name, book)

    if not name:
        name = extract_name(text)

    match = match_intent(normalize(text))
    log.debug("reply_ready", intent=match.intent, keyword=match.keyword, named=bool(name))
    return compose(match.intent, name, book)
