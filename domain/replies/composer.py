"""Renders reply scripts into the newline-delimited reply text."""
from __future__ import annotations

from typing import Iterable, List, Optional

from core.logging import get_logger

from .loader import default_reply_book
from .models import ReplyBook

log = get_logger("reply_composer")


def render_greeting(name: str) -> str:
    name = (name or "").strip()
    return f"Namaste {name} ji," if name else "Namaste,"


def format_steps(steps: Iterable[str]) -> List[str]:
    return [f"{index}. {step}" for index, step in enumerate(steps, start=1)]


def compose_empty(name: str, book: Optional[ReplyBook] = None) -> str:
    book = book or default_reply_book()
    return "\n".join([render_greeting(name), book.empty_prompt, book.closing_line])


def compose(intent: str, name: str, book: Optional[ReplyBook] = None) -> str:
    book = book or default_reply_book()
    script = book.script_for(intent)
    if script is None:
        log.warning("unmapped_intent", intent=intent)
        script = book.generic

    lines = [render_greeting(name), script.intro]
    lines.extend(format_steps(script.steps))
    if script.closing:
        lines.append(script.closing)
    lines.append(book.closing_line)
    return "\n".join(lines)


def render_services(book: Optional[ReplyBook] = None) -> str:
    book = book or default_reply_book()
    return "\n".join(f"• {service.title}: {service.description}" for service in book.services)
