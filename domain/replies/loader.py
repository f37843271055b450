"""YAML-based reply book loader."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Optional

import yaml  # type: ignore[import-untyped]

from core.settings import settings

from .models import ReplyBook, ReplyBookError, ReplyScript, ServiceHighlight

BUNDLED_REPLIES = Path(__file__).with_name("replies.yaml")
SUPPORTED_VERSION = 1


def _load_script(intent: str, raw: Any) -> ReplyScript:
    if not isinstance(raw, dict) or not raw.get("intro"):
        raise ReplyBookError(f"script '{intent}' has no intro")
    steps = raw.get("steps") or []
    if not isinstance(steps, list):
        raise ReplyBookError(f"script '{intent}' steps must be a list")
    return ReplyScript(
        intro=str(raw["intro"]),
        steps=tuple(str(s) for s in steps),
        closing=str(raw["closing"]) if raw.get("closing") else None,
    )


def _load_service(raw: Any) -> ServiceHighlight:
    if not isinstance(raw, dict) or not raw.get("title"):
        raise ReplyBookError("service entry has no title")
    return ServiceHighlight(title=str(raw["title"]), description=str(raw.get("description") or ""))


def parse_reply_book(data: Dict[str, Any]) -> ReplyBook:
    version = data.get("version", SUPPORTED_VERSION)
    if version != SUPPORTED_VERSION:
        raise ReplyBookError(f"unsupported reply book version {version!r}")
    for key in ("closing_line", "empty_prompt"):
        if not data.get(key):
            raise ReplyBookError(f"missing '{key}'")
    raw_scripts = data.get("scripts") or {}
    if "generic" not in raw_scripts:
        raise ReplyBookError("missing 'generic' script")
    scripts = {intent: _load_script(intent, raw) for intent, raw in raw_scripts.items()}
    return ReplyBook(
        closing_line=str(data["closing_line"]),
        empty_prompt=str(data["empty_prompt"]),
        welcome=tuple(str(line) for line in data.get("welcome") or []),
        services=tuple(_load_service(raw) for raw in data.get("services") or []),
        scripts=MappingProxyType(scripts),
    )


def load_reply_book(path: Path) -> ReplyBook:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ReplyBookError(f"{path}: expected a mapping at the top level")
    return parse_reply_book(data)


@lru_cache(maxsize=1)
def default_reply_book(path: Optional[str] = None) -> ReplyBook:
    return load_reply_book(Path(path or settings.REPLIES_PATH or BUNDLED_REPLIES))
