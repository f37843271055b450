"""Reply content structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple


class ReplyBookError(ValueError):
    """Raised when the reply content document is incomplete."""


@dataclass(frozen=True, slots=True)
class ReplyScript:
    intro: str
    steps: Tuple[str, ...] = ()
    closing: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ServiceHighlight:
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class ReplyBook:
    closing_line: str
    empty_prompt: str
    welcome: Tuple[str, ...]
    services: Tuple[ServiceHighlight, ...] = ()
    scripts: Mapping[str, ReplyScript] = field(default_factory=dict)

    def script_for(self, intent: str) -> Optional[ReplyScript]:
        return self.scripts.get(intent)

    @property
    def generic(self) -> ReplyScript:
        return self.scripts["generic"]
