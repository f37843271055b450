"""Development runner that avoids talking to Telegram."""
from __future__ import annotations

from typing import Awaitable, Callable, List, Sequence, Tuple

from core.logging import get_logger

log = get_logger("dev_runner")

SAMPLES: Tuple[str, ...] = (
    "mera naam Ravi hai, pension ke baare me batao",
    "aadhaar card update kaise karu",
    "bijli ka bill bharna hai",
    "mujhe kal milna hai",
)


class DevBotRunner:
    def __init__(self, handler: Callable[[str], Awaitable[str | None]], samples: Sequence[str] = SAMPLES):
        self.handler = handler
        self.samples = samples

    async def start(self) -> List[str]:
        log.info("dev_runner.start")
        replies: List[str] = []
        for sample in self.samples:
            response = await self.handler(sample)
            if response is None:
                continue
            replies.append(response)
            log.info("dev_runner.dialogue", user=sample, assistant=response)
        log.info("dev_runner.stop")
        return replies
