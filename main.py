# main.py
import asyncio
import logging

from aiogram import Bot, Dispatcher

from core.settings import settings
from core.logging import setup_logging

from domain.replies.loader import default_reply_book

from orchestrator.session import ChatSession, SessionStore

from adapters.telegram.dev_runner import DevBotRunner

from bot.routers.basic import router as basic_router
from bot.middlewares.session_context import SessionContextMiddleware


async def run_dev() -> None:
    session = ChatSession()

    async def handler(text: str):
        return session.submit(text)

    await DevBotRunner(handler).start()


async def app():
    # logging
    setup_logging(settings.LOG_LEVEL, diag=settings.is_diag)
    log = logging.getLogger("main")

    # Fail fast on broken reply content
    book = default_reply_book()
    log.debug("reply book loaded: %d scripts", len(book.scripts))

    # Without a token in dev, replay sample messages instead of polling
    if not settings.TELEGRAM_TOKEN and not settings.is_prod:
        await run_dev()
        return

    session_store = SessionStore()

    bot = Bot(token=settings.bot_token())
    dp = Dispatcher()

    dp.update.middleware(SessionContextMiddleware(session_store))
    dp["session_store"] = session_store
    dp.include_router(basic_router)

    log.info("Starting polling…")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    except Exception as e:
        log.exception("Polling stopped due to error: %s", e)
        raise
    finally:
        await bot.session.close()
        log.info("Shutdown complete.")


if __name__ == "__main__":
    asyncio.run(app())
