# bot/routers/basic.py
from aiogram import Router, types, F
from aiogram.filters import CommandStart, Command, CommandObject

from core.logging import get_logger
from domain.replies.composer import render_services

router = Router(name="basic")

log = get_logger("bot.basic")

HELP_HINT = (
    "Apna sawaal Hinglish mein likhiye, jaise: «pension life certificate kaise jama karu».\n"
    "Naam batane ke liye: /name Sunita ya «mera naam Sunita»."
)

# ====== Commands ======
@router.message(CommandStart())
async def cmd_start(message: types.Message, session_store, chat_id: int):
    # /start opens a fresh conversation with the welcome text
    session = session_store.reset(chat_id)
    await message.answer(session.welcome())

@router.message(Command("help"))
async def help_cmd(message: types.Message, session):
    await message.answer(f"{render_services(session.book)}\n\n{HELP_HINT}")

@router.message(Command("name"))
async def set_name(message: types.Message, command: CommandObject, session):
    session.set_name(command.args or "")
    if session.known_name:
        await message.answer(f"Theek hai, ab se aapko {session.display_name()} kahenge.")
    else:
        await message.answer("Naam hata diya gaya.")

@router.message(F.text)
async def free_chat(message: types.Message, session):
    reply = session.submit(message.text or "")
    if reply is None:
        return
    log.debug("reply_sent", lines=len(reply.split("\n")))
    await message.answer(reply)
