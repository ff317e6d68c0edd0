"""
Shared Telegram Bot

One aiogram Bot (and therefore one HTTP session) is reused by every
notification sent from this process.

Usage:
    from bot_instance import get_bot
    bot = get_bot()
    await bot.send_message(chat_id, text)
"""

from aiogram import Bot
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode

import config

_bot_instance = None


def create_bot(token: str) -> Bot:
    """Build a Bot that sends HTML-formatted messages by default."""
    return Bot(
        token=token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )


def get_bot() -> Bot:
    """
    Get the shared Bot, creating it from config.TOKEN on first use.

    Returns:
        Bot: The shared Bot instance
    """
    global _bot_instance
    if _bot_instance is None:
        _bot_instance = create_bot(config.TOKEN)
    return _bot_instance


async def close_bot():
    """
    Close the shared Bot's HTTP session.

    Should be called during application shutdown.
    """
    global _bot_instance
    if _bot_instance is not None:
        await _bot_instance.session.close()
        _bot_instance = None
