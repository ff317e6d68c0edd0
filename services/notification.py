import logging

from aiogram import Bot
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError

import config
from bot_instance import get_bot, create_bot
from exceptions.notification import NotificationDeliveryException
from models.demo_request import DemoRequestDTO
from utils.config_validator import ConfigValidationError
from utils.html_escape import safe_html
from utils.localizator import Localizator


class NotificationService:
    """
    Sends event notifications to fixed Telegram chats.

    The Bot (token, HTTP session) and the destination chat are injected,
    so tests can pass a fake bot and any chat id.
    """

    def __init__(self, bot: Bot, demo_request_chat_id: str, parse_mode: ParseMode = ParseMode.HTML,
                 owns_bot: bool = False):
        self.bot = bot
        self.demo_request_chat_id = demo_request_chat_id
        self.parse_mode = parse_mode
        # The shared Bot is closed by bot_instance.close_bot(), a private one by close()
        self.owns_bot = owns_bot

    @classmethod
    def from_config(cls, token: str | None = None,
                    demo_request_chat_id: str | None = None) -> "NotificationService":
        """
        Build the service from config, optionally overriding token and chat id.

        Without a token override the shared Bot from bot_instance is used.
        With one, the service gets its own Bot; call close() when done with it.
        """
        chat_id = demo_request_chat_id or config.DEMO_REQUEST_CHAT_ID
        if not chat_id:
            raise ConfigValidationError("DEMO_REQUEST_CHAT_ID is not set")
        if token:
            return cls(create_bot(token), chat_id, owns_bot=True)
        return cls(get_bot(), chat_id)

    async def close(self) -> None:
        """Close the HTTP session of a Bot created for this service. The shared Bot is left open."""
        if self.owns_bot:
            await self.bot.session.close()

    async def send_message(self, message: str, destination: str) -> None:
        """
        Send one message to one chat.

        Args:
            message: Message text (HTML)
            destination: Telegram chat id, passed to the API unchanged

        Raises:
            NotificationDeliveryException: If Telegram rejects the message or is unreachable
        """
        try:
            await self.bot.send_message(chat_id=destination, text=message, parse_mode=self.parse_mode)
        except TelegramAPIError as e:
            logging.error(f"[Notification] Delivery to chat {destination} failed: {e.message}")
            raise NotificationDeliveryException(destination, e.message) from e

    async def notify_new_demo_request(self, name: str, email: str, phone: str, country: str) -> None:
        """
        Send the "new demo request" message to the demo request chat.

        The four fields are checked by DemoRequestDTO first, so a missing or
        non-string value raises pydantic.ValidationError before anything is sent.

        Raises:
            pydantic.ValidationError: If a field is not a string
            NotificationDeliveryException: If Telegram rejects the message or is unreachable
        """
        demo_request = DemoRequestDTO(name=name, email=email, phone=phone, country=country)
        fields = {field: safe_html(value) for field, value in demo_request.model_dump().items()}
        message = Localizator.get_text("notification_new_demo_request").format(**fields)
        await self.send_message(message, self.demo_request_chat_id)
        logging.info("[Notification] New demo request forwarded")
