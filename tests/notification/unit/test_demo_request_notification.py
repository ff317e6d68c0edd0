"""
Demo Request Notification Tests

Tests that NotificationService formats new demo requests and hands exactly
one message to Telegram, addressed to the configured chat.

Run with:
    pytest tests/notification/unit/test_demo_request_notification.py -v
"""

import pytest
from unittest.mock import ANY, AsyncMock, MagicMock, patch

import pydantic

from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramBadRequest, TelegramNetworkError

import config
from exceptions import NotificationDeliveryException
from services.notification import NotificationService
from utils.config_validator import ConfigValidationError

CHAT_ID = "-1001234567890"


class TestSendMessage:

    @pytest.mark.asyncio
    async def test_sends_to_given_destination(self, notification_service, bot):
        await notification_service.send_message("Hello", "@sales_team")

        bot.send_message.assert_awaited_once_with(chat_id="@sales_team", text="Hello", parse_mode=ParseMode.HTML)

    @pytest.mark.asyncio
    async def test_destination_is_not_substituted(self, notification_service, bot):
        await notification_service.send_message("Hello", "42")

        assert bot.send_message.await_args.kwargs["chat_id"] == "42"

    @pytest.mark.asyncio
    async def test_response_is_ignored(self, notification_service, bot):
        bot.send_message.return_value = MagicMock()

        assert await notification_service.send_message("Hello", CHAT_ID) is None

    @pytest.mark.asyncio
    async def test_custom_parse_mode(self, bot):
        service = NotificationService(bot, CHAT_ID, parse_mode=ParseMode.MARKDOWN_V2)

        await service.send_message("*bold*", CHAT_ID)

        bot.send_message.assert_awaited_once_with(chat_id=CHAT_ID, text="*bold*", parse_mode=ParseMode.MARKDOWN_V2)

    @pytest.mark.asyncio
    async def test_network_error_is_surfaced(self, notification_service, bot):
        bot.send_message.side_effect = TelegramNetworkError(method=MagicMock(), message="Request timeout error")

        with pytest.raises(NotificationDeliveryException) as exc_info:
            await notification_service.send_message("Hello", CHAT_ID)

        assert exc_info.value.destination == CHAT_ID
        assert "Request timeout error" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, TelegramNetworkError)

    @pytest.mark.asyncio
    async def test_api_error_is_surfaced(self, notification_service, bot):
        bot.send_message.side_effect = TelegramBadRequest(method=MagicMock(), message="Bad Request: chat not found")

        with pytest.raises(NotificationDeliveryException) as exc_info:
            await notification_service.send_message("Hello", CHAT_ID)

        assert exc_info.value.reason == "Bad Request: chat not found"

    @pytest.mark.asyncio
    async def test_failed_send_is_not_retried(self, notification_service, bot):
        bot.send_message.side_effect = TelegramNetworkError(method=MagicMock(), message="Request timeout error")

        with pytest.raises(NotificationDeliveryException):
            await notification_service.send_message("Hello", CHAT_ID)

        assert bot.send_message.await_count == 1


class TestNotifyNewDemoRequest:

    @pytest.mark.asyncio
    async def test_message_contains_all_fields(self, notification_service, bot):
        await notification_service.notify_new_demo_request(
            "John Doe", "john@example.com", "+1234567890", "United States"
        )

        bot.send_message.assert_awaited_once_with(chat_id=CHAT_ID, text=ANY, parse_mode=ParseMode.HTML)
        text = bot.send_message.await_args.kwargs["text"]
        assert "John Doe" in text
        assert "john@example.com" in text
        assert "+1234567890" in text
        assert "United States" in text

    @pytest.mark.asyncio
    async def test_dispatches_exactly_once_per_call(self, notification_service, bot):
        await notification_service.notify_new_demo_request("A", "a@example.com", "1", "DE")
        await notification_service.notify_new_demo_request("B", "b@example.com", "2", "FR")

        assert bot.send_message.await_count == 2
        for call in bot.send_message.await_args_list:
            assert call.kwargs["chat_id"] == CHAT_ID

    @pytest.mark.asyncio
    async def test_goes_through_send_message(self, notification_service):
        with patch.object(notification_service, "send_message") as send_message:
            await notification_service.notify_new_demo_request(
                "John Doe", "john@example.com", "+1234567890", "United States"
            )

        send_message.assert_awaited_once_with(ANY, CHAT_ID)

    @pytest.mark.asyncio
    async def test_fields_are_html_escaped(self, notification_service, bot):
        await notification_service.notify_new_demo_request(
            "<b>Mallory</b>", "m@example.com", "+100", "Nowhere & Co"
        )

        text = bot.send_message.await_args.kwargs["text"]
        assert "<b>Mallory</b>" not in text
        assert "&lt;b&gt;Mallory&lt;/b&gt;" in text
        assert "Nowhere &amp; Co" in text

    @pytest.mark.asyncio
    async def test_braces_in_fields_are_kept(self, notification_service, bot):
        await notification_service.notify_new_demo_request("{name}", "x@example.com", "1", "{country}")

        text = bot.send_message.await_args.kwargs["text"]
        assert "{name}" in text
        assert "{country}" in text

    @pytest.mark.asyncio
    async def test_uses_configured_language(self, notification_service, bot, monkeypatch):
        monkeypatch.setattr(config, "BOT_LANGUAGE", "de")

        await notification_service.notify_new_demo_request("Erika", "e@example.com", "1", "Deutschland")

        assert "Neue Demo-Anfrage" in bot.send_message.await_args.kwargs["text"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("phone", [None, 1234567890])
    async def test_non_string_field_rejected_before_sending(self, notification_service, bot, phone):
        with pytest.raises(pydantic.ValidationError):
            await notification_service.notify_new_demo_request("John Doe", "john@example.com", phone, "United States")

        bot.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delivery_failure_propagates(self, notification_service, bot):
        bot.send_message.side_effect = TelegramNetworkError(method=MagicMock(), message="Connection refused")

        with pytest.raises(NotificationDeliveryException):
            await notification_service.notify_new_demo_request("A", "a@example.com", "1", "DE")


class TestFromConfig:

    def test_uses_shared_bot_and_configured_chat(self, monkeypatch):
        shared_bot = MagicMock()
        monkeypatch.setattr(config, "DEMO_REQUEST_CHAT_ID", "-100555")

        with patch("services.notification.get_bot", return_value=shared_bot):
            service = NotificationService.from_config()

        assert service.bot is shared_bot
        assert service.demo_request_chat_id == "-100555"

    def test_overrides(self):
        service = NotificationService.from_config(
            token="654321:ZYX-DEF1234ghIkl-zyx57W2v1u123ew11",
            demo_request_chat_id="@qa_channel"
        )

        assert service.bot.token == "654321:ZYX-DEF1234ghIkl-zyx57W2v1u123ew11"
        assert service.demo_request_chat_id == "@qa_channel"
        assert service.owns_bot is True

    @pytest.mark.asyncio
    async def test_close_releases_private_bot_session(self):
        service = NotificationService.from_config(token="654321:ZYX-DEF1234ghIkl-zyx57W2v1u123ew11")
        service.bot.session.close = AsyncMock()

        await service.close()

        service.bot.session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_without_private_bot_is_noop(self, notification_service, bot):
        await notification_service.close()

        bot.session.close.assert_not_awaited()

    def test_missing_chat_id_rejected(self, monkeypatch):
        monkeypatch.setattr(config, "DEMO_REQUEST_CHAT_ID", None)

        with pytest.raises(ConfigValidationError):
            NotificationService.from_config()
