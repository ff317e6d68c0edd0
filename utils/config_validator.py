"""
Configuration Validation Module

Validates configuration at startup to fail fast with clear error
messages instead of failing on the first notification.
"""

import re
import sys
from typing import Optional

# <bot id>:<35-char secret> as issued by @BotFather
BOT_TOKEN_PATTERN = re.compile(r'^\d+:[A-Za-z0-9_-]{30,}$')
# Numeric id (negative for groups/channels) or @channel_username
CHAT_ID_PATTERN = re.compile(r'^(-?\d+|@[A-Za-z][A-Za-z0-9_]{4,})$')


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_required_config(value: Optional[str], name: str, example: str = "") -> None:
    """
    Validate that a required config value is set.

    Args:
        value: The config value to check
        name: Name of the config variable
        example: Optional example value to show in error message

    Raises:
        ConfigValidationError: If value is missing
    """
    if not value:
        error_msg = f"{name} is required but not set!"
        if example:
            error_msg += f"\nAdd to .env: {name}={example}"
        raise ConfigValidationError(error_msg)


def validate_bot_token(token: Optional[str]) -> None:
    """
    Validate the Telegram bot token.

    Raises:
        ConfigValidationError: If token is missing or malformed
    """
    validate_required_config(token, 'TOKEN', '<your-telegram-bot-token>')
    if not BOT_TOKEN_PATTERN.match(token):
        raise ConfigValidationError(
            "TOKEN does not look like a Telegram bot token!\n"
            "Expected format: <bot_id>:<secret>, as issued by @BotFather"
        )


def validate_chat_id(chat_id: Optional[str], name: str = 'DEMO_REQUEST_CHAT_ID') -> None:
    """
    Validate a destination chat identifier.

    Raises:
        ConfigValidationError: If chat id is missing or malformed
    """
    validate_required_config(chat_id, name, '-1001234567890')
    if not CHAT_ID_PATTERN.match(chat_id.strip()):
        raise ConfigValidationError(
            f"{name} must be a numeric chat id or an @channel username (got: {chat_id})"
        )


def validate_startup_config(config_module) -> None:
    """
    Validate all critical configuration at startup.

    Args:
        config_module: The config module to validate

    Raises:
        ConfigValidationError: If any validation fails
    """
    validate_bot_token(getattr(config_module, 'TOKEN', None))
    validate_chat_id(getattr(config_module, 'DEMO_REQUEST_CHAT_ID', None))

    language = getattr(config_module, 'BOT_LANGUAGE', 'en')
    if language not in ("en", "de"):
        raise ConfigValidationError(f"BOT_LANGUAGE must be 'en' or 'de' (got: {language})")


def validate_or_exit(config_module) -> None:
    """
    Validate configuration and exit with error code 1 if validation fails.

    This is the main entry point for startup validation.

    Args:
        config_module: The config module to validate
    """
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print(f"\n ERROR: Configuration Validation Failed\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nStartup aborted. Please fix configuration and try again.\n", file=sys.stderr)
        sys.exit(1)
