"""
Centralized Logging Configuration

Console and rotating file logging with secret masking, so bot tokens and
the personal data carried by demo requests never end up in log files.
"""

import logging
import logging.handlers
import re
from pathlib import Path
from typing import Pattern

import config


class SecretMaskingFilter(logging.Filter):
    """
    Logging filter that masks sensitive data in log records.

    Masks:
    - Telegram bot tokens
    - Tokens and passwords in key=value form
    - E-mail addresses and phone numbers (demo request contact data)
    """

    PATTERNS: list[tuple[Pattern, str]] = [
        # Telegram bot tokens (123456:ABC-DEF...), also inside api.telegram.org URLs
        (re.compile(r'(?<!\d)\d{6,}:[A-Za-z0-9_\-]{30,}'), '[REDACTED_BOT_TOKEN]'),

        # Tokens
        (re.compile(r'(token["\']?\s*[:=]\s*["\']?)([A-Za-z0-9_\-:]{20,})(["\']?)', re.IGNORECASE), r'\1[REDACTED_TOKEN]\3'),

        # Passwords
        (re.compile(r'(password["\']?\s*[:=]\s*["\']?)([^\s"\']+)(["\']?)', re.IGNORECASE), r'\1[REDACTED_PASSWORD]\3'),

        # Email addresses (PII)
        (re.compile(r'\b([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})\b'), '[REDACTED_EMAIL]'),

        # Phone numbers (+1234567890, +1 (555) 123-4567, 555.123.4567)
        (re.compile(r'(?<![\w:])\+\d{7,15}\b'), '[REDACTED_PHONE]'),
        (re.compile(r'(?<![\w:+-])(\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b'), '[REDACTED_PHONE]'),
    ]

    def mask(self, text: str) -> str:
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Mask secrets in the record's message and string arguments.

        Returns:
            True (records are modified, never dropped)
        """
        if record.msg:
            record.msg = self.mask(str(record.msg))

        if record.args and isinstance(record.args, tuple):
            record.args = tuple(self.mask(arg) if isinstance(arg, str) else arg for arg in record.args)

        return True


def silence_sql_loggers():
    """Keep SQLAlchemy and aiosqlite statement logging out of the application log."""
    for logger_name in ['aiosqlite', 'sqlalchemy', 'sqlalchemy.engine', 'sqlalchemy.pool', 'sqlalchemy.orm']:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(logging.NullHandler())


def setup_logging(log_dir: Path | str = "logs"):
    """
    Initialize centralized logging configuration.

    Call this function once at application startup (see run.py).

    Configuration:
    - Log level from config.LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)
    - Rotation every midnight, keeping config.LOG_RETENTION_DAYS files
    - Masks secrets if config.LOG_MASK_SECRETS is True
    - Writes to <log_dir>/app.log and to the console
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True)

    log_level_str = getattr(config, "LOG_LEVEL", "INFO")
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    retention_days = getattr(config, "LOG_RETENTION_DAYS", 7)
    mask_secrets = getattr(config, "LOG_MASK_SECRETS", True)

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(name)-25s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_dir / "app.log",
        when="midnight",
        interval=1,
        backupCount=retention_days,
        encoding="utf-8"
    )
    console_handler = logging.StreamHandler()

    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        if mask_secrets:
            handler.addFilter(SecretMaskingFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized: Level={log_level_str}, Retention={retention_days} days, "
                 f"Masking={'ENABLED' if mask_secrets else 'DISABLED'}")
