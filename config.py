import os

from dotenv import load_dotenv

# Load .env but don't override existing environment variables
# This allows tests to set values before import
load_dotenv(".env", override=False)

# Telegram bot token (the only secret this application needs)
TOKEN = os.environ.get("TOKEN")

# Chat that receives "new demo request" notifications
DEMO_REQUEST_CHAT_ID = os.environ.get("DEMO_REQUEST_CHAT_ID")

# Database
DB_NAME = os.environ.get("DB_NAME", "app.db")
# Full SQLAlchemy URL override (e.g. sqlite+aiosqlite:///:memory: for tests)
DB_URL = os.environ.get("DB_URL") or f"sqlite+aiosqlite:///data/{DB_NAME}"

# Language of notification templates (l10n/<language>.json)
BOT_LANGUAGE = os.environ.get("BOT_LANGUAGE", "en")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
try:
    LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
except ValueError:
    LOG_RETENTION_DAYS = 7
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Default: enabled
