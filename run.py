import asyncio
import logging

import config
from bot_instance import close_bot
from db import create_db_and_tables, engine
from utils.config_validator import validate_or_exit
from utils.logging_config import setup_logging, silence_sql_loggers


async def startup():
    """Configure logging, check configuration and make sure the preferences table exists."""
    setup_logging()
    validate_or_exit(config)
    silence_sql_loggers()
    await create_db_and_tables()
    logging.info("[Init] Database ready")


async def shutdown():
    await close_bot()
    await engine.dispose()
    logging.info("[Shutdown] Bot session closed, database engine disposed")


async def main():
    await startup()
    await shutdown()


if __name__ == "__main__":
    asyncio.run(main())
