import logging

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_commit
from exceptions.preference import InvalidPreferenceKeyException
from repositories.preference import PreferenceRepository


class PreferenceService:
    """
    Get/set access to application preferences.

    Every call goes straight to the database, there is no caching layer.
    Database errors are not caught here and reach the caller unchanged.
    """

    @staticmethod
    def validate_key(key) -> None:
        if not isinstance(key, str) or key == "":
            raise InvalidPreferenceKeyException(key)

    @staticmethod
    async def get(key: str, session: AsyncSession | Session, default: str | None = None) -> str | None:
        """
        Get a preference value.

        Args:
            key: Preference key
            session: Database session (async or sync)
            default: Returned when the key has never been written

        Returns:
            Stored value (may be None if None was stored), or default
        """
        preference = await PreferenceRepository.get(key, session)
        if preference is None:
            return default
        return preference.value

    @staticmethod
    async def set(key: str, value: str | None, session: AsyncSession | Session) -> None:
        """
        Store a preference value, replacing any previous one.

        Args:
            key: Preference key (non-empty)
            value: Value to store
            session: Database session (async or sync)

        Raises:
            InvalidPreferenceKeyException: If key is empty or not a string
        """
        PreferenceService.validate_key(key)
        await PreferenceRepository.set(key, value, session)
        await session_commit(session)
        logging.info(f"[Preferences] '{key}' updated")
