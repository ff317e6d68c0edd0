from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from models.preference import Preference


class PreferenceRepository:
    """
    Repository for the key-value Preference store.

    Only lookup and upsert are exposed. Preferences are never deleted
    or enumerated through this layer.
    """

    @staticmethod
    async def get(key: str, session: AsyncSession | Session) -> Preference | None:
        """
        Get a preference row by key.

        Args:
            key: Preference key
            session: Database session (async or sync)

        Returns:
            Preference row, or None if the key was never written
        """
        stmt = select(Preference).where(Preference.key == key)
        result = await session_execute(stmt, session)
        return result.scalar()

    @staticmethod
    async def set(key: str, value: str | None, session: AsyncSession | Session) -> None:
        """
        Set a preference value (insert or update).

        Args:
            key: Preference key
            value: New value, replaces any previous value
            session: Database session (async or sync)
        """
        existing = await PreferenceRepository.get(key, session)

        if existing is not None:
            stmt = update(Preference).where(Preference.key == key).values(value=value)
            await session_execute(stmt, session)
        else:
            preference = Preference(key=key, value=value)
            session.add(preference)
            await session_flush(session)
