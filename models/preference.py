from sqlalchemy import Column, String, Text, DateTime, func

from models.base import Base


class Preference(Base):
    """
    Flexible key-value store for application preferences.

    One row per key. Writing an existing key replaces the value entirely,
    there is no history and no versioning.

    Examples:
        - homepage_banner: "Spring release is live"
        - demo_requests_enabled: "true"
    """
    __tablename__ = 'preferences'

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())
