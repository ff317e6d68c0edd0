"""
Models Package

This file ensures all SQLAlchemy models are imported and registered
on Base.metadata before tables are created.
"""

from models.base import Base
from models.preference import Preference
