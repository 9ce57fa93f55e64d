"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.
"""

from app.db.models.base import Base
from app.db.models.alien import Alien

__all__ = [
    "Base",
    "Alien",
]
