"""
Alien repository containing all data-access operations for the aliens table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
- Driver/ORM failures surface as StorageError
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import StorageOperation
from app.core.errors import StorageError
from app.db.models.alien import Alien


@contextmanager
def _storage_errors(operation: StorageOperation, alien_id: int | None = None) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(
            f"Storage failure during {operation}",
            operation=operation.value,
            alien_id=alien_id,
            details={"error": str(exc)},
        ) from exc


async def list_aliens(db: AsyncSession) -> list[Alien]:
    """Return every stored alien in insertion order."""
    with _storage_errors(StorageOperation.LIST_ALL):
        result = await db.execute(select(Alien).order_by(Alien.id))
        return list(result.scalars().all())


async def get_alien_by_id(db: AsyncSession, alien_id: int) -> Alien | None:
    """Fetch an alien by primary key; None when absent."""
    with _storage_errors(StorageOperation.FIND_BY_ID, alien_id):
        return await db.get(Alien, alien_id)


async def save_alien(
    db: AsyncSession,
    *,
    alien_id: int | None = None,
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Alien:
    """
    Upsert an alien.

    A matching `alien_id` overwrites every non-id field of that row.
    A missing or unknown `alien_id` inserts a new row with a generated id;
    the supplied id is not reused.
    """
    with _storage_errors(StorageOperation.SAVE, alien_id):
        alien = await db.get(Alien, alien_id) if alien_id is not None else None
        if alien is None:
            alien = Alien(name=name, attributes=dict(attributes or {}))
            db.add(alien)
        else:
            alien.name = name
            alien.attributes = dict(attributes or {})
        await db.flush()
        return alien


async def delete_alien_by_id(db: AsyncSession, alien_id: int) -> None:
    """Delete an alien if present. Unknown ids are a no-op."""
    with _storage_errors(StorageOperation.DELETE_BY_ID, alien_id):
        await db.execute(delete(Alien).where(Alien.id == alien_id))
        await db.flush()
