"""Alien CRUD endpoints, a thin pass-through to the alien repository."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, require_json_content_type
from app.api.schemas.aliens import AlienPayload, AlienResponse
from app.core.constants import DELETE_SUCCESS_MESSAGE
from app.core.logging import get_logger
from app.repositories import aliens as alien_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/aliens", tags=["Aliens"])


@router.get("", response_model=list[AlienResponse])
async def get_all_aliens(db: AsyncSession = Depends(get_db)) -> list[AlienResponse]:
    """List every alien."""
    logger.info("get_all_aliens")
    aliens = await alien_repository.list_aliens(db)
    return [AlienResponse.from_entity(alien) for alien in aliens]


@router.get("/{aid}", response_model=AlienResponse | None)
async def get_alien(aid: int, db: AsyncSession = Depends(get_db)) -> AlienResponse | None:
    """Get one alien; a missing id answers 200 with a null body."""
    logger.info("get_alien", alien_id=aid)
    alien = await alien_repository.get_alien_by_id(db, aid)
    if alien is None:
        return None
    return AlienResponse.from_entity(alien)


@router.delete("/{aid}", response_class=PlainTextResponse)
async def delete_alien(aid: int, db: AsyncSession = Depends(get_db)) -> str:
    """Delete an alien. Always answers 'success', even for unknown ids."""
    logger.info("delete_alien", alien_id=aid)
    await alien_repository.delete_alien_by_id(db, aid)
    return DELETE_SUCCESS_MESSAGE


@router.post(
    "",
    response_model=AlienResponse,
    dependencies=[Depends(require_json_content_type)],
)
async def add_alien(payload: AlienPayload, db: AsyncSession = Depends(get_db)) -> AlienResponse:
    """Save an alien (upsert) from a JSON body."""
    logger.info("add_alien", alien_id=payload.id)
    alien = await alien_repository.save_alien(
        db,
        alien_id=payload.id,
        name=payload.name,
        attributes=payload.attributes,
    )
    return AlienResponse.from_entity(alien)


@router.put("", response_model=AlienResponse)
async def update_alien(payload: AlienPayload, db: AsyncSession = Depends(get_db)) -> AlienResponse:
    """Save an alien (upsert); same semantics as POST."""
    logger.info("update_alien", alien_id=payload.id)
    alien = await alien_repository.save_alien(
        db,
        alien_id=payload.id,
        name=payload.name,
        attributes=payload.attributes,
    )
    return AlienResponse.from_entity(alien)
