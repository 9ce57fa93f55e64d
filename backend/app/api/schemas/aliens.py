"""Alien request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from app.db.models.alien import Alien


class AlienPayload(BaseModel):
    """
    Body of POST/PUT /aliens.

    Besides `id` and `name`, any extra field is accepted as-is and stored
    in the alien's open attribute record.
    """

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    name: str | None = None

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class AlienResponse(BaseModel):
    """An alien as returned by every /aliens endpoint, attributes flattened."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str | None = None

    @classmethod
    def from_entity(cls, alien: Alien) -> AlienResponse:
        return cls(**(alien.attributes or {}), id=alien.id, name=alien.name)
