"""
Alien model, the single entity exposed by the /aliens endpoints.

Only `id` and `name` are real columns; every other scalar field sent by a
client is kept in the `attributes` JSON column and flattened back into the
response body.
"""

from typing import Any, Optional

from sqlalchemy import JSON, Integer, String, text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class Alien(Base):
    __tablename__ = "aliens"
    # AUTOINCREMENT so SQLite never hands out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Open record: any extra primitive fields of the payload
    attributes: Mapped[dict[str, Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"),
        default=dict,
        server_default=text("'{}'"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Alien id={self.id} name={self.name!r} attributes={len(self.attributes or {})}>"
