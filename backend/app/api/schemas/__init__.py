"""API schema package."""

from app.api.schemas.aliens import AlienPayload, AlienResponse

__all__ = ["AlienPayload", "AlienResponse"]
