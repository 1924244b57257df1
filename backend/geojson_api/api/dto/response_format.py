from typing import Any, Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Réponse portant un message (suppression, not-found de lecture)."""

    message: str


class ErrorResponse(BaseModel):
    """Format d'erreur : `{"error": <message>}` (+ détails de validation éventuels)."""

    error: str
    details: Optional[list[dict[str, Any]]] = None

    def body(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
