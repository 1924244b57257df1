# backend/geojson_api/services/outcomes.py
# Résultats des handlers, indépendants du transport (aucun code HTTP ici).

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from geojson_api.core.errors import StoreFailureError

NOT_FOUND_MESSAGE = "Data not found"


@dataclass(frozen=True)
class Ok:
    payload: Any
    created: bool = False


@dataclass(frozen=True)
class NotFound:
    message: str = NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class BadRequest:
    message: str


@dataclass(frozen=True)
class Internal:
    message: str


Outcome = Union[Ok, NotFound, BadRequest, Internal]


def from_document(document: Optional[dict[str, Any]]) -> Outcome:
    """Document trouvé -> Ok, None -> NotFound."""
    if document is None:
        return NotFound()
    return Ok(document)


def from_deleted_count(deleted: int, message: str = "Data deleted successfully") -> Outcome:
    if deleted > 0:
        return Ok({"message": message})
    return NotFound()


def from_store_failure(exc: StoreFailureError, message: str, *, with_cause: bool = False) -> Internal:
    """Échec du store -> Internal.

    Args:
        exc (StoreFailureError): Erreur levée par le store.
        message (str): Message générique exposé au client.
        with_cause (bool): Ajoute le texte de l'erreur d'origine (`"<message>: <cause>"`).

    Returns:
        Internal: Résultat d'échec.
    """
    if with_cause:
        return Internal(f"{message}: {exc.cause}")
    return Internal(message)
