# backend/geojson_api/api/responses.py
# Rendu HTTP des Outcome (seul endroit où les codes de statut sont choisis).

from fastapi import status
from fastapi.responses import JSONResponse

from geojson_api.api.dto.response_format import ErrorResponse, MessageResponse
from geojson_api.core.bson_utils import serialize_document
from geojson_api.services.outcomes import BadRequest, Internal, NotFound, Ok, Outcome


def render_outcome(outcome: Outcome, *, not_found_key: str = "error") -> JSONResponse:
    """Transforme un Outcome en réponse JSON.

    Description:
        Ok -> 200 (201 si création), NotFound -> 404, BadRequest -> 400, Internal -> 500.
        Le corps not-found utilise `not_found_key` ("message" ou "error").

    Args:
        outcome (Outcome): Résultat du handler.
        not_found_key (str): Clé du message not-found.

    Returns:
        JSONResponse: Réponse prête à renvoyer.
    """
    if isinstance(outcome, Ok):
        code = status.HTTP_201_CREATED if outcome.created else status.HTTP_200_OK
        return JSONResponse(status_code=code, content=serialize_document(outcome.payload))
    if isinstance(outcome, NotFound):
        if not_found_key == "message":
            content = MessageResponse(message=outcome.message).model_dump()
        else:
            content = ErrorResponse(error=outcome.message).body()
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=content)
    if isinstance(outcome, BadRequest):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=outcome.message).body(),
        )
    if isinstance(outcome, Internal):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=outcome.message).body(),
        )
    raise TypeError(f"Unknown outcome: {outcome!r}")
