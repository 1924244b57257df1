# backend/geojson_api/api/routes/geojson.py
# Routes CRUD /geojson : liste, lecture/écriture par ObjectId, nom de pays ou code cca3.

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Path
from fastapi.responses import JSONResponse

from geojson_api.api.deps import get_app_settings, get_geojson_service
from geojson_api.api.dto.response_format import ErrorResponse, MessageResponse
from geojson_api.api.responses import render_outcome
from geojson_api.core.settings import Settings
from geojson_api.services.geojson_service import GeoJsonService

router = APIRouter(prefix="/geojson", tags=["geojson"])

IDENTIFIER_DESCRIPTION = (
    "ObjectId Mongo (24 caractères hexadécimaux), nom de pays (`country_name`) "
    "ou code ISO alpha-3 (`cca3_code`)."
)

_ERRORS = {
    404: {"model": ErrorResponse, "description": "Aucun document ne correspond"},
    500: {"model": ErrorResponse, "description": "Base indisponible ou erreur du store"},
}


@router.get("", summary="Liste tous les documents GeoJSON")
async def list_geojson(service: GeoJsonService = Depends(get_geojson_service)) -> JSONResponse:
    return render_outcome(await service.list_documents())


@router.get(
    "/{identifier}",
    summary="Lit un document",
    description=(
        "Si l'identifiant est un ObjectId valide, recherche par `_id` ; "
        "sinon recherche sur `country_name` **ou** `cca3_code`."
    ),
    responses={**_ERRORS, 404: {"model": MessageResponse, "description": "Aucun document ne correspond"}},
)
async def get_geojson(
    identifier: str = Path(..., description=IDENTIFIER_DESCRIPTION),
    service: GeoJsonService = Depends(get_geojson_service),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Lecture d'un document.

    Returns:
        JSONResponse: 200 + document, 404 `{"message": ...}` (ou `{"error": ...}` hors mode legacy).
    """
    not_found_key = "message" if settings.legacy_error_keys else "error"
    return render_outcome(await service.get_document(identifier), not_found_key=not_found_key)


@router.post("", status_code=201, summary="Ajoute un document", responses={500: _ERRORS[500]})
async def create_geojson(
    body: dict[str, Any] = Body(..., description="Document à insérer (un `_id` fourni est ignoré)."),
    service: GeoJsonService = Depends(get_geojson_service),
) -> JSONResponse:
    return render_outcome(await service.create_document(body))


@router.put(
    "/{identifier}",
    summary="Met à jour un document",
    description=(
        "ObjectId valide -> `_id` ; 3 caractères -> `cca3_code` ; sinon -> `country_name`. "
        "Les champs du body sont fusionnés dans le document, les autres sont conservés."
    ),
    responses=_ERRORS,
)
async def update_geojson(
    identifier: str = Path(..., description=IDENTIFIER_DESCRIPTION),
    body: dict[str, Any] = Body(..., description="Champs à écrire (`_id` ignoré)."),
    service: GeoJsonService = Depends(get_geojson_service),
) -> JSONResponse:
    return render_outcome(await service.update_document(identifier, body))


@router.delete(
    "/{identifier}",
    summary="Supprime un document",
    description="Même résolution de l'identifiant que pour la mise à jour.",
    responses=_ERRORS,
)
async def delete_geojson(
    identifier: str = Path(..., description=IDENTIFIER_DESCRIPTION),
    service: GeoJsonService = Depends(get_geojson_service),
) -> JSONResponse:
    return render_outcome(await service.delete_document(identifier))
