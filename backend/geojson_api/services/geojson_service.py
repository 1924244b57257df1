# backend/geojson_api/services/geojson_service.py
# Handlers CRUD de la collection GeoJSON (store injecté).

from __future__ import annotations

import logging
from typing import Any

from geojson_api.core.errors import StoreFailureError
from geojson_api.core.logging_config import ERROR_LOGGER_NAME
from geojson_api.db.mongodb import MongoStore
from geojson_api.services import outcomes
from geojson_api.services.identifier_resolver import ID_FIELD, read_query, write_query
from geojson_api.services.outcomes import Ok, Outcome

logger = logging.getLogger(__name__)
error_logger = logging.getLogger(ERROR_LOGGER_NAME)

FETCH_FAILED = "Failed to fetch data"
ADD_FAILED = "Failed to add data"
UPDATE_FAILED = "Failed to update data"
DELETE_FAILED = "Failed to delete data"


def _without_id(body: dict[str, Any]) -> dict[str, Any]:
    # `_id` est attribué par le store et immuable
    return {k: v for k, v in body.items() if k != ID_FIELD}


class GeoJsonService:
    """Opérations CRUD sur les documents GeoJSON.

    Description:
        Chaque méthode effectue exactement un appel au store et traduit la réponse
        en `Outcome`. Seules les erreurs du store (`StoreFailureError`) sont
        capturées ; `StoreNotReadyError` remonte jusqu'à la couche HTTP.
    """

    def __init__(self, store: MongoStore):
        """Initialiser le service.

        Args:
            store: Store MongoDB (déjà connecté ou non).
        """
        self.store = store

    async def list_documents(self) -> Outcome:
        try:
            documents = await self.store.find_all()
        except StoreFailureError as e:
            error_logger.error(f"list_documents failed: {e}")
            return outcomes.from_store_failure(e, FETCH_FAILED, with_cause=True)
        return Ok(documents)

    async def get_document(self, identifier: str) -> Outcome:
        """Lecture par ObjectId, nom de pays ou code cca3.

        Args:
            identifier: Paramètre de chemin brut.

        Returns:
            Outcome: Ok(document) | NotFound | Internal.
        """
        query = read_query(identifier)
        try:
            document = await self.store.find_one(query)
        except StoreFailureError as e:
            error_logger.error(f"get_document({identifier!r}) failed: {e}")
            return outcomes.from_store_failure(e, FETCH_FAILED, with_cause=True)
        return outcomes.from_document(document)

    async def create_document(self, body: dict[str, Any]) -> Outcome:
        try:
            created = await self.store.insert_one(_without_id(body))
        except StoreFailureError as e:
            error_logger.error(f"create_document failed: {e}")
            return outcomes.from_store_failure(e, ADD_FAILED)
        logger.info(f"Document created: {created[ID_FIELD]}")
        return Ok(created, created=True)

    async def update_document(self, identifier: str, body: dict[str, Any]) -> Outcome:
        """Fusion champ à champ de `body` dans le document ciblé.

        Description:
            Les champs absents du body sont conservés, `_id` n'est jamais modifié.
            Un body vide (après retrait de `_id`) ne déclenche aucune écriture :
            le document courant est renvoyé tel quel.

        Args:
            identifier: Paramètre de chemin brut (résolution "écriture").
            body: Champs à écrire.

        Returns:
            Outcome: Ok(document mis à jour) | NotFound | Internal.
        """
        query = write_query(identifier)
        fields = _without_id(body)
        try:
            if fields:
                document = await self.store.find_one_and_update(query, fields)
            else:
                document = await self.store.find_one(query)
        except StoreFailureError as e:
            error_logger.error(f"update_document({identifier!r}) failed: {e}")
            return outcomes.from_store_failure(e, UPDATE_FAILED)
        return outcomes.from_document(document)

    async def delete_document(self, identifier: str) -> Outcome:
        query = write_query(identifier)
        try:
            deleted = await self.store.delete_one(query)
        except StoreFailureError as e:
            error_logger.error(f"delete_document({identifier!r}) failed: {e}")
            return outcomes.from_store_failure(e, DELETE_FAILED)
        if deleted:
            logger.info(f"Document deleted: {identifier}")
        return outcomes.from_deleted_count(deleted)
