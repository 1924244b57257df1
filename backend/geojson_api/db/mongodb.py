# backend/geojson_api/db/mongodb.py
# Client MongoDB (motor) encapsulé dans un store avec état de disponibilité explicite.

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ReturnDocument

from geojson_api.core.errors import DRIVER_ERRORS, StoreFailureError, StoreNotReadyError
from geojson_api.core.logging_config import ERROR_LOGGER_NAME
from geojson_api.core.settings import Settings

logger = logging.getLogger(__name__)
error_logger = logging.getLogger(ERROR_LOGGER_NAME)


class StoreState(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


class MongoStore:
    """Accès à la collection GeoJSON.

    Description:
        Porte le client motor et l'état de la connexion. Chaque opération vérifie
        d'abord que le store est prêt (`StoreNotReadyError` sinon), puis convertit
        toute erreur du driver en `StoreFailureError`. Aucun retry.

    Args:
        uri (str): URI MongoDB.
        db_name (str): Nom de la base.
        collection_name (str): Nom de la collection.
        timeout_ms (int): Timeout de sélection de serveur transmis au driver.
    """

    def __init__(self, uri: str, db_name: str, collection_name: str, timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.timeout_ms = timeout_ms
        self.state = StoreState.PENDING
        self._client: AsyncIOMotorClient | None = None
        self._collection: AsyncIOMotorCollection | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> MongoStore:
        return cls(
            uri=settings.mongodb_uri,
            db_name=settings.mongodb_db,
            collection_name=settings.mongodb_collection,
            timeout_ms=settings.mongodb_timeout_ms,
        )

    @property
    def is_ready(self) -> bool:
        return self.state is StoreState.READY

    async def connect(self) -> None:
        """Ouvre le client, vérifie le serveur par un ping puis passe à l'état READY.

        Raises:
            StoreFailureError: Si le serveur ne répond pas (état FAILED).
        """
        client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            await client[self.db_name].command("ping")
        except DRIVER_ERRORS as e:
            client.close()
            self.state = StoreState.FAILED
            error_logger.error(f"Failed to connect to MongoDB: {e}")
            raise StoreFailureError("connect", e) from e

        self._client = client
        self._collection = client[self.db_name][self.collection_name]
        self.state = StoreState.READY
        logger.info(f"Connected to MongoDB ({self.db_name}.{self.collection_name})")

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None
        self._collection = None
        self.state = StoreState.CLOSED

    async def ping(self) -> None:
        collection = self._ready_collection()
        try:
            await collection.database.command("ping")
        except DRIVER_ERRORS as e:
            raise StoreFailureError("ping", e) from e

    def _ready_collection(self) -> AsyncIOMotorCollection:
        if not self.is_ready or self._collection is None:
            raise StoreNotReadyError()
        return self._collection

    # ------------------------- opérations -------------------------

    async def find_all(self) -> list[dict[str, Any]]:
        collection = self._ready_collection()
        try:
            return await collection.find({}).to_list(length=None)
        except DRIVER_ERRORS as e:
            raise StoreFailureError("find_all", e) from e

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        collection = self._ready_collection()
        try:
            return await collection.find_one(query)
        except DRIVER_ERRORS as e:
            raise StoreFailureError("find_one", e) from e

    async def insert_one(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insère le document et le renvoie avec l'`_id` attribué par MongoDB."""
        collection = self._ready_collection()
        to_insert = dict(document)
        try:
            result = await collection.insert_one(to_insert)
        except DRIVER_ERRORS as e:
            raise StoreFailureError("insert_one", e) from e
        to_insert["_id"] = result.inserted_id
        return to_insert

    async def find_one_and_update(
        self, query: dict[str, Any], fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Fusionne `fields` (`$set`) dans le premier document trouvé, renvoie l'état après mise à jour."""
        collection = self._ready_collection()
        try:
            return await collection.find_one_and_update(
                query, {"$set": fields}, return_document=ReturnDocument.AFTER
            )
        except DRIVER_ERRORS as e:
            raise StoreFailureError("find_one_and_update", e) from e

    async def delete_one(self, query: dict[str, Any]) -> int:
        collection = self._ready_collection()
        try:
            result = await collection.delete_one(query)
        except DRIVER_ERRORS as e:
            raise StoreFailureError("delete_one", e) from e
        return result.deleted_count
