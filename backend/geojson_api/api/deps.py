# backend/geojson_api/api/deps.py
# Dépendances FastAPI : settings, store (avec contrôle de disponibilité) et service CRUD.

from fastapi import Depends, Request

from geojson_api.core.errors import StoreNotReadyError
from geojson_api.core.settings import Settings
from geojson_api.db.mongodb import MongoStore
from geojson_api.services.geojson_service import GeoJsonService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> MongoStore:
    """Store de l'application, uniquement s'il est connecté.

    Raises:
        StoreNotReadyError: Connexion pas encore établie (ou en échec) ; aucune requête n'atteint Mongo.
    """
    store: MongoStore = request.app.state.store
    if not store.is_ready:
        raise StoreNotReadyError()
    return store


def get_geojson_service(store: MongoStore = Depends(get_store)) -> GeoJsonService:
    return GeoJsonService(store)
