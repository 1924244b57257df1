# backend/geojson_api/api/routes/__init__.py

from .base import router as base_router
from .health import router as health_router
from .geojson import router as geojson_router

routers = [
    base_router,
    health_router,
    geojson_router,
]
