# backend/geojson_api/main.py

import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from rich import print

from geojson_api.api.routes import routers
from geojson_api.core.errors import StoreFailureError
from geojson_api.core.exception_handlers import register_exception_handlers
from geojson_api.core.logging_config import get_loggers
from geojson_api.core.middleware import MaxBodySizeMiddleware
from geojson_api.core.settings import Settings, get_settings
from geojson_api.db.mongodb import MongoStore

logger = logging.getLogger(__name__)


async def _connect_in_background(store: MongoStore) -> None:
    try:
        await store.connect()
    except StoreFailureError:
        # déjà logué par le store ; les requêtes recevront "Database not initialized"
        pass


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    settings: Settings = app.state.settings
    store: MongoStore = app.state.store
    get_loggers(settings)
    logger.info(f"{settings.app_name} starting ({settings.environment})")

    connect_task = None
    if not store.is_ready:
        if settings.mongodb_fail_fast:
            await store.connect()  # StoreFailureError -> le démarrage échoue
        else:
            connect_task = asyncio.create_task(_connect_in_background(store))

    yield  # l'app tourne ici

    # --- shutdown ---
    if connect_task is not None and not connect_task.done():
        connect_task.cancel()
        with suppress(asyncio.CancelledError):
            await connect_task
    await store.close()


def create_app(settings: Settings | None = None, store: MongoStore | None = None) -> FastAPI:
    """Construit l'application FastAPI.

    Args:
        settings (Settings | None): Paramètres (défaut : `get_settings()`).
        store (MongoStore | None): Store injecté (défaut : construit depuis les settings).

    Returns:
        FastAPI: Application prête à servir.
    """
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store if store is not None else MongoStore.from_settings(settings)

    app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.max_body_bytes)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    for r in routers:
        app.include_router(r)
    return app


app = create_app()


def run() -> None:
    """Lance le serveur uvicorn sur `host:port`."""
    import uvicorn

    settings = get_settings()
    print(f"--- {settings.app_name} : http://{settings.host}:{settings.port} ---")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
