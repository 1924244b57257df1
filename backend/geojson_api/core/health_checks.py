import logging

from geojson_api.core.errors import StoreFailureError, StoreNotReadyError
from geojson_api.db.mongodb import MongoStore

logger = logging.getLogger(__name__)


async def check_mongodb(store: MongoStore) -> str:
    """
    Vérifie la connexion MongoDB

    Returns:
        "ok" si connecté, message d'erreur sinon
    """
    try:
        await store.ping()
        return "ok"
    except StoreNotReadyError as e:
        return f"error: {e.message} ({store.state.value})"
    except StoreFailureError as e:
        logger.error(f"MongoDB health check failed: {e}")
        return f"error: {e}"
