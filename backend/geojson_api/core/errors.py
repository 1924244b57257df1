# backend/geojson_api/core/errors.py
# Exceptions métier de la couche de stockage.

from bson.errors import InvalidDocument
from pymongo.errors import PyMongoError

# Erreurs levées par le driver qu'on convertit en StoreFailureError
DRIVER_ERRORS = (PyMongoError, InvalidDocument)


class StoreNotReadyError(Exception):
    """La connexion MongoDB n'est pas (encore) établie."""

    def __init__(self, message: str = "Database not initialized"):
        super().__init__(message)
        self.message = message


class StoreFailureError(Exception):
    """Échec d'un appel au store (connexion perdue, requête invalide, timeout...)."""

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(str(cause))
        self.operation = operation
        self.cause = cause
