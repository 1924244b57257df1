# backend/geojson_api/core/settings.py
# Paramètres de l'application (variables d'environnement + .env), accès via get_settings().

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "GeoJSON API"
    environment: str = "development"  # or "production"
    api_version: str = "0.1.0"

    # === Serveur ===
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = Field(default_factory=list)

    # === MongoDB ===
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "geojsonDB"
    mongodb_collection: str = "geojsonCollection"
    mongodb_timeout_ms: int = 5000
    # True: refuse de démarrer si Mongo est injoignable. False: connexion en tâche de fond.
    mongodb_fail_fast: bool = True

    # === Réponses ===
    # Conserve le vocabulaire mixte "message"/"error" des anciens clients
    legacy_error_keys: bool = True

    # UPLOAD
    one_mb: int = 1024 * 1024
    max_body_mb: int = 16  # limite BSON d'un document

    # === LOGS ===
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def max_body_bytes(self) -> int:
        return self.max_body_mb * self.one_mb


@lru_cache
def get_settings() -> Settings:
    """Retourne l'instance de settings (chargée une seule fois)."""
    return Settings()
