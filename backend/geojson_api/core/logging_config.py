"""Configuration du système de logging centralisé."""

import logging
import logging.handlers
import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

from geojson_api.core.settings import Settings, get_settings

ROOT_LOGGER_NAME = "geojson_api"
ERROR_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.errors"


def setup_logging(settings: Settings) -> tuple[logging.Logger, logging.Logger]:
    """Configure le système de logging avec rotation quotidienne.

    Description:
        - logger générique `geojson_api` (niveau `log_level`) : fichier `generic.log` + console
        - logger d'erreurs `geojson_api.errors` (ERROR+) : fichier `errors.log`
        Les modules loguent via `logging.getLogger(__name__)`, donc sous `geojson_api`.

    Args:
        settings (Settings): Paramètres (dossier, niveau, rétention).

    Returns:
        tuple: (logger_generic, logger_errors)
    """
    logs_dir = Path(settings.log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    # Nettoyage des logs anciens
    cleanup_old_logs(logs_dir, settings.log_retention_days)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Logger générique
    generic_logger = logging.getLogger(ROOT_LOGGER_NAME)
    generic_logger.setLevel(settings.log_level.upper())

    if not generic_logger.handlers:  # Éviter les doublons
        generic_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "generic.log",
            when="midnight",
            interval=1,
            encoding="utf-8"
        )
        generic_handler.suffix = "%Y-%m-%d"
        generic_handler.setFormatter(formatter)
        generic_logger.addHandler(generic_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        generic_logger.addHandler(console_handler)

    # Logger erreurs (ERROR+)
    error_logger = logging.getLogger(ERROR_LOGGER_NAME)
    error_logger.setLevel(logging.ERROR)

    if not error_logger.handlers:
        error_handler = logging.handlers.TimedRotatingFileHandler(
            filename=logs_dir / "errors.log",
            when="midnight",
            interval=1,
            encoding="utf-8"
        )
        error_handler.suffix = "%Y-%m-%d"
        error_handler.setFormatter(formatter)
        error_logger.addHandler(error_handler)

    return generic_logger, error_logger


def cleanup_old_logs(logs_dir: Path, retention_days: int = 30) -> None:
    """Supprime les fichiers rotés (`generic.log.AAAA-MM-JJ`, ...) plus vieux que retention_days."""
    cutoff_str = (datetime.now() - timedelta(days=retention_days)).strftime("%Y-%m-%d")

    for file_path in logs_dir.glob("*.log.*"):
        date_part = file_path.name.rsplit(".", 1)[-1]
        if len(date_part) != 10 or date_part.count("-") != 2:
            continue
        if date_part < cutoff_str:
            try:
                os.remove(file_path)
            except OSError:
                continue


# Instance globale (lazy initialization)
_loggers: Optional[tuple[logging.Logger, logging.Logger]] = None


def get_loggers(settings: Optional[Settings] = None) -> tuple[logging.Logger, logging.Logger]:
    """Retourne les loggers configurés (singleton)."""
    global _loggers
    if _loggers is None:
        _loggers = setup_logging(settings or get_settings())
    return _loggers
