"""Configuration centralisée du logging pour le projet.

Ce module permet de configurer facilement le logging avec :
- Logs console (niveau LOG_LEVEL, INFO par défaut)
- Logs fichier optionnels (niveau DEBUG, rotation)
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _resolve_level(level: int | str | None) -> int:
    """Résout un niveau de log (int, nom, ou variable LOG_LEVEL)."""
    if isinstance(level, int):
        return level
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logging(
    level: int | str | None = None,
    log_file: Path | str | None = None,
) -> logging.Logger:
    """Configure le logger racine de l'application.

    Args:
        level: Niveau console. Si None, lu depuis LOG_LEVEL (INFO par défaut).
        log_file: Fichier de log optionnel (DEBUG, 10 MB x 5 rotations).

    Returns:
        Le logger racine configuré.

    Usage:
        >>> from roster.core.logging_config import setup_logging
        >>> setup_logging("DEBUG")
    """
    console_level = _resolve_level(level)

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_file else console_level)

    # Nettoyer les handlers existants pour éviter les doublons
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(fmt=CONSOLE_FORMAT, datefmt="%H:%M:%S")
    )
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)
        logger.debug(f"Logs sauvegardés dans : {log_path}")

    return logger
