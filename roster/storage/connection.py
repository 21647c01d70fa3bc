"""DuckDB connection helpers for host applications.

Les gateways ne gèrent jamais le cycle de vie de la connexion : ils
reçoivent une connexion ouverte et ne la ferment pas. Ce module sert
aux applications hôtes (et aux tests) pour ouvrir et fermer cette
connexion à partir de la configuration.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

import duckdb

from roster.core.constants import IN_MEMORY
from roster.core.exceptions import ConfigurationError
from roster.storage.config import storage_settings

logger = logging.getLogger(__name__)


def connect(
    db_path: Path | str | None = None,
    read_only: bool | None = None,
) -> duckdb.DuckDBPyConnection:
    """Ouvre une connexion DuckDB.

    Args:
        db_path: Chemin vers la base, ou ":memory:". Par défaut: valeur de la config.
        read_only: Ouverture en lecture seule. Par défaut: valeur de la config.

    Returns:
        Connexion ouverte, à fermer par l'appelant.

    Raises:
        ConfigurationError: Si une base en mémoire est demandée en lecture seule.
    """
    database = str(db_path) if db_path is not None else str(storage_settings.db_path)
    if read_only is None:
        read_only = storage_settings.read_only

    if database == IN_MEMORY:
        if read_only:
            raise ConfigurationError(
                "An in-memory database cannot be opened read-only",
                details={"db_path": database},
            )
    else:
        Path(database).parent.mkdir(parents=True, exist_ok=True)

    conn = duckdb.connect(database, read_only=read_only)
    logger.debug(f"Opened connection: {database} (read_only={read_only})")
    return conn


@contextmanager
def managed_connection(
    db_path: Path | str | None = None,
    read_only: bool | None = None,
) -> Generator[duckdb.DuckDBPyConnection]:
    """Context manager pour le cycle de vie de la connexion DB.

    Usage::

        with managed_connection(":memory:") as conn:
            gateway = StudentGateway(conn)
            gateway.create_table()
    """
    conn = connect(db_path, read_only)
    try:
        yield conn
    finally:
        try:
            conn.close()
            logger.debug("Connexion DuckDB fermee")
        except duckdb.Error:
            logger.warning("Erreur fermeture DuckDB", exc_info=True)
