"""Configuration du module de stockage."""

from pathlib import Path

from pydantic_settings import BaseSettings

from roster.core.constants import DB_ROSTER


class StorageSettings(BaseSettings):
    """Paramètres de stockage/base de données.

    db_path accepte ":memory:" pour une base DuckDB non persistée.
    """

    db_path: Path = DB_ROSTER
    read_only: bool = False

    model_config = {"env_prefix": "ROSTER_STORAGE_"}


storage_settings = StorageSettings()
