"""Storage module for DuckDB persistence."""

from roster.storage.connection import connect, managed_connection
from roster.storage.results import DatabaseError, NotFound, Success

__all__ = ["DatabaseError", "NotFound", "Success", "connect", "managed_connection"]
