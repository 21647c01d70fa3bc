"""Custom exceptions for Roster.

Provides a small hierarchy so that host applications can catch
every Roster failure with a single except clause.
"""


class RosterError(Exception):
    """Base exception for all Roster errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        """Initialize exception with message and optional details.

        Args:
            message: Human-readable error description.
            details: Optional dict with additional context (table, statement, etc.).
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StorageError(RosterError):
    """Database operation failed.

    Raised when a checked gateway result carrying a driver error is unwrapped:
    - Constraint violations (duplicate primary key)
    - Missing or already existing table
    - Connection errors
    """

    pass


class ConfigurationError(RosterError):
    """Configuration error.

    Raised when storage settings cannot be honoured,
    e.g. a read-only in-memory database.
    """

    pass
