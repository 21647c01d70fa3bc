"""Checked results for gateway operations.

Distingue un succès, une absence légitime et une erreur du driver,
là où les méthodes simples (bool / None / liste vide) les confondent.

Usage:
    result = gateway.lookup(1)
    match result:
        case Success(value=student): ...
        case NotFound(): ...
        case DatabaseError(cause=exc): ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import duckdb
from pydantic import ValidationError

from roster.core.exceptions import StorageError


@dataclass(frozen=True)
class Success[T]:
    """The statement ran; carries its value (entity, rows, or affected count)."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class NotFound:
    """The statement ran but matched no row."""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> None:
        return None

    def value_or(self, default: Any) -> Any:
        return default


@dataclass(frozen=True)
class DatabaseError:
    """The statement failed; carries the original exception.

    The cause is a driver error, or a validation error when a stored row
    cannot be mapped to an entity.
    """

    cause: duckdb.Error | ValidationError
    statement: str = ""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> None:
        """Raise the driver error as a StorageError.

        Raises:
            StorageError: Always, chained from the driver exception.
        """
        raise StorageError(
            f"Database operation failed: {self.cause}",
            details={"statement": self.statement} if self.statement else None,
        ) from self.cause

    def value_or(self, default: Any) -> Any:
        return default


type Result[T] = Success[T] | NotFound | DatabaseError
