"""Table gateway implementations for data access."""

from roster.storage.repositories.base import Table
from roster.storage.repositories.student import StudentGateway, row_to_student

__all__ = ["StudentGateway", "Table", "row_to_student"]
