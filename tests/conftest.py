"""Fixtures partagées pour les tests Roster."""

from __future__ import annotations

from datetime import date

import pytest

from roster.core.models import Student
from roster.storage.connection import managed_connection
from roster.storage.repositories.student import StudentGateway


@pytest.fixture()
def conn():
    """Connexion DuckDB en mémoire (isolée par test)."""
    with managed_connection(":memory:", read_only=False) as connection:
        yield connection


@pytest.fixture()
def gateway(conn):
    """StudentGateway avec la table students créée."""
    students = StudentGateway(conn)
    assert students.create_table()
    return students


@pytest.fixture()
def ann() -> Student:
    return Student(id=1, first_name="Ann", last_name="Lee")


@pytest.fixture()
def bo() -> Student:
    return Student(id=2, first_name="Bo", last_name="Tan", birthday=date(2020, 1, 1))
