"""Tests du StudentGateway sur une base DuckDB en mémoire."""

from __future__ import annotations

import logging
from datetime import date, datetime

import pytest

from roster.core.models import Student
from roster.storage.repositories.student import StudentGateway
from roster.storage.results import DatabaseError, NotFound, Success


def _count(conn) -> int:
    return conn.execute("SELECT count(*) FROM students").fetchone()[0]


def _by_id(students: list[Student]) -> list[Student]:
    return sorted(students, key=lambda s: s.id)


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    def test_missing_connection_raises(self):
        with pytest.raises(ValueError, match="connection is required"):
            StudentGateway(None)

    def test_table_name(self, conn):
        assert StudentGateway(conn).table_name == "students"

    def test_does_not_close_connection(self, gateway, conn, ann):
        gateway.save(ann)
        gateway.find_all()
        # La connexion de l'appelant reste utilisable
        assert conn.execute("SELECT 1").fetchone() == (1,)


# =============================================================================
# Schéma
# =============================================================================


class TestSchema:
    def test_create_table(self, conn):
        assert StudentGateway(conn).create_table()
        assert _count(conn) == 0

    def test_create_existing_table_fails(self, gateway):
        assert not gateway.create_table()

    def test_create_existing_table_reports_error(self, gateway):
        result = gateway.create_schema()
        assert isinstance(result, DatabaseError)
        assert "CREATE" in result.statement

    def test_drop_table(self, gateway):
        assert gateway.drop_table()
        assert gateway.create_table()

    def test_drop_missing_table_fails(self, conn):
        assert not StudentGateway(conn).drop_table()

    def test_schema_change_logged(self, conn, caplog):
        with caplog.at_level(logging.INFO, logger="roster"):
            StudentGateway(conn).create_table()
        assert "Created table: students" in caplog.text


# =============================================================================
# Lecture
# =============================================================================


class TestFindByPrimaryKey:
    def test_round_trip(self, gateway, ann, bo):
        assert gateway.save(ann)
        assert gateway.save(bo)
        assert gateway.find_by_primary_key(1) == ann
        assert gateway.find_by_primary_key(2) == bo

    def test_absent_birthday_round_trips_as_none(self, gateway, ann):
        gateway.save(ann)
        found = gateway.find_by_primary_key(1)
        assert found is not None
        assert found.birthday is None

    def test_null_names_round_trip(self, gateway):
        anonymous = Student(id=7)
        assert gateway.save(anonymous)
        assert gateway.find_by_primary_key(7) == anonymous

    def test_not_found(self, gateway):
        assert gateway.find_by_primary_key(42) is None

    def test_missing_table_returns_none(self, conn):
        assert StudentGateway(conn).find_by_primary_key(1) is None

    def test_lookup_distinguishes_not_found_from_error(self, gateway, conn, ann):
        gateway.save(ann)
        assert gateway.lookup(1) == Success(ann)
        assert isinstance(gateway.lookup(42), NotFound)
        gateway.drop_table()
        assert isinstance(gateway.lookup(1), DatabaseError)


class TestFindAll:
    def test_empty_table(self, gateway):
        assert gateway.find_all() == []

    def test_returns_every_row(self, gateway, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        assert _by_id(gateway.find_all()) == [ann, bo]

    def test_idempotent_read(self, gateway, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        assert _by_id(gateway.find_all()) == _by_id(gateway.find_all())

    def test_missing_table_returns_empty(self, conn):
        assert StudentGateway(conn).find_all() == []

    def test_list_all_reports_error(self, conn):
        result = StudentGateway(conn).list_all()
        assert isinstance(result, DatabaseError)
        assert not result.ok

    def test_same_mapping_as_find_by_primary_key(self, gateway, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        for student in gateway.find_all():
            assert gateway.find_by_primary_key(student.id) == student


class TestFindByBirthday:
    def test_matches_only_that_date(self, gateway, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        gateway.save(Student(id=3, first_name="Cy", birthday=date(2019, 5, 4)))
        assert gateway.find_by_birthday(date(2020, 1, 1)) == [bo]

    def test_accepts_datetime(self, gateway, bo):
        gateway.save(bo)
        assert gateway.find_by_birthday(datetime(2020, 1, 1, 15, 30)) == [bo]

    def test_no_match(self, gateway, ann):
        gateway.save(ann)
        assert gateway.find_by_birthday(date(2020, 1, 1)) == []

    def test_missing_table_returns_empty(self, conn):
        assert StudentGateway(conn).find_by_birthday(date(2020, 1, 1)) == []


# =============================================================================
# Écriture
# =============================================================================


class TestSave:
    def test_save(self, gateway, conn, ann):
        assert gateway.save(ann)
        assert _count(conn) == 1

    def test_insert_reports_affected_rows(self, gateway, ann):
        assert gateway.insert(ann) == Success(1)

    def test_duplicate_key_fails(self, gateway, ann):
        gateway.save(ann)
        assert not gateway.save(Student(id=1, first_name="Other", last_name="Name"))
        assert gateway.find_by_primary_key(1) == ann

    def test_duplicate_key_logged(self, gateway, ann, caplog):
        gateway.save(ann)
        with caplog.at_level(logging.WARNING, logger="roster"):
            gateway.save(ann)
        assert "INSERT on students failed" in caplog.text

    def test_missing_table_fails(self, conn, ann):
        assert not StudentGateway(conn).save(ann)


class TestUpdate:
    def test_update_existing(self, gateway, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        renamed = Student(
            id=1, first_name="Anne", last_name="Leigh", birthday=date(2001, 2, 3)
        )
        assert gateway.update(renamed)
        assert gateway.find_by_primary_key(1) == renamed
        assert gateway.find_by_primary_key(2) == bo

    def test_update_can_clear_birthday(self, gateway, bo):
        gateway.save(bo)
        cleared = bo.model_copy(update={"birthday": None})
        assert gateway.update(cleared)
        assert gateway.find_by_primary_key(2).birthday is None

    def test_update_missing_id(self, gateway, ann):
        gateway.save(ann)
        assert not gateway.update(Student(id=99, first_name="Ghost"))
        assert gateway.find_all() == [ann]

    def test_modify_distinguishes_not_found(self, gateway, ann):
        assert isinstance(gateway.modify(ann), NotFound)
        gateway.save(ann)
        assert gateway.modify(ann) == Success(1)

    def test_missing_table_fails(self, conn, ann):
        assert not StudentGateway(conn).update(ann)
        assert isinstance(StudentGateway(conn).modify(ann), DatabaseError)


class TestDelete:
    def test_delete_existing(self, gateway, conn, ann, bo):
        gateway.save(ann)
        gateway.save(bo)
        assert gateway.delete(1)
        assert _count(conn) == 1
        assert gateway.find_by_primary_key(1) is None

    def test_delete_missing_id(self, gateway, conn, ann):
        gateway.save(ann)
        assert not gateway.delete(99)
        assert _count(conn) == 1

    def test_remove_distinguishes_not_found(self, gateway, ann):
        gateway.save(ann)
        assert gateway.remove(1) == Success(1)
        assert isinstance(gateway.remove(1), NotFound)

    def test_missing_table_fails(self, conn):
        assert not StudentGateway(conn).delete(1)


# =============================================================================
# Scénario complet
# =============================================================================


def test_full_scenario(conn):
    students = StudentGateway(conn)
    ann = Student(id=1, first_name="Ann", last_name="Lee")
    bo = Student(id=2, first_name="Bo", last_name="Tan", birthday=date(2020, 1, 1))

    assert students.create_table()
    assert students.save(ann)
    assert students.find_by_birthday(date(2020, 1, 1)) == []
    assert students.save(bo)
    assert students.find_by_birthday(date(2020, 1, 1)) == [bo]
    assert students.delete(1)
    assert students.find_all() == [bo]
    assert students.drop_table()
    assert students.create_table()
    assert students.find_all() == []
