"""Gateway de la table students.

Chaque opération émet une seule requête paramétrée. Les méthodes
simples (bool / Student | None / liste) ne lèvent jamais d'exception
de base de données ; les variantes vérifiées (lookup, list_all, ...)
distinguent succès, absence et erreur du driver.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from roster.core.models import Student
from roster.core.utils import to_sql_date
from roster.storage.repositories.base import Table
from roster.storage.results import DatabaseError, NotFound, Result, Success
from roster.storage.schemas import STUDENT_COLUMNS, STUDENTS_TABLE, TABLES

logger = logging.getLogger(__name__)

_SELECT = f"SELECT {', '.join(STUDENT_COLUMNS)} FROM {STUDENTS_TABLE}"


def row_to_student(row: tuple) -> Student:
    """Convertit une ligne SQL en Student.

    Format attendu du SELECT :
        0: id, 1: firstName, 2: lastName, 3: birthday

    Un birthday NULL donne None.
    """
    student_id, first_name, last_name, birthday = row
    return Student(
        id=student_id,
        first_name=first_name,
        last_name=last_name,
        birthday=birthday,
    )


class StudentGateway(Table[Student, int]):
    """Gateway pour la table students.

    Usage:
        with managed_connection(":memory:") as conn:
            students = StudentGateway(conn)
            students.create_table()
            students.save(Student(id=1, first_name="Ann", last_name="Lee"))
            students.find_by_primary_key(1)
    """

    @property
    def table_name(self) -> str:
        return STUDENTS_TABLE

    @property
    def create_statement(self) -> str:
        return TABLES[STUDENTS_TABLE]

    def _row_to_entity(self, row: tuple) -> Student:
        return row_to_student(row)

    # -------------------------------------------------------------------------
    # Variantes vérifiées
    # -------------------------------------------------------------------------

    def lookup(self, student_id: int) -> Result[Student]:
        """Récupère un élève par sa clé primaire."""
        result = self._query(f"{_SELECT} WHERE id = ?", [student_id])
        if not result.ok:
            return result
        if not result.value:
            return NotFound()
        return Success(result.value[0])

    def list_all(self) -> Success[list[Student]] | DatabaseError:
        return self._query(_SELECT)

    def list_by_birthday(
        self, birthday: date | datetime
    ) -> Success[list[Student]] | DatabaseError:
        return self._query(f"{_SELECT} WHERE birthday = ?", [to_sql_date(birthday)])

    def insert(self, student: Student) -> Success[int] | DatabaseError:
        """Insère un élève.

        Returns:
            Success avec le nombre de lignes insérées, ou DatabaseError
            (ex: clé primaire déjà présente).
        """
        return self._execute_write(
            f"INSERT INTO {STUDENTS_TABLE} (id, firstName, lastName, birthday) "
            "VALUES (?, ?, ?, ?)",
            [student.id, student.first_name, student.last_name, student.birthday],
        )

    def modify(self, student: Student) -> Result[int]:
        """Met à jour les colonnes non-clé d'un élève existant."""
        result = self._execute_write(
            f"UPDATE {STUDENTS_TABLE} SET firstName = ?, lastName = ?, birthday = ? "
            "WHERE id = ?",
            [student.first_name, student.last_name, student.birthday, student.id],
        )
        return _require_rows(result)

    def remove(self, student_id: int) -> Result[int]:
        result = self._execute_write(
            f"DELETE FROM {STUDENTS_TABLE} WHERE id = ?", [student_id]
        )
        return _require_rows(result)

    # -------------------------------------------------------------------------
    # Opérations simples
    # -------------------------------------------------------------------------

    def find_by_primary_key(self, student_id: int) -> Student | None:
        """Récupère un élève par ID.

        Returns:
            Student, ou None si absent ou en cas d'erreur (non distingués).
        """
        return self.lookup(student_id).value_or(None)

    def find_all(self) -> list[Student]:
        """Liste tous les élèves ([] en cas d'erreur)."""
        return self.list_all().value_or([])

    def find_by_birthday(self, birthday: date | datetime) -> list[Student]:
        """Liste les élèves nés à cette date ([] en cas d'erreur)."""
        return self.list_by_birthday(birthday).value_or([])

    def save(self, student: Student) -> bool:
        """Insère un élève.

        Le nombre de lignes affectées n'est pas vérifié : True dès que
        la requête s'exécute sans erreur.
        """
        return self.insert(student).ok

    def update(self, student: Student) -> bool:
        """True si au moins une ligne a été mise à jour."""
        return self.modify(student).ok

    def delete(self, student_id: int) -> bool:
        """True si au moins une ligne a été supprimée."""
        return self.remove(student_id).ok


def _require_rows(
    result: Success[int] | DatabaseError,
) -> Result[int]:
    if result.ok and result.value == 0:
        return NotFound()
    return result
