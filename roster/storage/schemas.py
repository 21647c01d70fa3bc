"""Database schema definitions for DuckDB.

Une seule table, volontairement sans IF NOT EXISTS : créer une table
déjà présente (ou supprimer une table absente) doit échouer, et cet
échec est rapporté par le gateway.
"""

from roster.core.constants import NAME_MAX_LENGTH

STUDENTS_TABLE = "students"

# Colonnes dans l'ordre attendu par row_to_student()
STUDENT_COLUMNS = ("id", "firstName", "lastName", "birthday")

TABLES = {
    STUDENTS_TABLE: f"""
        CREATE TABLE {STUDENTS_TABLE} (
            id INTEGER PRIMARY KEY NOT NULL,
            -- DuckDB n'applique pas la longueur de VARCHAR(n)
            firstName VARCHAR({NAME_MAX_LENGTH})
                CHECK (length(firstName) <= {NAME_MAX_LENGTH}),
            lastName VARCHAR({NAME_MAX_LENGTH})
                CHECK (length(lastName) <= {NAME_MAX_LENGTH}),
            birthday DATE
        )
    """,
}
