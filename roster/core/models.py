"""Schemas Pydantic pour Roster."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.core.constants import NAME_MAX_LENGTH
from roster.core.utils import to_sql_date


class Student(BaseModel):
    """Un élève, tel que stocké dans la table students.

    L'id est fourni par l'appelant (jamais généré par le gateway).
    Les noms et l'anniversaire sont optionnels ; un anniversaire absent
    vaut None, jamais une date sentinelle.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    first_name: str | None = Field(
        default=None, alias="firstName", max_length=NAME_MAX_LENGTH
    )
    last_name: str | None = Field(
        default=None, alias="lastName", max_length=NAME_MAX_LENGTH
    )
    birthday: date | None = None

    @field_validator("birthday", mode="before")
    @classmethod
    def _truncate_datetime(cls, value):
        # Un datetime porte une heure que la colonne DATE ne stocke pas
        if isinstance(value, date):
            return to_sql_date(value)
        return value
