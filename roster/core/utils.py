"""Utilitaires partagés."""

from datetime import date, datetime


def to_sql_date(value: date | datetime | None) -> date | None:
    """Convertit une date Python en valeur bindable dans une colonne DATE.

    Un datetime est tronqué à sa date (l'heure est ignorée), une date
    est retournée telle quelle.

    Args:
        value: Date, datetime, ou None.

    Returns:
        Date sans composante horaire, ou None si l'entrée est None.

    Raises:
        TypeError: Si la valeur n'est ni une date ni un datetime.
    """
    if value is None:
        return None
    # datetime hérite de date : tester datetime en premier
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")
