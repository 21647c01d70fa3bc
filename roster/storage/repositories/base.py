"""Base table gateway for DuckDB.

Architecture:
    Table[V, K] (ABC) - Contrat commun + exécution des requêtes factorisée
        └── StudentGateway

La connexion est injectée et appartient à l'appelant : le gateway ne
l'ouvre ni ne la ferme. Chaque requête s'exécute directement sur cette
connexion (donc dans la transaction de l'appelant) et son résultat est
entièrement consommé avant de rendre la main.
"""

import logging
from abc import ABC, abstractmethod

import duckdb
from pydantic import ValidationError

from roster.storage.results import DatabaseError, Success

logger = logging.getLogger(__name__)


class Table[V, K](ABC):
    """Gateway between entities of type V and the rows of one table, keyed by K.

    Les sous-classes doivent implémenter :
    - table_name / create_statement (properties)
    - _row_to_entity() pour la conversion
    - les opérations CRUD (find_by_primary_key, find_all, save, update, delete)

    Les opérations de schéma (create_table, drop_table) sont communes.
    """

    def __init__(self, connection: duckdb.DuckDBPyConnection) -> None:
        """Initialise le gateway.

        Args:
            connection: Connexion DuckDB ouverte, gérée par l'appelant.

        Raises:
            ValueError: Si la connexion est absente.
        """
        if connection is None:
            raise ValueError("connection is required")
        self.connection = connection

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Nom de la table SQL."""
        ...

    @property
    @abstractmethod
    def create_statement(self) -> str:
        """DDL de création de la table."""
        ...

    @abstractmethod
    def _row_to_entity(self, row: tuple) -> V:
        """Convertit une ligne SQL en entité."""
        ...

    @abstractmethod
    def find_by_primary_key(self, key: K) -> V | None: ...

    @abstractmethod
    def find_all(self) -> list[V]: ...

    @abstractmethod
    def save(self, entity: V) -> bool: ...

    @abstractmethod
    def update(self, entity: V) -> bool: ...

    @abstractmethod
    def delete(self, key: K) -> bool: ...

    # -------------------------------------------------------------------------
    # Schéma
    # -------------------------------------------------------------------------

    def create_schema(self) -> Success[None] | DatabaseError:
        """Crée la table. Échoue si elle existe déjà."""
        result = self._execute_ddl(self.create_statement)
        if result.ok:
            logger.info(f"Created table: {self.table_name}")
        return result

    def drop_schema(self) -> Success[None] | DatabaseError:
        """Supprime la table. Échoue si elle n'existe pas."""
        result = self._execute_ddl(f"DROP TABLE {self.table_name}")
        if result.ok:
            logger.info(f"Dropped table: {self.table_name}")
        return result

    def create_table(self) -> bool:
        """Crée la table.

        Returns:
            True si créée, False sur toute erreur (ex: table déjà existante).
        """
        return self.create_schema().ok

    def drop_table(self) -> bool:
        """Supprime la table.

        Returns:
            True si supprimée, False sur toute erreur (ex: table absente).
        """
        return self.drop_schema().ok

    # -------------------------------------------------------------------------
    # Exécution
    # -------------------------------------------------------------------------

    def _failure(self, sql: str, error: Exception) -> DatabaseError:
        statement = " ".join(sql.split())
        kind = statement.split(" ", 1)[0]
        logger.warning(f"{kind} on {self.table_name} failed: {error}")
        return DatabaseError(cause=error, statement=statement)

    def _execute_ddl(self, sql: str) -> Success[None] | DatabaseError:
        """Exécute une requête de schéma (CREATE, DROP)."""
        try:
            self.connection.execute(sql)
        except duckdb.Error as e:
            return self._failure(sql, e)
        return Success(None)

    def _query(
        self, sql: str, params: list | None = None
    ) -> Success[list[V]] | DatabaseError:
        """Exécute un SELECT et convertit chaque ligne en entité.

        Une ligne non convertible (ex: écrite hors du gateway, en
        contournant les contraintes) fait échouer la lecture entière.

        Args:
            sql: Requête SQL.
            params: Paramètres optionnels.

        Returns:
            Success avec la liste des entités, ou DatabaseError.
        """
        try:
            if params:
                rows = self.connection.execute(sql, params).fetchall()
            else:
                rows = self.connection.execute(sql).fetchall()
            entities = [self._row_to_entity(row) for row in rows]
        except (duckdb.Error, ValidationError) as e:
            return self._failure(sql, e)
        logger.debug(f"{len(entities)} row(s) read from {self.table_name}")
        return Success(entities)

    def _execute_write(self, sql: str, params: list) -> Success[int] | DatabaseError:
        """Exécute du SQL d'écriture (INSERT, UPDATE, DELETE).

        Args:
            sql: Requête SQL.
            params: Paramètres liés aux placeholders.

        Returns:
            Success avec le nombre de lignes affectées, ou DatabaseError.
        """
        try:
            # DuckDB renvoie le nombre de lignes affectées comme résultat
            count = self.connection.execute(sql, params).fetchone()
        except duckdb.Error as e:
            return self._failure(sql, e)
        affected = count[0] if count else 0
        logger.debug(f"{affected} row(s) written to {self.table_name}")
        return Success(affected)
