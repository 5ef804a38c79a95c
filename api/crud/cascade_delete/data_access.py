"""
    Accès aux données pour la suppression en cascade

    Opérations élémentaires (lecture, comptage, suppressions) exécutées
    sur la session fournie, dans la transaction courante.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import MetaData, Table, delete, func, inspect, select
from sqlalchemy.orm import Session

from db.base import metadata as default_metadata


class SqlAlchemyDataAccess:
    """Accès aux données fondé sur une session SQLAlchemy"""

    def __init__(self, db: Session, metadata: MetaData = default_metadata):
        self.db = db
        self.metadata = metadata

    @contextmanager
    def transaction(self) -> Iterator["SqlAlchemyDataAccess"]:
        """
        Unité atomique : validée si le bloc se termine normalement,
        annulée si une exception le traverse.
        """

        try:
            yield self
            self.db.commit()

        except Exception:
            self.db.rollback()
            raise

    def table(self, table_name: str) -> Table:
        return self.metadata.tables[table_name]

    def find_one(self, model, item_id: int):
        """ Lecture ponctuelle par clé primaire """
        pk = inspect(model).primary_key[0]
        return self.db.query(model).filter(pk == item_id).first()

    def count(self, table_name: str, foreign_key: str, item_id: int) -> int:
        """ Nombre de lignes de table_name dont foreign_key vaut item_id """
        table = self.table(table_name)
        query = select(func.count()).select_from(table).where(table.c[foreign_key] == item_id)
        return self.db.execute(query).scalar_one()

    def delete_where(self, table_name: str, foreign_key: str, item_id: int) -> int:
        """ Supprime les lignes de table_name dont foreign_key vaut item_id """
        table = self.table(table_name)
        result = self.db.execute(delete(table).where(table.c[foreign_key] == item_id))
        return result.rowcount

    def delete_by_id(self, model, item_id: int) -> int:
        """ Supprime la ligne cible par clé primaire """
        pk = inspect(model).primary_key[0]
        return self.db.query(model).filter(pk == item_id).delete(synchronize_session=False)
