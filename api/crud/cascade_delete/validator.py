"""
    Validateur de suppression en cascade

    Supprime une ligne après avoir examiné ses relations dépendantes :
    les relations en cascade sont supprimées avec elle, les autres
    bloquent la suppression dès qu'une ligne dépendante existe.
"""

import logging
from typing import Dict, Iterable, Optional, Tuple

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from .base import DeleteRequest, DeleteOutcomeKind, RelationRule
from .data_access import SqlAlchemyDataAccess
from .outcome import DeleteOutcome, DeletionCheck, RelationCount
from .registry import EntityRegistry
from .utils import get_table_display_name, not_found_message, blocked_message

logger = logging.getLogger(__name__)


class DeletionAborted(Exception):
    """Interrompt la transaction en cours en portant l'issue à retourner"""

    def __init__(self, outcome: DeleteOutcome):
        super().__init__(outcome.kind.value)
        self.outcome = outcome


class CascadeDeleteValidator:
    """Suppression d'une ligne et de ses dépendances en une seule transaction"""

    def __init__(self, data_access: SqlAlchemyDataAccess, registry: EntityRegistry):
        self.data_access = data_access
        self.registry = registry

    def _resolve(self, request: DeleteRequest, rules: Optional[Iterable[RelationRule]]):
        model = self.registry.model_for(request.entity)

        if rules is None:
            return model, self.registry.rules_for(request.entity)

        return model, self.registry.validate_rules(rules)

    def delete(self, request: DeleteRequest, rules: Optional[Iterable[RelationRule]] = None) -> DeleteOutcome:
        """
        Supprime la ligne ciblée

        1. Lecture de la cible : absente -> NOT_FOUND, rien d'autre n'est exécuté
        2. Comptage des relations bloquantes, dans l'ordre des règles :
           la première relation avec des lignes dépendantes -> BLOCKED
        3. Suppression des relations en cascade, dans l'ordre des règles
        4. Suppression de la cible et validation -> DELETED

        Toute erreur de stockage annule la transaction -> STORAGE_FAILURE.
        Une règle invalide lève InvalidRelationRule avant toute requête.

        Args:
            request: entité et identifiant ciblés
            rules: relations à examiner (par défaut celles du registre)

        Returns:
            DeleteOutcome: issue de la suppression
        """

        model, rules = self._resolve(request, rules)

        try:
            with self.data_access.transaction() as dao:
                cascaded = self._delete_in_transaction(dao, model, request, rules)

        except DeletionAborted as aborted:
            return aborted.outcome

        except SQLAlchemyError as e:
            logger.exception("Erreur lors de la suppression de %s %s", request.entity.value, request.id)
            return DeleteOutcome(
                kind=DeleteOutcomeKind.STORAGE_FAILURE,
                entity=request.entity,
                id=request.id,
                cause=str(e.orig) if isinstance(e, DBAPIError) else str(e),
            )

        logger.info(
            "%s %s supprimé (cascade: %s)", request.entity.value, request.id, cascaded or "aucune"
        )
        return DeleteOutcome(
            kind=DeleteOutcomeKind.DELETED,
            entity=request.entity,
            id=request.id,
            cascaded=cascaded,
        )

    def _delete_in_transaction(
        self,
        dao: SqlAlchemyDataAccess,
        model,
        request: DeleteRequest,
        rules: Tuple[RelationRule, ...],
    ) -> Dict[str, int]:
        if dao.find_one(model, request.id) is None:
            logger.info("%s %s introuvable", request.entity.value, request.id)
            raise DeletionAborted(DeleteOutcome(
                kind=DeleteOutcomeKind.NOT_FOUND,
                entity=request.entity,
                id=request.id,
            ))

        for rule in rules:
            if rule.cascade:
                continue

            count = dao.count(rule.dependent_table, rule.foreign_key, request.id)
            logger.debug("%s.%s = %s : %s ligne(s)", rule.dependent_table, rule.foreign_key, request.id, count)

            if count > 0:
                display_name = get_table_display_name(rule.dependent_table)
                logger.warning(
                    "Suppression de %s %s bloquée par %s (%s)",
                    request.entity.value, request.id, rule.dependent_table, count,
                )
                raise DeletionAborted(DeleteOutcome(
                    kind=DeleteOutcomeKind.BLOCKED,
                    entity=request.entity,
                    id=request.id,
                    table=rule.dependent_table,
                    display_name=display_name,
                    count=count,
                ))

        cascaded = {}
        for rule in rules:
            if not rule.cascade:
                continue

            deleted = dao.delete_where(rule.dependent_table, rule.foreign_key, request.id)
            logger.debug("%s.%s = %s : %s ligne(s) supprimée(s)", rule.dependent_table, rule.foreign_key, request.id, deleted)
            if deleted:
                cascaded[rule.dependent_table] = cascaded.get(rule.dependent_table, 0) + deleted

        if not dao.delete_by_id(model, request.id):
            # ligne disparue entre la lecture et la suppression
            logger.info("%s %s introuvable à la suppression", request.entity.value, request.id)
            raise DeletionAborted(DeleteOutcome(
                kind=DeleteOutcomeKind.NOT_FOUND,
                entity=request.entity,
                id=request.id,
            ))

        return cascaded

    def check(self, request: DeleteRequest, rules: Optional[Iterable[RelationRule]] = None) -> DeletionCheck:
        """
        Vérifie si la ligne ciblée peut être supprimée, sans rien écrire

        Args:
            request: entité et identifiant ciblés
            rules: relations à examiner (par défaut celles du registre)

        Returns:
            DeletionCheck: relations bloquantes et volumes de la cascade
        """

        model, rules = self._resolve(request, rules)
        entity_name = request.entity.value

        if self.data_access.find_one(model, request.id) is None:
            return DeletionCheck(
                entity=request.entity,
                id=request.id,
                exists=False,
                is_deletable=False,
                message=not_found_message(entity_name),
            )

        blocking = []
        cascading = []

        for rule in rules:
            relation = RelationCount(
                table=rule.dependent_table,
                foreign_key=rule.foreign_key,
                display_name=get_table_display_name(rule.dependent_table),
                cascade=rule.cascade,
                count=self.data_access.count(rule.dependent_table, rule.foreign_key, request.id),
            )

            if rule.cascade:
                cascading.append(relation)
            elif relation.count > 0:
                blocking.append(relation)

        if blocking:
            message = blocked_message(blocking[0].count, blocking[0].display_name)
        else:
            message = f"{entity_name} peut être supprimé"

        return DeletionCheck(
            entity=request.entity,
            id=request.id,
            exists=True,
            is_deletable=not blocking,
            message=message,
            blocking=blocking,
            cascading=cascading,
        )
