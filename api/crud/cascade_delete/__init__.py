"""
    Suppression en cascade

    Ce module supprime une ligne en tenant compte de ses relations
    dépendantes : suppression en cascade ou blocage, dans une seule
    transaction, avec un résultat typé pour l'appelant.
"""

from .base import (
    CascadeDeleteError,
    UnknownEntity,
    InvalidRelationRule,
    EntityKind,
    DeleteOutcomeKind,
    RelationRule,
    DeleteRequest,
)
from .outcome import DeleteOutcome, DeletionCheck, RelationCount
from .utils import get_table_display_name, render_message
from .data_access import SqlAlchemyDataAccess
from .registry import EntityRegistry, build_school_registry, cascade, restrict
from .validator import CascadeDeleteValidator

__all__ = [
    "CascadeDeleteError",
    "UnknownEntity",
    "InvalidRelationRule",
    "EntityKind",
    "DeleteOutcomeKind",
    "RelationRule",
    "DeleteRequest",
    "DeleteOutcome",
    "DeletionCheck",
    "RelationCount",
    "get_table_display_name",
    "render_message",
    "SqlAlchemyDataAccess",
    "EntityRegistry",
    "build_school_registry",
    "cascade",
    "restrict",
    "CascadeDeleteValidator",
]
