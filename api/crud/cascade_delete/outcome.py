"""
    Résultats de la suppression en cascade
"""

from typing import Dict, List, Optional
from pydantic import BaseModel

from .base import EntityKind, DeleteOutcomeKind
from .utils import render_message

class DeleteOutcome(BaseModel):
    """Issue d'une suppression, transmise telle quelle à l'appelant"""
    kind: DeleteOutcomeKind
    entity: EntityKind
    id: int

    # BLOCKED : relation bloquante
    table: Optional[str] = None
    display_name: Optional[str] = None
    count: Optional[int] = None

    # DELETED : lignes supprimées par relation en cascade
    cascaded: Dict[str, int] = {}

    # STORAGE_FAILURE : texte brut de l'erreur
    cause: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.kind == DeleteOutcomeKind.DELETED

    @property
    def message(self) -> str:
        return render_message(self)

class RelationCount(BaseModel):
    """Nombre de lignes dépendantes pour une relation"""
    table: str
    foreign_key: str
    display_name: str
    cascade: bool
    count: int

class DeletionCheck(BaseModel):
    """Résultat de la vérification préalable (aucune écriture)"""
    entity: EntityKind
    id: int
    exists: bool
    is_deletable: bool
    message: str
    blocking: List[RelationCount] = []
    cascading: List[RelationCount] = []
