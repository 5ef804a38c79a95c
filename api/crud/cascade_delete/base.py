"""
    Base commune de la suppression en cascade

    Ce module définit les types partagés : entités connues, règles de
    relation, requête de suppression et erreurs de configuration.
"""

from enum import Enum
from pydantic import BaseModel, validator

# ============================================================================
# Erreurs
# ============================================================================

class CascadeDeleteError(ValueError):
    """Erreur de configuration de la suppression en cascade"""

class UnknownEntity(CascadeDeleteError):
    """Entité absente du registre"""

class InvalidRelationRule(CascadeDeleteError):
    """Règle de relation qui ne correspond à aucune table ou colonne"""

# ============================================================================
# Modèles communs
# ============================================================================

class EntityKind(str, Enum):
    """Entités supprimables"""
    GRADE = "Grade"
    CLASS_ROOM = "ClassRoom"
    BRANCH = "Branch"
    STUDENT = "Student"
    PROFESSOR = "Professor"
    COURSE = "Course"
    TEACHING = "Teaching"

class DeleteOutcomeKind(str, Enum):
    """Issue d'une suppression"""
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    BLOCKED = "blocked"
    STORAGE_FAILURE = "storage_failure"

class RelationRule(BaseModel):
    """
    Relation dépendante à vérifier avant la suppression

    cascade=True : les lignes dépendantes sont supprimées avec la cible.
    cascade=False : la moindre ligne dépendante bloque la suppression.
    """
    dependent_table: str
    foreign_key: str
    cascade: bool = False

    class Config:
        frozen = True

    @validator('dependent_table', 'foreign_key')
    def validate_identifier(cls, v):
        if not v or not v.strip():
            raise ValueError('Le nom de table ou de colonne ne peut pas être vide.')
        return v.strip()

class DeleteRequest(BaseModel):
    """Ligne ciblée par une suppression"""
    entity: EntityKind
    id: int
