"""
    Services de suppression des tables d'administration

    Chaque service construit la requête de suppression de son entité et
    retourne l'issue sans la modifier.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from db.session import get_db
from crud.cascade_delete import (
    CascadeDeleteValidator,
    DeleteOutcome,
    DeleteRequest,
    DeletionCheck,
    EntityKind,
    EntityRegistry,
    SqlAlchemyDataAccess,
    build_school_registry,
)

@lru_cache
def get_registry() -> EntityRegistry:
    """ Registre des entités, construit une seule fois """
    return build_school_registry()

def get_cascade_validator(
    db: Session = Depends(get_db),
    registry: EntityRegistry = Depends(get_registry),
) -> CascadeDeleteValidator:
    """ Validateur lié à la session de la requête """
    return CascadeDeleteValidator(SqlAlchemyDataAccess(db), registry)

# ============================================================================
# Suppressions par entité
# ============================================================================

def delete_grade(validator: CascadeDeleteValidator, grade_id: int) -> DeleteOutcome:
    """Supprime un niveau, ses salles et ses filières"""
    return validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=grade_id))

def delete_class_room(validator: CascadeDeleteValidator, class_room_id: int) -> DeleteOutcome:
    return validator.delete(DeleteRequest(entity=EntityKind.CLASS_ROOM, id=class_room_id))

def delete_branch(validator: CascadeDeleteValidator, branch_id: int) -> DeleteOutcome:
    """Supprime une filière et ses salles"""
    return validator.delete(DeleteRequest(entity=EntityKind.BRANCH, id=branch_id))

def delete_student(validator: CascadeDeleteValidator, student_id: int) -> DeleteOutcome:
    """Supprime un étudiant, ses absences et ses bourses"""
    return validator.delete(DeleteRequest(entity=EntityKind.STUDENT, id=student_id))

def delete_professor(validator: CascadeDeleteValidator, professor_id: int) -> DeleteOutcome:
    return validator.delete(DeleteRequest(entity=EntityKind.PROFESSOR, id=professor_id))

def delete_teaching(validator: CascadeDeleteValidator, teaching_id: int) -> DeleteOutcome:
    """Supprime une affectation et ses niveaux d'enseignement"""
    return validator.delete(DeleteRequest(entity=EntityKind.TEACHING, id=teaching_id))

def delete_course(validator: CascadeDeleteValidator, course_id: int) -> DeleteOutcome:
    """Supprime une matière et ses coefficients"""
    return validator.delete(DeleteRequest(entity=EntityKind.COURSE, id=course_id))

def check_deletion(validator: CascadeDeleteValidator, entity: EntityKind, item_id: int) -> DeletionCheck:
    """Vérification préalable, sans écriture"""
    return validator.check(DeleteRequest(entity=entity, id=item_id))
