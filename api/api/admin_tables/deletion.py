"""
    Endpoints de suppression

    Pour chaque entité :
    - GET    /{id}/deletion-check : vérification préalable
    - DELETE /{id}                : suppression avec cascade
"""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from crud.cascade_delete import (
    CascadeDeleteValidator,
    DeleteOutcome,
    DeleteOutcomeKind,
    DeletionCheck,
    EntityKind,
)
from .services import get_cascade_validator, check_deletion

logger = logging.getLogger(__name__)

# ============================================================================
# Modèles Pydantic
# ============================================================================

class DeleteResponse(BaseModel):
    """Réponse de suppression, message repris tel quel par l'interface"""
    success: bool
    kind: DeleteOutcomeKind
    message: str

    @classmethod
    def from_outcome(cls, outcome: DeleteOutcome):
        return cls(success=outcome.success, kind=outcome.kind, message=outcome.message)

# Code HTTP par issue
OUTCOME_STATUS_CODES = {
    DeleteOutcomeKind.DELETED: 200,
    DeleteOutcomeKind.NOT_FOUND: 404,
    DeleteOutcomeKind.BLOCKED: 409,
    DeleteOutcomeKind.STORAGE_FAILURE: 500,
}

# ============================================================================
# Fabrique de routeurs
# ============================================================================

def build_deletion_router(
    prefix: str,
    tag: str,
    entity: EntityKind,
    delete_service: Callable[[CascadeDeleteValidator, int], DeleteOutcome],
) -> APIRouter:
    """
    Crée le routeur de suppression d'une entité

    Args:
        prefix: préfixe des routes (ex: /admin/grades)
        tag: tag OpenAPI
        entity: entité concernée
        delete_service: service de suppression de l'entité

    Returns:
        APIRouter: routeur prêt à être inclus dans l'application
    """

    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("/{item_id}/deletion-check", response_model=DeletionCheck)
    def check_deletion_safety(
        item_id: int,
        validator: CascadeDeleteValidator = Depends(get_cascade_validator)
    ):
        try:
            result = check_deletion(validator, entity, item_id)

            if not result.exists:
                raise HTTPException(status_code=404, detail=result.message)

            return result

        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Erreur lors de la vérification de %s %s", entity.value, item_id)
            raise HTTPException(
                status_code=500,
                detail=f"Erreur lors de la vérification de la suppression: {str(e)}"
            )

    @router.delete("/{item_id}", response_model=DeleteResponse)
    def delete_item(
        item_id: int,
        validator: CascadeDeleteValidator = Depends(get_cascade_validator)
    ):
        outcome = delete_service(validator, item_id)
        response = DeleteResponse.from_outcome(outcome)

        return JSONResponse(
            status_code=OUTCOME_STATUS_CODES[outcome.kind],
            content=response.model_dump(mode="json"),
        )

    return router
