"""
    État du serveur et de la base de données
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.base import metadata
from db.session import get_db

logger = logging.getLogger(__name__)

health_router = APIRouter(
    prefix="/health",
    tags=["Health Check"]
)

@health_router.get("/")
def liveness():
    return {"status": "healthy"}

@health_router.get("/db")
def database_status(db: Session = Depends(get_db)):
    """
    Vérifie la connexion et la présence du schéma

    Les tables déclarées mais absentes de la base sont listées dans
    missing_tables : une suppression qui les vise échouerait.
    """
    try:
        db.execute(text("SELECT 1"))
        existing = set(inspect(db.get_bind()).get_table_names())

    except SQLAlchemyError as e:
        logger.exception("Base de données inaccessible")
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "error": str(getattr(e, "orig", None) or e)},
        )

    missing = sorted(set(metadata.tables) - existing)
    return {
        "status": "degraded" if missing else "ok",
        "dialect": db.get_bind().dialect.name,
        "missing_tables": missing,
    }
