"""
    Paquet des API de tables d'administration

    Ce paquet regroupe les routes de suppression des entités scolaires.
"""

from .routers import (
    grades_router,
    class_rooms_router,
    branches_router,
    students_router,
    professors_router,
    teachings_router,
    courses_router,
)

__all__ = [
    "grades_router",
    "class_rooms_router",
    "branches_router",
    "students_router",
    "professors_router",
    "teachings_router",
    "courses_router",
]
