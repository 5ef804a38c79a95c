"""
    Paquet des routeurs API

    Ce paquet regroupe les routeurs FastAPI de l'application.
"""

from .health import health_router
from .admin_tables import (
    grades_router,
    class_rooms_router,
    branches_router,
    students_router,
    professors_router,
    teachings_router,
    courses_router,
)

__all__ = [
    "health_router",
    "grades_router",
    "class_rooms_router",
    "branches_router",
    "students_router",
    "professors_router",
    "teachings_router",
    "courses_router",
]
