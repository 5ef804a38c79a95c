"""
    Application principale de l'API de gestion scolaire

    Point d'entrée FastAPI : configuration de la journalisation, du CORS
    et enregistrement des routeurs.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import (
    health_router,
    grades_router,
    class_rooms_router,
    branches_router,
    students_router,
    professors_router,
    teachings_router,
    courses_router,
)

load_dotenv()

# Journalisation
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# Origines autorisées (séparées par des virgules)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173,app://.").split(",")
    if origin.strip()
]

app = FastAPI(
    title="School Management API",
    description="API de gestion scolaire",
    version="1.0.0"
)

# Configuration CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Enregistrement des routeurs
app.include_router(health_router)
app.include_router(grades_router)
app.include_router(class_rooms_router)
app.include_router(branches_router)
app.include_router(students_router)
app.include_router(professors_router)
app.include_router(teachings_router)
app.include_router(courses_router)

@app.get("/")
def root():
    """Racine de l'API"""
    return {
        "message": "School Management API Server",
        "version": "1.0.0",
        "endpoints": {
            "health": "/health",
            "grades": "/admin/grades",
            "class_rooms": "/admin/class-rooms",
            "branches": "/admin/branches",
            "students": "/admin/students",
            "professors": "/admin/professors",
            "teachings": "/admin/teachings",
            "courses": "/admin/courses",
            "docs": "/docs",
            "redoc": "/redoc"
        }
    }
