"""
Paquet base de données de l'application de gestion scolaire
Connexion, gestion des sessions et définition des modèles

Tables principales :
- Structure : grade, branch, class_room
- Étudiants : T_student, absences, payments, scholarships, T_report_card
- Enseignants : professor, teaching_assignment, teaching_grades
- Matières : course, homework, grade_config
"""

import logging

# Composants de base
from .base import Base, metadata
from .session import engine, SessionLocal, get_db, build_engine

# Modèles ORM
from .models import (
    Grade,
    Branch,
    ClassRoom,
    Student,
    Absence,
    Payment,
    Scholarship,
    ReportCard,
    Professor,
    Teaching,
    TeachingGrade,
    Course,
    Homework,
    GradeConfig,
)

logger = logging.getLogger(__name__)

__all__ = [
    # Composants de base
    "Base",
    "metadata",
    "engine",
    "SessionLocal",
    "get_db",
    "build_engine",

    # Modèles
    "Grade",
    "Branch",
    "ClassRoom",
    "Student",
    "Absence",
    "Payment",
    "Scholarship",
    "ReportCard",
    "Professor",
    "Teaching",
    "TeachingGrade",
    "Course",
    "Homework",
    "GradeConfig",

    # Utilitaires
    "create_tables",
    "drop_tables",
    "get_table_list",
]

def create_tables(bind=None) -> bool:
    """
    Crée toutes les tables.
    Les tables déjà présentes sont laissées telles quelles.
    """
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Toutes les tables ont été créées")
        return True
    except Exception:
        logger.exception("Erreur lors de la création des tables")
        return False

def drop_tables(bind=None) -> bool:
    """
    Supprime toutes les tables.
    Attention : toutes les données sont perdues !
    """
    try:
        Base.metadata.drop_all(bind=bind or engine)
        logger.info("Toutes les tables ont été supprimées")
        return True
    except Exception:
        logger.exception("Erreur lors de la suppression des tables")
        return False

def get_table_list():
    """
    Retourne la liste des tables déclarées.
    """
    tables = []
    for table_name, table in Base.metadata.tables.items():
        tables.append({
            'name': table_name,
            'columns': len(table.columns),
            'foreign_keys': len(table.foreign_keys),
            'indexes': len(table.indexes)
        })
    return tables
