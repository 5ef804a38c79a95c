"""
Modèles ORM de l'application de gestion scolaire
"""

# Structure scolaire
from .school import Grade, Branch, ClassRoom

# Étudiants et dossiers associés
from .student import Student, Absence, Payment, Scholarship, ReportCard

# Enseignants
from .professor import Professor, Teaching, TeachingGrade

# Matières
from .course import Course, Homework, GradeConfig

__all__ = [
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
]
