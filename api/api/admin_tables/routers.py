"""
    Routeurs de suppression des tables d'administration
"""

from crud.cascade_delete import EntityKind
from .deletion import build_deletion_router
from .services import (
    delete_grade,
    delete_class_room,
    delete_branch,
    delete_student,
    delete_professor,
    delete_teaching,
    delete_course,
)

grades_router = build_deletion_router("/admin/grades", "Grades", EntityKind.GRADE, delete_grade)
class_rooms_router = build_deletion_router("/admin/class-rooms", "Class Rooms", EntityKind.CLASS_ROOM, delete_class_room)
branches_router = build_deletion_router("/admin/branches", "Branches", EntityKind.BRANCH, delete_branch)
students_router = build_deletion_router("/admin/students", "Students", EntityKind.STUDENT, delete_student)
professors_router = build_deletion_router("/admin/professors", "Professors", EntityKind.PROFESSOR, delete_professor)
teachings_router = build_deletion_router("/admin/teachings", "Teachings", EntityKind.TEACHING, delete_teaching)
courses_router = build_deletion_router("/admin/courses", "Courses", EntityKind.COURSE, delete_course)
