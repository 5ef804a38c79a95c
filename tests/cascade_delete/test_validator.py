"""
Tests for ``crud.cascade_delete.validator``.
"""
# pylint: disable=redefined-outer-name

from sqlalchemy.orm import Session

from db.models import (
    Absence,
    ClassRoom,
    Course,
    Grade,
    Payment,
    Professor,
    Scholarship,
    Student,
    Teaching,
    TeachingGrade,
)
from crud.cascade_delete import (
    CascadeDeleteValidator,
    DeleteOutcomeKind,
    DeleteRequest,
    EntityKind,
    SqlAlchemyDataAccess,
    cascade,
    restrict,
)

GRADE_RULES = [
    cascade("class_room", "gradeId"),
    restrict("T_student", "gradeId"),
]


def count_rows(session: Session, model, **filters) -> int:
    """
    Count rows of ``model`` matching ``filters``.
    """
    return session.query(model).filter_by(**filters).count()


def test_blocked_by_students(session, validator, add_grade) -> None:
    """
    A grade with students cannot be deleted.
    """
    add_grade(5, students=3)

    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=5), GRADE_RULES)

    assert outcome.success is False
    assert outcome.kind == DeleteOutcomeKind.BLOCKED
    assert outcome.message == "Impossible de supprimer car il y a 3 étudiant(s) lié(s)"
    assert outcome.table == "T_student"
    assert outcome.count == 3
    assert count_rows(session, Grade, id=5) == 1


def test_blocked_delete_keeps_cascading_rows(session, validator, add_grade) -> None:
    """
    Cascading relations declared before a blocking one are left untouched.
    """
    add_grade(5, class_rooms=2, students=1)

    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=5), GRADE_RULES)

    assert outcome.kind == DeleteOutcomeKind.BLOCKED
    assert count_rows(session, ClassRoom, gradeId=5) == 2
    assert count_rows(session, Grade, id=5) == 1


def test_delete_with_cascade(session, validator, add_grade) -> None:
    """
    Cascading rows go away together with the target.
    """
    add_grade(7, class_rooms=2)
    add_grade(8, class_rooms=1)

    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=7), GRADE_RULES)

    assert outcome.success is True
    assert outcome.kind == DeleteOutcomeKind.DELETED
    assert outcome.message == "Grade supprimé avec succès"
    assert outcome.cascaded == {"class_room": 2}
    assert count_rows(session, Grade, id=7) == 0
    assert count_rows(session, ClassRoom, gradeId=7) == 0
    # other grades are not affected
    assert count_rows(session, ClassRoom, gradeId=8) == 1


def test_not_found_queries_no_dependent_table(validator, data_access) -> None:
    """
    A missing target short-circuits before any relation is evaluated.
    """
    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=999), GRADE_RULES)

    assert outcome.success is False
    assert outcome.kind == DeleteOutcomeKind.NOT_FOUND
    assert outcome.message == "Grade non trouvé"
    assert data_access.calls == []


def test_second_delete_is_not_found(validator, add_grade) -> None:
    """
    Deleting the same row twice reports it as missing the second time.
    """
    add_grade(7, class_rooms=1)
    request = DeleteRequest(entity=EntityKind.GRADE, id=7)

    assert validator.delete(request).kind == DeleteOutcomeKind.DELETED
    assert validator.delete(request).kind == DeleteOutcomeKind.NOT_FOUND


def test_first_blocking_rule_wins(session, validator) -> None:
    """
    With several blocking relations, the first declared one is reported.
    """
    session.add(Student(id=1, firstname="Moussa", lastname="Ba"))
    session.flush()
    session.add(Payment(amount=15000, month="octobre", studentId=1))
    session.add(Payment(amount=15000, month="novembre", studentId=1))
    session.commit()

    rules = [
        restrict("T_report_card", "studentId"),
        restrict("payments", "studentId"),
        restrict("absences", "studentId"),
    ]
    outcome = validator.delete(DeleteRequest(entity=EntityKind.STUDENT, id=1), rules)

    assert outcome.message == "Impossible de supprimer car il y a 2 paiement(s) lié(s)"


def test_blocking_checked_before_any_cascade(session, validator, data_access) -> None:
    """
    Every blocking relation is counted before the first cascading delete.
    """
    session.add(Student(id=1, firstname="Moussa", lastname="Ba"))
    session.flush()
    session.add(Absence(reason="maladie", studentId=1))
    session.add(Payment(amount=15000, month="octobre", studentId=1))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.STUDENT, id=1))

    assert outcome.kind == DeleteOutcomeKind.BLOCKED
    assert [call for call, _ in data_access.calls] == ["count"]
    assert count_rows(session, Absence, studentId=1) == 1


def test_student_default_rules(session, validator) -> None:
    """
    Absences and scholarships follow the student.
    """
    session.add(Student(id=1, firstname="Moussa", lastname="Ba"))
    session.flush()
    session.add(Absence(reason="maladie", studentId=1))
    session.add(Absence(reason="retard", studentId=1))
    session.add(Scholarship(percentage=50, studentId=1))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.STUDENT, id=1))

    assert outcome.success is True
    assert outcome.message == "Student supprimé avec succès"
    assert outcome.cascaded == {"absences": 2, "scholarships": 1}
    assert count_rows(session, Absence) == 0
    assert count_rows(session, Scholarship) == 0


def test_storage_failure_rolls_back(session, validator, add_grade) -> None:
    """
    A database error midway undoes earlier cascading deletes.
    """
    add_grade(7, class_rooms=1)
    add_grade(8)
    class_room = session.query(ClassRoom).filter_by(gradeId=7).one()
    # student of another grade sitting in a class room of grade 7
    session.add(Student(firstname="Fatou", lastname="Sow", gradeId=8, classRoomId=class_room.id))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=7), GRADE_RULES)

    assert outcome.success is False
    assert outcome.kind == DeleteOutcomeKind.STORAGE_FAILURE
    assert "FOREIGN KEY" in outcome.cause
    assert outcome.message.startswith("Erreur lors de la suppression: ")
    assert "[SQL:" not in outcome.message
    assert outcome.cause == "FOREIGN KEY constraint failed"
    assert count_rows(session, ClassRoom, gradeId=7) == 1
    assert count_rows(session, Grade, id=7) == 1


def test_storage_failure_on_target_delete(session, validator) -> None:
    """
    Undeclared references surface as a storage failure, not an exception.
    """
    session.add(Professor(id=3, firstname="Ibrahima", lastname="Ndiaye"))
    session.flush()
    session.add(Teaching(schoolType="secondaire", professorId=3))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.PROFESSOR, id=3), [])

    assert outcome.kind == DeleteOutcomeKind.STORAGE_FAILURE
    assert count_rows(session, Professor, id=3) == 1


def test_check_reports_without_writing(session, validator, add_grade) -> None:
    """
    The deletion check counts every relation and changes nothing.
    """
    add_grade(5, class_rooms=2, students=3)

    result = validator.check(DeleteRequest(entity=EntityKind.GRADE, id=5))

    assert result.exists is True
    assert result.is_deletable is False
    assert result.message == "Impossible de supprimer car il y a 3 étudiant(s) lié(s)"
    assert [(r.table, r.count) for r in result.blocking] == [("T_student", 3)]
    assert [(r.table, r.count) for r in result.cascading] == [("class_room", 2), ("branch", 0)]
    assert count_rows(session, ClassRoom, gradeId=5) == 2


def test_check_deletable_and_missing(validator, add_grade) -> None:
    """
    The deletion check of a free row and of a missing row.
    """
    add_grade(7, class_rooms=1)

    result = validator.check(DeleteRequest(entity=EntityKind.GRADE, id=7))
    assert result.is_deletable is True
    assert result.blocking == []
    assert result.message == "Grade peut être supprimé"

    missing = validator.check(DeleteRequest(entity=EntityKind.GRADE, id=999))
    assert missing.exists is False
    assert missing.message == "Grade non trouvé"


def test_course_blocked_by_teaching(session, validator) -> None:
    """
    A course still taught by a professor cannot be deleted.
    """
    session.add(Course(id=4, name="Mathématiques", code="MATH"))
    session.flush()
    session.add(Teaching(schoolType="secondaire", courseId=4))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.COURSE, id=4))

    assert outcome.kind == DeleteOutcomeKind.BLOCKED
    assert outcome.message == "Impossible de supprimer car il y a 1 affectation(s) d'enseignement lié(s)"
    assert count_rows(session, Course, id=4) == 1


def test_grade_blocked_by_teaching_grades(session, validator, add_grade) -> None:
    """
    A grade covered by a teaching assignment cannot be deleted.
    """
    add_grade(7, class_rooms=1)
    session.add(Teaching(id=1, schoolType="primaire"))
    session.flush()
    session.add(TeachingGrade(teachingId=1, gradeId=7))
    session.commit()

    outcome = validator.delete(DeleteRequest(entity=EntityKind.GRADE, id=7))

    assert outcome.kind == DeleteOutcomeKind.BLOCKED
    assert outcome.table == "teaching_grades"
    assert count_rows(session, ClassRoom, gradeId=7) == 1


class ConcurrentDeleteDataAccess(SqlAlchemyDataAccess):
    """
    Data access where another writer removes the target between the
    read and the final delete.
    """

    def delete_by_id(self, model, item_id):
        return 0


def test_target_removed_before_delete(session, registry, add_grade) -> None:
    """
    A target gone by the time it is deleted is reported as missing and
    the cascades already issued are undone.
    """
    add_grade(8, class_rooms=2)
    validator = CascadeDeleteValidator(ConcurrentDeleteDataAccess(session), registry)

    outcome = validator.delete(
        DeleteRequest(entity=EntityKind.GRADE, id=8),
        [cascade("class_room", "gradeId")],
    )

    assert outcome.kind == DeleteOutcomeKind.NOT_FOUND
    assert outcome.message == "Grade non trouvé"
    assert count_rows(session, ClassRoom, gradeId=8) == 2
    assert count_rows(session, Grade, id=8) == 1
