from sqlalchemy import Column, Integer, String, Text, Float, Date, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from ..base import Base

class Student(Base):
    """Étudiant inscrit"""
    __tablename__ = "T_student"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Identifiant de l'étudiant")
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    firstname = Column(Text, comment='Prénom')
    lastname = Column(Text, comment='Nom')
    matricule = Column(Text, comment='Matricule')
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau')
    classRoomId = Column(Integer, ForeignKey('class_room.id'), comment='Salle de classe')

    __table_args__ = (
        Index('idx_student_grade', 'gradeId'),
        Index('idx_student_class_room', 'classRoomId'),
    )

    def __repr__(self):
        return f"<Student(id={self.id}, matricule='{self.matricule}')>"


class Absence(Base):
    """Absence d'un étudiant"""
    __tablename__ = "absences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, comment="Date de l'absence")
    reason = Column(Text, comment='Motif')
    studentId = Column(Integer, ForeignKey('T_student.id'), comment='Étudiant')

    __table_args__ = (
        Index('idx_absence_student', 'studentId'),
    )


class Payment(Base):
    """Paiement de frais de scolarité"""
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    amount = Column(Float, comment='Montant payé')
    month = Column(String(20), comment='Mois concerné')
    created_at = Column(DateTime, default=func.current_timestamp(), comment='Date de saisie')
    studentId = Column(Integer, ForeignKey('T_student.id'), comment='Étudiant')

    __table_args__ = (
        Index('idx_payment_student', 'studentId'),
    )


class Scholarship(Base):
    """Bourse attribuée à un étudiant"""
    __tablename__ = "scholarships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    percentage = Column(Float, comment='Taux de réduction')
    reason = Column(Text, comment="Motif d'attribution")
    studentId = Column(Integer, ForeignKey('T_student.id'), comment='Étudiant')


class ReportCard(Base):
    """Note d'un étudiant dans une matière (bulletin)"""
    __tablename__ = "T_report_card"

    id = Column(Integer, primary_key=True, autoincrement=True)
    term = Column(String(20), comment='Trimestre / semestre')
    value = Column(Float, comment='Note obtenue')
    studentId = Column(Integer, ForeignKey('T_student.id'), comment='Étudiant')
    courseId = Column(Integer, ForeignKey('course.id'), comment='Matière')

    __table_args__ = (
        Index('idx_report_card_student', 'studentId'),
        Index('idx_report_card_course', 'courseId'),
    )
