from sqlalchemy import Column, Integer, String, Text, ForeignKey
from ..base import Base

class Professor(Base):
    """Professeur"""
    __tablename__ = "professor"

    id = Column(Integer, primary_key=True, autoincrement=True)
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    firstname = Column(Text, comment='Prénom')
    lastname = Column(Text, comment='Nom')
    cni = Column(Text, comment="Numéro de pièce d'identité")

    def __repr__(self):
        return f"<Professor(id={self.id}, lastname='{self.lastname}')>"


class Teaching(Base):
    """Affectation d'enseignement d'un professeur"""
    __tablename__ = "teaching_assignment"

    id = Column(Integer, primary_key=True, autoincrement=True)
    schoolType = Column(String(20), comment="Type d'établissement (primaire, secondaire)")
    professorId = Column(Integer, ForeignKey('professor.id'), comment='Professeur')
    courseId = Column(Integer, ForeignKey('course.id'), comment='Matière enseignée')


class TeachingGrade(Base):
    """Niveaux couverts par une affectation d'enseignement"""
    __tablename__ = "teaching_grades"

    id = Column(Integer, primary_key=True, autoincrement=True)
    teachingId = Column(Integer, ForeignKey('teaching_assignment.id'), comment="Affectation")
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau')
