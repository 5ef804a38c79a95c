from sqlalchemy import Column, Integer, String, Text, Float, Date, ForeignKey, Index
from ..base import Base

class Course(Base):
    """Matière enseignée"""
    __tablename__ = "course"

    id = Column(Integer, primary_key=True, autoincrement=True)
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    name = Column(Text, comment='Nom de la matière')
    code = Column(Text, comment='Code de la matière')

    def __repr__(self):
        return f"<Course(id={self.id}, name='{self.name}')>"


class Homework(Base):
    """Devoir donné à un niveau pour une matière"""
    __tablename__ = "homework"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, comment='Intitulé')
    due_date = Column(Date, comment='Date de remise')
    courseId = Column(Integer, ForeignKey('course.id'), comment='Matière')
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau')
    professorId = Column(Integer, ForeignKey('professor.id'), comment='Professeur')

    __table_args__ = (
        Index('idx_homework_course', 'courseId'),
        Index('idx_homework_grade', 'gradeId'),
        Index('idx_homework_professor', 'professorId'),
    )


class GradeConfig(Base):
    """Coefficient d'une matière pour un niveau"""
    __tablename__ = "grade_config"

    id = Column(Integer, primary_key=True, autoincrement=True)
    coefficient = Column(Float, comment='Coefficient')
    term_type = Column(String(20), comment='Découpage (trimestre, semestre)')
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau')
    courseId = Column(Integer, ForeignKey('course.id'), comment='Matière')
