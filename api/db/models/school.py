from sqlalchemy import Column, Integer, String, Text, ForeignKey, Index
from ..base import Base

class Grade(Base):
    """Niveau scolaire (ex: 6ème, Terminale)"""
    __tablename__ = "grade"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='Identifiant du niveau')
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    name = Column(Text, nullable=False, comment='Nom du niveau')
    code = Column(Text, nullable=False, comment='Code court du niveau')

    def __repr__(self):
        return f"<Grade(id={self.id}, name='{self.name}')>"


class Branch(Base):
    """Filière rattachée à un niveau"""
    __tablename__ = "branch"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='Identifiant de la filière')
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    name = Column(Text, comment='Nom de la filière')
    code = Column(Text, comment='Code de la filière')
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau de rattachement')

    __table_args__ = (
        Index('idx_branch_grade', 'gradeId'),
    )

    def __repr__(self):
        return f"<Branch(id={self.id}, name='{self.name}')>"


class ClassRoom(Base):
    """Salle de classe d'un niveau (et éventuellement d'une filière)"""
    __tablename__ = "class_room"

    id = Column(Integer, primary_key=True, autoincrement=True, comment='Identifiant de la salle')
    remote_id = Column(String(36), unique=True, comment='UUID distant (synchronisation cloud)')
    name = Column(Text, comment='Nom de la salle')
    code = Column(Text, comment='Code de la salle')
    capacity = Column(Integer, comment="Capacité d'accueil")
    gradeId = Column(Integer, ForeignKey('grade.id'), comment='Niveau de rattachement')
    branchId = Column(Integer, ForeignKey('branch.id'), comment='Filière de rattachement')

    __table_args__ = (
        Index('idx_class_room_grade', 'gradeId'),
        Index('idx_class_room_branch', 'branchId'),
    )

    def __repr__(self):
        return f"<ClassRoom(id={self.id}, name='{self.name}')>"
