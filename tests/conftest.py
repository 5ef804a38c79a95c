"""
Fixtures for testing.
"""
# pylint: disable=redefined-outer-name, invalid-name

from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from db import Base, build_engine, get_db
from db.models import ClassRoom, Grade, Student
from crud.cascade_delete import (
    CascadeDeleteValidator,
    SqlAlchemyDataAccess,
    build_school_registry,
)
from main import app


class RecordingDataAccess(SqlAlchemyDataAccess):
    """
    Data access that remembers which dependent tables were touched.
    """

    def __init__(self, db: Session):
        super().__init__(db)
        self.calls: List[tuple] = []

    def count(self, table_name, foreign_key, item_id):
        self.calls.append(("count", table_name))
        return super().count(table_name, foreign_key, item_id)

    def delete_where(self, table_name, foreign_key, item_id):
        self.calls.append(("delete_where", table_name))
        return super().delete_where(table_name, foreign_key, item_id)


@pytest.fixture
def engine() -> Iterator[Engine]:
    """
    In-memory SQLite engine with the full schema.
    """
    engine = build_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """
    Session bound to the in-memory database.
    """
    with Session(engine, autoflush=False) as session:
        yield session


@pytest.fixture
def registry():
    """
    Default school registry.
    """
    return build_school_registry()


@pytest.fixture
def data_access(session: Session) -> RecordingDataAccess:
    """
    Data access recording dependent-table calls.
    """
    return RecordingDataAccess(session)


@pytest.fixture
def validator(data_access, registry) -> CascadeDeleteValidator:
    """
    Validator over the test session.
    """
    return CascadeDeleteValidator(data_access, registry)


@pytest.fixture
def client(session: Session) -> Iterator[TestClient]:
    """
    API client whose requests share the test session.
    """

    def get_db_override() -> Session:
        return session

    app.dependency_overrides[get_db] = get_db_override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def add_grade(session: Session):
    """
    Insert a grade with optional class rooms and students.
    """

    def _add_grade(grade_id: int, class_rooms: int = 0, students: int = 0) -> Grade:
        grade = Grade(id=grade_id, name=f"Niveau {grade_id}", code=f"N{grade_id}")
        session.add(grade)
        session.flush()

        for i in range(class_rooms):
            session.add(ClassRoom(name=f"Salle {grade_id}-{i}", capacity=30, gradeId=grade_id))

        for i in range(students):
            session.add(Student(firstname="Awa", lastname=f"Diop {i}", matricule=f"M{grade_id}{i}", gradeId=grade_id))

        session.commit()
        return grade

    return _add_grade
