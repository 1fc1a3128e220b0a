# /tests/conftest.py

import pytest
from sqlalchemy.orm import sessionmaker

from records.db.database import build_engine
from records.services.database_service import DatabaseService
from records.services.record_store import RecordStore


@pytest.fixture
def store():
    """A small, empty store so capacity limits are easy to reach."""
    return RecordStore(max_classes=3, max_students=5, name_max_length=49, ra_max_length=9)


@pytest.fixture
def math_class(store):
    """The worked example: a two-seat class called Math."""
    return store.create_class("Math", 2)


@pytest.fixture
def db_service(tmp_path):
    """
    A DatabaseService bound to a throwaway SQLite file, sized like the
    `store` fixture.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'snapshot.db'}")
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    service = DatabaseService(session_factory=session_factory, bind=engine, max_classes=3, max_students=5)
    yield service
    engine.dispose()


def _assert_invariants(store: RecordStore) -> None:
    """Checks the counter, occupancy and uniqueness rules against the raw slots."""
    active_classes = [c for c in store.classes if c.active]
    active_students = [s for s in store.students if s.active]

    assert store.active_class_count == len(active_classes)
    assert store.active_student_count == len(active_students)

    for turma in active_classes:
        enrolled = sum(1 for s in active_students if s.class_id == turma.id)
        assert 0 <= turma.occupied <= turma.capacity
        assert turma.occupied == enrolled

    valid_ids = {index + 1 for index in range(len(store.classes))}
    for student in active_students:
        assert student.class_id in valid_ids

    registration_ids = [s.registration_id for s in active_students]
    assert len(registration_ids) == len(set(registration_ids))


@pytest.fixture
def assert_invariants():
    return _assert_invariants
