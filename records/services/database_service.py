# /academic-records/records/services/database_service.py

"""
Persistence facade for the record store.

`load` never fails: a missing, unreadable or mismatched snapshot gives a
fresh empty store. `save` reports failure through its return value and leaves
the previously saved snapshot untouched.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..core.config import settings
from ..core.logger import get_logger
from ..db.database import SessionLocal, engine, init_db
from .database_helpers.snapshot_repository_sql import SnapshotRepositorySQL
from .record_store import RecordStore

logger = get_logger(__name__)


class DatabaseService:
    def __init__(
        self,
        session_factory: Optional[sessionmaker] = None,
        bind=None,
        max_classes: Optional[int] = None,
        max_students: Optional[int] = None,
    ):
        self.session_factory = session_factory or SessionLocal
        self.bind = bind or engine
        self.max_classes = max_classes or settings.MAX_CLASSES
        self.max_students = max_students or settings.MAX_STUDENTS

    def _empty_store(self) -> RecordStore:
        return RecordStore(max_classes=self.max_classes, max_students=self.max_students)

    def load(self) -> RecordStore:
        try:
            init_db(self.bind)
            with self.session_factory() as session:
                snapshot = SnapshotRepositorySQL(session).read_snapshot()
        except SQLAlchemyError as e:
            logger.warning(f"Could not read the data snapshot ({e}). Starting with an empty system.")
            return self._empty_store()

        if snapshot is None:
            logger.warning("No data snapshot found. Starting with an empty system.")
            return self._empty_store()

        if len(snapshot.classes) != self.max_classes or len(snapshot.students) != self.max_students:
            logger.warning(
                f"Snapshot layout ({len(snapshot.classes)} classes, {len(snapshot.students)} students) "
                f"does not match the configured capacity. Starting with an empty system."
            )
            return self._empty_store()

        logger.info(
            f"Data loaded: {snapshot.active_class_count} active classes, "
            f"{snapshot.active_student_count} active students."
        )
        return RecordStore.from_snapshot(snapshot)

    def save(self, store: RecordStore) -> bool:
        try:
            init_db(self.bind)
            with self.session_factory() as session:
                SnapshotRepositorySQL(session).write_snapshot(store.to_snapshot())
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            # OverflowError: a value too large for the column type.
            logger.error(f"Failed to save the data snapshot: {e}")
            return False
        return True
