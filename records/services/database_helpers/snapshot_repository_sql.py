# /academic-records/records/services/database_helpers/snapshot_repository_sql.py

"""
Raw SQLAlchemy access for the store snapshot.

A snapshot is written as a whole: the old rows are removed and the new ones
inserted inside one transaction, so a failure halfway leaves the previous
snapshot in place after the rollback.
"""

from typing import Optional
from sqlalchemy.orm import Session

from records.db.models.snapshot_models import ClassSlot, StudentSlot, StoreCounters
from records.models.class_model import Class
from records.models.snapshot_model import StoreSnapshot
from records.models.student_model import Student

COUNTERS_ROW_ID = 1


class SnapshotRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def read_snapshot(self) -> Optional[StoreSnapshot]:
        """Returns the stored snapshot, or None when no counters row exists."""
        counters = self.db.query(StoreCounters).filter(StoreCounters.id == COUNTERS_ROW_ID).first()
        if counters is None:
            return None

        class_rows = self.db.query(ClassSlot).order_by(ClassSlot.slot_index).all()
        student_rows = self.db.query(StudentSlot).order_by(StudentSlot.slot_index).all()

        return StoreSnapshot(
            classes=[Class.model_validate(row) for row in class_rows],
            students=[
                Student(
                    registration_id=row.registration_id,
                    name=row.name,
                    class_id=row.class_id,
                    scores=[row.score_1, row.score_2, row.score_3],
                    average=row.average,
                    active=row.active,
                )
                for row in student_rows
            ],
            active_class_count=counters.active_class_count,
            active_student_count=counters.active_student_count,
        )

    def write_snapshot(self, snapshot: StoreSnapshot) -> None:
        """Replaces the stored snapshot. Rolls back and re-raises on any error."""
        try:
            self.db.query(ClassSlot).delete()
            self.db.query(StudentSlot).delete()
            self.db.query(StoreCounters).delete()

            self.db.add_all(
                ClassSlot(slot_index=index, **turma.model_dump())
                for index, turma in enumerate(snapshot.classes)
            )
            self.db.add_all(
                StudentSlot(
                    slot_index=index,
                    registration_id=student.registration_id,
                    name=student.name,
                    class_id=student.class_id,
                    score_1=student.scores[0],
                    score_2=student.scores[1],
                    score_3=student.scores[2],
                    average=student.average,
                    active=student.active,
                )
                for index, student in enumerate(snapshot.students)
            )
            self.db.add(StoreCounters(
                id=COUNTERS_ROW_ID,
                active_class_count=snapshot.active_class_count,
                active_student_count=snapshot.active_student_count,
            ))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
