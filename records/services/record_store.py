# /academic-records/records/services/record_store.py

"""
The in-memory record store.

Classes and students live in two fixed-size slot arrays. Slots are never
removed: deleting a record clears its `active` flag and leaves the position
free for the next creation, which always takes the lowest-indexed free slot.
Class ids are derived from slot positions (index + 1), so an id can come back
after the class that held it is deleted.

Every mutating method keeps the counters and each class's `occupied` value in
step with the student slots before it returns. Failures are raised as
`RecordStoreError` subclasses; the service facade turns them into results.
"""

from typing import Iterator, List, Optional

from ..core.config import settings
from ..core.exceptions import (
    CapacityExceededError,
    ClassFullError,
    DuplicateKeyError,
    InvalidInputError,
    NoChangeError,
    NotFoundError,
    PermissionDeniedError,
)
from ..core.logger import get_logger
from ..models.class_model import Class
from ..models.report_model import ClassReport, ReportRow, StudentStatus
from ..models.snapshot_model import StoreSnapshot
from ..models.student_model import Student
from ..models.user_model import Role

logger = get_logger(__name__)


class ActiveClassesView:
    """
    Read-only, restartable view over the active classes. Each iteration walks
    the slots again and yields copies, so callers cannot edit the store
    through it.
    """

    def __init__(self, classes: List[Class]):
        self._classes = classes

    def __iter__(self) -> Iterator[Class]:
        for turma in self._classes:
            if turma.active:
                yield turma.model_copy(deep=True)


class RecordStore:
    def __init__(
        self,
        max_classes: Optional[int] = None,
        max_students: Optional[int] = None,
        name_max_length: Optional[int] = None,
        ra_max_length: Optional[int] = None,
    ):
        self.max_classes = max_classes or settings.MAX_CLASSES
        self.max_students = max_students or settings.MAX_STUDENTS
        self.name_max_length = name_max_length or settings.name_max_length
        self.ra_max_length = ra_max_length or settings.ra_max_length

        self.classes: List[Class] = [Class() for _ in range(self.max_classes)]
        self.students: List[Student] = [Student() for _ in range(self.max_students)]
        self.active_class_count = 0
        self.active_student_count = 0

    # --- Helpers ---

    def _bound_name(self, name: str) -> str:
        return name[:self.name_max_length]

    def _bound_ra(self, registration_id: str) -> str:
        return registration_id[:self.ra_max_length]

    def _first_free_slot(self, slots) -> Optional[int]:
        for index, slot in enumerate(slots):
            if not slot.active:
                return index
        return None

    # --- Lookups ---

    def lookup_student_by_registration(self, registration_id: str) -> Optional[int]:
        """Index of the active student holding this RA, or None."""
        registration_id = self._bound_ra(registration_id)
        for index, student in enumerate(self.students):
            if student.active and student.registration_id == registration_id:
                return index
        return None

    def lookup_class_by_id(self, class_id: int) -> Optional[int]:
        """Index of the active class with this id, or None."""
        for index, turma in enumerate(self.classes):
            if turma.active and turma.id == class_id:
                return index
        return None

    def _require_student(self, registration_id: str) -> Student:
        index = self.lookup_student_by_registration(registration_id)
        if index is None:
            raise NotFoundError(f"Student with RA '{registration_id}' not found or inactive.")
        return self.students[index]

    def _require_class(self, class_id: int) -> Class:
        index = self.lookup_class_by_id(class_id)
        if index is None:
            raise NotFoundError(f"Class ID {class_id} not found or inactive.")
        return self.classes[index]

    # --- Create ---

    def create_class(self, name: str, capacity: int) -> Class:
        if self.active_class_count >= self.max_classes:
            raise CapacityExceededError(f"Class limit of {self.max_classes} reached.")
        if capacity <= 0:
            raise InvalidInputError("The number of seats must be positive.")

        index = self._first_free_slot(self.classes)
        if index is None:
            # Only reachable if the counter drifted from the slots.
            raise CapacityExceededError("No free class slot available.")

        turma = self.classes[index]
        turma.id = index + 1
        turma.name = self._bound_name(name)
        turma.capacity = capacity
        turma.occupied = 0
        turma.active = True
        self.active_class_count += 1

        logger.info(f"Class '{turma.name}' created with ID {turma.id} ({capacity} seats).")
        return turma

    def create_student(self, name: str, registration_id: str, class_id: int) -> Student:
        if self.active_student_count >= self.max_students:
            raise CapacityExceededError(f"Student limit of {self.max_students} reached.")
        if self.lookup_student_by_registration(registration_id) is not None:
            raise DuplicateKeyError(f"RA '{registration_id}' is already registered.")

        turma = self._require_class(class_id)
        if turma.is_full:
            raise ClassFullError(f"Class '{turma.name}' is full.")

        index = self._first_free_slot(self.students)
        if index is None:
            raise CapacityExceededError("No free student slot available.")

        student = self.students[index]
        student.registration_id = self._bound_ra(registration_id)
        student.name = self._bound_name(name)
        student.class_id = class_id
        student.scores = [0.0, 0.0, 0.0]
        student.average = 0.0
        student.active = True

        self.active_student_count += 1
        turma.occupied += 1

        logger.info(f"Student '{student.name}' (RA {student.registration_id}) enrolled in class {class_id}.")
        return student

    # --- Update ---

    def record_scores(self, registration_id: str, s1: float, s2: float, s3: float, caller_role: Role) -> Student:
        if caller_role < Role.PROFESSOR:
            raise PermissionDeniedError("Access denied: only professors or admins can record scores.")

        student = self._require_student(registration_id)
        student.scores = [s1, s2, s3]
        student.average = (s1 + s2 + s3) / 3

        logger.info(f"Scores recorded for '{student.name}' (average {student.average:.2f}).")
        return student

    def edit_student(self, registration_id: str, new_name: str = "", new_class_id: int = 0) -> Student:
        """
        Renames and/or transfers a student.

        The name is written before the transfer is checked, so a transfer into
        a full class raises ClassFullError with the new name already stored.
        An unknown target class only skips the transfer.
        """
        student = self._require_student(registration_id)
        changed = False

        if new_name:
            student.name = self._bound_name(new_name)
            changed = True

        if new_class_id != 0 and new_class_id != student.class_id:
            target_index = self.lookup_class_by_id(new_class_id)
            if target_index is None:
                logger.warning(f"Class ID {new_class_id} is invalid. Transfer skipped.")
            else:
                target = self.classes[target_index]
                if target.is_full:
                    raise ClassFullError(f"Class ID {new_class_id} is full. Class not changed.")

                old_index = self.lookup_class_by_id(student.class_id)
                if old_index is not None:
                    self.classes[old_index].occupied -= 1

                target.occupied += 1
                student.class_id = new_class_id
                changed = True
                logger.info(f"Student RA {student.registration_id} moved to class {new_class_id} ({target.name}).")

        if not changed:
            raise NoChangeError("No data changed.")
        return student

    # --- Delete (logical) ---

    def delete_student(self, registration_id: str) -> Student:
        student = self._require_student(registration_id)

        class_index = self.lookup_class_by_id(student.class_id)
        if class_index is not None:
            self.classes[class_index].occupied -= 1

        student.active = False
        self.active_student_count -= 1

        logger.info(f"Student '{student.name}' (RA {student.registration_id}) deactivated.")
        return student

    def delete_class(self, class_id: int) -> int:
        """Deactivates a class and every active student in it. Returns how many students went with it."""
        turma = self._require_class(class_id)

        cascaded = 0
        for student in self.students:
            if student.active and student.class_id == class_id:
                student.active = False
                self.active_student_count -= 1
                cascaded += 1

        turma.active = False
        turma.occupied = 0
        self.active_class_count -= 1

        logger.info(f"Class '{turma.name}' (ID {class_id}) deactivated; {cascaded} students cascaded.")
        return cascaded

    # --- Ordering & reports ---

    def sort_students_by_name(self) -> None:
        """
        Exchange sort over the whole slot array. Inactive slots are skipped
        on both sides of the comparison, so only active students trade places.
        """
        slots = self.students
        for i in range(len(slots) - 1):
            if not slots[i].active:
                continue
            for j in range(i + 1, len(slots)):
                if not slots[j].active:
                    continue
                if slots[i].name > slots[j].name:
                    slots[i], slots[j] = slots[j], slots[i]

    def list_active_classes(self) -> ActiveClassesView:
        return ActiveClassesView(self.classes)

    def generate_class_report(self, class_id: int) -> ClassReport:
        turma = self._require_class(class_id)

        rows = [
            ReportRow(
                registration_id=student.registration_id,
                name=student.name,
                scores=list(student.scores),
                average=student.average,
                status=StudentStatus.from_average(student.average),
            )
            for student in self.students
            if student.active and student.class_id == class_id
        ]
        return ClassReport(
            class_id=turma.id,
            class_name=turma.name,
            capacity=turma.capacity,
            occupied=turma.occupied,
            rows=rows,
        )

    # --- Snapshot conversion ---

    def to_snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            classes=[turma.model_copy(deep=True) for turma in self.classes],
            students=[student.model_copy(deep=True) for student in self.students],
            active_class_count=self.active_class_count,
            active_student_count=self.active_student_count,
        )

    @classmethod
    def from_snapshot(cls, snapshot: StoreSnapshot, **limits) -> "RecordStore":
        store = cls(
            max_classes=len(snapshot.classes),
            max_students=len(snapshot.students),
            **limits,
        )
        store.classes = [turma.model_copy(deep=True) for turma in snapshot.classes]
        store.students = [student.model_copy(deep=True) for student in snapshot.students]
        store.active_class_count = snapshot.active_class_count
        store.active_student_count = snapshot.active_student_count
        return store
