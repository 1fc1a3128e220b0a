# /academic-records/records/services/record_service.py

"""
This service module is the boundary between the CLI and the record store.

Each function checks the caller's role, delegates to the store and converts
the outcome into an `OperationResult`. The store itself only enforces the
role for grade recording, so the professor/admin gates for every other
mutation live here.
"""

from typing import Optional

from ..core.exceptions import NotFoundError, PermissionDeniedError, RecordStoreError
from ..models.class_model import ClassCreate
from ..models.report_model import ClassReport
from ..models.result_model import OperationResult
from ..models.student_model import StudentCreate, StudentUpdate
from ..models.user_model import Role
from .record_store import RecordStore


def _require_role(role: Role, minimum: Role, action: str) -> None:
    if role < minimum:
        raise PermissionDeniedError(f"Access denied: {action} requires {minimum.name.lower()} access.")


# --- Facade Methods for CRUD Operations ---

def create_class(class_data: ClassCreate, store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.PROFESSOR, "creating a class")
        turma = store.create_class(class_data.name, class_data.capacity)
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(f"Class '{turma.name}' created with ID {turma.id}.", class_id=turma.id)


def create_student(student_data: StudentCreate, store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.PROFESSOR, "enrolling a student")
        student = store.create_student(student_data.name, student_data.registration_id, student_data.class_id)
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(
        f"Student '{student.name}' enrolled with RA {student.registration_id}.",
        registration_id=student.registration_id,
    )


def record_scores(registration_id: str, s1: float, s2: float, s3: float, store: RecordStore, role: Role) -> OperationResult:
    # The store performs the role check itself for this one.
    try:
        student = store.record_scores(registration_id, s1, s2, s3, role)
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(
        f"Scores for '{student.name}' recorded (average: {student.average:.2f}).",
        average=student.average,
    )


def edit_student(registration_id: str, student_update: StudentUpdate, store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.ADMIN, "editing a student")
        student = store.edit_student(
            registration_id,
            new_name=student_update.name or "",
            new_class_id=student_update.class_id or 0,
        )
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(f"Student RA {student.registration_id} updated.", class_id=student.class_id)


def delete_student(registration_id: str, store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.ADMIN, "deleting a student")
        student = store.delete_student(registration_id)
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(f"Student '{student.name}' (RA {student.registration_id}) deleted.")


def delete_class(class_id: int, store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.ADMIN, "deleting a class")
        cascaded = store.delete_class(class_id)
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    return OperationResult.ok(
        f"Class ID {class_id} deleted. {cascaded} enrolled students were also deactivated.",
        cascaded=cascaded,
    )


def sort_students(store: RecordStore, role: Role) -> OperationResult:
    try:
        _require_role(role, Role.ADMIN, "sorting students")
    except RecordStoreError as e:
        return OperationResult.from_error(e)
    store.sort_students_by_name()
    return OperationResult.ok("Students sorted by name.")


# --- Read-only Operations ---

def get_class_report(class_id: int, store: RecordStore) -> Optional[ClassReport]:
    """The report for an active class, or None when the id does not resolve."""
    try:
        return store.generate_class_report(class_id)
    except NotFoundError:
        return None
