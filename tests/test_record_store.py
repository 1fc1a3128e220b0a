# /tests/test_record_store.py

import random

import pytest

from records.core.exceptions import (
    CapacityExceededError,
    ClassFullError,
    DuplicateKeyError,
    ErrorKind,
    InvalidInputError,
    NoChangeError,
    NotFoundError,
    PermissionDeniedError,
    RecordStoreError,
)
from records.models.report_model import StudentStatus
from records.models.user_model import Role
from records.services.record_store import RecordStore


# --- Class creation ---

def test_create_class_assigns_slot_based_ids(store):
    first = store.create_class("Math", 30)
    second = store.create_class("History", 25)
    assert (first.id, second.id) == (1, 2)
    assert first.occupied == 0 and first.active
    assert store.active_class_count == 2


def test_create_class_past_capacity_fails(store):
    for n in range(store.max_classes):
        store.create_class(f"Class {n}", 10)
    with pytest.raises(CapacityExceededError):
        store.create_class("One too many", 10)
    assert store.active_class_count == store.max_classes


@pytest.mark.parametrize("capacity", [0, -5])
def test_create_class_rejects_non_positive_capacity(store, capacity):
    with pytest.raises(InvalidInputError):
        store.create_class("Empty", capacity)
    assert store.active_class_count == 0


def test_capacity_check_runs_before_seat_validation(store):
    for n in range(store.max_classes):
        store.create_class(f"Class {n}", 10)
    with pytest.raises(CapacityExceededError):
        store.create_class("Bad", 0)


def test_class_names_are_not_unique(store):
    store.create_class("Math", 10)
    store.create_class("Math", 10)
    assert [c.name for c in store.list_active_classes()] == ["Math", "Math"]


def test_class_name_is_truncated(store):
    turma = store.create_class("x" * 80, 10)
    assert turma.name == "x" * 49


def test_freed_class_slot_and_id_are_reused(store):
    store.create_class("A", 5)
    store.create_class("B", 5)
    store.create_class("C", 5)
    store.delete_class(2)

    reused = store.create_class("D", 5)
    assert reused.id == 2
    assert store.classes[1].name == "D"


# --- Student creation ---

def test_create_student_updates_counters(store, math_class):
    student = store.create_student("Ana", "1", math_class.id)
    assert student.active
    assert student.scores == [0.0, 0.0, 0.0] and student.average == 0.0
    assert store.active_student_count == 1
    assert store.classes[0].occupied == 1


def test_create_student_failure_order(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    store.create_student("Bia", "2", math_class.id)

    # Duplicate RA is reported before the class being full.
    with pytest.raises(DuplicateKeyError):
        store.create_student("Other", "1", math_class.id)
    with pytest.raises(NotFoundError):
        store.create_student("Caio", "3", 99)
    with pytest.raises(ClassFullError):
        store.create_student("Caio", "3", math_class.id)


def test_create_student_past_capacity_fails(store):
    big = store.create_class("Big", 50)
    for n in range(store.max_students):
        store.create_student(f"Student {n}", str(n), big.id)
    with pytest.raises(CapacityExceededError):
        store.create_student("Extra", "extra", big.id)


def test_create_student_in_inactive_class_fails(store, math_class):
    store.delete_class(math_class.id)
    with pytest.raises(NotFoundError):
        store.create_student("Ana", "1", math_class.id)


def test_registration_id_can_be_reused_after_deletion(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    store.delete_student("1")
    again = store.create_student("Novo", "1", math_class.id)
    assert again.name == "Novo"
    assert store.lookup_student_by_registration("1") == 0


def test_long_registration_id_is_truncated_on_store_and_lookup(store, math_class):
    store.create_student("Ana", "1234567890123", math_class.id)
    assert store.students[0].registration_id == "123456789"
    assert store.lookup_student_by_registration("1234567890123") == 0


def test_worked_enrollment_example(store, math_class, assert_invariants):
    store.create_student("A", "1", math_class.id)
    store.create_student("B", "2", math_class.id)
    assert store.classes[0].occupied == 2

    with pytest.raises(ClassFullError):
        store.create_student("C", "3", math_class.id)

    store.delete_student("1")
    assert store.classes[0].occupied == 1

    store.create_student("C", "3", math_class.id)
    assert store.classes[0].occupied == 2
    # C takes the slot A left behind.
    assert store.students[0].name == "C"
    assert_invariants(store)


# --- Lookups ---

def test_lookups_ignore_inactive_records(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    assert store.lookup_class_by_id(math_class.id) == 0
    assert store.lookup_student_by_registration("1") == 0

    store.delete_student("1")
    store.delete_class(math_class.id)
    assert store.lookup_student_by_registration("1") is None
    assert store.lookup_class_by_id(math_class.id) is None


# --- Scores ---

@pytest.mark.parametrize("role", [Role.PROFESSOR, Role.ADMIN])
def test_record_scores_computes_average(store, math_class, role):
    store.create_student("A", "1", math_class.id)
    store.create_student("B", "2", math_class.id)

    student = store.record_scores("2", 8, 9, 7, role)
    assert student.average == 8.0
    assert student.scores == [8, 9, 7]
    assert store.generate_class_report(math_class.id).rows[1].status == StudentStatus.APPROVED

    student = store.record_scores("2", 4, 5, 3, role)
    assert student.average == 4.0
    assert store.generate_class_report(math_class.id).rows[1].status == StudentStatus.FAILED


def test_record_scores_uses_plain_division(store, math_class):
    store.create_student("A", "1", math_class.id)
    student = store.record_scores("1", 7.5, 8.25, 6.1, Role.PROFESSOR)
    assert student.average == (7.5 + 8.25 + 6.1) / 3


def test_record_scores_denies_students_before_anything_else(store):
    # Even an unknown RA reports the permission problem first.
    with pytest.raises(PermissionDeniedError) as exc_info:
        store.record_scores("nobody", 10, 10, 10, Role.STUDENT)
    assert exc_info.value.kind == ErrorKind.PERMISSION_DENIED


def test_record_scores_unknown_student(store):
    with pytest.raises(NotFoundError):
        store.record_scores("404", 5, 5, 5, Role.ADMIN)


# --- Editing ---

def test_edit_student_name_only(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    student = store.edit_student("1", new_name="Ana Maria")
    assert student.name == "Ana Maria"
    assert student.class_id == math_class.id


def test_edit_student_transfer(store, math_class, assert_invariants):
    history = store.create_class("History", 3)
    store.create_student("Ana", "1", math_class.id)

    student = store.edit_student("1", new_class_id=history.id)
    assert student.class_id == history.id
    assert store.classes[0].occupied == 0
    assert store.classes[1].occupied == 1
    assert_invariants(store)


def test_edit_student_unknown_target_skips_transfer_but_keeps_rename(store, math_class, caplog):
    store.create_student("Ana", "1", math_class.id)
    student = store.edit_student("1", new_name="Ana B", new_class_id=42)
    assert student.name == "Ana B"
    assert student.class_id == math_class.id
    assert "Transfer skipped" in caplog.text


def test_edit_student_unknown_target_alone_is_no_change(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    with pytest.raises(NoChangeError):
        store.edit_student("1", new_class_id=42)


def test_edit_student_into_full_class_fails_after_rename(store, math_class, assert_invariants):
    tiny = store.create_class("Tiny", 1)
    store.create_student("Occupant", "9", tiny.id)
    store.create_student("Ana", "1", math_class.id)

    with pytest.raises(ClassFullError):
        store.edit_student("1", new_name="Renamed", new_class_id=tiny.id)

    student = store.students[store.lookup_student_by_registration("1")]
    # The rename was written before the transfer check.
    assert student.name == "Renamed"
    assert student.class_id == math_class.id
    assert_invariants(store)


@pytest.mark.parametrize("keep_current_class", [False, True])
def test_edit_student_without_changes(store, math_class, keep_current_class):
    store.create_student("Ana", "1", math_class.id)
    new_class_id = math_class.id if keep_current_class else 0
    with pytest.raises(NoChangeError):
        store.edit_student("1", new_name="", new_class_id=new_class_id)


def test_edit_unknown_student(store):
    with pytest.raises(NotFoundError):
        store.edit_student("missing", new_name="X")


# --- Deletion ---

def test_delete_student(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    deleted = store.delete_student("1")
    assert not deleted.active
    assert store.active_student_count == 0
    assert store.classes[0].occupied == 0

    with pytest.raises(NotFoundError):
        store.delete_student("1")


def test_delete_class_cascades(store, assert_invariants):
    math = store.create_class("Math", 5)
    art = store.create_class("Art", 5)
    for ra in ("1", "2", "3"):
        store.create_student(f"M{ra}", ra, math.id)
    store.create_student("Artist", "4", art.id)

    cascaded = store.delete_class(math.id)

    assert cascaded == 3
    assert store.active_student_count == 1
    assert store.active_class_count == 1
    assert store.classes[0].occupied == 0
    assert not store.classes[0].active
    assert store.lookup_student_by_registration("4") is not None
    assert_invariants(store)


def test_delete_unknown_class(store):
    with pytest.raises(NotFoundError):
        store.delete_class(7)


def test_delete_class_frees_registration_ids(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    store.delete_class(math_class.id)
    other = store.create_class("Other", 3)
    assert store.create_student("Ana again", "1", other.id).active


# --- Ordering ---

def test_sort_students_by_name(store):
    turma = store.create_class("Mixed", 5)
    store.create_student("Gone", "0", turma.id)
    store.create_student("Zeta", "1", turma.id)
    store.create_student("Alpha", "2", turma.id)
    store.create_student("Dropped", "3", turma.id)
    store.create_student("Mike", "4", turma.id)
    store.delete_student("0")
    store.delete_student("3")

    store.sort_students_by_name()

    active_names = [s.name for s in store.students if s.active]
    assert active_names == ["Alpha", "Mike", "Zeta"]
    assert store.lookup_student_by_registration("2") is not None


def test_sort_keeps_counters_and_handles_duplicates(store, assert_invariants):
    turma = store.create_class("Dupes", 5)
    for ra, name in enumerate(["Bob", "Al", "Bob", "Al"]):
        store.create_student(name, str(ra), turma.id)
    store.sort_students_by_name()
    assert [s.name for s in store.students if s.active] == ["Al", "Al", "Bob", "Bob"]
    assert_invariants(store)


# --- Listing & reports ---

def test_list_active_classes_is_restartable_and_read_only(store):
    store.create_class("A", 3)
    store.create_class("B", 3)
    store.delete_class(1)

    view = store.list_active_classes()
    first_pass = [c.name for c in view]
    second_pass = [c.name for c in view]
    assert first_pass == second_pass == ["B"]

    for turma in view:
        turma.name = "hacked"
    assert store.classes[1].name == "B"


def test_list_active_classes_empty(store):
    assert list(store.list_active_classes()) == []


@pytest.mark.parametrize("scores, status", [
    ((7, 7, 7), StudentStatus.APPROVED),
    ((5, 5, 5), StudentStatus.REMEDIAL),
    ((6.9, 6.9, 6.9), StudentStatus.REMEDIAL),
    ((4.9, 5, 5), StudentStatus.FAILED),
])
def test_report_status_thresholds(store, math_class, scores, status):
    store.create_student("Ana", "1", math_class.id)
    store.record_scores("1", *scores, Role.PROFESSOR)
    report = store.generate_class_report(math_class.id)
    assert report.rows[0].status == status


def test_report_only_lists_active_students_of_the_class(store, math_class):
    other = store.create_class("Other", 3)
    store.create_student("Ana", "1", math_class.id)
    store.create_student("Bia", "2", math_class.id)
    store.create_student("Caio", "3", other.id)
    store.delete_student("1")

    report = store.generate_class_report(math_class.id)
    assert [row.registration_id for row in report.rows] == ["2"]
    assert report.class_name == "Math"
    assert (report.capacity, report.occupied) == (2, 1)


def test_report_for_unknown_class(store):
    with pytest.raises(NotFoundError):
        store.generate_class_report(3)


# --- Invariants under random operation sequences ---

@pytest.mark.parametrize("seed", range(10))
def test_invariants_hold_for_random_sequences(seed, assert_invariants):
    rng = random.Random(seed)
    store = RecordStore(max_classes=4, max_students=12, name_max_length=49, ra_max_length=9)

    for _ in range(300):
        action = rng.choice(["class", "student", "student", "drop", "drop_class", "edit"])
        try:
            if action == "class":
                store.create_class(f"C{rng.randint(0, 99)}", rng.randint(1, 4))
            elif action == "student":
                store.create_student(f"S{rng.randint(0, 99)}", str(rng.randint(0, 20)), rng.randint(1, 4))
            elif action == "drop":
                store.delete_student(str(rng.randint(0, 20)))
            elif action == "drop_class":
                store.delete_class(rng.randint(1, 4))
            else:
                store.edit_student(str(rng.randint(0, 20)), rng.choice(["", "New"]), rng.randint(0, 5))
        except RecordStoreError:
            pass
        assert_invariants(store)


def test_snapshot_round_trip_preserves_inactive_slots(store, math_class):
    store.create_student("Ana", "1", math_class.id)
    store.delete_student("1")

    restored = RecordStore.from_snapshot(store.to_snapshot())
    assert restored.students[0].name == "Ana"
    assert not restored.students[0].active
    assert restored.active_class_count == 1
    assert restored.max_students == store.max_students
