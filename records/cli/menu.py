# /academic-records/records/cli/menu.py

"""
The interactive, role-gated menu.

Options a role cannot use are hidden from it; the service facade rejects
them again if they are requested anyway. Every successful mutation is
followed by a save, and leaving the menu saves one last time.
"""

from typing import Callable, Dict, List, NamedTuple

from ..core.exceptions import InvalidInputError
from ..core.logger import get_logger
from ..models.class_model import ClassCreate
from ..models.result_model import OperationResult
from ..models.student_model import StudentCreate, StudentUpdate
from ..models.user_model import Role
from ..services import record_service, report_service
from ..services.database_service import DatabaseService
from ..services.record_store import RecordStore
from .prompts import InputFn, read_float, read_int, read_text

logger = get_logger(__name__)


class MenuOption(NamedTuple):
    key: str
    label: str
    minimum_role: Role
    handler_name: str


MENU_OPTIONS: List[MenuOption] = [
    MenuOption("1", "List active classes", Role.STUDENT, "list_classes"),
    MenuOption("2", "Class report", Role.STUDENT, "show_report"),
    MenuOption("3", "Create class", Role.PROFESSOR, "create_class"),
    MenuOption("4", "Enroll student", Role.PROFESSOR, "create_student"),
    MenuOption("5", "Record scores", Role.PROFESSOR, "record_scores"),
    MenuOption("6", "Export class report (CSV)", Role.PROFESSOR, "export_report"),
    MenuOption("7", "Edit student", Role.ADMIN, "edit_student"),
    MenuOption("8", "Delete student", Role.ADMIN, "delete_student"),
    MenuOption("9", "Delete class", Role.ADMIN, "delete_class"),
    MenuOption("10", "Sort students by name", Role.ADMIN, "sort_students"),
]

EXIT_KEY = "0"


class MenuSession:
    def __init__(
        self,
        store: RecordStore,
        db: DatabaseService,
        role: Role,
        input_fn: InputFn = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.store = store
        self.db = db
        self.role = role
        self.input = input_fn
        self.output = output_fn

    def available_options(self) -> Dict[str, MenuOption]:
        return {option.key: option for option in MENU_OPTIONS if self.role >= option.minimum_role}

    def render_menu(self) -> str:
        lines = ["", f"=== ACADEMIC RECORDS ({self.role.name}) ==="]
        lines += [f"{option.key}. {option.label}" for option in self.available_options().values()]
        lines.append(f"{EXIT_KEY}. Exit")
        return "\n".join(lines)

    def run(self) -> None:
        while True:
            self.output(self.render_menu())
            try:
                choice = read_text(self.input, "Choose an option: ")
            except (EOFError, KeyboardInterrupt):
                # End of input behaves like choosing Exit.
                self.output("")
                break
            if choice == EXIT_KEY:
                break
            option = self.available_options().get(choice)
            if option is None:
                self.output("Invalid option.")
                continue
            try:
                getattr(self, option.handler_name)()
            except InvalidInputError as e:
                self.output(f"ERROR: {e.message}")

        self._persist()
        self.output("Data saved. Goodbye!")

    # --- Helpers ---

    def _persist(self) -> None:
        if not self.db.save(self.store):
            self.output("WARNING: changes are kept in memory but could not be saved to disk.")

    def _report(self, result: OperationResult) -> None:
        prefix = "SUCCESS" if result.success else "ERROR"
        self.output(f"{prefix}: {result.message}")
        if result.success:
            self._persist()

    # --- Handlers ---

    def list_classes(self) -> None:
        self.output(report_service.format_class_list(self.store.list_active_classes()))

    def show_report(self) -> None:
        class_id = read_int(self.input, "Class ID: ")
        report = record_service.get_class_report(class_id, self.store)
        if report is None:
            self.output(f"ERROR: Class ID {class_id} not found or inactive.")
            return
        self.output(report_service.format_report(report))

    def create_class(self) -> None:
        name = read_text(self.input, "Class name: ")
        capacity = read_int(self.input, "Number of seats: ")
        self._report(record_service.create_class(ClassCreate(name=name, capacity=capacity), self.store, self.role))

    def create_student(self) -> None:
        self.list_classes()
        name = read_text(self.input, "Student name: ")
        registration_id = read_text(self.input, "RA: ")
        class_id = read_int(self.input, "Class ID: ")
        student = StudentCreate(name=name, registration_id=registration_id, class_id=class_id)
        self._report(record_service.create_student(student, self.store, self.role))

    def record_scores(self) -> None:
        registration_id = read_text(self.input, "RA: ")
        s1 = read_float(self.input, "Score 1: ")
        s2 = read_float(self.input, "Score 2: ")
        s3 = read_float(self.input, "Score 3: ")
        self._report(record_service.record_scores(registration_id, s1, s2, s3, self.store, self.role))

    def export_report(self) -> None:
        class_id = read_int(self.input, "Class ID: ")
        report = record_service.get_class_report(class_id, self.store)
        if report is None:
            self.output(f"ERROR: Class ID {class_id} not found or inactive.")
            return
        path = read_text(self.input, "Output file [report.csv]: ") or "report.csv"
        try:
            with open(path, "w", encoding="utf-8", newline="") as handle:
                handle.write(report_service.export_report_as_csv(report))
        except OSError as e:
            logger.error(f"Could not write report to {path}: {e}")
            self.output(f"ERROR: could not write '{path}'.")
            return
        self.output(f"SUCCESS: report for class {class_id} written to '{path}'.")

    def edit_student(self) -> None:
        registration_id = read_text(self.input, "RA of the student to edit: ")
        new_name = read_text(self.input, "New name (blank keeps current): ")
        raw_class = read_text(self.input, "New class ID (0 keeps current): ")
        try:
            new_class_id = int(raw_class) if raw_class else 0
        except ValueError:
            raise InvalidInputError(f"'{raw_class}' is not a whole number.")
        update = StudentUpdate(name=new_name, class_id=new_class_id)
        result = record_service.edit_student(registration_id, update, self.store, self.role)
        self.output(f"{'SUCCESS' if result.success else 'ERROR'}: {result.message}")
        # A rename may already be in memory even when the transfer failed.
        self._persist()

    def delete_student(self) -> None:
        registration_id = read_text(self.input, "RA of the student to delete: ")
        self._report(record_service.delete_student(registration_id, self.store, self.role))

    def delete_class(self) -> None:
        class_id = read_int(self.input, "ID of the class to delete: ")
        self._report(record_service.delete_class(class_id, self.store, self.role))

    def sort_students(self) -> None:
        self._report(record_service.sort_students(self.store, self.role))
