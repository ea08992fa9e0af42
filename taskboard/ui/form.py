from __future__ import annotations
from datetime import date
from enum import Enum
import logging
from taskboard.domain.task import Task
from taskboard.domain.errors import DomainError, TaskNotEditableError, TaskValidationError
from taskboard.ports.task_api import TaskApi
from taskboard.ui.store import TaskStore

logger = logging.getLogger(__name__)

FILL_ALL_FIELDS = "Please fill in all fields"


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"

    def __str__(self):
        return self.value


def parse_due_date(value: date | str | None) -> date | None:
    """Zamienia wejście użytkownika na datę; pusty napis to brak daty."""
    if value is None or isinstance(value, date):
        return value
    value = value.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise TaskValidationError("due_date", f"Niepoprawna data '{value}' (oczekiwano YYYY-MM-DD)")


class TaskFormController:
    """
    Formularz tworzenia/edycji zadania.

    Stany:
    - CREATE (start): puste pola, submit → `api.create`, wynik dopisany do store, pola czyszczone.
    - EDIT(task): pola wypełnione z zadania, submit → `api.update(id, title, description, due_date)`,
      wynik podmienia wpis w store, powrót do CREATE.

    Walidacja (wszystkie trzy pola niepuste) odbywa się przed wywołaniem API:
    `TaskValidationError` oznacza, że nie poszło żadne żądanie.
    Błąd API jest logowany, a stan formularza zostaje bez zmian (submit zwraca None).
    """

    def __init__(self, api: TaskApi, store: TaskStore) -> None:
        self.api = api
        self.store = store
        self.mode = FormMode.CREATE
        self.editing: Task | None = None
        self.title = ""
        self.description = ""
        self.due_date: date | None = None

    @property
    def is_editing(self) -> bool:
        return self.mode is FormMode.EDIT

    def set_title(self, value: str) -> None:
        self.title = value

    def set_description(self, value: str) -> None:
        self.description = value

    def set_due_date(self, value: date | str | None) -> None:
        self.due_date = parse_due_date(value)

    def _clear_fields(self) -> None:
        self.title = ""
        self.description = ""
        self.due_date = None

    def reset(self) -> None:
        self._clear_fields()
        self.mode = FormMode.CREATE
        self.editing = None

    def start_edit(self, task: Task) -> None:
        if task.completed:
            raise TaskNotEditableError(task.task_id)
        self.title = task.title
        self.description = task.description
        self.due_date = task.due_date
        self.editing = task
        self.mode = FormMode.EDIT

    def cancel_edit(self) -> None:
        self.reset()

    def _validate(self) -> None:
        if not self.title.strip() or not self.description.strip() or self.due_date is None:
            raise TaskValidationError("form", FILL_ALL_FIELDS)

    def submit(self) -> Task | None:
        self._validate()
        if self.is_editing:
            return self._submit_edit()
        return self._submit_create()

    def _submit_create(self) -> Task | None:
        try:
            task = self.api.create(self.title, self.description, self.due_date)
        except DomainError as e:
            logger.error("Error adding task: %s", e)
            return None
        self.store.add(task)
        self._clear_fields()
        return task

    def _submit_edit(self) -> Task | None:
        try:
            task = self.api.update(
                self.editing.task_id,
                title=self.title,
                description=self.description,
                due_date=self.due_date,
            )
        except DomainError as e:
            logger.error("Error editing task: %s", e)
            return None
        self.store.replace(task)
        self.reset()
        return task
