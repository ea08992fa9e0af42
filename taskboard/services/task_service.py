from taskboard.ports.task_repository import TaskRepository
from taskboard.ports.id_provider import IdProvider
from taskboard.domain.task import Task, TaskId, EDITABLE_FIELDS
from taskboard.domain.errors import TaskValidationError, TaskNotFoundError
from dataclasses import replace
from datetime import date, datetime
from typing import Any
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/task_service.py) — przypadki użycia.
# ==========================================================
# Rola:
# - Orkiestracja logiki aplikacyjnej nad portem `TaskRepository`.
# - Walidacje danych wejściowych (obecność pól, typy przy aktualizacji).
# - Tworzenie/aktualizacja obiektów domenowych (Task), bez znajomości technologii.
#
# Zasady:
# - Serwis korzysta wyłącznie z portów (repozytoriów); nie dotyka adapterów.
# - Błędy domenowe:
#     * Walidacje (np. pusty tytuł) → `TaskValidationError`.
#     * Brak wpisu przy aktualizacji/usunięciu → `TaskNotFoundError`.
# - Modele domenowe są niemutowalne (`frozen=True`) — zmiana = nowa instancja i `repo.update`.


def _require_text(field: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise TaskValidationError(field, "Pole nie moze byc puste")
    return value


def _require_date(value: Any) -> date:
    # datetime dziedziczy po date, a nam potrzebna czysta data kalendarzowa
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TaskValidationError("due_date", "Termin jest wymagany (data YYYY-MM-DD)")
    return value


class TaskService:
    """
    Serwis przypadków użycia dla zadań.

    :param repo: Implementacja portu TaskRepository.
    :param id_provider: Źródło identyfikatorów dla nowych zadań.
    """
    def __init__(self, repo: TaskRepository, id_provider: IdProvider) -> None:
        self.repo = repo
        self.id_provider = id_provider

    def create_task(self, title, description, due_date) -> Task:
        """
            Tworzy nowe zadanie i zapisuje je w repozytorium.

            - Walidacja: `title`, `description` i `due_date` są wymagane
            (`TaskValidationError(<pole>, "...")`).
            - `task_id` z `IdProvider`, `completed=False`.

            :return: Utworzony obiekt `Task`.
            :raises TaskValidationError: Gdy któreś z pól jest puste.
        """
        title = _require_text("title", title)
        description = _require_text("description", description)
        due_date = _require_date(due_date)

        task = Task(
            task_id=TaskId(self.id_provider.new_id()),
            title=title,
            description=description,
            due_date=due_date,
        )
        self.repo.add(task)
        logger.info("Task created id=%s due=%s", task.task_id, task.due_date)
        return task

    def list_tasks(self) -> list[Task]:
        """Zwraca wszystkie zadania; kolejność wyświetlania ustala klient."""
        return list(self.repo.list_all())

    def get_task(self, task_id: TaskId) -> Task:
        """
            Zwraca pojedyncze zadanie o wskazanym identyfikatorze.

            :raises TaskNotFoundError: Gdy nie znaleziono zadania.
        """
        task = self.repo.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def update_task(self, task_id: TaskId, **changes: Any) -> Task:
        """
            Częściowa aktualizacja zadania.

            - Dozwolone pola: title, description, due_date, completed (dowolny podzbiór).
            - Pola nieprzekazane pozostają bez zmian.
            - Walidacja następuje przed odczytem z repozytorium.

            :raises TaskValidationError: Nieznane pole, puste pole tekstowe, zły typ.
            :raises TaskNotFoundError: Gdy zadanie o `task_id` nie istnieje.
            :return: Zaktualizowany obiekt `Task`.
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise TaskValidationError(", ".join(sorted(unknown)), "Nieobslugiwane pole")

        cleaned: dict[str, Any] = {}
        for field in ("title", "description"):
            if field in changes:
                cleaned[field] = _require_text(field, changes[field])
        if "due_date" in changes:
            cleaned["due_date"] = _require_date(changes["due_date"])
        if "completed" in changes:
            if not isinstance(changes["completed"], bool):
                raise TaskValidationError("completed", "Wymagana wartosc logiczna")
            cleaned["completed"] = changes["completed"]

        task = self.get_task(task_id)
        updated = replace(task, **cleaned)
        self.repo.update(updated)
        logger.info("Task updated id=%s fields=%s", task_id, sorted(cleaned))
        return updated

    def remove_task(self, task_id: TaskId) -> None:
        """
            Usuwa zadanie z repozytorium.

            - Deleguje do `repo.remove(task_id)`.
            - Repozytorium zgłasza `TaskNotFoundError`, jeśli brak rekordu.
        """
        self.repo.remove(task_id)
        logger.info("Task removed id=%s", task_id)
