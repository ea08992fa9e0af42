from __future__ import annotations
import logging
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.rule import Rule
from taskboard.domain.task import Task
from taskboard.domain.errors import TaskNotEditableError, TaskValidationError
from taskboard.ui.form import TaskFormController
from taskboard.ui.renderer import render_form, render_task_list
from taskboard.ui.store import TaskStore

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Jednoekranowe UI w konsoli (ui/app.py).
# ==========================================================
# - Ekran = panel formularza + lista kart; po każdej akcji rysowany od nowa.
# - Jedna linia wejścia = jedno zdarzenie UI (patrz HELP).
# - Błąd walidacji → czerwony panel (blokujący komunikat), żadnego żądania.
# - Błąd API → tylko log (store/form już go zalogowały), stan bez zmian.

HELP = """\
[cyan]title[/] <tekst>       ustaw tytuł
[cyan]desc[/] <tekst>        ustaw opis
[cyan]due[/] <YYYY-MM-DD>    ustaw termin
[cyan]submit[/]              Add Task / Edit (zależnie od trybu)
[cyan]edit[/] <n>            edytuj zadanie nr n
[cyan]cancel[/]              Cancel Edit
[cyan]toggle[/] <n>          Mark Complete / Undo
[cyan]delete[/] <n>          usuń zadanie nr n
[cyan]refresh[/]             pobierz listę ponownie
[cyan]quit[/]                wyjście"""


class TaskboardConsole:
    def __init__(self, store: TaskStore, form: TaskFormController, console: Console | None = None) -> None:
        self.store = store
        self.form = form
        self.console = console or Console()

    def render(self) -> None:
        self.console.print(render_form(self.form))
        self.console.print(Rule("Tasks"))
        self.console.print(render_task_list(self.store.tasks))

    def _validation_panel(self, error: TaskValidationError) -> None:
        self.console.print(Panel.fit(
            f"❌ {escape(error.message)}",
            title="Błąd walidacji",
            border_style="red",
        ))

    def _hint(self, message: str) -> None:
        self.console.print(Panel.fit(
            f"{escape(message)}\n[dim]Wpisz 'help', żeby zobaczyć dostępne komendy[/]",
            title="Podpowiedź",
            border_style="yellow",
        ))

    def _pick(self, arg: str) -> Task | None:
        try:
            position = int(arg)
        except ValueError:
            self._hint(f"Podaj numer zadania z listy, a nie '{arg}'")
            return None
        task = self.store.find(position)
        if task is None:
            self._hint(f"Nie ma zadania nr {position} (na liście: {len(self.store)})")
        return task

    def handle(self, line: str) -> bool:
        """Obsługuje jedną linię wejścia; zwraca False, gdy użytkownik kończy."""
        command, _, arg = line.strip().partition(" ")
        arg = arg.strip()

        match command.lower():
            case "":
                pass
            case "quit" | "exit" | "q":
                return False
            case "help":
                self.console.print(Panel.fit(HELP, title="Komendy", border_style="cyan"))
            case "title":
                self.form.set_title(arg)
            case "desc":
                self.form.set_description(arg)
            case "due":
                try:
                    self.form.set_due_date(arg)
                except TaskValidationError as e:
                    self._validation_panel(e)
            case "submit":
                try:
                    self.form.submit()
                except TaskValidationError as e:
                    self._validation_panel(e)
            case "edit":
                task = self._pick(arg)
                if task is not None:
                    try:
                        self.form.start_edit(task)
                    except TaskNotEditableError:
                        self._hint(f"Zadanie '{task.title}' jest ukończone, najpierw Undo")
            case "cancel":
                self.form.cancel_edit()
            case "toggle":
                task = self._pick(arg)
                if task is not None:
                    self.store.toggle_complete(task)
            case "delete":
                task = self._pick(arg)
                if task is not None:
                    self.store.delete(task)
            case "refresh":
                self.store.refresh()
            case _:
                self._hint(f"Nieznana komenda: {command}")
        return True

    def run(self) -> None:
        self.store.refresh()
        while True:
            self.render()
            try:
                line = Prompt.ask("[bold]taskboard[/]", console=self.console, default="")
            except (EOFError, KeyboardInterrupt):
                break
            if not self.handle(line):
                break
        logger.info("UI session finished")
