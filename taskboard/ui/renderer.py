from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterable
from rich.console import Group
from rich.panel import Panel
from rich.markup import escape
from rich.text import Text
from taskboard.ui.colors import TaskColor
from taskboard.domain.task import Task
from taskboard.ui.form import TaskFormController


### COMMENTS
# ==========================================================
# Renderer listy i formularza (Rich): czysta projekcja stanu.
# ==========================================================
# - Zero własnego stanu: karta zależy wyłącznie od Task, panel formularza od kontrolera.
# - Akcje karty: Mark Complete/Undo, Edit (wyłączone dla ukończonych), Delete.


@dataclass(frozen=True)
class CardAction:
    name: str
    label: str
    enabled: bool = True


def card_actions(task: Task) -> list[CardAction]:
    return [
        CardAction("toggle", "Undo" if task.completed else "Mark Complete"),
        CardAction("edit", "Edit", enabled=not task.completed),
        CardAction("delete", "Delete"),
    ]


def format_due(value: date) -> str:
    return value.isoformat()


def format_picked_date(value: date | None) -> str:
    """Etykieta pola terminu w formularzu, np. 'June 01, 2024'."""
    if value is None:
        return "Pick a date"
    return value.strftime("%B %d, %Y")


def _action_markup(action: CardAction, position: int) -> str:
    if not action.enabled:
        return f"{TaskColor.STRIKE_DIM}{action.label}{TaskColor.RESET}"
    color = {
        "toggle": TaskColor.GREEN,
        "edit": TaskColor.YELLOW,
        "delete": TaskColor.RED,
    }[action.name]
    return f"{color}{action.label}{TaskColor.RESET} [dim]({action.name} {position})[/dim]"


def render_task_card(task: Task, position: int) -> Panel:
    """Karta zadania: tytuł (+ ✔ dla ukończonych), termin, opis, linia akcji."""
    title = Text(f"{position}. {task.title}", style="bold")
    if task.completed:
        title.append(" ✔", style="green")

    actions = "   ".join(_action_markup(a, position) for a in card_actions(task))
    body = Group(
        Text(task.description),
        Text(""),
        Text.from_markup(actions),
    )
    return Panel(
        body,
        title=title,
        title_align="left",
        subtitle=f"Due: {format_due(task.due_date)}",
        subtitle_align="right",
        border_style="dim" if task.completed else "cyan",
    )


def render_task_list(tasks: Iterable[Task]) -> Group | Text:
    cards = [render_task_card(t, i) for i, t in enumerate(tasks, start=1)]
    if not cards:
        return Text("Brak zadań. Dodaj pierwsze w formularzu.", style="dim")
    return Group(*cards)


def render_form(form: TaskFormController) -> Panel:
    """Panel formularza: nagłówek i etykieta przycisku zależą od trybu."""
    header = "Edit task" if form.is_editing else "Create a Task"
    submit_label = "Edit" if form.is_editing else "Add Task"

    def _field(label: str, value: str, placeholder: str) -> str:
        shown = escape(value) if value else f"{TaskColor.DIM}{placeholder}{TaskColor.RESET}"
        return f"[bold]{label}:[/bold] {shown}"

    lines = [
        _field("Title", form.title, "Task Title"),
        _field("Description", form.description, "Task Description"),
        f"[bold]Due Date:[/bold] {format_picked_date(form.due_date)}",
        "",
        f"[bold]\\[submit][/bold] {submit_label}"
        + ("   [bold]\\[cancel][/bold] Cancel Edit" if form.is_editing else ""),
    ]
    return Panel.fit(
        "\n".join(lines),
        title=header,
        border_style="yellow" if form.is_editing else "green",
    )
