from datetime import date

from rich.console import Console

from taskboard.ui.form import TaskFormController
from taskboard.ui.renderer import card_actions, render_form, render_task_card, render_task_list
from taskboard.ui.store import TaskStore
from conftest import make_task


def as_text(renderable) -> str:
    console = Console(record=True, width=100, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_open_task_actions():
    actions = {a.name: a for a in card_actions(make_task("a"))}

    assert actions["toggle"].label == "Mark Complete"
    assert actions["edit"].enabled is True
    assert actions["delete"].enabled is True


def test_edit_is_disabled_for_completed_task():
    actions = {a.name: a for a in card_actions(make_task("a", completed=True))}

    assert actions["toggle"].label == "Undo"
    assert actions["toggle"].enabled is True
    assert actions["edit"].enabled is False


def test_card_shows_task_fields():
    text = as_text(render_task_card(make_task("a", title="Buy milk", due=date(2024, 6, 1)), 1))

    assert "1. Buy milk" in text
    assert "Due: 2024-06-01" in text
    assert "desc" in text
    assert "Mark Complete" in text
    assert "(edit 1)" in text


def test_completed_card_has_no_edit_hint():
    text = as_text(render_task_card(make_task("a", completed=True), 3))

    assert "✔" in text
    assert "Undo" in text
    assert "(edit 3)" not in text


def test_empty_list_placeholder():
    assert "Brak zadań" in as_text(render_task_list([]))


def test_list_numbers_cards_in_order():
    text = as_text(render_task_list([make_task("a", title="First"), make_task("b", title="Second")]))
    assert text.index("1. First") < text.index("2. Second")


def test_form_panel_in_create_mode(fake_api):
    form = TaskFormController(fake_api, TaskStore(fake_api))

    text = as_text(render_form(form))

    assert "Create a Task" in text
    assert "Pick a date" in text
    assert "Add Task" in text
    assert "Cancel Edit" not in text


def test_form_panel_in_edit_mode(fake_api):
    form = TaskFormController(fake_api, TaskStore(fake_api))
    form.start_edit(make_task("a", title="[b]Buy milk[/b]", due=date(2024, 6, 1)))

    text = as_text(render_form(form))

    assert "Edit task" in text
    assert "[b]Buy milk[/b]" in text
    assert "June 01, 2024" in text
    assert "Cancel Edit" in text
