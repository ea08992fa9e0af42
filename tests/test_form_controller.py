from datetime import date
import logging

import pytest

from taskboard.domain.errors import TaskApiError, TaskNotEditableError, TaskValidationError
from taskboard.ui.form import FILL_ALL_FIELDS, FormMode, TaskFormController, parse_due_date
from taskboard.ui.store import TaskStore


@pytest.fixture
def store(fake_api):
    return TaskStore(fake_api)


@pytest.fixture
def form(fake_api, store):
    return TaskFormController(fake_api, store)


def fill(form, title="Buy milk", description="2% milk", due="2024-06-01"):
    form.set_title(title)
    form.set_description(description)
    form.set_due_date(due)


def test_starts_in_create_mode_with_empty_fields(form):
    assert form.mode is FormMode.CREATE
    assert form.editing is None
    assert (form.title, form.description, form.due_date) == ("", "", None)


@pytest.mark.parametrize(
    "title, description, due",
    [("", "2% milk", "2024-06-01"), ("Buy milk", "  ", "2024-06-01"), ("Buy milk", "2% milk", "")],
)
def test_submit_with_empty_field_makes_no_request(form, store, fake_api, title, description, due):
    fill(form, title, description, due)

    with pytest.raises(TaskValidationError) as exc:
        form.submit()

    assert exc.value.message == FILL_ALL_FIELDS
    assert fake_api.calls == []
    assert store.tasks == ()


def test_create_appends_and_resets_fields(form, store, fake_api):
    fill(form)

    created = form.submit()

    assert created is not None
    assert list(store.tasks) == [created]
    assert form.mode is FormMode.CREATE
    assert (form.title, form.description, form.due_date) == ("", "", None)

    listed = fake_api.list()
    assert len(listed) == 1
    assert listed[0].title == "Buy milk"
    assert listed[0].description == "2% milk"
    assert listed[0].due_date == date(2024, 6, 1)
    assert listed[0].completed is False


def test_create_keeps_sort_invariant(form, store):
    fill(form, title="late", due="2024-07-01")
    form.submit()
    fill(form, title="early", due="2024-06-01")
    form.submit()

    assert [t.title for t in store.tasks] == ["early", "late"]


def test_edit_prefills_fields_and_replaces_entry(form, store, fake_api):
    task = fake_api.seed("Buy milk", date(2024, 6, 1), description="2% milk")
    store.refresh()

    form.start_edit(task)
    assert form.mode is FormMode.EDIT
    assert form.editing == task
    assert (form.title, form.description, form.due_date) == ("Buy milk", "2% milk", date(2024, 6, 1))

    form.set_title("Buy oat milk")
    edited = form.submit()

    assert edited.task_id == task.task_id
    assert edited.title == "Buy oat milk"
    assert list(store.tasks) == [edited]
    assert form.mode is FormMode.CREATE
    assert form.editing is None
    assert form.title == ""


def test_completed_task_cannot_be_edited(form, fake_api):
    done = fake_api.seed("Done", date(2024, 6, 1), completed=True)

    with pytest.raises(TaskNotEditableError):
        form.start_edit(done)

    assert form.mode is FormMode.CREATE
    assert form.title == ""


def test_cancel_edit_returns_to_create_and_clears(form, fake_api):
    task = fake_api.seed("A", date(2024, 6, 1))
    form.start_edit(task)

    form.cancel_edit()

    assert form.mode is FormMode.CREATE
    assert form.editing is None
    assert (form.title, form.description, form.due_date) == ("", "", None)


def test_api_failure_on_create_keeps_state(form, store, fake_api, caplog):
    fill(form)
    fake_api.error = TaskApiError("connection refused")

    with caplog.at_level(logging.ERROR):
        assert form.submit() is None

    assert "Error adding task" in caplog.text
    assert store.tasks == ()
    assert (form.title, form.description, form.due_date) == ("Buy milk", "2% milk", date(2024, 6, 1))


def test_api_failure_on_edit_stays_in_edit_mode(form, store, fake_api, caplog):
    task = fake_api.seed("A", date(2024, 6, 1))
    store.refresh()
    form.start_edit(task)
    form.set_title("B")
    fake_api.error = TaskApiError("boom", status_code=500)

    with caplog.at_level(logging.ERROR):
        assert form.submit() is None

    assert "Error editing task" in caplog.text
    assert form.mode is FormMode.EDIT
    assert form.title == "B"
    assert list(store.tasks) == [task]


def test_parse_due_date():
    assert parse_due_date("2024-06-01") == date(2024, 6, 1)
    assert parse_due_date(date(2024, 6, 1)) == date(2024, 6, 1)
    assert parse_due_date("  ") is None
    assert parse_due_date(None) is None
    with pytest.raises(TaskValidationError):
        parse_due_date("01/06/2024")
