from __future__ import annotations
from typing import Optional
import sqlalchemy as db
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from taskboard.adapters.sql.database import Database
from taskboard.ports.task_repository import TaskRepository
from taskboard.domain.task import Task, TaskId
from taskboard.domain.errors import TaskAlreadyExistsError, TaskNotFoundError, PersistenceError


class SqlTaskRepository(TaskRepository):
    def __init__(self, database: Database) -> None:
        """
        database: współdzielony obiekt połączenia; repo wywołuje `connect()` przy każdej
        operacji (idempotentne), więc brak połączenia wychodzi przy pierwszym użyciu.
        """
        self.database = database
        self.tasks = database.tasks

    def _engine(self) -> db.Engine:
        return self.database.connect()

    def _to_row(self, task: Task) -> dict:
        return {
            'task_id': str(task.task_id),
            'title': task.title,
            'description': task.description,
            'due_date': task.due_date,
            'completed': bool(task.completed),
        }

    def _from_row(self, row) -> Task:
        return Task(
            task_id=TaskId(row["task_id"]),
            title=row["title"],
            description=row["description"],
            due_date=row["due_date"],
            completed=bool(row["completed"]),
        )

    def add(self, task: Task) -> None:
        stmt = db.insert(self.tasks).values(**self._to_row(task))
        try:
            with self._engine().begin() as conn:
                conn.execute(stmt)
        except IntegrityError:
            # konflikt PK
            raise TaskAlreadyExistsError(task.task_id)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e

    def get(self, task_id: TaskId) -> Optional[Task]:
        stmt = db.select(self.tasks).where(self.tasks.c.task_id == str(task_id))
        try:
            with self._engine().connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if row is None:
            return None
        return self._from_row(row)

    def update(self, task: Task) -> None:
        rec = self._to_row(task)
        stmt = (
            db.update(self.tasks)
            .where(self.tasks.c.task_id == rec.pop("task_id"))
            .values(**rec)
        )
        try:
            with self._engine().begin() as conn:
                affected = conn.execute(stmt).rowcount
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if affected == 0:
            raise TaskNotFoundError(task.task_id)

    def remove(self, task_id: TaskId) -> None:
        stmt = db.delete(self.tasks).where(self.tasks.c.task_id == str(task_id))
        try:
            with self._engine().begin() as conn:
                affected = conn.execute(stmt).rowcount
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if affected == 0:
            raise TaskNotFoundError(task_id)

    def list_all(self) -> list[Task]:
        stmt = db.select(self.tasks)
        try:
            with self._engine().connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        return [self._from_row(r) for r in rows]
