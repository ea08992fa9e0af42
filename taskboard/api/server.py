"""
Taskboard Server — Repository API over HTTP
===========================================
FastAPI application exposing the task resource consumed by the UI.

Launch:
    taskboard serve                 # Via CLI (uvicorn)

Endpoints:
    GET    /api/tasks               → all tasks (unordered)
    POST   /api/tasks               → create {title, description, dueDate}
    PUT    /api/tasks               → update {id, ...fields}
    DELETE /api/tasks               → delete {id}
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.adapters.memory.task_repo import InMemoryTaskRepository
from taskboard.adapters.sql.database import Database
from taskboard.adapters.sql.task_repo import SqlTaskRepository
from taskboard.adapters.system.id_provider_uuid import UuidIdProvider
from taskboard.api.schemas import TaskCreateIn, TaskDeleteIn, TaskOut, TaskUpdateIn
from taskboard.config import Settings, get_settings
from taskboard.domain.errors import (
    PersistenceError,
    TaskAlreadyExistsError,
    TaskNotFoundError,
    TaskValidationError,
)
from taskboard.domain.task import TaskId
from taskboard.ports.task_repository import TaskRepository
from taskboard.services.task_service import TaskService

logger = logging.getLogger(__name__)

MEMORY_URL_PREFIX = "memory://"


# ─────────────────────────────────────────────────────────────
#  Wiring
# ─────────────────────────────────────────────────────────────

def build_repository(database_url: Optional[str]) -> tuple[TaskRepository, Optional[Database]]:
    """Wybiera adapter na podstawie connection stringa.
    - memory://  -> InMemory (bez trwałości)
    - cokolwiek innego (także brak) -> SQL; brak/niepoprawny URL wyjdzie przy connect()
    """
    if database_url and database_url.startswith(MEMORY_URL_PREFIX):
        return InMemoryTaskRepository(), None
    database = Database(database_url)
    return SqlTaskRepository(database), database


def get_service(request: Request) -> TaskService:
    return request.app.state.service


# ─────────────────────────────────────────────────────────────
#  Routes — REST API
# ─────────────────────────────────────────────────────────────

router = APIRouter(prefix="/api")


@router.get("/tasks", response_model=list[TaskOut])
def list_tasks(service: TaskService = Depends(get_service)):
    """Return all tasks; the client imposes display order."""
    return [TaskOut.from_task(t) for t in service.list_tasks()]


@router.post("/tasks", response_model=TaskOut, status_code=201)
def create_task(payload: TaskCreateIn, service: TaskService = Depends(get_service)):
    task = service.create_task(payload.title, payload.description, payload.due_date)
    return TaskOut.from_task(task)


@router.put("/tasks", response_model=TaskOut)
def update_task(payload: TaskUpdateIn, service: TaskService = Depends(get_service)):
    """Apply the fields present in the body to the task with `id`."""
    changes = payload.model_dump(exclude_unset=True, exclude={"id"})
    task = service.update_task(TaskId(payload.id), **changes)
    return TaskOut.from_task(task)


@router.delete("/tasks")
def delete_task(payload: TaskDeleteIn, service: TaskService = Depends(get_service)):
    service.remove_task(TaskId(payload.id))
    return {"id": payload.id, "deleted": True}


# ─────────────────────────────────────────────────────────────
#  Error mapping
# ─────────────────────────────────────────────────────────────

def _install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TaskNotFoundError)
    async def _not_found(request: Request, exc: TaskNotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(TaskValidationError)
    async def _invalid(request: Request, exc: TaskValidationError):
        return JSONResponse(status_code=400, content={"error": str(exc), "field": exc.field})

    @app.exception_handler(TaskAlreadyExistsError)
    async def _conflict(request: Request, exc: TaskAlreadyExistsError):
        return JSONResponse(status_code=409, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError):
        details = [
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"error": "Niepoprawne dane zadania", "details": details})

    @app.exception_handler(PersistenceError)
    async def _persistence(request: Request, exc: PersistenceError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Request failed"})


# ─────────────────────────────────────────────────────────────
#  App factory
# ─────────────────────────────────────────────────────────────

def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TaskRepository] = None,
) -> FastAPI:
    """Build the web process.

    The database connection is created here, connected once in the lifespan
    startup and disposed on shutdown. Passing `repository` skips the database.
    """
    database: Optional[Database] = None
    if repository is None:
        settings = settings or get_settings()
        repository, database = build_repository(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            database.connect()
        yield
        if database is not None:
            database.close()

    app = FastAPI(title="Taskboard", version="1.0.0", lifespan=lifespan)
    app.state.database = database
    app.state.service = TaskService(repository, UuidIdProvider())

    app.include_router(router)
    _install_exception_handlers(app)
    return app
