from __future__ import annotations
from pathlib import Path
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from taskboard.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Połączenie z bazą (adapters/sql/database.py).
# ==========================================================
# - Jeden obiekt `Database` na proces; tworzy go serwer (create_app) i wstrzykuje
#   do repozytorium. Nie ma globalnego singletona na poziomie modułu.
# - `connect()` jest idempotentne: pierwsze wywołanie tworzy Engine i schemat,
#   kolejne zwracają zapamiętany Engine bez efektów ubocznych.
# - Brak retry; błąd połączenia to PersistenceError (z oryginałem w __cause__).
# - Brak ochrony przed równoległym pierwszym connect() (jeden proces, start serwera).


class Database:
    def __init__(self, url: str | Path | None) -> None:
        """
        url: np. 'sqlite:///data/tasks.db', 'postgresql+psycopg://...' lub Path do pliku SQLite
        """
        if isinstance(url, Path):
            self.url = f"sqlite:///{url}"
        else:
            self.url = url
        self._engine: db.Engine | None = None

        self.meta = db.MetaData()
        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("task_id", db.String, primary_key=True),
            db.Column("title", db.String, nullable=False),
            db.Column("description", db.String, nullable=False),
            db.Column("due_date", db.Date, nullable=False),
            db.Column("completed", db.Boolean, nullable=False, default=False),
        )

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> db.Engine:
        """Zwraca Engine; przy pierwszym wywołaniu łączy się i tworzy tabelę, jeśli nie istnieje.

        :raises PersistenceError: Brak connection stringa, niepoprawny URL lub baza niedostępna.
        """
        if self.is_connected:
            return self._engine

        if not self.url:
            raise PersistenceError("Brak connection stringa (ustaw TASKBOARD_DATABASE_URL)")

        engine = None
        try:
            engine = db.create_engine(self.url)
            self.meta.create_all(engine)
        except SQLAlchemyError as e:
            if engine is not None:
                engine.dispose()
            raise PersistenceError(f"Nie mozna polaczyc z baza: {e}") from e

        self._engine = engine
        logger.info("Database connected url=%s", engine.url.render_as_string(hide_password=True))
        return engine

    def close(self) -> None:
        """Zamyka pulę połączeń; wywołuje tylko właściciel (lifespan serwera)."""
        if not self.is_connected:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Database connection closed")
