from typing import Optional
import logging
import uvicorn
from typer import Option, Typer
from rich.console import Console
from rich.panel import Panel
from taskboard.adapters.http.task_api import HttpTaskApi
from taskboard.api.server import create_app
from taskboard.config import Settings, get_settings
from taskboard.logging_setup import setup_logging
from taskboard.ui.app import TaskboardConsole
from taskboard.ui.form import TaskFormController
from taskboard.ui.store import TaskStore
from dataclasses import replace

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# CLI (Typer + Rich) — punkt wejścia procesu.
# ==========================================================
# Rola:
# - `serve`: uruchamia proces WWW (FastAPI + uvicorn) z Repository API.
# - `ui`: jednoekranowe UI w konsoli, rozmawiające z API po HTTP.
# - Callback: jednorazowy bootstrap ustawień i logowania na starcie procesu.


app = Typer(help="Taskboard: task tracker (web API + console UI)")
console = Console()

settings: Settings | None = None  # ustawimy w callbacku


@app.callback()
def main(
    log_level: Optional[str] = Option(None, "--log-level", "-l", help="Poziom logów konsoli (np. DEBUG)"),
) -> None:
    """Bootstrap ustawień i logowania na starcie procesu CLI."""
    global settings
    settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=(log_level or settings.log_level).upper())


def build_ui(api_url: str) -> TaskboardConsole:
    """Składa UI: klient HTTP → store → formularz → konsola."""
    api = HttpTaskApi(base_url=api_url)
    store = TaskStore(api)
    form = TaskFormController(api, store)
    return TaskboardConsole(store, form, console)


@app.command("serve")
def serve(
    host: Optional[str] = Option(None, "--host", help="Adres nasłuchu (domyślnie TASKBOARD_HOST)"),
    port: Optional[int] = Option(None, "--port", "-p", help="Port (domyślnie TASKBOARD_PORT)"),
    database_url: Optional[str] = Option(None, "--database-url", "-d", help="Connection string (nadpisuje TASKBOARD_DATABASE_URL)"),
) -> None:
    """
    Uruchamia serwer Repository API.

    Flow:
    - Ustawienia z env, nadpisane opcjami.
    - create_app(settings) → uvicorn.run (połączenie z bazą w lifespan).
    """
    cfg = replace(
        settings,
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        database_url=database_url if database_url is not None else settings.database_url,
    )
    logger.info("Starting server on %s:%s", cfg.host, cfg.port)
    console.print(Panel.fit(
        f"🚀 Taskboard API\n[cyan]URL:[/cyan] http://{cfg.host}:{cfg.port}/api/tasks",
        title="Start",
        border_style="green",
    ))
    uvicorn.run(create_app(cfg), host=cfg.host, port=cfg.port, log_level=cfg.log_level.lower(), log_config=None)


@app.command("ui")
def ui(
    url: Optional[str] = Option(None, "--url", "-u", help="Adres serwera API (domyślnie TASKBOARD_API_URL)"),
) -> None:
    """
    Uruchamia interaktywne UI w konsoli.

    Flow:
    - build_ui(url) → pobranie listy → pętla komend (help pokazuje listę).
    """
    taskboard = build_ui((url or settings.api_url).rstrip("/"))
    try:
        taskboard.run()
    finally:
        taskboard.store.api.close()
    console.print(Panel.fit("🏁 Do zobaczenia", border_style="cyan"))


if __name__ == "__main__":
    app()
