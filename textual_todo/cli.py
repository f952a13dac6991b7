from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .todo_store import TodoStore

app = typer.Typer(add_completion=False, help="Textual Todo")
console = Console()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: Optional[Path], log_level: str) -> None:
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        console.print(f"[red]Unknown log level: {log_level}[/red]")
        raise typer.Exit(2)

    # The terminal belongs to the UI, so logs only go to a file when asked.
    if log_file is None:
        return

    logger = logging.getLogger("textual_todo")
    logger.setLevel(level)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.info(f"Logging to {log_file} at {log_level.upper()}")


@app.command()  # type: ignore[misc]
def main(
    empty: bool = typer.Option(
        False, help="Start with an empty list instead of the sample todos"
    ),
    theme: Optional[str] = typer.Option(
        None, help="Textual theme for this session, e.g. textual-light"
    ),
    log_file: Optional[Path] = typer.Option(
        None, help="Write logs to this file (the UI owns the terminal)"
    ),
    log_level: str = typer.Option("INFO", help="Log level for --log-file"),
) -> None:
    """Start the todo list UI."""
    _configure_logging(log_file, log_level)

    try:
        from .ui.app import run_todo_app
    except Exception:
        console.print(
            "[red]Textual UI is not available. Please install 'textual' to run the todo UI.[/red]"
        )
        raise typer.Exit(1)

    store = TodoStore(seed=() if empty else None)
    run_todo_app(store=store, theme=theme)
