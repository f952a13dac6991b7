from __future__ import annotations

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Input

from ..config import ConfigManager
from ..todo_store import TodoStore
from .actions.general import GeneralActionsMixin
from .actions.theme import ThemeActionsMixin
from .actions.todo import TodoActionsMixin
from .app_header import AppHeader
from .commands import TodoCommands
from .stats_bar import StatsBar
from .todo_list import TodoList

logger = logging.getLogger(__name__)


class TodoApp(
    ThemeActionsMixin,
    TodoActionsMixin,
    GeneralActionsMixin,
    App,  # type: ignore[misc]
):
    """Terminal front end for a single ``TodoStore``."""

    store: TodoStore
    config: ConfigManager

    TITLE = "📝 My Todo List"
    SUB_TITLE = "Stay organized and productive"

    COMMANDS = App.COMMANDS | {TodoCommands}

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+n", "focus_input", "New", show=True),
        Binding("f1", "help_panel", "Help", show=True),
    ]

    def __init__(
        self,
        store: Optional[TodoStore] = None,
        config: Optional[ConfigManager] = None,
        theme: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.store = store if store is not None else TodoStore()
        self.config = config if config is not None else ConfigManager()
        self._apply_saved_theme(theme)

    def on_key(self, event: events.Key) -> None:
        if event.key == "ctrl+q":
            event.prevent_default()
            event.stop()
            self.exit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add_button":
            event.stop()
            self.action_add_todo()
        elif event.button.id == "header_quit_button":
            event.stop()
            self.exit()

    def compose(self) -> ComposeResult:
        yield AppHeader(self.TITLE, self.SUB_TITLE, id="hdr")
        yield Vertical(
            Horizontal(
                Input(
                    value=self.store.pending_input,
                    placeholder="Add a new todo...",
                    id="todo_input",
                ),
                Button("Add", id="add_button", variant="primary"),
                id="input_row",
            ),
            StatsBar(self.store.stats(), id="stats"),
            TodoList(self.store.items, id="todo_list"),
            id="main_area",
        )
        yield Footer(id="footer")

    def on_mount(self) -> None:
        try:
            self.query_one("#todo_input", Input).focus()
        except Exception as e:
            logger.error(f"Error focusing todo input on mount: {e}")


def run_todo_app(
    store: Optional[TodoStore] = None, theme: Optional[str] = None
) -> None:
    TodoApp(store=store, theme=theme).run()
