from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from textual.widgets import Input

from ...errors import TodoNotFoundError, TodoValidationError
from ..stats_bar import StatsBar
from ..todo_item import TodoRow
from ..todo_list import TodoList

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..app import TodoApp


class TodoActionsMixin:
    """Route user intents to the store and redraw after each change."""

    def _refresh_todos(self) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#todo_list", TodoList).sync(app.store.items)
            app.query_one("#stats", StatsBar).update_stats(app.store.stats())
        except Exception as e:
            logger.error(f"Error rendering todos: {e}")

    def action_add_todo(self) -> None:
        app = cast("TodoApp", self)
        try:
            todo_input = app.query_one("#todo_input", Input)
        except Exception as e:
            logger.error(f"Todo input is not available: {e}")
            return

        app.store.pending_input = todo_input.value
        try:
            item = app.store.submit()
        except TodoValidationError as e:
            app.notify(str(e), title="Nothing to add", severity="error")
            return

        todo_input.value = ""
        todo_input.focus()
        logger.info(f"Added todo {item.id}")
        self._refresh_todos()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "todo_input":
            cast("TodoApp", self).store.pending_input = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "todo_input":
            event.stop()
            self.action_add_todo()

    def on_todo_row_toggled(self, event: TodoRow.Toggled) -> None:
        app = cast("TodoApp", self)
        try:
            app.store.toggle(event.todo_id)
        except TodoNotFoundError as e:
            logger.warning(f"Ignoring toggle of stale row: {e}")
        self._refresh_todos()

    def on_todo_row_delete_requested(self, event: TodoRow.DeleteRequested) -> None:
        app = cast("TodoApp", self)
        try:
            removed = app.store.delete(event.todo_id)
            logger.info(f"Deleted todo {removed.id}")
        except TodoNotFoundError as e:
            logger.warning(f"Ignoring delete of stale row: {e}")
        self._refresh_todos()
