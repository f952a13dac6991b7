from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from ..todo_store import TodoItem
from .todo_item import TodoRow

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "No todos yet. Add one to get started!"


class TodoList(VerticalScroll):
    """Scrollable column of ``TodoRow`` widgets in store order."""

    def __init__(self, items: Iterable[TodoItem] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self._initial: List[TodoItem] = list(items)
        self._rows: Dict[int, TodoRow] = {}

    def compose(self) -> ComposeResult:
        empty = Static(EMPTY_MESSAGE, id="empty_message")
        empty.display = not self._initial
        yield empty
        for item in self._initial:
            row = TodoRow(item)
            self._rows[item.id] = row
            yield row

    @property
    def row_ids(self) -> List[int]:
        return list(self._rows)

    def get_row(self, todo_id: int) -> TodoRow:
        return self._rows[todo_id]

    def sync(self, items: Iterable[TodoItem]) -> None:
        """Bring rows in line with ``items``.

        Items only ever get appended or removed, so existing rows keep their
        place, vanished ids are removed and new ids are mounted at the end.
        """
        items = list(items)
        wanted = {item.id for item in items}

        for todo_id in [i for i in self._rows if i not in wanted]:
            self._rows.pop(todo_id).remove()

        new_rows: List[TodoRow] = []
        for item in items:
            row = self._rows.get(item.id)
            if row is None:
                row = TodoRow(item)
                self._rows[item.id] = row
                new_rows.append(row)
            else:
                row.update_item(item)

        if new_rows:
            self.mount(*new_rows)
            self.scroll_end(animate=False)

        try:
            self.query_one("#empty_message", Static).display = not items
        except Exception as e:
            logger.error(f"Error updating empty message: {e}")
