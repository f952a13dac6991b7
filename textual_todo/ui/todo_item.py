from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Checkbox, Static

from ..todo_store import TodoItem

logger = logging.getLogger(__name__)

ANIMATION_SECONDS = 0.3


class TodoRow(Horizontal):
    """One todo: checkbox, text, completion badge and delete button.

    The row never touches the store. It posts ``Toggled`` / ``DeleteRequested``
    and the app decides what happens; the ``animating`` class is purely local.
    """

    class Toggled(Message):
        def __init__(self, todo_id: int) -> None:
            super().__init__()
            self.todo_id = todo_id

    class DeleteRequested(Message):
        def __init__(self, todo_id: int) -> None:
            super().__init__()
            self.todo_id = todo_id

    def __init__(self, item: TodoItem) -> None:
        super().__init__(id=f"todo-{item.id}", classes="todo-item")
        self.item = item
        self.is_animating = False
        self.set_class(item.completed, "completed")

    def compose(self) -> ComposeResult:
        yield Checkbox("", value=self.item.completed, classes="todo-checkbox")
        yield Static(self.item.text, classes="todo-text", markup=False)
        yield Static("✓", classes="completion-badge")
        yield Button(
            "×",
            classes="delete-btn",
            tooltip=f'Delete "{self.item.text}"',
        )

    def update_item(self, item: TodoItem) -> None:
        """Reflect a new version of the same item without remounting."""
        self.item = item
        self.set_class(item.completed, "completed")
        try:
            checkbox = self.query_one(".todo-checkbox", Checkbox)
        except Exception:
            return
        if checkbox.value != item.completed:
            with checkbox.prevent(Checkbox.Changed):
                checkbox.value = item.completed

    def _start_animation(self) -> None:
        self.is_animating = True
        self.add_class("animating")
        self.set_timer(ANIMATION_SECONDS, self._stop_animation)

    def _stop_animation(self) -> None:
        self.is_animating = False
        self.remove_class("animating")

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        event.stop()
        self._start_animation()
        self.post_message(self.Toggled(self.item.id))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self.item.id))
