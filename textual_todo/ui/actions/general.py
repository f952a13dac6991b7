from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from textual.widgets import Input

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..app import TodoApp

HELP_TEXT = (
    "Enter     Add the typed todo\n"
    "Space     Toggle the focused checkbox\n"
    "Ctrl+N    Focus the new todo input\n"
    "Ctrl+P    Command palette\n"
    "Ctrl+Q    Quit"
)


class GeneralActionsMixin:
    """Window-level actions that do not touch the todo list."""

    def action_focus_input(self) -> None:
        app = cast("TodoApp", self)
        try:
            app.query_one("#todo_input", Input).focus()
        except Exception as e:
            logger.error(f"Error focusing todo input: {e}")

    def action_help_panel(self) -> None:
        cast("TodoApp", self).notify(HELP_TEXT, title="Shortcuts", timeout=8)
