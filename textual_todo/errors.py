from __future__ import annotations

from typing import Hashable


class TodoError(Exception):
    """Base class for errors reported by the todo store."""


class TodoValidationError(TodoError, ValueError):
    """Raised when an item cannot be created from the given input."""

    EMPTY = "empty"

    def __init__(self, reason: str = EMPTY, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or "Please enter a todo item")


class TodoNotFoundError(TodoError, LookupError):
    """Raised when an id does not match any item in the store."""

    def __init__(self, todo_id: Hashable) -> None:
        self.todo_id = todo_id
        super().__init__(f"No todo with id {todo_id!r}")
