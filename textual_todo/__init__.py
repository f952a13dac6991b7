from __future__ import annotations

from .errors import TodoError, TodoNotFoundError, TodoValidationError
from .todo_store import DEFAULT_SEED, TodoItem, TodoStats, TodoStore

__all__ = [
    "DEFAULT_SEED",
    "TodoError",
    "TodoItem",
    "TodoNotFoundError",
    "TodoStats",
    "TodoStore",
    "TodoValidationError",
]
