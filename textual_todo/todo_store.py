from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import TodoNotFoundError, TodoValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodoItem:
    """A single todo entry. Replaced, never mutated in place."""

    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class TodoStats:
    """Counts derived from the current items."""

    total: int
    completed: int
    remaining: int

    def summary(self) -> str:
        return (
            f"Total: {self.total}  Completed: {self.completed}  "
            f"Remaining: {self.remaining}"
        )


DEFAULT_SEED: Tuple[TodoItem, ...] = (
    TodoItem(1, "Learn React Fundamentals", True),
    TodoItem(2, "Master Component Architecture", True),
    TodoItem(3, "Build a Todo App with Reusable Components", True),
    TodoItem(4, "Implement Props Passing", False),
    TodoItem(5, "Style Components with CSS", False),
    TodoItem(6, "Deploy Application", False),
)


class TodoStore:
    """Sole owner of the todo list and the pending input text.

    All mutations go through ``add``, ``toggle`` and ``delete`` so that ids stay
    unique and insertion order is kept. Reads hand out tuples of frozen items,
    so callers cannot change the list behind the store's back.
    """

    def __init__(self, seed: Optional[Iterable[TodoItem]] = None) -> None:
        items = list(DEFAULT_SEED if seed is None else seed)
        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"Duplicate todo id: {item.id}")
            if not item.text.strip():
                raise ValueError("Todo text cannot be empty")
            seen.add(item.id)

        self._items: List[TodoItem] = items
        self._pending_input = ""
        # ids are never reused, even after the highest one is deleted
        self._ids = itertools.count(max(seen, default=0) + 1)
        logger.debug(f"Todo store created with {len(items)} item(s)")

    @property
    def items(self) -> Tuple[TodoItem, ...]:
        return tuple(self._items)

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @pending_input.setter
    def pending_input(self, value: str) -> None:
        self._pending_input = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(self.items)

    def __contains__(self, todo_id: object) -> bool:
        return any(item.id == todo_id for item in self._items)

    def _index_of(self, todo_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.id == todo_id:
                return index
        raise TodoNotFoundError(todo_id)

    def get(self, todo_id: int) -> TodoItem:
        return self._items[self._index_of(todo_id)]

    def add(self, text: str) -> TodoItem:
        """Append a new pending item and clear the draft input."""
        cleaned = text.strip()
        if not cleaned:
            logger.info("Rejected empty todo")
            raise TodoValidationError(TodoValidationError.EMPTY)

        item = TodoItem(id=next(self._ids), text=cleaned)
        self._items.append(item)
        self._pending_input = ""
        logger.debug(f"Added todo {item.id}: {item.text!r}")
        return item

    def submit(self) -> TodoItem:
        """Add whatever is currently in the draft input."""
        return self.add(self._pending_input)

    def toggle(self, todo_id: int) -> TodoItem:
        index = self._index_of(todo_id)
        current = self._items[index]
        updated = replace(current, completed=not current.completed)
        self._items[index] = updated
        logger.debug(f"Toggled todo {todo_id} -> completed={updated.completed}")
        return updated

    def delete(self, todo_id: int) -> TodoItem:
        index = self._index_of(todo_id)
        removed = self._items.pop(index)
        logger.debug(f"Deleted todo {todo_id}")
        return removed

    def stats(self) -> TodoStats:
        total = len(self._items)
        completed = sum(1 for item in self._items if item.completed)
        return TodoStats(total=total, completed=completed, remaining=total - completed)
