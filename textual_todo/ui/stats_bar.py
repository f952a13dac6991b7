from __future__ import annotations

from textual.widgets import Static

from ..todo_store import TodoStats


class StatsBar(Static):
    """One-line Total / Completed / Remaining summary."""

    def __init__(self, stats: TodoStats, **kwargs) -> None:
        super().__init__(stats.summary(), markup=False, **kwargs)
        self.stats = stats

    def update_stats(self, stats: TodoStats) -> None:
        self.stats = stats
        self.update(stats.summary())
