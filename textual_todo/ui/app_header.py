from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Static


class AppHeader(Horizontal):
    """Title and subtitle block with a quit button on the right."""

    def __init__(self, title: str, subtitle: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._subtitle = subtitle

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static(self._title, id="app_title", markup=False),
            Static(self._subtitle, id="app_subtitle", markup=False),
            id="title_block",
        )
        yield Button(
            "✕",
            id="header_quit_button",
            tooltip="Quit (Ctrl+Q)",
            classes="quit-button header-button",
        )
