from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, cast

if TYPE_CHECKING:
    from ..app import TodoApp

logger = logging.getLogger(__name__)


class ThemeActionsMixin:
    """Persist theme changes made through Textual actions or the palette."""

    def _apply_saved_theme(self, override: Optional[str] = None) -> None:
        app = cast("TodoApp", self)
        theme = override or app.config.get("theme")
        if not theme:
            return
        try:
            app.theme = theme
        except Exception as e:
            logger.warning(f"Failed to apply theme '{theme}': {e}")

    def action_toggle_dark(self) -> None:
        app = cast("TodoApp", self)
        super().action_toggle_dark()  # type: ignore[misc]
        try:
            app.config.set("theme", app.theme)
        except Exception as e:
            logger.error(f"Failed to save theme preference: {e}")

    def watch_theme(self, theme: str) -> None:  # type: ignore[override]
        config = getattr(self, "config", None)
        if config is None:
            return
        try:
            config.set("theme", theme)
        except Exception as e:
            logger.error(f"Failed to persist theme in watch_theme: {e}")
