from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

APP_NAME = "textual-todo"

DEFAULTS: Dict[str, Any] = {
    "theme": "textual-dark",
}


class ConfigManager:
    """UI preferences stored as JSON in the XDG config directory.

    Todo items are never written here; only presentation settings such as
    the theme survive a restart.
    """

    def __init__(self, app_name: str = APP_NAME):
        self.app_name = app_name
        self._config_dir = self._get_config_dir()
        self._config_file = self._config_dir / "config.json"
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _get_config_dir(self) -> Path:
        if os.name == "nt":
            base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        else:
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            base = Path(xdg_config) if xdg_config else Path.home() / ".config"

        config_dir = base / self.app_name
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def _load_config(self) -> None:
        try:
            if not self._config_file.exists():
                logger.debug("No config file found, using defaults")
                return
            with open(self._config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                logger.warning(
                    f"Ignoring config in {self._config_file}: expected a JSON object"
                )
                return
            self._config = data
            logger.debug(f"Loaded config from {self._config_file}")
        except Exception as e:
            logger.warning(f"Failed to load config from {self._config_file}: {e}")
            self._config = {}

    def _save_config(self) -> None:
        try:
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
            logger.debug(f"Saved config to {self._config_file}")
        except Exception as e:
            logger.error(f"Failed to save config to {self._config_file}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """Return the saved value, then the built-in default, then ``default``."""
        if key in self._config:
            return self._config[key]
        return DEFAULTS.get(key, default)

    def set(self, key: str, value: Any) -> None:
        if key in self._config and self._config[key] == value:
            return
        self._config[key] = value
        self._save_config()

    def update(self, updates: Dict[str, Any]) -> None:
        self._config.update(updates)
        self._save_config()

    def get_all(self) -> Dict[str, Any]:
        """Saved values layered over the defaults."""
        merged = dict(DEFAULTS)
        merged.update(self._config)
        return merged

    @property
    def config_file_path(self) -> Path:
        return self._config_file
