import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "resolver": "auto",
    "undname_tool": "llvm-undname",
    "undname_timeout": 5.0,
    "keep_original": False,
    "log_file": None,
    "log_level": "WARNING",
}

# Relocates ~/.msvcfilt, mostly useful for tests and CI
CONFIG_DIR_ENV = "MSVCFILT_CONFIG_DIR"


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".msvcfilt"


class ConfigManager:
    """
    Loads ~/.msvcfilt/config.json on top of DEFAULT_CONFIG.
    Values passed to override() live in memory only and are never saved.
    """
    def __init__(self):
        self.config_dir = default_config_dir()
        self.config_file = self.config_dir / "config.json"
        self.config = self.load_config()

    def load_config(self) -> Dict[str, Any]:
        config = DEFAULT_CONFIG.copy()
        if not self.config_file.exists():
            return config

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return config

        if not isinstance(user_config, dict):
            logger.warning("Ignoring config %s: top level is not an object", self.config_file)
            return config

        config.update(user_config)
        return config

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def override(self, **values: Any):
        """Apply command-line values; None means 'not given'."""
        for key, value in values.items():
            if value is not None:
                self.config[key] = value
