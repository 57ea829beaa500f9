"""Configuration management for orphan-jpeg-cleaner."""

import copy
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from orphan_jpeg_cleaner.utils.logger import setup_logger

logger = setup_logger(__name__)


class Config:
    """Manages user configuration and settings."""

    DEFAULT_CONFIG_DIR = Path.home() / ".orphan-jpeg-cleaner"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"

    BACKENDS = ("finder", "trash")

    DEFAULT_SETTINGS = {
        "jpg_folder": "JPG",
        "raw_extensions": ["arw"],
        "jpg_extensions": ["jpg", "jpeg"],
        # Finder automation only exists on macOS
        "backend": "finder" if sys.platform == "darwin" else "trash",
        "finder": {
            "osascript": "osascript",
            "not_found_signature": "29:106",
        },
    }

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to config file (default: ~/.orphan-jpeg-cleaner/config.json)
        """
        self.config_file = config_file or self.DEFAULT_CONFIG_FILE
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file or create with defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    self.settings = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file}")
            except json.JSONDecodeError as e:
                logger.warning(f"Invalid config file: {e}. Using defaults.")
                self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        else:
            logger.debug("No config file found. Creating with defaults.")
            self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
            self.save()

    def save(self) -> None:
        """Save configuration to file."""
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(self.settings, f, indent=2)
        logger.debug(f"Saved configuration to {self.config_file}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (supports dot notation, e.g., 'finder.osascript')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.settings
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (supports dot notation)
            value: Value to set
        """
        keys = key.split(".")
        target = self.settings
        for k in keys[:-1]:
            if k not in target or not isinstance(target[k], dict):
                target[k] = {}
            target = target[k]
        target[keys[-1]] = value
        self.save()

    def get_jpg_folder_name(self) -> str:
        """Get the name of the JPEG subfolder inside the RAW folder."""
        return self.get("jpg_folder", self.DEFAULT_SETTINGS["jpg_folder"])

    def get_raw_extensions(self) -> List[str]:
        """Get the extensions treated as RAW files."""
        return self.get("raw_extensions", self.DEFAULT_SETTINGS["raw_extensions"])

    def get_jpg_extensions(self) -> List[str]:
        """Get the extensions treated as JPEG files."""
        return self.get("jpg_extensions", self.DEFAULT_SETTINGS["jpg_extensions"])

    def get_backend(self) -> str:
        """Get the deletion backend name ('finder' or 'trash')."""
        backend = self.get("backend", self.DEFAULT_SETTINGS["backend"])
        if backend not in self.BACKENDS:
            logger.warning(
                f"Unknown backend '{backend}', using {self.DEFAULT_SETTINGS['backend']}"
            )
            return self.DEFAULT_SETTINGS["backend"]
        return backend
