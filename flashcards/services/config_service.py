"""
Configuration Service - Loads and saves card rendering options.

Options are only read from a file the user names explicitly; nothing is
picked up from the working directory or the environment.
"""

import json
from pathlib import Path
from typing import Optional

from ..models import CardOptions


class ConfigService:
    """
    Manages an optional JSON options file.

    Handles loading CardOptions from the file, writing a starter file,
    and providing defaults when no file is given or it cannot be used.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config service.

        Args:
            config_path: Optional options file path. If None, load()
                        always returns defaults.
        """
        self.config_path = Path(config_path) if config_path is not None else None

    def load(self) -> CardOptions:
        """
        Load options from file.

        Returns:
            CardOptions with loaded settings, or defaults if there is no file

        Note:
            A missing, corrupted or out-of-range file prints a warning and
            falls back to defaults rather than aborting the run.
        """
        if self.config_path is None:
            return CardOptions()

        if not self.config_path.exists():
            print(f"Warning: Config file not found: {self.config_path}")
            print("Using default configuration")
            return CardOptions()

        try:
            with open(self.config_path, encoding='utf-8') as f:
                data = json.load(f)

            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")

            return CardOptions.from_dict(data)

        except (json.JSONDecodeError, OSError, ValueError, TypeError) as e:
            print(f"Warning: Failed to load config from {self.config_path}: {e}")
            print("Using default configuration")
            return CardOptions()

    def save(self, options: CardOptions):
        """
        Save options to file.

        Raises:
            OSError: If the file cannot be written
            ValueError: If no config path was given
        """
        if self.config_path is None:
            raise ValueError("No config path set")

        # Ensure parent directory exists
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(options.to_dict(), f, indent=2)

