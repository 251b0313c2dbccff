# aurora_camera/core/config.py

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional
from aurora_camera.core.logging import get_logger

logger = get_logger()

DEFAULTS: Dict[str, Any] = {
    'engine': {
        'log_level': 'INFO',
    },
    'rendering': {
        'width': 800,
        'height': 600,
        'title': 'Aurora Camera',
    },
    'camera': {
        'eye': [0.0, 1.0, 2.0],
        'target': [0.0, 0.0, 0.0],
        'up': [0.0, 1.0, 0.0],
        'fovy': 45.0,
        'znear': 0.1,
        'zfar': 100.0,
    },
    'controller': {
        'speed': 0.2,
    },
    'input': {
        # Key name -> action name, merged over the default bindings
        'bindings': {},
    },
}


class Config:
    """
    Configuration management.
    Handles loading/saving settings from a JSON file.
    Pass config_path=None for in-memory defaults only.
    """

    def __init__(self, config_path: Optional[str] = "config.json"):
        self.config_path = Path(config_path) if config_path else None
        self.data: Dict[str, Any] = {}
        self.defaults = copy.deepcopy(DEFAULTS)

        self.load()

    def load(self):
        """Load configuration from file."""
        if self.config_path is None:
            self.data = copy.deepcopy(self.defaults)
            return

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    loaded_data = json.load(f)

                # Loaded values override defaults
                self.data = self._deep_merge(self.defaults, loaded_data)
                logger.info(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load configuration from {self.config_path}: {e}")
                self.data = copy.deepcopy(self.defaults)
        else:
            self.data = copy.deepcopy(self.defaults)
            logger.info(f"Configuration file not found, using defaults and creating {self.config_path}")
            self.save()

    def save(self):
        """Save configuration to file."""
        if self.config_path is None:
            return

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
            logger.info(f"Saved configuration to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}")

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value by path.
        Example: config.get('camera.fovy')
        """
        keys = path.split('.')
        value = self.data

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value by path.
        Example: config.set('controller.speed', 0.5)
        """
        keys = path.split('.')
        data = self.data

        for key in keys[:-1]:
            if key not in data:
                data[key] = {}
            data = data[key]

        data[keys[-1]] = value

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Recursively merge override dict into base dict."""
        result = copy.deepcopy(base)

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
