"""
Configuration Management System

Handles loading, validation, and management of canvas and batch parameters.
"""

import logging
import yaml
from typing import Dict, Any, Optional
from pathlib import Path

from ..data_models import ProcessingConfig, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_BORDER


class ConfigManager:
    """Manages configuration parameters for the formula normalizer."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to configuration file. If None, uses default config.
        """
        self.config_path = config_path or self._get_default_config_path()
        self.config = self._load_config()
        self._validate_config()

    def _get_default_config_path(self) -> str:
        """Get path to the packaged default configuration file."""
        package_dir = Path(__file__).parent.parent
        return str(package_dir / "config" / "default_config.yaml")

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        try:
            with open(self.config_path, 'r') as file:
                config = yaml.safe_load(file)
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Error parsing configuration file: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration root must be a mapping: {self.config_path}")
        return config

    def _validate_config(self) -> None:
        """Validate configuration parameters for consistency and feasibility."""
        # Canvas geometry is validated by constructing the value object
        self.to_processing_config()

        batch = self.config.get('batch') or {}
        max_workers = batch.get('max_workers')
        if max_workers is not None:
            if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
                raise ValueError("batch.max_workers must be a positive integer or null")

        extensions = batch.get('extensions', ['png', 'jpg', 'jpeg'])
        if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
            raise ValueError("batch.extensions must be a list of extension strings")
        if not extensions:
            raise ValueError("batch.extensions must list at least one extension")

        self.get_log_level()

    def get_log_level(self) -> int:
        """
        Resolve logging.level to a numeric level; names are case-insensitive.

        Raises:
            ValueError: If the level is not a known logging level
        """
        level = self.get('logging.level', 'INFO')
        if isinstance(level, bool):
            raise ValueError(f"Unknown logging.level: {level!r}")
        if isinstance(level, int):
            return level
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if isinstance(resolved, int):
                return resolved
        raise ValueError(f"Unknown logging.level: {level!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'canvas.width')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set configuration value using dot notation.

        Args:
            key: Configuration key (e.g., 'canvas.border')
            value: Value to set
        """
        self._assign(key, value)
        self._validate_config()

    def update(self, values: Dict[str, Any]) -> None:
        """
        Set several dotted keys at once and validate only the final result.

        Args:
            values: Mapping of dotted keys to values; None values are skipped
        """
        for key, value in values.items():
            if value is not None:
                self._assign(key, value)
        self._validate_config()

    def _assign(self, key: str, value: Any) -> None:
        keys = key.split('.')
        config_ref = self.config

        for k in keys[:-1]:
            if not isinstance(config_ref.get(k), dict):
                config_ref[k] = {}
            config_ref = config_ref[k]

        config_ref[keys[-1]] = value

    def save(self, output_path: Optional[str] = None) -> None:
        """
        Save current configuration to file.

        Args:
            output_path: Path to save configuration. If None, overwrites current file.
        """
        save_path = output_path or self.config_path

        with open(save_path, 'w') as file:
            yaml.dump(self.config, file, default_flow_style=False, indent=2)

    def get_canvas_params(self) -> Dict[str, Any]:
        """Get canvas geometry parameters as a dictionary."""
        return self.config.get('canvas') or {}

    def get_batch_params(self) -> Dict[str, Any]:
        """Get batch processing parameters as a dictionary."""
        return self.config.get('batch') or {}

    def to_processing_config(self) -> ProcessingConfig:
        """
        Build the immutable processing configuration from the canvas section.

        Raises:
            InvalidDimensionsError: If the canvas geometry leaves no interior region
        """
        canvas = self.get_canvas_params()
        return ProcessingConfig(
            width=canvas.get('width', DEFAULT_WIDTH),
            height=canvas.get('height', DEFAULT_HEIGHT),
            border=canvas.get('border', DEFAULT_BORDER),
        )
